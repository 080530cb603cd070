"""Helpers for composing and inspecting Hangul syllables."""

from hanbraille.split import (
    CHOSEONG,
    JONGSEONG,
    JUNGSEONG,
    SYLLABLE_FIRST,
    split_korean_char,
)


def build_char(choseong: str, jungseong: str, jongseong: str | None = None) -> str:
    """Compose a Hangul syllable from an initial, a vowel and an optional final."""
    cho = CHOSEONG.find(choseong) if len(choseong) == 1 else -1
    if cho < 0:
        raise ValueError(f"Invalid Korean choseong character: {choseong!r}")
    jung = JUNGSEONG.find(jungseong) if len(jungseong) == 1 else -1
    if jung < 0:
        raise ValueError(f"Invalid Korean jungseong character: {jungseong!r}")
    if jongseong is None:
        jong = 0
    else:
        found = JONGSEONG.find(jongseong) if len(jongseong) == 1 else -1
        if found < 0:
            raise ValueError(f"Invalid Korean jongseong character: {jongseong!r}")
        jong = found + 1
    return chr(SYLLABLE_FIRST + cho * 21 * 28 + jung * 28 + jong)


def has_choseong_o(ch: str) -> bool:
    """Tell whether a character starts with the silent initial 'ㅇ'."""
    try:
        parts = split_korean_char(ch)
    except ValueError:
        return False
    return parts[0].char == "ㅇ"