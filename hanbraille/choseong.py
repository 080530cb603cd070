"""Braille for initial consonants (choseong)."""

from hanbraille.unicode import decode_unicode

# The silent initial 'ㅇ' has no braille of its own and is left out.
CHOSEONG_MAP: dict[str, int] = {
    jamo: decode_unicode(pattern)
    for jamo, pattern in {
        "ㄱ": "⠈",
        "ㄴ": "⠉",
        "ㄷ": "⠊",
        "ㄹ": "⠐",
        "ㅁ": "⠑",
        "ㅂ": "⠘",
        "ㅅ": "⠠",
        "ㅈ": "⠨",
        "ㅊ": "⠰",
        "ㅋ": "⠋",
        "ㅌ": "⠓",
        "ㅍ": "⠙",
        "ㅎ": "⠚",
    }.items()
}


def encode_choseong(text: str) -> int:
    """Return the braille cell for an initial consonant."""
    try:
        return CHOSEONG_MAP[text]
    except KeyError:
        raise ValueError("Invalid Korean choseong character") from None