"""Braille for final consonants (jongseong)."""

from hanbraille.unicode import cells

JONGSEONG_MAP: dict[str, bytes] = {
    jamo: cells(patterns)
    for jamo, patterns in {
        "ㄱ": "⠁",
        "ㄲ": "⠁⠁",
        "ㄳ": "⠁⠄",
        "ㄴ": "⠒",
        "ㄵ": "⠒⠅",
        "ㄶ": "⠒⠴",
        "ㄷ": "⠔",
        "ㄸ": "⠔⠔",
        "ㄹ": "⠂",
        "ㄺ": "⠂⠁",
        "ㄻ": "⠂⠢",
        "ㄼ": "⠂⠃",
        "ㄽ": "⠂⠄",
        "ㄾ": "⠂⠦",
        "ㄿ": "⠂⠲",
        "ㅀ": "⠂⠴",
        "ㅁ": "⠢",
        "ㅂ": "⠃",
        "ㅃ": "⠃⠃",
        "ㅄ": "⠃⠄",
        "ㅅ": "⠄",
        "ㅆ": "⠌",
        "ㅇ": "⠶",
        "ㅈ": "⠅",
        "ㅉ": "⠠⠅",
        "ㅊ": "⠆",
        "ㅋ": "⠖",
        "ㅌ": "⠦",
        "ㅍ": "⠲",
        "ㅎ": "⠴",
    }.items()
}


def encode_jongseong(text: str) -> bytes:
    """Return the braille cells for a final consonant."""
    try:
        return JONGSEONG_MAP[text]
    except KeyError:
        raise ValueError("Invalid Korean jongseong character") from None