"""Braille for isolated Hangul jamo."""

from hanbraille.jungseong import JUNGSEONG_MAP
from hanbraille.unicode import cells

KOREAN_PART_MAP: dict[str, bytes] = {
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
        "ㅆ": "⠄⠄",
        "ㅇ": "⠶",
        "ㅈ": "⠅",
        "ㅉ": "⠅⠅",
        "ㅊ": "⠆",
        "ㅋ": "⠖",
        "ㅌ": "⠦",
        "ㅍ": "⠲",
        "ㅎ": "⠴",
    }.items()
}


def encode_korean_part(text: str) -> bytes:
    """Return the braille for a standalone jamo.

    Consonants are written in their final-consonant form; vowels as usual.
    """
    code = KOREAN_PART_MAP.get(text)
    if code is None:
        code = JUNGSEONG_MAP.get(text)
    if code is None:
        raise ValueError("Invalid Korean part character")
    return code