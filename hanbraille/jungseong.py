"""Braille for vowels (jungseong)."""

from hanbraille.unicode import cells

JUNGSEONG_MAP: dict[str, bytes] = {
    jamo: cells(patterns)
    for jamo, patterns in {
        "ㅏ": "⠣",
        "ㅑ": "⠜",
        "ㅓ": "⠎",
        "ㅕ": "⠱",
        "ㅗ": "⠥",
        "ㅛ": "⠬",
        "ㅜ": "⠍",
        "ㅠ": "⠩",
        "ㅡ": "⠪",
        "ㅣ": "⠕",
        "ㅐ": "⠗",
        "ㅔ": "⠝",
        "ㅚ": "⠽",
        "ㅘ": "⠧",
        "ㅝ": "⠏",
        "ㅢ": "⠺",
        "ㅖ": "⠌",
        "ㅟ": "⠍⠗",
        "ㅒ": "⠜⠗",
        "ㅙ": "⠧⠗",
        "ㅞ": "⠏⠗",
    }.items()
}


def encode_jungseong(text: str) -> bytes:
    """Return the braille cells for a vowel."""
    try:
        return JUNGSEONG_MAP[text]
    except KeyError:
        raise ValueError("Invalid Korean jungseong character") from None