"""Braille for Latin letters."""

from hanbraille.unicode import decode_unicode

ENGLISH_MAP: dict[str, int] = {
    letter: decode_unicode(pattern)
    for letter, pattern in {
        "a": "⠁",
        "b": "⠃",
        "c": "⠉",
        "d": "⠙",
        "e": "⠑",
        "f": "⠋",
        "g": "⠛",
        "h": "⠓",
        "i": "⠊",
        "j": "⠚",
        "k": "⠅",
        "l": "⠇",
        "m": "⠍",
        "n": "⠝",
        "o": "⠕",
        "p": "⠏",
        "q": "⠟",
        "r": "⠗",
        "s": "⠎",
        "t": "⠞",
        "u": "⠥",
        "v": "⠧",
        "w": "⠺",
        "x": "⠭",
        "y": "⠽",
        "z": "⠵",
    }.items()
}


def encode_english(text: str) -> int:
    """Return the braille cell for a Latin letter, ignoring its case."""
    key = text.lower() if text.isascii() else text
    try:
        return ENGLISH_MAP[key]
    except KeyError:
        raise ValueError("Invalid English character") from None