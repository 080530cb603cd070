"""Braille for decimal digits."""

from hanbraille.unicode import decode_unicode

NUMBER_MAP: dict[str, int] = {
    digit: decode_unicode(pattern)
    for digit, pattern in {
        "1": "⠁",
        "2": "⠃",
        "3": "⠉",
        "4": "⠙",
        "5": "⠑",
        "6": "⠋",
        "7": "⠛",
        "8": "⠓",
        "9": "⠊",
        "0": "⠚",
    }.items()
}


def encode_number(text: str) -> int:
    """Return the braille cell for a digit (without the number sign)."""
    try:
        return NUMBER_MAP[text]
    except KeyError:
        raise ValueError("Invalid number character") from None