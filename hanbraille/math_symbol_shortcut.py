"""Braille for arithmetic and comparison signs."""

from hanbraille.unicode import cells

SHORTCUT_MAP: dict[str, bytes] = {
    symbol: cells(patterns)
    for symbol, patterns in {
        "+": "⠢",
        "−": "⠔",
        "×": "⠡",
        "÷": "⠌⠌",
        "=": "⠒⠒",
        ">": "⠢⠢",
        "<": "⠔⠔",
    }.items()
}


def encode_char_math_symbol_shortcut(text: str) -> bytes:
    """Return the braille cells for a math sign."""
    try:
        return SHORTCUT_MAP[text]
    except KeyError:
        raise ValueError("Invalid math symbol character") from None


def is_math_symbol_char(text: str) -> bool:
    """Tell whether a character is a known math sign."""
    return text in SHORTCUT_MAP