"""Braille for punctuation marks."""

from hanbraille.unicode import cells

SHORTCUT_MAP: dict[str, bytes] = {
    symbol: cells(patterns)
    for symbol, patterns in {
        '"': "⠦",
        "'": "⠠⠦",
        "~": "⠈⠔",
        "…": "⠲⠲⠲",
        "⋯": "⠠⠠⠠",
        "!": "⠖",
        ".": "⠲",
        ",": "⠐",
        "?": "⠦",
        ":": "⠐⠂",
        ";": "⠰⠆",
        "_": "⠤",
        "*": "⠐⠔",
        "(": "⠦⠄",
        ")": "⠠⠴",
        "{": "⠦⠂",
        "}": "⠐⠴",
        "[": "⠦⠆",
        "]": "⠰⠴",
        "·": "⠐⠆",
        "「": "⠐⠦",
        "」": "⠴⠂",
        "『": "⠰⠦",
        "』": "⠴⠆",
        "/": "⠸⠌",
        "〈": "⠐⠶",
        "〉": "⠶⠂",
        "《": "⠰⠶",
        "》": "⠶⠆",
        "-": "⠤",
    }.items()
}


def encode_char_symbol_shortcut(text: str) -> bytes:
    """Return the braille cells for a punctuation mark."""
    try:
        return SHORTCUT_MAP[text]
    except KeyError:
        raise ValueError("Invalid symbol character") from None


def is_symbol_char(text: str) -> bool:
    """Tell whether a character is a known punctuation mark."""
    return text in SHORTCUT_MAP