"""Conversion between braille cell codes and Unicode braille patterns."""

BRAILLE_BASE = 0x2800
"""Code point of the blank braille pattern (U+2800)."""


def encode_unicode(code: int) -> str:
    """Return the Unicode braille pattern for a cell code in the range 0-255."""
    if not 0 <= code <= 0xFF:
        raise ValueError(f"Invalid braille cell code: {code}")
    return chr(BRAILLE_BASE + code)


def decode_unicode(text: str) -> int:
    """Return the cell code of a Unicode braille pattern character."""
    point = ord(text)
    if point < BRAILLE_BASE:
        raise ValueError("Invalid unicode character")
    return (point - BRAILLE_BASE) & 0xFF


def cells(patterns: str) -> bytes:
    """Turn a string of braille pattern characters into cell codes."""
    return bytes(decode_unicode(c) for c in patterns)