"""Braille abbreviations for common conjunctive words."""

from hanbraille.unicode import cells

SHORTCUT_MAP: dict[str, bytes] = {
    word: cells(patterns)
    for word, patterns in {
        "그래서": "⠁⠎",
        "그러나": "⠁⠉",
        "그러면": "⠁⠒",
        "그러므로": "⠁⠢",
        "그런데": "⠁⠝",
        "그리고": "⠁⠥",
        "그리하여": "⠁⠱",
    }.items()
}


def encode_word_shortcut(text: str) -> bytes | None:
    """Return the abbreviation for a whole word, or None if it has none."""
    return SHORTCUT_MAP.get(text)


def split_word_shortcut(text: str) -> tuple[str, bytes, str] | None:
    """Find an abbreviated word at the start of text.

    Returns the matched word, its braille and the remaining text, or None.
    """
    for word, code in SHORTCUT_MAP.items():
        if text.startswith(word):
            return word, code, text[len(word):]
    return None