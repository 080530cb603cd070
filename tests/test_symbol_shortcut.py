import pytest

from hanbraille.math_symbol_shortcut import is_math_symbol_char
from hanbraille.symbol_shortcut import (
    SHORTCUT_MAP,
    encode_char_symbol_shortcut,
    is_symbol_char,
)
from hanbraille.unicode import cells


def test_period():
    assert encode_char_symbol_shortcut(".") == cells("⠲")


def test_parentheses():
    assert encode_char_symbol_shortcut("(") == cells("⠦⠄")
    assert encode_char_symbol_shortcut(")") == cells("⠠⠴")


def test_hyphen_and_underscore_share_a_cell():
    assert encode_char_symbol_shortcut("-") == encode_char_symbol_shortcut("_")


@pytest.mark.parametrize("symbol", list(SHORTCUT_MAP))
def test_known_symbols_are_recognised(symbol):
    assert is_symbol_char(symbol) is True
    assert len(encode_char_symbol_shortcut(symbol)) >= 1


@pytest.mark.parametrize("text", ["a", "1", "가", "+", "=", "@", " "])
def test_unknown_symbols(text):
    assert is_symbol_char(text) is False
    with pytest.raises(ValueError, match="Invalid symbol character"):
        encode_char_symbol_shortcut(text)


def test_no_symbol_is_also_a_math_symbol():
    assert not any(is_math_symbol_char(s) for s in SHORTCUT_MAP)