import pytest

from hanbraille.jongseong import encode_jongseong
from hanbraille.unicode import decode_unicode


@pytest.mark.parametrize(
    ("jamo", "pattern"),
    [
        ("ㄱ", "⠁"),
        ("ㄴ", "⠒"),
        ("ㄷ", "⠔"),
        ("ㄹ", "⠂"),
        ("ㅁ", "⠢"),
        ("ㅂ", "⠃"),
        ("ㅅ", "⠄"),
        ("ㅇ", "⠶"),
        ("ㅈ", "⠅"),
        ("ㅊ", "⠆"),
        ("ㅋ", "⠖"),
        ("ㅌ", "⠦"),
        ("ㅍ", "⠲"),
        ("ㅎ", "⠴"),
    ],
)
def test_encode_jongseong(jamo, pattern):
    assert encode_jongseong(jamo) == bytes([decode_unicode(pattern)])


def test_compound_final_is_two_cells():
    assert encode_jongseong("ㄺ") == encode_jongseong("ㄹ") + encode_jongseong("ㄱ")


def test_double_s_has_own_cell():
    assert encode_jongseong("ㅆ") == bytes([decode_unicode("⠌")])


@pytest.mark.parametrize("jamo", ["ㅏ", "a", " "])
def test_encode_jongseong_invalid(jamo):
    with pytest.raises(ValueError, match="Invalid Korean jongseong character"):
        encode_jongseong(jamo)