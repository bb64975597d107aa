import pytest
from wordsieve.engine import parse_feedback, is_solved, render_glyphs, InvalidSymbol


@pytest.mark.parametrize("raw,expected", [
    ("gxyxx", ("g", "x", "y", "x", "x")),
    ("GXYXX", ("g", "x", "y", "x", "x")),
    ("g-y--", ("g", "x", "y", "x", "x")),
    (["correct", "absent", "present"], ("g", "x", "y")),
])
def test_parse_feedback_aliases(raw, expected):
    assert parse_feedback(raw) == expected


def test_parse_feedback_reports_position():
    with pytest.raises(InvalidSymbol) as ei:
        parse_feedback("ggqgg")
    assert ei.value.symbol == "q" and ei.value.position == 2


def test_is_solved():
    assert is_solved("ggggg")
    assert is_solved(["correct"] * 3)
    assert not is_solved("ggggy")
    assert not is_solved("")


def test_render_glyphs():
    assert render_glyphs("xyg") == "⬜\U0001f7e8\U0001f7e9"
    # garbage is echoed, not rejected
    assert render_glyphs("g?") == "\U0001f7e9❌"
