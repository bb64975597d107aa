import pytest
from wordsieve.engine import score, validate_guess, validate_feedback_text, LengthMismatch

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "xgyyy"),
    ("level", "level", "ggggg"),
    ("lemon", "level", "ggxxx"),
    ("cools", "scoop", "yygxy"),
    ("crane", "crane", "ggggg"),
    ("raise", "crane", "yyxxg"),
    ("stare", "crane", "xxgyg"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected


# --- N=6 samples ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle", "letter", "xgggyy"),
    ("little", "letter", "gxggxy"),
    ("planet", "palate", "gyyxyy"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected


def test_score_length_mismatch():
    with pytest.raises(LengthMismatch):
        score("crane", "cranes")


def test_validate_guess_n5():
    assert validate_guess("CRANE", 5) is None
    assert validate_guess("q", 5) is None
    assert "5 characters" in validate_guess("cranes", 5)
    assert "A-Z" in validate_guess("cr4ne", 5)


def test_validate_feedback_text():
    assert validate_feedback_text("GxYxx", 5) is None
    assert validate_feedback_text("gxy", 5) is not None
    assert validate_feedback_text("gxyzz", 5) is not None
