from pathlib import Path
from wordsieve.datasets import validate_wordlist, pretty_summary, load_words, DEFAULT_WORDS_PATH


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words_5.txt"
    _write(words, ["crane", "raise", "stare"])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["words"]["count"] == 3
    s = pretty_summary(rep)
    assert "N=5" in s and s.endswith("OK")


def test_validate_wordlist_flags_errors(tmp_path: Path):
    # 'crane' (len 5) invalid for N=6, '???' invalid chars, 'raiser' twice
    words = tmp_path / "words_6.txt"
    words.write_text("raiser\ncrane\n???\nraiser\n", encoding="utf-8")

    rep = validate_wordlist(6, str(words))
    assert rep["passed"] is False
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["words"]["exists"] is False


def test_bundled_dictionary_is_clean():
    assert validate_wordlist(5, str(DEFAULT_WORDS_PATH))["passed"] is True


def test_load_words_normalizes_and_filters(tmp_path: Path):
    words = tmp_path / "mixed.txt"
    _write(words, ["Crane", "", "  slate ", "crane", "cranes"])
    assert load_words(words) == ["crane", "slate", "cranes"]
    assert load_words(words, N=5) == ["crane", "slate"]
