import sys

import pytest
from apps.cli import assist


def test_assist_exits_cleanly_without_words_of_length_n(tmp_path, monkeypatch, capsys):
    words = tmp_path / "words_5.txt"
    words.write_text("crane\nslate\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["assist", "--words", str(words), "--N", "6"])

    with pytest.raises(SystemExit) as ei:
        assist.main()
    assert "No usable 6-letter words" in str(ei.value.code)


def test_assist_quits_on_quit_code(tmp_path, monkeypatch, capsys):
    words = tmp_path / "words_5.txt"
    words.write_text("crane\nslate\n", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["assist", "--words", str(words)])
    monkeypatch.setattr("builtins.input", lambda prompt: "q")

    assist.main()
    out = capsys.readouterr().out
    assert "Loaded 2 words of length 5." in out and "App finished." in out
