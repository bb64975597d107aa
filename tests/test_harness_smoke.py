import pytest
from wordsieve.harness import run_case, run_batch, summarize, write_csv


WORDS = ["crane", "raise", "stare", "trace", "cared"]


def test_run_case_smoke():
    r = run_case("crane", words=WORDS, N=5, seed=42)
    assert r["success"] is True
    assert r["history"][-1] == ("crane", "ggggg")
    assert 1 <= r["guesses"] <= 5


def test_run_case_is_reproducible():
    a = run_case("stare", words=WORDS, N=5, seed=9)
    b = run_case("stare", words=WORDS, N=5, seed=9)
    assert a["history"] == b["history"]


def test_run_case_answer_outside_dictionary_exhausts_pool():
    r = run_case("zzzzz", words=WORDS, N=5, seed=1)
    assert r["success"] is False
    assert r["guesses"] == 1 and r["remaining"] == 0


def test_run_case_enforces_turn_budget():
    with pytest.raises(ValueError):
        run_case("crane", words=WORDS, N=5, max_turns=7)


def test_run_batch_and_summary(tmp_path):
    results = run_batch(WORDS, words=WORDS, N=5, seed=3, sample=3)
    assert [r["answer"] for r in results] == WORDS[:3]
    assert all(r["success"] for r in results)

    s = summarize(results)
    assert s["games"] == 3 and s["wins"] == 3 and s["win_rate"] == 1.0
    assert sum(s["histogram"].values()) == 3
    assert 1.0 <= s["mean_guesses"] <= 5.0

    out = write_csv(results, str(tmp_path / "run.csv"), max_turns=6, N=5)
    lines = (tmp_path / "run.csv").read_text(encoding="utf-8").splitlines()
    assert out.endswith("run.csv") and len(lines) == 4
    assert lines[0].startswith("N,answer,success,guesses,remaining")


def test_summarize_no_wins():
    s = summarize([{"success": False, "guesses": 6}])
    assert s["wins"] == 0 and s["mean_guesses"] is None
    assert s["histogram"][6] == 0


def test_write_csv_pads_unplayed_turns_and_manifest(tmp_path):
    import csv
    import json
    from wordsieve.harness import write_manifest

    games = [{"answer": "crane", "success": True, "guesses": 2, "remaining": 1,
              "time_ms": 0.5, "history": [("slate", "xxgxg"), ("crane", "ggggg")]}]
    write_csv(games, str(tmp_path / "out" / "run.csv"), max_turns=6, N=5)
    with (tmp_path / "out" / "run.csv").open(encoding="utf-8", newline="") as f:
        row = next(csv.DictReader(f))
    assert row["guess_2"] == "crane" and row["patt_1"] == "'xxgxg"
    assert row["guess_3"] == "" and row["patt_6"] == ""

    write_manifest({"summary": {"wins": 1}}, str(tmp_path / "m.json"))
    assert json.loads((tmp_path / "m.json").read_text(encoding="utf-8")) == {"summary": {"wins": 1}}
