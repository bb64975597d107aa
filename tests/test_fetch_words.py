from script import fetch_words


class _FakeResponse:
    text = "Crane\nslate\ncranes\ncr4ne\ncrane\n\nPious\n"

    def raise_for_status(self):
        pass


def test_clean_words_keeps_n_letter_alpha():
    assert fetch_words.clean_words(["Crane", "cranes", "cr4ne", "crane", "slate"], 5) == [
        "crane", "slate"]


def test_fetch_words_uses_http(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return _FakeResponse()

    monkeypatch.setattr(fetch_words.requests, "get", fake_get)
    assert fetch_words.fetch_words("http://example.invalid/words.txt", 5) == [
        "crane", "slate", "pious"]
    assert calls == ["http://example.invalid/words.txt"]
