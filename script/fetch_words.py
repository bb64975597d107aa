"""
Download a word list and write a clean dictionary for one word length.

What it does:
- Downloads a newline-separated word list (plain text).
- Keeps alphabetic a-z words of exactly N letters, lowercased.
- De-duplicates while preserving source order (optionally sorts).

Usage:
    python -m script.fetch_words --N 5 --out wordsieve/datasets/data/words_5.txt
"""

import argparse

import requests

from wordsieve.datasets import write_lines

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def clean_words(lines, N: int) -> list[str]:
    words = (ln.strip().lower() for ln in lines)
    return unique_preserve_order(w for w in words if len(w) == N and w.isascii() and w.isalpha())


def fetch_words(url: str, N: int) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return clean_words(r.text.splitlines(), N)


def main():
    ap = argparse.ArgumentParser(description="Fetch a dictionary of N-letter words")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--out", default="wordsieve/datasets/data/words_5.txt")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.N)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
