"""
Download a word list and write a clean, deduplicated copy for the index.

What it does:
- Downloads the URL (plain text, or an HTML page listing words).
- For HTML, takes the visible text via BeautifulSoup; plain text is used as-is.
- Keeps every whitespace-separated token that is an N-letter a-z word
  after lowercasing, first-seen order preserved.

Usage:
    python -m script.fetch_wordlist --url https://example.org/words.txt --out data/words_5.txt
    python -m script.fetch_wordlist --url ... --N 6 --sort
"""

import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from wordrank.datasets import clean_words, write_lines


def extract_words(text: str, content_type: str = "", N: int = 5) -> list[str]:
    if "html" in content_type or text.lstrip().startswith("<"):
        text = BeautifulSoup(text, "html.parser").get_text("\n", strip=True)
    return clean_words(text.split(), N=N)


def fetch_words(url: str, N: int = 5) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return extract_words(r.text, r.headers.get("Content-Type", ""), N=N)


def main():
    ap = argparse.ArgumentParser(description="Fetch a word list for wordrank")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="data/words_5.txt")
    ap.add_argument("--N", type=int, default=5, help="word length to keep")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "source order")
    args = ap.parse_args()

    words = fetch_words(args.url, N=args.N)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")


if __name__ == "__main__":
    main()
