"""
Download a word list page and write a clean start-word file.

What it does:
- Downloads the page (HTML or plain text).
- Extracts visible text and picks out alphabetic tokens of the requested length.
- Lowercases, de-duplicates while preserving page order, and writes to file.

Usage:
    python -m script.fetch_start_words --url <page> --out wordscramble/datasets/data/start.txt
    # or alphabetically sorted:
    python -m script.fetch_start_words --url <page> --sort --length 8
"""

import re
import argparse

import requests
from bs4 import BeautifulSoup

from wordscramble.datasets import write_lines, validate_start_words, pretty_summary

TOKEN_RE = re.compile(r"\b[A-Za-z]+\b")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def extract_words(text: str, length: int) -> list[str]:
    words = [m.group(0).lower() for m in TOKEN_RE.finditer(text)]
    return unique_preserve_order(w for w in words if len(w) == length)


def fetch_words(url: str, length: int) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    if "html" in r.headers.get("Content-Type", ""):
        text = BeautifulSoup(r.text, "html.parser").get_text("\n", strip=True)
    else:
        text = r.text
    return extract_words(text, length)


def main():
    ap = argparse.ArgumentParser(description="Build a start-word list from a web page")
    ap.add_argument("--url", required=True)
    ap.add_argument("--out", default="wordscramble/datasets/data/start.txt")
    ap.add_argument("--length", type=int, default=8, help="keep only words of this length")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of keeping "
                                                        "page order")
    args = ap.parse_args()

    words = fetch_words(args.url, args.length)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} unique words -> {args.out}")
    print(pretty_summary(validate_start_words(args.out, length=args.length)))


if __name__ == "__main__":
    main()
