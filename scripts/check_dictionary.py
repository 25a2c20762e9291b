#!/usr/bin/env python3
import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wordcheck.replace.dictionary import DEFAULT_DICTIONARY_PATH, LoadError, load_dictionary


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Validate a wrong-word dictionary file and report its size."
    )
    parser.add_argument("path", nargs="?", default=str(DEFAULT_DICTIONARY_PATH), help="Dictionary file to check")
    args = parser.parse_args()

    try:
        wrong_words = load_dictionary(args.path)
    except LoadError as exc:
        print(f"Invalid dictionary: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"{args.path}: {len(wrong_words)} wrong words")


if __name__ == "__main__":
    main()
