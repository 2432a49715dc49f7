#!/usr/bin/env python3
"""
wordbreak

Splits runs of letters such as "helloworld" into dictionary words using
greedy longest-match against a trie-backed word list.

    python break_words.py --dict words.txt helloworld thecatsat
    echo "helloworld" | python break_words.py
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordbreak.cli import run_cli
from wordbreak.dictionary import iter_tokens, load_dictionary


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("wordbreak")


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="wordbreak -- splits unbroken letter runs into dictionary words",
    )
    parser.add_argument("text", nargs="*",
                        help="Tokens to segment (read from stdin if omitted)")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--strict", action="store_true",
                        help="Reject tokens containing non-alphabetic characters")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        dictionary = load_dictionary(args.dict)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("%s", exc)
        return 2

    if args.text:
        tokens = [t for arg in args.text for t in arg.split()]
    else:
        tokens = iter_tokens(sys.stdin)
    return run_cli(dictionary, tokens, strict=args.strict)


if __name__ == "__main__":
    sys.exit(main())
