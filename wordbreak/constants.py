"""Defaults shared across the package."""

from __future__ import annotations

import os
import string

ALPHABET = frozenset(string.ascii_letters)

# Tried in order when no explicit word list is given.
WORD_LIST_PATHS: list[str] = [
    "words.txt",
    "dictionary.txt",
    "wordsEn.txt",
    "merriam-webster.dict",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]
