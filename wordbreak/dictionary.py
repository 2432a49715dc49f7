"""Word-list loading for the prefix dictionary."""

from __future__ import annotations

import logging
import os
from typing import Iterator, TextIO

from wordbreak.constants import WORD_LIST_PATHS
from wordbreak.trie import PrefixDictionary, build_dictionary

log = logging.getLogger("wordbreak")

# Used only when no word list can be found on disk.
_MINIMAL_WORDS = (
    "a", "about", "all", "an", "and", "apple", "are", "as", "at", "be",
    "break", "but", "by", "can", "car", "cart", "cat", "day", "do", "dog",
    "for", "from", "go", "good", "have", "he", "her", "hello", "his", "i",
    "if", "in", "is", "it", "line", "me", "my", "new", "no", "not", "now",
    "of", "on", "one", "or", "out", "pen", "pine", "she", "so", "some",
    "that", "the", "there", "they", "this", "time", "to", "up", "use",
    "was", "way", "we", "what", "when", "will", "with", "word", "words",
    "world", "you", "your",
)


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-delimited tokens from *stream*, line by line."""
    for line in stream:
        yield from line.split()


def read_word_list(path: str) -> PrefixDictionary:
    """Build a dictionary from the word list at *path*."""
    with open(path, "r", encoding="utf-8") as f:
        return build_dictionary(iter_tokens(f))


def load_dictionary(path: str | None = None) -> PrefixDictionary:
    """Load the first usable word list.

    An explicit *path* must exist. Without one, the default search paths
    are tried in order, and a small built-in list is used as a last resort.
    """
    if path is not None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"word list not found: {path}")
        dictionary = read_word_list(path)
        log.info("Loaded %s words from %s", f"{len(dictionary):,}", path)
        return dictionary

    for candidate in WORD_LIST_PATHS:
        if os.path.exists(candidate):
            dictionary = read_word_list(candidate)
            if len(dictionary):
                log.info("Loaded %s words from %s", f"{len(dictionary):,}", candidate)
                return dictionary
            log.debug("Skipping empty word list %s", candidate)

    log.warning("No word list found -- using built-in minimal word list.")
    log.warning("Save a word list as words.txt or pass --dict for real results.")
    return build_dictionary(_MINIMAL_WORDS)
