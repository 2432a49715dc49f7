"""Greedy longest-match word segmentation with one-step backtracking.

The segmenter scans the input in *rounds*, one round per output word. A
round starts at ``round_begin`` and grows the probe ``[round_begin,
round_curr)`` one character at a time, asking the dictionary two questions
about it: is it a word, and does any longer word start with it?

  * word, nothing longer         -> commit it, start the next round
  * word, longer words possible  -> remember it, keep growing
  * not a word, still a prefix   -> keep growing
  * neither                      -> fall back to the remembered word,
                                    or fail if there is none

Only the longest remembered word is ever committed, so for the dictionary
{"a", "ab", "abc"} the input "abc" yields ``["abc"]``.
"""

from __future__ import annotations

import logging

from wordbreak.constants import ALPHABET
from wordbreak.errors import NonAlphabeticalError, UnmatchableInputError
from wordbreak.trie import PrefixDictionary

log = logging.getLogger("wordbreak")


def segment(text: str, dictionary: PrefixDictionary) -> list[str]:
    """Split *text* into dictionary words.

    Matching is case-insensitive; the returned words are slices of *text*
    and keep its original case. Raises :class:`UnmatchableInputError` when
    some round can neither match a word nor fall back to one.
    """
    words: list[str] = []
    end = len(text)

    round_begin = round_curr = 0
    match_end: int | None = None  # end of the longest word seen this round

    while round_begin < end:
        is_word, is_prefix = dictionary.query(text, round_begin, round_curr)
        is_word = is_word and round_curr > round_begin
        at_end = round_curr == end

        if is_word and (not is_prefix or at_end):
            # Nothing longer can match here.
            words.append(text[round_begin:round_curr])
            round_begin = round_curr
            match_end = None
        elif is_word:
            match_end = round_curr
            round_curr += 1
        elif is_prefix and not at_end:
            round_curr += 1
        elif match_end is None:
            log.debug("No word starts at %d in %r", round_begin, text)
            raise UnmatchableInputError(text, round_begin)
        else:
            # Overshot: revert to the longest word of this round.
            words.append(text[round_begin:match_end])
            round_begin = round_curr = match_end
            match_end = None

    return words


def segment_text(text: str, dictionary: PrefixDictionary) -> list[list[str]]:
    """Segment every whitespace-separated token of *text*."""
    return [segment(token, dictionary) for token in text.split()]


def check_alphabetic(text: str) -> None:
    """Raise :class:`NonAlphabeticalError` if *text* is not purely a-z / A-Z."""
    for i, ch in enumerate(text):
        if ch not in ALPHABET:
            raise NonAlphabeticalError(text, i)
