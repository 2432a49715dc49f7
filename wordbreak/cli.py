"""CLI / terminal mode for wordbreak."""

from __future__ import annotations

import logging
import sys
import time
from typing import Iterable, TextIO

from wordbreak.errors import SegmentationError
from wordbreak.segmenter import check_alphabetic, segment
from wordbreak.trie import PrefixDictionary

log = logging.getLogger("wordbreak.cli")


def run_cli(
    dictionary: PrefixDictionary,
    tokens: Iterable[str],
    strict: bool = False,
    out: TextIO | None = None,
) -> int:
    """Segment each token and print one word per line.

    A token that cannot be segmented is logged and skipped. Returns the
    process exit status: 1 if any token failed, else 0.
    """
    if out is None:
        out = sys.stdout

    failed = 0
    count = 0
    t0 = time.time()
    for token in tokens:
        count += 1
        try:
            if strict:
                check_alphabetic(token)
            words = segment(token, dictionary)
        except SegmentationError as exc:
            log.error("%s", exc)
            failed += 1
            continue
        for word in words:
            print(word, file=out)
    elapsed = time.time() - t0

    log.debug("Segmented %d tokens in %.3fs (%d failed).", count, elapsed, failed)
    return 1 if failed else 0
