"""wordbreak — greedy dictionary word segmentation."""

from wordbreak.errors import NonAlphabeticalError, SegmentationError, UnmatchableInputError
from wordbreak.trie import PrefixDictionary, TrieNode, build_dictionary
from wordbreak.segmenter import check_alphabetic, segment, segment_text
from wordbreak.dictionary import iter_tokens, load_dictionary
from wordbreak.cli import run_cli

__all__ = [
    "NonAlphabeticalError",
    "PrefixDictionary",
    "SegmentationError",
    "TrieNode",
    "UnmatchableInputError",
    "build_dictionary",
    "check_alphabetic",
    "iter_tokens",
    "load_dictionary",
    "run_cli",
    "segment",
    "segment_text",
]
