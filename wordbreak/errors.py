"""Exceptions raised by the dictionary and segmentation layers."""

from __future__ import annotations


class SegmentationError(Exception):
    """Base class for everything :func:`wordbreak.segment` can raise."""


class UnmatchableInputError(SegmentationError):
    """No greedy segmentation exists for *text* under the dictionary.

    *position* is the index where the failing word round began.
    """

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(f"cannot segment {text!r}: no word matches at position {position}")


class NonAlphabeticalError(SegmentationError):
    """*text* holds a character outside a-z / A-Z at *position*."""

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(
            f"non-alphabetic character {text[position]!r} in {text!r} at position {position}"
        )
