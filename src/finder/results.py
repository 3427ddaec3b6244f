"""The result shape shared by both finder algorithms."""

from typing import NamedTuple


class FinderResult(NamedTuple):
    """The outcome of one finder run.

    Attributes:
        count (int): The number of concatenated words found.
        longest_words (list[str]): The longest concatenated words,
        longest first.

    """

    count: int
    longest_words: list[str]
