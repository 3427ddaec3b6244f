"""The immutable word collection shared by both finder algorithms, and
the reader that supplies it from a word file.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

logger = logging.getLogger(__name__)

# Each character is accounted as two bytes
BYTES_PER_CHARACTER = 2


class SourceUnavailableError(Exception):
    """Raised when the word source can't be found or read."""


class Vocabulary:
    """A read-only set of distinct words.

    Iteration follows the order in which words were first seen, which
    keeps tie-breaking in the results reproducible between runs.
    """

    __slots__ = ("_ordered", "_words")

    def __init__(self, words: Iterable[str] = ()) -> None:
        """Initialize the vocabulary.

        Args:
            words (Iterable[str]): The words to store. Duplicates
            are collapsed into one entry.

        """
        self._ordered: tuple[str, ...] = tuple(dict.fromkeys(words))
        self._words: frozenset[str] = frozenset(self._ordered)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __repr__(self) -> str:
        return f"Vocabulary({len(self)} words)"

    @property
    def approximate_bytes(self) -> int:
        """Approximate the memory taken by the stored characters."""
        return sum(len(word) for word in self._ordered) * BYTES_PER_CHARACTER


def load_vocabulary(words: Iterable[str]) -> Vocabulary:
    """Build the vocabulary from a sequence of words.

    Args:
        words (Iterable[str]): The raw words, possibly with duplicates.

    Returns:
        Vocabulary: The collapsed, read-only vocabulary.

    """
    vocabulary = Vocabulary(words)
    logger.info(
        "Loaded vocabulary of %d distinct words (~%d bytes)",
        len(vocabulary),
        vocabulary.approximate_bytes,
    )
    return vocabulary


def read_word_file(data_path: Path) -> list[str]:
    """Read every whitespace separated word of a file.

    Args:
        data_path (Path): The path of the word file.

    Raises:
        SourceUnavailableError: If the file does not exist
        or can't be read.

    Returns:
        list[str]: The words in file order, blank lines skipped.

    """
    words: list[str] = []
    try:
        # Open the file for reading with UTF-8 encoding
        with data_path.open("r", encoding="utf-8") as file:
            for line in file:
                # A line may hold several words
                words.extend(line.split())

    except FileNotFoundError as e:
        raise SourceUnavailableError(f"File not found: {data_path}") from e

    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(
            f"Could not read the word file {data_path}: {e!s}",
        ) from e

    logger.info("Read %d words from %s", len(words), data_path)
    return words
