"""Find concatenated words with a prefix trie.

Every word contributes the suffixes left after its vocabulary-word
prefixes. A word is concatenated as soon as one of those suffixes is a
vocabulary word itself. Unresolved suffixes are split further and queued
again, longest original word first, until no suffix remains to split.
"""

import heapq
import itertools
import logging
from typing import NamedTuple

from src.custom_data_structures.top_k.top_k import DEFAULT_TOP_K, TopKTracker
from src.custom_data_structures.Trie.Trie import StringTrie

from .results import FinderResult
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)


class SuffixTask(NamedTuple):
    """A candidate word with the suffixes still to be resolved."""

    word: str
    suffixes: list[str]


class _Worklist:
    """Priority queue of suffix tasks, longest candidate word first.

    Tasks of equal word length come out in insertion order.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, SuffixTask]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, task: SuffixTask) -> None:
        heapq.heappush(self._heap, (-len(task.word), next(self._counter), task))

    def pop(self) -> SuffixTask:
        return heapq.heappop(self._heap)[2]


def build_trie(vocabulary: Vocabulary) -> StringTrie:
    """Insert every vocabulary word into a new trie.

    Args:
        vocabulary (Vocabulary): The words to insert.

    Returns:
        StringTrie: The populated trie.

    """
    trie = StringTrie()
    for word in vocabulary:
        trie.insert(word)

    logger.info("Trie size = %d bytes", trie.size_in_bytes())
    return trie


def propagate_suffixes(
    vocabulary: Vocabulary,
    trie: StringTrie,
    top_k: int = DEFAULT_TOP_K,
) -> FinderResult:
    """Resolve the suffix tasks of every vocabulary word.

    Args:
        vocabulary (Vocabulary): The words to examine.
        trie (StringTrie): A trie holding exactly the vocabulary words.
        top_k (int): How many of the longest words to report.

    Returns:
        FinderResult: The count and the longest concatenated words.

    """
    tracker = TopKTracker(top_k)
    worklist = _Worklist()
    confirmed: set[str] = set()
    # (word, suffix) pairs whose own suffixes were already queued
    expanded: set[tuple[str, str]] = set()

    for word in vocabulary:
        suffixes = trie.suffixes_of(word)
        # Without an inner word boundary a word can't be concatenated
        if suffixes:
            worklist.push(SuffixTask(word, suffixes))

    logger.debug("Queued %d initial suffix tasks", len(worklist))

    while worklist:
        task = worklist.pop()
        word = task.word

        # Stale task of a word that is already confirmed
        if word in confirmed:
            continue

        if any(trie.contains_word(suffix) for suffix in task.suffixes):
            confirmed.add(word)
            if tracker.is_eligible(word):
                tracker.offer(word)
            continue

        # None of the suffixes is a word, split each of them further
        for suffix in task.suffixes:
            if (word, suffix) in expanded:
                continue
            expanded.add((word, suffix))

            deeper_suffixes = trie.suffixes_of(suffix)
            if deeper_suffixes:
                worklist.push(SuffixTask(word, deeper_suffixes))

    logger.info(
        "Suffix propagation found %d concatenated words",
        len(confirmed),
    )
    return FinderResult(len(confirmed), tracker.words)


def run_trie_propagation(
    vocabulary: Vocabulary,
    top_k: int = DEFAULT_TOP_K,
) -> FinderResult:
    """Build the trie for a vocabulary and find its concatenated words.

    Args:
        vocabulary (Vocabulary): The words to examine.
        top_k (int): How many of the longest words to report.

    Returns:
        FinderResult: The count and the longest concatenated words.

    """
    return propagate_suffixes(vocabulary, build_trie(vocabulary), top_k)
