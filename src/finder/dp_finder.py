"""Find concatenated words by checking every word on its own with a
dynamic programming segmentation table.
"""

import logging

from src.custom_data_structures.top_k.top_k import DEFAULT_TOP_K, TopKTracker

from .results import FinderResult
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)


def is_concatenated(word: str, vocabulary: Vocabulary) -> bool:
    """Check whether a word is made of two or more other vocabulary words.

    The table cell `table[start][end]` tells whether `word[start:end + 1]`
    splits fully into vocabulary words. It is filled by increasing
    substring length, so both halves of any split are already known.
    The whole word never counts as a piece of itself.

    Args:
        word (str): The candidate word.
        vocabulary (Vocabulary): The words the pieces may come from.

    Returns:
        bool: True if `word` is a concatenation of other words,
        False otherwise.

    """
    word_length = len(word)
    if word_length == 0:
        return False

    table = [[False] * word_length for _ in range(word_length)]

    for substring_length in range(1, word_length + 1):
        for start in range(word_length - substring_length + 1):
            end = start + substring_length - 1
            substring = word[start : end + 1]

            # A vocabulary word other than the candidate itself
            if substring in vocabulary and substring != word:
                table[start][end] = True
                continue

            # Otherwise look for a split where both parts are segmented
            for split_point in range(start + 1, end + 1):
                if table[start][split_point - 1] and table[split_point][end]:
                    table[start][end] = True
                    break

    return table[0][word_length - 1]


def run_dp(vocabulary: Vocabulary, top_k: int = DEFAULT_TOP_K) -> FinderResult:
    """Count the concatenated words and rank the longest ones.

    Args:
        vocabulary (Vocabulary): The words to examine.
        top_k (int): How many of the longest words to report.

    Returns:
        FinderResult: The count and the longest concatenated words.

    """
    tracker = TopKTracker(top_k)
    concatenated_count = 0

    for word in vocabulary:
        if is_concatenated(word, vocabulary):
            concatenated_count += 1
            if tracker.is_eligible(word):
                tracker.offer(word)

    logger.info(
        "Dynamic programming found %d concatenated words",
        concatenated_count,
    )
    return FinderResult(concatenated_count, tracker.words)
