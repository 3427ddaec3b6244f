"""A bounded ranking of the longest words seen so far."""

DEFAULT_TOP_K = 2


class TopKTracker:
    """Keep the `k` longest words offered, ordered by decreasing length.

    Words of equal length keep the order in which they were offered, so
    the first word seen wins a tie for the last place.
    """

    def __init__(self, k: int = DEFAULT_TOP_K) -> None:
        """Initialize an empty tracker.

        Args:
            k (int): The maximum number of words to keep.

        Raises:
            ValueError: If `k` is smaller than 1.

        """
        if k < 1:
            raise ValueError(f"k must be a positive integer, got {k}.")
        self.k = k
        self._words: list[str] = []

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> list[str]:
        """Return a copy of the current ranking, longest first."""
        return list(self._words)

    def is_eligible(self, word: str) -> bool:
        """Check whether a word may still enter the ranking.

        Args:
            word (str): The candidate word.

        Returns:
            bool: False only when the ranking is full and `word` is
            strictly shorter than its last entry. Ties are eligible.

        """
        if len(self._words) == self.k and len(word) < len(self._words[-1]):
            return False
        return True

    def offer(self, word: str) -> None:
        """Place a word in the ranking if it earns a spot.

        The word goes in front of the first entry that is strictly
        shorter. When no such entry exists, it is appended only while
        the ranking still has room. Entries pushed past `k` are dropped.

        Args:
            word (str): The candidate word.

        """
        for index, kept in enumerate(self._words):
            if len(word) > len(kept):
                self._words.insert(index, word)
                break
        else:
            if len(self._words) < self.k:
                self._words.append(word)
            return

        # Maintain the size of the ranking
        del self._words[self.k :]
