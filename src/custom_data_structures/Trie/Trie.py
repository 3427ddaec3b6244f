"""This module represents the implementation of a Trie structure that's
used for word membership checks and for finding the word boundaries
inside a candidate word.
"""

# Bytes accounted for every node (one stored character)
NODE_SIZE_IN_BYTES = 2


class TrieNode:
    """Represent a node in the trie structure."""

    __slots__ = ("children", "is_the_end_of_word")

    def __init__(self) -> None:
        """Initialize a new Trie node.

        Attributes:
            children (dict): A dictionary mapping characters to
            their corresponding child TrieNode instances.
            is_the_end_of_word (bool): Indicates whether this
            node marks the end of a valid word in the Trie.

        """
        # A dictionary to store child nodes (character: TrieNode)
        self.children: dict[str, TrieNode] = {}
        # Boolean flag to indicate if this node marks the end of a word
        self.is_the_end_of_word = False


class StringTrie:
    """Represents the string trie data structure."""

    def __init__(self) -> None:
        """Initialize the root node of the Trie."""
        self.root = TrieNode()

    def insert(self, word: str) -> None:
        """Insert a new word into the String Trie structure.

        Args:
            word (str): The word to be inserted into the Trie structure.

        """
        node = self.root
        for char in word:
            # If the character is not already a child, add a new TrieNode
            if char not in node.children:
                node.children[char] = TrieNode()
            # Move to the child node
            node = node.children[char]
        # Mark the end of the word
        node.is_the_end_of_word = True

    def contains_word(self, word: str) -> bool:
        """Check for the existence of a given word in the String
        Trie structure.

        Args:
            word (str): The word to search for in the Trie structure.

        Returns:
            bool: True if the exact `word` is present
            in the trie as a complete word, False otherwise.

        """
        node = self.root
        for char in word:
            # If the character is not found, the word does not exist
            if char not in node.children:
                return False
            # Move to the child node
            node = node.children[char]
        # Return True only if the current node marks the end of a word
        return node.is_the_end_of_word

    def suffixes_of(self, word: str) -> list[str]:
        """Find the suffixes left over after every stored word that is
        a proper prefix of `word`.

        Walking down the path of `word`, each node that marks the end of
        a stored word splits `word` into that word and a remaining tail.
        The tail is collected when it is not empty.

        Args:
            word (str): The word to split at its word boundaries.

        Returns:
            list[str]: The non-empty tails, longest first. Empty when
            no stored word is a proper prefix of `word`.

        """
        suffixes: list[str] = []
        node = self.root
        for index, char in enumerate(word):
            node = node.children.get(char)
            # The path left the trie, no more boundaries to find
            if node is None:
                break
            if node.is_the_end_of_word and index + 1 < len(word):
                suffixes.append(word[index + 1 :])
        return suffixes

    def node_count(self) -> int:
        """Count the nodes below the root.

        Returns:
            int: The number of character nodes in the trie.

        """
        count = 0
        stack = list(self.root.children.values())
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def size_in_bytes(self) -> int:
        """Approximate the trie size, counting two bytes per node."""
        return self.node_count() * NODE_SIZE_IN_BYTES
