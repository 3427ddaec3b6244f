import pytest

from src.finder.vocabulary import Vocabulary, load_vocabulary
from tests.sample_words import SAMPLE_WORDS


@pytest.fixture
def sample_vocabulary() -> Vocabulary:
    """The vocabulary of the classic concatenated words example."""
    return load_vocabulary(SAMPLE_WORDS)


# Create a fixture for temporary word file
@pytest.fixture
def word_file(tmp_path):
    file_path = tmp_path / "words.txt"
    with file_path.open("w", encoding="utf-8") as f:
        for word in SAMPLE_WORDS:
            f.write(f"{word}\n")
    return file_path
