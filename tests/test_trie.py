import pytest

from src.custom_data_structures.Trie.Trie import StringTrie

TEST_DATA = ["cat", "cats", "catsdogcats", "dog", "do", "rat"]


@pytest.fixture
def trie():
    data_trie = StringTrie()
    for word in TEST_DATA:
        data_trie.insert(word)
    return data_trie


@pytest.mark.parametrize("word", TEST_DATA)
def test_contains_inserted_words(trie, word):
    assert trie.contains_word(word) is True


@pytest.mark.parametrize("word", ["ca", "catalog", "dogs", "r", "bat", "d"])
def test_does_not_contain_prefixes_or_extensions(trie, word):
    assert trie.contains_word(word) is False


def test_contains_word_shares_prefix_but_no_match():
    data_trie = StringTrie()
    data_trie.insert("cat")
    assert data_trie.contains_word("catalog") is False
    assert data_trie.contains_word("cat") is True


def test_empty_trie():
    data_trie = StringTrie()
    assert data_trie.contains_word("cat") is False
    assert data_trie.contains_word("") is False
    assert data_trie.suffixes_of("cat") == []
    assert data_trie.node_count() == 0


def test_insert_is_idempotent(trie):
    nodes_before = trie.node_count()
    trie.insert("cats")
    assert trie.node_count() == nodes_before
    assert trie.contains_word("cats") is True


def test_suffixes_of_word_with_several_boundaries(trie):
    assert trie.suffixes_of("catsdogcats") == ["sdogcats", "dogcats"]


def test_suffixes_exclude_the_full_word_match(trie):
    # "cat" ends exactly at the end of the query, the tail would be empty
    assert trie.suffixes_of("cat") == []
    assert trie.suffixes_of("cats") == ["s"]


def test_suffixes_of_nested_prefixes(trie):
    assert trie.suffixes_of("dogcats") == ["gcats", "cats"]


@pytest.mark.parametrize("query", ["", "s", "xyz", "hippo"])
def test_suffixes_of_unknown_paths_are_empty(trie, query):
    assert trie.suffixes_of(query) == []


def test_suffixes_stop_where_the_path_leaves_the_trie(trie):
    # "rat" is a word, the walk ends at "e" without failing
    assert trie.suffixes_of("ratel") == ["el"]


def test_node_count_and_size(trie):
    # c-a-t-s-d-o-g-c-a-t-s, d-o-g, r-a-t
    assert trie.node_count() == 11 + 3 + 3
    assert trie.size_in_bytes() == 2 * trie.node_count()
