from pathlib import Path
from unittest.mock import patch

import pytest

import run_finder
from src.finder.results import FinderResult


def test_runs_with_words_path(word_file, capsys):
    assert run_finder.main(["--words_path", str(word_file)]) == 0

    output = capsys.readouterr().out
    assert "Algorithm: Prefix Tree" in output
    assert "No of words = 8" in output
    assert (
        "Longest concatenated word: ratcatdogcat (length = 12)" in output
    )
    assert (
        "Second longest concatenated word: catsdogcats (length = 11)"
        in output
    )
    assert "Total number of concatenated words: 3" in output


@pytest.mark.parametrize("algorithm", ["dp", "trie"])
def test_both_algorithms_print_the_same_words(word_file, capsys, algorithm):
    argv = ["--words_path", str(word_file), "--algorithm", algorithm]
    assert run_finder.main(argv) == 0

    output = capsys.readouterr().out
    assert "ratcatdogcat (length = 12)" in output
    assert "Total number of concatenated words: 3" in output


def test_config_file_and_overrides(tmp_path, word_file, capsys):
    config_path = tmp_path / "config.txt"
    config_path.write_text(
        f"wordspath = {word_file}\nalgorithm = trie\ntop_k = 1\n",
    )

    argv = ["--config_path", str(config_path), "--algorithm", "dp"]
    assert run_finder.main(argv) == 0

    output = capsys.readouterr().out
    assert "Algorithm: Dynamic Programming" in output
    assert "Longest concatenated word: ratcatdogcat" in output
    assert "Second longest" not in output


def test_top_k_beyond_named_ranks(word_file, capsys):
    argv = ["--words_path", str(word_file), "--top_k", "4"]
    assert run_finder.main(argv) == 0

    output = capsys.readouterr().out
    assert "Third longest concatenated word: dogcatsdog" in output
    assert "#4 longest" not in output


def test_missing_word_file_fails(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert run_finder.main(["--words_path", str(missing)]) == 1

    error = capsys.readouterr().err
    assert "File not found" in error


def test_no_word_source_given(capsys):
    assert run_finder.main([]) == 1
    assert "No word file given" in capsys.readouterr().err


def test_missing_config_file(capsys):
    argv = ["--config_path", "/non/existent/config.txt"]
    assert run_finder.main(argv) == 1
    assert "Configuration error" in capsys.readouterr().err


def test_invalid_top_k(word_file, capsys):
    argv = ["--words_path", str(word_file), "--top_k", "0"]
    assert run_finder.main(argv) == 1
    assert "top_k" in capsys.readouterr().err


def test_log_details_logs_the_run(word_file):
    with patch("run_finder.setup_logging") as mock_setup, patch(
        "run_finder.log_run",
    ) as mock_log_run:
        argv = ["--words_path", str(word_file), "--log_details"]
        assert run_finder.main(argv) == 0

    mock_setup.assert_called_once()
    mock_log_run.assert_called_once()
    _, algorithm, words_path, word_count, count, _ = mock_log_run.call_args[0]
    assert algorithm == "trie"
    assert words_path == Path(word_file)
    assert word_count == 8
    assert count == 3


def test_print_results_without_words(capsys):
    run_finder.print_results(FinderResult(0, []), 1.0)

    output = capsys.readouterr().out
    assert "concatenated word:" not in output
    assert "Total number of concatenated words: 0" in output


def test_trie_algorithm_prints_the_trie_size(word_file, capsys):
    argv = ["--words_path", str(word_file), "--algorithm", "trie"]
    assert run_finder.main(argv) == 0

    assert "Trie size = 94 bytes" in capsys.readouterr().out


def test_dp_algorithm_has_no_trie(word_file, capsys):
    argv = ["--words_path", str(word_file), "--algorithm", "dp"]
    assert run_finder.main(argv) == 0

    assert "Trie size" not in capsys.readouterr().out


def test_bytes_count_every_word_read(tmp_path, capsys):
    file_path = tmp_path / "words.txt"
    file_path.write_text("cat\ndog\ncat\ncatdog\n", encoding="utf-8")

    assert run_finder.main(["--words_path", str(file_path)]) == 0

    output = capsys.readouterr().out
    assert "No of words = 4" in output
    # (3 + 3 + 3 + 6) characters at two bytes each
    assert "Bytes = 30" in output
