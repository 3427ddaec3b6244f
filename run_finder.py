"""This module provides the entry point for running the concatenated
words finder.
"""

import argparse
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import psutil

from src.finder.config import (
    ALGORITHM_CHOICES,
    ConfigBoolParsingError,
    ConfigNotFoundError,
    ConfigValueError,
    FinderConfig,
    load_config_file,
)
from src.finder.dp_finder import run_dp
from src.finder.logger import log_run, setup_logging
from src.finder.results import FinderResult
from src.finder.trie_finder import (
    build_trie,
    propagate_suffixes,
    run_trie_propagation,
)
from src.finder.vocabulary import (
    BYTES_PER_CHARACTER,
    SourceUnavailableError,
    Vocabulary,
    load_vocabulary,
    read_word_file,
)

ALGORITHMS: dict[str, Callable[[Vocabulary, int], FinderResult]] = {
    "dp": run_dp,
    "trie": run_trie_propagation,
}

ALGORITHM_NAMES = {
    "dp": "Dynamic Programming",
    "trie": "Prefix Tree",
}

RANK_NAMES = ["Longest", "Second longest", "Third longest"]


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser.

    Returns:
        argparse.ArgumentParser: The parser for the finder options.

    """
    parser = argparse.ArgumentParser(
        description="Find the longest concatenated words of a word file.",
    )
    parser.add_argument(
        "--config_path",
        type=str,
        default=None,
        help="Optional path to the config file.",
        required=False,
    )
    parser.add_argument(
        "--words_path",
        type=str,
        default=None,
        help="Path to the word file, overrides the config file.",
        required=False,
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=None,
        choices=list(ALGORITHM_CHOICES),
        help="Algorithm to run: 'dp' or 'trie' (default: trie).",
        required=False,
    )
    parser.add_argument(
        "--top_k",
        type=int,
        default=None,
        help="How many of the longest words to print (default: 2).",
        required=False,
    )
    parser.add_argument(
        "--log_details",
        action="store_true",
        help="Write the run details to the log file.",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> FinderConfig:
    """Merge the config file settings with the command line flags.

    Args:
        args (argparse.Namespace): The parsed command line arguments.

    Raises:
        ConfigNotFoundError: If no word file is given at all.
        ConfigValueError: If top_k is not a positive integer.

    Returns:
        FinderConfig: The settings to run with.

    """
    if args.config_path is not None:
        config = load_config_file(Path(args.config_path))
    elif args.words_path is None:
        raise ConfigNotFoundError(
            "No word file given. Use --words_path or --config_path.",
        )
    else:
        config = FinderConfig(Path(args.words_path))

    if args.words_path is not None:
        config.words_path = Path(args.words_path)
    if args.algorithm is not None:
        config.algorithm = args.algorithm
    if args.top_k is not None:
        if args.top_k < 1:
            raise ConfigValueError(
                f"Invalid value for 'top_k': expected a positive integer, "
                f"got {args.top_k}.",
            )
        config.top_k = args.top_k
    if args.log_details:
        config.log_details = True

    return config


def print_results(result: FinderResult, elapsed_ms: float) -> None:
    """Print the longest words and the total count.

    Args:
        result (FinderResult): The outcome of the run.
        elapsed_ms (float): The run time in milliseconds.

    """
    print(f"Time taken = {elapsed_ms:.0f} milliseconds")
    for rank, word in enumerate(result.longest_words):
        rank_name = (
            RANK_NAMES[rank]
            if rank < len(RANK_NAMES)
            else f"#{rank + 1} longest"
        )
        print(f"{rank_name} concatenated word: {word} (length = {len(word)})")
    print(f"Total number of concatenated words: {result.count}")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the finder.

    Args:
        argv (Optional[list[str]]): The command line arguments,
        defaults to `sys.argv[1:]`.

    Returns:
        int: The process exit status.

    """
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
    except (
        FileNotFoundError,
        ConfigNotFoundError,
        ConfigBoolParsingError,
        ConfigValueError,
    ) as e:
        print(f"[FINDER] Configuration error: {e}", file=sys.stderr)
        return 1

    if config.log_details:
        setup_logging()

    start_time = time.perf_counter()
    try:
        words = read_word_file(config.words_path)
    except SourceUnavailableError as e:
        print(f"[FINDER] {e}", file=sys.stderr)
        return 1

    vocabulary = load_vocabulary(words)
    trie_size: Optional[int] = None
    if config.algorithm == "trie":
        # Build the trie here to report its size
        trie = build_trie(vocabulary)
        result = propagate_suffixes(vocabulary, trie, config.top_k)
        trie_size = trie.size_in_bytes()
    else:
        result = ALGORITHMS[config.algorithm](vocabulary, config.top_k)
    elapsed_ms = (time.perf_counter() - start_time) * 1000

    print(f"Algorithm: {ALGORITHM_NAMES[config.algorithm]}")
    print(f"No of words = {len(words)}")
    # Every word read counts, duplicates included
    bytes_read = sum(len(word) for word in words) * BYTES_PER_CHARACTER
    print(f"Bytes = {bytes_read}")
    if trie_size is not None:
        print(f"Trie size = {trie_size} bytes")
    print_results(result, elapsed_ms)

    rss_mb = psutil.Process().memory_info().rss / 1024 / 1024
    print(f"Memory usage = {rss_mb:.1f} MB")

    if config.log_details:
        log_run(
            datetime.now().isoformat(),
            config.algorithm,
            config.words_path,
            len(vocabulary),
            result.count,
            elapsed_ms,
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
