"""Benchmark the two concatenated-words finder algorithms.

Run from the repository root with `python -m benchmarks.run_benchmarks`.
"""

import gc
import json
import random
import string
import time
import tracemalloc
from pathlib import Path
from typing import Callable

import matplotlib.pyplot as plt
import psutil

from src.finder.dp_finder import run_dp
from src.finder.results import FinderResult
from src.finder.trie_finder import run_trie_propagation
from src.finder.vocabulary import Vocabulary, load_vocabulary

BENCHMARKED_ALGORITHMS: dict[str, Callable[[Vocabulary, int], FinderResult]] = {
    "Dynamic Programming": run_dp,
    "Prefix Tree": run_trie_propagation,
}
VOCABULARY_SIZES = [1000, 5000, 10000, 50000]
SEED = 2017
RESULTS_DIR = (
    Path(__file__).parent.parent / "static" / "benchmarks" / "finder_results"
)


def generate_vocabulary(size: int, seed: int = SEED) -> Vocabulary:
    """Generate a vocabulary where roughly a third of the words are
    concatenations of shorter ones.

    Args:
        size (int): The number of words to generate.
        seed (int): The seed of the random generator.

    Returns:
        Vocabulary: The generated vocabulary.

    """
    rng = random.Random(seed)
    base_count = max(1, (size * 2) // 3)

    base_words = [
        "".join(
            rng.choice(string.ascii_lowercase)
            for _ in range(rng.randint(2, 8))
        )
        for _ in range(base_count)
    ]
    concatenated_words = [
        "".join(rng.choices(base_words, k=rng.randint(2, 4)))
        for _ in range(size - base_count)
    ]
    return load_vocabulary(base_words + concatenated_words)


def benchmark_algorithm(
    algorithm: Callable[[Vocabulary, int], FinderResult],
    vocabulary: Vocabulary,
) -> dict[str, float | int]:
    """Run one algorithm once and measure it.

    Args:
        algorithm (Callable): The finder entry point.
        vocabulary (Vocabulary): The words to run it on.

    Returns:
        dict[str, float | int]: Execution time, peak traced memory,
        process RSS and the number of concatenated words found.

    """
    gc.collect()
    tracemalloc.start()
    start_time = time.perf_counter()
    try:
        result = algorithm(vocabulary, 2)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()

    return {
        "execution_time_ms": elapsed_ms,
        "peak_memory_bytes": peak,
        "rss_bytes": psutil.Process().memory_info().rss,
        "concatenated_count": result.count,
    }


def plot_results(results: dict[int, dict[str, dict[str, float | int]]]) -> Path:
    """Save a grouped bar chart of the execution times.

    Args:
        results (dict): Measurements per vocabulary size and algorithm.

    Returns:
        Path: The path of the saved chart.

    """
    sizes = list(results)
    width = 0.8 / len(BENCHMARKED_ALGORITHMS)

    plt.figure(figsize=(8, 5))
    try:
        for offset, name in enumerate(BENCHMARKED_ALGORITHMS):
            x = [i + offset * width for i in range(len(sizes))]
            y = [results[size][name]["execution_time_ms"] for size in sizes]
            plt.bar(x, y, width=width, label=name)

        plt.xticks(
            [i + width / 2 for i in range(len(sizes))],
            [str(size) for size in sizes],
        )
        plt.xlabel("Vocabulary size")
        plt.ylabel("Execution Time (ms)")
        plt.title("Concatenated words finder execution time")
        plt.legend()
        plt.tight_layout()

        graph_path = RESULTS_DIR / "benchmark_execution_time.png"
        plt.savefig(graph_path)
    finally:
        # Cleanup matplotlib resources
        plt.close("all")

    return graph_path


def main() -> None:
    """Main function."""
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)

    results: dict[int, dict[str, dict[str, float | int]]] = {}
    for size in VOCABULARY_SIZES:
        print(f"\n--- Benchmarking vocabulary of {size} words ---")
        vocabulary = generate_vocabulary(size)

        results[size] = {}
        for name, algorithm in BENCHMARKED_ALGORITHMS.items():
            measurement = benchmark_algorithm(algorithm, vocabulary)
            results[size][name] = measurement
            print(
                f"{name}: {measurement['execution_time_ms']:.2f} ms, "
                f"peak memory {measurement['peak_memory_bytes']} bytes, "
                f"{measurement['concatenated_count']} concatenated words",
            )

        counts = {m["concatenated_count"] for m in results[size].values()}
        if len(counts) != 1:
            print(f"Warning: the algorithms disagree on the count: {counts}")

    graph_path = plot_results(results)
    print(f"\nSaved the chart to {graph_path}")

    results_json_path = RESULTS_DIR / "results.json"
    with open(results_json_path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)


if __name__ == "__main__":
    main()
