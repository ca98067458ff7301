"""Empirical false-positive rate of a Bloom-backed checker."""

import string
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
from rich.console import Console
from rich.progress import BarColumn, Progress, TextColumn, TimeRemainingColumn

from bloomcheck.spellcheck.checker import SpellChecker

ALPHABET = string.ascii_uppercase


def random_words(count: int, length: int, seed: Optional[int] = None) -> List[str]:
    """``count`` random strings of ``length`` letters A-Z."""
    rng = np.random.default_rng(seed)
    letters = np.array(list(ALPHABET))
    picks = rng.integers(0, len(ALPHABET), size=(count, length))
    return ["".join(row) for row in letters[picks]]


@dataclass
class BenchmarkResult:
    iterations: int
    false_positives: int

    @property
    def false_positive_rate(self) -> float:
        return self.false_positives / self.iterations if self.iterations else 0.0


class FalsePositiveBenchmark:
    """Queries random words against a filter-backed and an exact checker.

    A false positive is a word the filter accepts and the exact set rejects.
    """

    def __init__(self, bloom_checker: SpellChecker, exact_checker: SpellChecker) -> None:
        self.bloom_checker = bloom_checker
        self.exact_checker = exact_checker

    def run(
        self,
        iterations: int = 10000,
        word_length: int = 5,
        seed: Optional[int] = None,
        console: Optional[Console] = None,
    ) -> BenchmarkResult:
        words = random_words(iterations, word_length, seed)
        false_positives = 0
        progress = None
        task_id = None
        if console is not None:
            progress = Progress(
                BarColumn(),
                TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
                TextColumn("{task.description}"),
                TimeRemainingColumn(),
                console=console,
                transient=True,
            )
            progress.start()
            task_id = progress.add_task("[cyan]querying", total=iterations)
        try:
            for word in words:
                if self.bloom_checker.is_word_valid(
                    word
                ) and not self.exact_checker.is_word_valid(word):
                    false_positives += 1
                if progress is not None:
                    progress.advance(task_id)
        finally:
            if progress is not None:
                progress.stop()
        return BenchmarkResult(iterations, false_positives)
