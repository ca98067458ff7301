from bloomcheck.spellcheck.benchmark import (
    BenchmarkResult,
    FalsePositiveBenchmark,
    random_words,
)
from bloomcheck.spellcheck.checker import SpellChecker
from bloomcheck.spellcheck.session import InteractiveSession

__all__ = [
    "BenchmarkResult",
    "FalsePositiveBenchmark",
    "InteractiveSession",
    "SpellChecker",
    "random_words",
]
