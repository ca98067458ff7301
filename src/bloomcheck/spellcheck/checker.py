import logging
from typing import Iterable, Optional, Sequence, Set

from bloomcheck.config.settings import CONFIG
from bloomcheck.filter.bloom_filter import BloomFilter
from bloomcheck.io.word_reader import WORD_READER, PathLike, WordListReader

logger = logging.getLogger(__name__)


class SpellChecker:
    """Dictionary lookup backed by a Bloom filter or by an exact set."""

    def __init__(
        self,
        words: Sequence[str],
        use_bloom_filter: bool = True,
        error_rate: Optional[float] = None,
    ) -> None:
        self.use_bloom_filter = use_bloom_filter
        self.error_rate = CONFIG.error_rate if error_rate is None else error_rate
        self._size = len(words)
        self._bloom: Optional[BloomFilter[str]] = None
        self._words: Optional[Set[str]] = None
        if use_bloom_filter:
            self._bloom = BloomFilter.with_error_rate(
                len(words), None, self.error_rate
            )
            for word in words:
                self._bloom.add(word)
        else:
            self._words = set(words)
        logger.debug(
            "SpellChecker loaded %d words (%s)",
            self._size,
            "bloom filter" if use_bloom_filter else "exact set",
        )

    @classmethod
    def from_word_list(
        cls,
        paths: Iterable[PathLike],
        use_bloom_filter: bool = True,
        error_rate: Optional[float] = None,
        reader: Optional[WordListReader] = None,
    ) -> "SpellChecker":
        words = (reader or WORD_READER).read_many(paths)
        return cls(words, use_bloom_filter=use_bloom_filter, error_rate=error_rate)

    @property
    def size(self) -> int:
        return self._size

    @property
    def bloom_filter(self) -> Optional[BloomFilter[str]]:
        return self._bloom

    def is_word_valid(self, word: str) -> bool:
        if self._bloom is not None:
            return self._bloom.contains(word)
        return word in self._words
