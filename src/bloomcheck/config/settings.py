import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

ENV_PREFIX = "BLOOMCHECK_"

_T = TypeVar("_T")


@dataclass
class CheckerConfig:
    wordlist_path: str = "misc/wordlist.txt"
    error_rate: float = 0.01
    iterations: int = 10000
    word_length: int = 5
    seed: Optional[int] = None
    reader_workers: int = field(default_factory=lambda: (os.cpu_count() or 1) * 2)


def _env(name: str, convert: Callable[[str], _T], default: _T) -> _T:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return convert(raw.strip())
    except ValueError:
        logger.warning(
            "Ignoring %s%s=%r, keeping default %r", ENV_PREFIX, name, raw, default
        )
        return default


def load_config() -> CheckerConfig:
    config = CheckerConfig()
    config.wordlist_path = _env("WORDLIST", str, config.wordlist_path)
    config.error_rate = _env("ERROR_RATE", float, config.error_rate)
    config.iterations = _env("ITERATIONS", int, config.iterations)
    config.word_length = _env("WORD_LENGTH", int, config.word_length)
    config.seed = _env("SEED", int, config.seed)
    config.reader_workers = _env("READER_WORKERS", int, config.reader_workers)
    return config


CONFIG = load_config()
