"""Line-oriented word list loading."""

import logging
import mmap
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Union

from bloomcheck.config.settings import CONFIG

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class WordListReader:
    def __init__(self, max_workers: Optional[int] = None) -> None:
        self.max_workers = max_workers or CONFIG.reader_workers

    def read_file(self, path: PathLike) -> str:
        path = Path(path)
        size = path.stat().st_size
        # utf-8-sig drops a leading BOM; undecodable bytes become U+FFFD
        if size < 4096:
            return path.read_text(encoding="utf-8-sig", errors="replace")
        elif size < 64 * 1024:
            with open(path, encoding="utf-8-sig", errors="replace", buffering=8192) as f:
                return f.read()
        else:
            with open(path, "rb") as f, mmap.mmap(
                f.fileno(), 0, access=mmap.ACCESS_READ
            ) as mm:
                return mm.read().decode("utf-8-sig", "replace")

    def read_words(self, path: PathLike) -> List[str]:
        """Return one entry per line, in file order, terminators removed."""
        text = self.read_file(path)
        if not text:
            return []
        # only \n, \r\n and \r end a line
        words = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        if words[-1] == "":
            words.pop()
        logger.debug("Read %d words from %s", len(words), path)
        return words

    def read_many(self, paths: Iterable[PathLike]) -> List[str]:
        paths = list(paths)
        if len(paths) == 1:
            return self.read_words(paths[0])
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            chunks = list(executor.map(self.read_words, paths))
        return [word for chunk in chunks for word in chunk]


WORD_READER = WordListReader()
