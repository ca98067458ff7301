from bloomcheck.io.word_reader import WORD_READER, WordListReader

__all__ = ["WORD_READER", "WordListReader"]
