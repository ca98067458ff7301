"""End-to-end runs from a word list on disk to printed verdicts."""

import pytest

from bloomcheck import (
    BloomFilter,
    FalsePositiveBenchmark,
    SpellChecker,
    WordListReader,
    random_words,
)
from bloomcheck.__main__ import main


@pytest.fixture
def big_wordlist(tmp_path):
    words = random_words(5000, 7, seed=123)
    path = tmp_path / "big_wordlist.txt"
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path, words


class TestEndToEnd:
    def test_loader_to_filter(self, big_wordlist):
        path, words = big_wordlist
        loaded = WordListReader(max_workers=2).read_words(path)
        assert loaded == words
        bf = BloomFilter.with_error_rate(len(loaded), None, 0.01)
        for word in loaded:
            bf.add(word)
        assert all(bf.contains(word) for word in words)

    def test_bloom_and_exact_agree_on_members(self, big_wordlist):
        path, words = big_wordlist
        bloom = SpellChecker.from_word_list([path])
        exact = SpellChecker.from_word_list([path], use_bloom_filter=False)
        assert all(bloom.is_word_valid(w) for w in words[:1000])
        assert all(exact.is_word_valid(w) for w in words[:1000])

    def test_benchmark_matches_target(self, big_wordlist):
        path, _ = big_wordlist
        bloom = SpellChecker.from_word_list([path], error_rate=0.01)
        exact = SpellChecker.from_word_list([path], use_bloom_filter=False)
        result = FalsePositiveBenchmark(bloom, exact).run(
            iterations=10000, word_length=5, seed=5
        )
        assert result.false_positive_rate <= 0.05

    def test_cli_check_prints_verdicts(self, wordlist_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["check", "--wordlist", str(wordlist_file), "lemon"])
        assert exc.value.code == 0
        assert "Given word lemon has correct spelling" in capsys.readouterr().out

    def test_cli_info_prints_parameters(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["info", "--capacity", "100", "--error-rate", "0.01"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "959" in out
        assert "Hash functions" in out

    def test_cli_invalid_error_rate(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["info", "--capacity", "100", "--error-rate", "1.5"])
        assert exc.value.code == 1
        assert "error_rate" in capsys.readouterr().out
