import logging

from bloomcheck.config.settings import CheckerConfig, load_config


class TestCheckerConfig:
    def test_defaults(self):
        config = CheckerConfig()
        assert config.wordlist_path == "misc/wordlist.txt"
        assert config.error_rate == 0.01
        assert config.iterations == 10000
        assert config.word_length == 5
        assert config.seed is None
        assert config.reader_workers >= 2

    def test_load_without_environment(self, monkeypatch):
        for name in ("WORDLIST", "ERROR_RATE", "ITERATIONS", "WORD_LENGTH", "SEED"):
            monkeypatch.delenv(f"BLOOMCHECK_{name}", raising=False)
        config = load_config()
        assert config.wordlist_path == "misc/wordlist.txt"
        assert config.seed is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("BLOOMCHECK_WORDLIST", "/usr/share/dict/words")
        monkeypatch.setenv("BLOOMCHECK_ERROR_RATE", "0.001")
        monkeypatch.setenv("BLOOMCHECK_ITERATIONS", "500")
        monkeypatch.setenv("BLOOMCHECK_WORD_LENGTH", " 7 ")
        monkeypatch.setenv("BLOOMCHECK_SEED", "42")
        monkeypatch.setenv("BLOOMCHECK_READER_WORKERS", "3")
        config = load_config()
        assert config.wordlist_path == "/usr/share/dict/words"
        assert config.error_rate == 0.001
        assert config.iterations == 500
        assert config.word_length == 7
        assert config.seed == 42
        assert config.reader_workers == 3

    def test_malformed_value_keeps_default(self, monkeypatch, caplog):
        monkeypatch.setenv("BLOOMCHECK_ITERATIONS", "lots")
        with caplog.at_level(logging.WARNING, logger="bloomcheck.config.settings"):
            config = load_config()
        assert config.iterations == 10000
        assert "BLOOMCHECK_ITERATIONS" in caplog.text

    def test_blank_value_keeps_default(self, monkeypatch):
        monkeypatch.setenv("BLOOMCHECK_ERROR_RATE", "  ")
        assert load_config().error_rate == 0.01
