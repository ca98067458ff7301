from bloomcheck.config.settings import CONFIG, CheckerConfig, load_config

__all__ = ["CONFIG", "CheckerConfig", "load_config"]
