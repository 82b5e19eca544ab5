# gpdemo/config.py
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"


class _GPDemoConfig:
    def __init__(self):
        self.version = __version__
        self.dtype = float
        self.seed = 1234
        # logger lives in config
        self.logger = logging.getLogger("gpdemo")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(os.environ.get("GPDEMO_LOG_LEVEL", "INFO").upper())

    def __str__(self):
        return (
            f"GPDemoConfig("
            f"version={self.version}, "
            f"dtype={self.dtype}, "
            f"seed={self.seed}, "
            f"log_level={logging.getLevelName(self.logger.level)})"
        )

    def __repr__(self):
        return (
            f"<GPDemoConfig "
            f"version={self.version!r}, "
            f"dtype={self.dtype!r}, "
            f"seed={self.seed!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"unknown configuration key {k!r}")
            setattr(self, k, v)
        return self


_config = _GPDemoConfig()


def get_config():
    return _config


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
