import json
from pathlib import Path

from internal.logging import LogLevel, StructuredLogger

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"

LAYOUTS = ("fixed", "compact")


class EncoderConfig:
    __slots__ = ("layout",)

    def __init__(self, layout="fixed"):
        if layout not in LAYOUTS:
            raise ValueError(f"Unknown layout {layout!r}, expected one of {LAYOUTS}")
        self.layout = layout


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        if level.upper() not in LogLevel.__members__:
            raise ValueError(f"Unknown log level {level!r}")
        self.level = level


class Config:
    __slots__ = ("encoder", "logging")

    def __init__(self, encoder=None, logging=None):
        self.encoder = encoder or EncoderConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            EncoderConfig(**d.get("encoder", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    """Load config from ``path``, or config.json beside this module."""
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))


def configure_logging(config):
    """Apply the logging section to the shared structured logger."""
    StructuredLogger.configure(min_level=LogLevel[config.logging.level.upper()])
