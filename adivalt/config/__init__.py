# Configuration: environment-driven settings and the stdlib logging sink.

from adivalt.config.logging import configure_logging, get_sink
from adivalt.config.settings import AppSettings, get_settings

__all__ = [
    "configure_logging",
    "get_sink",
    "AppSettings",
    "get_settings",
]
