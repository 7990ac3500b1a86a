"""Observability layer: structured logger, log formats, failure classification."""

from adivalt.observability.failure_classifier import FailureCategory, FailureClassifier
from adivalt.observability.log_models import ErrorSnapshot, LogEntry, LoggerConfig, LogLevel
from adivalt.observability.formats import JsonFormat, PrettyFormat
from adivalt.observability.logger import Logger

__all__ = [
    "FailureCategory",
    "FailureClassifier",
    "ErrorSnapshot",
    "LogEntry",
    "LoggerConfig",
    "LogLevel",
    "JsonFormat",
    "PrettyFormat",
    "Logger",
]
