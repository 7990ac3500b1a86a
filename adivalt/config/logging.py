# adivalt/config/logging.py

import logging
import sys

SINK_NAMESPACE = "adivalt"


def configure_logging(stream=None) -> logging.Logger:
    """
    Attach a single message-only stream handler to the ``adivalt`` namespace.
    Lines arrive fully formatted, so the handler adds nothing. Idempotent.
    """
    root = logging.getLogger(SINK_NAMESPACE)
    root.setLevel(logging.DEBUG)
    if not any(getattr(h, "_adivalt_handler", False) for h in root.handlers):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler._adivalt_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    return root


def get_sink(service: str) -> logging.Logger:
    """Per-service stdlib logger. Severity filtering is owned by ``Logger``, so the sink passes everything."""
    sink = logging.getLogger(f"{SINK_NAMESPACE}.{service}")
    sink.setLevel(logging.DEBUG)
    return sink
