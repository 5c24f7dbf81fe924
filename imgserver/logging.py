import logging
import sys

from imgserver.settings import settings

SERVICE_NAME = "imgserver"
TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Chatty at DEBUG: one line per multipart chunk.
NOISY_LOGGERS = ("uvicorn.access", "python_multipart", "multipart")


def _formatter(json_output: bool) -> logging.Formatter:
    if not json_output:
        return logging.Formatter(TEXT_FORMAT)

    from pythonjsonlogger.json import JsonFormatter

    return JsonFormatter(
        fmt=JSON_FORMAT,
        rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
        static_fields={"service": SERVICE_NAME},
    )


def configure_logging() -> None:
    """Install a single stderr handler on the root logger.

    JSON records carry a constant ``service`` field so image upload logs can
    be filtered out of a shared log stream. Routes log each request
    themselves, so uvicorn's access log and the multipart parser are kept at
    WARNING.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(settings.log_json))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
