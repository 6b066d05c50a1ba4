# src/mcqforge/logging_config.py
"""Logging setup for applications embedding mcqforge.

Library modules only create loggers (``logging.getLogger(__name__)``); they
never configure handlers. Applications, including the CLI, call
configure_logging() once.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-32s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Noisy third-party loggers
THIRD_PARTY_LEVELS = {
    "LiteLLM": logging.WARNING,
    "litellm": logging.WARNING,
    "httpx": logging.WARNING,
    "chromadb": logging.WARNING,
}


def _resolve_level(value: int | str | None, default: int = logging.INFO) -> int:
    if isinstance(value, int):
        return value
    if value is None:
        return default
    level = getattr(logging, str(value).upper(), None)
    return level if isinstance(level, int) else default


def configure_logging(level: int | str | None = "INFO") -> logging.Logger:
    """Attach a single stream handler to the ``mcqforge`` logger.

    Calling it again replaces the handler instead of adding another.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or logging constant.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger("mcqforge")
    package_logger.setLevel(_resolve_level(level))

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False

    for name, third_party_level in THIRD_PARTY_LEVELS.items():
        logging.getLogger(name).setLevel(third_party_level)

    return package_logger
