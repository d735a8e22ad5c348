"""Logging configuration for the password processor logger tree."""

from __future__ import annotations

import logging

PACKAGE_LOGGER_NAME = "password_processor"


def resolve_log_level(level: str) -> int:
    """Map a level name such as ``debug`` to its logging constant, defaulting to INFO."""

    normalized_level = level.strip().upper() if level.strip() else "INFO"
    resolved_level = getattr(logging, normalized_level, logging.INFO)
    return resolved_level if isinstance(resolved_level, int) else logging.INFO


def configure_logging(*, level: str) -> None:
    """Apply the runtime level to package loggers, leaving root handlers to the host process."""

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(resolve_log_level(level))
    if not any(isinstance(handler, logging.NullHandler) for handler in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())
