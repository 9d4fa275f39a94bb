"""Logging setup for Registrar.

All registrar loggers write through the "registrar" logger to a rotating file
whose location comes from Settings. Every handler redacts passwords and bcrypt
hashes before a record is written.
"""

from __future__ import annotations

import logging
import re
from logging.handlers import RotatingFileHandler
from registrar.config import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# key=value, key: value and quoted dict reprs
_CREDENTIAL_FIELD = re.compile(
    r"(password(?:_hash)?['\"]?\s*[=:]\s*['\"]?)[^\s'\",}]+", flags=re.IGNORECASE
)
_BCRYPT_HASH = re.compile(r"\$2[abxy]?\$\d{2}\$[./A-Za-z0-9]{53}")


def sanitize_for_log(text: str) -> str:
    """Remove credentials from log output.

    Args:
        text: Text that may contain passwords or password hashes.

    Returns:
        Sanitized text safe for logging.
    """
    text = _CREDENTIAL_FIELD.sub(r"\1[REDACTED]", text)
    return _BCRYPT_HASH.sub("[REDACTED]", text)


class CredentialFilter(logging.Filter):
    """Handler filter that runs every record through sanitize_for_log."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        cleaned = sanitize_for_log(message)
        if cleaned != message:
            record.msg = cleaned
            record.args = None
        return True


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Configure the registrar logger from settings.

    The log file is settings.get_log_path(): logging.dir and logging.file,
    with a relative dir resolved against the directory holding registrar.yaml.
    Calling this again replaces the handlers of the previous call.

    Args:
        settings: Loaded settings. Defaults to Settings().

    Returns:
        The root registrar logger.
    """
    if settings is None:
        settings = Settings()
    config = settings.logging

    log_path = settings.get_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    log_level = getattr(logging, config.level.upper(), logging.INFO)

    logger = logging.getLogger("registrar")
    logger.setLevel(log_level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    ]
    if config.console:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        handler.addFilter(CredentialFilter())
        logger.addHandler(handler)

    logger.info("Registrar logging initialized (level=%s, file=%s)", config.level, log_path)
    return logger
