"""
Logging setup for the interview generator.

Modules log through ``logging.getLogger(__name__)``; ``setup_logging`` attaches
a single console handler to the ``app`` logger. Model output and request
bodies end up in logs, so API keys and bearer tokens are masked first.
"""
import logging
import re
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

SECRET_PATTERNS = [
    (re.compile(r'(api[_-]?key\s*[=:]\s*)["\']?[\w-]{20,}["\']?', re.IGNORECASE), r'\1***MASKED***'),
    (re.compile(r'sk-[\w-]{20,}'), '***MASKED***'),
    (re.compile(r'(bearer\s+)[\w.-]{20,}', re.IGNORECASE), r'\1***MASKED***'),
]


def mask_secrets(text: str) -> str:
    """Mask sensitive values in text."""
    for pattern, replacement in SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


class SecretMaskingFilter(logging.Filter):
    """Filter to mask secrets in log messages."""

    def filter(self, record):
        if isinstance(record.msg, str):
            record.msg = mask_secrets(record.msg)
        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    key: mask_secrets(value) if isinstance(value, str) else value
                    for key, value in record.args.items()
                }
            else:
                record.args = tuple(
                    mask_secrets(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )
        return True


def setup_logging(log_level: Union[int, str] = logging.INFO, name: str = "app") -> logging.Logger:
    """
    Configure the application logger.

    Args:
        log_level: Level name ("INFO") or number.
        name: Root logger name for the application package.
    """
    logger = logging.getLogger(name)
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
    logger.setLevel(log_level)

    # Prevent adding handlers multiple times
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.addFilter(SecretMaskingFilter())
    logger.addHandler(handler)
    logger.propagate = False

    return logger
