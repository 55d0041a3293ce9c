import logging
import os
import sys

from dotenv import load_dotenv


load_dotenv()

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def resolve_level(level: str | None = None) -> str:
    """Explicit level, else LOG_LEVEL, else INFO."""
    name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if name not in VALID_LOG_LEVELS:
        return "INFO"
    return name


def configure_logging(level: str | None = None) -> None:
    """Send every record to stdout. Only the shell calls this."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(
        level=getattr(logging, resolve_level(level)),
        handlers=[handler],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
