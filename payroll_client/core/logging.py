import logging
import sys

from payroll_client.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(level: str | None = None) -> None:
    """
    Configure the package root logger.

    Safe to call more than once; only the first call installs a handler.
    """
    global _configured

    root = logging.getLogger("payroll_client")
    root.setLevel(level or settings.log_level_value)

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
