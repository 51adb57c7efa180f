import logging
import sys

from biztime.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str | None = None) -> None:
    """
    Set up root logging for the API process.

    Safe to call more than once; only the first call installs the handler.
    """
    global _configured
    if _configured:
        return

    logging.basicConfig(
        format=LOG_FORMAT,
        stream=sys.stdout,
        level=getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO),
    )
    _configured = True
