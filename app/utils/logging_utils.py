import logging
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

from app.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Route all records through one JSON handler on stdout. Safe to call repeatedly."""
    if getattr(configure_logging, "_configured", False):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))

    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())
    root.handlers = [handler]
    # git spawns a subprocess per command and logs each at DEBUG
    logging.getLogger("git").setLevel(logging.WARNING)
    configure_logging._configured = True
