import logging
import sys

from app.config import settings


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger writing to stdout with a bracketed prefix, e.g.
    `[inventory.import] added=3 skipped=1`. Handlers are attached once per name.
    """
    log = logging.getLogger(name)
    log.setLevel(settings.LOG_LEVEL.upper())
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter("[%(name)s] %(levelname)s %(message)s"))
        log.addHandler(h)
    return log
