"""
Logging helpers.
"""

import logging
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_ROOT = "parking"


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stream handler to the ``parking`` logger tree once."""
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    if level:
        root.setLevel(level.upper())


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``parking`` tree, e.g. ``parking.http``."""
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
