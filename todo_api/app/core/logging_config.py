"""
Root logger setup for the API process.

Records from every ``todo_api`` module go to stderr and, when
``LOG_FILE`` is configured, to that file as well.  Uvicorn's own loggers
propagate to the root logger, so server and application lines share one
format.
"""

import logging
from pathlib import Path
from typing import List, Optional


def _handlers_for(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        path = Path(logfile).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Does nothing when the root logger already has handlers, so a test
    runner's capture handlers or an earlier ``create_app`` call win.
    Unknown level names are treated as ``INFO``.
    """
    if logging.getLogger().handlers:
        return

    # getLevelName maps a known name to its number and anything else to
    # the string "Level <name>".
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=_handlers_for(logfile),
    )
