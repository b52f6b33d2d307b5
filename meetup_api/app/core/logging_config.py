"""
Logging setup for the Meetup API process.

``run.py`` starts uvicorn with ``log_config=None``, so uvicorn does not
install handlers of its own.  ``setup_logging`` gives the root logger
one console handler (and optionally a file handler) and makes the
uvicorn loggers propagate to it, so request logs and the service's
own ``meetup_api.*`` messages come out in a single format.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Names given to the handlers installed here, so repeated calls from
# create_app recognise them without touching handlers owned by others.
CONSOLE_HANDLER = "meetup_api.console"
FILE_HANDLER = "meetup_api.file"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Route application and uvicorn logs through the root logger.

    Safe to call once per ``create_app``: the root level is updated on
    every call, the console handler is added only once, and a file
    handler is added the first time ``logfile`` is given.

    Parameters
    ----------
    level : str
        ``LOG_LEVEL`` from settings, case insensitive.  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        ``LOG_FILE`` from settings, resolved against the working
        directory.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    installed = {handler.get_name() for handler in root.handlers}
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if CONSOLE_HANDLER not in installed:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile and FILE_HANDLER not in installed:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
