from __future__ import annotations

import logging

from versiongate.core.paths.global_paths import LOG_FILE

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("versiongate")


def configure_file_logging(level: int = logging.INFO) -> logging.Handler | None:
    """Send the package logs to LOG_FILE.

    Calling it again is a no-op while a handler for the same file is attached.
    Returns None when the log directory cannot be created or opened.
    """
    log_file = LOG_FILE.path
    for handler in logger.handlers:
        if (
            isinstance(handler, logging.FileHandler)
            and handler.baseFilename == str(log_file.resolve())
        ):
            return handler

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
