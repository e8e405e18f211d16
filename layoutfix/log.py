"""TRACE logging level for layoutfix.

Levels used by this package:
    TRACE =  5  — one record per layout table registered at import
    DEBUG = 10  — config file merged or missing, pair chosen for a request
    INFO  = 20  — a CLI conversion finished (char count and pair)
    WARNING     — rejected CLI request, unreadable or invalid config file
    ERROR       — missing layout table, closed output pipe

Import this module once (``layoutfix.core.registry`` does) before calling
``logger.trace(...)``.
"""

import logging

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")


def _trace(self: logging.Logger, message: object, *args: object, **kwargs: object) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)  # type: ignore[attr-defined]


if not hasattr(logging.Logger, "trace"):
    logging.Logger.trace = _trace  # type: ignore[attr-defined]
