from __future__ import annotations

from logging import Logger, getLogger
from typing import Any

import attr

#: The numeric level used for very chatty diagnostics.
TRACE = 5


@attr.s(slots=True, frozen=True, kw_only=True)
class LoggerWithTrace:
    """
    Thin wrapper over a stdlib logger that adds a ``trace`` level below ``DEBUG``.
    """

    logger: Logger = attr.ib()

    @classmethod
    def get(cls, name: str) -> LoggerWithTrace:
        return LoggerWithTrace(logger=getLogger(name))

    def debug(self, message: str, *args: Any, **kws: Any) -> None:
        self.logger.debug(message, *args, **kws)

    def trace(self, message: str, *args: Any, **kws: Any) -> None:
        self.logger.log(TRACE, message, *args, **kws)
