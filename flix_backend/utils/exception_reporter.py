from __future__ import annotations

import logging
from typing import Literal

logger = logging.getLogger(__name__)

ReporterMode = Literal["log", "rethrow"]


class ExceptionReporter:
    """
    Top-level sink for failures that callers chose not to handle themselves.

    In "log" mode each reported exception is logged and its message recorded in
    `errors` (handy for tests and end-of-run summaries). In "rethrow" mode it is
    logged and raised again.
    """

    def __init__(self, mode: ReporterMode = "log", *, log: logging.Logger | None = None) -> None:
        if mode not in ("log", "rethrow"):
            raise ValueError(f"Unknown reporter mode: {mode!r}")
        self.mode: ReporterMode = mode
        self.errors: list[str] = []
        self._logger = log or logger

    def __call__(self, exc: BaseException, context: str | None = None) -> None:
        message = str(exc) or exc.__class__.__name__
        if context:
            self._logger.error("%s: %s", context, message, exc_info=exc)
        else:
            self._logger.error("%s", message, exc_info=exc)

        if self.mode == "rethrow":
            raise exc
        self.errors.append(message)

    def clear(self) -> None:
        self.errors.clear()
