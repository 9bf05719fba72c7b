"""
Request logging around a client operation.

``LoggingContext`` logs when an operation starts and how it ended. An
expected request failure is a ``DragonBallError``: the caller receives the
error with its help text, so the log only gets its one-line message at
WARNING. Anything else is a defect and is logged at ERROR.
"""

import logging
from typing import Optional

from dragonball.exceptions import DragonBallError


class LoggingContext:
    """Context manager logging the start, success and failure of ``operation``.

    Every record carries ``operation`` in its extras, and failures also carry
    the error's ``error_code`` and ``correlation_id``.
    """

    def __init__(self, logger: logging.Logger, operation: str, entry_msg: str,
                 success_msg: Optional[str] = None, failure_msg: Optional[str] = None):
        self.logger = logger
        self.operation = operation
        self.entry_msg = entry_msg
        self.success_msg = success_msg
        self.failure_msg = failure_msg or f"{operation} failed"

    def __enter__(self) -> "LoggingContext":
        self._log(logging.DEBUG, self.entry_msg)
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        if exc_value is None:
            if self.success_msg:
                self._log(logging.INFO, self.success_msg)
        elif isinstance(exc_value, DragonBallError):
            self._log(
                logging.WARNING,
                f"{self.failure_msg}: {exc_value.message}",
                error_code=exc_value.error_code,
                correlation_id=exc_value.correlation_id,
            )
        else:
            self._log(logging.ERROR, f"{self.failure_msg}: {exc_value!r}")
        return False

    def _log(self, level: int, message: str, **fields) -> None:
        self.logger.log(level, message, extra={"operation": self.operation, **fields})
