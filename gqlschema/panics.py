"""Logging of unexpected errors raised during query execution."""

from __future__ import annotations

import logging
import traceback
from typing import Any

_log = logging.getLogger(__name__)


class DefaultLogger:
    """Logs a recovered error with the current stack and the request context."""

    def log_panic(self, context: Any, value: Any) -> None:
        stack = "".join(traceback.format_stack())
        if isinstance(value, BaseException) and value.__traceback__ is not None:
            stack += "".join(
                traceback.format_exception(type(value), value, value.__traceback__)
            )
        _log.error(
            "graphql: panic occurred: %s\n%s\ncontext: %s", value, stack, context
        )