# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from types import TracebackType
from typing import Any

import logging
import traceback

from pythonjsonlogger.json import JsonFormatter as _JsonFormatter

from tinydom.config import Settings, get_settings
from tinydom.errors import ConstructionError

_SysExcInfoType = (
    tuple[type[BaseException], BaseException, TracebackType | None] | tuple[None, None, None]
)


class JsonFormatter(_JsonFormatter):
    def formatException(self, ei: _SysExcInfoType) -> dict[str, Any] | None:  # type: ignore[override]
        exc_type, exc_value, exc_traceback = ei
        if exc_type is None or exc_value is None:
            return None

        trace = traceback.extract_tb(exc_traceback)

        formatted: dict[str, Any] = {
            "type": exc_type.__name__,
            "message": str(exc_value),
            "traceback": [
                {
                    "source": f"{frame.filename}:{frame.lineno}",
                    "method": frame.name,
                    "code": frame.line,
                }
                for frame in reversed(trace)
            ],
            "cause": (
                self.formatException(
                    (
                        type(exc_value.__cause__),
                        exc_value.__cause__,
                        exc_value.__cause__.__traceback__,
                    ),
                )
                if exc_value.__cause__
                else None
            ),
        }

        if isinstance(exc_value, ConstructionError):
            formatted["message"] = exc_value.message
            formatted["location"] = [
                {"element": frame.element, "attributes": dict(frame.attributes), "index": frame.index}
                for frame in exc_value.trail
            ]

        return formatted


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """Attach a JSON handler to the ``tinydom`` logger.

    Calling this again reconfigures the handler from the first call
    rather than adding another one.
    """
    settings = settings or get_settings()
    logger = logging.getLogger("tinydom")

    handler = next(
        (existing for existing in logger.handlers if isinstance(existing.formatter, JsonFormatter)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        logger.addHandler(handler)

    handler.setFormatter(JsonFormatter(json_indent=settings.json_indent))
    handler.setLevel(settings.log_level)
    logger.setLevel(settings.log_level)

    return handler


__all__ = ["JsonFormatter", "configure_logging"]
