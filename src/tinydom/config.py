# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

import dataclasses
import functools
import os

from dotenv import load_dotenv

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


@dataclasses.dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    json_indent: int | None = None
    compress: bool = True

    @classmethod
    def from_env(cls) -> Settings:
        """Settings from ``TINYDOM_*`` environment variables (and ``.env``)."""
        load_dotenv()

        indent = os.environ.get("TINYDOM_LOG_INDENT")
        compress = os.environ.get("TINYDOM_COMPRESS")

        return cls(
            log_level=os.environ.get("TINYDOM_LOG_LEVEL", cls.log_level).upper(),
            json_indent=int(indent) if indent else None,
            compress=cls.compress if compress is None else compress.lower() in _TRUE_VALUES,
        )


@functools.cache
def get_settings() -> Settings:
    return Settings.from_env()


__all__ = ["Settings", "get_settings"]
