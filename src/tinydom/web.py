# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

import logging

import aiohttp.web
import brotli  # type: ignore[import-untyped]

from tinydom.builder import Shorthand
from tinydom.config import get_settings
from tinydom.serializer import serialize_document, serialize_fragment

_logger = logging.getLogger("tinydom").getChild("web")


def html_response(
    request: aiohttp.web.Request,
    *roots: Shorthand,
    status: int = 200,
    as_document: bool = True,
    compress: bool | None = None,
) -> aiohttp.web.Response:
    """Serialize ``roots`` into an HTML response for ``request``.

    Roots are written as a full document (with a doctype) unless
    ``as_document`` is false. Serialization errors propagate before any
    response is created.
    """
    content = (serialize_document if as_document else serialize_fragment)(*roots).encode("utf-8")

    headers = {
        "Content-Type": "text/html; charset=utf-8",
        "Cache-Control": "must-revalidate, no-cache, no-store, private",
    }

    if compress is None:
        compress = get_settings().compress

    accept_encoding = request.headers.get("Accept-Encoding", "")
    if compress and "br" in accept_encoding:
        content = brotli.compress(content)
        headers["Content-Encoding"] = "br"

    _logger.debug(
        "Prepared HTML response",
        extra={"path": request.path, "status": status, "bytes": len(content)},
    )

    return aiohttp.web.Response(body=content, status=status, headers=headers)


__all__ = ["html_response"]
