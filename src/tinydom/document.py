# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Iterable

from tinydom.builder import Shorthand, element, fragment
from tinydom.nodes import DocumentType, Fragment


def document(
    title: str,
    /,
    *body: Shorthand,
    styles: Iterable[str] = (),
    scripts: Iterable[str] = (),
    lang: str = "en",
    **attributes: str | None,
) -> Fragment:
    """Standard page skeleton with ``body`` as the content of ``<body>``.

    Keyword arguments become attributes of the ``<body>`` element.
    """
    return fragment(
        DocumentType("html"),
        element(
            "html",
            element(
                "head",
                element("meta", charset="utf-8"),
                element("meta", name="viewport", content="width=device-width, initial-scale=1"),
                element("title", title),
                (element("link", rel="stylesheet", href=style) for style in styles),
                (element("script", type="module", async_="", defer="", src=script) for script in scripts),
            ),
            element("body", *body, **attributes),
            lang=lang,
        ),
    )


__all__ = ["document"]
