# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Write node trees out as HTML.

This follows https://html.spec.whatwg.org/#serialising-html-fragments for
the parts it covers (void elements, text preserving elements, comments
and doctypes). Everything else in that algorithm is left out.
"""

from __future__ import annotations as _future_annotations

from collections.abc import Iterator, Mapping

import logging

from tinydom.builder import Shorthand, fragment
from tinydom.errors import (
    CommentTerminatorError,
    TextPreservingViolationError,
    UnsupportedNodeError,
    ViolationKind,
)
from tinydom.nodes import Comment, DocumentType, Element, Fragment, Node, RawHtml, Text

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
        # Not void, but serialized as if they were.
        "basefont",
        "bgsound",
        "frame",
        "keygen",
    },
)

TEXT_PRESERVING_ELEMENTS = frozenset(
    {"style", "script", "xmp", "iframe", "noembed", "noframes", "plaintext"},
)

_logger = logging.getLogger("tinydom").getChild("serializer")


def escape_attribute(value: str) -> str:
    value = value.replace("&", "&amp;")
    value = value.replace("\xa0", "&nbsp;")
    return value.replace('"', "&quot;")


def escape_text(value: str) -> str:
    value = value.replace("&", "&amp;")
    value = value.replace("\xa0", "&nbsp;")
    value = value.replace("<", "&lt;")
    return value.replace(">", "&gt;")


def serialize_fragment(*roots: Shorthand) -> str:
    content = serialize_node(fragment(*roots))
    _logger.debug("Serialized fragment", extra={"length": len(content)})
    return content


def serialize_document(*roots: Shorthand) -> str:
    content = serialize_node(fragment(DocumentType("html"), *roots))
    _logger.debug("Serialized document", extra={"length": len(content)})
    return content


def serialize_node(node: Node) -> str:
    return "".join(_serialize(node, None))


def _serialize(node: Node, parent: str | None) -> Iterator[str]:
    match node:
        case Element(str(name), attributes, children) if _valid_attributes(attributes):
            yield f"<{name}{_attributes(attributes)}>"

            if name in VOID_ELEMENTS:
                return

            for child in children:
                yield from _serialize(child, name)

            yield f"</{name}>"

        case Text(str(data)) if parent in TEXT_PRESERVING_ELEMENTS:
            yield _preserved_text(data, parent)

        case Text(str(data)):
            yield escape_text(data)

        case Comment(str(data)):
            if "-->" in data:
                raise CommentTerminatorError

            yield f"<!--{data}-->"

        case RawHtml(str(data)):
            yield data

        case DocumentType(str(name)):
            yield f"<!DOCTYPE {name}>"

        case Fragment(children):
            for child in children:
                yield from _serialize(child, parent)

        case _:
            raise UnsupportedNodeError(node)


def _attributes(attributes: Mapping[str, str]) -> str:
    return "".join(f' {key}="{escape_attribute(value)}"' for key, value in attributes.items())


def _valid_attributes(attributes: object) -> bool:
    if not isinstance(attributes, Mapping):
        return False

    return all(isinstance(key, str) and isinstance(value, str) for key, value in attributes.items())


def _preserved_text(data: str, parent: str) -> str:
    # Checked per text node; adjacent text nodes can still combine into
    # one of these sequences.
    if "<!--" in data:
        raise TextPreservingViolationError(ViolationKind.COMMENT_OPENER, parent)

    if f"<{parent}" in data:
        raise TextPreservingViolationError(ViolationKind.OPENING_TAG, parent)

    if f"</{parent}" in data:
        raise TextPreservingViolationError(ViolationKind.CLOSING_TAG, parent)

    return data


__all__ = [
    "TEXT_PRESERVING_ELEMENTS",
    "VOID_ELEMENTS",
    "escape_attribute",
    "escape_text",
    "serialize_document",
    "serialize_fragment",
    "serialize_node",
]
