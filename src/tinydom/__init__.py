# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from .builder import Shorthand, comment, doctype, element, fragment, raw_html, text
from .document import document
from .errors import (
    CommentTerminatorError,
    ConstructionError,
    DomError,
    Frame,
    TextPreservingViolationError,
    UnsupportedNodeError,
    ViolationKind,
)
from .nodes import Comment, DocumentType, Element, Fragment, Node, RawHtml, Text
from .prettify import prettify
from .serializer import serialize_document, serialize_fragment, serialize_node
from .tags import tag

__all__ = [
    "Comment",
    "CommentTerminatorError",
    "ConstructionError",
    "DocumentType",
    "DomError",
    "Element",
    "Fragment",
    "Frame",
    "Node",
    "RawHtml",
    "Shorthand",
    "Text",
    "TextPreservingViolationError",
    "UnsupportedNodeError",
    "ViolationKind",
    "comment",
    "doctype",
    "document",
    "element",
    "fragment",
    "prettify",
    "raw_html",
    "serialize_document",
    "serialize_fragment",
    "serialize_node",
    "tag",
    "text",
]
