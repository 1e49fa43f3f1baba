# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Iterable

import logging
import re

from tinydom.builder import Shorthand, fragment
from tinydom.nodes import Comment, Element, Fragment, Node, Text

_NEWLINE = re.compile(r"\n(?!\n)")

_logger = logging.getLogger("tinydom").getChild("prettify")


def prettify(nodes: Node | Iterable[Shorthand], indent: str = "\t", level: int = 0) -> tuple[Node, ...]:
    """Return a reindented copy of ``nodes``, one node per line.

    Elements which hold text directly (or nothing at all) are kept on a
    single line as they are; whitespace inside them would change the
    rendered content. Running this over its own output adds more blank
    lines around the top level nodes, so only call it once per tree.
    """
    match nodes:
        case Fragment(children):
            pass
        case Node():
            children = (nodes,)
        case str():
            children = (Text(nodes),)
        case _:
            children = fragment(*nodes).children

    _logger.debug("Prettifying %d nodes at level %d", len(children), level)

    return tuple(_prettify(children, indent, level))


def _prettify(nodes: Iterable[Node], indent: str, level: int) -> Iterable[Node]:
    for node in nodes:
        yield Text(indent * level)

        match node:
            case Element(name, attributes, children) if not _is_inline(node):
                yield Element(
                    name,
                    dict(attributes),
                    (Text("\n"), *prettify(children, indent, level + 1), Text(indent * level)),
                )
            case Text(data):
                yield Text(_indent_text(data, indent, level))
            case Comment(data):
                yield Comment(_indent_text(data, indent, level))
            case _:
                yield node

        yield Text("\n")


def _is_inline(element: Element) -> bool:
    if not element.children:
        return True

    return any(isinstance(child, Text) for child in element.children)


def _indent_text(data: str, indent: str, level: int) -> str:
    replacement = "\n" + indent * level
    return _NEWLINE.sub(lambda _: replacement, data)


__all__ = ["prettify"]
