# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Turn shorthand into node trees.

Shorthand is whatever is convenient to write inline when describing a page:

 - ``str`` becomes a :class:`Text` child
 - a :class:`Node` is used as-is (a :class:`Fragment` is spliced in)
 - ``None`` is skipped, so conditional content can be written inline
 - a mapping is an attribute record, later keys overwrite earlier ones
 - any other iterable is flattened in place
"""

from __future__ import annotations as _future_annotations

from collections.abc import Iterable, Mapping
from typing import TypeAlias, Union

from tinydom.errors import ConstructionError
from tinydom.nodes import Comment, DocumentType, Element, Fragment, Node, RawHtml, Text

Shorthand: TypeAlias = Union[
    None,
    str,
    Node,
    Mapping[str, "str | None"],
    Iterable["Shorthand"],
]


def text(data: str) -> Text:
    return Text(data)


def comment(data: str) -> Comment:
    return Comment(data)


def raw_html(data: str) -> RawHtml:
    return RawHtml(data)


def doctype(name: str = "html") -> DocumentType:
    return DocumentType(name)


def element(name: str, /, *children: Shorthand, **attributes: str | None) -> Element:
    """Build an element from shorthand children.

    Keyword arguments are applied as attributes after the positional
    children, with ``_`` stripped from either end of the name so that
    ``class_="panel"`` or ``for_="name"`` can be written. ``None``
    keyword values are left out.
    """
    if not isinstance(name, str):
        raise ConstructionError(f"Element type must be a string, not {name!r}")

    attrs: dict[str, str] = {}
    nodes: list[Node] = []

    append_children(name, attrs, nodes, children)

    for key, value in attributes.items():
        if value is not None:
            attrs[key.strip("_")] = value

    return Element(name, attrs, tuple(nodes))


def fragment(*children: Shorthand) -> Fragment:
    nodes: list[Node] = []
    append_children(None, None, nodes, children)
    return Fragment(tuple(nodes))


def append_children(
    name: str | None,
    attributes: dict[str, str] | None,
    nodes: list[Node],
    children: Iterable[Shorthand],
) -> None:
    """Process shorthand into ``nodes`` and ``attributes``.

    ``name`` and ``attributes`` are ``None`` when building a fragment,
    which has no attributes to write into.
    """
    label = "root" if name is None else f"<{name}>"

    for index, item in enumerate(children):
        match item:
            case None:
                pass

            case str():
                nodes.append(Text(item))

            case Fragment():
                nodes.extend(item.children)

            case Node():
                nodes.append(item)

            case Mapping():
                if attributes is None:
                    raise ConstructionError(f"attributes are not supported at the {label}")
                _set_attributes(label, attributes, item)

            case bytes() | bytearray():
                raise ConstructionError(f"unsupported child type to {label}: {type(item).__name__}")

            case Iterable():
                try:
                    append_children(name, attributes, nodes, item)
                except ConstructionError as ex:
                    ex.add_frame(name or "root", attributes or {}, index)
                    raise

            case _:
                raise ConstructionError(f"unsupported child type to {label}: {type(item).__name__}")


def _set_attributes(label: str, attributes: dict[str, str], record: Mapping[object, object]) -> None:
    for key, value in record.items():
        if not isinstance(key, str):
            raise ConstructionError(f"attribute names on {label} must be strings, not {key!r}")

        if value is None:
            attributes.pop(key, None)
        elif isinstance(value, str):
            attributes[key] = value
        else:
            raise ConstructionError(
                f"attribute {key} on {label} must be a string, not {type(value).__name__}",
            )


__all__ = [
    "Shorthand",
    "append_children",
    "comment",
    "doctype",
    "element",
    "fragment",
    "raw_html",
    "text",
]
