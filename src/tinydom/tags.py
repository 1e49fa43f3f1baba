# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Build elements from nested tag lists.

A tag list is the element name followed by its contents::

    ["nav", "menu", "left", {"id": "main"},
        ["a", {"href": "/"}, text("Home")],
    ]

In this form bare strings are class names: they are joined with spaces
into the ``class`` attribute. A ``class`` key in an attribute mapping
replaces whatever classes were collected before it, and any later bare
strings are added on to it. Text has to be written with :func:`text`.
"""

from __future__ import annotations as _future_annotations

from collections.abc import Mapping, Sequence

from tinydom.errors import ConstructionError
from tinydom.nodes import Element, Node


def tag(spec: Sequence[object]) -> Element:
    if not isinstance(spec, list | tuple):
        raise ConstructionError("tag must be a list")

    if not spec or not isinstance(spec[0], str):
        first = spec[0] if spec else None
        raise ConstructionError(f"first element in tag must be a string, not {first!r}")

    name = spec[0]
    attributes: dict[str, str] = {}
    children: list[Node] = []

    for index, item in enumerate(spec[1:], start=1):
        match item:
            case None:
                pass

            case str():
                current = attributes.get("class")
                attributes["class"] = item if current is None else f"{current} {item}"

            case list() | tuple():
                try:
                    children.append(tag(item))
                except ConstructionError as ex:
                    ex.add_frame(name, attributes, index)
                    raise

            case Node():
                children.append(item)

            case Mapping():
                for key, value in item.items():
                    if not isinstance(key, str) or not isinstance(value, str):
                        raise ConstructionError(f"invalid attribute {key!r}={value!r} on <{name}>")
                    attributes[key] = value

            case _:
                raise ConstructionError(f"unsupported content type {type(item).__name__}")

    return Element(name, attributes, tuple(children))


__all__ = ["tag"]
