# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import TYPE_CHECKING, NamedTuple

import enum

if TYPE_CHECKING:
    from collections.abc import Mapping


class DomError(Exception):
    pass


class Frame(NamedTuple):
    element: str
    attributes: Mapping[str, str]
    index: int

    def __str__(self) -> str:
        attributes = "".join(f' {key}="{value}"' for key, value in self.attributes.items())
        return f"{self.element}{attributes}:{self.index}"


class ConstructionError(DomError, TypeError):
    """Raised when shorthand can not be turned into nodes.

    Errors raised while building nested content are re-raised by each
    enclosing builder with a :class:`Frame` appended to ``trail``, so the
    message points at where in the shorthand the problem was.
    """

    message: str
    trail: list[Frame]

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.trail = []

    def add_frame(self, element: str, attributes: Mapping[str, str], index: int) -> None:
        # Snapshot, as the builder keeps writing into its own dict.
        self.trail.append(Frame(element, dict(attributes), index))

    def __str__(self) -> str:
        return self.message + "".join(f"\n  in {frame}" for frame in self.trail)


class UnsupportedNodeError(DomError, TypeError):
    node: object

    def __init__(self, node: object) -> None:
        super().__init__(f"unsupported node {node!r}")
        self.node = node


class CommentTerminatorError(DomError, ValueError):
    def __init__(self) -> None:
        super().__init__("Comment containing -->")


class ViolationKind(enum.Enum):
    COMMENT_OPENER = "<!-- in text preserving element"
    OPENING_TAG = "opening tag in text preserving element"
    CLOSING_TAG = "closing tag in text preserving element"


class TextPreservingViolationError(DomError, ValueError):
    kind: ViolationKind
    element: str

    def __init__(self, kind: ViolationKind, element: str) -> None:
        super().__init__(f"{kind.value} <{element}>")
        self.kind = kind
        self.element = element


__all__ = [
    "CommentTerminatorError",
    "ConstructionError",
    "DomError",
    "Frame",
    "TextPreservingViolationError",
    "UnsupportedNodeError",
    "ViolationKind",
]
