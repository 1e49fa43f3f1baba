# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Node types making up a document tree.

Nodes are frozen once built. Anything that wants a different tree (such as
the prettifier) makes new nodes.
"""

from __future__ import annotations as _future_annotations

from collections.abc import Mapping
from types import MappingProxyType

import abc
import dataclasses


class Node(abc.ABC):  # pylint: disable=too-few-public-methods
    __slots__ = ()

    @property
    def html(self) -> str:
        from tinydom.serializer import serialize_node  # pylint: disable=import-outside-toplevel

        return serialize_node(self)

    def __str__(self) -> str:
        return self.html


@dataclasses.dataclass(frozen=True, slots=True)
class DocumentType(Node):
    name: str


@dataclasses.dataclass(frozen=True, slots=True)
class Text(Node):
    data: str


@dataclasses.dataclass(frozen=True, slots=True)
class Comment(Node):
    # Must not contain "-->"; enforced when serialized.
    data: str


@dataclasses.dataclass(frozen=True, slots=True)
class RawHtml(Node):
    """Trusted markup, written out exactly as given."""

    data: str


@dataclasses.dataclass(frozen=True, slots=True)
class Element(Node):
    name: str
    attributes: Mapping[str, str] = dataclasses.field(default_factory=dict, hash=False)
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        # Read-only copy, so the caller's dict can not change a built tree.
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))


@dataclasses.dataclass(frozen=True, slots=True)
class Fragment(Node):
    """Unnamed container for top-level nodes. Never written out as a tag."""

    children: tuple[Node, ...] = ()
