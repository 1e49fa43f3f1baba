# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

"""Runtime for JSX-style component calls.

Intrinsic tags (strings) are built with :func:`tinydom.builder.element`;
anything else is treated as a component and called with the props.
"""

from __future__ import annotations as _future_annotations

from collections.abc import Callable, Mapping
from typing import Any

from tinydom.builder import Shorthand, element


def jsx(
    type_: str | Callable[[Mapping[str, Any]], Shorthand],
    props: Mapping[str, Any],
    key: object = None,  # noqa: ARG001
) -> Shorthand:
    if isinstance(type_, str):
        if "children" in props:
            attributes = {name: value for name, value in props.items() if name != "children"}
            return element(type_, attributes, props["children"])
        return element(type_, props)

    return type_(props)


def Fragment(props: Mapping[str, Any]) -> Shorthand:  # noqa: N802 pylint: disable=invalid-name
    return props.get("children")  # type: ignore[no-any-return]


jsxs = jsx
jsx_dev = jsx

__all__ = ["Fragment", "jsx", "jsx_dev", "jsxs"]
