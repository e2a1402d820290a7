# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Decorator declaring the rules of builder methods."""

from __future__ import annotations

import re
from functools import wraps
from typing import Callable, Any


# Pattern for tag with optional cardinality: tag, tag[n], tag[n:], tag[:m], tag[n:m]
_TAG_PATTERN = re.compile(r'^([a-zA-Z_][a-zA-Z0-9_]*)\s*(?:\[(\d*)(:?)(\d*)\])?$')


def _parse_tag_spec(spec: str) -> tuple[str, int, int | None]:
    """Parse a tag specification with optional cardinality.

    Args:
        spec: Tag spec like 'foo', 'foo[1]', 'foo[1:]', 'foo[:2]', 'foo[1:3]'

    Returns:
        Tuple of (tag_name, min_count, max_count)

    Raises:
        ValueError: If spec format is invalid.

    Examples:
        >>> _parse_tag_spec('foo')
        ('foo', 0, None)
        >>> _parse_tag_spec('foo[1]')
        ('foo', 1, 1)
        >>> _parse_tag_spec('foo[2:]')
        ('foo', 2, None)
        >>> _parse_tag_spec('foo[:3]')
        ('foo', 0, 3)
        >>> _parse_tag_spec('foo[1:3]')
        ('foo', 1, 3)
    """
    match = _TAG_PATTERN.match(spec.strip())
    if not match:
        raise ValueError(f"Invalid tag specification: '{spec}'")

    tag, min_str, colon, max_str = match.groups()

    # No brackets: unlimited (0..∞)
    if min_str is None:
        return tag, 0, None

    if not colon:
        # tag[n] - exactly n
        if not min_str:
            raise ValueError(f"Invalid tag specification: '{spec}'")
        n = int(min_str)
        return tag, n, n

    min_count = int(min_str) if min_str else 0
    max_count = int(max_str) if max_str else None
    if max_count is not None and max_count < min_count:
        raise ValueError(f"Invalid cardinality in '{spec}': max is lower than min")

    return tag, min_count, max_count


def element(
    children: tuple[str, ...] | str = (),
    text: bool = False,
    attrs: tuple[str, ...] = (),
) -> Callable:
    """Decorator declaring the capabilities of a builder method.

    The decorated method's name is used as the element tag. The rules
    are stored on the method and enforced by BuilderBase.child().

    Args:
        children: Valid child tag specs, as a tuple or a comma-separated
            string. Each can be:
            - 'tag' - allowed, no cardinality constraint (0..∞)
            - 'tag[n]' - exactly n required
            - 'tag[n:]' - at least n required
            - 'tag[:m]' - at most m allowed
            - 'tag[n:m]' - between n and m (inclusive)
            Empty means no element children allowed.
        text: True if the element accepts text children.
        attrs: Names of required attributes, readable as node attributes
            and raising MissingAttributeError until set.

    Example:
        >>> class MenuBuilder(BuilderBase):
        ...     @element(children=('section', 'item[1:]'))  # item required
        ...     def menu(self, target, init=None, **attr):
        ...         return self.child(target, 'menu', init, **attr)
        ...
        ...     @element(text=True)  # text only
        ...     def item(self, target, init=None, **attr):
        ...         return self.child(target, 'item', init, **attr)
    """
    if isinstance(children, str):
        children = tuple(s for s in children.split(',') if s.strip())

    # Parse all tag specs
    parsed: dict[str, tuple[int, int | None]] = {}
    for spec in children:
        tag, min_c, max_c = _parse_tag_spec(spec)
        parsed[tag] = (min_c, max_c)

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return func(*args, **kwargs)

        # _valid_children: set of allowed tag names
        # _child_cardinality: dict mapping tag -> (min, max)
        wrapper._valid_children = frozenset(parsed.keys())
        wrapper._child_cardinality = parsed
        wrapper._accepts_text = bool(text)
        wrapper._required_attrs = frozenset(attrs)

        return wrapper

    return decorator
