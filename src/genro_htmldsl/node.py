# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlDsl node classes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import partial
from types import MappingProxyType
from typing import Any, Iterator, Mapping, TYPE_CHECKING

from .config import DEFAULT_INDENT_UNIT
from .exceptions import ConstraintViolationError, MissingAttributeError

if TYPE_CHECKING:
    from .builders.base import BuilderBase


class Node(ABC):
    """A member of a rendered tree."""

    __slots__ = ()

    @abstractmethod
    def render(
        self,
        output: list[str],
        indent: str = "",
        indent_unit: str = DEFAULT_INDENT_UNIT,
    ) -> None:
        """Append this node's lines to output.

        Args:
            output: List collecting rendered lines, each ending with a newline.
            indent: Prefix for this node's lines.
            indent_unit: Extra prefix added for each nesting level below.
        """


class TextNode(Node):
    """A leaf holding literal text.

    Example:
        >>> out = []
        >>> TextNode('Hello').render(out, '  ')
        >>> out
        ['  Hello\\n']
    """

    __slots__ = ('_text',)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")
        self._text = text

    @property
    def text(self) -> str:
        """The text payload."""
        return self._text

    def __repr__(self) -> str:
        return f"TextNode({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextNode):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def render(
        self,
        output: list[str],
        indent: str = "",
        indent_unit: str = DEFAULT_INDENT_UNIT,
    ) -> None:
        output.append(f"{indent}{self._text}\n")


class Element(Node):
    """An element with a tag, ordered children and attributes.

    Elements are created by builder operations. While the initializer
    passed to the operation runs, the element is *building* and accepts
    children, text and attributes. Once the operation returns, the
    element is *built* and every further mutation raises
    ConstraintViolationError.

    Child operations are resolved through the builder: ``body.p(init)``
    calls ``builder.p(body, init)``, which checks that ``p`` is a valid
    child of ``body``. Required attributes declared by the grammar (like
    ``href`` on ``a``) are readable as plain attributes.

    Example:
        >>> root = html(lambda h: h.body(lambda b: b.append_text('Hi')))
        >>> [child.tag for child in root.children]
        ['body']
    """

    __slots__ = ('_tag', '_children', '_attr', '_builder', '_built', '_busy')

    def __init__(
        self,
        tag: str,
        attr: dict[str, Any] | None = None,
        builder: BuilderBase | None = None,
    ) -> None:
        """Initialize an Element.

        Builder operations create elements and move them from building
        to built. An element constructed directly stays building, so it
        accepts mutations until discarded and skips the grammar checks
        done by BuilderBase.child().

        Args:
            tag: The element's tag name. Cannot be changed afterwards.
            attr: Optional initial attributes, stored with their keys as
                given.
            builder: The builder providing child operations and rules.
                Without a builder the element accepts text and attributes
                but has no child operations.
        """
        if not isinstance(tag, str) or not tag:
            raise ValueError(f"tag must be a non-empty string, got {tag!r}")
        self._tag = tag
        self._children: list[Node] = []
        self._attr: dict[str, str] = {}
        self._builder = builder
        self._built = False
        self._busy: Element | None = None
        if attr:
            self.set_attr(attr)

    def __repr__(self) -> str:
        return f"Element({self._tag!r}, children={len(self._children)})"

    def __str__(self) -> str:
        from .renderer import render
        return render(self)

    def __getattr__(self, name: str) -> Any:
        """Resolve required attributes and child operations via the builder.

        Raises:
            MissingAttributeError: If name is a required attribute not yet set.
            AttributeError: If the builder knows nothing about name.
        """
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        builder = self._builder
        if builder is not None:
            if name in builder.required_attributes(self._tag):
                return self.require_attr(name)
            if name in builder.tags:
                return partial(getattr(builder, name), self)
            raise AttributeError(
                f"'{type(builder).__name__}' has no element '{name}'"
            )

        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'"
        )

    # ==================== Properties ====================

    @property
    def tag(self) -> str:
        """The element's tag name."""
        return self._tag

    @property
    def children(self) -> tuple[Node, ...]:
        """Child nodes in append order."""
        return tuple(self._children)

    @property
    def attributes(self) -> Mapping[str, str]:
        """Read-only view of the attributes in insertion order."""
        return MappingProxyType(self._attr)

    @property
    def builder(self) -> BuilderBase | None:
        """Access the builder instance."""
        return self._builder

    @property
    def is_built(self) -> bool:
        """True once the element's initializer has returned."""
        return self._built

    # ==================== Mutation ====================

    def _check_open(self, action: str) -> None:
        """Raise unless this element accepts mutations right now."""
        if self._built:
            raise ConstraintViolationError(
                f"Cannot {action}: '{self._tag}' is already built"
            )
        if self._busy is not None:
            raise ConstraintViolationError(
                f"Cannot {action} on '{self._tag}' while its child "
                f"'{self._busy.tag}' is building"
            )

    def _append(self, node: Node) -> None:
        self._children.append(node)

    def _freeze(self) -> None:
        self._built = True

    def append_text(self, text: str) -> TextNode:
        """Append a text leaf to this element.

        Args:
            text: The literal text, rendered verbatim on its own line.

        Returns:
            The new TextNode.

        Raises:
            ConstraintViolationError: If the element is not building or does
                not accept text content.
        """
        self._check_open("append text")
        if self._builder is not None and not self._builder.accepts_text(self._tag):
            raise ConstraintViolationError(
                f"'{self._tag}' does not accept text content"
            )
        node = TextNode(text)
        self._append(node)
        return node

    def set_attr(self, _attr: dict[str, Any] | None = None, **kwargs: Any) -> None:
        """Set attributes on the element.

        Setting an existing key replaces its value and keeps its position.
        A trailing underscore in a keyword name is dropped, so ``class_``
        sets ``class``.

        Args:
            _attr: Dictionary of attributes to set.
            **kwargs: Additional attributes as keyword arguments.
        """
        self._check_open("set attributes")
        if _attr:
            for key, value in _attr.items():
                self._attr[key] = str(value)
        for key, value in kwargs.items():
            self._attr[key.rstrip('_') or key] = str(value)

    def get_attr(self, attr: str | None = None, default: Any = None) -> Any:
        """Get attribute value or all attributes.

        Args:
            attr: Attribute name. If None, returns all attributes.
            default: Default value if attribute not found.

        Returns:
            Attribute value, default, or dict of all attributes.
        """
        if attr is None:
            return dict(self._attr)
        return self._attr.get(attr, default)

    def require_attr(self, attr: str) -> str:
        """Get an attribute that must have been set.

        Raises:
            MissingAttributeError: If the attribute is not set.
        """
        try:
            return self._attr[attr]
        except KeyError:
            raise MissingAttributeError(
                f"'{self._tag}' attribute '{attr}' has not been set"
            ) from None

    # ==================== Traversal ====================

    def walk(self, _depth: int = 0) -> Iterator[tuple[int, Node]]:
        """Yield (depth, node) pairs depth-first, starting with this element.

        Example:
            >>> for depth, node in root.walk():
            ...     print(depth, node)
        """
        yield _depth, self
        for child in self._children:
            if isinstance(child, Element):
                yield from child.walk(_depth + 1)
            else:
                yield _depth + 1, child

    def render(
        self,
        output: list[str],
        indent: str = "",
        indent_unit: str = DEFAULT_INDENT_UNIT,
    ) -> None:
        attrs = "".join(f' {k}="{v}"' for k, v in self._attr.items())
        output.append(f"{indent}<{self._tag}{attrs}>\n")
        for child in self._children:
            child.render(output, indent + indent_unit, indent_unit)
        output.append(f"{indent}</{self._tag}>\n")
