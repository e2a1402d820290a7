# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""BuilderBase - Abstract base class for HtmlDsl builders."""

from __future__ import annotations

import logging
from abc import ABC
from typing import Any, Callable

from ..exceptions import ConstraintViolationError
from ..node import Element

logger = logging.getLogger(__name__)

Initializer = Callable[[Element], Any]


class BuilderBase(ABC):
    """Abstract base class for HtmlDsl builders.

    A builder provides one method per element tag. Each method is
    decorated with @element, which declares the tags it may contain,
    whether it accepts text and its required attributes:

        @element(children=('item',), text=True)
        def menu(self, target, init=None, **attr):
            return self.child(target, 'menu', init, **attr)

    The class automatically builds a _element_tags dict mapping
    tag names to methods via __init_subclass__. Subclasses inherit
    and may extend or override the tags of their parents.

    Elements delegate unknown attributes to their builder, so
    ``node.menu(init)`` calls ``builder.menu(node, init)``.
    """

    # Class-level dict mapping tag -> method name
    _element_tags: dict[str, str] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Build the _element_tags dict from @element decorated methods."""
        super().__init_subclass__(**kwargs)

        # Start with parent's tags if any
        cls._element_tags = {}
        for base in cls.__mro__[1:]:
            if hasattr(base, '_element_tags'):
                cls._element_tags.update(base._element_tags)
                break

        for name, method in cls.__dict__.items():
            if name.startswith('_'):
                continue
            if not (callable(method) and hasattr(method, '_valid_children')):
                continue
            # Element members win attribute lookup, so these names could never be built
            shadowed = sorted(
                n for n in ({name} | method._required_attrs) if hasattr(Element, n)
            )
            if shadowed:
                raise TypeError(
                    f"'{cls.__name__}.{name}' uses reserved Element "
                    f"name(s): {', '.join(shadowed)}"
                )
            cls._element_tags[name] = name

    # ==================== Rules ====================

    @property
    def tags(self) -> frozenset[str]:
        """All element tags this builder can create."""
        return frozenset(type(self)._element_tags)

    def _get_rules(self, tag: str) -> Callable | None:
        """Return the decorated method holding the rules for tag, if any.

        A subclass overriding a tag method without @element keeps the
        rules of the nearest decorated definition in the MRO.
        """
        method_name = type(self)._element_tags.get(tag)
        if method_name is None:
            return None
        for klass in type(self).__mro__:
            method = klass.__dict__.get(method_name)
            if method is not None and hasattr(method, '_valid_children'):
                return method
        return None

    def valid_children(self, tag: str) -> frozenset[str] | None:
        """Tags permitted as children of tag, or None if tag has no rules."""
        rules = self._get_rules(tag)
        return None if rules is None else rules._valid_children

    def cardinality(self, tag: str) -> dict[str, tuple[int, int | None]]:
        """Per-child (min, max) counts declared for tag."""
        rules = self._get_rules(tag)
        return {} if rules is None else rules._child_cardinality

    def accepts_text(self, tag: str) -> bool:
        """True if elements with this tag accept text children.

        Tags without rules accept text.
        """
        rules = self._get_rules(tag)
        return True if rules is None else rules._accepts_text

    def required_attributes(self, tag: str) -> frozenset[str]:
        """Names of the attributes an element with this tag must carry."""
        rules = self._get_rules(tag)
        return frozenset() if rules is None else rules._required_attrs

    # ==================== Construction ====================

    def _violation(self, message: str) -> ConstraintViolationError:
        logger.debug("Constraint violation: %s", message)
        return ConstraintViolationError(message)

    def _check_child(self, target: Element, tag: str) -> None:
        """Raise unless a tag child can be appended to target now."""
        target._check_open(f"add '{tag}'")

        valid = self.valid_children(target.tag)
        if valid is None:
            return
        if tag not in valid:
            if valid:
                raise self._violation(
                    f"'{tag}' is not a valid child of '{target.tag}'. "
                    f"Valid children: {', '.join(sorted(valid))}"
                )
            raise self._violation(
                f"'{tag}' is not a valid child of '{target.tag}'. "
                f"'{target.tag}' cannot have children"
            )

        _, max_count = self.cardinality(target.tag).get(tag, (0, None))
        if max_count is not None:
            actual = sum(
                1 for c in target.children
                if isinstance(c, Element) and c.tag == tag
            )
            if actual >= max_count:
                raise self._violation(
                    f"'{target.tag}' allows at most {max_count} '{tag}'"
                )

    def _check_required_children(self, node: Element) -> None:
        """Raise if node has fewer children of a tag than its rules require."""
        counts: dict[str, int] = {}
        for c in node.children:
            if isinstance(c, Element):
                counts[c.tag] = counts.get(c.tag, 0) + 1

        for tag, (min_count, _) in self.cardinality(node.tag).items():
            actual = counts.get(tag, 0)
            if actual < min_count:
                raise self._violation(
                    f"'{node.tag}' requires at least {min_count} '{tag}', "
                    f"but has {actual}"
                )

    def _build(
        self,
        node: Element,
        init: Initializer | None,
        post_attr: dict[str, Any] | None,
        parent: Element | None = None,
    ) -> Element:
        """Run init on node, apply late attributes, then freeze it."""
        if parent is not None:
            parent._busy = node
        try:
            if init is not None:
                init(node)
        finally:
            if parent is not None:
                parent._busy = None

        if post_attr:
            node.set_attr(post_attr)
        self._check_required_children(node)
        node._freeze()
        return node

    def child(
        self,
        target: Element,
        tag: str,
        init: Initializer | None = None,
        _post_attr: dict[str, Any] | None = None,
        **attr: Any
    ) -> Element:
        """Create a child element, initialize it and append it to target.

        Args:
            target: The building element to add the child to.
            tag: The child's tag name.
            init: Optional callable receiving the new element. It runs to
                completion before the child is appended.
            _post_attr: Attributes set after init returns.
            **attr: Attributes set before init runs.

        Returns:
            The built child element.

        Raises:
            ConstraintViolationError: If target cannot accept the child, or
                init is not callable, or the child misses required children.

        Example:
            >>> builder.child(body, 'p', lambda p: p.append_text('Hello'))
            >>> builder.child(body, 'a', _post_attr={'href': url})
        """
        self._check_child(target, tag)
        if init is not None and not callable(init):
            raise self._violation(
                f"Initializer for '{tag}' must be callable, "
                f"not {type(init).__name__}"
            )

        node = Element(tag, builder=self)
        node.set_attr(**attr)
        logger.debug("Building '%s' under '%s'", tag, target.tag)
        self._build(node, init, _post_attr, parent=target)
        target._append(node)
        return node

    def root(self, tag: str, init: Initializer, **attr: Any) -> Element:
        """Create a root element with no parent.

        Args:
            tag: The root's tag name.
            init: Callable receiving the root element. Required.
            **attr: Root attributes.

        Returns:
            The built root element.

        Raises:
            ConstraintViolationError: If init is missing or not callable.
        """
        if init is None or not callable(init):
            raise self._violation(
                f"Root '{tag}' requires a callable initializer"
            )
        node = Element(tag, builder=self)
        node.set_attr(**attr)
        logger.debug("Building root '%s'", tag)
        return self._build(node, init, None)
