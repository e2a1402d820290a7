# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlBuilder - HTML element builder with per-tag child rules.

This module provides the grammar for a small subset of HTML and the
``html()`` entry point. Every builder operation takes an initializer that
receives the new element, so nested calls mirror the document structure.

Example:
    Creating an HTML document::

        from genro_htmldsl import html, render

        def page_body(body):
            body.h1(lambda h1: h1.append_text('XML encoding with Python'))
            body.p(lambda p: p.append_text('this format can be used as an alternative markup to XML'))
            body.a('http://python.org', lambda a: a.append_text('Python'))
            body.p(lambda p: (
                p.append_text('This is some'),
                p.b(lambda b: b.append_text('mixed')),
                p.append_text('text. For more see the'),
                p.a('http://python.org', lambda a: a.append_text('Python')),
                p.append_text('project'),
            ))

        result = html(lambda root: (
            root.head(lambda head: head.title(lambda t: t.append_text('XML encoding with Python'))),
            root.body(page_body),
        ))
        print(render(result))
"""

from __future__ import annotations

from typing import Any

from ..node import Element
from .base import BuilderBase, Initializer
from .decorators import element

# Tags allowed inside body and inline/flow elements
FLOW_CHILDREN = ('b', 'i', 'p', 'h1', 'h2', 'a', 'ul')


class HtmlBuilder(BuilderBase):
    """Builder for HTML elements.

    Hierarchy:
        html
          ├── head (at most one)
          │     └── title (at most one, text)
          └── body (at most one)
                └── b | i | p | h1 | h2 | a | ul, and text
                      ul:
                        └── li (flow content and text)

    Usage:
        >>> root = html(lambda h: h.body(lambda b: b.p(lambda p: p.append_text('Hi'))))
        >>> root.body(...)  # ConstraintViolationError: root is built

    Subclass it to add tags:
        >>> class MyHtmlBuilder(HtmlBuilder):
        ...     @element(text=True)
        ...     def span(self, target, init=None, **attr):
        ...         return self.child(target, 'span', init, **attr)
    """

    # === Document structure ===

    @element(children=('head[:1]', 'body[:1]'))
    def html(self, target: Element, init: Initializer | None = None, **attr: Any) -> Element:
        """Create an html element. Can contain one head and one body."""
        return self.child(target, 'html', init, **attr)

    @element(children=('title[:1]',))
    def head(self, target: Element, init: Initializer | None = None, **attr: Any) -> Element:
        """Create a head. Can contain one title."""
        return self.child(target, 'head', init, **attr)

    @element(text=True)
    def title(self, target: Element, init: Initializer | None = None, **attr: Any) -> Element:
        """Create a title. Text only."""
        return self.child(target, 'title', init, **attr)

    @element(children=FLOW_CHILDREN, text=True)
    def body(self, target: Element, init: Initializer | None = None, **attr: Any) -> Element:
        """Create a body."""
        return self.child(target, 'body', init, **attr)

    # === Flow content ===

    @element(children=FLOW_CHILDREN, text=True)
    def p(self, target: Element, init: Initializer | None = None, **attr: Any) -> Element:
        return self.child(target, 'p', init, **attr)

    @element(children=FLOW_CHILDREN, text=True)
    def b(self, target: Element, init: Initializer | None = None, **attr: Any) -> Element:
        return self.child(target, 'b', init, **attr)

    @element(children=FLOW_CHILDREN, text=True)
    def i(self, target: Element, init: Initializer | None = None, **attr: Any) -> Element:
        return self.child(target, 'i', init, **attr)

    @element(children=FLOW_CHILDREN, text=True)
    def h1(self, target: Element, init: Initializer | None = None, **attr: Any) -> Element:
        return self.child(target, 'h1', init, **attr)

    @element(children=FLOW_CHILDREN, text=True)
    def h2(self, target: Element, init: Initializer | None = None, **attr: Any) -> Element:
        return self.child(target, 'h2', init, **attr)

    @element(children=FLOW_CHILDREN, text=True, attrs=('href',))
    def a(
        self,
        target: Element,
        href: str,
        init: Initializer | None = None,
        **attr: Any
    ) -> Element:
        """Create a hyperlink.

        The href attribute is set once init returns, so reading
        ``a.href`` inside the initializer raises MissingAttributeError.
        """
        return self.child(target, 'a', init, _post_attr={'href': href}, **attr)

    # === Lists ===

    @element(children=('li',))
    def ul(self, target: Element, init: Initializer | None = None, **attr: Any) -> Element:
        """Create an unordered list. Can contain only li."""
        return self.child(target, 'ul', init, **attr)

    @element(children=FLOW_CHILDREN, text=True)
    def li(self, target: Element, init: Initializer | None = None, **attr: Any) -> Element:
        return self.child(target, 'li', init, **attr)


def html(
    init: Initializer,
    builder: BuilderBase | None = None,
    **attr: Any
) -> Element:
    """Build an html document.

    Args:
        init: Callable receiving the html root element. Required.
        builder: Builder providing the grammar. Defaults to HtmlBuilder().
        **attr: Attributes of the html element.

    Returns:
        The built html root element.

    Raises:
        ConstraintViolationError: If init is missing or not callable.
    """
    if builder is None:
        builder = HtmlBuilder()
    return builder.root('html', init, **attr)
