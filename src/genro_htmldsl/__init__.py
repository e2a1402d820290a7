# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HtmlDsl - Build HTML trees with nested initializers.

A lightweight, zero-dependency library for building element trees
through a fluent API checked against a per-tag grammar, and rendering
them as indented markup.
"""

__version__ = "0.1.0"

from .builders import BuilderBase, HtmlBuilder, element, html
from .config import RenderConfig
from .exceptions import (
    ConstraintViolationError,
    HtmlDslError,
    MissingAttributeError,
)
from .node import Element, Node, TextNode
from .renderer import render

__all__ = [
    # Nodes
    "Node",
    "TextNode",
    "Element",
    # Builders
    "BuilderBase",
    "HtmlBuilder",
    "element",
    "html",
    # Rendering
    "render",
    "RenderConfig",
    # Exceptions
    "HtmlDslError",
    "MissingAttributeError",
    "ConstraintViolationError",
]
