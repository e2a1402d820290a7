# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Render a tree as indented tag markup.

Each node takes one line per tag or text payload:

    <html>
      <body>
        <a href="http://python.org">
          Python
        </a>
      </body>
    </html>

Attributes appear in insertion order. Nothing is escaped.
"""

from __future__ import annotations

from .config import RenderConfig
from .node import Node


def render(
    node: Node,
    indent_unit: str | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Render node and its subtree to text.

    Args:
        node: The root of the subtree to render.
        indent_unit: Prefix added per nesting level. Overrides config.
        config: Render options. Defaults to RenderConfig().

    Returns:
        The rendered text, one newline-terminated line per tag or text.
    """
    if indent_unit is not None:
        config = RenderConfig(indent_unit=indent_unit)
    elif config is None:
        config = RenderConfig()

    output: list[str] = []
    node.render(output, "", config.indent_unit)
    return "".join(output)
