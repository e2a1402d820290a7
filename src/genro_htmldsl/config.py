# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Rendering configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_INDENT_UNIT = "  "


@dataclass(frozen=True)
class RenderConfig:
    """Options for rendering a tree to text.

    Attributes:
        indent_unit: Whitespace added once per nesting level.

    Example:
        >>> render(root, config=RenderConfig(indent_unit='\\t'))
    """

    indent_unit: str = DEFAULT_INDENT_UNIT

    def __post_init__(self) -> None:
        """Validate render configuration."""
        if not isinstance(self.indent_unit, str):
            raise TypeError(
                f"indent_unit must be str, not {type(self.indent_unit).__name__}"
            )
        if not self.indent_unit:
            raise ValueError("indent_unit must not be empty")
        if self.indent_unit.strip(" \t"):
            raise ValueError(
                f"indent_unit must contain only spaces or tabs: {self.indent_unit!r}"
            )
