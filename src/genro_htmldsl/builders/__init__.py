# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Builders for HtmlDsl - base class and the HTML grammar."""

from .base import BuilderBase
from .decorators import element
from .html_builder import HtmlBuilder, html

__all__ = [
    'BuilderBase',
    'element',
    'HtmlBuilder',
    'html',
]
