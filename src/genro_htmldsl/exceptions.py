# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlDsl exceptions."""

from __future__ import annotations


class HtmlDslError(Exception):
    """Base exception for HtmlDsl errors."""

    pass


class MissingAttributeError(HtmlDslError, AttributeError):
    """Raised when a required attribute is read before being set."""

    pass


class ConstraintViolationError(HtmlDslError):
    """Raised when a builder operation would break the tree invariants.

    Covers children not permitted by the parent's grammar, exceeded
    cardinality, text in elements that do not accept it, mutation of a
    built element and appending to an element from inside the
    initializer of one of its children.
    """

    pass
