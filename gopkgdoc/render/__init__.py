"""Declaration rendering in gofmt layout."""

from __future__ import annotations

from .printer import FILTERED_FIELDS, FILTERED_METHODS, DeclarationRenderer
from .tabwriter import align

__all__ = ["DeclarationRenderer", "FILTERED_FIELDS", "FILTERED_METHODS", "align"]
