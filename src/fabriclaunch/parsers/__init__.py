"""Descriptor parsers."""

from __future__ import annotations

from .descriptor import extract_description, read_pattern_description

__all__ = ["extract_description", "read_pattern_description"]
