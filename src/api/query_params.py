# This file handles parsing of list filter query parameters.
# It exists so every router applies the same rules to optional text and numeric filters.
# Empty values are treated as absent, and malformed numbers raise ValueError for the router to map.
# Centralizing this logic keeps endpoint code small and avoids inconsistent query semantics.

from __future__ import annotations

import math


def normalize_text_filter(raw: str | None) -> str | None:
    """Return None for missing or blank filter text."""

    if raw is None or raw.strip() == "":
        return None
    return raw


def parse_number_filter(raw: str | None, *, param: str) -> float | None:
    """Parse a numeric bound such as `minPrice`; blank input means no bound."""

    if raw is None or raw.strip() == "":
        return None
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{param} must be a number") from exc
    if math.isnan(value):
        raise ValueError(f"{param} must be a number")
    return value
