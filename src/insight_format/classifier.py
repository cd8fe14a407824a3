"""Map a JSON key to the category its numeric value is rendered with.

Providers return ratios as raw fractions (0.234 for 23.4%) but amounts, share
counts and multiples as literal quantities, with no type metadata. The key
name is the only signal, so the rules below are checked in a fixed order:

1. dollar table
2. multiple table
3. non-percent rule (``growth*`` keys excluded, then table, then
   ``eps`` / ``shsout`` substrings)
4. everything else is a percent
"""

from __future__ import annotations

from insight_format.fields import (
    DOLLAR_FIELDS,
    GROWTH_PREFIX,
    MULTIPLE_FIELDS,
    NON_PERCENT_FIELDS,
    NON_PERCENT_SUBSTRINGS,
)
from insight_format.types import FieldCategory


def normalize_key(key: str | None) -> str:
    """Lowercase a key and drop underscores (``"net_Income"`` -> ``"netincome"``)."""
    if not key:
        return ""
    return key.lower().replace("_", "")


def is_dollar_field(key: str | None) -> bool:
    return bool(key) and normalize_key(key) in DOLLAR_FIELDS


def is_multiple_field(key: str | None) -> bool:
    return bool(key) and normalize_key(key) in MULTIPLE_FIELDS


def is_non_percent_field(key: str | None) -> bool:
    """Whether a key holds a literal quantity rather than a fraction.

    ``growth*`` keys are always percentages, even when they mention EPS
    (``growthEPS``). The substring checks run on the lowercase key with
    underscores kept.
    """
    if not key:
        return False
    lower = key.lower()
    if lower.startswith(GROWTH_PREFIX):
        return False
    if normalize_key(key) in NON_PERCENT_FIELDS:
        return True
    return any(part in lower for part in NON_PERCENT_SUBSTRINGS)


def classify_field(key: str | None) -> FieldCategory:
    """Resolve the rendering category for the key enclosing a number."""
    if is_dollar_field(key):
        return FieldCategory.DOLLAR
    if is_multiple_field(key):
        return FieldCategory.MULTIPLE
    if is_non_percent_field(key):
        return FieldCategory.NON_PERCENT
    return FieldCategory.PERCENT
