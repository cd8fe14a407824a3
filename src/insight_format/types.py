"""Types and constants shared by the classifier, formatter, and transformers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Union


class FieldCategory(str, Enum):
    """How a numeric leaf is rendered, decided by the key that encloses it."""

    DOLLAR = "dollar"
    MULTIPLE = "multiple"
    NON_PERCENT = "non_percent"
    PERCENT = "percent"


# JSON trees come straight out of ``json.loads`` / ``response.json()``.
JsonScalar = Union[None, bool, int, float, str]
JsonValue = Union[JsonScalar, list[Any], dict[str, Any]]

# Decimal places used by every 2-decimal rounding rule.
DEFAULT_DECIMALS = 2

# Percent values at or above this magnitude (already scaled by 100) use
# DEFAULT_DECIMALS; smaller ones switch to significant-digit precision.
SMALL_PERCENT_THRESHOLD = 0.01

# Minimum decimals for very small percentages.
SMALL_PERCENT_MIN_DECIMALS = 4

# Significant digits kept for very small percentages.
SMALL_PERCENT_SIGNIFICANT_DIGITS = 2

# ``toLocaleString('en-US')`` default maximum fraction digits.
LOCALE_MAX_FRACTION_DIGITS = 3

NOT_AVAILABLE = "N/A"
