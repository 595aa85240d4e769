"""Domain services package."""

from .finance import (
    grand_total,
    latest_period_amounts,
    nonzero_amounts,
    section_total,
)
from .periods import (
    DateRangePreset,
    preset_date_range,
    previous_month_bounds,
    shift_month,
)
from .serialization import to_jsonable
from .validation import (
    validate_compound_report,
    validate_period_alignment,
    validate_periodic_balance,
)

__all__ = [
    "grand_total",
    "latest_period_amounts",
    "nonzero_amounts",
    "section_total",
    "DateRangePreset",
    "preset_date_range",
    "previous_month_bounds",
    "shift_month",
    "to_jsonable",
    "validate_compound_report",
    "validate_period_alignment",
    "validate_periodic_balance",
]
