"""
Payment and compounding frequencies.

Every recurring amount and interest-bearing account carries a frequency tag
that is converted to a number of periods per year before any math is done.
A year is treated as 360 days.
"""

import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

FREQUENCY_OPTIONS: Tuple[str, ...] = (
    "daily",
    "weekly",
    "biweekly",
    "monthly",
    "quarterly",
    "semiannually",
    "annually",
)

FREQ_TO_PERIODS: Dict[str, int] = {
    "daily": 360,
    "weekly": 52,
    "biweekly": 26,
    "monthly": 12,
    "quarterly": 4,
    "semiannually": 2,
    "annually": 1,
}

DEFAULT_PERIODS_PER_YEAR = FREQ_TO_PERIODS["monthly"]


def is_known_frequency(frequency: Optional[str]) -> bool:
    """Return True if the tag is one of the supported frequencies."""
    return frequency in FREQ_TO_PERIODS


def periods_per_year(frequency: Optional[str]) -> int:
    """
    Convert a frequency tag to its number of periods per year.

    Unknown or missing tags fall back to monthly (12) so that malformed
    stored records still produce a usable number.

    Args:
        frequency: Frequency tag such as "monthly" or "biweekly"

    Returns:
        Periods per year for the frequency
    """
    periods = FREQ_TO_PERIODS.get(frequency)  # type: ignore[arg-type]
    if periods is None:
        logger.debug(
            f"Unknown frequency {frequency!r}, using {DEFAULT_PERIODS_PER_YEAR} periods per year"
        )
        return DEFAULT_PERIODS_PER_YEAR
    return periods
