"""
Compound growth of assets with periodic contributions.

Future value is the growth of the starting principal plus the future value of
an ordinary annuity of contributions. ``elapsed_years`` may be a scalar or a
numpy array, so a whole projection horizon can be evaluated in one call.
"""

from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from .frequency import periods_per_year

Years = Union[float, NDArray[np.float64]]


def compound_growth(
    principal: float,
    annual_rate: float,
    elapsed_years: Years,
    contribution: float,
    contribution_frequency: Optional[str],
) -> Years:
    """
    Calculate the future value of a balance with periodic contributions.

    Args:
        principal: Starting value
        annual_rate: Annual growth rate in percent (e.g., 8 for 8%)
        elapsed_years: Years from now, may be fractional or an array of years
        contribution: Amount added at the end of each period
        contribution_frequency: Frequency of contributions and compounding

    Returns:
        Future value, with the same shape as ``elapsed_years``
    """
    periods_year = periods_per_year(contribution_frequency)
    periods = np.multiply(elapsed_years, periods_year, dtype=np.float64)
    periodic_rate = annual_rate / 100 / periods_year

    if periodic_rate <= 0:
        return principal + contribution * periods

    # (1 + r)^n - 1 without cancellation at small r
    growth_less_one = np.expm1(periods * np.log1p(periodic_rate))
    fv_principal = principal * (1 + growth_less_one)
    fv_annuity = contribution * (growth_less_one / periodic_rate)

    return fv_principal + fv_annuity


def future_value(
    principal: float,
    annual_rate: float,
    elapsed_years: float,
    contribution: float,
    contribution_frequency: Optional[str],
) -> float:
    """Scalar wrapper around compound_growth returning a plain float."""
    return float(
        compound_growth(
            principal, annual_rate, elapsed_years, contribution, contribution_frequency
        )
    )
