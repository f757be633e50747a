"""
Net worth projection.

This module projects assets, debts, net worth and available cash flow year by
year from a starting age to a horizon age. Asset values and debt balances are
always evaluated in closed form from year 0, so nothing drifts across years.
Each debt moves one way from active to paid off; once paid off its payment is
added to the available cash flow for every following year.
"""

import logging
import math
from typing import List, Optional, Sequence

import numpy as np
from pydantic import BaseModel, Field, computed_field

from .aggregates import total_annual
from .amortization import DebtCalculator, amortize
from .frequency import periods_per_year
from .growth import compound_growth
from .records import InterestBearingAccount, ProjectionPoint, ScenarioSnapshot

logger = logging.getLogger(__name__)

DEFAULT_END_AGE = 65


class DebtStatus(BaseModel):
    """Working state of one debt during a single projection run."""

    name: str = Field(..., description="Debt name")
    principal: float = Field(..., ge=0, description="Starting principal")
    rate: float = Field(..., ge=0, description="Annual rate in percent")
    payment: float = Field(..., ge=0, description="Payment per period")
    frequency: str = Field(..., description="Payment frequency")
    payoff_periods: Optional[int] = Field(
        None, description="Periods to payoff, None if it never pays off"
    )
    remaining_balance: float = Field(..., description="Balance at the current step")
    is_paid_off: bool = Field(default=False, description="Paid off flag")
    payoff_age: Optional[int] = Field(None, description="Age at which it was retired")

    @classmethod
    def from_debt(cls, debt: InterestBearingAccount) -> "DebtStatus":
        payoff = amortize(
            debt.principal, debt.rate, debt.contribution, debt.contribution_frequency
        )
        return cls(
            name=debt.name,
            principal=debt.principal,
            rate=debt.rate,
            payment=debt.contribution,
            frequency=debt.contribution_frequency,
            payoff_periods=payoff.payoff_periods,
            remaining_balance=debt.principal,
        )

    @property
    def annual_payment(self) -> float:
        return self.payment * periods_per_year(self.frequency)

    @property
    def years_to_payoff(self) -> Optional[float]:
        if self.payoff_periods is None:
            return None
        return self.payoff_periods / periods_per_year(self.frequency)


class DebtPayoffEvent(BaseModel):
    """When a debt is retired within a projection."""

    name: str = Field(..., description="Debt name")
    payoff_periods: Optional[int] = Field(
        None, description="Periods to payoff, None if it never pays off"
    )
    payoff_age: Optional[int] = Field(
        None, description="First projected age with the debt retired"
    )


class NetWorthProjection(BaseModel):
    """A net worth time series with its headline figures."""

    start_age: Optional[int] = Field(None, description="First projected age")
    end_age: int = Field(default=DEFAULT_END_AGE, description="Horizon age")
    points: List[ProjectionPoint] = Field(
        default_factory=list, description="One point per projected year"
    )
    debt_payoffs: List[DebtPayoffEvent] = Field(
        default_factory=list, description="Payoff timing for each debt"
    )

    @property
    def is_empty(self) -> bool:
        return not self.points

    @property
    def is_finite(self) -> bool:
        """False if any value outgrew a float (very large rates or horizons)."""
        return all(
            math.isfinite(value)
            for point in self.points
            for value in (point.net_worth, point.assets, point.debts, point.cash_flow)
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def final_net_worth(self) -> float:
        return self.points[-1].net_worth if self.points else 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def initial_net_worth(self) -> float:
        return self.points[0].net_worth if self.points else 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def net_worth_growth(self) -> float:
        return self.final_net_worth - self.initial_net_worth

    @computed_field  # type: ignore[prop-decorator]
    @property
    def growth_percentage(self) -> float:
        if self.initial_net_worth <= 0:
            return 0.0
        return self.net_worth_growth / self.initial_net_worth * 100


def project_net_worth(
    start_age: Optional[int],
    end_age: int,
    income_total: float,
    expense_total: float,
    debts: Optional[Sequence[InterestBearingAccount]],
    assets: Optional[Sequence[InterestBearingAccount]],
) -> NetWorthProjection:
    """
    Project net worth year by year from start_age to end_age inclusive.

    Args:
        start_age: Age at the first point, None if the scenario is not loaded
        end_age: Age at the last point
        income_total: Annual income
        expense_total: Annual expenses
        debts: Debts to amortize, None if not loaded
        assets: Assets to compound, None if not loaded

    Returns:
        The projection; empty if inputs are not ready or start_age > end_age
    """
    if start_age is None or debts is None or assets is None:
        logger.debug("Projection inputs not ready, returning empty projection")
        return NetWorthProjection(start_age=start_age, end_age=end_age)

    if start_age > end_age:
        logger.debug(f"Start age {start_age} is past horizon {end_age}")
        return NetWorthProjection(start_age=start_age, end_age=end_age)

    debt_status = [DebtStatus.from_debt(debt) for debt in debts]
    annual_cash_flow = income_total - expense_total

    years = np.arange(end_age - start_age + 1, dtype=np.float64)
    asset_values = np.zeros_like(years)
    for asset in assets:
        asset_values += compound_growth(
            asset.principal,
            asset.rate,
            years,
            asset.contribution,
            asset.contribution_frequency,
        )

    points = []
    freed_cash_flow = 0.0

    for age in range(start_age, end_age + 1):
        year = age - start_age
        total_assets_value = float(asset_values[year])
        total_debt_value = 0.0

        for status in debt_status:
            if status.is_paid_off:
                continue

            years_to_payoff = status.years_to_payoff
            if years_to_payoff is not None and year >= years_to_payoff:
                status.is_paid_off = True
                status.remaining_balance = 0.0
                status.payoff_age = age
                freed_cash_flow += status.annual_payment
            else:
                status.remaining_balance = DebtCalculator.calculate_remaining_balance(
                    status.principal, status.rate, status.payment, status.frequency, year
                )

            total_debt_value += max(0.0, status.remaining_balance)

        remaining_debt_payments = sum(
            status.annual_payment for status in debt_status if not status.is_paid_off
        )
        available_cash_flow = annual_cash_flow - remaining_debt_payments + freed_cash_flow

        points.append(
            ProjectionPoint(
                age=age,
                net_worth=total_assets_value - total_debt_value,
                assets=total_assets_value,
                debts=total_debt_value,
                cash_flow=available_cash_flow,
            )
        )

    return NetWorthProjection(
        start_age=start_age,
        end_age=end_age,
        points=points,
        debt_payoffs=[
            DebtPayoffEvent(
                name=status.name,
                payoff_periods=status.payoff_periods,
                payoff_age=status.payoff_age,
            )
            for status in debt_status
        ],
    )


def project_snapshot(
    snapshot: ScenarioSnapshot, end_age: int = DEFAULT_END_AGE
) -> NetWorthProjection:
    """Project a scenario snapshot, aggregating its incomes and expenses first."""
    start_age = snapshot.scenario.age if snapshot.scenario is not None else None
    return project_net_worth(
        start_age=start_age,
        end_age=end_age,
        income_total=total_annual(snapshot.incomes or []),
        expense_total=total_annual(snapshot.expenses or []),
        debts=snapshot.debts,
        assets=snapshot.assets,
    )
