"""
Aggregate calculations over scenario records.

These functions accept pydantic records or plain mappings so they can be fed
directly from stored rows. None of them raise on empty input and none of them
return NaN or infinity.
"""

from typing import Any, Iterable, Mapping, Optional, Sequence

from pydantic import BaseModel, Field, computed_field

from .frequency import periods_per_year
from .records import ScenarioSnapshot


def _field(record: Any, name: str, default: Any = None) -> Any:
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def total_annual(
    records: Iterable[Any],
    amount_field: str = "amount",
    frequency_field: str = "frequency",
) -> float:
    """
    Sum the annualized amount of a collection of recurring records.

    Args:
        records: Incomes, expenses or any record with an amount and frequency
        amount_field: Name of the per-period amount field
        frequency_field: Name of the frequency field

    Returns:
        Total amount per year (0 for an empty collection)
    """
    return sum(
        (
            _field(record, amount_field, 0) * periods_per_year(_field(record, frequency_field))
            for record in records
        ),
        0.0,
    )


def total_principal(accounts: Iterable[Any]) -> float:
    """Sum the principal (or value) of a collection of accounts."""
    return sum((_field(account, "principal", 0) for account in accounts), 0.0)


def total_annual_payments(accounts: Iterable[Any]) -> float:
    """
    Sum annualized payments, capping each account at its principal.

    A small balance with a large payment can only absorb its own principal
    in a year, so its contribution to the total is limited to that amount.
    """
    total = 0.0
    for account in accounts:
        periods = periods_per_year(_field(account, "contribution_frequency"))
        annual_payment = _field(account, "contribution", 0) * periods
        total += min(annual_payment, _field(account, "principal", 0))
    return total


def total_annual_contributions(accounts: Iterable[Any]) -> float:
    """Sum annualized contributions without any cap."""
    return total_annual(
        accounts, amount_field="contribution", frequency_field="contribution_frequency"
    )


def debt_to_income_ratio(debts: Iterable[Any], incomes: Iterable[Any]) -> float:
    """
    Ratio of annual debt payments to annual income.

    Returns 0 when there is no income.
    """
    annual_income = total_annual(incomes)
    if annual_income <= 0:
        return 0.0
    return total_annual_payments(debts) / annual_income


def weighted_average_rate(debts: Sequence[Any]) -> float:
    """Arithmetic mean of the debts' interest rates (0 when there are none)."""
    if not debts:
        return 0.0
    return sum(_field(debt, "rate", 0) for debt in debts) / len(debts)


class ScenarioSummary(BaseModel):
    """Headline totals for a scenario."""

    total_annual_income: float = Field(..., description="Annualized income")
    total_annual_expense: float = Field(..., description="Annualized expenses")
    total_outstanding_debt: float = Field(..., description="Sum of debt principals")
    total_annual_debt_payments: float = Field(
        ..., description="Annual debt payments, capped per debt at its principal"
    )
    debt_to_income_ratio: float = Field(..., description="Debt payments / income")
    average_interest_rate: float = Field(..., description="Mean debt rate in percent")
    total_assets: float = Field(..., description="Sum of asset values")
    total_annual_contributions: float = Field(
        ..., description="Annualized asset contributions"
    )
    dti_warning_threshold: float = Field(
        default=36.0, description="DTI percent at which debt is considered high"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def annual_cash_flow(self) -> float:
        return self.total_annual_income - self.total_annual_expense

    @computed_field  # type: ignore[prop-decorator]
    @property
    def dti_percent(self) -> float:
        return self.debt_to_income_ratio * 100

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_high_dti(self) -> bool:
        return self.dti_percent >= self.dti_warning_threshold


def summarize_scenario(
    snapshot: ScenarioSnapshot, dti_warning_threshold: Optional[float] = None
) -> ScenarioSummary:
    """Compute the headline totals for a scenario snapshot."""
    incomes = snapshot.incomes or []
    expenses = snapshot.expenses or []
    debts = snapshot.debts or []
    assets = snapshot.assets or []

    overrides = {}
    if dti_warning_threshold is not None:
        overrides["dti_warning_threshold"] = dti_warning_threshold

    return ScenarioSummary(
        total_annual_income=total_annual(incomes),
        total_annual_expense=total_annual(expenses),
        total_outstanding_debt=total_principal(debts),
        total_annual_debt_payments=total_annual_payments(debts),
        debt_to_income_ratio=debt_to_income_ratio(debts, incomes),
        average_interest_rate=weighted_average_rate(debts),
        total_assets=total_principal(assets),
        total_annual_contributions=total_annual_contributions(assets),
        **overrides,
    )
