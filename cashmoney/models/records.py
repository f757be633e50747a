"""
Pydantic models for scenario records.

Incomes, expenses, debts and assets all belong to a scenario. The projection
engine only ever reads these records; it never writes back to them.
"""

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, Field, model_validator


class RecurringAmount(BaseModel):
    """An amount that recurs at a fixed frequency."""

    id: Optional[int] = Field(None, description="Record identifier")
    scenario_id: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("scenario_id", "scenarioId"),
        description="Owning scenario",
    )
    name: str = Field(default="", description="Display name")
    amount: float = Field(..., ge=0, description="Amount per period")
    frequency: str = Field(default="monthly", description="Payment frequency")


class Income(RecurringAmount):
    """A recurring income."""


class Expense(RecurringAmount):
    """A recurring expense."""


class InterestBearingAccount(BaseModel):
    """
    A balance that accrues interest and receives periodic contributions.

    For a debt the principal is paid down by the contribution (the minimum
    payment); for an asset the value grows and the contribution is added.
    ``rate`` is an annual percentage, e.g. 15 for 15%.

    Older records carry a single ``frequency`` field used for both the
    compounding and the contribution cadence; it fills whichever of the two
    is missing.
    """

    id: Optional[int] = Field(None, description="Record identifier")
    scenario_id: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("scenario_id", "scenarioId"),
        description="Owning scenario",
    )
    name: str = Field(default="", description="Display name")
    principal: float = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("principal", "value"),
        description="Outstanding principal (debts) or current value (assets)",
    )
    rate: float = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices(
            "rate", "interest_rate", "interestRate", "growth_rate", "growthRate"
        ),
        description="Annual interest or growth rate in percent",
    )
    compound: str = Field(default="monthly", description="Compounding frequency")
    contribution: float = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices(
            "contribution", "minimum_payment", "minimumPayment"
        ),
        description="Payment (debts) or contribution (assets) per period",
    )
    contribution_frequency: str = Field(
        default="monthly",
        validation_alias=AliasChoices(
            "contribution_frequency", "contributionFrequency"
        ),
        description="Payment or contribution frequency",
    )

    @model_validator(mode="before")
    @classmethod
    def expand_single_frequency(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "frequency" not in data:
            return data
        data = dict(data)
        frequency = data.pop("frequency")
        data.setdefault("compound", frequency)
        if "contributionFrequency" not in data:
            data.setdefault("contribution_frequency", frequency)
        return data


class Debt(InterestBearingAccount):
    """A liability paid down by its minimum payment."""


class Asset(InterestBearingAccount):
    """An asset that compounds and receives contributions."""


class Scenario(BaseModel):
    """A named planning context."""

    id: Optional[int] = Field(None, description="Scenario identifier")
    name: str = Field(default="Default", min_length=1, description="Scenario name")
    age: int = Field(default=20, ge=0, le=150, description="Starting age")


class ScenarioSnapshot(BaseModel):
    """
    A consistent read of everything owned by one scenario.

    ``None`` for a collection means it has not been loaded yet, which the
    projector treats as "not ready" rather than as an empty list.
    """

    scenario: Optional[Scenario] = Field(None, description="The scenario itself")
    incomes: Optional[List[Income]] = Field(default_factory=list)
    expenses: Optional[List[Expense]] = Field(default_factory=list)
    debts: Optional[List[Debt]] = Field(default_factory=list)
    assets: Optional[List[Asset]] = Field(default_factory=list)


class ProjectionPoint(BaseModel):
    """One year of a net worth projection."""

    age: int = Field(..., description="Age for this point")
    net_worth: float = Field(..., description="Assets minus debts")
    assets: float = Field(..., description="Total asset value")
    debts: float = Field(..., description="Total outstanding debt")
    cash_flow: float = Field(..., description="Available annual cash flow")


def create_sample_income() -> Income:
    """Create a sample income matching the defaults of a new record."""
    return Income(name="New income", amount=1_000.0, frequency="monthly")


def create_sample_expense() -> Expense:
    """Create a sample expense matching the defaults of a new record."""
    return Expense(name="New expense", amount=1_000.0, frequency="monthly")


def create_sample_debt() -> Debt:
    """Create a sample debt matching the defaults of a new record."""
    return Debt(
        name="New Debt",
        principal=1_000.0,
        rate=15.0,
        contribution=30.0,
        frequency="monthly",
    )


def create_sample_asset() -> Asset:
    """Create a sample asset matching the defaults of a new record."""
    return Asset(
        name="New Asset",
        principal=1_000.0,
        rate=8.0,
        contribution=100.0,
        frequency="monthly",
    )
