"""Data models and calculation engines for net worth planning."""

from .frequency import (
    FREQ_TO_PERIODS,
    FREQUENCY_OPTIONS,
    is_known_frequency,
    periods_per_year,
)
from .records import (
    Asset,
    Debt,
    Expense,
    Income,
    InterestBearingAccount,
    ProjectionPoint,
    RecurringAmount,
    Scenario,
    ScenarioSnapshot,
    create_sample_asset,
    create_sample_debt,
    create_sample_expense,
    create_sample_income,
)
from .aggregates import (
    ScenarioSummary,
    debt_to_income_ratio,
    summarize_scenario,
    total_annual,
    total_annual_contributions,
    total_annual_payments,
    total_principal,
    weighted_average_rate,
)
from .amortization import (
    DebtCalculator,
    DebtPayoff,
    PaymentBreakdown,
    PayoffSchedule,
    amortize,
    payoff_years,
)
from .growth import compound_growth, future_value
from .projection import (
    DebtPayoffEvent,
    DebtStatus,
    NetWorthProjection,
    project_net_worth,
    project_snapshot,
)

__all__ = [
    "FREQ_TO_PERIODS",
    "FREQUENCY_OPTIONS",
    "is_known_frequency",
    "periods_per_year",
    "RecurringAmount",
    "Income",
    "Expense",
    "InterestBearingAccount",
    "Debt",
    "Asset",
    "Scenario",
    "ScenarioSnapshot",
    "ProjectionPoint",
    "create_sample_income",
    "create_sample_expense",
    "create_sample_debt",
    "create_sample_asset",
    "ScenarioSummary",
    "summarize_scenario",
    "total_annual",
    "total_principal",
    "total_annual_payments",
    "total_annual_contributions",
    "debt_to_income_ratio",
    "weighted_average_rate",
    "DebtCalculator",
    "DebtPayoff",
    "PaymentBreakdown",
    "PayoffSchedule",
    "amortize",
    "payoff_years",
    "compound_growth",
    "future_value",
    "DebtStatus",
    "DebtPayoffEvent",
    "NetWorthProjection",
    "project_net_worth",
    "project_snapshot",
]
