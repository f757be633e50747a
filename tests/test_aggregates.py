"""
Tests for aggregate calculations.

This module tests annual totals, the capped debt payment total, the
debt-to-income ratio, the average interest rate and the scenario summary.
"""

import pytest

from cashmoney.models.aggregates import (
    ScenarioSummary,
    debt_to_income_ratio,
    summarize_scenario,
    total_annual,
    total_annual_contributions,
    total_annual_payments,
    total_principal,
    weighted_average_rate,
)
from cashmoney.models.records import (
    Asset,
    Debt,
    Expense,
    Income,
    Scenario,
    ScenarioSnapshot,
)


class TestTotalAnnual:
    """Test cases for total_annual."""

    def test_empty(self):
        """Test that an empty collection totals zero."""
        assert total_annual([]) == 0

    def test_single_monthly_mapping(self):
        """Test a plain mapping record."""
        assert total_annual([{"amount": 100, "frequency": "monthly"}]) == 1200

    def test_mixed_frequencies(self):
        """Test records at different frequencies are annualized separately."""
        incomes = [
            Income(name="Salary", amount=2000, frequency="biweekly"),
            Income(name="Bonus", amount=5000, frequency="annually"),
            Income(name="Dividends", amount=250, frequency="quarterly"),
        ]

        assert total_annual(incomes) == 2000 * 26 + 5000 + 250 * 4

    def test_unknown_frequency_counts_as_monthly(self):
        """Test that malformed frequency tags are annualized as monthly."""
        expenses = [Expense(name="Gym", amount=40, frequency="every-month")]
        assert total_annual(expenses) == 480

    def test_custom_fields(self):
        """Test summing arbitrary amount and frequency fields."""
        records = [{"contribution": 10, "contribution_frequency": "daily"}]
        total = total_annual(
            records, amount_field="contribution", frequency_field="contribution_frequency"
        )
        assert total == 3600


class TestAccountTotals:
    """Test cases for principal and payment totals."""

    def test_total_principal(self):
        """Test principal is summed without conversion."""
        debts = [
            Debt(principal=500, rate=5, contribution=10),
            Debt(principal=1500, rate=5, contribution=10, frequency="weekly"),
        ]
        assert total_principal(debts) == 2000

    def test_total_principal_empty(self):
        """Test an empty collection has zero principal."""
        assert total_principal([]) == 0

    def test_payment_capped_at_principal(self):
        """Test a large payment on a small debt is capped at the principal."""
        debt = Debt(principal=500, rate=0, contribution=1000, frequency="monthly")
        assert total_annual_payments([debt]) == 500

    def test_payment_cap_applies_per_account(self):
        """Test the cap is applied to each debt on its own."""
        debts = [
            Debt(principal=500, rate=0, contribution=1000, frequency="monthly"),
            Debt(principal=10000, rate=5, contribution=100, frequency="monthly"),
        ]
        assert total_annual_payments(debts) == 500 + 1200

    def test_payment_uses_contribution_frequency(self):
        """Test payments are annualized by the contribution cadence."""
        debt = Debt(
            principal=100000,
            rate=6,
            compound="daily",
            contribution=500,
            contribution_frequency="biweekly",
        )
        assert total_annual_payments([debt]) == 13000

    def test_total_annual_contributions_uncapped(self):
        """Test asset contributions are annualized without the principal cap."""
        asset = Asset(principal=50, rate=8, contribution=100, frequency="monthly")
        assert total_annual_contributions([asset]) == 1200


class TestRatios:
    """Test cases for debt-to-income and average rate."""

    def test_dti_zero_income(self):
        """Test the ratio is zero when there is no income."""
        debts = [Debt(principal=10000, rate=10, contribution=500)]
        assert debt_to_income_ratio(debts, []) == 0

    def test_dti_basic(self):
        """Test ratio of capped annual payments to annual income."""
        debts = [Debt(principal=10000, rate=10, contribution=100, frequency="monthly")]
        incomes = [Income(amount=5000, frequency="monthly")]

        assert debt_to_income_ratio(debts, incomes) == pytest.approx(0.02)

    def test_dti_no_debts(self):
        """Test ratio is zero without debts."""
        assert debt_to_income_ratio([], [Income(amount=100)]) == 0

    def test_average_rate_empty(self):
        """Test the average of no debts is zero."""
        assert weighted_average_rate([]) == 0

    def test_average_rate_is_simple_mean(self):
        """Test the average ignores principal size."""
        debts = [
            Debt(principal=100, rate=10, contribution=10),
            Debt(principal=100000, rate=20, contribution=10),
            Debt(principal=5, rate=30, contribution=10),
        ]
        assert weighted_average_rate(debts) == pytest.approx(20)


class TestScenarioSummary:
    """Test cases for summarize_scenario."""

    def _snapshot(self):
        return ScenarioSnapshot(
            scenario=Scenario(id=1, age=35),
            incomes=[Income(amount=1000, frequency="monthly")],
            expenses=[Expense(amount=200, frequency="weekly")],
            debts=[Debt(principal=100000, rate=6, contribution=400, frequency="monthly")],
            assets=[Asset(principal=25000, rate=7, contribution=250, frequency="monthly")],
        )

    def test_summary_totals(self):
        """Test the summary carries each headline total."""
        summary = summarize_scenario(self._snapshot())

        assert isinstance(summary, ScenarioSummary)
        assert summary.total_annual_income == 12000
        assert summary.total_annual_expense == 10400
        assert summary.annual_cash_flow == 1600
        assert summary.total_outstanding_debt == 100000
        assert summary.total_annual_debt_payments == 4800
        assert summary.debt_to_income_ratio == pytest.approx(0.4)
        assert summary.dti_percent == pytest.approx(40)
        assert summary.average_interest_rate == 6
        assert summary.total_assets == 25000
        assert summary.total_annual_contributions == 3000

    def test_high_dti_flag(self):
        """Test DTI at or above the threshold is flagged."""
        assert summarize_scenario(self._snapshot()).is_high_dti is True
        assert (
            summarize_scenario(self._snapshot(), dti_warning_threshold=50).is_high_dti
            is False
        )

    def test_summary_handles_unloaded_collections(self):
        """Test missing collections count as empty."""
        snapshot = ScenarioSnapshot(scenario=None, incomes=None, debts=None)
        summary = summarize_scenario(snapshot)

        assert summary.total_annual_income == 0
        assert summary.debt_to_income_ratio == 0
        assert summary.is_high_dti is False

    def test_summary_serializes_computed_fields(self):
        """Test computed figures are included when dumped."""
        data = summarize_scenario(self._snapshot()).model_dump()

        assert "annual_cash_flow" in data
        assert "dti_percent" in data
        assert "is_high_dti" in data
