"""
Debt amortization calculations.

This module computes how long a debt takes to pay off under a fixed periodic
payment, its remaining balance after a number of years, and a period-by-period
payoff schedule. A debt whose payment does not cover the interest it accrues
is reported as never paying off instead of producing NaN.
"""

import math
from typing import List, Optional

from pydantic import BaseModel, Field

from .frequency import periods_per_year
from .records import InterestBearingAccount

# Cap on schedule length for debts that never pay off
MAX_SCHEDULE_YEARS = 100

# Rounding slack when taking the ceiling of a fractional payoff period
PERIOD_TOLERANCE = 1e-9


class DebtPayoff(BaseModel):
    """Result of an amortization calculation."""

    payoff_periods: Optional[int] = Field(
        None, ge=0, description="Periods until the balance reaches zero"
    )
    total_paid: Optional[float] = Field(
        None, ge=0, description="Payment multiplied by payoff periods"
    )
    never_pays_off: bool = Field(
        default=False, description="True if the payment never retires the debt"
    )


class PaymentBreakdown(BaseModel):
    """Breakdown of a single debt payment."""

    payment_number: int = Field(..., ge=1, description="Payment number (1-based)")
    beginning_balance: float = Field(
        ..., ge=0, description="Balance at beginning of period"
    )
    payment_amount: float = Field(..., ge=0, description="Total payment amount")
    principal_payment: float = Field(
        ..., ge=0, description="Principal portion of payment"
    )
    interest_payment: float = Field(
        ..., ge=0, description="Interest portion of payment"
    )
    ending_balance: float = Field(..., ge=0, description="Balance at end of period")
    cumulative_interest: float = Field(
        ..., ge=0, description="Cumulative interest paid"
    )


class PayoffSchedule(BaseModel):
    """Period-by-period payoff schedule for a debt."""

    debt: InterestBearingAccount = Field(..., description="Debt parameters")
    payments: List[PaymentBreakdown] = Field(
        default_factory=list, description="List of payment breakdowns"
    )
    total_payments: int = Field(..., ge=0, description="Number of payments made")
    total_interest: float = Field(..., ge=0, description="Total interest paid")
    total_principal: float = Field(..., ge=0, description="Total principal paid")
    paid_off: bool = Field(..., description="True if the schedule reaches zero")


class DebtCalculator:
    """Calculator for debt payoff and balance projections."""

    @staticmethod
    def calculate_periodic_rate(annual_rate: float, frequency: Optional[str]) -> float:
        """
        Convert an annual percentage rate to a per-period fraction.

        Args:
            annual_rate: Annual interest rate in percent (e.g., 15 for 15%)
            frequency: Payment frequency tag

        Returns:
            Interest rate per period as a fraction
        """
        return annual_rate / 100 / periods_per_year(frequency)

    @staticmethod
    def calculate_periodic_interest(
        balance: float, annual_rate: float, frequency: Optional[str]
    ) -> float:
        """Interest accrued on a balance over one period."""
        return balance * DebtCalculator.calculate_periodic_rate(annual_rate, frequency)

    @staticmethod
    def calculate_payoff(
        principal: float, annual_rate: float, payment: float, frequency: Optional[str]
    ) -> DebtPayoff:
        """
        Calculate the number of periods needed to retire a debt.

        Args:
            principal: Outstanding balance
            annual_rate: Annual interest rate in percent
            payment: Payment per period
            frequency: Payment frequency tag

        Returns:
            Payoff periods and total paid, or the never-pays-off sentinel
        """
        if principal <= 0:
            return DebtPayoff(payoff_periods=0, total_paid=0.0)
        if payment <= 0:
            return DebtPayoff(never_pays_off=True)

        rate = DebtCalculator.calculate_periodic_rate(annual_rate, frequency)

        if rate <= 0:
            payoff_periods = math.ceil(principal / payment)
        else:
            # Payment must exceed the interest accrued each period
            if payment <= principal * rate:
                return DebtPayoff(never_pays_off=True)
            log_growth = math.log1p(rate)
            if log_growth == 0:
                # Rate too small to register
                payoff_periods = math.ceil(principal / payment)
            else:
                periods = -math.log1p(-principal * rate / payment) / log_growth
                payoff_periods = math.ceil(periods - PERIOD_TOLERANCE)

        return DebtPayoff(
            payoff_periods=payoff_periods, total_paid=payment * payoff_periods
        )

    @staticmethod
    def calculate_remaining_balance(
        principal: float,
        annual_rate: float,
        payment: float,
        frequency: Optional[str],
        elapsed_years: float,
    ) -> float:
        """
        Closed-form balance after a number of years of payments.

        The balance is always computed from the original principal, never
        carried forward from a previous call.

        Args:
            principal: Starting balance
            annual_rate: Annual interest rate in percent
            payment: Payment per period
            frequency: Payment frequency tag
            elapsed_years: Years since the start

        Returns:
            Remaining balance, never below zero; inf once the balance
            outgrows a float
        """
        rate = DebtCalculator.calculate_periodic_rate(annual_rate, frequency)
        periods = elapsed_years * periods_per_year(frequency)

        if rate > 0:
            try:
                growth_less_one = math.expm1(periods * math.log1p(rate))
            except OverflowError:
                return math.inf
            balance = principal * (1 + growth_less_one) - payment * (
                growth_less_one / rate
            )
            if math.isnan(balance):
                return math.inf
        else:
            balance = principal - payment * periods

        return max(0.0, balance)

    @staticmethod
    def generate_payoff_schedule(
        debt: InterestBearingAccount, max_periods: Optional[int] = None
    ) -> PayoffSchedule:
        """
        Generate a period-by-period payoff schedule for a debt.

        Args:
            debt: Debt parameters
            max_periods: Maximum number of payments to generate (defaults to
                100 years worth of periods)

        Returns:
            Payoff schedule
        """
        frequency = debt.contribution_frequency
        if max_periods is None:
            max_periods = MAX_SCHEDULE_YEARS * periods_per_year(frequency)

        payments = []
        balance = debt.principal
        cumulative_interest = 0.0
        cumulative_principal = 0.0
        payment_number = 1

        while balance > 0.01 and payment_number <= max_periods:
            interest_payment = DebtCalculator.calculate_periodic_interest(
                balance, debt.rate, frequency
            )
            payment_amount = debt.contribution
            principal_payment = max(0.0, payment_amount - interest_payment)

            # Final payment only covers what is left
            if principal_payment > balance:
                principal_payment = balance
                payment_amount = interest_payment + principal_payment

            # Unpaid interest is added to the balance
            ending_balance = max(
                0.0, balance + max(0.0, interest_payment - payment_amount) - principal_payment
            )

            cumulative_interest += interest_payment
            cumulative_principal += principal_payment

            payments.append(
                PaymentBreakdown(
                    payment_number=payment_number,
                    beginning_balance=round(balance, 2),
                    payment_amount=round(payment_amount, 2),
                    principal_payment=round(principal_payment, 2),
                    interest_payment=round(interest_payment, 2),
                    ending_balance=round(ending_balance, 2),
                    cumulative_interest=round(cumulative_interest, 2),
                )
            )

            balance = ending_balance
            payment_number += 1

        return PayoffSchedule(
            debt=debt,
            payments=payments,
            total_payments=len(payments),
            total_interest=round(cumulative_interest, 2),
            total_principal=round(cumulative_principal, 2),
            paid_off=balance <= 0.01,
        )


def amortize(
    principal: float, annual_rate: float, payment: float, frequency: Optional[str]
) -> DebtPayoff:
    """Payoff horizon of a debt; see DebtCalculator.calculate_payoff."""
    return DebtCalculator.calculate_payoff(principal, annual_rate, payment, frequency)


def payoff_years(payoff: DebtPayoff, frequency: Optional[str]) -> Optional[float]:
    """Convert a payoff horizon to years, or None if it never pays off."""
    if payoff.payoff_periods is None:
        return None
    return payoff.payoff_periods / periods_per_year(frequency)
