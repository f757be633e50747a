"""
Projection service for running the net worth engine against scenarios.

This service ties the record store to the calculation engines. It loads a
scenario snapshot, aggregates its records and hands the totals to the
projector. It holds no state between calls.
"""

import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from cashmoney.config import Settings
from cashmoney.models.aggregates import ScenarioSummary, summarize_scenario
from cashmoney.models.amortization import amortize, payoff_years
from cashmoney.models.projection import (
    DEFAULT_END_AGE,
    NetWorthProjection,
    project_snapshot,
)
from cashmoney.models.records import InterestBearingAccount, ScenarioSnapshot
from cashmoney.storage.base import ScenarioStore, StorageError

logger = logging.getLogger(__name__)


class DebtPayoffReport(BaseModel):
    """Payoff horizon of a single debt."""

    name: str = Field(..., description="Debt name")
    payoff_periods: Optional[int] = Field(None, description="Periods to payoff")
    payoff_years: Optional[float] = Field(None, description="Years to payoff")
    total_paid: Optional[float] = Field(None, description="Total of all payments")
    never_pays_off: bool = Field(..., description="Payment never retires the debt")


class ProjectionService:
    """Service for projecting and summarizing scenarios."""

    def __init__(
        self,
        store: Optional[ScenarioStore] = None,
        end_age: int = DEFAULT_END_AGE,
        dti_warning_threshold: float = 36.0,
        default_scenario_age: int = 20,
    ) -> None:
        """Initialize the projection service.

        Args:
            store: Scenario store used by the scenario-id methods
            end_age: Default horizon age for projections
            dti_warning_threshold: DTI percent flagged as high
            default_scenario_age: Starting age for scenarios that give none
        """
        self.store = store
        self.end_age = end_age
        self.dti_warning_threshold = dti_warning_threshold
        self.default_scenario_age = default_scenario_age
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(
        cls, settings: Settings, store: Optional[ScenarioStore] = None
    ) -> "ProjectionService":
        """Create a service configured from application settings."""
        return cls(
            store=store,
            end_age=settings.projection_end_age,
            dti_warning_threshold=settings.dti_warning_threshold,
            default_scenario_age=settings.default_scenario_age,
        )

    def project(
        self, snapshot: ScenarioSnapshot, end_age: Optional[int] = None
    ) -> NetWorthProjection:
        """Project net worth for a snapshot.

        Args:
            snapshot: Scenario snapshot to project
            end_age: Horizon age (defaults to the service horizon)

        Returns:
            The net worth projection, empty if the snapshot is not ready
        """
        horizon = end_age if end_age is not None else self.end_age
        projection = project_snapshot(self._with_start_age(snapshot), end_age=horizon)

        if projection.is_empty:
            self.logger.info(f"Projection to age {horizon} produced no points")
        else:
            self.logger.info(
                f"Projected {len(projection.points)} years to age {horizon}, "
                f"final net worth {projection.final_net_worth:.2f}"
            )
        return projection

    def summarize(self, snapshot: ScenarioSnapshot) -> ScenarioSummary:
        """Compute headline totals for a snapshot."""
        return summarize_scenario(
            snapshot, dti_warning_threshold=self.dti_warning_threshold
        )

    def debt_payoffs(
        self, debts: Sequence[InterestBearingAccount]
    ) -> List[DebtPayoffReport]:
        """Compute the payoff horizon of each debt."""
        reports = []
        for debt in debts:
            payoff = amortize(
                debt.principal, debt.rate, debt.contribution, debt.contribution_frequency
            )
            if payoff.never_pays_off:
                self.logger.debug(f"Debt {debt.name!r} never pays off")
            reports.append(
                DebtPayoffReport(
                    name=debt.name,
                    payoff_periods=payoff.payoff_periods,
                    payoff_years=payoff_years(payoff, debt.contribution_frequency),
                    total_paid=payoff.total_paid,
                    never_pays_off=payoff.never_pays_off,
                )
            )
        return reports

    def project_scenario(
        self, scenario_id: int, end_age: Optional[int] = None
    ) -> NetWorthProjection:
        """Load a stored scenario and project it.

        Raises:
            StorageNotFoundError: If the scenario does not exist
            StorageError: If no store is configured or it cannot be read
        """
        return self.project(self._load(scenario_id), end_age=end_age)

    def summarize_scenario(self, scenario_id: int) -> ScenarioSummary:
        """Load a stored scenario and summarize it."""
        return self.summarize(self._load(scenario_id))

    def _with_start_age(self, snapshot: ScenarioSnapshot) -> ScenarioSnapshot:
        scenario = snapshot.scenario
        if scenario is None or "age" in scenario.model_fields_set:
            return snapshot
        return snapshot.model_copy(
            update={
                "scenario": scenario.model_copy(
                    update={"age": self.default_scenario_age}
                )
            }
        )

    def _load(self, scenario_id: int) -> ScenarioSnapshot:
        if self.store is None:
            raise StorageError("No scenario store configured")
        self.logger.info(f"Loading scenario {scenario_id}")
        return self.store.get_snapshot(scenario_id)
