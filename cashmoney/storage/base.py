"""
Base scenario store interface and exceptions.

The projection engine reads scenarios through this interface. Stores hand
back consistent snapshots; they never run calculations themselves.
"""

from abc import ABC, abstractmethod
from typing import List

from cashmoney.models.records import Scenario, ScenarioSnapshot


class StorageError(Exception):
    """Base exception for storage-related errors."""


class StorageNotFoundError(StorageError):
    """Raised when a requested scenario is not found in storage."""


class StoragePermissionError(StorageError):
    """Raised when there are permission issues with storage operations."""


class ScenarioStore(ABC):
    """
    Abstract base class for scenario record stores.

    Records are partitioned by scenario id; a snapshot bundles the scenario
    with all of its incomes, expenses, debts and assets.
    """

    @abstractmethod
    def get_snapshot(self, scenario_id: int) -> ScenarioSnapshot:
        """
        Load everything owned by a scenario.

        Args:
            scenario_id: The scenario to load

        Returns:
            ScenarioSnapshot: The scenario and its records

        Raises:
            StorageNotFoundError: If the scenario does not exist
            StorageError: If the scenario cannot be read
        """

    @abstractmethod
    def list_scenarios(self) -> List[Scenario]:
        """
        List the scenarios in the store, ordered by id.

        Returns:
            List of scenarios
        """

    def scenario_exists(self, scenario_id: int) -> bool:
        """Check if a scenario exists in the store."""
        return any(scenario.id == scenario_id for scenario in self.list_scenarios())
