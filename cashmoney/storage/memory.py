"""In-memory scenario store, used for tests and when embedding the engine."""

from typing import Dict, List, Optional

from cashmoney.models.records import Scenario, ScenarioSnapshot

from .base import ScenarioStore, StorageError, StorageNotFoundError


class InMemoryScenarioStore(ScenarioStore):
    """Scenario store backed by a dictionary keyed by scenario id."""

    def __init__(self, snapshots: Optional[Dict[int, ScenarioSnapshot]] = None):
        self._snapshots: Dict[int, ScenarioSnapshot] = dict(snapshots or {})

    def add_snapshot(self, snapshot: ScenarioSnapshot) -> int:
        """
        Add or replace a snapshot.

        Raises:
            StorageError: If the snapshot has no scenario id
        """
        if snapshot.scenario is None or snapshot.scenario.id is None:
            raise StorageError("Snapshot must have a scenario with an id")
        self._snapshots[snapshot.scenario.id] = snapshot
        return snapshot.scenario.id

    def get_snapshot(self, scenario_id: int) -> ScenarioSnapshot:
        snapshot = self._snapshots.get(scenario_id)
        if snapshot is None:
            raise StorageNotFoundError(f"Scenario not found: {scenario_id}")
        return snapshot.model_copy(deep=True)

    def list_scenarios(self) -> List[Scenario]:
        return [
            self._snapshots[scenario_id].scenario  # type: ignore[misc]
            for scenario_id in sorted(self._snapshots)
        ]

    def scenario_exists(self, scenario_id: int) -> bool:
        return scenario_id in self._snapshots
