"""
Local filesystem scenario store.

Each scenario is kept as one JSON document under ``<base_path>/scenarios``,
named by its id. The document holds the scenario and all of its records in
the snapshot layout, so a read is always consistent.
"""

from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError

from cashmoney.models.records import Scenario, ScenarioSnapshot

from .base import (
    ScenarioStore,
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
)


class LocalScenarioStore(ScenarioStore):
    """
    Local filesystem scenario store.

    Stores one snapshot document per scenario in a local directory.
    """

    def __init__(self, base_path: str = "storage", create_dirs: bool = True):
        """
        Initialize the local scenario store.

        Args:
            base_path: Base directory for storing scenarios
            create_dirs: Whether to create directories if they don't exist
        """
        self.base_path = Path(base_path)
        self.scenarios_path = self.base_path / "scenarios"
        self.create_dirs = create_dirs

        if self.create_dirs:
            self.scenarios_path.mkdir(parents=True, exist_ok=True)

    def _get_file_path(self, scenario_id: int) -> Path:
        return self.scenarios_path / f"{int(scenario_id)}.json"

    def save_snapshot(self, snapshot: ScenarioSnapshot) -> int:
        """
        Write a snapshot document for its scenario.

        Args:
            snapshot: Snapshot to store; its scenario must have an id

        Returns:
            int: The scenario id the snapshot was stored under

        Raises:
            StorageError: If the snapshot cannot be stored
        """
        if snapshot.scenario is None or snapshot.scenario.id is None:
            raise StorageError("Snapshot must have a scenario with an id")

        scenario_id = snapshot.scenario.id
        try:
            local_path = self._get_file_path(scenario_id)
            if self.create_dirs:
                local_path.parent.mkdir(parents=True, exist_ok=True)

            with open(local_path, "w", encoding="utf-8") as f:
                f.write(snapshot.model_dump_json(indent=2))

            return scenario_id

        except PermissionError as e:
            raise StoragePermissionError(
                f"Permission denied storing scenario {scenario_id}: {e}"
            )
        except OSError as e:
            raise StorageError(f"Failed to store scenario {scenario_id}: {e}")

    def get_snapshot(self, scenario_id: int) -> ScenarioSnapshot:
        """
        Load the snapshot document for a scenario.

        Raises:
            StorageNotFoundError: If no document exists for the scenario
            StorageError: If the document cannot be read or parsed
        """
        try:
            local_path = self._get_file_path(scenario_id)

            if not local_path.exists():
                raise StorageNotFoundError(f"Scenario not found: {scenario_id}")

            with open(local_path, "r", encoding="utf-8") as f:
                content = f.read()

        except PermissionError as e:
            raise StoragePermissionError(
                f"Permission denied reading scenario {scenario_id}: {e}"
            )
        except OSError as e:
            raise StorageError(f"Failed to read scenario {scenario_id}: {e}")

        try:
            return ScenarioSnapshot.model_validate_json(content)
        except ValidationError as e:
            raise StorageError(f"Invalid scenario document {scenario_id}: {e}")

    def list_scenarios(self) -> List[Scenario]:
        """
        List stored scenarios ordered by id.

        Documents that cannot be parsed are reported as a StorageError.
        """
        if not self.scenarios_path.exists():
            return []

        scenario_ids = sorted(
            int(path.stem)
            for path in self.scenarios_path.glob("*.json")
            if path.stem.isdigit()
        )
        scenarios = []
        for scenario_id in scenario_ids:
            snapshot = self.get_snapshot(scenario_id)
            if snapshot.scenario is not None:
                scenarios.append(snapshot.scenario)
        return scenarios

    def scenario_exists(self, scenario_id: int) -> bool:
        return self._get_file_path(scenario_id).exists()

    def get_storage_info(self) -> Dict[str, Any]:
        """
        Get information about the storage backend.

        Returns:
            Dict containing storage information
        """
        return {
            "type": "local",
            "base_path": str(self.base_path),
            "total_scenarios": len(list(self.scenarios_path.glob("*.json")))
            if self.scenarios_path.exists()
            else 0,
            "exists": self.base_path.exists(),
        }
