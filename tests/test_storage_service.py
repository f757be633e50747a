"""
Tests for the scenario store implementations.

This module tests the in-memory and local filesystem stores along with the
store factory.
"""

import os
from unittest.mock import patch

import pytest

from cashmoney.config import Settings
from cashmoney.models.records import Debt, Scenario, ScenarioSnapshot
from cashmoney.storage import (
    InMemoryScenarioStore,
    LocalScenarioStore,
    StorageError,
    StorageNotFoundError,
    create_scenario_store,
)


def make_snapshot(scenario_id, age=30):
    return ScenarioSnapshot(
        scenario=Scenario(id=scenario_id, name=f"Plan {scenario_id}", age=age),
        debts=[Debt(name="Card", principal=1000, rate=15, contribution=30)],
    )


class TestInMemoryScenarioStore:
    """Test cases for InMemoryScenarioStore."""

    def test_get_snapshot(self):
        """Test a stored snapshot can be read back by id."""
        store = InMemoryScenarioStore()
        store.add_snapshot(make_snapshot(7, age=45))

        snapshot = store.get_snapshot(7)
        assert snapshot.scenario.age == 45
        assert snapshot.debts[0].name == "Card"

    def test_get_returns_copy(self):
        """Test callers cannot modify the stored snapshot."""
        store = InMemoryScenarioStore()
        store.add_snapshot(make_snapshot(1))

        snapshot = store.get_snapshot(1)
        snapshot.debts.clear()

        assert len(store.get_snapshot(1).debts) == 1

    def test_missing_scenario(self):
        """Test unknown ids raise StorageNotFoundError."""
        store = InMemoryScenarioStore()

        with pytest.raises(StorageNotFoundError):
            store.get_snapshot(99)
        assert store.scenario_exists(99) is False

    def test_snapshot_without_id_rejected(self):
        """Test a snapshot must identify its scenario."""
        store = InMemoryScenarioStore()

        with pytest.raises(StorageError):
            store.add_snapshot(ScenarioSnapshot(scenario=Scenario()))

    def test_list_scenarios_ordered(self):
        """Test scenarios are listed by id."""
        store = InMemoryScenarioStore()
        for scenario_id in (3, 1, 2):
            store.add_snapshot(make_snapshot(scenario_id))

        assert [s.id for s in store.list_scenarios()] == [1, 2, 3]


class TestLocalScenarioStore:
    """Test cases for LocalScenarioStore."""

    def test_save_and_load(self, tmp_path):
        """Test a saved snapshot loads with the same records."""
        store = LocalScenarioStore(base_path=str(tmp_path))
        original = make_snapshot(5, age=28)

        assert store.save_snapshot(original) == 5
        assert (tmp_path / "scenarios" / "5.json").exists()
        assert store.get_snapshot(5) == original

    def test_missing_scenario(self, tmp_path):
        """Test unknown ids raise StorageNotFoundError."""
        store = LocalScenarioStore(base_path=str(tmp_path))

        with pytest.raises(StorageNotFoundError):
            store.get_snapshot(1)
        assert store.scenario_exists(1) is False

    def test_corrupted_document(self, tmp_path):
        """Test an unreadable document raises StorageError."""
        store = LocalScenarioStore(base_path=str(tmp_path))
        (tmp_path / "scenarios" / "2.json").write_text("{not json")

        with pytest.raises(StorageError):
            store.get_snapshot(2)

    def test_loads_legacy_record_shape(self, tmp_path):
        """Test documents written with older field names load."""
        store = LocalScenarioStore(base_path=str(tmp_path))
        (tmp_path / "scenarios" / "3.json").write_text(
            '{"scenario": {"id": 3, "name": "Old", "age": 40},'
            ' "debts": [{"name": "Loan", "principal": 500, "interestRate": 5,'
            ' "minimumPayment": 50, "frequency": "weekly"}],'
            ' "assets": [{"name": "IRA", "value": 2000, "growthRate": 6,'
            ' "contribution": 20, "frequency": "monthly"}]}'
        )

        snapshot = store.get_snapshot(3)
        assert snapshot.debts[0].contribution_frequency == "weekly"
        assert snapshot.assets[0].principal == 2000

    def test_list_scenarios(self, tmp_path):
        """Test stored scenarios are listed by id, ignoring other files."""
        store = LocalScenarioStore(base_path=str(tmp_path))
        store.save_snapshot(make_snapshot(10))
        store.save_snapshot(make_snapshot(2))
        (tmp_path / "scenarios" / "notes.json").write_text("{}")

        assert [s.id for s in store.list_scenarios()] == [2, 10]

    def test_storage_info(self, tmp_path):
        """Test storage information reports the scenario count."""
        store = LocalScenarioStore(base_path=str(tmp_path))
        store.save_snapshot(make_snapshot(1))

        info = store.get_storage_info()
        assert info["type"] == "local"
        assert info["total_scenarios"] == 1
        assert info["exists"] is True


class TestStoreFactory:
    """Test cases for create_scenario_store."""

    def test_memory_store(self):
        """Test memory storage type creates an in-memory store."""
        with patch.dict(os.environ, {"SECRET_KEY": "valid-secret-123", "STORAGE_TYPE": "memory"}, clear=True):
            store = create_scenario_store(Settings(_env_file=None))
        assert isinstance(store, InMemoryScenarioStore)

    def test_local_store(self, tmp_path):
        """Test local storage type creates a filesystem store."""
        env = {
            "SECRET_KEY": "valid-secret-123",
            "STORAGE_TYPE": "local",
            "STORAGE_BASE_PATH": str(tmp_path / "data"),
        }
        with patch.dict(os.environ, env, clear=True):
            store = create_scenario_store(Settings(_env_file=None))

        assert isinstance(store, LocalScenarioStore)
        assert (tmp_path / "data" / "scenarios").is_dir()
