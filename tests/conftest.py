"""
Pytest configuration and shared fixtures for the cashmoney tests.
"""

import pytest

from cashmoney import create_app
from cashmoney.config import reset_global_settings
from cashmoney.models.records import (
    Asset,
    Debt,
    Expense,
    Income,
    Scenario,
    ScenarioSnapshot,
)
from cashmoney.storage.memory import InMemoryScenarioStore


@pytest.fixture(autouse=True)
def app_environment(monkeypatch):
    """Provide a valid environment and fresh global settings for every test."""
    monkeypatch.setenv("SECRET_KEY", "test-secret-key-123")
    monkeypatch.setenv("STORAGE_TYPE", "memory")
    reset_global_settings()
    yield
    reset_global_settings()


@pytest.fixture
def sample_snapshot():
    """A scenario with one income, one expense, one debt and one asset.

    Income is $60,000/yr and expenses $36,000/yr. The debt carries no
    interest and pays off after exactly one year; the asset grows only
    through contributions.
    """
    return ScenarioSnapshot(
        scenario=Scenario(id=1, name="Default", age=30),
        incomes=[Income(id=1, scenario_id=1, name="Salary", amount=5000, frequency="monthly")],
        expenses=[Expense(id=1, scenario_id=1, name="Rent", amount=3000, frequency="monthly")],
        debts=[
            Debt(
                id=1,
                scenario_id=1,
                name="Car Loan",
                principal=1200,
                rate=0,
                contribution=100,
                frequency="monthly",
            )
        ],
        assets=[
            Asset(
                id=1,
                scenario_id=1,
                name="Savings",
                principal=1000,
                rate=0,
                contribution=100,
                frequency="monthly",
            )
        ],
    )


@pytest.fixture
def scenario_store(sample_snapshot):
    """An in-memory store holding the sample scenario under id 1."""
    store = InMemoryScenarioStore()
    store.add_snapshot(sample_snapshot)
    return store


@pytest.fixture
def app(scenario_store):
    """Flask application wired to the in-memory store."""
    return create_app("testing", store=scenario_store)


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()
