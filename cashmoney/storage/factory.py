"""
Scenario store factory for creating store instances based on configuration.
"""

from cashmoney.config import Settings

from .base import ScenarioStore
from .local import LocalScenarioStore
from .memory import InMemoryScenarioStore


def create_scenario_store(settings: Settings) -> ScenarioStore:
    """
    Create a scenario store instance based on configuration.

    Args:
        settings: Application settings containing storage configuration

    Returns:
        ScenarioStore: Configured scenario store instance

    Raises:
        ValueError: If storage configuration is invalid
    """
    if settings.storage_type == "local":
        return LocalScenarioStore(base_path=settings.storage_base_path, create_dirs=True)

    elif settings.storage_type == "memory":
        return InMemoryScenarioStore()

    else:
        raise ValueError(f"Unsupported storage type: {settings.storage_type}")


def get_scenario_store() -> ScenarioStore:
    """
    Get a scenario store instance using global settings.

    Returns:
        ScenarioStore: Configured scenario store instance
    """
    from cashmoney.config import get_global_settings

    settings = get_global_settings()
    return create_scenario_store(settings)
