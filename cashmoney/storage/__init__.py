"""
Storage module for reading scenario records.

This module provides a unified interface for loading scenario snapshots from
various backends (in memory, local filesystem).
"""

from .base import (
    ScenarioStore,
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
)
from .factory import create_scenario_store, get_scenario_store
from .local import LocalScenarioStore
from .memory import InMemoryScenarioStore

__all__ = [
    "ScenarioStore",
    "StorageError",
    "StorageNotFoundError",
    "StoragePermissionError",
    "InMemoryScenarioStore",
    "LocalScenarioStore",
    "create_scenario_store",
    "get_scenario_store",
]
