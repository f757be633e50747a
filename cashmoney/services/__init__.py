"""Services coordinating the projection engine with scenario storage."""

from .projection_service import DebtPayoffReport, ProjectionService

__all__ = ["DebtPayoffReport", "ProjectionService"]
