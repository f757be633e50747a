"""
Projection blueprint for net worth planning.

This module provides API endpoints that run the projection engine, either on a
snapshot posted in the request body or on a scenario loaded from the store.
"""

import json
from typing import Any, List, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import TypeAdapter, ValidationError

from cashmoney.models.records import Debt, ScenarioSnapshot
from cashmoney.services.projection_service import ProjectionService
from cashmoney.storage.base import StorageNotFoundError

projection_bp = Blueprint("projection", __name__, url_prefix="/api")

_debts_adapter = TypeAdapter(List[Debt])


def _get_service() -> ProjectionService:
    return current_app.extensions["projection_service"]


def _validation_error(exc: ValidationError) -> Any:
    detail = json.loads(exc.json(include_url=False))
    return jsonify({"error": "Invalid request", "detail": detail}), 400


def _overflow_error() -> Any:
    return jsonify({"error": "Projection overflowed; rates or horizon too large"}), 400


def _parse_end_age(value: Any) -> Optional[int]:
    """Validate an optional horizon age, raising ValueError if malformed."""
    if value is None:
        return None
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError:
            raise ValueError("end_age must be an integer")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("end_age must be an integer")
    if not 0 <= value <= 150:
        raise ValueError("end_age must be between 0 and 150")
    return value


@projection_bp.route("/projection", methods=["POST"])
def project_snapshot() -> Any:
    """Project net worth for the snapshot in the request body.

    The body holds the snapshot fields (scenario, incomes, expenses, debts,
    assets) and an optional integer ``end_age``.

    Returns:
        JSON response with projection points and summary figures
    """
    try:
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        data = dict(data)
        try:
            end_age = _parse_end_age(data.pop("end_age", None))
        except ValueError as e:
            return jsonify({"error": str(e)}), 400

        try:
            snapshot = ScenarioSnapshot.model_validate(data)
        except ValidationError as e:
            return _validation_error(e)

        projection = _get_service().project(snapshot, end_age=end_age)
        if not projection.is_finite:
            return _overflow_error()
        return jsonify(projection.model_dump(mode="json")), 200

    except Exception as e:
        current_app.logger.error(f"Error projecting snapshot: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@projection_bp.route("/summary", methods=["POST"])
def summarize_snapshot() -> Any:
    """Summarize the snapshot in the request body.

    Returns:
        JSON response with annual totals, DTI and average rate
    """
    try:
        data = request.get_json(silent=True) or {}
        try:
            snapshot = ScenarioSnapshot.model_validate(data)
        except ValidationError as e:
            return _validation_error(e)

        summary = _get_service().summarize(snapshot)
        return jsonify(summary.model_dump(mode="json")), 200

    except Exception as e:
        current_app.logger.error(f"Error summarizing snapshot: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@projection_bp.route("/debts/payoff", methods=["POST"])
def debt_payoffs() -> Any:
    """Compute the payoff horizon of each posted debt.

    Returns:
        JSON response with one payoff entry per debt
    """
    try:
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400

        try:
            debts = _debts_adapter.validate_python(data.get("debts", []))
        except ValidationError as e:
            return _validation_error(e)

        reports = _get_service().debt_payoffs(debts)
        return jsonify({"debts": [report.model_dump(mode="json") for report in reports]}), 200

    except Exception as e:
        current_app.logger.error(f"Error computing debt payoffs: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@projection_bp.route("/scenarios", methods=["GET"])
def list_scenarios() -> Any:
    """List the stored scenarios.

    Returns:
        JSON response with the scenarios in the store
    """
    try:
        service = _get_service()
        if service.store is None:
            return jsonify({"scenarios": []}), 200

        scenarios = service.store.list_scenarios()
        return jsonify({"scenarios": [s.model_dump(mode="json") for s in scenarios]}), 200

    except Exception as e:
        current_app.logger.error(f"Error listing scenarios: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@projection_bp.route("/scenarios/<int:scenario_id>/projection", methods=["GET"])
def project_scenario(scenario_id: int) -> Any:
    """Project net worth for a stored scenario.

    Args:
        scenario_id: ID of the scenario to project

    Returns:
        JSON response with projection points and summary figures
    """
    try:
        try:
            end_age = _parse_end_age(request.args.get("end_age"))
        except ValueError as e:
            return jsonify({"error": str(e)}), 400

        projection = _get_service().project_scenario(scenario_id, end_age=end_age)
        if not projection.is_finite:
            return _overflow_error()
        return jsonify(projection.model_dump(mode="json")), 200

    except StorageNotFoundError:
        return jsonify({"error": "Scenario not found"}), 404
    except Exception as e:
        current_app.logger.error(f"Error projecting scenario {scenario_id}: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500


@projection_bp.route("/scenarios/<int:scenario_id>/summary", methods=["GET"])
def summarize_scenario(scenario_id: int) -> Any:
    """Summarize a stored scenario.

    Args:
        scenario_id: ID of the scenario to summarize

    Returns:
        JSON response with annual totals, DTI and average rate
    """
    try:
        summary = _get_service().summarize_scenario(scenario_id)
        return jsonify(summary.model_dump(mode="json")), 200

    except StorageNotFoundError:
        return jsonify({"error": "Scenario not found"}), 404
    except Exception as e:
        current_app.logger.error(f"Error summarizing scenario {scenario_id}: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500
