"""Health check blueprint."""

from flask import Blueprint, Response, current_app, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.route("/healthz")
def health_check() -> Response:
    """Health check endpoint.

    Returns:
        JSON response with status information and the projection horizon
    """
    return jsonify(
        {"status": "ok", "projection_end_age": current_app.config["PROJECTION_END_AGE"]}
    )
