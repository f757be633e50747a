"""Cashmoney net worth planner Flask Application Factory."""

from typing import Optional

from flask import Flask

from cashmoney.config import get_global_settings
from cashmoney.services.projection_service import ProjectionService
from cashmoney.storage import ScenarioStore, create_scenario_store


def create_app(
    config_name: Optional[str] = None, store: Optional[ScenarioStore] = None
) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_name: Configuration name (development, testing, production)
        store: Scenario store to use instead of the configured one

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    settings = get_global_settings()
    app_env = config_name or settings.app_env
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["APP_ENV"] = app_env
    app.config["DEBUG"] = app_env == "development"
    app.config["TESTING"] = app_env == "testing"
    app.config["PROJECTION_END_AGE"] = settings.projection_end_age
    app.config["DEFAULT_SCENARIO_AGE"] = settings.default_scenario_age
    app.logger.setLevel(settings.log_level)

    if store is None:
        store = create_scenario_store(settings)
    app.extensions["projection_service"] = ProjectionService.from_settings(
        settings, store=store
    )

    # Register blueprints
    from cashmoney.blueprints.health import health_bp
    from cashmoney.blueprints.projection import projection_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(projection_bp)

    return app
