"""
Budgeteer Web Application Factory

Centralized Flask app that registers the page blueprints.
Mirrors how cli/main.py assembles module CLIs.
"""

import os
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, Optional

from flask import Flask, redirect, url_for

from budgeteer.core import get_logger

logger = get_logger("budgeteer.api")


def _get_or_create_secret() -> str:
    """Resolve SECRET_KEY with priority: env var > config > file > generate.

    On first run with no key configured, generates a random key and persists
    it next to the database so sessions survive server restarts.
    """
    from budgeteer.core.config import BUDGETEER_PATHS, get_config_value

    env_key = os.environ.get("BUDGETEER_SECRET_KEY")
    if env_key:
        return env_key

    cfg_key = get_config_value("web", "secret_key")
    if cfg_key:
        return cfg_key

    key_file = Path(BUDGETEER_PATHS.data_dir) / ".secret_key"
    if key_file.exists():
        stored = key_file.read_text().strip()
        if stored:
            return stored

    new_key = os.urandom(32).hex()
    key_file.parent.mkdir(parents=True, exist_ok=True)
    key_file.write_text(new_key)
    logger.info("Generated new secret key at %s", key_file)
    return new_key


def create_app(overrides: Optional[Dict[str, Any]] = None) -> Flask:
    """Create and configure the Budgeteer Flask application."""
    app = Flask(
        __name__,
        template_folder="../frontend/templates",
    )

    from budgeteer.core.config import get_config_value, get_currency

    overrides = overrides or {}
    app.config["SECRET_KEY"] = overrides.get("SECRET_KEY") or _get_or_create_secret()
    session_minutes = get_config_value("web", "session_lifetime_minutes", default=480)
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(minutes=session_minutes)
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["SESSION_COOKIE_NAME"] = "budgeteer_session"
    app.config.update(overrides)

    # ── Security headers ─────────────────────────────────────────────────
    @app.after_request
    def set_security_headers(response):
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        return response

    @app.context_processor
    def inject_globals():
        return {"app_name": "Budgeteer", "currency": get_currency()}

    # ── Error pages ──────────────────────────────────────────────────────
    @app.errorhandler(ValueError)
    def handle_value_error(exc):
        logger.warning("Rejected request: %s", exc)
        return {"error": str(exc)}, 400

    # ── Register blueprints ──────────────────────────────────────────────
    from budgeteer.api.projects import bp as projects_bp
    app.register_blueprint(projects_bp)

    from budgeteer.api.budgets import bp as budgets_bp
    app.register_blueprint(budgets_bp)

    from budgeteer.api.people import bp as people_bp
    app.register_blueprint(people_bp)

    from budgeteer.api.contracts import bp as contracts_bp
    app.register_blueprint(contracts_bp)

    from budgeteer.api.invoices import bp as invoices_bp
    app.register_blueprint(invoices_bp)

    from budgeteer.api.notifications import bp as notifications_bp
    app.register_blueprint(notifications_bp)

    from budgeteer.api.templates import bp as templates_bp
    app.register_blueprint(templates_bp)

    @app.route("/")
    def index():
        return redirect(url_for("projects.projects_page"))

    return app
