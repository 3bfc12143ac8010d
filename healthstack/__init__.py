import logging
from typing import Any, Dict, Optional

from flask import Flask

from healthstack.config import engine_options_for
from healthstack.errors import register_error_handlers
from healthstack.extensions import cors, db, init_limiter, migrate
from healthstack.routes import home_bp, register_routes


def configure_logging(app: Flask) -> None:
    level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger("healthstack").setLevel(level)
    app.logger.setLevel(level)


def create_app(overrides: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object("healthstack.config.Config")
    if overrides:
        app.config.update(overrides)

    app.config.setdefault(
        "SQLALCHEMY_ENGINE_OPTIONS", engine_options_for(app.config["SQLALCHEMY_DATABASE_URI"])
    )
    # Request rate limiting only applies in production
    app.config.setdefault("RATELIMIT_ENABLED", app.config["APP_ENV"] == "production")

    configure_logging(app)

    # Initialize database
    db.init_app(app)
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config["CORS_ORIGINS"],
                  supports_credentials=True,
                  allow_headers=["Content-Type", "Authorization"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                  expose_headers=["Content-Type", "Authorization"])

    limiter = init_limiter(app)
    limiter.exempt(home_bp)

    register_error_handlers(app)
    register_routes(app)

    # Register model metadata for create_all and migrations
    from healthstack import models  # noqa: F401

    app.logger.info("HealthStack API configured (env=%s)", app.config["APP_ENV"])
    return app
