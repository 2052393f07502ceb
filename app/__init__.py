"""Flask application package."""

from __future__ import annotations

from flask import Flask

from dotenv import load_dotenv


def create_app(config: type | None = None) -> Flask:
    """Application factory.

    Args:
        config: Optional configuration class overriding the APP_ENV choice.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from app.config import get_config
    from app.error_handlers import register_error_handlers
    from app.logging_config import configure_logging
    from app.routes.draw import draw_bp
    from app.routes.health import health_bp
    from app.routes.web import web_bp
    from app.services.draw_service import DrawService

    app = Flask(__name__)
    app.config.from_object(config or get_config())

    configure_logging(app)
    register_error_handlers(app)

    app.extensions["draw_service"] = DrawService.from_config(app.config)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(draw_bp)

    return app
