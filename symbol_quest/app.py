"""Flask application factory."""
import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify, make_response

logger = logging.getLogger(__name__)

SERVICE_NAME = "symbol-quest-api"
VERSION = "0.1.0"


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Optional configuration dictionary to override defaults.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    from symbol_quest.config import get_config

    if config and config.get("TESTING"):
        app.config.from_object(get_config("testing"))
    else:
        app.config.from_object(get_config()())
    if config:
        app.config.update(config)

    # Initialize extensions
    from symbol_quest.extensions import db, jwt, limiter

    db.init_app(app)
    jwt.init_app(app)
    limiter.init_app(app)

    # Initialize DI container
    from symbol_quest.container import Container

    container = Container()
    container.config.from_dict(
        {
            "daily_draw_limit": app.config["DAILY_DRAW_LIMIT"],
            "history_limit": app.config["HISTORY_LIMIT"],
            "llm_api_endpoint": app.config["LLM_API_ENDPOINT"],
            "llm_api_key": app.config["LLM_API_KEY"],
            "llm_model": app.config["LLM_MODEL"],
        }
    )
    app.container = container

    @app.before_request
    def inject_db_session():
        """Inject db session into container for each request."""
        container.db_session.override(db.session)

    # Register blueprints
    from symbol_quest.routes.auth import auth_bp
    from symbol_quest.routes.cards import cards_bp
    from symbol_quest.routes.draws import draws_bp
    from symbol_quest.routes.interpretations import interpretations_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(draws_bp)
    app.register_blueprint(cards_bp)
    app.register_blueprint(interpretations_bp)

    # CLI commands
    from symbol_quest.cli.init_db import init_db_command

    app.cli.add_command(init_db_command)

    @app.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok", "service": SERVICE_NAME, "version": VERSION}), 200

    @app.route("/")
    def root():
        """Root endpoint."""
        return jsonify({"message": "Symbol Quest API", "version": VERSION, "health": "/health"}), 200

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        logger.error(f"Unhandled error: {error}")
        return jsonify({"error": "Internal server error"}), 500

    @app.errorhandler(429)
    def ratelimit_handler(error):
        """Handle rate limit exceeded errors with JSON response."""
        response = make_response(
            jsonify({"error": "Rate limit exceeded", "message": str(error.description)}),
            429,
        )
        response.headers["Retry-After"] = "60"
        return response

    return app
