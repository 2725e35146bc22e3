"""Flask application factory for Selectorsmith API."""

from flask import Flask
from flask_cors import CORS

from api.middleware import register_error_handlers, register_request_logging
from core.config import get_config


def create_app(testing: bool = False):
    """Create and configure the Flask application."""
    app_config = get_config()
    app = Flask(__name__)

    # Configuration
    app.config["SECRET_KEY"] = app_config.flask.secret_key
    app.config["DEBUG"] = app_config.flask.debug
    app.config["TESTING"] = testing
    # Keep keys in the order the handlers build them
    app.json.sort_keys = False

    # Enable CORS for all routes
    CORS(app)

    register_error_handlers(app)
    register_request_logging(app)

    # Register blueprints
    from api.routes.selectors import selectors_bp
    from api.routes.shapes import shapes_bp
    from api.routes.serialization import serialization_bp
    from api.routes.polynomial import polynomial_bp

    app.register_blueprint(selectors_bp, url_prefix="/api/selectors")
    app.register_blueprint(shapes_bp, url_prefix="/api/shapes")
    app.register_blueprint(serialization_bp, url_prefix="/api/json")
    app.register_blueprint(polynomial_bp, url_prefix="/api/polynomial")

    # Health check
    @app.route("/api/health")
    def health():
        return {"status": "ok", "app": "selectorsmith"}

    return app
