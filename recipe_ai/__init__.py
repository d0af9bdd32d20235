import logging

from flask import Flask, jsonify
from flask_cors import CORS
from pydantic import ValidationError

from .config.settings import Config
from .services.shared.errors import StoreError

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Application factory pattern"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Create upload/data/cache directories
    config_class.init_app(app)

    # Register blueprints
    from .routes.health import health_bp
    from .routes.detection import detection_bp
    from .routes.recipes import recipes_bp
    from .routes.royco import royco_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(detection_bp)
    app.register_blueprint(recipes_bp)
    app.register_blueprint(royco_bp)

    @app.errorhandler(ValidationError)
    def invalid_request(e):
        return jsonify({"error": "invalid_request", "msg": str(e)}), 400

    @app.errorhandler(StoreError)
    def store_failed(e):
        logger.error("recipe store error: %s", e)
        return jsonify({"error": "store_error", "msg": str(e)}), 500

    return app
