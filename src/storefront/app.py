import logging
from datetime import datetime, timezone
from typing import Optional

from flask import Flask, jsonify

from storefront.core.config import config, configure_logging
from storefront.core.exceptions import StorefrontError
from storefront.repositories.base import KeyValueStorage
from storefront.repositories.sql_storage import SqlKeyValueStorage
from storefront.routes import orders_bp, products_bp

logger = logging.getLogger(__name__)


def create_app(storage: Optional[KeyValueStorage] = None) -> Flask:
    """
    Application factory.

    storage is only probed by the health check; it defaults to the SQL
    key-value storage configured by STOREFRONT_STORAGE_URL.
    """
    configure_logging(config.app.log_level)

    app = Flask(__name__)
    app.extensions["storefront.storage"] = storage if storage is not None else SqlKeyValueStorage()

    app.register_blueprint(products_bp, url_prefix="/api/products")
    app.register_blueprint(orders_bp, url_prefix="/api/orders")

    # Error handlers: {"success": false, "error": ...}

    @app.errorhandler(StorefrontError)
    def storefront_error(e: StorefrontError):
        logger.warning(f"{e.error_code}: {e.internal_message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(400)
    def bad_request(e):
        return jsonify({"success": False, "error": str(e.description)}), 400

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"success": False, "error": str(e.description)}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"success": False, "error": str(e.description)}), 405

    @app.errorhandler(500)
    def internal_error(e):
        return jsonify({"success": False, "error": "An internal server error occurred."}), 500

    @app.get("/health")
    def health():
        """Liveness + readiness probe. Returns 503 if cart storage is unusable."""
        storage: KeyValueStorage = app.extensions["storefront.storage"]
        if storage.is_available():
            return jsonify({
                "status": "ok",
                "storage": storage.backend_name,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }), 200
        return jsonify({"status": "error", "storage": storage.backend_name}), 503

    return app


def main() -> None:
    config.validate()
    application = create_app()
    application.run(debug=config.app.debug, host=config.app.host, port=config.app.port)


if __name__ == "__main__":
    main()
