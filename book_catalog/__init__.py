import os

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .errors import CatalogError, StoreError
from .middleware import MethodOverrideMiddleware
from .store import BookStore


def create_app(test_config=None):
    app = Flask(__name__)

    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "secret_key_1234")

    app.config.setdefault("MONGODB_HOST", os.environ.get("MONGODB_HOST", "mongodb://localhost:27017/BOOK"))
    app.config.setdefault("MONGODB_CLIENT_CLASS", None)
    app.config.setdefault("CATALOG_PAGE_SIZE", int(os.environ.get("CATALOG_PAGE_SIZE", "10")))
    app.config.setdefault("LOG_LEVEL", os.environ.get("LOG_LEVEL", "INFO"))
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    store = BookStore(app.config["MONGODB_HOST"], client_class=app.config["MONGODB_CLIENT_CLASS"])
    app.extensions["book_store"] = store.open()
    app.logger.info("Connected to MongoDB at %s", app.config["MONGODB_HOST"])

    from .views_bp import bp as views_bp
    from .api_bp import bp as api_bp
    app.register_blueprint(views_bp)
    app.register_blueprint(api_bp)

    register_error_handlers(app)

    return app


def _wants_json():
    return request.path.startswith("/api/")


def register_error_handlers(app):
    @app.errorhandler(CatalogError)
    def handle_catalog_error(err):
        if isinstance(err, StoreError):
            app.logger.error("%s: %s", err.message, err.__cause__, exc_info=err)
        else:
            app.logger.warning("Rejected %s %s: %s", request.method, request.path, err.message)

        if _wants_json():
            return jsonify(error=err.message), err.status_code
        return err.message, err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        if _wants_json() and err.code is not None and err.code >= 400:
            return jsonify(error=err.description), err.code
        return err
