"""
Flask application for the blog list service.

create_app() wires the injected repository into a BlogResourceHandler,
registers the blogs blueprint, the index page and the error handlers.
Running this module directly opens the MongoDB connection from the
environment and serves on PORT.

Stack: Flask + pymongo + Jinja2
"""

import logging
from typing import Optional

from flask import Flask, jsonify, render_template, request
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException

from version import __version__

from .blogs import blogs_bp
from .config import AppConfig
from .errors import BlogListError
from .handlers import BlogResourceHandler
from .logger import setup_logging
from .repositories import BlogRepositoryInterface, connect_repository
from .togglable import Togglable

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(BlogListError)
    def handle_blog_error(error: BlogListError):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(PyMongoError)
    def handle_store_error(error: PyMongoError):
        logger.exception(f"Database operation failed: {error}")
        return jsonify({"error": "database unavailable"}), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        if error.code == 404:
            return jsonify({"error": "unknown endpoint"}), 404
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}")
        return jsonify({"error": "internal server error"}), 500


def create_app(
    repository: BlogRepositoryInterface,
    config: Optional[AppConfig] = None,
) -> Flask:
    """
    Build the Flask application.

    Args:
        repository: Blog store; the caller owns its connection
        config: Settings (defaults to AppConfig.from_env())

    Returns:
        Configured Flask app
    """
    config = config or AppConfig.from_env()

    app = Flask(__name__)
    app.config["TESTING"] = config.testing
    app.config["APP_CONFIG"] = config
    app.extensions["blog_handler"] = BlogResourceHandler(repository)

    if not config.testing:
        @app.before_request
        def log_request():
            logger.info(f"{request.method} {request.path} {request.get_json(silent=True) or ''}")

    app.register_blueprint(blogs_bp, url_prefix="/blogs")
    app.register_blueprint(blogs_bp, url_prefix="/api/blogs", name="api_blogs")

    @app.route("/")
    def index():
        """Render the blog list with the togglable create form."""
        form = Togglable("new blog", visible=request.args.get("form") == "open")
        blogs = app.extensions["blog_handler"].list()
        return render_template("index.html", blogs=blogs, form=form)

    @app.route("/health")
    def health():
        return jsonify({"status": "ok", "version": __version__})

    _register_error_handlers(app)
    return app


def main() -> None:
    config = AppConfig.from_env()
    setup_logging(config.log_level, config.log_format)
    logger.info(f"Starting blog list service: {config.summary()}")

    client, repository = connect_repository(config.repository)
    try:
        app = create_app(repository, config)
        app.run(host="0.0.0.0", port=config.port)
    finally:
        client.close()
        logger.info("MongoDB connection closed")


if __name__ == "__main__":
    main()
