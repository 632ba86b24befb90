#!/usr/bin/env python3
"""
404 Deployment Not Found server.
Serves a branded not-found page for every unmatched request, a health check
and the static assets under the public directory.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from dotenv import load_dotenv
from flask import Flask, Response, jsonify, request, send_from_directory
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from notfound_server.config import (
    ALL_METHODS,
    DEFAULT_CORS_ORIGINS,
    DEFAULT_HOST,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_PUBLIC_DIR,
    DEFAULT_SERVICE_NAME,
    DEFAULT_TEMPLATE_PATH,
    ERROR_MESSAGES,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    NOT_FOUND_TEMPLATE,
    PROJECT_ROOT,
)
from notfound_server.request_id import RequestIdExtractor
from notfound_server.responses import ResponseBuilder
from notfound_server.templates import TemplateLoadError, TemplateLoader

env_path = PROJECT_ROOT / ".env"
if env_path.exists():
    load_dotenv(env_path)

logger = logging.getLogger(__name__)

# (rule, endpoint, methods, automatic OPTIONS), matched in registration order.
# OPTIONS stays automatic on /public so CORS preflight is answered.
Route = Tuple[str, str, List[str], bool]
ROUTES: List[Route] = [
    ("/public/<path:filename>", "public", ["GET", "HEAD"], True),
    ("/health", "health", ["GET", "HEAD"], False),
    ("/", "not_found", ALL_METHODS, False),
    ("/<path:path>", "not_found", ALL_METHODS, False),
]


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


def _parse_origins(raw: str) -> Union[str, List[str]]:
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    if not origins or origins == ["*"]:
        return "*"
    return origins


def create_app(
    template_path: Optional[Union[str, Path]] = None,
    public_dir: Optional[Union[str, Path]] = None,
    service_name: Optional[str] = None,
) -> Flask:
    """Build the Flask application

    The not-found template is read once here; a missing or unreadable file
    raises before any request can be served.

    Args:
        template_path: HTML template with a ``{{ requestId }}`` placeholder
        public_dir: Directory served under ``/public``
        service_name: Name reported by the health check

    Returns:
        Configured Flask application

    Raises:
        TemplateLoadError: If the template cannot be loaded
    """
    template_path = Path(
        template_path or os.environ.get("TEMPLATE_PATH") or DEFAULT_TEMPLATE_PATH
    )
    public_dir = Path(public_dir or os.environ.get("PUBLIC_DIR") or DEFAULT_PUBLIC_DIR)
    service_name = service_name or os.environ.get("SERVICE_NAME") or DEFAULT_SERVICE_NAME

    template_loader = TemplateLoader()
    template_loader.load_template(NOT_FOUND_TEMPLATE, template_path)
    response_builder = ResponseBuilder(service_name)

    app = Flask(__name__, static_folder=None)
    app.config["PUBLIC_DIR"] = public_dir
    app.config["SERVICE_NAME"] = service_name
    app.extensions["template_loader"] = template_loader

    CORS(
        app,
        resources={
            r"/public/*": {
                "origins": _parse_origins(
                    os.environ.get("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
                )
            }
        },
    )

    def render_not_found() -> Response:
        request_id = RequestIdExtractor.extract(request.headers)
        logger.info(f"404 {request.method} {request.path} request_id={request_id}")
        html = template_loader.render(NOT_FOUND_TEMPLATE, {"requestId": request_id})
        return response_builder.not_found(html, request_id).to_response()

    def serve_public(filename: str) -> Response:
        """Serve static assets (CSS, images, etc.)"""
        return send_from_directory(str(public_dir), filename)

    def health() -> Response:
        """Health check endpoint"""
        return response_builder.health().to_response()

    def not_found(path: str = "") -> Response:
        """Branded not-found page for every unmatched request

        ``path`` is bound by the catch-all rule and not used.
        """
        return render_not_found()

    views: Dict[str, Callable[..., Response]] = {
        "public": serve_public,
        "health": health,
        "not_found": not_found,
    }
    for rule, endpoint, methods, automatic_options in ROUTES:
        app.add_url_rule(
            rule,
            endpoint,
            views[endpoint],
            methods=methods,
            provide_automatic_options=automatic_options,
        )

    # Methods outside ALL_METHODS surface as 405 from routing
    @app.errorhandler(404)
    @app.errorhandler(405)
    def handle_not_found(_error):
        return render_not_found()

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal server error: {error}", exc_info=True)
        return (
            jsonify(
                {
                    "error": ERROR_MESSAGES["internal_error"],
                    "message": ERROR_MESSAGES["unexpected"],
                }
            ),
            500,
        )

    @app.errorhandler(Exception)
    def handle_exception(error):
        if isinstance(error, HTTPException):
            return error
        logger.error(f"Unhandled exception: {error}", exc_info=True)
        return (
            jsonify(
                {
                    "error": ERROR_MESSAGES["internal_error"],
                    "message": ERROR_MESSAGES["unexpected"],
                }
            ),
            500,
        )

    return app


def main() -> None:
    """Run the not-found server"""
    configure_logging()

    port = int(os.environ.get("PORT", DEFAULT_PORT))
    host = os.environ.get("HOST", DEFAULT_HOST)
    debug = os.environ.get("DEBUG", "False").lower() == "true"

    logger.info("404 Deployment Not Found service starting...")
    try:
        app = create_app()
    except TemplateLoadError as e:
        logger.error(f"Failed to start: {e}")
        sys.exit(1)

    logger.info("=" * 60)
    logger.info("404 Deployment Not Found service")
    logger.info("=" * 60)
    logger.info(f"Server starting on http://{host}:{port}")
    logger.info(f"Debug mode: {debug}")
    logger.info(f"Public directory: {app.config['PUBLIC_DIR']}")
    logger.info(f"Service name: {app.config['SERVICE_NAME']}")
    logger.info("=" * 60)

    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
