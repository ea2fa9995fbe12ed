"""
HTTP frontend for mdcover.

Exposes the MusicBrainz client as a small JSON API and serves the
pre-built frontend from a static directory.
"""

import os
import posixpath
from pathlib import Path
from typing import Optional, Union

from flask import Blueprint, Flask, Response, abort, current_app, jsonify, redirect, request, send_from_directory
from werkzeug.security import safe_join

from ..clients.musicbrainz import MusicBrainzClient
from ..core.config import ERROR_MESSAGES, SERVER_CONFIG
from ..core.exceptions import APIError, ValidationError
from ..core.logger import get_logger
from ..core.validation import validate_release_id, validate_search_query

logger = get_logger(__name__)

HEALTH_BODY = '{"status":"ok"}'
CLIENT_EXTENSION = "musicbrainz_client"

api = Blueprint("api", __name__, url_prefix="/api")


def plain_error(message: str, status: int) -> Response:
    """Plain-text error response; the body never carries upstream detail."""
    response = Response(f"{message}\n", status=status, mimetype="text/plain")
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


def _client() -> MusicBrainzClient:
    return current_app.extensions[CLIENT_EXTENSION]


@api.route("/search", methods=["GET"])
def search():
    try:
        query = validate_search_query(request.args.get("q"))
    except ValidationError as e:
        return plain_error(str(e), 400)

    try:
        results = _client().search_releases(query)
    except APIError as e:
        logger.error(f"Search error: {e}")
        return plain_error(ERROR_MESSAGES["SEARCH_FAILED"], 500)

    return jsonify(results.to_dict())


@api.route("/release/", defaults={"release_id": ""}, methods=["GET"])
@api.route("/release/<path:release_id>", methods=["GET"])
def release(release_id: str):
    try:
        release_id = validate_release_id(release_id)
    except ValidationError as e:
        return plain_error(str(e), 400)

    try:
        result = _client().get_release(release_id)
    except APIError as e:
        logger.error(f"GetRelease error: {e}")
        return plain_error(ERROR_MESSAGES["RELEASE_FAILED"], 500)

    return jsonify(result.to_dict())


@api.route("/health", methods=["GET"])
def health():
    return Response(HEALTH_BODY, mimetype="application/json")


def create_app(
    client: Optional[MusicBrainzClient] = None,
    static_dir: Optional[Union[str, Path]] = None
) -> Flask:
    """
    Build the Flask application.

    Args:
        client: MusicBrainz client shared by all requests (default: a new one)
        static_dir: Directory holding the frontend build (default: ./web/dist)

    Returns:
        Configured Flask app
    """
    static_root = os.path.abspath(static_dir or SERVER_CONFIG["STATIC_DIR"])

    app = Flask(__name__, static_folder=None)
    app.extensions[CLIENT_EXTENSION] = client or MusicBrainzClient()
    app.register_blueprint(api)

    @app.route("/", defaults={"path": ""}, methods=["GET"])
    @app.route("/<path:path>", methods=["GET"])
    def static_files(path: str):
        target = safe_join(static_root, path) if path else static_root
        if target is None:
            abort(404)
        if os.path.isdir(target):
            # /dir redirects to /dir/; directories serve their index page, never a listing
            if path and not path.endswith("/"):
                location = f"/{path}/"
                if request.query_string:
                    location += "?" + request.query_string.decode("latin-1")
                return redirect(location, code=301)
            path = posixpath.join(path, "index.html")
        return send_from_directory(static_root, path)

    logger.debug(f"Serving static files from {static_root}")
    return app
