"""Documentation browser Blueprint.

Serves prebuilt browser assets from a directory and redirects the mount
point itself to the browser's index page:

    GET <root>            -> 302 <script root><root>/index.html
    GET <root>/           -> same
    GET <root>/<file>     -> file from the assets directory, 404 if missing
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Blueprint, abort, redirect, request, send_from_directory

from flask_swagger12.web._paths import join_paths

logger = logging.getLogger("flask_swagger12")

INDEX_PAGE = "index.html"


def get_path(root: str, uri: str) -> str | None:
    """Return ``uri`` relative to ``root``, or None if it lies outside it.

    ``get_path("/ui-docs", "/ui-docs/index.html") == "index.html"``
    """
    root = root.rstrip("/")
    if uri == root:
        return ""
    if uri.startswith(root + "/"):
        return uri[len(root) + 1 :]
    return None


def index_path(root: str) -> str:
    """Return the index page URL of a browser mounted at ``root``."""
    return join_paths("/", root, INDEX_PAGE)


def create_ui_blueprint(root: str = "/api-docs", assets_dir: str | None = None) -> Blueprint:
    """Create the documentation browser Blueprint mounted at ``root``."""
    bp = Blueprint("swagger12_ui", __name__)
    mount = root.rstrip("/")

    if assets_dir is not None and not Path(assets_dir).is_dir():
        logger.warning("Documentation browser assets directory not found: %s", assets_dir)

    def serve(filename: str | None = None):
        path = get_path(root, request.path)
        if path is None:
            abort(404)
        if path == "":
            return redirect(request.script_root + index_path(root), code=302)
        if assets_dir is None:
            abort(404)
        return send_from_directory(Path(assets_dir).resolve(), path)

    bp.add_url_rule(f"{mount}/", "index", serve, strict_slashes=False)
    bp.add_url_rule(f"{mount}/<path:filename>", "asset", serve)
    return bp
