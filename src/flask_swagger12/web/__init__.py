"""Docs Blueprint for flask-swagger12."""

from __future__ import annotations

from flask import Blueprint


def create_docs_blueprint(url_prefix: str = "/api/api-docs") -> Blueprint:
    bp = Blueprint("swagger12_docs", __name__, url_prefix=url_prefix)

    from flask_swagger12.web.api import register_api_routes

    register_api_routes(bp)

    return bp
