"""JSON endpoints of the docs Blueprint: resource listing and API declarations."""

from __future__ import annotations

import logging

from flask import Blueprint, Response, jsonify, request

from flask_swagger12.declaration import build_declaration, build_listing
from flask_swagger12.errors import SwaggerError
from flask_swagger12.registry import get_api_groups, get_api_info, get_dispatcher
from flask_swagger12.serializers import to_json
from flask_swagger12.web._paths import base_path, split_host

logger = logging.getLogger("flask_swagger12")


def request_base_path() -> str:
    """Base URL of the current request, including the application root."""
    host, port = split_host(request.host)
    return base_path(
        request.scheme,
        host,
        port,
        context=request.script_root,
        forwarded_proto=request.headers.get("X-Forwarded-Proto"),
    )


def _json_response(document: dict) -> Response:
    return Response(to_json(document), mimetype="application/json")


def register_api_routes(bp: Blueprint) -> None:

    @bp.route("", strict_slashes=False)
    def resource_listing():
        return _json_response(build_listing(get_api_info(), get_api_groups()))

    @bp.route("/<path:api_name>")
    def api_declaration(api_name: str):
        try:
            declaration = build_declaration(
                get_api_info(),
                get_api_groups(),
                api_name,
                request_base_path(),
                dispatcher=get_dispatcher(),
            )
        except SwaggerError as e:
            logger.exception("Failed to build API declaration for %r", api_name)
            return jsonify({"error": str(e)}), 500

        if declaration is None:
            return jsonify({"error": f"API '{api_name}' not found"}), 404
        return _json_response(declaration)
