"""App-scoped API groups, dispatcher and settings accessors.

State lives per-app in app.extensions["swagger12"], so that:
- Multiple Flask apps keep separate API groups and type dispatchers
- Test cases get a clean state with each new app
- No global mutable state is shared between apps
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from flask import current_app

if TYPE_CHECKING:
    from flask import Flask

    from flask_swagger12.config import SwaggerSettings
    from flask_swagger12.declaration import ApiInfo
    from flask_swagger12.routes import ApiGroups
    from flask_swagger12.schemas import TypeDispatcher

logger = logging.getLogger("flask_swagger12")

EXTENSION_KEY = "swagger12"


def _ext_data(app: Flask | None) -> dict[str, Any]:
    if app is None:
        app = current_app._get_current_object()
    ext_data = app.extensions.get(EXTENSION_KEY)
    if ext_data is None:
        raise RuntimeError("flask-swagger12 not initialized. " "Call Swagger(app) or swagger.init_app(app) first.")
    return ext_data


def get_api_groups(app: Flask | None = None) -> ApiGroups:
    """Return the API groups registered for the current Flask app.

    Args:
        app: Flask app instance, or None to use current_app.

    Raises:
        RuntimeError: If flask-swagger12 not initialized or outside app context.
    """
    return _ext_data(app)["groups"]


def get_dispatcher(app: Flask | None = None) -> TypeDispatcher:
    """Return the type dispatcher owned by the current Flask app.

    Raises:
        RuntimeError: If flask-swagger12 not initialized or outside app context.
    """
    return _ext_data(app)["dispatcher"]


def get_settings(app: Flask | None = None) -> SwaggerSettings:
    """Return the validated SWAGGER12_* settings of the current Flask app."""
    return _ext_data(app)["settings"]


def get_api_info(app: Flask | None = None) -> ApiInfo:
    """Return the document-level information of the current Flask app."""
    return _ext_data(app)["api_info"]
