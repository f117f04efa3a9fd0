"""SWAGGER12_* settings resolution and validation.

Reads all SWAGGER12_* settings from Flask's app.config, applies defaults,
validates types and values, and exposes a frozen dataclass for internal use.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from flask_swagger12.declaration import DEFAULT_API_VERSION, JSON_MEDIA_TYPE, ApiInfo

if TYPE_CHECKING:
    from flask import Flask

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------
DEFAULT_PRODUCES = [JSON_MEDIA_TYPE]
DEFAULT_CONSUMES = [JSON_MEDIA_TYPE]
DEFAULT_DOCS_URL_PREFIX = "/api/api-docs"
DEFAULT_UI_ENABLED = False
DEFAULT_UI_PATH = "/api-docs"
DEFAULT_OUTPUT_DIR = "swagger_docs/"
DEFAULT_INFER_PATH_PARAMS = True

# Optional string settings shown in the listing ``info`` object.
INFO_KEYS = ("TITLE", "DESCRIPTION", "TERMS_OF_SERVICE_URL", "CONTACT", "LICENSE", "LICENSE_URL")


@dataclass(frozen=True)
class SwaggerSettings:
    """Validated SWAGGER12_* settings.

    All fields are immutable after validation. Created by load_settings().
    """

    api_version: str
    title: str | None
    description: str | None
    terms_of_service_url: str | None
    contact: str | None
    license: str | None
    license_url: str | None
    produces: list[str]
    consumes: list[str]
    docs_url_prefix: str
    ui_enabled: bool
    ui_path: str
    ui_assets_dir: str | None
    output_dir: str
    infer_path_params: bool

    def api_info(self) -> ApiInfo:
        """Return the document-level information for the builders."""
        return ApiInfo(
            api_version=self.api_version,
            title=self.title,
            description=self.description,
            terms_of_service_url=self.terms_of_service_url,
            contact=self.contact,
            license=self.license,
            license_url=self.license_url,
            produces=tuple(self.produces),
            consumes=tuple(self.consumes),
        )


def _optional_str(app: Flask, key: str) -> str | None:
    value = app.config.get(key, None)
    if value is not None and not isinstance(value, str):
        actual = type(value).__name__
        raise ValueError(f"{key} must be a string. Got: {actual}")
    return value


def _media_types(app: Flask, key: str, default: list[str]) -> list[str]:
    value = app.config.get(key, default)
    if value is None:
        value = default
    if isinstance(value, tuple):
        value = list(value)
    if not isinstance(value, list) or not value or not all(isinstance(v, str) and v for v in value):
        raise ValueError(f"{key} must be a non-empty list of media type strings.")
    return list(value)


def _url_path(app: Flask, key: str, default: str) -> str:
    value = app.config.get(key, default)
    if value is None:
        value = default
    if not isinstance(value, str) or not value.startswith("/"):
        raise ValueError(f"{key} must be a string starting with '/'. Got: {value!r}")
    return value


def _bool(app: Flask, key: str, default: bool) -> bool:
    value = app.config.get(key, default)
    if value is None:
        value = default
    if not isinstance(value, bool):
        actual = type(value).__name__
        raise ValueError(f"{key} must be a boolean. Got: {actual}")
    return value


def load_settings(app: Flask) -> SwaggerSettings:
    """Read and validate SWAGGER12_* settings from app.config.

    Each Flask config key is ``SWAGGER12_`` + uppercase field name
    (e.g. ``SWAGGER12_API_VERSION``).  ``None`` values fall back to defaults.

    Args:
        app: Flask application instance.

    Returns:
        Validated, frozen SwaggerSettings dataclass.

    Raises:
        ValueError: If any setting is invalid.
    """
    # --- api_version ---
    api_version = app.config.get("SWAGGER12_API_VERSION", DEFAULT_API_VERSION)
    if api_version is None:
        api_version = DEFAULT_API_VERSION
    if not isinstance(api_version, str) or len(api_version) == 0:
        raise ValueError("SWAGGER12_API_VERSION must be a non-empty string.")

    # --- info fields ---
    info: dict[str, Any] = {key.lower(): _optional_str(app, f"SWAGGER12_{key}") for key in INFO_KEYS}

    # --- produces / consumes ---
    produces = _media_types(app, "SWAGGER12_PRODUCES", DEFAULT_PRODUCES)
    consumes = _media_types(app, "SWAGGER12_CONSUMES", DEFAULT_CONSUMES)

    # --- docs_url_prefix ---
    docs_url_prefix = _url_path(app, "SWAGGER12_DOCS_URL_PREFIX", DEFAULT_DOCS_URL_PREFIX)

    # --- ui_enabled / ui_path ---
    ui_enabled = _bool(app, "SWAGGER12_UI_ENABLED", DEFAULT_UI_ENABLED)
    ui_path = _url_path(app, "SWAGGER12_UI_PATH", DEFAULT_UI_PATH)

    # --- ui_assets_dir ---
    ui_assets_dir = app.config.get("SWAGGER12_UI_ASSETS_DIR", None)
    if ui_assets_dir is not None:
        if not isinstance(ui_assets_dir, (str, Path)):
            actual = type(ui_assets_dir).__name__
            raise ValueError(f"SWAGGER12_UI_ASSETS_DIR must be a string path. Got: {actual}")
        ui_assets_dir = str(ui_assets_dir)

    # --- output_dir ---
    output_dir = app.config.get("SWAGGER12_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)
    if output_dir is None:
        output_dir = DEFAULT_OUTPUT_DIR
    if not isinstance(output_dir, (str, Path)):
        actual = type(output_dir).__name__
        raise ValueError(f"SWAGGER12_OUTPUT_DIR must be a string path. Got: {actual}")
    output_dir = str(output_dir)

    # --- infer_path_params ---
    infer_path_params = _bool(app, "SWAGGER12_INFER_PATH_PARAMS", DEFAULT_INFER_PATH_PARAMS)

    return SwaggerSettings(
        api_version=api_version,
        produces=produces,
        consumes=consumes,
        docs_url_prefix=docs_url_prefix,
        ui_enabled=ui_enabled,
        ui_path=ui_path,
        ui_assets_dir=ui_assets_dir,
        output_dir=output_dir,
        infer_path_params=infer_path_params,
        **info,
    )
