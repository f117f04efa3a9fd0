"""Swagger 1.2 Resource Listing and API Declaration builders.

Pure functions with no Flask dependency. Used by the docs Blueprint, the
CLI and the output writers.

Mapping rules:
- The listing has one ``apis`` entry per registered group, in order.
- Each declaration collects the models referenced by its routes' return
  types and body parameters, and renders them under ``models``.
- Each route maps to one ``apis`` entry holding a single operation.
- A return model is rendered as ``"type": id``; other return types use
  their descriptor (``$ref``, ``items`` ...) directly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from flask_swagger12.models import ModelRegistry, transform
from flask_swagger12.params import convert_parameters, to_swagger_path
from flask_swagger12.routes import ApiGroup, Route, generate_nickname
from flask_swagger12.schemas import TypeDispatcher, get_default_dispatcher

logger = logging.getLogger("flask_swagger12")

SWAGGER_VERSION = "1.2"
DEFAULT_API_VERSION = "0.0.1"
JSON_MEDIA_TYPE = "application/json"


@dataclass(frozen=True)
class ApiInfo:
    """Document-level information shared by the listing and the declarations."""

    api_version: str = DEFAULT_API_VERSION
    title: str | None = None
    description: str | None = None
    terms_of_service_url: str | None = None
    contact: str | None = None
    license: str | None = None
    license_url: str | None = None
    produces: tuple[str, ...] = (JSON_MEDIA_TYPE,)
    consumes: tuple[str, ...] = (JSON_MEDIA_TYPE,)

    def info(self) -> dict[str, str]:
        """Return the listing ``info`` object, with unset fields left out."""
        fields = {
            "title": self.title,
            "description": self.description,
            "termsOfServiceUrl": self.terms_of_service_url,
            "contact": self.contact,
            "license": self.license,
            "licenseUrl": self.license_url,
        }
        return {k: v for k, v in fields.items() if v is not None}


def build_listing(api_info: ApiInfo, groups: Mapping[str, ApiGroup]) -> dict[str, Any]:
    """Build the Resource Listing document.

    Args:
        api_info: Document-level information.
        groups: Registered API groups, keyed by name.

    Returns:
        Swagger 1.2 Resource Listing as a nested dict.
    """
    return {
        "swaggerVersion": SWAGGER_VERSION,
        "apiVersion": api_info.api_version,
        "info": api_info.info(),
        "apis": [
            {"path": f"/{name}", "description": group.description or ""}
            for name, group in groups.items()
        ],
    }


def extract_models(group: ApiGroup) -> list[Any]:
    """Return the return types and body parameter models of a group's routes.

    Duplicates are removed; the order carries no meaning.
    """
    found: list[Any] = []
    for route in group.routes:
        candidates = [route.return_node]
        candidates.extend(p.model for p in route.parameters if p.location == "body")
        for node in candidates:
            if node is not None and node not in found:
                found.append(node)
    return found


def _build_operation(
    route: Route,
    dispatcher: TypeDispatcher,
    registry: ModelRegistry,
) -> dict[str, Any]:
    return {
        **dispatcher.classify(route.return_node, top=True, registry=registry),
        "method": route.method.upper(),
        "summary": route.summary or "",
        "notes": route.notes or "",
        "nickname": route.nickname or generate_nickname(route),
        "responseMessages": [],
        "parameters": convert_parameters(route.parameters, dispatcher=dispatcher, registry=registry),
    }


def build_declaration(
    api_info: ApiInfo,
    groups: Mapping[str, ApiGroup],
    api_name: str,
    base_path: str,
    *,
    dispatcher: TypeDispatcher | None = None,
) -> dict[str, Any] | None:
    """Build the API Declaration of one group.

    Args:
        api_info: Document-level information.
        groups: Registered API groups, keyed by name.
        api_name: Name of the group to document.
        base_path: Absolute URL the API paths are relative to.
        dispatcher: Type dispatcher; the default one when None.

    Returns:
        Swagger 1.2 API Declaration as a nested dict, or None if
        ``api_name`` is not registered.

    Raises:
        UnsupportedSchemaError: If a schema node cannot be classified.
        InvalidParameterLocationError: If a parameter location is invalid.
        DuplicateModelError: If two different models share an id.
    """
    group = groups.get(api_name)
    if group is None:
        return None

    dispatcher = dispatcher or get_default_dispatcher()
    registry = ModelRegistry.from_roots(extract_models(group))
    models = {
        model_id: transform(registry.resolve(model_id), dispatcher=dispatcher, registry=registry)
        for model_id in registry.ids()
    }

    apis = [
        {
            "path": to_swagger_path(route.uri),
            "operations": [_build_operation(route, dispatcher, registry)],
        }
        for route in group.routes
    ]
    logger.debug("Built declaration for API %r: %d routes, %d models", api_name, len(apis), len(models))

    return {
        "swaggerVersion": SWAGGER_VERSION,
        "apiVersion": api_info.api_version,
        "produces": list(api_info.produces),
        "consumes": list(api_info.consumes),
        "basePath": base_path,
        "resourcePath": "",
        "models": models,
        "apis": apis,
    }


def build_declarations(
    api_info: ApiInfo,
    groups: Mapping[str, ApiGroup],
    base_path: str,
    *,
    names: Iterable[str] | None = None,
    dispatcher: TypeDispatcher | None = None,
) -> dict[str, dict[str, Any]]:
    """Build the declarations of several groups (all of them by default).

    Unknown names are skipped.
    """
    result: dict[str, dict[str, Any]] = {}
    for name in names if names is not None else list(groups):
        declaration = build_declaration(api_info, groups, name, base_path, dispatcher=dispatcher)
        if declaration is not None:
            result[name] = declaration
    return result
