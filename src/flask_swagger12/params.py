"""Path template and parameter conversion.

Path templates use colon tokens (``/user/:id``); Swagger 1.2 expects
brace tokens (``/user/{id}``). Parameter declarations are expanded into
Swagger parameter objects:

    path / query -> one parameter per field of the attached field map
    body         -> a single parameter typed by the attached model
    other        -> InvalidParameterLocationError
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from flask_swagger12.errors import InvalidParameterLocationError
from flask_swagger12.schemas import TypeDispatcher, get_default_dispatcher
from flask_swagger12.schemas.nodes import STRING, Field, find_model_name, strict_schema

if TYPE_CHECKING:
    from flask_swagger12.models import ModelRegistry
    from flask_swagger12.routes import ParameterSpec

logger = logging.getLogger("flask_swagger12")

PARAMETER_LOCATIONS = ("path", "query", "body")

_PATH_TOKEN = re.compile(r":([^:|(/]+)")

DEFAULT_BODY_NAME = "body"


def to_swagger_path(uri: str) -> str:
    """Rewrite ``:name`` tokens into ``{name}``."""
    return _PATH_TOKEN.sub(r"{\1}", uri)


def path_params(uri: str) -> list[str]:
    """Return the token names of a path template, in order."""
    return _PATH_TOKEN.findall(uri)


def implied_path_parameters(uri: str) -> ParameterSpec | None:
    """Build a ``path`` parameter declaring every token of ``uri`` as a required string.

    Returns:
        The ParameterSpec, or None if the template has no tokens.
    """
    from flask_swagger12.routes import ParameterSpec

    names = path_params(uri)
    if not names:
        return None
    return ParameterSpec("path", {name: Field(STRING, required=True) for name in names})


def _convert_query_or_path(
    spec: ParameterSpec,
    dispatcher: TypeDispatcher,
    registry: ModelRegistry | None,
) -> list[dict[str, Any]]:
    if spec.model is None:
        return []
    result = []
    for key, field in strict_schema(spec.model).items():
        result.append(
            {
                **dispatcher.classify(field.node, registry=registry),
                "name": str(key),
                "description": "",
                "required": field.required,
                "paramType": spec.location,
            }
        )
    return result


def _convert_body(
    spec: ParameterSpec,
    dispatcher: TypeDispatcher,
    registry: ModelRegistry | None,
) -> list[dict[str, Any]]:
    if spec.model is None:
        return []
    name = find_model_name(spec.model)
    parameter: dict[str, Any] = {
        "name": name.lower() if name else DEFAULT_BODY_NAME,
        "description": "",
        "required": True,
    }
    parameter.update(spec.metadata)
    parameter["paramType"] = "body"
    parameter.update(dispatcher.classify(spec.model, top=True, registry=registry))
    return [parameter]


def convert_parameters(
    parameters: Iterable[ParameterSpec],
    *,
    dispatcher: TypeDispatcher | None = None,
    registry: ModelRegistry | None = None,
) -> list[dict[str, Any]]:
    """Expand parameter declarations into Swagger 1.2 parameter objects.

    Order is preserved: declarations in order, fields in declaration order.

    Raises:
        InvalidParameterLocationError: If a declaration's location is not
            path, query or body.
        UnsupportedSchemaError: If a parameter type cannot be classified.
    """
    dispatcher = dispatcher or get_default_dispatcher()
    result: list[dict[str, Any]] = []
    for spec in parameters:
        if spec.location == "body":
            result.extend(_convert_body(spec, dispatcher, registry))
        elif spec.location in ("path", "query"):
            result.extend(_convert_query_or_path(spec, dispatcher, registry))
        else:
            raise InvalidParameterLocationError(spec)
    return result
