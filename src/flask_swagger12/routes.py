"""Route metadata and API groups.

Routes are supplied by the caller (typically whatever harvests them from
the web framework) and grouped into named APIs. Each group becomes one
API declaration document.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from flask_swagger12.params import implied_path_parameters
from flask_swagger12.schemas.nodes import schema_node

logger = logging.getLogger("flask_swagger12")


@dataclass(frozen=True)
class ParameterSpec:
    """A parameter declaration.

    Attributes:
        location: ``"path"``, ``"query"`` or ``"body"``.
        model: For path/query, a Model or field map whose fields become
            parameters. For body, the schema of the request body.
        metadata: Keys overriding the defaults of a body parameter
            (e.g. ``name``, ``description``).
    """

    location: str
    model: Any = None
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "model", schema_node(self.model))
        object.__setattr__(self, "metadata", dict(self.metadata))


@dataclass(frozen=True)
class Route:
    """One operation: an HTTP method on a URI template.

    Attributes:
        method: HTTP method, any case (e.g. ``"get"``).
        uri: Colon-style URI template (e.g. ``"/user/:id"``).
        parameters: Parameter declarations, in order.
        return_node: Schema of the response; None renders as void.
        summary: Short description.
        notes: Long description.
        nickname: Operation id; generated from method and URI when unset.
    """

    method: str
    uri: str
    parameters: tuple[ParameterSpec, ...] = ()
    return_node: Any = None
    summary: str | None = None
    notes: str | None = None
    nickname: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "return_node", schema_node(self.return_node))

    def with_implied_path_parameters(self) -> Route:
        """Return this route with its URI tokens declared as path parameters.

        Routes that already declare a path parameter are returned unchanged.
        """
        if any(p.location == "path" for p in self.parameters):
            return self
        implied = implied_path_parameters(self.uri)
        if implied is None:
            return self
        return replace(self, parameters=(implied, *self.parameters))


@dataclass
class ApiGroup:
    """A named set of routes documented by one API declaration."""

    name: str
    description: str = ""
    routes: list[Route] = field(default_factory=list)


class ApiGroups(Mapping[str, ApiGroup]):
    """Ordered registry of API groups, keyed by name."""

    def __init__(self, *, infer_path_params: bool = True) -> None:
        self._groups: dict[str, ApiGroup] = {}
        self.infer_path_params = infer_path_params

    def group(self, name: str, description: str | None = None) -> ApiGroup:
        """Return the group ``name``, creating it if needed.

        A non-None ``description`` replaces the group's description.
        """
        api_group = self._groups.get(name)
        if api_group is None:
            api_group = self._groups[name] = ApiGroup(name)
            logger.debug("Created API group %r", name)
        if description is not None:
            api_group.description = description
        return api_group

    def add_route(self, api_name: str, route: Route, *, infer_path_params: bool | None = None) -> Route:
        """Add a route to a group, creating the group if needed.

        Args:
            api_name: Name of the group.
            route: The route to add.
            infer_path_params: Declare URI tokens as path parameters when
                the route declares none. Defaults to the registry setting.

        Returns:
            The route as stored.
        """
        if infer_path_params is None:
            infer_path_params = self.infer_path_params
        if infer_path_params:
            route = route.with_implied_path_parameters()
        self.group(api_name).routes.append(route)
        logger.debug("Registered route %s %s in API %r", route.method.upper(), route.uri, api_name)
        return route

    def __getitem__(self, name: str) -> ApiGroup:
        return self._groups[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)


def _camel_case(text: str) -> str:
    text = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", text)
    words = [w for w in re.split(r"[^0-9A-Za-z]+", text) if w]
    if not words:
        return ""
    return words[0].lower() + "".join(w[:1].upper() + w[1:].lower() for w in words[1:])


def generate_nickname(route: Route) -> str:
    """Generate an operation nickname from method and URI.

    ``get /user/:id`` becomes ``getUserById``. Two routes may produce the
    same nickname; keeping them apart is the caller's job.
    """
    text = f"{route.method} {route.uri}"
    text = text.replace("/", " ").replace("-", " ").replace(":", " by ")
    return _camel_case(text)
