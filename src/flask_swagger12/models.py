"""Model collection and transformation.

collect_models() walks schema graphs and returns every named Model they
contain; ModelRegistry indexes models by id so Recursive references can be
resolved; transform() renders one model as a Swagger 1.2 model object.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from flask_swagger12.errors import DuplicateModelError, UnsupportedSchemaError
from flask_swagger12.schemas import TypeDispatcher, get_default_dispatcher
from flask_swagger12.schemas.nodes import (
    ANY_KEY,
    Either,
    Field,
    ListOf,
    Maybe,
    Model,
    Recursive,
    SetOf,
    schema_node,
)

logger = logging.getLogger("flask_swagger12")

# Field metadata keys that never leak into generated properties.
RESERVED_METADATA_KEYS = frozenset({"model", "name"})


def _children(node: Any) -> Iterable[Any]:
    if isinstance(node, Model):
        return (f.node for f in node.fields.values())
    if isinstance(node, (ListOf, SetOf)):
        return (node.element,)
    if isinstance(node, Maybe):
        return (node.inner,)
    if isinstance(node, Either):
        return node.alternatives
    if isinstance(node, Field):
        return (node.node,)
    return ()


def _shape(node: Any) -> Any:
    """The node with every nested Model or Recursive reduced to its id.

    A model reached through a cycle is expanded or cut off depending on
    where the walk started, so nested models only count by id.
    """
    if isinstance(node, Model):
        return ("model", node.id)
    if isinstance(node, Recursive):
        return ("model", node.target_id)
    if isinstance(node, Field):
        return ("field", _shape(node.node), node.required, node.metadata)
    if isinstance(node, (ListOf, SetOf)):
        return (type(node).__name__, _shape(node.element))
    if isinstance(node, Maybe):
        return ("maybe", _shape(node.inner))
    if isinstance(node, Either):
        return ("either", [_shape(a) for a in node.alternatives])
    return node


def same_structure(a: Model, b: Model) -> bool:
    """True if two models with the same id declare the same fields."""
    if a is b or a == b:
        return True
    return a.id == b.id and {k: _shape(f) for k, f in a.fields.items()} == {
        k: _shape(f) for k, f in b.fields.items()
    }


def _walk(roots: Iterable[Any]) -> tuple[dict[str, Model], set[str]]:
    """Depth-first walk returning models by id and the Recursive target ids."""
    found: dict[str, Model] = {}
    targets: set[str] = set()
    stack = [schema_node(r) for r in reversed(list(roots))]

    while stack:
        node = stack.pop()
        if isinstance(node, Recursive):
            targets.add(node.target_id)
            continue
        if isinstance(node, Model):
            seen = found.get(node.id)
            if seen is not None:
                if seen is node or seen == node:
                    continue
                if not same_structure(seen, node):
                    raise DuplicateModelError(node.id)
                # same fields, different nesting: its children may still
                # hold models not reached yet
            else:
                found[node.id] = node
        stack.extend(reversed(list(_children(node))))

    return found, targets


def collect_models(roots: Iterable[Any]) -> set[Model]:
    """Return every Model reachable from the given schema nodes.

    Containers (ListOf, SetOf, Maybe, Either and model fields) are walked
    recursively. A model is visited once per id. Recursive references are
    not followed; their target must be reachable some other way.

    Args:
        roots: Schema nodes, type hints or pydantic classes.

    Returns:
        The set of models found. Traversal order does not matter.

    Raises:
        DuplicateModelError: If two different structures share an id.
    """
    found, _ = _walk(roots)
    return set(found.values())


class ModelRegistry:
    """Models of one document build, keyed by id."""

    def __init__(self, models: Iterable[Model] = ()) -> None:
        self._models: dict[str, Model] = {}
        for model in models:
            self.add(model)

    @classmethod
    def from_roots(cls, roots: Iterable[Any]) -> ModelRegistry:
        """Collect models from ``roots`` and check every Recursive target exists.

        Raises:
            DuplicateModelError: If two different structures share an id.
            UnsupportedSchemaError: If a Recursive reference has no target.
        """
        found, targets = _walk(roots)
        registry = cls(found.values())
        for target_id in sorted(targets):
            registry.resolve(target_id)
        logger.debug("Collected %d models: %s", len(registry), ", ".join(registry.ids()))
        return registry

    def add(self, model: Model) -> None:
        existing = self._models.get(model.id)
        if existing is not None:
            if not same_structure(existing, model):
                raise DuplicateModelError(model.id)
            return
        self._models[model.id] = model

    def resolve(self, model_id: str) -> Model:
        """Return the model with the given id.

        Raises:
            UnsupportedSchemaError: If no such model was collected.
        """
        try:
            return self._models[model_id]
        except KeyError:
            raise UnsupportedSchemaError(
                model_id, reason="recursive reference to an unknown model"
            ) from None

    def ids(self) -> list[str]:
        return sorted(self._models)

    def __contains__(self, model_id: object) -> bool:
        return model_id in self._models

    def __iter__(self) -> Iterator[Model]:
        return iter(self._models.values())

    def __len__(self) -> int:
        return len(self._models)


def properties(
    model: Model,
    *,
    dispatcher: TypeDispatcher | None = None,
    registry: ModelRegistry | None = None,
) -> dict[str, dict[str, Any]]:
    """Build the ``properties`` object of a model."""
    dispatcher = dispatcher or get_default_dispatcher()
    result: dict[str, dict[str, Any]] = {}
    for key, field in model.fields.items():
        if key is ANY_KEY:
            continue
        metadata = {k: v for k, v in field.metadata.items() if k not in RESERVED_METADATA_KEYS}
        try:
            descriptor = dispatcher.classify(field.node, registry=registry)
        except UnsupportedSchemaError as e:
            raise e.with_context(model.id, str(key)) from e
        except Exception as e:
            raise UnsupportedSchemaError(
                field.node, model.id, str(key), reason=f"mapper failed with {type(e).__name__}: {e}"
            ) from e
        result[str(key)] = {**metadata, **descriptor}
    return result


def transform(
    model: Model,
    *,
    dispatcher: TypeDispatcher | None = None,
    registry: ModelRegistry | None = None,
) -> dict[str, Any]:
    """Render a model as ``{"id", "properties", "required"}``.

    ``required`` lists the required keys in field order and is left out
    when there are none.

    Raises:
        UnsupportedSchemaError: If a field cannot be classified; the error
            names the model and the field.
    """
    result: dict[str, Any] = {
        "id": model.id,
        "properties": properties(model, dispatcher=dispatcher, registry=registry),
    }
    required = [str(k) for k in model.required_keys if k is not ANY_KEY]
    if required:
        result["required"] = required
    return result


def transform_models(
    roots: Iterable[Any],
    *,
    dispatcher: TypeDispatcher | None = None,
) -> dict[str, dict[str, Any]]:
    """Collect and transform every model reachable from ``roots``, keyed by id."""
    registry = ModelRegistry.from_roots(roots)
    return {
        model_id: transform(registry.resolve(model_id), dispatcher=dispatcher, registry=registry)
        for model_id in registry.ids()
    }
