"""Schema subpackage for flask-swagger12.

Provides the TypeDispatcher that classifies schema nodes into Swagger 1.2
JSON Schema descriptors, using the lookup chain:
    identity match > class match (most specific first) > structural fallback

- TypeDispatcher.classify(node, top=False, registry=None)
- TypeDispatcher.register_identity / register_class / register_fallback
- Mappers are ``mapper(node, ctx) -> dict``; ``ctx.classify`` recurses
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from flask_swagger12.errors import UnsupportedSchemaError
from flask_swagger12.schemas._constants import PRIMITIVE_TYPE_MAP, PYTHON_TYPE_MAP, VOID
from flask_swagger12.schemas.nodes import (
    Either,
    Enumeration,
    Eq,
    ListOf,
    Maybe,
    Model,
    Recursive,
    SetOf,
)
from flask_swagger12.schemas.pydantic_backend import is_pydantic_model

if TYPE_CHECKING:
    from flask_swagger12.models import ModelRegistry

logger = logging.getLogger("flask_swagger12")

Mapper = Callable[[Any, "ClassifyContext"], dict[str, Any]]
Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class ClassifyContext:
    """Passed to every mapper so nested nodes classify with the same registry."""

    dispatcher: TypeDispatcher
    registry: ModelRegistry | None = None
    # True while classifying an operation's return type or body; wrappers
    # such as Maybe pass it on to their inner node.
    top: bool = False

    def classify(self, node: Any, *, top: bool = False) -> dict[str, Any]:
        return self.dispatcher.classify(node, top=top, registry=self.registry)


class TypeDispatcher:
    """Classifies schema nodes into JSON Schema descriptors.

    Lookup order for a node:
    1. Identity: exact match on the node itself (primitives, Python classes, None)
    2. Class: the node's class or its nearest registered base class
    3. Fallback: predicates in registration order

    The first match wins. Registering the same identity key or class again
    replaces the previous mapper. Registration is not thread-safe: finish
    it before classifying concurrently, or give each caller its own
    dispatcher.
    """

    def __init__(self, *, builtins: bool = True) -> None:
        self._identity: dict[Any, Mapper] = {}
        self._classes: dict[type, Mapper] = {}
        self._fallbacks: list[tuple[Predicate, Mapper]] = []
        if builtins:
            self._register_builtins()

    # -- registration -------------------------------------------------------

    def register_identity(self, key: Any, mapper: Mapper | None = None) -> Any:
        """Map a specific, hashable node (e.g. a primitive) to a mapper.

        Usable directly or as a decorator.
        """
        if mapper is None:
            return lambda fn: self.register_identity(key, fn)
        self._identity[key] = mapper
        logger.debug("TypeDispatcher: registered identity mapping for %r", key)
        return mapper

    def register_class(self, cls: type, mapper: Mapper | None = None) -> Any:
        """Map every node that is an instance of ``cls`` to a mapper."""
        if mapper is None:
            return lambda fn: self.register_class(cls, fn)
        self._classes[cls] = mapper
        logger.debug("TypeDispatcher: registered class mapping for %s", cls.__name__)
        return mapper

    def register_fallback(self, predicate: Predicate, mapper: Mapper | None = None) -> Any:
        """Map every node accepted by ``predicate`` to a mapper."""
        if mapper is None:
            return lambda fn: self.register_fallback(predicate, fn)
        self._fallbacks.append((predicate, mapper))
        logger.debug("TypeDispatcher: registered fallback mapping %r", predicate)
        return mapper

    def copy(self) -> TypeDispatcher:
        """Return an independent dispatcher with the same registrations."""
        clone = TypeDispatcher(builtins=False)
        clone._identity = dict(self._identity)
        clone._classes = dict(self._classes)
        clone._fallbacks = list(self._fallbacks)
        return clone

    # -- classification -----------------------------------------------------

    def classify(
        self,
        node: Any,
        *,
        top: bool = False,
        registry: ModelRegistry | None = None,
    ) -> dict[str, Any]:
        """Return the JSON Schema descriptor for a schema node.

        Args:
            node: The schema node to classify.
            top: True when the node is an operation's return type. A model
                in that position is rendered as ``{"type": id}`` instead of
                ``{"$ref": id}``.
            registry: Models that Recursive references resolve against.

        Returns:
            A fresh descriptor dict.

        Raises:
            UnsupportedSchemaError: If no mapping matches the node.
        """
        if top and isinstance(node, Recursive):
            target_id = node.target_id if registry is None else registry.resolve(node.target_id).id
            return {"type": target_id}
        if top and isinstance(node, Model):
            return {"type": node.id}

        mapper = self._lookup(node)
        if mapper is None:
            raise UnsupportedSchemaError(node)
        return mapper(node, ClassifyContext(self, registry, top))

    def _lookup(self, node: Any) -> Mapper | None:
        try:
            mapper = self._identity.get(node)
        except TypeError:
            # unhashable nodes can only match by class or fallback
            mapper = None
        if mapper is not None:
            return mapper

        for cls in type(node).__mro__:
            mapper = self._classes.get(cls)
            if mapper is not None:
                return mapper

        for predicate, mapper in self._fallbacks:
            if predicate(node):
                return mapper
        return None

    # -- built-in mappings --------------------------------------------------

    def _register_builtins(self) -> None:
        self.register_identity(None, lambda node, ctx: dict(VOID))
        for primitive, descriptor in PRIMITIVE_TYPE_MAP.items():
            self.register_identity(primitive, _constant(descriptor))
        for python_type, primitive in PYTHON_TYPE_MAP.items():
            self.register_identity(python_type, _constant(PRIMITIVE_TYPE_MAP[primitive]))

        self.register_class(Enumeration, _classify_enumeration)
        self.register_class(Maybe, lambda node, ctx: ctx.classify(node.inner, top=ctx.top))
        # Swagger 1.2 has no union type: only the first alternative is typed.
        self.register_class(Either, lambda node, ctx: ctx.classify(node.alternatives[0], top=ctx.top))
        self.register_class(Recursive, _classify_recursive)
        self.register_class(Eq, lambda node, ctx: ctx.classify(type(node.value)))
        self.register_class(ListOf, lambda node, ctx: {"type": "array", "items": ctx.classify(node.element)})
        self.register_class(
            SetOf,
            lambda node, ctx: {"type": "array", "uniqueItems": True, "items": ctx.classify(node.element)},
        )
        self.register_class(Model, lambda node, ctx: {"$ref": node.id})

        self.register_fallback(is_pydantic_model, lambda node, ctx: {"$ref": node.__name__})


def _constant(descriptor: dict[str, Any]) -> Mapper:
    return lambda node, ctx: dict(descriptor)


def _classify_enumeration(node: Enumeration, ctx: ClassifyContext) -> dict[str, Any]:
    values = [v.value if isinstance(v, enum.Enum) else v for v in node.values]
    schema = ctx.classify(type(values[0]))
    schema["enum"] = values
    return schema


def _classify_recursive(node: Recursive, ctx: ClassifyContext) -> dict[str, Any]:
    if ctx.registry is None:
        return {"$ref": node.target_id}
    return ctx.classify(ctx.registry.resolve(node.target_id))


_default_dispatcher: TypeDispatcher | None = None


def get_default_dispatcher() -> TypeDispatcher:
    """Return the process-wide dispatcher.

    Register extra mappings on it only at start-up, before any
    classification runs.
    """
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = TypeDispatcher()
    return _default_dispatcher
