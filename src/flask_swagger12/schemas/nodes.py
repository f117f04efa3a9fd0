"""Schema node types.

A schema is a tree of the nodes below. Plain Python type hints and
pydantic models are accepted wherever a node is expected and are coerced
through :func:`schema_node`.

Node variants:
    Primitive        -> Long, Double, String, Boolean, Keyword, DateTime, Date
    Enumeration(vs)  -> fixed set of values, declared order kept
    Maybe(inner)     -> optional value (Optional[T])
    Either(alts)     -> union of alternatives (Union[A, B])
    Recursive(id)    -> reference to a Model by id, used for self-reference
    Eq(value)        -> a single literal value (Literal["x"])
    ListOf(elem)     -> ordered sequence
    SetOf(elem)      -> set of unique elements
    Model(id, ...)   -> named field map
"""

from __future__ import annotations

import enum
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class Primitive(enum.Enum):
    """Leaf schema types."""

    LONG = "Long"
    DOUBLE = "Double"
    STRING = "String"
    BOOLEAN = "Boolean"
    KEYWORD = "Keyword"
    DATE_TIME = "DateTime"
    DATE = "Date"

    def __repr__(self) -> str:
        return self.value


LONG = Primitive.LONG
DOUBLE = Primitive.DOUBLE
STRING = Primitive.STRING
BOOLEAN = Primitive.BOOLEAN
KEYWORD = Primitive.KEYWORD
DATE_TIME = Primitive.DATE_TIME
DATE = Primitive.DATE


class _Marker:
    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


# Open-key marker: a field map containing ANY_KEY accepts unknown keys.
ANY_KEY = _Marker("ANY_KEY")
ANY = _Marker("ANY")


@dataclass(frozen=True)
class Enumeration:
    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if not values:
            raise ValueError("Enumeration needs at least one value")
        object.__setattr__(self, "values", values)


@dataclass(frozen=True)
class Maybe:
    inner: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner", schema_node(self.inner))


@dataclass(frozen=True)
class Either:
    """Union of alternatives. Only the first one is used for typing."""

    alternatives: tuple[Any, ...]

    def __post_init__(self) -> None:
        alternatives = tuple(schema_node(a) for a in self.alternatives)
        if not alternatives:
            raise ValueError("Either needs at least one alternative")
        object.__setattr__(self, "alternatives", alternatives)


@dataclass(frozen=True)
class Recursive:
    target_id: str


@dataclass(frozen=True)
class Eq:
    value: Any


@dataclass(frozen=True)
class ListOf:
    element: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "element", schema_node(self.element))


@dataclass(frozen=True)
class SetOf:
    element: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "element", schema_node(self.element))


@dataclass(frozen=True)
class Field:
    """One field of a model.

    Attributes:
        node: Schema node of the field value.
        required: Whether the key must be present.
        metadata: Extra descriptor keys merged into the generated property
            (e.g. ``description``, ``defaultValue``).
    """

    node: Any
    required: bool = True
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "node", schema_node(self.node))
        object.__setattr__(self, "metadata", dict(self.metadata))


@dataclass(frozen=True, repr=False)
class Model:
    """A named field map.

    Models are equal when id and fields are equal, and hash by id, so a
    set of models holds one entry per structure.
    """

    id: str
    fields: Mapping[Any, Field]

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id:
            raise ValueError(f"Model id must be a non-empty string. Got: {self.id!r}")
        object.__setattr__(self, "fields", as_fields(self.fields))

    def __hash__(self) -> int:
        return hash(("Model", self.id))

    def __repr__(self) -> str:
        return f"Model({self.id!r})"

    @property
    def required_keys(self) -> list[Any]:
        return [k for k, f in self.fields.items() if f.required]


NODE_TYPES = (Primitive, Enumeration, Maybe, Either, Recursive, Eq, ListOf, SetOf, Model)


def schema_node(x: Any) -> Any:
    """Coerce a Python type hint or pydantic class into a schema node.

    Nodes, ``None``, markers and plain field maps are returned as-is.
    Objects that are not recognised are returned unchanged so that custom
    dispatcher registrations can classify them.
    """
    if x is None or isinstance(x, (*NODE_TYPES, _Marker, Mapping)):
        return x
    from flask_swagger12.schemas.typehints_backend import hint_to_node

    return hint_to_node(x)


def as_fields(x: Any) -> dict[Any, Field]:
    """Return the field map of a Model, or normalise a plain mapping.

    Values that are not :class:`Field` instances become required fields.
    """
    if isinstance(x, Model):
        return dict(x.fields)
    if not isinstance(x, Mapping):
        raise TypeError(f"Expected a Model or a field mapping. Got: {type(x).__name__}")
    return {k: v if isinstance(v, Field) else Field(v) for k, v in x.items()}


def _camel_key(key: Any) -> str:
    words = re.split(r"[^0-9A-Za-z]+", str(key))
    return "".join(w[:1].upper() + w[1:] for w in words if w)


def _name_sub_schemas(node: Any, name: str) -> Any:
    if isinstance(node, Field):
        return Field(_name_sub_schemas(node.node, name), node.required, node.metadata)
    if isinstance(node, Mapping):
        return define_model(name, node)
    if isinstance(node, Maybe):
        return Maybe(_name_sub_schemas(node.inner, name))
    if isinstance(node, ListOf):
        return ListOf(_name_sub_schemas(node.element, name))
    if isinstance(node, SetOf):
        return SetOf(_name_sub_schemas(node.element, name))
    if isinstance(node, Either):
        return Either(
            tuple(
                _name_sub_schemas(alt, name if i == 0 else f"{name}{i + 1}")
                for i, alt in enumerate(node.alternatives)
            )
        )
    return schema_node(node)


def define_model(model_id: str, fields: Mapping[Any, Any]) -> Model:
    """Build a Model, naming nested anonymous field maps after their path.

    A nested plain dict under key ``address`` of model ``Customer`` becomes
    the model ``CustomerAddress``, also when wrapped in Maybe, ListOf,
    SetOf or Either.
    """
    named: dict[Any, Field] = {}
    for key, value in fields.items():
        if key is ANY_KEY:
            named[key] = value if isinstance(value, Field) else Field(value, required=False)
            continue
        sub_name = f"{model_id}{_camel_key(key)}"
        value = _name_sub_schemas(value, sub_name)
        named[key] = value if isinstance(value, Field) else Field(value)
    return Model(model_id, named)


def loose_schema(fields: Any) -> dict[Any, Field]:
    """Add the open-key marker to a field map."""
    result = as_fields(fields)
    result[ANY_KEY] = Field(ANY, required=False)
    return result


def strict_schema(fields: Any) -> dict[Any, Field]:
    """Remove the open-key marker from a field map."""
    result = as_fields(fields)
    result.pop(ANY_KEY, None)
    return result


def find_model_name(node: Any) -> str | None:
    """Return the id of the model a node refers to, looking through wrappers."""
    if isinstance(node, Model):
        return node.id
    if isinstance(node, Recursive):
        return node.target_id
    if isinstance(node, Maybe):
        return find_model_name(node.inner)
    if isinstance(node, (ListOf, SetOf)):
        return find_model_name(node.element)
    if isinstance(node, Either):
        return find_model_name(node.alternatives[0])
    return None
