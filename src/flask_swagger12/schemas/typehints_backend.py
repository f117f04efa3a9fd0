"""Python type hints to schema node conversion backend.

Lets route metadata and model fields be written with ordinary Python
annotations instead of schema nodes.

Type mapping table:
    str               -> STRING
    int               -> LONG
    float             -> DOUBLE
    bool              -> BOOLEAN
    datetime          -> DATE_TIME
    date              -> DATE
    None              -> None (void)
    list[T]           -> ListOf(T)
    tuple[T, ...]     -> ListOf(T)
    set[T]            -> SetOf(T)
    frozenset[T]      -> SetOf(T)
    Optional[T]       -> Maybe(T)
    T | None          -> same as Optional[T]
    Union[A, B]       -> Either((A, B))
    Literal["x"]      -> Eq("x")
    Literal["x", "y"] -> Enumeration(("x", "y"))
    enum.Enum class   -> Enumeration(member values)
    BaseModel class   -> Model (see pydantic_backend)
    Annotated[T, ...] -> T
    anything else     -> returned unchanged
"""

from __future__ import annotations

import collections.abc
import enum
import logging
import types
import typing
from typing import Any, Union

from pydantic import BaseModel

from flask_swagger12.schemas._constants import PYTHON_TYPE_MAP
from flask_swagger12.schemas.nodes import Either, Enumeration, Eq, ListOf, Maybe, SetOf

logger = logging.getLogger("flask_swagger12")

_SEQUENCE_ORIGINS = (list, tuple, collections.abc.Sequence, collections.abc.Iterable)
_SET_ORIGINS = (set, frozenset, collections.abc.Set, collections.abc.MutableSet)


def hint_to_node(hint: Any, _seen: frozenset[type] = frozenset()) -> Any:
    """Convert a single Python type hint to a schema node.

    Args:
        hint: The type hint to convert.
        _seen: pydantic classes whose conversion is in progress; a hint
            naming one of them becomes a Recursive reference.

    Returns:
        A schema node, or ``hint`` itself when it is not recognised.
    """
    if hint is None or hint is type(None):
        return None

    if isinstance(hint, type) and typing.get_origin(hint) is None:
        if hint in PYTHON_TYPE_MAP:
            return PYTHON_TYPE_MAP[hint]
        if issubclass(hint, enum.Enum):
            return Enumeration(tuple(member.value for member in hint))
        if issubclass(hint, BaseModel):
            from flask_swagger12.schemas.pydantic_backend import model_from_pydantic

            return model_from_pydantic(hint, _seen=_seen)

    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if origin is typing.Annotated:
        return hint_to_node(args[0], _seen)

    if origin is Union or isinstance(hint, types.UnionType):
        non_none = [a for a in args if a is not type(None)]
        if len(non_none) == 1:
            inner = hint_to_node(non_none[0], _seen)
        else:
            inner = Either(tuple(hint_to_node(a, _seen) for a in non_none))
        return Maybe(inner) if len(non_none) < len(args) else inner

    if origin is typing.Literal:
        if len(args) == 1:
            return Eq(args[0])
        return Enumeration(args)

    if origin in _SET_ORIGINS and args:
        return SetOf(hint_to_node(args[0], _seen))

    if origin in _SEQUENCE_ORIGINS and args:
        return ListOf(hint_to_node(args[0], _seen))

    logger.debug("Type hint %r has no schema node equivalent; passing through", hint)
    return hint
