"""Pydantic BaseModel to Model conversion backend.

- Model id is the class name.
- Field keys use the field alias when one is set.
- ``FieldInfo.is_required()`` decides the required flag.
- ``description`` and ``examples`` are kept as field metadata.
- A class that refers back to itself (directly or through other models)
  becomes a Recursive reference instead of being expanded again.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from flask_swagger12.schemas.nodes import Field, Model, Recursive

logger = logging.getLogger("flask_swagger12")


def is_pydantic_model(x: Any) -> bool:
    """Return True if ``x`` is a pydantic BaseModel subclass."""
    return isinstance(x, type) and issubclass(x, BaseModel)


def model_from_pydantic(cls: type[BaseModel], _seen: frozenset[type] = frozenset()) -> Model | Recursive:
    """Convert a pydantic model class into a Model.

    Args:
        cls: The BaseModel subclass.
        _seen: Classes already being converted higher up the tree.

    Returns:
        The Model, or a Recursive reference if ``cls`` is in ``_seen``.
    """
    from flask_swagger12.schemas.typehints_backend import hint_to_node

    if cls in _seen:
        return Recursive(cls.__name__)

    seen = _seen | {cls}
    fields: dict[str, Field] = {}
    for name, info in cls.model_fields.items():
        metadata: dict[str, Any] = {}
        if info.description:
            metadata["description"] = info.description
        if info.examples:
            metadata["examples"] = list(info.examples)
        fields[info.alias or name] = Field(
            hint_to_node(info.annotation, seen),
            required=info.is_required(),
            metadata=metadata,
        )

    logger.debug("Converted pydantic model %s (%d fields)", cls.__name__, len(fields))
    return Model(cls.__name__, fields)
