"""Shared constants for the type dispatcher and schema backends."""

from __future__ import annotations

import datetime
from typing import Any

from flask_swagger12.schemas.nodes import Primitive

# Primitive schema node to Swagger 1.2 JSON Schema descriptor.
PRIMITIVE_TYPE_MAP: dict[Primitive, dict[str, Any]] = {
    Primitive.LONG: {"type": "integer", "format": "int64"},
    Primitive.DOUBLE: {"type": "number", "format": "double"},
    Primitive.STRING: {"type": "string"},
    Primitive.BOOLEAN: {"type": "boolean"},
    Primitive.KEYWORD: {"type": "string"},
    Primitive.DATE_TIME: {"type": "string", "format": "date-time"},
    Primitive.DATE: {"type": "string", "format": "date"},
}

# Python class to primitive node. Used for type hints and for the class
# of enumeration and literal values.
PYTHON_TYPE_MAP: dict[type, Primitive] = {
    int: Primitive.LONG,
    float: Primitive.DOUBLE,
    str: Primitive.STRING,
    bool: Primitive.BOOLEAN,
    datetime.datetime: Primitive.DATE_TIME,
    datetime.date: Primitive.DATE,
}

VOID: dict[str, Any] = {"type": "void"}
