"""JSON encoding of Swagger documents.

Pure functions with no Flask dependency. Documents built by
flask_swagger12.declaration are plain dicts, but enumeration values and
field metadata may hold dates, enum members or schema objects; those are
rendered as follows:

    datetime        -> ISO-8601 string, UTC, millisecond precision ("...Z")
    date            -> "YYYY-MM-DD"
    enum.Enum       -> its value
    Model           -> its id
    Primitive       -> its name ("Long", "String", ...)
    set / frozenset -> list
    SwaggerError    -> its message
"""

from __future__ import annotations

import datetime
import enum
import json
from typing import Any

from flask_swagger12.errors import SwaggerError
from flask_swagger12.schemas.nodes import Model, Primitive


def format_date_time(value: datetime.datetime) -> str:
    """Render a datetime as UTC ISO-8601 with milliseconds.

    Naive datetimes are taken to be UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def json_default(obj: Any) -> Any:
    """``default`` hook for ``json.dumps``.

    Raises:
        TypeError: If the object has no JSON rendering.
    """
    if isinstance(obj, datetime.datetime):
        return format_date_time(obj)
    if isinstance(obj, datetime.date):
        return obj.isoformat()
    if isinstance(obj, Primitive):
        return obj.value
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, Model):
        return obj.id
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=repr)
    if isinstance(obj, SwaggerError):
        return str(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(document: Any, *, indent: int | None = None) -> str:
    """Serialize a document to JSON text."""
    return json.dumps(document, indent=indent, ensure_ascii=False, default=json_default)


def to_plain(document: Any) -> Any:
    """Return a copy of a document made only of JSON types."""
    return json.loads(to_json(document))
