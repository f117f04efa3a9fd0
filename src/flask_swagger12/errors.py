"""Error types raised while building Swagger 1.2 documents.

All errors are schema-authoring mistakes: the offending transformation is
aborted and the error propagates to the caller. Nothing here is retried.
"""

from __future__ import annotations

from typing import Any


class SwaggerError(Exception):
    """Base class for flask-swagger12 errors."""


class UnsupportedSchemaError(SwaggerError):
    """No registered mapping can classify a schema node.

    Attributes:
        node: The schema node that could not be classified.
        model_id: Id of the enclosing model, when known.
        field_key: Key of the enclosing model field, when known.
    """

    def __init__(
        self,
        node: Any,
        model_id: str | None = None,
        field_key: str | None = None,
        reason: str | None = None,
    ) -> None:
        self.node = node
        self.model_id = model_id
        self.field_key = field_key
        self.reason = reason
        super().__init__(self._format())

    def _format(self) -> str:
        msg = self.reason or "don't know how to create json-type of"
        msg = f"{msg}: {self.node!r}"
        if self.model_id is not None or self.field_key is not None:
            msg += f" (model={self.model_id!r}, field={self.field_key!r})"
        return msg

    def with_context(self, model_id: str, field_key: str) -> UnsupportedSchemaError:
        """Return a copy of this error carrying the enclosing model and field."""
        return UnsupportedSchemaError(
            self.node,
            model_id=self.model_id or model_id,
            field_key=self.field_key or field_key,
            reason=self.reason,
        )


class InvalidParameterLocationError(SwaggerError):
    """A parameter declaration uses a location other than path, query or body."""

    def __init__(self, spec: Any) -> None:
        self.spec = spec
        location = getattr(spec, "location", None)
        super().__init__(f"wrong parameter location: {location!r} <-- {spec!r}")


class DuplicateModelError(SwaggerError):
    """Two different structures were declared under the same model id."""

    def __init__(self, model_id: str) -> None:
        self.model_id = model_id
        super().__init__(f"model id {model_id!r} is declared with two different structures")
