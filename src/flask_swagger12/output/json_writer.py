"""JSON output writer for flask-swagger12."""

from __future__ import annotations

from typing import Any

from flask_swagger12.output._base import DocumentWriter
from flask_swagger12.serializers import to_json


class JSONWriter(DocumentWriter):
    """Writes Swagger documents as indented JSON files."""

    extension = "json"

    def render(self, document: dict[str, Any]) -> str:
        return to_json(document, indent=2)
