"""YAML output writer for flask-swagger12."""

from __future__ import annotations

from typing import Any

import yaml

from flask_swagger12.output._base import DocumentWriter
from flask_swagger12.serializers import to_plain


class YAMLWriter(DocumentWriter):
    """Writes Swagger documents as YAML files.

    Documents are first reduced to plain JSON types so dates and enum
    members render the same way as in the JSON output.
    """

    extension = "yaml"

    def render(self, document: dict[str, Any]) -> str:
        return yaml.safe_dump(to_plain(document), sort_keys=False, allow_unicode=True)
