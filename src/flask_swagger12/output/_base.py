"""Shared file layout for the document writers.

The listing is written as ``api-docs.<ext>``; each declaration as
``<api name>.<ext>`` next to it. API names containing "/" are written
with "_" instead.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger("flask_swagger12")

LISTING_BASENAME = "api-docs"


class DocumentWriter:
    """Writes a listing and its declarations to one directory."""

    extension = ""

    def render(self, document: dict[str, Any]) -> str:
        raise NotImplementedError

    def file_names(self, declarations: dict[str, dict[str, Any]]) -> list[str]:
        names = [f"{LISTING_BASENAME}.{self.extension}"]
        names.extend(f"{api.replace('/', '_')}.{self.extension}" for api in declarations)
        return names

    def write(
        self,
        listing: dict[str, Any],
        declarations: dict[str, dict[str, Any]],
        output_dir: str,
        dry_run: bool = False,
    ) -> list[str]:
        """Write the documents and return the file names (written or not).

        Args:
            listing: The resource listing document.
            declarations: API declarations keyed by API name.
            output_dir: Target directory, created if missing.
            dry_run: If True, only compute the file names.
        """
        names = self.file_names(declarations)
        if dry_run:
            return names

        output_path = Path(output_dir).resolve()
        output_path.mkdir(parents=True, exist_ok=True)
        for name, document in zip(names, [listing, *declarations.values()]):
            file_path = output_path / name
            file_path.write_text(self.render(document), encoding="utf-8")
            logger.info("Written: %s", file_path)
        return names
