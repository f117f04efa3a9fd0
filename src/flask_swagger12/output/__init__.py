"""Output writer subpackage for flask-swagger12.

Provides get_writer() factory for selecting output format.

JSON writer is available via output_format="json" (default).
YAML writer is available via output_format="yaml".
"""

from __future__ import annotations


def get_writer(output_format: str | None = None):
    """Return a writer instance for the given format.

    Args:
        output_format: "json" (or None) for JSON files, "yaml" for YAML files.

    Returns:
        A JSONWriter or YAMLWriter instance.

    Raises:
        ValueError: If format is unknown.
    """
    if output_format is None or output_format == "json":
        from flask_swagger12.output.json_writer import JSONWriter

        return JSONWriter()
    elif output_format == "yaml":
        from flask_swagger12.output.yaml_writer import YAMLWriter

        return YAMLWriter()
    else:
        raise ValueError(f"Unknown output format: {output_format!r}")
