"""Load an API description file and detect its specification version."""

from pathlib import Path

import yaml


class SwaggerParseError(ValueError):
    """Raised when a file is not a usable Swagger / OpenAPI document."""


def load_document(file_path: Path) -> dict:
    """Load a YAML or JSON API description into a plain dict.

    JSON is a subset of YAML, so a single ``yaml.safe_load`` covers both.
    """
    text = file_path.read_text(encoding="utf-8")
    doc = yaml.safe_load(text)
    if not isinstance(doc, dict):
        raise SwaggerParseError(f"{file_path} does not contain a mapping at the top level")
    return doc


def detect_version(doc: dict) -> str:
    """Detect the specification flavour of a loaded document.

    Returns: 'swagger2' or 'openapi3'.
    """
    if "swagger" in doc:
        return "swagger2"
    if "openapi" in doc:
        return "openapi3"
    raise SwaggerParseError("document declares neither 'swagger' nor 'openapi'")
