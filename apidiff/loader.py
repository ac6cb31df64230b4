"""Loading API documents from YAML or JSON files."""

from __future__ import annotations

from pathlib import Path
from typing import Union

import yaml

from .exceptions import DocumentLoadError


def load_document(path: Union[str, Path]) -> dict:
    """
    Load a YAML or JSON API document.

    JSON is valid YAML, so one parser covers both.

    Raises:
        DocumentLoadError: when the file is missing, unparsable, or its
            root is not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise DocumentLoadError(str(path), "file not found")

    try:
        with open(path, "r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DocumentLoadError(str(path), f"parse error: {e}")
    except OSError as e:
        raise DocumentLoadError(str(path), str(e))

    if not isinstance(document, dict):
        raise DocumentLoadError(
            str(path), f"document root must be a mapping, got {type(document).__name__}"
        )
    return document


def paths_of(document: dict) -> dict:
    """Return the path table of a document (empty when absent)."""
    return document.get("paths") or {}
