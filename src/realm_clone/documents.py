"""
Reading and writing realm export documents.

Realm exports are single JSON objects. Errors are raised as
``DocumentError`` subclasses carrying the offending path in their context.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from realm_clone.core.errors import (
    DocumentError,
    DocumentNotFoundError,
    DocumentParseError,
    DocumentWriteError,
)
from realm_clone.core.logging import get_logger

log = get_logger(__name__)

DEFAULT_OUTPUT_TEMPLATE = "{realm}-realm-export.json"


def load_document(path: Path) -> dict[str, Any]:
    """
    Load a realm export from ``path``.

    Raises:
        DocumentNotFoundError: If the file does not exist
        DocumentParseError: If it is not valid UTF-8 JSON or not a JSON object
        DocumentError: If it exists but cannot be read
    """
    path = Path(path)
    if not path.is_file():
        raise DocumentNotFoundError(f"File {path} not found").with_context(path=str(path))

    try:
        with path.open(encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise DocumentParseError(
            f"{path} is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
            cause=e,
        ).with_context(path=str(path)) from e
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"{path} is not UTF-8 encoded: {e}", cause=e).with_context(
            path=str(path)
        ) from e
    except OSError as e:
        raise DocumentError(f"Could not read {path}: {e}", cause=e).with_context(
            path=str(path)
        ) from e

    if not isinstance(document, dict):
        raise DocumentParseError(
            f"{path} must contain a JSON object, got {type(document).__name__}"
        ).with_context(path=str(path))

    log.debug("document_loaded", path=str(path), fields=len(document))
    return document


def detect_realm_name(document: dict[str, Any]) -> str | None:
    """Return the document's ``realm`` field if it is a non-empty string."""
    realm = document.get("realm")
    if isinstance(realm, str) and realm.strip():
        return realm
    return None


def output_path_for(
    new_name: str,
    output_dir: Path = Path("."),
    template: str = DEFAULT_OUTPUT_TEMPLATE,
) -> Path:
    """Derive the output file name for a clone named ``new_name``."""
    return Path(output_dir) / template.format(realm=new_name)


def write_document(document: dict[str, Any], path: Path, indent: int = 2) -> Path:
    """
    Serialize ``document`` as JSON to ``path``.

    Non-ASCII text is written as-is. The parent directory is created if
    needed.

    Raises:
        DocumentWriteError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=indent, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        raise DocumentWriteError(f"Could not write {path}: {e}", cause=e).with_context(
            path=str(path)
        ) from e

    log.debug("document_written", path=str(path))
    return path


__all__ = [
    "DEFAULT_OUTPUT_TEMPLATE",
    "detect_realm_name",
    "load_document",
    "output_path_for",
    "write_document",
]
