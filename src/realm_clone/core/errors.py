"""
Structured error types for realm cloning.

The cloning core is total over well-formed documents; errors arise at its
edges (reading and writing documents, validating realm names, misusing the
identifier map). Every error raised by this package extends
``RealmCloneError`` so the CLI can render it uniformly and exit non-zero.

Architecture:
    ::

        ┌───────────────────────────────────────────────────────────┐
        │                    RealmCloneError                         │
        │           (category, context, cause)                       │
        ├───────────────────────────────────────────────────────────┤
        │  DocumentError (SOURCE)        RealmNameError (VALIDATION) │
        │    DocumentNotFoundError       IdentifierConflictError     │
        │    DocumentParseError (PARSE)    (VALIDATION)              │
        │    DocumentWriteError (STORAGE)                            │
        │  ConfigError (CONFIG)                                      │
        └───────────────────────────────────────────────────────────┘

Examples:
    >>> error = DocumentNotFoundError("File realm.json not found")
    >>> error.category
    <ErrorCategory.SOURCE: 'SOURCE'>
    >>> error.with_context(path="realm.json").context.path
    'realm.json'

Tags:
    error-handling, exception-hierarchy, error-context, realm-clone
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and reporting."""

    SOURCE = "SOURCE"
    PARSE = "PARSE"
    STORAGE = "STORAGE"
    CONFIG = "CONFIG"
    VALIDATION = "VALIDATION"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured context attached to errors.

    Attributes:
        path: File the error relates to, if any
        realm: Realm name involved in the failing operation
        field: Document field involved, if any
        metadata: Additional key-value pairs
    """

    path: str | None = None
    realm: str | None = None
    field: str | None = None

    metadata: dict[str, Any] = dataclasses.field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["path", "realm", "field"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class RealmCloneError(Exception):
    """
    Base exception for all realm cloning errors.

    Subclasses set ``default_category`` so callers can route on the category
    without matching concrete types.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> RealmCloneError:
        """
        Add context to this error (fluent API).

        Usage:
            raise DocumentParseError("Invalid JSON").with_context(path="realm.json")
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# DOCUMENT ERRORS
# =============================================================================


class DocumentError(RealmCloneError):
    """Error reading or writing a realm export document."""

    default_category = ErrorCategory.SOURCE


class DocumentNotFoundError(DocumentError):
    """Input document does not exist."""

    pass


class DocumentParseError(DocumentError):
    """Input document is not a JSON object."""

    default_category = ErrorCategory.PARSE


class DocumentWriteError(DocumentError):
    """Output document could not be written."""

    default_category = ErrorCategory.STORAGE


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(RealmCloneError):
    """
    Settings could not be loaded.

    ``details`` lists one ``"<setting>: <problem>"`` line per invalid value.
    """

    default_category = ErrorCategory.CONFIG

    def __init__(
        self,
        message: str,
        *,
        details: list[str] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause=cause)
        self.details = list(details or [])


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class RealmNameError(RealmCloneError):
    """Realm name is missing or blank."""

    default_category = ErrorCategory.VALIDATION


class IdentifierConflictError(RealmCloneError):
    """An identifier was seeded with two different replacements."""

    default_category = ErrorCategory.VALIDATION

    def __init__(self, message: str, *, original: str, replacement: str):
        super().__init__(message)
        self.original = original
        self.replacement = replacement
        self.with_context(original=original, replacement=replacement)


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "RealmCloneError",
    "DocumentError",
    "DocumentNotFoundError",
    "DocumentParseError",
    "DocumentWriteError",
    "ConfigError",
    "RealmNameError",
    "IdentifierConflictError",
]
