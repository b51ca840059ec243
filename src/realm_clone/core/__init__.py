"""
Realm cloning core.

Pure, in-memory transformation of a parsed realm export: no file access,
no console output. Callers hand in a document and a pair of realm names and
get back the same document, rewritten, plus substitution counts.

Modules:
    identifiers   UUID recognition and the run-scoped IdentifierMap
    policy        Field names exempt from substitution
    context       RealmContext captured once per run
    realm_fields  Realm-name rewrites and masked secret removal
    walker        Identifier substitution and containerId correction
    cloner        clone_realm orchestration
    errors        Exception hierarchy
    logging       structlog configuration
"""

from realm_clone.core.cloner import CloneResult, clone_realm
from realm_clone.core.context import RealmContext
from realm_clone.core.errors import (
    ConfigError,
    DocumentError,
    DocumentNotFoundError,
    DocumentParseError,
    DocumentWriteError,
    ErrorCategory,
    IdentifierConflictError,
    RealmCloneError,
    RealmNameError,
)
from realm_clone.core.identifiers import IdentifierMap, is_identifier
from realm_clone.core.policy import CONTAINER_FIELD, EXEMPT_FIELDS
from realm_clone.core.realm_fields import MASKED_SECRET, rewrite_realm_fields
from realm_clone.core.walker import fix_container_references, replace_identifiers

__all__ = [
    "CONTAINER_FIELD",
    "EXEMPT_FIELDS",
    "MASKED_SECRET",
    "CloneResult",
    "ConfigError",
    "DocumentError",
    "DocumentNotFoundError",
    "DocumentParseError",
    "DocumentWriteError",
    "ErrorCategory",
    "IdentifierConflictError",
    "IdentifierMap",
    "RealmCloneError",
    "RealmContext",
    "RealmNameError",
    "clone_realm",
    "fix_container_references",
    "is_identifier",
    "replace_identifiers",
    "rewrite_realm_fields",
]
