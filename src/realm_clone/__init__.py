"""
Keycloak realm clone - copy a realm export under a new name.

Rewrites an exported realm so it can be imported next to the original:
every UUID gets a fresh value with references kept intact, the realm name
is renamed in URLs, display text and default roles, and masked client
secrets are dropped so Keycloak regenerates them.

Layout:
- realm_clone.core: The in-memory transformation (no I/O)
- realm_clone.documents: JSON file loading and writing
- realm_clone.config: Environment-driven settings
- realm_clone.cli: The ``realm-clone`` command
"""

__version__ = "0.1.0"

from realm_clone.core import CloneResult, IdentifierMap, RealmCloneError, clone_realm

__all__ = [
    "CloneResult",
    "IdentifierMap",
    "RealmCloneError",
    "__version__",
    "clone_realm",
]
