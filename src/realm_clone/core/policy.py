"""Field-name policy for identifier substitution.

Some realm export fields hold configuration values that can look like UUIDs
(a mapper's ``user.attribute``, a client's ``clientId``) but name things
rather than reference nodes. They are exempt from substitution whatever
their value looks like.

The list is fixed and documented; it is not inferred from the document.
"""

from __future__ import annotations

EXEMPT_FIELDS: frozenset[str] = frozenset({
    "user.attribute",
    "claim.name",
    "user.session.note",
    "clientId",
    "serviceAccountClientId",
    "authenticator",
    "protocolMapper",
    "providerId",
    "alias",
})

# Field that points back at the owning realm (or client) of a role or group
CONTAINER_FIELD = "containerId"


def is_exempt(field_name: str) -> bool:
    return field_name in EXEMPT_FIELDS


def is_container_field(field_name: str) -> bool:
    return field_name == CONTAINER_FIELD


__all__ = [
    "CONTAINER_FIELD",
    "EXEMPT_FIELDS",
    "is_container_field",
    "is_exempt",
]
