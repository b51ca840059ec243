"""
Rename the realm in the human-readable fields of a realm export.

Keycloak bakes the realm name into several places besides ``realm`` itself:
display text, the generated ``default-roles-<realm>`` composite role, and
client URLs of the form ``.../realms/<realm>/...``. Left alone these would
make the clone collide with, or point back at, the original realm.

Client secrets are exported masked as ``**********``; importing the mask
would set the literal asterisks as the secret, so the field is dropped and
Keycloak generates a fresh one.

This pass runs before identifier substitution and never touches the
identifier map.
"""

from __future__ import annotations

import re
from typing import Any

from realm_clone.core.context import RealmContext

MASKED_SECRET = "**********"

DISPLAY_NAME_FIELDS = ("displayName", "displayNameHtml")
CLIENT_URL_FIELDS = ("baseUrl", "adminUrl")


def default_role_name(realm_name: str) -> str:
    return f"default-roles-{realm_name}"


def realm_path_segment(realm_name: str) -> str:
    return f"/realms/{realm_name}/"


def rewrite_realm_fields(document: dict[str, Any], context: RealmContext) -> list[str]:
    """
    Rewrite realm-name occurrences and scrub masked secrets in ``document``.

    Args:
        document: Realm export, mutated in place
        context: Realm context carrying old and new names

    Returns:
        Paths of the fields that were changed, e.g. ``clients[2].secret``.
    """
    changed: list[str] = []
    old_name, new_name = context.old_name, context.new_name

    if document.get("realm") != new_name:
        changed.append("realm")
    document["realm"] = new_name

    pattern = re.compile(re.escape(old_name), re.IGNORECASE)
    for field_name in DISPLAY_NAME_FIELDS:
        value = document.get(field_name)
        if isinstance(value, str) and pattern.search(value):
            document[field_name] = pattern.sub(lambda _: new_name, value)
            changed.append(field_name)

    old_role, new_role = default_role_name(old_name), default_role_name(new_name)

    default_role = document.get("defaultRole")
    if isinstance(default_role, dict):
        name = default_role.get("name")
        if isinstance(name, str) and old_role in name:
            default_role["name"] = name.replace(old_role, new_role, 1)
            changed.append("defaultRole.name")

    roles = document.get("roles")
    realm_roles = roles.get("realm") if isinstance(roles, dict) else None
    if isinstance(realm_roles, list):
        for index, role in enumerate(realm_roles):
            if not isinstance(role, dict):
                continue
            name = role.get("name")
            if isinstance(name, str) and old_role in name:
                role["name"] = name.replace(old_role, new_role, 1)
                changed.append(f"roles.realm[{index}].name")

    clients = document.get("clients")
    if isinstance(clients, list):
        for index, client in enumerate(clients):
            if isinstance(client, dict):
                changed.extend(
                    f"clients[{index}].{path}"
                    for path in _rewrite_client(client, old_name, new_name)
                )

    return changed


def _rewrite_client(client: dict[str, Any], old_name: str, new_name: str) -> list[str]:
    changed: list[str] = []
    old_segment, new_segment = realm_path_segment(old_name), realm_path_segment(new_name)

    redirect_uris = client.get("redirectUris")
    if isinstance(redirect_uris, list):
        rewritten = [
            uri.replace(old_segment, new_segment) if isinstance(uri, str) else uri
            for uri in redirect_uris
        ]
        if rewritten != redirect_uris:
            client["redirectUris"] = rewritten
            changed.append("redirectUris")

    for field_name in CLIENT_URL_FIELDS:
        value = client.get(field_name)
        if isinstance(value, str) and old_segment in value:
            client[field_name] = value.replace(old_segment, new_segment)
            changed.append(field_name)

    if client.get("secret") == MASKED_SECRET:
        del client["secret"]
        changed.append("secret")

    return changed


__all__ = [
    "CLIENT_URL_FIELDS",
    "DISPLAY_NAME_FIELDS",
    "MASKED_SECRET",
    "default_role_name",
    "realm_path_segment",
    "rewrite_realm_fields",
]
