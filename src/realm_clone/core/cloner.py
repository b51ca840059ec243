"""
Clone a Keycloak realm export under a new realm name.

``clone_realm`` sequences the passes over one document:

    clear map → capture context → seed root id → rewrite realm fields
      → replace identifiers → assign new root id → fix container references

The order matters. Realm fields are rewritten while names still hold their
original values; the root identifier is seeded before the generic walk so
all of its occurrences resolve to the same new value; the container sweep
runs last to catch any ``containerId`` the walk left pointing at the old
realm.

Example:
    >>> doc = {"id": "0b8e1f4c-3a2d-4e5f-9a6b-7c8d9e0f1a2b", "realm": "ajax"}
    >>> result = clone_realm(doc, "ajax", "ajax-dev")
    >>> doc["realm"], doc["id"] != "0b8e1f4c-3a2d-4e5f-9a6b-7c8d9e0f1a2b"
    ('ajax-dev', True)
    >>> result.replaced_count
    1
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from realm_clone.core.context import ROOT_ID_FIELD, RealmContext
from realm_clone.core.errors import RealmNameError
from realm_clone.core.identifiers import IdentifierMap, IdFactory
from realm_clone.core.logging import get_logger
from realm_clone.core.realm_fields import rewrite_realm_fields
from realm_clone.core.walker import fix_container_references, replace_identifiers

log = get_logger(__name__)


@dataclass
class CloneResult:
    """
    Outcome of one clone run.

    Attributes:
        document: The input document, mutated in place
        replaced_count: Distinct identifiers registered in the identifier map
        context: Realm context the run used
        changed_fields: Paths touched by the realm field rewrite
        fields_substituted: Field values rewritten by the identifier walk
        containers_fixed: ``containerId`` fields corrected by the final sweep
    """

    document: dict[str, Any]
    replaced_count: int
    context: RealmContext
    changed_fields: list[str] = field(default_factory=list)
    fields_substituted: int = 0
    containers_fixed: int = 0

    @property
    def secrets_removed(self) -> int:
        return sum(1 for path in self.changed_fields if path.endswith(".secret"))

    def to_dict(self) -> dict[str, Any]:
        """Summary without the document, for logging and reporting."""
        return {
            "old_realm": self.context.old_name,
            "new_realm": self.context.new_name,
            "old_id": self.context.old_id,
            "new_id": self.context.new_id,
            "replaced_count": self.replaced_count,
            "fields_substituted": self.fields_substituted,
            "containers_fixed": self.containers_fixed,
            "secrets_removed": self.secrets_removed,
        }


def clone_realm(
    document: dict[str, Any],
    old_name: str,
    new_name: str,
    *,
    identifier_map: IdentifierMap | None = None,
    id_factory: IdFactory | None = None,
) -> CloneResult:
    """
    Transform ``document`` in place into an importable copy named ``new_name``.

    Args:
        document: Parsed realm export
        old_name: Realm name used in the export
        new_name: Realm name for the clone
        identifier_map: Map to use for this run; it is cleared first.
            A new one is created when omitted.
        id_factory: Identifier generator for the root id and for a newly
            created map. Defaults to random UUID4 values.

    Returns:
        CloneResult with the mutated document and substitution counts.

    Raises:
        RealmNameError: If either realm name is blank.
    """
    for label, name in (("old", old_name), ("new", new_name)):
        if not isinstance(name, str) or not name.strip():
            raise RealmNameError(f"The {label} realm name must not be empty").with_context(
                realm=name if isinstance(name, str) else None
            )

    if identifier_map is None:
        identifier_map = IdentifierMap(id_factory)
    identifier_map.clear()

    context = RealmContext.capture(document, old_name, new_name, id_factory)
    log.info("clone_started", old_realm=old_name, new_realm=new_name, old_id=context.old_id)

    if context.has_root_id:
        identifier_map.seed(context.old_id, context.new_id)
    else:
        log.warning("root_id_missing", realm=old_name)

    changed_fields = rewrite_realm_fields(document, context)
    log.debug("realm_fields_rewritten", fields=changed_fields, count=len(changed_fields))

    substituted = replace_identifiers(document, context, identifier_map)
    log.debug("identifiers_replaced", fields=substituted, distinct=len(identifier_map))

    if context.has_root_id:
        document[ROOT_ID_FIELD] = context.new_id

    containers_fixed = fix_container_references(document, context)
    if containers_fixed:
        log.debug("container_references_fixed", count=containers_fixed)

    result = CloneResult(
        document=document,
        replaced_count=identifier_map.size(),
        context=context,
        changed_fields=changed_fields,
        fields_substituted=substituted,
        containers_fixed=containers_fixed,
    )
    log.info("clone_completed", **result.to_dict())
    return result


__all__ = ["CloneResult", "clone_realm"]
