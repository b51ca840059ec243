"""
Identifier substitution over a realm export tree.

Two traversals live here:

``replace_identifiers``
    The generic walk. Children are visited before a field's own value is
    considered, then each field is checked in order: exempt names are
    skipped, a ``containerId`` equal to the original realm id is pointed at
    the new realm id directly, and any other UUID-shaped string is replaced
    through the run's ``IdentifierMap``.

``fix_container_references``
    The corrective sweep run after the root ``id`` has been reassigned. It
    catches any ``containerId`` still holding the original realm id and is a
    no-op on a tree that is already consistent.

Only record fields are candidates for substitution; bare strings inside
sequences (client scope names, redirect URIs) are left alone.
"""

from __future__ import annotations

from typing import Any

from realm_clone.core.context import RealmContext
from realm_clone.core.identifiers import IdentifierMap, is_identifier
from realm_clone.core.policy import is_container_field, is_exempt


def replace_identifiers(
    node: Any,
    context: RealmContext,
    identifier_map: IdentifierMap,
) -> int:
    """
    Replace identifiers in ``node`` in place.

    Args:
        node: Record, sequence or scalar to traverse
        context: Realm context of the current run
        identifier_map: Map shared by every location in the document

    Returns:
        Number of fields whose value was rewritten.
    """
    if isinstance(node, list):
        return sum(replace_identifiers(item, context, identifier_map) for item in node)
    if not isinstance(node, dict):
        return 0

    replaced = 0
    for key in node:
        value = node[key]
        if isinstance(value, (dict, list)):
            replaced += replace_identifiers(value, context, identifier_map)
            continue

        if is_exempt(key):
            continue

        if (
            is_container_field(key)
            and context.has_root_id
            and value == context.old_id
        ):
            node[key] = context.new_id
            replaced += 1
        elif is_identifier(value):
            node[key] = identifier_map.resolve(value)
            replaced += 1
    return replaced


def fix_container_references(node: Any, context: RealmContext) -> int:
    """
    Point leftover ``containerId`` fields at the new realm id.

    Returns:
        Number of fields rewritten; 0 when the tree is already consistent.
    """
    if not context.has_root_id:
        return 0
    if isinstance(node, list):
        return sum(fix_container_references(item, context) for item in node)
    if not isinstance(node, dict):
        return 0

    fixed = 0
    for key in node:
        value = node[key]
        if is_container_field(key) and value == context.old_id:
            node[key] = context.new_id
            fixed += 1
        elif isinstance(value, (dict, list)):
            fixed += fix_container_references(value, context)
    return fixed


__all__ = ["fix_container_references", "replace_identifiers"]
