"""
Identifier recognition and run-scoped identifier remapping.

A realm export links its nodes through UUID strings: a role's
``containerId`` points at the realm or a client, a protocol mapper carries
its own ``id``, and so on. Cloning the realm means giving every such UUID a
fresh value while keeping equal originals equal.

Manifesto:
    - **Shape only:** A value is an identifier if it looks like a UUID;
      field-name exemptions live in ``realm_clone.core.policy``
    - **One map per run:** ``IdentifierMap`` is constructed by the caller
      and never shared between runs
    - **Bijective:** Distinct originals never receive the same replacement

Examples:
    >>> is_identifier("0b8e1f4c-3a2d-4e5f-9a6b-7c8d9e0f1a2b")
    True
    >>> is_identifier("default-roles-ajax")
    False
    >>> ids = IdentifierMap()
    >>> first = ids.resolve("0b8e1f4c-3a2d-4e5f-9a6b-7c8d9e0f1a2b")
    >>> first == ids.resolve("0b8e1f4c-3a2d-4e5f-9a6b-7c8d9e0f1a2b")
    True
    >>> len(ids)
    1

Tags:
    uuid, identifiers, remapping, realm-clone
"""

from __future__ import annotations

import re
import uuid
from collections.abc import Callable, Iterator
from typing import Any

from realm_clone.core.errors import IdentifierConflictError

IDENTIFIER_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

IdFactory = Callable[[], str]

# Attempts before giving up on a factory that keeps repeating issued values
MAX_GENERATION_ATTEMPTS = 100


def new_identifier() -> str:
    """Generate a random UUID4 string."""
    return str(uuid.uuid4())


def is_identifier(value: Any) -> bool:
    """Return True if ``value`` is a string shaped like a canonical UUID."""
    if not isinstance(value, str):
        return False
    # fullmatch rejects the trailing newline that ``$`` would accept
    return IDENTIFIER_PATTERN.fullmatch(value) is not None


class IdentifierMap:
    """
    Mapping from original identifiers to freshly generated ones.

    Populated lazily by ``resolve``; the root identifier is registered up
    front with ``seed`` so every reference to it resolves to the value the
    orchestrator assigns to the document's ``id``.

    Args:
        id_factory: Callable producing new identifier strings. Defaults to
            random UUID4 values; tests pass a deterministic sequence.
    """

    def __init__(self, id_factory: IdFactory | None = None):
        self._id_factory = id_factory or new_identifier
        self._mapping: dict[str, str] = {}
        self._issued: set[str] = set()

    def resolve(self, original: str) -> str:
        """Return the replacement for ``original``, generating it on first sight."""
        replacement = self._mapping.get(original)
        if replacement is None:
            replacement = self._generate(original)
            self._mapping[original] = replacement
            self._issued.add(replacement)
        return replacement

    def seed(self, original: str, replacement: str) -> None:
        """Force-register ``original -> replacement`` before generic resolution."""
        existing = self._mapping.get(original)
        if existing is not None:
            if existing != replacement:
                raise IdentifierConflictError(
                    f"Identifier {original} is already mapped to {existing}",
                    original=original,
                    replacement=replacement,
                )
            return
        if replacement in self._issued:
            raise IdentifierConflictError(
                f"Replacement {replacement} is already issued to {self._original_for(replacement)}",
                original=original,
                replacement=replacement,
            )
        self._mapping[original] = replacement
        self._issued.add(replacement)

    def clear(self) -> None:
        """Discard all registered pairs."""
        self._mapping.clear()
        self._issued.clear()

    def size(self) -> int:
        """Number of registered pairs."""
        return len(self._mapping)

    def get(self, original: str) -> str | None:
        """Return the registered replacement without generating one."""
        return self._mapping.get(original)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._mapping.items())

    def _generate(self, original: str) -> str:
        # Never hand out a value already issued in this run
        for _ in range(MAX_GENERATION_ATTEMPTS):
            candidate = self._id_factory()
            if candidate not in self._issued:
                return candidate
        raise IdentifierConflictError(
            f"No unused replacement for {original} after {MAX_GENERATION_ATTEMPTS} attempts",
            original=original,
            replacement=candidate,
        )

    def _original_for(self, replacement: str) -> str | None:
        for original, value in self._mapping.items():
            if value == replacement:
                return original
        return None

    def __len__(self) -> int:
        return len(self._mapping)

    def __contains__(self, original: object) -> bool:
        return original in self._mapping

    def __repr__(self) -> str:
        return f"IdentifierMap(size={len(self._mapping)})"


__all__ = [
    "IDENTIFIER_PATTERN",
    "IdFactory",
    "MAX_GENERATION_ATTEMPTS",
    "IdentifierMap",
    "is_identifier",
    "new_identifier",
]
