"""Realm context captured once at the start of a clone run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from realm_clone.core.identifiers import IdFactory, new_identifier

ROOT_ID_FIELD = "id"


@dataclass(frozen=True)
class RealmContext:
    """
    Immutable facts about one clone run.

    Attributes:
        old_name: Realm name in the exported document
        new_name: Realm name for the clone
        old_id: The document's original root ``id``, or None if it had none
        new_id: Freshly generated root identifier for the clone
    """

    old_name: str
    new_name: str
    old_id: str | None
    new_id: str

    @classmethod
    def capture(
        cls,
        document: dict[str, Any],
        old_name: str,
        new_name: str,
        id_factory: IdFactory | None = None,
    ) -> RealmContext:
        """Read the root identifier from ``document`` and pick its replacement."""
        old_id = document.get(ROOT_ID_FIELD)
        if not isinstance(old_id, str) or not old_id:
            old_id = None
        return cls(
            old_name=old_name,
            new_name=new_name,
            old_id=old_id,
            new_id=(id_factory or new_identifier)(),
        )

    @property
    def has_root_id(self) -> bool:
        return self.old_id is not None
