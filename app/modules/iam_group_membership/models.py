"""Data models for the IAM group membership resource.

Lightweight dataclasses (not pydantic): the persisted record, the computed
membership delta and the identifier generator used on import.
"""

import itertools
import threading
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Iterable, Optional, Set


@dataclass
class MembershipRecord:
    """Persisted state of one group membership resource.

    Attributes:
        id: Resource identity. The configuration's ``name`` after create, a
            generated token after import, None/"" once the group is gone.
        name: Logical name from configuration (unset after import).
        group: IAM group name.
        users: IAM user names. None until the first read after an import.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    group: Optional[str] = None
    users: Optional[Set[str]] = None

    @property
    def exists(self) -> bool:
        """False once the resource identity has been cleared."""
        return bool(self.id)

    @classmethod
    def from_config(cls, config: Any) -> "MembershipRecord":
        """Build an unidentified record from a validated configuration."""
        return cls(
            id=None,
            name=config.name,
            group=config.group,
            users=set(config.users),
        )

    def copy(self, **changes: Any) -> "MembershipRecord":
        """Return a copy with its own users set, applying any changes."""
        users = changes.pop("users", self.users)
        return replace(
            self, users=set(users) if users is not None else None, **changes
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "group": self.group,
            "users": sorted(self.users) if self.users is not None else None,
        }


@dataclass(frozen=True)
class MembershipChanges:
    """Users to remove from and add to a group.

    Both collections are unordered; removals are applied before additions.
    """

    to_add: FrozenSet[str] = field(default_factory=frozenset)
    to_remove: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def has_changes(self) -> bool:
        return bool(self.to_add or self.to_remove)

    @classmethod
    def between(
        cls, old: Optional[Iterable[str]], new: Optional[Iterable[str]]
    ) -> "MembershipChanges":
        """Compute ``old - new`` removals and ``new - old`` additions.

        None is treated as the empty set.
        """
        old_set = frozenset(old or ())
        new_set = frozenset(new or ())
        return cls(to_add=new_set - old_set, to_remove=old_set - new_set)


_id_counter = itertools.count(1)
_id_lock = threading.Lock()


def generate_unique_id(prefix: str = "terraform-") -> str:
    """Return a process-unique, time-ordered identifier.

    Format: ``<prefix><UTC timestamp to centiseconds><8 hex digit counter>``.
    """
    with _id_lock:
        counter = next(_id_counter)
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S%f")[:-4]
    return f"{prefix}{timestamp}{counter:08x}"
