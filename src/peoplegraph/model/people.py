"""Person and Relationship records consumed by the graph (read-only)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

# Reserved identifier of the biography's subject ("self") node.
CENTER_ID = "center"


def _optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _optional_count(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"importance_score must be a number, got {value!r}")
    try:
        return int(value)
    except OverflowError as e:
        raise ValueError(f"importance_score out of range: {value!r}") from e


@dataclass(frozen=True)
class Person:
    """Someone mentioned in the memoir."""
    id: str
    name: str
    relationship_to_user: Optional[str] = None
    importance_score: Optional[int] = None  # mention count
    avatar_url: Optional[str] = None

    @property
    def initial(self) -> str:
        """First letter/digit of the name, used as the node glyph."""
        for char in self.name:
            if char.isalnum():
                return char.upper()
        return self.name[:1] or "?"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Person:
        """
        Build a Person from a roster entry.

        Raises:
            KeyError: If `id` or `name` is missing.
            ValueError: If `importance_score` is not a number.
        """
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            relationship_to_user=_optional_text(data.get("relationship_to_user")),
            importance_score=_optional_count(data.get("importance_score")),
            avatar_url=_optional_text(data.get("avatar_url")),
        )


@dataclass(frozen=True)
class Relationship:
    """
    A stored connection between two people.

    Either endpoint may be the reserved CENTER_ID. The `bidirectional` flag is
    display metadata only; the layout treats every edge as an undirected spring.
    """
    id: str
    person_a_id: str
    person_b_id: str
    relationship_type: str
    custom_label: Optional[str] = None
    bidirectional: bool = True

    @property
    def label(self) -> str:
        return self.custom_label or self.relationship_type

    def touches(self, node_id: str) -> bool:
        return node_id in (self.person_a_id, self.person_b_id)

    def other_end(self, node_id: str) -> Optional[str]:
        if self.person_a_id == node_id:
            return self.person_b_id
        if self.person_b_id == node_id:
            return self.person_a_id
        return None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Relationship:
        return cls(
            id=str(data["id"]),
            person_a_id=str(data["person_a_id"]),
            person_b_id=str(data["person_b_id"]),
            relationship_type=str(data["relationship_type"]),
            custom_label=_optional_text(data.get("custom_label")),
            bidirectional=bool(data.get("bidirectional", True)),
        )


SELF_PERSON = Person(id=CENTER_ID, name="(self)", relationship_to_user="")
