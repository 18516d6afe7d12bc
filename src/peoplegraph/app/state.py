from __future__ import annotations

import logging
import uuid
from typing import Optional

from PySide6.QtCore import QObject, Signal

from peoplegraph.model.people import Person, Relationship

logger = logging.getLogger(__name__)

DEFAULT_RELATIONSHIP_TYPE = "related"


class PeopleStore(QObject):
    """Central roster store with signals for graph sync."""
    roster_changed = Signal()

    def __init__(self) -> None:
        super().__init__()
        self.people: list[Person] = []
        self.relationships: list[Relationship] = []
        self.filepath: Optional[str] = None
        self.is_modified: bool = False

    def set_roster(self, people: list[Person], relationships: list[Relationship]) -> None:
        self.people = list(people)
        self.relationships = list(relationships)
        self.is_modified = False
        self.roster_changed.emit()

    def add_relationship(
        self,
        person_a_id: str,
        person_b_id: str,
        relationship_type: str = DEFAULT_RELATIONSHIP_TYPE,
        custom_label: Optional[str] = None
    ) -> Relationship:
        if person_a_id == person_b_id:
            raise ValueError("A relationship needs two different people.")
        relationship = Relationship(
            id=str(uuid.uuid4()),
            person_a_id=person_a_id,
            person_b_id=person_b_id,
            relationship_type=relationship_type,
            custom_label=custom_label,
            bidirectional=True,
        )
        self.relationships.append(relationship)
        self.is_modified = True
        logger.info(f"Relationship added: {person_a_id} <-> {person_b_id} ({relationship.label})")
        self.roster_changed.emit()
        return relationship
