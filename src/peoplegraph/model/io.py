"""
Input/Output Manager (JSON)
Loads and saves the people/relationship roster shown by the graph.

File layout:
    {
        "people": [{"id": ..., "name": ..., "relationship_to_user": ..., ...}],
        "relationships": [{"id": ..., "person_a_id": ..., "person_b_id": ..., ...}]
    }
"""
import json
import logging
from dataclasses import asdict
from importlib.metadata import version, PackageNotFoundError
from typing import Any, Callable, Iterable, TypeVar

from peoplegraph.model.people import Person, Relationship

logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("peoplegraph")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

T = TypeVar("T")


class RosterError(ValueError):
    """The roster file cannot be read as a whole."""


def _parse_entries(entries: Any, factory: Callable[[dict[str, Any]], T], kind: str) -> list[T]:
    if not isinstance(entries, list):
        raise RosterError(f"'{kind}' must be a list, got {type(entries).__name__}.")

    parsed: list[T] = []
    for i, entry in enumerate(entries):
        try:
            parsed.append(factory(entry))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping {kind}[{i}]: missing or invalid field {e}")
    return parsed


class IOManager:

    @staticmethod
    def load_roster(filepath: str) -> tuple[list[Person], list[Relationship]]:
        """
        Read people and relationships from a JSON roster.

        Raises:
            RosterError: If the file is unreadable or not a roster object.
        """
        logger.info(f"Loading roster from: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RosterError(f"Cannot read roster '{filepath}': {e}") from e

        if not isinstance(data, dict):
            raise RosterError(f"Roster '{filepath}' must contain a JSON object.")

        people = _parse_entries(data.get("people", []), Person.from_dict, "people")
        relationships = _parse_entries(data.get("relationships", []), Relationship.from_dict, "relationships")
        logger.info(f"Loaded {len(people)} people and {len(relationships)} relationships.")
        return people, relationships

    @staticmethod
    def save_roster(
        filepath: str,
        people: Iterable[Person],
        relationships: Iterable[Relationship]
    ) -> None:
        logger.info(f"Saving roster to: {filepath}")
        data = {
            "version": APP_VERSION,
            "people": [asdict(p) for p in people],
            "relationships": [asdict(r) for r in relationships],
        }
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.exception(f"Failed to save roster: {e}")
            raise
