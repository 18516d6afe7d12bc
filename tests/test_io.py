"""Roster loading/saving tests."""
import json

import pytest

from peoplegraph.controller.simulator import LayoutSimulator
from peoplegraph.model.io import IOManager, RosterError
from peoplegraph.model.people import Person, Relationship
from peoplegraph.view.renderer import Renderer


def write(tmp_path, payload) -> str:
    path = tmp_path / "roster.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return str(path)


def test_load_roster(tmp_path):
    path = write(tmp_path, {
        "people": [
            {"id": "a", "name": "Ann", "relationship_to_user": "aunt", "importance_score": 3},
            {"id": "b", "name": "Bob"},
        ],
        "relationships": [
            {"id": "r", "person_a_id": "a", "person_b_id": "center", "relationship_type": "aunt"},
        ],
    })
    people, relationships = IOManager.load_roster(path)
    assert people[0] == Person(id="a", name="Ann", relationship_to_user="aunt", importance_score=3)
    assert people[1].relationship_to_user is None
    assert relationships == [Relationship(id="r", person_a_id="a", person_b_id="center", relationship_type="aunt")]


def test_malformed_entries_are_skipped(tmp_path):
    path = write(tmp_path, {
        "people": [{"id": "a"}, {"id": "b", "name": "Bob"}],
        "relationships": [{"id": "r", "person_a_id": "a"}],
    })
    people, relationships = IOManager.load_roster(path)
    assert [p.id for p in people] == ["b"]
    assert relationships == []


@pytest.mark.parametrize("payload", ["{not json", "[1, 2, 3]", '{"people": {"id": "a"}}'])
def test_bad_roster_raises(tmp_path, payload):
    with pytest.raises(RosterError):
        IOManager.load_roster(write(tmp_path, payload))


def test_missing_file_raises(tmp_path):
    with pytest.raises(RosterError):
        IOManager.load_roster(str(tmp_path / "missing.json"))


def test_saved_roster_loads_back(tmp_path):
    path = str(tmp_path / "out.json")
    people = [Person(id="a", name="Ann", avatar_url="https://example.org/a.png")]
    relationships = [Relationship(id="r", person_a_id="a", person_b_id="center",
                                  relationship_type="aunt", custom_label="favourite aunt", bidirectional=False)]
    IOManager.save_roster(path, people, relationships)
    assert IOManager.load_roster(path) == (people, relationships)


def test_loosely_typed_fields_are_coerced(tmp_path):
    path = write(tmp_path, {
        "people": [{"id": 7, "name": "Ann", "relationship_to_user": 3, "importance_score": "3", "avatar_url": 1}],
        "relationships": [{"id": "r", "person_a_id": 7, "person_b_id": "center",
                           "relationship_type": "aunt", "custom_label": 42}],
    })
    people, relationships = IOManager.load_roster(path)
    assert people == [Person(id="7", name="Ann", relationship_to_user="3", importance_score=3, avatar_url="1")]
    assert relationships[0].person_a_id == "7"
    assert relationships[0].label == "42"


@pytest.mark.parametrize("score", ["three", [3], {"n": 3}, True, "Infinity"])
def test_bad_mention_count_skips_person(tmp_path, score):
    path = write(tmp_path, {"people": [{"id": "a", "name": "Ann", "importance_score": score},
                                       {"id": "b", "name": "Bob", "importance_score": 2}]})
    people, _ = IOManager.load_roster(path)
    assert [p.id for p in people] == ["b"]


def test_loaded_roster_draws(tmp_path, model, surface):
    path = write(tmp_path, {
        "people": [{"id": "a", "name": "Ann", "importance_score": "3", "relationship_to_user": 5}],
        "relationships": [{"id": "r", "person_a_id": "a", "person_b_id": "center",
                           "relationship_type": "aunt", "custom_label": 9}],
    })
    model.reset(*IOManager.load_roster(path))
    LayoutSimulator(model).step()
    Renderer().draw(surface, model)
    assert "3 mentions" in surface.texts()
    assert "9" in surface.texts()
