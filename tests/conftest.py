"""Shared fixtures for the graph engine tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from peoplegraph.model.graph import GraphModel
from peoplegraph.model.people import Person, Relationship


def make_people(n: int, **extra: Any) -> list[Person]:
    return [Person(id=f"p{i}", name=f"Person {i}", **extra) for i in range(n)]


def make_relationship(rid: str, a: str, b: str, kind: str = "friend", label: str | None = None) -> Relationship:
    return Relationship(id=rid, person_a_id=a, person_b_id=b, relationship_type=kind, custom_label=label)


@dataclass
class RecordingSurface:
    """DrawingSurface that remembers every call."""
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def clear(self, color):
        self.calls.append(("clear", {"color": color}))

    def line(self, x1, y1, x2, y2, color, width, dashed=False):
        self.calls.append(("line", dict(x1=x1, y1=y1, x2=x2, y2=y2, color=color, width=width, dashed=dashed)))

    def circle(self, x, y, radius, fill, outline=None, outline_width=0.0, opacity=1.0):
        self.calls.append(("circle", dict(x=x, y=y, radius=radius, fill=fill, outline=outline, opacity=opacity)))

    def text(self, x, y, text, color, size, bold=False):
        self.calls.append(("text", dict(x=x, y=y, text=text, color=color, size=size, bold=bold)))

    def of(self, kind: str) -> list[dict[str, Any]]:
        return [args for name, args in self.calls if name == kind]

    def texts(self) -> list[str]:
        return [args["text"] for args in self.of("text")]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def model() -> GraphModel:
    return GraphModel(1200, 800)
