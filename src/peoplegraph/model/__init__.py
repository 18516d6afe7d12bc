"""
The MODEL layer contains pure data structures and layout bookkeeping.
It has NO knowledge of the GUI (Qt).
It deals with People, Relationships, Node geometry and roster I/O.
"""
from peoplegraph.model.people import CENTER_ID, Person, Relationship, SELF_PERSON
from peoplegraph.model.geometry import GeometryProfile, profile
from peoplegraph.model.graph import GraphModel, Node

__all__ = [
    "CENTER_ID",
    "Person",
    "Relationship",
    "SELF_PERSON",
    "GeometryProfile",
    "profile",
    "GraphModel",
    "Node",
]
