"""
Layout Simulator Tests
======================
Force terms, integration, convergence and degenerate inputs.
"""
import math

import numpy as np
import pytest

from conftest import make_people, make_relationship
from peoplegraph.controller.simulator import LayoutSimulator
from peoplegraph.model.graph import GraphModel
from peoplegraph.model.people import CENTER_ID


def pair_model(width=550, height=550) -> GraphModel:
    """Centre plus one person joined by an explicit edge; both springs rest at 165."""
    model = GraphModel(width, height)
    model.reset(make_people(1), [make_relationship("r", CENTER_ID, "p0")])
    return model


def separation(model: GraphModel) -> float:
    node = model.get("p0")
    return math.hypot(node.x - model.center.x, node.y - model.center.y)


class TestConvergence:

    def test_pair_at_rest_stays_at_rest(self):
        model = pair_model()
        sim = LayoutSimulator(model)
        assert separation(model) == pytest.approx(165)
        for _ in range(100):
            sim.step()
        assert separation(model) == pytest.approx(165, abs=1e-9)

    def test_perturbed_pair_converges_to_edge_length(self):
        model = pair_model()
        model.get("p0").place(model.center.x + 220, model.center.y)
        sim = LayoutSimulator(model)

        deltas = [sim.step() for _ in range(480)]

        target = model.geometry.edge_target_distance
        assert target == 165
        assert separation(model) == pytest.approx(target, abs=1e-6)

        # Damped oscillation: every window's peak movement is below the previous one's.
        peaks = [max(deltas[i:i + 60]) for i in range(0, 240, 60)]
        assert all(a > b for a, b in zip(peaks, peaks[1:]))
        assert deltas[-1] < 1e-6

    def test_many_people_settle(self, model):
        model.reset(make_people(12), [make_relationship("r", "p0", "p5")])
        sim = LayoutSimulator(model)
        for _ in range(1500):
            moved = sim.step()
        assert moved < 0.5
        assert all(math.isfinite(node.x) and math.isfinite(node.y) for node in model.nodes)


class TestForceTerms:

    def test_center_spring_pushes_out_when_too_close(self, model):
        model.reset(make_people(1), [])
        sim = LayoutSimulator(model)
        pos = np.array([[600.0, 400.0], [700.0, 400.0]])
        forces = sim._center_spring(pos, center_index=0)
        # target 240, distance 100: 0.01 * (100 - 240) towards the centre, i.e. outwards
        assert forces[1].tolist() == pytest.approx([1.4, 0.0])
        assert forces[0].tolist() == pytest.approx([0.0, 0.0])

    def test_repulsion_terms_stack_below_safe_distance(self, model):
        model.reset(make_people(2), [])
        sim = LayoutSimulator(model)
        # repulsion_distance 120, min safe distance 2 * 45 + 20 = 110
        pos = np.array([[0.0, 0.0], [500.0, 0.0], [560.0, 0.0]])
        forces = sim._repulsion(pos)
        quadratic = 5 * ((120 - 60) / 120) ** 2
        emergency = 0.5 * (110 - 60)
        assert forces[2].tolist() == pytest.approx([quadratic + emergency, 0.0])
        assert forces[1].tolist() == pytest.approx([-(quadratic + emergency), 0.0])
        assert forces[0].tolist() == pytest.approx([0.0, 0.0])

    def test_repulsion_only_quadratic_between_safe_and_reach(self, model):
        model.reset(make_people(2), [])
        sim = LayoutSimulator(model)
        pos = np.array([[0.0, 0.0], [500.0, 0.0], [500.0, 115.0]])
        forces = sim._repulsion(pos)
        assert forces[2].tolist() == pytest.approx([0.0, 5 * (5 / 120) ** 2])

    def test_edge_spring_pulls_both_ends(self, model):
        model.reset(make_people(2), [make_relationship("r", "p0", "p1")])
        sim = LayoutSimulator(model)
        index = {node.id: i for i, node in enumerate(model.nodes)}
        # both people sit 165 from the centre, so their implicit centre edges are at rest
        h = math.sqrt(165.0 ** 2 - 132.5 ** 2)
        pos = np.array([[600.0, 400.0], [600.0 - 132.5, 400.0 + h], [600.0 + 132.5, 400.0 + h]])
        forces = sim._edge_springs(pos, index)
        # p0 <-> p1 is 265 apart, 100 past the 165 rest length
        assert forces[index["p0"]].tolist() == pytest.approx([0.02 * 100, 0.0])
        assert forces[index["p1"]].tolist() == pytest.approx([-0.02 * 100, 0.0])
        assert forces[index[CENTER_ID]][0] == pytest.approx(0.0)


class TestExclusions:

    def test_center_never_moves(self, model):
        model.reset(make_people(4), [])
        sim = LayoutSimulator(model)
        for _ in range(50):
            sim.step()
        assert (model.center.x, model.center.y) == (600, 400)

    def test_pinned_node_is_skipped(self, model):
        model.reset(make_people(4), [])
        node = model.get("p2")
        node.place(10, 10)
        node.pinned = True
        sim = LayoutSimulator(model)
        for _ in range(20):
            sim.step()
        assert (node.x, node.y, node.vx, node.vy) == (10, 10, 0, 0)

    def test_empty_roster_is_a_no_op(self, model):
        model.reset([], [])
        assert LayoutSimulator(model).step() == 0.0


class TestDegenerateInputs:

    def test_coincident_nodes_do_not_produce_nan(self, model):
        model.reset(make_people(3), [make_relationship("r", "p0", "p1")])
        model.get("p0").place(700, 400)
        model.get("p1").place(700, 400)
        model.get("p2").place(600, 400)  # on top of the centre
        sim = LayoutSimulator(model)
        for _ in range(10):
            sim.step()
        for node in model.nodes:
            assert math.isfinite(node.x) and math.isfinite(node.y)
            assert math.isfinite(node.vx) and math.isfinite(node.vy)

    def test_dangling_relationship_is_ignored(self, model):
        model.reset(make_people(2), [make_relationship("ghost", "p0", "missing")])
        sim = LayoutSimulator(model)
        for _ in range(10):
            sim.step()
        assert all(math.isfinite(node.x) for node in model.nodes)
