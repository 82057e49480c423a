import numpy as np
import pytest

from timeslotbubbles.config import DEFAULT_SETTINGS
from timeslotbubbles.layout.placement import overlap_cost, place
from timeslotbubbles.model.geometry_primitives import Canvas, Circle, Point

EMPTY_POSITIONS = np.empty((0, 2))
EMPTY_RADII = np.empty(0)


def test_overlap_cost_clean_spot():
    cost = overlap_cost(np.array([50.0, 50.0]), 10.0, EMPTY_POSITIONS, EMPTY_RADII, Canvas(100.0, 100.0))
    assert cost == 0.0


def test_overlap_cost_counts_distance_shortfall():
    placed = np.array([[50.0, 50.0], [200.0, 200.0]])
    radii = np.array([10.0, 10.0])
    cost = overlap_cost(np.array([50.0, 50.0]), 10.0, placed, radii, Canvas(300.0, 300.0))
    # Only the coincident bubble counts: 10 + 10 + margin 6
    assert cost == pytest.approx(26.0)


def test_overlap_cost_edge_penalty():
    cost = overlap_cost(np.array([0.0, 50.0]), 10.0, EMPTY_POSITIONS, EMPTY_RADII, Canvas(100.0, 100.0))
    assert cost == pytest.approx(10.0 * DEFAULT_SETTINGS.edge_penalty)


def test_seeded_placement_is_reproducible():
    canvas = Canvas(320.0, 300.0)
    sizes = [110.0, 100.0, 90.0, 90.0]
    first = place(sizes, canvas, rng=np.random.default_rng(7))
    second = place(sizes, canvas, rng=np.random.default_rng(7))
    np.testing.assert_array_equal(first, second)


def test_first_bubble_takes_first_sample():
    canvas = Canvas(320.0, 300.0)
    positions = place([110.0], canvas, rng=np.random.default_rng(3))

    rng = np.random.default_rng(3)
    inset = 55.0 + DEFAULT_SETTINGS.padding
    expected = [inset + rng.uniform(0.0, 320.0 - 2 * inset), inset + rng.uniform(0.0, 300.0 - 2 * inset)]
    np.testing.assert_allclose(positions[0], expected)


def test_positions_stay_within_sampling_bounds():
    canvas = Canvas(400.0, 350.0)
    sizes = [110.0, 105.0, 100.0, 95.0, 90.0, 90.0]
    positions = place(sizes, canvas, rng=np.random.default_rng(11))
    assert positions.shape == (6, 2)
    for (x, y), d in zip(positions, sizes):
        inset = d / 2 + DEFAULT_SETTINGS.padding
        assert inset <= x <= canvas.width - inset
        assert inset <= y <= canvas.height - inset


def test_later_bubbles_avoid_earlier_ones_when_room():
    canvas = Canvas(1000.0, 1000.0)
    positions = place([100.0, 100.0], canvas, rng=np.random.default_rng(0))
    distance = np.hypot(*(positions[0] - positions[1]))
    # Plenty of room: 30 attempts find a zero-cost spot with overwhelming odds
    assert distance >= 100.0 + DEFAULT_SETTINGS.placement_margin


@pytest.mark.parametrize("width, height", [(100.0, 500.0), (500.0, 100.0), (60.0, 60.0)])
def test_too_small_canvas_falls_back_to_center(width, height):
    canvas = Canvas(width, height)
    positions = place([110.0, 90.0], canvas, rng=np.random.default_rng(0))
    np.testing.assert_allclose(positions, [[width / 2, height / 2]] * 2)


def test_no_bubbles():
    assert place([], Canvas(100.0, 100.0)).shape == (0, 2)


@pytest.mark.parametrize("x, y", [(95.0, 50.0), (50.0, 98.0), (3.0, 4.0)])
def test_edge_penalty_matches_canvas_edge_distance(x, y):
    canvas = Canvas(100.0, 100.0)
    radius = 10.0
    cost = overlap_cost(np.array([x, y]), radius, EMPTY_POSITIONS, EMPTY_RADII, canvas)
    gap = canvas.edge_distance(Circle(Point(x, y), radius))
    assert gap < 0.0
    assert cost == pytest.approx(-gap * DEFAULT_SETTINGS.edge_penalty)
