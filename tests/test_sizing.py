import pytest

from timeslotbubbles.config import LayoutSettings
from timeslotbubbles.layout.sizing import diameter_of, diameters
from timeslotbubbles.model.timeslots import Candidate


def _candidates(*weights):
    return [Candidate(f"slot {i}", w) for i, w in enumerate(weights)]


def test_example_sizes(example_candidates):
    assert diameters(example_candidates) == pytest.approx([110.0, 90.0, 90.0])


def test_linear_interpolation():
    sizes = diameters(_candidates(0, 5, 10))
    assert sizes == pytest.approx([110.0, 100.0, 90.0])


@pytest.mark.parametrize("weights", [(4,), (0,), (3, 3, 3)])
def test_uniform_weights_get_max_size(weights):
    assert diameters(_candidates(*weights)) == pytest.approx([110.0] * len(weights))


def test_weights_one_apart_span_full_range():
    assert diameters(_candidates(2, 3)) == pytest.approx([110.0, 90.0])


def test_less_busy_is_never_smaller():
    items = _candidates(3, 1, 7, 7, 0, 12)
    sizes = diameters(items)
    for a, da in zip(items, sizes):
        assert 90.0 <= da <= 110.0
        for b, db in zip(items, sizes):
            if a.weight < b.weight:
                assert da >= db
            if a.weight == b.weight:
                assert da == db


def test_diameter_of_matches_batch():
    items = _candidates(3, 1, 7)
    batch = diameters(items)
    assert [diameter_of(c, items) for c in items] == pytest.approx(batch)


def test_custom_size_range():
    settings = LayoutSettings(min_size=20.0, max_size=40.0)
    assert diameters(_candidates(0, 2), settings) == pytest.approx([40.0, 20.0])


def test_empty_batch():
    assert diameters([]) == []
