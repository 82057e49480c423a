import dataclasses

import pytest

from timeslotbubbles.config import DEFAULT_SETTINGS, LayoutSettings


def test_defaults():
    s = DEFAULT_SETTINGS
    assert (s.min_size, s.max_size) == (90.0, 110.0)
    assert s.max_attempts == 30
    assert s.iterations == 60
    assert s.repulsion > s.attraction
    assert s.tolerance is None


@pytest.mark.parametrize("changes", [
    {"min_size": 0.0},
    {"min_size": 120.0},
    {"max_attempts": 0},
    {"iterations": -1},
    {"damping": 0.0},
    {"damping": 1.5},
    {"attraction": 0.7},
    {"attraction": -0.1},
    {"repulsion": 0.0},
    {"padding": -1.0},
    {"relaxation_margin": -2.0},
    {"tolerance": -1.0},
])
def test_invalid_settings_rejected(changes):
    with pytest.raises(ValueError):
        LayoutSettings(**changes)


def test_replace_validates_and_copies():
    tuned = DEFAULT_SETTINGS.replace(iterations=10)
    assert tuned.iterations == 10
    assert DEFAULT_SETTINGS.iterations == 60
    with pytest.raises(ValueError):
        DEFAULT_SETTINGS.replace(attraction=1.0)


def test_settings_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SETTINGS.iterations = 1
