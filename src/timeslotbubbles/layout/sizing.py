"""Busyness -> bubble diameter mapping."""
from __future__ import annotations

from typing import List, Sequence

from timeslotbubbles.config import DEFAULT_SETTINGS, LayoutSettings
from timeslotbubbles.model.timeslots import Candidate


def _scaled_diameter(weight: int, min_w: int, max_w: int, settings: LayoutSettings) -> float:
    # Equal weights give a zero span; treat it as 1 so everyone gets max_size
    span = max(1, max_w - min_w)
    normalized = 1.0 - (weight - min_w) / span
    return settings.min_size + (settings.max_size - settings.min_size) * normalized


def diameter_of(
    candidate: Candidate,
    all_candidates: Sequence[Candidate],
    settings: LayoutSettings = DEFAULT_SETTINGS,
) -> float:
    """
    Diameter of a single bubble relative to the rest of the batch.

    The least busy candidate gets `max_size`, the busiest `min_size`,
    linearly in between.

    Args:
        candidate: The candidate to size.
        all_candidates: Every candidate of the same layout (must include `candidate`).
        settings: Size range.

    Returns:
        Diameter in canvas units.
    """
    weights = [c.weight for c in all_candidates] or [candidate.weight]
    return _scaled_diameter(candidate.weight, min(weights), max(weights), settings)


def diameters(
    candidates: Sequence[Candidate],
    settings: LayoutSettings = DEFAULT_SETTINGS,
) -> List[float]:
    """Diameters for a whole batch, in input order."""
    if not candidates:
        return []
    weights = [c.weight for c in candidates]
    min_w, max_w = min(weights), max(weights)
    return [_scaled_diameter(w, min_w, max_w, settings) for w in weights]
