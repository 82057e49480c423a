"""
Layout Engine
=============
Single entry point that turns time-slot candidates into placed bubbles.

Why is this file needed?
------------------------
1. Orchestration: It runs sizing -> placement -> relaxation in the right
   order and maps array rows back to candidates.
2. Degradation: Empty input or a canvas that has not been measured yet
   yields an empty layout instead of an error.
3. Read-back helpers: Hit testing and label lookup for the selection layer,
   and quality metrics for diagnostics.

The engine is a pure function. Call it again whenever the candidate list or
the canvas size changes; results are never patched incrementally.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from itertools import combinations
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from timeslotbubbles.config import DEFAULT_SETTINGS, LayoutSettings
from timeslotbubbles.layout import placement, relaxation, sizing
from timeslotbubbles.model.geometry_primitives import Canvas, Point
from timeslotbubbles.model.timeslots import Candidate, PlacedBubble

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]
CandidateLike = Union[Candidate, Tuple[str, int]]


@dataclass(frozen=True)
class LayoutQuality:
    """Diagnostics of a finished layout. Non-zero values are not errors."""
    overlapping_pairs: int
    max_penetration: float
    out_of_bounds: int

    @property
    def is_clean(self) -> bool:
        return self.overlapping_pairs == 0 and self.out_of_bounds == 0


def _as_generator(rng: RandomSource) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    # None seeds from OS entropy
    return np.random.default_rng(rng)


def compute_layout(
    candidates: Sequence[CandidateLike],
    canvas: Canvas,
    *,
    settings: Optional[LayoutSettings] = None,
    rng: RandomSource = None,
) -> List[PlacedBubble]:
    """
    Place one bubble per candidate inside the canvas.

    Args:
        candidates: Candidates (or (label, weight) pairs) in the caller's order.
        canvas: Current size of the drawing area.
        settings: Tunables; DEFAULT_SETTINGS if omitted.
        rng: Generator or integer seed for the initial placement. Pass a seed
            to get reproducible positions.

    Returns:
        One PlacedBubble per candidate, in input order. Empty if there are no
        candidates or the canvas has a non-positive side.
    """
    settings = settings or DEFAULT_SETTINGS
    items = [Candidate.coerce(c) for c in candidates]

    if not items or not canvas.is_ready:
        logger.debug(f"Skipping layout: {len(items)} candidates, canvas {canvas.width}x{canvas.height}.")
        return []

    sizes = sizing.diameters(items, settings)

    # Largest first; sorted() is stable so ties keep input order
    order = sorted(range(len(items)), key=lambda idx: -sizes[idx])
    ordered_sizes = [sizes[idx] for idx in order]

    initial = placement.place(ordered_sizes, canvas, settings, _as_generator(rng))
    final = relaxation.relax(initial, ordered_sizes, canvas, settings)

    placed: List[Optional[PlacedBubble]] = [None] * len(items)
    for row, idx in enumerate(order):
        placed[idx] = PlacedBubble(
            candidate=items[idx],
            center=Point.from_array(final[row]),
            diameter=sizes[idx],
        )
    result: List[PlacedBubble] = [b for b in placed if b is not None]

    if logger.isEnabledFor(logging.DEBUG):
        quality = measure_layout(result, canvas, settings.placement_margin)
        logger.debug(
            f"Laid out {len(result)} bubbles on {canvas.width}x{canvas.height}: "
            f"{quality.overlapping_pairs} overlapping pairs, "
            f"max penetration {quality.max_penetration:.2f}, "
            f"{quality.out_of_bounds} out of bounds."
        )
    return result


def bubble_at(bubbles: Sequence[PlacedBubble], point: Point) -> Optional[PlacedBubble]:
    """
    Bubble under a tap position.

    Bubbles are drawn in list order, so the last one containing the point is
    the one on top.
    """
    for bubble in reversed(bubbles):
        if bubble.as_circle().contains(point):
            return bubble
    return None


def find_bubble(bubbles: Iterable[PlacedBubble], label: Optional[str]) -> Optional[PlacedBubble]:
    """Bubble of the candidate with the given label, if present."""
    if label is None:
        return None
    return next((b for b in bubbles if b.candidate.label == label), None)


def measure_layout(
    bubbles: Sequence[PlacedBubble],
    canvas: Canvas,
    margin: float = 0.0,
) -> LayoutQuality:
    """
    Count residual overlaps and bubbles sticking out of the canvas.

    Args:
        bubbles: A finished layout.
        canvas: The canvas it was computed for.
        margin: Extra gap two bubbles need to count as separated.

    Returns:
        LayoutQuality with the number of offending pairs, the worst
        shortfall, and the number of bubbles not fully inside the canvas.
    """
    circles = [b.as_circle() for b in bubbles]
    overlapping = 0
    worst = 0.0
    for a, b in combinations(circles, 2):
        shortfall = margin - a.clearance_to(b)
        if shortfall > 0.0:
            overlapping += 1
            worst = max(worst, shortfall)
    outside = sum(1 for c in circles if not canvas.fits(c))
    return LayoutQuality(overlapping_pairs=overlapping, max_penetration=worst, out_of_bounds=outside)
