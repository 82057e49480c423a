"""
Initial Placement
=================
Randomized greedy placement of bubbles, one at a time.

Each bubble samples a handful of random positions inside the padded canvas
and keeps the one that collides least with the bubbles already placed.
Callers pass the bubbles largest first: big bubbles are easiest to fit
while the canvas is still empty.

The result is only a starting point; `relaxation` resolves what is left.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence, TYPE_CHECKING

import numpy as np

from timeslotbubbles.config import DEFAULT_SETTINGS, LayoutSettings
from timeslotbubbles.model.geometry_primitives import Canvas, Circle, Point

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def overlap_cost(
    position: npt.NDArray[np.float64],
    radius: float,
    placed_positions: npt.NDArray[np.float64],
    placed_radii: npt.NDArray[np.float64],
    canvas: Canvas,
    settings: LayoutSettings = DEFAULT_SETTINGS,
) -> float:
    """
    Penalty for putting a bubble of `radius` at `position`.

    Args:
        position: Candidate center (x, y).
        radius: Radius of the bubble being placed.
        placed_positions: (k, 2) array with centers of already placed bubbles.
        placed_radii: (k,) array with their radii.
        canvas: Drawing area.
        settings: Placement margin and edge penalty.

    Returns:
        Sum of the distance shortfalls against every placed bubble, plus
        `edge_penalty` times the depth by which the bubble sticks out of the
        canvas. Zero means a clean spot.
    """
    cost = 0.0
    if len(placed_positions):
        distances = np.hypot(*(placed_positions - position).T)
        min_distances = radius + placed_radii + settings.placement_margin
        cost += float(np.maximum(0.0, min_distances - distances).sum())

    edge_distance = canvas.edge_distance(Circle(Point.from_array(position), radius))
    if edge_distance < 0.0:
        cost += -edge_distance * settings.edge_penalty

    return cost


def place(
    diameters: Sequence[float],
    canvas: Canvas,
    settings: LayoutSettings = DEFAULT_SETTINGS,
    rng: Optional[np.random.Generator] = None,
) -> npt.NDArray[np.float64]:
    """
    Choose a starting center for every bubble.

    Args:
        diameters: Bubble diameters in placement order (largest first).
        canvas: Drawing area; must have positive sides.
        settings: Padding, attempt count and cost parameters.
        rng: Source of randomness; a fresh unseeded generator if omitted.

    Returns:
        (n, 2) array of centers, row i belonging to diameters[i].
    """
    if rng is None:
        rng = np.random.default_rng()

    n = len(diameters)
    positions = np.empty((n, 2), dtype=np.float64)
    radii = np.asarray(diameters, dtype=np.float64) / 2.0
    fallback = canvas.center.to_array()

    for i, radius in enumerate(radii):
        inset = radius + settings.padding
        span_x = canvas.width - 2.0 * inset
        span_y = canvas.height - 2.0 * inset

        if span_x < 0.0 or span_y < 0.0:
            logger.debug(
                f"Canvas {canvas.width}x{canvas.height} too small for radius {radius:.1f}; "
                f"placing bubble {i} at the center."
            )
            positions[i] = fallback
            continue

        placed_positions = positions[:i]
        placed_radii = radii[:i]

        best_position = None
        lowest_cost = np.inf
        for _ in range(settings.max_attempts):
            candidate = np.array([
                inset + rng.uniform(0.0, span_x),
                inset + rng.uniform(0.0, span_y),
            ])
            cost = overlap_cost(candidate, radius, placed_positions, placed_radii, canvas, settings)

            if cost < lowest_cost:
                lowest_cost = cost
                best_position = candidate

            if lowest_cost == 0.0:
                break

        positions[i] = best_position

    return positions
