"""
Force Relaxation
================
Iterative, deterministic clean-up of the initial placement.

Every pass visits the bubbles in order and moves each one by the damped sum
of three kinds of forces:

1. Walls: a bubble whose rim comes within `wall_threshold` of an edge is
   pushed inward, proportionally to how deep it is in that band.
2. Repulsion: overlapping neighbours (closer than the sum of radii plus
   `relaxation_margin`) push each other apart along the center line.
3. Attraction: a weak pull toward every non-overlapping neighbour keeps
   sparse layouts compact instead of drifting into the corners.

Positions are updated in place during a pass, so bubble i already sees the
new positions of bubbles 0..i-1. After every move the bubble is clamped
fully inside the canvas.

Cost is O(iterations * N^2); the engine is meant for tens of bubbles.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence, TYPE_CHECKING

import numpy as np

from timeslotbubbles.config import DEFAULT_SETTINGS, LayoutSettings
from timeslotbubbles.model.geometry_primitives import Canvas

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Below this center distance two bubbles are treated as coincident
COINCIDENT_EPS = 1e-9

# Golden angle in radians; spreads escape directions of coincident bubbles evenly
_GOLDEN_ANGLE = math.pi * (3.0 - math.sqrt(5.0))


def _escape_direction(index: int) -> npt.NDArray[np.float64]:
    """Deterministic unit vector used when bubble `index` sits on top of another."""
    angle = index * _GOLDEN_ANGLE
    return np.array([math.cos(angle), math.sin(angle)])


def wall_force(
    position: npt.NDArray[np.float64],
    radius: float,
    canvas: Canvas,
    settings: LayoutSettings = DEFAULT_SETTINGS,
) -> npt.NDArray[np.float64]:
    """
    Inward push from the four canvas edges.

    Returns:
        Displacement (dx, dy) before damping.
    """
    x, y = position
    threshold = settings.wall_threshold
    left = max(0.0, threshold - (x - radius))
    right = max(0.0, threshold - (canvas.width - x - radius))
    top = max(0.0, threshold - (y - radius))
    bottom = max(0.0, threshold - (canvas.height - y - radius))
    return np.array([left - right, top - bottom]) * settings.wall_multiplier


def clamp_to_canvas(
    position: npt.NDArray[np.float64],
    radius: float,
    canvas: Canvas,
) -> npt.NDArray[np.float64]:
    """
    Keep the whole bubble inside the canvas.

    On an axis shorter than the diameter no valid position exists; the
    bubble is centered on that axis instead.
    """
    clamped = np.empty(2, dtype=np.float64)
    for axis, size in enumerate((canvas.width, canvas.height)):
        low, high = radius, size - radius
        if high < low:
            clamped[axis] = size / 2.0
        else:
            clamped[axis] = min(max(position[axis], low), high)
    return clamped


def relax(
    positions: npt.ArrayLike,
    diameters: Sequence[float],
    canvas: Canvas,
    settings: LayoutSettings = DEFAULT_SETTINGS,
) -> npt.NDArray[np.float64]:
    """
    Run the force simulation on a set of bubbles.

    Args:
        positions: (n, 2) starting centers. Not modified.
        diameters: Bubble diameters, aligned with `positions`.
        canvas: Drawing area; must have positive sides.
        settings: Force constants, iteration count and optional tolerance.

    Returns:
        New (n, 2) array with the relaxed centers.
    """
    pos = np.array(positions, dtype=np.float64, copy=True).reshape(-1, 2)
    radii = np.asarray(diameters, dtype=np.float64) / 2.0
    n = len(pos)
    if n == 0:
        return pos

    indices = np.arange(n)
    passes = 0
    for passes in range(1, settings.iterations + 1):
        total_displacement = 0.0

        for i in range(n):
            radius = radii[i]
            displacement = wall_force(pos[i], radius, canvas, settings)

            delta = pos[i] - pos
            distances = np.hypot(delta[:, 0], delta[:, 1])
            min_distances = radius + radii + settings.relaxation_margin

            others = indices != i
            close = others & (distances < min_distances)
            coincident = close & (distances < COINCIDENT_EPS)
            overlapping = close & ~coincident
            apart = others & ~close

            if overlapping.any():
                strength = settings.repulsion * (min_distances[overlapping] - distances[overlapping]) \
                    / distances[overlapping]
                displacement += (delta[overlapping] * strength[:, None]).sum(axis=0)

            if coincident.any():
                # Limit of the repulsion term as the distance goes to zero
                displacement += _escape_direction(i) * settings.repulsion * min_distances[coincident].sum()

            if apart.any():
                displacement -= delta[apart].sum(axis=0) * settings.attraction

            moved = clamp_to_canvas(pos[i] + displacement * settings.damping, radius, canvas)
            total_displacement += float(np.hypot(*(moved - pos[i])))
            pos[i] = moved

        if settings.tolerance is not None and total_displacement < settings.tolerance:
            logger.debug(f"Relaxation settled after {passes} passes (moved {total_displacement:.3g}).")
            break

    return pos
