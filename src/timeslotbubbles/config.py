"""
Configuration & Layout Constants
================================
This module serves as the central registry for the layout tunables.

Why is this file needed?
------------------------
1. Calibration: The overlap margins and force strengths are heuristics, not
   physical constants. Keeping them in one frozen object lets tests and
   callers tweak a single value without touching the algorithm.
2. Validation: Settings that would break the relaxation (e.g. attraction
   stronger than repulsion) are rejected when the object is built.

Exports:
    LayoutSettings: Frozen dataclass with every tunable of the engine.
    DEFAULT_SETTINGS: The values the time-slot screen ships with.
    DEFAULT_CANVAS_WIDTH / DEFAULT_CANVAS_HEIGHT: Canvas used by the CLI.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional

# The time-slot picker draws its bubbles in a fixed-height strip
DEFAULT_CANVAS_WIDTH: float = 320.0
DEFAULT_CANVAS_HEIGHT: float = 300.0


@dataclass(frozen=True)
class LayoutSettings:
    """
    Tunables of the bubble layout engine.

    Sizes and distances are in canvas units (points on screen).
    """
    # SizeMapper
    min_size: float = 90.0
    max_size: float = 110.0

    # InitialPlacer
    padding: float = 10.0
    max_attempts: int = 30
    placement_margin: float = 6.0
    edge_penalty: float = 2.0

    # ForceRelaxer
    iterations: int = 60
    relaxation_margin: float = 12.0
    repulsion: float = 0.7
    attraction: float = 0.01
    damping: float = 0.8
    wall_threshold: float = 28.0
    wall_multiplier: float = 4.0
    tolerance: Optional[float] = None  # Early exit on summed displacement; None runs every pass

    def __post_init__(self) -> None:
        if self.min_size <= 0.0:
            raise ValueError(f"min_size must be positive, got {self.min_size}")
        if self.min_size > self.max_size:
            raise ValueError(
                f"min_size ({self.min_size}) must not exceed max_size ({self.max_size})"
            )
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {self.iterations}")
        for name in ("padding", "placement_margin", "relaxation_margin",
                     "edge_penalty", "wall_threshold", "wall_multiplier"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
        if not 0.0 < self.damping <= 1.0:
            raise ValueError(f"damping must lie in (0, 1], got {self.damping}")
        if self.attraction < 0.0 or self.repulsion <= 0.0:
            raise ValueError("repulsion must be positive and attraction non-negative")
        # Bubbles never separate if attraction wins at contact distance
        if self.attraction >= self.repulsion:
            raise ValueError(
                f"attraction ({self.attraction}) must be weaker than repulsion ({self.repulsion})"
            )
        if self.tolerance is not None and self.tolerance < 0.0:
            raise ValueError(f"tolerance must be non-negative, got {self.tolerance}")

    def replace(self, **changes: Any) -> LayoutSettings:
        """Return a copy with the given fields changed (validated again)."""
        return dataclasses.replace(self, **changes)


DEFAULT_SETTINGS = LayoutSettings()
