"""Non-overlapping bubble layout for time-slot suggestions."""
from timeslotbubbles.config import LayoutSettings, DEFAULT_SETTINGS
from timeslotbubbles.layout.engine import compute_layout, bubble_at, find_bubble, measure_layout
from timeslotbubbles.model.geometry_primitives import Canvas, Point
from timeslotbubbles.model.timeslots import Candidate, PlacedBubble, parse_suggestions

__all__ = [
    "LayoutSettings",
    "DEFAULT_SETTINGS",
    "compute_layout",
    "bubble_at",
    "find_bubble",
    "measure_layout",
    "Canvas",
    "Point",
    "Candidate",
    "PlacedBubble",
    "parse_suggestions",
]
