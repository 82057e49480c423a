"""
The LAYOUT layer places one bubble per candidate on the canvas.

Pipeline: sizing -> placement -> relaxation, orchestrated by `engine`.
Every function here is pure: no I/O, no shared state.
"""
from timeslotbubbles.layout.engine import compute_layout, bubble_at, find_bubble, measure_layout, LayoutQuality

__all__ = ["compute_layout", "bubble_at", "find_bubble", "measure_layout", "LayoutQuality"]
