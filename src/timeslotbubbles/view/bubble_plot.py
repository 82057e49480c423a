"""Matplotlib rendering of a bubble layout."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Rectangle

from timeslotbubbles.model.geometry_primitives import Canvas
from timeslotbubbles.model.timeslots import PlacedBubble

logger = logging.getLogger(__name__)

SELECTED_FILL = "#007AFF"
IDLE_FILL = "#F2F2F7"
SELECTED_TEXT = "#FFFFFF"
IDLE_TEXT = "#000000"
IDLE_SECONDARY_TEXT = "#8E8E93"
BACKGROUND = "#FFFFFF"

DEFAULT_DPI = 100


def _points_per_unit(ax: Axes, canvas: Canvas) -> float:
    """Font points corresponding to one canvas unit on this axes."""
    fig = ax.get_figure()
    return ax.bbox.width / canvas.width * 72.0 / fig.dpi


def draw_bubbles(
    ax: Axes,
    bubbles: Sequence[PlacedBubble],
    canvas: Canvas,
    selected_label: Optional[str] = None,
) -> None:
    """
    Draw bubbles onto an existing axes in screen coordinates (y down).

    Args:
        ax: Target axes; its limits and aspect are overwritten.
        bubbles: Output of `compute_layout`.
        canvas: Canvas the layout was computed for.
        selected_label: Label of the highlighted candidate, if any.

    Raises:
        ValueError: If the canvas has a non-positive side.
    """
    if not canvas.is_ready:
        raise ValueError(f"Cannot draw on a {canvas.width}x{canvas.height} canvas.")
    ax.set_xlim(0.0, canvas.width)
    ax.set_ylim(canvas.height, 0.0)
    ax.set_aspect("equal")
    ax.set_axis_off()
    ax.add_patch(Rectangle((0.0, 0.0), canvas.width, canvas.height, facecolor=BACKGROUND, edgecolor="none"))

    scale = _points_per_unit(ax, canvas)
    for bubble in bubbles:
        selected = bubble.candidate.label == selected_label
        x, y, d = bubble.center.x, bubble.center.y, bubble.diameter

        ax.add_patch(Circle(
            (x, y), bubble.radius,
            facecolor=SELECTED_FILL if selected else IDLE_FILL,
            edgecolor="none",
        ))
        ax.text(
            x, y - d * 0.06, bubble.candidate.formatted_time(),
            ha="center", va="center",
            fontsize=min(d / 5.0, 18.0) * scale, fontweight="medium",
            color=SELECTED_TEXT if selected else IDLE_TEXT,
        )
        ax.text(
            x, y + d * 0.14, f"{bubble.candidate.weight} busy",
            ha="center", va="center",
            fontsize=min(d / 7.0, 13.0) * scale,
            color=SELECTED_TEXT if selected else IDLE_SECONDARY_TEXT,
            alpha=0.9 if selected else 1.0,
        )


def render_layout(
    bubbles: Sequence[PlacedBubble],
    canvas: Canvas,
    selected_label: Optional[str] = None,
    dpi: int = DEFAULT_DPI,
) -> Figure:
    """
    Build a figure sized to the canvas (one canvas unit per pixel at `dpi`).

    The figure is created without pyplot, so nothing is registered with a GUI
    backend.
    """
    if not canvas.is_ready:
        raise ValueError(f"Cannot draw on a {canvas.width}x{canvas.height} canvas.")
    fig = Figure(figsize=(canvas.width / dpi, canvas.height / dpi), dpi=dpi)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    draw_bubbles(ax, bubbles, canvas, selected_label)
    return fig


def save_layout_image(
    path: str,
    bubbles: Sequence[PlacedBubble],
    canvas: Canvas,
    selected_label: Optional[str] = None,
    dpi: int = DEFAULT_DPI,
) -> None:
    """Render the layout and write it to `path` (format from the extension)."""
    fig = render_layout(bubbles, canvas, selected_label, dpi)
    fig.savefig(path, dpi=dpi)
    logger.info(f"Layout image saved to: {path}")
