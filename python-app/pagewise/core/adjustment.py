"""
Scale Adjustment.

Computes the zoom factor that fits a row of pages to the viewport (WIDTH)
or a whole page (BESTFIT), plus the arithmetic behind explicit zoom and
rotate commands.
"""

from typing import Optional

from .constants import AdjustMode, RotateDirection, ZoomAction
from .geometry import Layout, canvas_size, max_cell_size


def _width_scale(viewport_width: float, layout: Layout, cell_width: float) -> float:
    columns = layout.columns
    return (viewport_width - (columns - 1) * layout.padding) / (columns * cell_width)


def compute_scale(
    mode: AdjustMode,
    viewport_width: float,
    viewport_height: float,
    layout: Layout,
    scrollbar_width: float = 0,
) -> Optional[float]:
    """
    Determines the scale for an adjust mode.

    Args:
        mode: WIDTH or BESTFIT; other modes compute nothing.
        viewport_width: Width available to the canvas.
        viewport_height: Height available to the canvas.
        layout: Current layout; its scale is ignored.
        scrollbar_width: Width of the vertical scrollbar when scrollbars
            reserve space, else 0. Subtracted once if the fitted canvas
            turns out taller than the viewport.

    Returns:
        The new scale, or None when there is nothing to compute (no pages,
        collapsed viewport, NONE/INPUTBAR mode).
    """
    if mode not in (AdjustMode.WIDTH, AdjustMode.BESTFIT):
        return None
    if viewport_width <= 0 or viewport_height <= 0 or layout.page_count == 0:
        return None

    unscaled = layout._replace(scale=1.0)
    cell_width, cell_height = max_cell_size(unscaled)
    document_width = canvas_size(unscaled).width
    if cell_width <= 0 or cell_height <= 0:
        return None

    page_ratio = cell_height / document_width
    window_ratio = viewport_height / viewport_width

    if mode == AdjustMode.WIDTH or page_ratio < window_ratio:
        scale = _width_scale(viewport_width, layout, cell_width)

        if scrollbar_width > 0:
            # A vertical scrollbar appears once the canvas is taller than
            # the viewport; it eats into the width we fitted against.
            document_height = canvas_size(layout._replace(scale=scale)).height
            if viewport_height < document_height and scrollbar_width < viewport_width:
                scale = _width_scale(
                    viewport_width - scrollbar_width, layout, cell_width
                )
        return scale

    return viewport_height / cell_height


def zoom_scale(
    action: ZoomAction,
    current: float,
    count: int = 0,
    step_percent: int = 10,
    min_percent: int = 10,
    max_percent: int = 1000,
) -> float:
    """
    Returns the scale after a zoom command, clamped to the zoom limits.

    >>> zoom_scale(ZoomAction.IN, 1.0, 2, step_percent=10)
    1.2
    >>> zoom_scale(ZoomAction.SPECIFIC, 1.0, 0)
    1.0
    >>> zoom_scale(ZoomAction.OUT, 0.15, 1, step_percent=10, min_percent=10)
    0.1
    """
    steps = count if count > 0 else 1
    step = step_percent / 100.0 * steps

    if action == ZoomAction.IN:
        scale = current + step
    elif action == ZoomAction.OUT:
        scale = current - step
    elif action == ZoomAction.SPECIFIC:
        scale = count / 100.0 if count > 0 else 1.0
    else:
        scale = 1.0

    scale = round(scale, 6)
    return max(min_percent / 100.0, min(scale, max_percent / 100.0))


def rotated(rotation: int, direction: RotateDirection, count: int = 0) -> int:
    """
    Returns the rotation after turning `count` times (at least once).

    >>> rotated(270, RotateDirection.CLOCKWISE)
    0
    >>> rotated(0, RotateDirection.COUNTER_CLOCKWISE, 2)
    180
    """
    turns = count if count > 0 else 1
    return (rotation + direction.value * turns) % 360
