"""
Adjustment Mixin.

Handles fitting the scale to the window, explicit zoom, rotation and the
layout toggles (page mode, fullscreen).
"""

import logging

from ...core.adjustment import compute_scale, rotated, zoom_scale
from ...core.constants import AdjustMode, Axis, RotateDirection, ZoomAction

logger = logging.getLogger(__name__)


class AdjustmentMixin:
    """Methods for scale and layout changes."""

    def adjust_window(self, mode: AdjustMode) -> bool:
        """
        Switches the adjust mode and refits the scale to the viewport.

        Returns:
            True if a new scale was applied.
        """
        if self.document is None:
            return False

        self.document.adjust_mode = mode
        if mode == AdjustMode.NONE:
            return False

        scrollbar = self.scrollbar_width if self.settings.get("show-scrollbars") else 0
        scale = compute_scale(
            mode,
            self.adjustments[Axis.HORIZONTAL].extent,
            self.adjustments[Axis.VERTICAL].extent,
            self.layout(),
            scrollbar,
        )
        if scale is None:
            return False

        logger.debug("Adjusted scale to %.4f (%s)", scale, mode.name)
        self._apply_scale(scale)
        return True

    def _apply_scale(self, scale: float) -> None:
        self.document.scale = scale
        self.refresh_bounds()
        self.request_redraw()

    def zoom(self, action: ZoomAction, count: int = 0) -> bool:
        """Zooms in, out, to a percentage or back to 100%."""
        if self.document is None:
            return False

        self.document.adjust_mode = AdjustMode.NONE
        scale = zoom_scale(
            action,
            self.document.scale,
            count,
            self.settings.get("zoom-step"),
            self.settings.get("zoom-min"),
            self.settings.get("zoom-max"),
        )
        self._apply_scale(scale)
        return True

    def mouse_zoom(self, scroll_up: bool) -> bool:
        """Zooms in on wheel-up and out on wheel-down."""
        return self.zoom(ZoomAction.IN if scroll_up else ZoomAction.OUT)

    def rotate(self, direction: RotateDirection = RotateDirection.CLOCKWISE, count: int = 0) -> bool:
        """Turns the pages and keeps the current page in view."""
        if self.document is None:
            return False

        page = self.document.current_page_index
        self.document.rotation = rotated(self.document.rotation, direction, count)
        self.refresh_bounds()
        self.adjust_window(self.document.adjust_mode)
        self.request_redraw()
        self.set_page(page)
        return True

    def toggle_page_mode(self) -> bool:
        """Toggles between one page per row and the last multi-column layout."""
        if self.document is None:
            return False

        pages_per_row = self.pages_per_row
        if pages_per_row == 1:
            value = self._multi_column_pages_per_row
        else:
            self._multi_column_pages_per_row = pages_per_row
            value = 1

        self._layout_overrides["pages-per-row"] = value
        self._relayout()
        return True

    def toggle_fullscreen(self) -> bool:
        """
        Enters or leaves fullscreen presentation.

        Entering remembers the layout and scale, then shows one page per
        row fitted to the window; leaving restores them along with the
        previous adjust mode.
        """
        if self.document is None:
            return False

        page = self.document.current_page_index
        if self._fullscreen:
            overrides, scale, mode = self._fullscreen_restore
            self._layout_overrides = overrides
            self.document.adjust_mode = mode
            self._apply_scale(scale)
        else:
            self._fullscreen_restore = (
                dict(self._layout_overrides),
                self.document.scale,
                self.document.adjust_mode,
            )
            self._layout_overrides["pages-per-row"] = 1
            self.refresh_bounds()
            self.adjust_window(AdjustMode.BESTFIT)

        self._fullscreen = not self._fullscreen
        self.set_page(page)
        self.fullscreen_changed.emit(self._fullscreen)
        return True

    def _relayout(self) -> None:
        """Refits and redraws after a layout setting changed."""
        self.refresh_bounds()
        if self.document.adjust_mode in (AdjustMode.WIDTH, AdjustMode.BESTFIT):
            self.adjust_window(self.document.adjust_mode)
        self.request_redraw()
        self.set_page(self.document.current_page_index)
