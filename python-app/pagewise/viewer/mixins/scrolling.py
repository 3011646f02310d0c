"""
Scrolling Mixin.

Handles scroll commands, page stepping, goto and mouse dragging.
"""

import logging
from typing import Optional

from ...core.constants import Axis, GotoTarget, PageStep, ScrollDirection
from ...core.scroll import ScrollOptions, compute_new_offset, step_page

logger = logging.getLogger(__name__)


class ScrollingMixin:
    """Methods for moving the viewport."""

    def scroll(self, direction: ScrollDirection, count: int = 0) -> Optional[float]:
        """
        Scrolls along the command's axis.

        Returns:
            The new scrollbar value, or None without a document.
        """
        if self.document is None:
            return None

        axis = direction.axis
        value = compute_new_offset(
            direction,
            count,
            self.adjustments[axis],
            ScrollOptions.from_settings(self.settings),
            self.layout(),
            self.document.current_page_index,
        )
        if axis == Axis.HORIZONTAL:
            self.request_position(value, None, delayed=False)
        else:
            self.request_position(None, value, delayed=False)
        self.update_page_number = True
        return value

    def navigate(self, step: PageStep, count: int = 0) -> bool:
        """
        Moves `count` pages forward or back.

        Without a count the step is one page, or a whole row when
        advance-pages-per-row is set.

        Returns:
            False if the target lies outside the document without wrapping.
        """
        if self.document is None:
            return False

        if count <= 0:
            count = 1
            if self.settings.get("advance-pages-per-row"):
                count = self.pages_per_row

        page = step_page(
            self.document.current_page_index,
            self.document.page_count,
            step,
            count,
            self.settings.get("scroll-wrap"),
        )
        if page is None:
            return False

        self.set_page(page)
        self.resync_horizontal()
        return True

    def goto(self, target: GotoTarget = GotoTarget.TOP, page: Optional[int] = None) -> bool:
        """
        Jumps to a page, or to the first or last page, recording the jump.

        Args:
            target: TOP or BOTTOM when no page is given.
            page: Zero-based page to show.
        """
        if self.document is None:
            return False
        if page is not None and self.document.get_page(page) is None:
            return False

        self.jumplist.save(self.current_jump_entry())
        if page is not None:
            self.set_page(page)
        elif target == GotoTarget.BOTTOM:
            self.set_page(self.document.page_count - 1)
        else:
            self.set_page(0)

        self.resync_horizontal()
        self.jumplist.add(self.current_jump_entry())
        logger.debug("Jumped to page %d", self.document.current_page_index)
        return True

    def drag_press(self, x: float, y: float) -> None:
        self._drag_anchor = (x, y)

    def drag_motion(self, x: float, y: float) -> None:
        """Drags the canvas along with the pointer since the last event."""
        if self.document is None or self._drag_anchor is None:
            return
        ax, ay = self._drag_anchor
        h = self.adjustments[Axis.HORIZONTAL]
        v = self.adjustments[Axis.VERTICAL]
        self.request_position(h.value - (x - ax), v.value - (y - ay), delayed=False)
        self.update_page_number = True
        self._drag_anchor = (x, y)

    def drag_release(self) -> None:
        self._drag_anchor = None
