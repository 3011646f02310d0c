"""
Search Mixin.

Handles stepping through search results across pages.
"""

import logging
from typing import Mapping, Optional, Sequence, Tuple

from ...core.constants import Axis, JumpDirection
from ...core.geometry import Rectangle, page_offset, transform_rectangle
from ..state import PageViewState

logger = logging.getLogger(__name__)


class SearchMixin:
    """Methods for search result navigation."""

    def set_search_results(
        self,
        results: Mapping[int, Sequence[Rectangle]],
        direction: JumpDirection = JumpDirection.FORWARD,
    ) -> None:
        """
        Loads the results of a new search.

        Args:
            results: Result rectangles (page coordinates) per page index.
            direction: Direction the search was started in; later steps
                are taken relative to it.
        """
        for state in self.page_states:
            state.set_search_results(results.get(state.index, ()))
        self.search_direction = direction
        self.request_redraw()

    def advance_search(self, direction: JumpDirection = JumpDirection.FORWARD) -> bool:
        """
        Activates the next or previous search result, cycling through the
        document, and centres the viewport on it.

        Returns:
            True if a result was activated.
        """
        if self.document is None or not self.page_states:
            return False

        diff = 1 if direction == JumpDirection.FORWARD else -1
        if self.search_direction == JumpDirection.BACKWARD:
            diff = -diff

        count = len(self.page_states)
        current_page = self.document.current_page_index
        leaving = False

        for k in range(count):
            state = self.page_states[(current_page + diff * k) % count]
            if not state.has_active_result:
                continue

            current = state.search_current
            if diff == 1 and current < state.search_length - 1:
                target = (state, current + 1)
            elif diff == -1 and current > 0:
                target = (state, current - 1)
            else:
                leaving = True
                self.jumplist.save(self.current_jump_entry())
                state.search_current = -1
                target = self._first_result_from(state.index + diff, diff)
            break
        else:
            # Nothing active yet: start at the current page.
            leaving = True
            self.jumplist.save(self.current_jump_entry())
            target = self._first_result_from(current_page, diff)

        if target is None:
            return False

        self._activate_result(*target)
        if leaving:
            self.jumplist.add(self.current_jump_entry())
        return True

    def _first_result_from(
        self, start: int, diff: int
    ) -> Optional[Tuple[PageViewState, int]]:
        """First page with results from `start` on, cycling in `diff` steps."""
        count = len(self.page_states)
        for k in range(count):
            state = self.page_states[(start + diff * k) % count]
            if state.search_length:
                return (state, 0 if diff == 1 else state.search_length - 1)
        return None

    def _activate_result(self, state: PageViewState, index: int) -> None:
        """Marks a result active and centres the viewport on it."""
        state.search_current = index
        page = self.document.get_page(state.index)
        rect = transform_rectangle(
            state.search_results[index],
            page.width,
            page.height,
            self.document.scale,
            self.document.rotation,
        )
        offset = page_offset(state.index, self.layout())

        y = offset.y - self.adjustments[Axis.VERTICAL].extent / 2 + rect.y1
        x = None
        if self.settings.get("search-hadjust"):
            x = offset.x - self.adjustments[Axis.HORIZONTAL].extent / 2 + rect.x1

        if state.index != self.document.current_page_index:
            self.document.set_current_page_index(state.index)
            self.page_changed.emit(state.index)
        self.request_position(x, y, delayed=False)
        self.request_redraw()
        logger.debug("Search result %d on page %d", index, state.index)

    def abort(self) -> None:
        """Hides link hints and, if configured, clears the search results."""
        clear_search = self.settings.get("abort-clear-search")
        for state in self.page_states:
            state.draw_links = False
            if clear_search:
                state.clear_search()
        self.leave_input()
        self.request_redraw()
