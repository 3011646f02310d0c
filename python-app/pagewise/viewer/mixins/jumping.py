"""
Jumping Mixin.

Handles jumplist traversal and bisection.
"""

import logging
from typing import Optional

from ...core.constants import JumpDirection
from ...core.jumplist import bisect

logger = logging.getLogger(__name__)


class JumpingMixin:
    """Methods for moving through the jump history."""

    def jump(self, direction: JumpDirection) -> bool:
        """
        Returns to the next or previous recorded position.

        The current position overwrites the entry at the cursor first, so
        coming back restores it. Later entries are kept.
        """
        if self.document is None:
            return False

        entry = self.current_jump_entry()
        if not self.jumplist.replace(0, entry):
            self.jumplist.save(entry)
        if direction == JumpDirection.FORWARD:
            moved = self.jumplist.forward()
        else:
            moved = self.jumplist.backward()

        entry = self.jumplist.current()
        if entry is None:
            return False

        self.set_page(entry.page)
        scale = self.document.scale
        self.request_position(entry.x * scale, entry.y * scale)
        return moved

    def bisect(self, direction: JumpDirection, page: Optional[int] = None) -> bool:
        """
        Bisects between the current page and the recent jumps.

        Args:
            direction: Side of the current page to search.
            page: Optional zero-based page to jump to before bisecting.
        """
        if self.document is None or self.document.page_count == 0:
            return False

        target = bisect(
            self.jumplist,
            self.document.current_page_index,
            self.document.page_count,
            direction,
            page,
            self.jump_entry_for,
        )
        logger.debug("Bisect %s -> page %d", direction.name, target)
        self.set_page(target)
        self.resync_horizontal()
        return True
