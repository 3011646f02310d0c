"""
Links Mixin.

Handles following and displaying links, including the numbered link
hints shown while the user picks a link.
"""

import logging
from typing import Optional

from ...core.constants import UNSET_COORDINATE, DestinationType, LinkType, NotifyLevel
from ...core.geometry import page_offset
from ...core.links import (
    GotoDestination,
    GotoRemote,
    Launch,
    Link,
    Uri,
    describe,
    resolve_path,
)

logger = logging.getLogger(__name__)

_DESCRIBABLE = (
    LinkType.GOTO_DEST,
    LinkType.GOTO_REMOTE,
    LinkType.URI,
    LinkType.LAUNCH,
    LinkType.NAMED,
)


class LinksMixin:
    """Methods for link evaluation."""

    def evaluate_link(self, link: Optional[Link]) -> None:
        """Performs what a link points to."""
        if self.document is None or link is None:
            return

        target = link.target
        if isinstance(target, GotoDestination):
            self._goto_destination(target)
        elif isinstance(target, GotoRemote):
            path = resolve_path(self.document.path, target.path)
            self.launcher.open_document(path)
        elif isinstance(target, Uri):
            if not self.launcher.open_uri(target.uri):
                self.notify(NotifyLevel.ERROR, "Failed to open link.")
        elif isinstance(target, Launch):
            path = resolve_path(self.document.path, target.path)
            if not self.launcher.open_path(path):
                self.notify(NotifyLevel.ERROR, "Failed to open link.")

    def _goto_destination(self, target: GotoDestination) -> None:
        if target.destination_type == DestinationType.UNKNOWN:
            return

        if target.scale != 0:
            self.document.scale = target.scale
            self.refresh_bounds()
            self.request_redraw()

        if self.document.get_page(target.page) is None:
            return

        offset = page_offset(target.page, self.layout())
        x, y = offset.x, offset.y
        if target.destination_type == DestinationType.XYZ:
            scale = self.document.scale
            if target.left != UNSET_COORDINATE:
                x += target.left * scale
            if target.top != UNSET_COORDINATE:
                y += target.top * scale

        self.set_page(target.page)
        if self.settings.get("link-hadjust"):
            self.request_position(x, y)
        else:
            self.request_position(None, y)

    def display_link(self, link: Optional[Link]) -> str:
        """Tells the user where a link points."""
        text = describe(link)
        if link is not None and link.type in _DESCRIBABLE:
            level = NotifyLevel.INFO
        else:
            level = NotifyLevel.ERROR
        self.notify(level, text)
        return text

    def _draw_link_hints(self) -> bool:
        """Numbers the links on visible pages; True if there are any."""
        offset = 0
        for state in self.page_states:
            state.clear_search()
            if state.visible:
                state.draw_links = True
                state.link_offset = offset
                offset += len(state.links)
            else:
                state.draw_links = False
        return offset > 0

    def follow_links(self) -> bool:
        """Shows link hints and asks which link to follow."""
        if self.document is None:
            return False
        if self._draw_link_hints():
            self.focus_input("Follow link:")
            return True
        return False

    def display_links(self) -> bool:
        """Shows link hints and asks which link to describe."""
        if self.document is None:
            return False
        if self._draw_link_hints():
            self.focus_input("Display link:")
            return True
        return False

    def choose_link(self, text: str, follow: bool = True) -> Optional[Link]:
        """
        Resolves the hint number typed by the user.

        Args:
            text: The user's input.
            follow: Evaluate the link (True) or only describe it (False).

        Returns:
            The chosen link, or None if the input names no link.
        """
        link = None
        try:
            number = int(text.strip())
        except ValueError:
            number = 0

        for state in self.page_states:
            if link is None:
                link = state.link_for_hint(number)
            state.draw_links = False

        self.leave_input()
        if link is None:
            return None

        if follow:
            self.jumplist.save(self.current_jump_entry())
            self.evaluate_link(link)
            self.jumplist.add(self.current_jump_entry())
        else:
            self.display_link(link)
        return link

