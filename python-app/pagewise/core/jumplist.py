"""
Jumplist.

A bounded, branch-discarding history of view positions, navigated like
browser back/forward.
"""

from typing import Callable, List, NamedTuple, Optional

from .constants import JumpDirection


class JumpEntry(NamedTuple):
    """A recorded position: page index plus unscaled canvas coordinates."""

    page: int
    x: float
    y: float


class Jumplist:
    """
    Ordered jump entries with a cursor.

    Once anything has been saved the cursor always points at a valid
    entry. Recording a new jump while the cursor is not at the tail drops
    the entries after the cursor first.
    """

    def __init__(self, capacity: int = 2000) -> None:
        """
        Initializes an empty jumplist.

        Args:
            capacity: Maximum number of entries; the oldest is dropped when
                an add would exceed it.
        """
        self.capacity: int = max(1, capacity)
        self.entries: List[JumpEntry] = []
        self.cursor: int = 0

    def __len__(self) -> int:
        return len(self.entries)

    def clear(self) -> None:
        self.entries = []
        self.cursor = 0

    def _trim(self) -> None:
        del self.entries[self.cursor + 1 :]

    def save(self, entry: JumpEntry) -> None:
        """
        Overwrites the entry at the cursor, or starts the list.

        Entries after the cursor are discarded; the cursor does not move.
        """
        if not self.entries:
            self.entries.append(entry)
            self.cursor = 0
            return
        self._trim()
        self.entries[self.cursor] = entry

    def add(self, entry: JumpEntry) -> None:
        """
        Records a new jump after the cursor and moves the cursor onto it.
        """
        if self.entries:
            self._trim()
        self.entries.append(entry)
        if len(self.entries) > self.capacity:
            del self.entries[0]
        self.cursor = len(self.entries) - 1

    def replace(self, back: int, entry: JumpEntry) -> bool:
        """
        Overwrites the entry `back` steps behind the cursor in place.

        Returns:
            False if there is no such entry.
        """
        index = self.cursor - back
        if not self.entries or not 0 <= index < len(self.entries):
            return False
        self.entries[index] = entry
        return True

    def forward(self) -> bool:
        """Moves the cursor one entry forward; False at the tail."""
        if not self.has_next():
            return False
        self.cursor += 1
        return True

    def backward(self) -> bool:
        """Moves the cursor one entry back; False at the head."""
        if not self.has_previous():
            return False
        self.cursor -= 1
        return True

    def has_previous(self) -> bool:
        return bool(self.entries) and self.cursor > 0

    def has_next(self) -> bool:
        return bool(self.entries) and self.cursor < len(self.entries) - 1

    def current(self) -> Optional[JumpEntry]:
        if not self.entries:
            return None
        return self.entries[self.cursor]

    def peek_back(self, steps: int) -> Optional[JumpEntry]:
        """Returns the entry `steps` behind the cursor without moving it."""
        index = self.cursor - steps
        if not self.entries or not 0 <= index < len(self.entries):
            return None
        return self.entries[index]


def _top_left(page: int) -> JumpEntry:
    return JumpEntry(page, 0.0, 0.0)


def bisect(
    jumplist: Jumplist,
    current_page: int,
    page_count: int,
    direction: JumpDirection,
    page: Optional[int] = None,
    entry_for: Optional[Callable[[int], JumpEntry]] = None,
) -> int:
    """
    Halves the page interval between the current page and a recent jump.

    Repeated calls perform a binary search for a page the reader only
    roughly remembers: the previous (or second previous) jump bounds the
    search, and without a usable bound the rest of the document does.

    Args:
        jumplist: History to read bounds from and record jumps into.
        current_page: Page shown before the command.
        page_count: Number of pages in the document.
        direction: Which side of the current page to search.
        page: Optional explicit page to jump to first; it then becomes the
            current page and the direction follows from where it lies.
        entry_for: Builds the jump entry recorded for a page. Defaults to
            the page's top-left corner.

    Returns:
        The page to show.
    """
    if page_count <= 0:
        return current_page
    if entry_for is None:
        entry_for = _top_left

    jumplist.save(entry_for(current_page))

    if page is not None and 0 <= page < page_count:
        direction = JumpDirection.BACKWARD if page < current_page else JumpDirection.FORWARD
        current_page = page
        jumplist.add(entry_for(page))

    prev = jumplist.peek_back(1)
    prev2 = jumplist.peek_back(2) if prev is not None else None

    target = current_page
    if direction == JumpDirection.FORWARD:
        if prev is not None and current_page <= prev.page:
            if current_page < prev.page:
                target = (current_page + prev.page) // 2
                jumplist.add(entry_for(target))
        elif prev2 is not None and current_page <= prev2.page:
            if current_page < prev2.page:
                jumplist.replace(1, entry_for(current_page))
                target = (current_page + prev2.page) // 2
                jumplist.save(entry_for(target))
        else:
            target = (current_page + page_count - 1) // 2
            jumplist.add(entry_for(target))
    else:
        if prev is not None and prev.page <= current_page:
            if prev.page < current_page:
                target = (current_page + prev.page) // 2
                jumplist.add(entry_for(target))
        elif prev2 is not None and prev2.page <= current_page:
            if prev2.page < current_page:
                jumplist.replace(1, entry_for(current_page))
                target = (current_page + prev2.page) // 2
                jumplist.save(entry_for(target))
        else:
            target = current_page // 2
            jumplist.add(entry_for(target))

    return target
