"""
Per-page view state owned by the viewer session.
"""

from typing import List, Optional, Sequence

from ..core.geometry import Rectangle
from ..core.links import Link


class PageViewState:
    """
    What the viewer tracks for one page besides its pixels: visibility,
    link hints and search results with the active result cursor.
    """

    def __init__(self, index: int, links: Optional[Sequence[Link]] = None) -> None:
        """Initialize the state for page `index`."""
        self.index: int = index
        self.visible: bool = False
        self.links: List[Link] = list(links or [])
        self.draw_links: bool = False
        self.link_offset: int = 0
        self.search_results: List[Rectangle] = []
        self.search_current: int = -1

    def __repr__(self) -> str:
        return (
            f"PageViewState({self.index}, results={len(self.search_results)}, "
            f"current={self.search_current})"
        )

    @property
    def search_length(self) -> int:
        return len(self.search_results)

    @property
    def has_active_result(self) -> bool:
        return self.search_length > 0 and self.search_current != -1

    def set_search_results(self, results: Sequence[Rectangle]) -> None:
        """Replaces the results and deactivates the cursor."""
        self.search_results = list(results)
        self.search_current = -1

    def clear_search(self) -> None:
        self.search_results = []
        self.search_current = -1

    def link_for_hint(self, number: int) -> Optional[Link]:
        """Returns the link labelled `number` (1-based, session-wide)."""
        index = number - 1 - self.link_offset
        if self.draw_links and 0 <= index < len(self.links):
            return self.links[index]
        return None
