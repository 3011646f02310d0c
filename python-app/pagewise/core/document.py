"""
Document Reference.

The navigation engine never parses documents. It only needs the page
count, the natural size of each page and a handful of view parameters.
`Document` holds exactly that and is what backends populate when a file
is opened.
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

from .constants import AdjustMode

VALID_ROTATIONS = (0, 90, 180, 270)


class Page(NamedTuple):
    """A page handle: its index and natural (unscaled, unrotated) size."""

    index: int
    width: float
    height: float


class Document:
    """
    Read-mostly reference to an open document and its view parameters.
    """

    def __init__(
        self,
        page_sizes: Sequence[Tuple[float, float]],
        path: str = "",
        scale: float = 1.0,
        rotation: int = 0,
        adjust_mode: AdjustMode = AdjustMode.NONE,
    ) -> None:
        """
        Initializes the document reference.

        Args:
            page_sizes: Natural (width, height) of every page, in order.
            path: Path of the file on disk; links resolve relative to it.
            scale: Initial zoom factor.
            rotation: Initial rotation in degrees.
            adjust_mode: Initial adjust mode.
        """
        self._pages: List[Page] = [
            Page(i, float(w), float(h)) for i, (w, h) in enumerate(page_sizes)
        ]
        self.path: str = path
        self.current_page_index: int = 0
        self.scale: float = scale
        self.adjust_mode: AdjustMode = adjust_mode
        self._rotation: int = 0
        self.rotation = rotation

    @property
    def page_count(self) -> int:
        """The total number of pages in the document."""
        return len(self._pages)

    @property
    def rotation(self) -> int:
        return self._rotation

    @rotation.setter
    def rotation(self, degrees: int) -> None:
        degrees = int(degrees) % 360
        if degrees not in VALID_ROTATIONS:
            raise ValueError(f"Unsupported rotation: {degrees}")
        self._rotation = degrees

    def get_page(self, index: int) -> Optional[Page]:
        """
        Returns the page at a zero-based index.

        Returns:
            The Page, or None if the index is out of range.
        """
        if 0 <= index < len(self._pages):
            return self._pages[index]
        return None

    @property
    def page_sizes(self) -> List[Tuple[float, float]]:
        return [(p.width, p.height) for p in self._pages]

    def set_current_page_index(self, index: int) -> bool:
        """
        Makes a page current.

        Returns:
            False (and leaves the document untouched) if out of range.
        """
        if not 0 <= index < len(self._pages):
            return False
        self.current_page_index = index
        return True
