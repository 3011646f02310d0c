"""
Page Geometry.

Pure functions that place pages on the document canvas. Pages are laid out
row-major in a grid of `pages_per_row` columns; the first row may start at
a later column (`first_page_column`, 1-based). Each page occupies a cell,
its natural size rotated and scaled. Nothing here keeps state, so scroll
and adjustment code may call it at any point of a gesture.

>>> layout = Layout([(80, 100)] * 10, padding=1)
>>> page_offset(3, layout)
PageOffset(x=0.0, y=303.0)
>>> canvas_size(layout)
CanvasSize(width=80.0, height=1009.0)
>>> canvas_size(Layout([]))
CanvasSize(width=0.0, height=0.0)

Two pages per row, starting in the second column:

>>> layout = Layout([(80, 100)] * 3, pages_per_row=2, first_page_column=2, padding=4)
>>> [tuple(page_offset(i, layout)) for i in range(3)]
[(84.0, 0.0), (0.0, 104.0), (84.0, 104.0)]
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

from .constants import Axis


class PageOffset(NamedTuple):
    x: float
    y: float


class CanvasSize(NamedTuple):
    width: float
    height: float


class Rectangle(NamedTuple):
    x1: float
    y1: float
    x2: float
    y2: float


class Layout(NamedTuple):
    """
    Everything needed to place pages on the canvas.

    Attributes:
        page_sizes: Natural (width, height) of every page.
        scale: Zoom factor applied to every page.
        rotation: Rotation in degrees (0, 90, 180 or 270).
        pages_per_row: Number of grid columns.
        first_page_column: 1-based column of the first page in row 0.
        padding: Pixels between neighbouring cells, both axes.
    """

    page_sizes: Sequence[Tuple[float, float]]
    scale: float = 1.0
    rotation: int = 0
    pages_per_row: int = 1
    first_page_column: int = 1
    padding: float = 0

    @property
    def page_count(self) -> int:
        return len(self.page_sizes)

    @property
    def columns(self) -> int:
        return max(1, self.pages_per_row)

    @property
    def leading_slots(self) -> int:
        """Empty cells before the first page in row 0."""
        return (max(1, self.first_page_column) - 1) % self.columns


def cell_size(
    width: float, height: float, scale: float = 1.0, rotation: int = 0
) -> Tuple[float, float]:
    """
    Returns the on-canvas size of a page.

    >>> cell_size(100, 200, 2.0, 90)
    (400.0, 200.0)
    """
    if rotation % 180 == 90:
        width, height = height, width
    return (float(width) * scale, float(height) * scale)


def page_cell(index: int, layout: Layout) -> Tuple[float, float]:
    width, height = layout.page_sizes[index]
    return cell_size(width, height, layout.scale, layout.rotation)


def max_cell_size(layout: Layout) -> Tuple[float, float]:
    """Largest cell width and height over all pages (0, 0 when empty)."""
    cells = [page_cell(i, layout) for i in range(layout.page_count)]
    if not cells:
        return (0.0, 0.0)
    return (max(c[0] for c in cells), max(c[1] for c in cells))


def grid_position(index: int, layout: Layout) -> Tuple[int, int]:
    """Returns the (row, column) a page occupies."""
    slot = index + layout.leading_slots
    return divmod(slot, layout.columns)


def _rows(layout: Layout) -> List[List[Optional[int]]]:
    """Page indices per row; None marks the empty leading cells."""
    rows: List[List[Optional[int]]] = []
    slots: List[Optional[int]] = [None] * layout.leading_slots
    slots.extend(range(layout.page_count))
    for start in range(0, len(slots), layout.columns):
        rows.append(slots[start : start + layout.columns])
    return rows


def _slot_width(slot: Optional[int], layout: Layout, empty_width: float) -> float:
    if slot is None:
        return empty_width
    return page_cell(slot, layout)[0]


def _row_height(row: List[Optional[int]], layout: Layout) -> float:
    return max((page_cell(i, layout)[1] for i in row if i is not None), default=0.0)


def _slot_offsets(
    row: List[Optional[int]], layout: Layout, empty_width: float
) -> List[float]:
    """Left edge of every slot in a row."""
    offsets = []
    x = 0.0
    for slot in row:
        offsets.append(x)
        x += _slot_width(slot, layout, empty_width) + layout.padding
    return offsets


def page_offset(index: int, layout: Layout) -> PageOffset:
    """
    Returns the top-left canvas position of a page.

    Raises:
        IndexError: If the index is not a page of the layout.
    """
    if not 0 <= index < layout.page_count:
        raise IndexError(f"page {index} out of range")

    rows = _rows(layout)
    row, column = grid_position(index, layout)
    empty_width = max_cell_size(layout)[0]

    x = _slot_offsets(rows[row], layout, empty_width)[column]

    y = sum(_row_height(r, layout) for r in rows[:row])
    y += row * layout.padding

    return PageOffset(float(x), float(y))


def canvas_size(layout: Layout) -> CanvasSize:
    """Returns the size of the whole canvas; zero for an empty document."""
    if layout.page_count == 0:
        return CanvasSize(0.0, 0.0)

    rows = _rows(layout)
    empty_width = max_cell_size(layout)[0]

    width = max(
        sum(_slot_width(s, layout, empty_width) for s in r)
        + (len(r) - 1) * layout.padding
        for r in rows
    )
    height = sum(_row_height(r, layout) for r in rows)
    height += (len(rows) - 1) * layout.padding

    return CanvasSize(float(width), float(height))


def page_span(index: int, layout: Layout, axis: Axis) -> Tuple[float, float]:
    """Returns (offset, extent) of a page along one axis."""
    offset = page_offset(index, layout)
    width, height = page_cell(index, layout)
    if axis == Axis.HORIZONTAL:
        return (offset.x, width)
    return (offset.y, height)


def page_at(x: float, y: float, layout: Layout) -> Optional[int]:
    """
    Returns the page under a canvas point, or the nearest page in the
    row the point falls into. None for an empty document.

    >>> layout = Layout([(80, 100)] * 10, padding=1)
    >>> page_at(10, 350, layout)
    3
    """
    if layout.page_count == 0:
        return None

    rows = _rows(layout)
    top = 0.0
    chosen = rows[-1]
    for r in rows:
        bottom = top + _row_height(r, layout) + layout.padding
        if y < bottom:
            chosen = r
            break
        top = bottom

    empty_width = max_cell_size(layout)[0]
    best, best_distance = None, float("inf")
    for i, left in zip(chosen, _slot_offsets(chosen, layout, empty_width)):
        if i is None:
            continue
        right = left + page_cell(i, layout)[0]
        if left <= x <= right:
            return i
        distance = min(abs(x - left), abs(x - right))
        if distance < best_distance:
            best, best_distance = i, distance
    return best


def transform_rectangle(
    rect: Rectangle, width: float, height: float, scale: float, rotation: int
) -> Rectangle:
    """
    Maps a rectangle in page space onto the rotated, scaled page.

    Args:
        rect: Rectangle in natural page coordinates.
        width: Natural page width.
        height: Natural page height.
        scale: Zoom factor.
        rotation: Rotation in degrees.

    >>> transform_rectangle(Rectangle(10, 20, 30, 40), 100, 200, 1.0, 90)
    Rectangle(x1=160.0, y1=10.0, x2=180.0, y2=30.0)
    """
    if rotation == 90:
        x1, x2 = height - rect.y2, height - rect.y1
        y1, y2 = rect.x1, rect.x2
    elif rotation == 180:
        x1, x2 = width - rect.x2, width - rect.x1
        y1, y2 = height - rect.y2, height - rect.y1
    elif rotation == 270:
        x1, x2 = rect.y1, rect.y2
        y1, y2 = width - rect.x2, width - rect.x1
    else:
        x1, y1, x2, y2 = rect

    return Rectangle(
        float(x1 * scale), float(y1 * scale), float(x2 * scale), float(y2 * scale)
    )
