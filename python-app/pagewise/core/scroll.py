"""
Scroll Engine.

Turns a scroll command into a new scrollbar value. Values follow the
usual adjustment model: `value` is the position of the viewport's leading
edge, `extent` the viewport size and `upper` the canvas size along the
same axis.
"""

from typing import NamedTuple, Optional

from .constants import PageStep, ScrollDirection
from .geometry import Layout, page_span


class AdjustmentState(NamedTuple):
    value: float
    extent: float
    upper: float

    @property
    def maximum(self) -> float:
        return self.upper - self.extent

    def clamp(self, value: float) -> float:
        return max(0.0, min(float(value), max(0.0, self.maximum)))


class ScrollOptions(NamedTuple):
    """
    Scroll tuning, normally read from the navigation settings.

    Attributes:
        step: Pixels per vertical step.
        hstep: Pixels per horizontal step; negative means "same as step".
        full_overlap: Fraction of the viewport kept visible on full moves.
        page_aware: Snap full/half moves to page boundaries.
        wrap: Wrap around at the document bounds.
        padding: Pixels between pages.
    """

    step: float = 40.0
    hstep: float = -1.0
    full_overlap: float = 0.0
    page_aware: bool = False
    wrap: bool = False
    padding: float = 1

    @classmethod
    def from_settings(cls, settings) -> "ScrollOptions":
        return cls(
            step=settings.get("scroll-step"),
            hstep=settings.get("scroll-hstep"),
            full_overlap=settings.get("scroll-full-overlap"),
            page_aware=settings.get("scroll-page-aware"),
            wrap=settings.get("scroll-wrap"),
            padding=settings.get("page-padding"),
        )

    @property
    def horizontal_step(self) -> float:
        return self.step if self.hstep < 0 else self.hstep


def _raw_offset(
    direction: ScrollDirection,
    count: int,
    adjustment: AdjustmentState,
    options: ScrollOptions,
) -> float:
    value, extent = adjustment.value, adjustment.extent
    full = (1.0 - options.full_overlap) * extent + options.padding
    half = (extent + options.padding) / 2

    if direction in (ScrollDirection.FULL_UP, ScrollDirection.FULL_LEFT):
        return value - full
    if direction in (ScrollDirection.FULL_DOWN, ScrollDirection.FULL_RIGHT):
        return value + full
    if direction in (ScrollDirection.HALF_UP, ScrollDirection.HALF_LEFT):
        return value - half
    if direction in (ScrollDirection.HALF_DOWN, ScrollDirection.HALF_RIGHT):
        return value + half
    if direction == ScrollDirection.LEFT:
        return value - options.horizontal_step * count
    if direction == ScrollDirection.RIGHT:
        return value + options.horizontal_step * count
    if direction == ScrollDirection.UP:
        return value - options.step * count
    if direction == ScrollDirection.DOWN:
        return value + options.step * count
    if direction == ScrollDirection.TOP:
        return 0.0
    if direction == ScrollDirection.BOTTOM:
        return adjustment.maximum
    return value


def _snap_to_page(
    direction: ScrollDirection,
    new_value: float,
    adjustment: AdjustmentState,
    page_offset: float,
    page_size: float,
) -> float:
    value, extent = adjustment.value, adjustment.extent

    if direction.is_forward_page:
        if value < page_offset < value + extent:
            return page_offset
        if page_offset <= value and page_offset + page_size < value + extent:
            return page_offset + page_size + 1
        if page_offset <= value and page_offset + page_size < new_value + extent:
            return page_offset + page_size - extent + 1
    elif direction.is_backward_page:
        if page_offset + 1 >= value and page_offset < value + extent:
            return page_offset - extent
        if page_offset <= value and page_offset + page_size + 1 < value + extent:
            return page_offset + page_size - extent
        if page_offset <= value and page_offset > new_value:
            return page_offset

    return new_value


def compute_new_offset(
    direction: ScrollDirection,
    count: int,
    adjustment: AdjustmentState,
    options: ScrollOptions = ScrollOptions(),
    layout: Optional[Layout] = None,
    current_page: Optional[int] = None,
) -> float:
    """
    Computes the scrollbar value after a scroll command.

    Args:
        direction: The scroll command.
        count: Repeat count for step moves (0 counts as 1).
        adjustment: Current state of the scrollbar on the command's axis.
        options: Step sizes, overlap, wrap and page-aware switches.
        layout: Layout used for page-aware snapping.
        current_page: Page whose boundaries page-aware snapping honours.

    Returns:
        The new value, clamped to [0, upper - extent].
    """
    count = count if count > 0 else 1
    new_value = _raw_offset(direction, count, adjustment, options)

    if options.wrap:
        if new_value < 0:
            new_value = adjustment.maximum
        elif new_value > adjustment.maximum:
            new_value = 0.0

    if (
        options.page_aware
        and layout is not None
        and current_page is not None
        and 0 <= current_page < layout.page_count
    ):
        offset, size = page_span(current_page, layout, direction.axis)
        offset -= int(options.padding) // 2
        size += options.padding
        new_value = _snap_to_page(direction, new_value, adjustment, offset, size)

    return adjustment.clamp(new_value)


def step_page(
    current: int,
    page_count: int,
    step: PageStep,
    count: int,
    wrap: bool = False,
) -> Optional[int]:
    """
    Returns the page reached by stepping `count` pages, or None if that
    leaves the document without wrapping.

    >>> step_page(9, 10, PageStep.NEXT, 1, wrap=True)
    0
    >>> step_page(9, 10, PageStep.NEXT, 1) is None
    True
    """
    if page_count <= 0:
        return None

    if step == PageStep.NEXT:
        target = (current + count) % page_count if wrap else current + count
    else:
        target = (current + page_count - count) % page_count if wrap else current - count

    if not 0 <= target < page_count:
        return None
    return target
