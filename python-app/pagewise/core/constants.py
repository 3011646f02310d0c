"""
Navigation Constants and Enumerations.

This module defines shared Enum classes used throughout the navigation
engine: adjust modes, scroll and jump directions, link kinds and the
notification levels surfaced to the user.
"""

from enum import Enum


class AdjustMode(Enum):
    """
    Defines whether the scale follows the viewport size.

    Attributes:
        NONE (0): Scale is set explicitly (zoom commands).
        BESTFIT (1): Whole page fits; falls back to WIDTH for tall viewports.
        WIDTH (2): A row of pages fills the viewport width.
        INPUTBAR (3): Transient, while link or index input is requested.
    """

    NONE = 0
    BESTFIT = 1
    WIDTH = 2
    INPUTBAR = 3


class Axis(Enum):
    HORIZONTAL = 0
    VERTICAL = 1


class ScrollDirection(Enum):
    """
    Scroll commands understood by the scroll engine.

    Step directions move by the configured step size, FULL_* by a viewport,
    HALF_* by half a viewport. TOP and BOTTOM jump to the bounds.
    """

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    FULL_UP = "full-up"
    FULL_DOWN = "full-down"
    FULL_LEFT = "full-left"
    FULL_RIGHT = "full-right"
    HALF_UP = "half-up"
    HALF_DOWN = "half-down"
    HALF_LEFT = "half-left"
    HALF_RIGHT = "half-right"
    TOP = "top"
    BOTTOM = "bottom"

    @property
    def axis(self) -> Axis:
        if self in _HORIZONTAL:
            return Axis.HORIZONTAL
        return Axis.VERTICAL

    @property
    def is_forward_page(self) -> bool:
        """True for full/half moves towards the end of the document."""
        return self in (
            ScrollDirection.FULL_DOWN,
            ScrollDirection.HALF_DOWN,
            ScrollDirection.FULL_RIGHT,
            ScrollDirection.HALF_RIGHT,
        )

    @property
    def is_backward_page(self) -> bool:
        """True for full/half moves towards the start of the document."""
        return self in (
            ScrollDirection.FULL_UP,
            ScrollDirection.HALF_UP,
            ScrollDirection.FULL_LEFT,
            ScrollDirection.HALF_LEFT,
        )


_HORIZONTAL = frozenset(
    (
        ScrollDirection.LEFT,
        ScrollDirection.RIGHT,
        ScrollDirection.FULL_LEFT,
        ScrollDirection.FULL_RIGHT,
        ScrollDirection.HALF_LEFT,
        ScrollDirection.HALF_RIGHT,
    )
)


class JumpDirection(Enum):
    FORWARD = 0
    BACKWARD = 1


class PageStep(Enum):
    NEXT = 0
    PREVIOUS = 1


class GotoTarget(Enum):
    TOP = 0
    BOTTOM = 1


class ZoomAction(Enum):
    """
    Zoom commands.

    Attributes:
        IN: Increase scale by zoom-step percent per count.
        OUT: Decrease scale by zoom-step percent per count.
        SPECIFIC: Use the count as a percentage (0 means 100%).
        DEFAULT: Reset to 100%.
    """

    IN = 0
    OUT = 1
    SPECIFIC = 2
    DEFAULT = 3


class RotateDirection(Enum):
    CLOCKWISE = 90
    COUNTER_CLOCKWISE = 270


class LinkType(Enum):
    """
    Discriminant for link targets as reported by document backends.

    INVALID is never constructed; it is what a missing link reports.
    """

    INVALID = -1
    NONE = 0
    GOTO_DEST = 1
    GOTO_REMOTE = 2
    URI = 3
    LAUNCH = 4
    NAMED = 5


class DestinationType(Enum):
    UNKNOWN = 0
    XYZ = 1
    FIT = 2
    FIT_H = 3
    FIT_V = 4
    FIT_R = 5
    FIT_B = 6
    FIT_BH = 7
    FIT_BV = 8


class NotifyLevel(Enum):
    INFO = 0
    WARNING = 1
    ERROR = 2


#: Sentinel used by XYZ destinations for "keep this coordinate".
UNSET_COORDINATE = -1
