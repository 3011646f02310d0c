"""
Navigation Session.

The aggregator that combines the navigation mixins with the state they
share: the open document, its jumplist, per-page view state and the
scrollbar model of the viewport. The windowing layer feeds viewport
changes in and connects to the request signals to apply the results.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from PySide6.QtCore import QObject, QTimer, Signal

from ..core.constants import AdjustMode, Axis, JumpDirection, NotifyLevel
from ..core.document import Document
from ..core.geometry import Layout, canvas_size, page_at, page_offset
from ..core.jumplist import JumpEntry, Jumplist
from ..core.scroll import AdjustmentState
from ..core.settings import NavigationSettings
from .launcher import DesktopLauncher
from .mixins.adjustment import AdjustmentMixin
from .mixins.jumping import JumpingMixin
from .mixins.links import LinksMixin
from .mixins.scrolling import ScrollingMixin
from .mixins.search import SearchMixin
from .state import PageViewState

logger = logging.getLogger(__name__)


class NavigationSession(
    QObject, AdjustmentMixin, ScrollingMixin, JumpingMixin, LinksMixin, SearchMixin
):
    """
    Navigation state and commands for one open document.
    Inherits the individual commands from mixins.
    """

    redraw_requested = Signal()
    position_requested = Signal(object, object)
    input_requested = Signal(str, str)
    notification = Signal(object, str)
    fullscreen_changed = Signal(bool)
    page_changed = Signal(int)

    def __init__(
        self,
        settings: Optional[NavigationSettings] = None,
        launcher: Optional[DesktopLauncher] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        """Initializes the session without a document."""
        super().__init__(parent)

        self.settings: NavigationSettings = settings or NavigationSettings()
        self.launcher = launcher or DesktopLauncher()

        # Document State
        self.document: Optional[Document] = None
        self.page_states: List[PageViewState] = []
        self.jumplist: Jumplist = Jumplist(self.settings.get("jumplist-size"))

        # Viewport State
        self.adjustments: Dict[Axis, AdjustmentState] = {
            Axis.HORIZONTAL: AdjustmentState(0.0, 0.0, 0.0),
            Axis.VERTICAL: AdjustmentState(0.0, 0.0, 0.0),
        }
        self.scrollbar_width: float = 0.0
        self.update_page_number: bool = False

        # Command State
        self.search_direction: JumpDirection = JumpDirection.FORWARD
        self._drag_anchor: Optional[Tuple[float, float]] = None
        self._multi_column_pages_per_row: int = 2
        self._layout_overrides: Dict[str, int] = {}
        self._fullscreen: bool = False
        self._fullscreen_restore: Optional[Tuple[Dict[str, int], float, AdjustMode]] = None
        self._mode_before_input: Optional[AdjustMode] = None

        self._pending_position: Optional[Tuple[Optional[float], Optional[float]]] = None
        self.position_timer = QTimer(self)
        self.position_timer.setSingleShot(True)
        self.position_timer.setInterval(0)
        self.position_timer.timeout.connect(self.flush_pending_position)

    def open_document(self, document: Document, links=None) -> None:
        """
        Starts navigating a freshly opened document.

        Args:
            document: The document reference.
            links: Optional mapping of page index to the links on it.
        """
        links = links or {}
        self.document = document
        self.page_states = [
            PageViewState(i, links.get(i)) for i in range(document.page_count)
        ]
        self.jumplist = Jumplist(self.settings.get("jumplist-size"))
        self._pending_position = None
        self.refresh_bounds()
        logger.debug("Opened document with %d pages", document.page_count)

    def close_document(self) -> None:
        """Forgets the document and everything tied to it."""
        self.document = None
        self.page_states = []
        self.jumplist.clear()
        self._pending_position = None
        self.position_timer.stop()

    def layout(self) -> Layout:
        """Current layout parameters of the document canvas."""
        doc = self.document
        if doc is None:
            return Layout([])
        return Layout(
            doc.page_sizes,
            scale=doc.scale,
            rotation=doc.rotation,
            pages_per_row=self.pages_per_row,
            first_page_column=self.first_page_column,
            padding=self.settings.padding,
        )

    @property
    def pages_per_row(self) -> int:
        """Columns in effect for this session; toggles override the stored option."""
        value = self._layout_overrides.get("pages-per-row")
        if value is None:
            return self.settings.pages_per_row
        return max(1, value)

    @property
    def first_page_column(self) -> int:
        value = self._layout_overrides.get("first-page-column")
        if value is None:
            return self.settings.first_page_column
        return max(1, value)

    # --- Viewport model ---

    def update_viewport(
        self, axis: Axis, value: float, extent: float, upper: Optional[float] = None
    ) -> None:
        """Records the scrollbar state reported by the windowing layer."""
        current = self.adjustments[axis]
        self.adjustments[axis] = AdjustmentState(
            float(value), float(extent), current.upper if upper is None else float(upper)
        )

    def set_viewport_size(self, width: float, height: float) -> None:
        """Records a viewport resize and refits the scale if needed."""
        h = self.adjustments[Axis.HORIZONTAL]
        v = self.adjustments[Axis.VERTICAL]
        self.adjustments[Axis.HORIZONTAL] = h._replace(extent=float(width))
        self.adjustments[Axis.VERTICAL] = v._replace(extent=float(height))
        if self.document and self.document.adjust_mode in (
            AdjustMode.WIDTH,
            AdjustMode.BESTFIT,
        ):
            self.adjust_window(self.document.adjust_mode)

    def refresh_bounds(self) -> None:
        """Sets the scrollbar upper bounds to the current canvas size."""
        size = canvas_size(self.layout())
        h = self.adjustments[Axis.HORIZONTAL]
        v = self.adjustments[Axis.VERTICAL]
        self.adjustments[Axis.HORIZONTAL] = h._replace(upper=size.width)
        self.adjustments[Axis.VERTICAL] = v._replace(upper=size.height)

    def adjustment(self, axis: Axis) -> AdjustmentState:
        return self.adjustments[axis]

    # --- Position requests ---

    def request_position(
        self, x: Optional[float], y: Optional[float], delayed: bool = True
    ) -> None:
        """
        Asks the windowing layer to move the viewport.

        None leaves an axis alone. Delayed requests are applied once the
        event loop settles; a newer request replaces the pending value of
        every axis it sets. An immediate request drops whatever is pending.
        """
        if not delayed:
            self._pending_position = None
            self.position_timer.stop()
            self._apply_position(x, y)
            return

        if self._pending_position is not None:
            old_x, old_y = self._pending_position
            x = old_x if x is None else x
            y = old_y if y is None else y
        self._pending_position = (x, y)
        self.position_timer.start()

    def flush_pending_position(self) -> None:
        """Applies the pending delayed position, if any."""
        if self._pending_position is None:
            return
        x, y = self._pending_position
        self._pending_position = None
        self._apply_position(x, y)

    def _apply_position(self, x: Optional[float], y: Optional[float]) -> None:
        if x is not None:
            h = self.adjustments[Axis.HORIZONTAL]
            x = h.clamp(x)
            self.adjustments[Axis.HORIZONTAL] = h._replace(value=x)
        if y is not None:
            v = self.adjustments[Axis.VERTICAL]
            y = v.clamp(y)
            self.adjustments[Axis.VERTICAL] = v._replace(value=y)
        self.position_requested.emit(x, y)

    def effective_position(self) -> Tuple[float, float]:
        """Viewport position including a not yet applied request."""
        x = self.adjustments[Axis.HORIZONTAL].value
        y = self.adjustments[Axis.VERTICAL].value
        if self._pending_position is not None:
            px, py = self._pending_position
            x = x if px is None else px
            y = y if py is None else py
        return (x, y)

    # --- Pages ---

    def set_visible_pages(self, indices: Iterable[int]) -> None:
        """Records which pages the windowing layer currently shows."""
        shown = set(indices)
        for state in self.page_states:
            state.visible = state.index in shown

    def set_page(self, index: int, delayed: bool = True) -> bool:
        """
        Makes a page current and scrolls its top edge into view.

        Returns:
            False when no document is open or the index is out of range.
        """
        if self.document is None or not self.document.set_current_page_index(index):
            return False
        offset = page_offset(index, self.layout())
        self.update_page_number = False
        self.request_position(None, offset.y, delayed=delayed)
        self.page_changed.emit(index)
        return True

    def resync_horizontal(self) -> None:
        """Centres the canvas horizontally while the scale follows the window."""
        if self.document is None:
            return
        if self.document.adjust_mode not in (AdjustMode.WIDTH, AdjustMode.BESTFIT):
            return
        h = self.adjustments[Axis.HORIZONTAL]
        self.request_position(max(0.0, h.maximum / 2), None)

    def sync_current_page(self) -> Optional[int]:
        """
        Recomputes the current page from the viewport centre after a scroll
        or drag moved the viewport.
        """
        if self.document is None or not self.update_page_number:
            return None
        self.update_page_number = False

        h = self.adjustments[Axis.HORIZONTAL]
        v = self.adjustments[Axis.VERTICAL]
        index = page_at(
            h.value + h.extent / 2, v.value + v.extent / 2, self.layout()
        )
        if index is not None and index != self.document.current_page_index:
            self.document.set_current_page_index(index)
            self.page_changed.emit(index)
        return index

    # --- Jump entries ---

    def current_jump_entry(self) -> JumpEntry:
        """The current view position in scale-independent coordinates."""
        doc = self.document
        x, y = self.effective_position()
        scale = doc.scale or 1.0
        return JumpEntry(doc.current_page_index, x / scale, y / scale)

    def jump_entry_for(self, page: int) -> JumpEntry:
        """Jump entry for showing `page` with the current horizontal position."""
        if page == self.document.current_page_index:
            return self.current_jump_entry()
        scale = self.document.scale or 1.0
        x, _ = self.effective_position()
        offset = page_offset(page, self.layout())
        return JumpEntry(page, x / scale, offset.y / scale)

    # --- User feedback ---

    def request_redraw(self) -> None:
        self.redraw_requested.emit()

    def notify(self, level: NotifyLevel, message: str) -> None:
        if level == NotifyLevel.ERROR:
            logger.warning(message)
        self.notification.emit(level, message)

    def focus_input(self, prompt: str, prefill: str = "") -> None:
        """Switches to INPUTBAR mode and asks the UI for input."""
        if self.document is not None:
            if self.document.adjust_mode != AdjustMode.INPUTBAR:
                self._mode_before_input = self.document.adjust_mode
            self.document.adjust_mode = AdjustMode.INPUTBAR
        self.input_requested.emit(prompt, prefill)

    def leave_input(self) -> None:
        """Restores the adjust mode that was active before input."""
        if self.document is None or self._mode_before_input is None:
            return
        if self.document.adjust_mode == AdjustMode.INPUTBAR:
            self.document.adjust_mode = self._mode_before_input
        self._mode_before_input = None
