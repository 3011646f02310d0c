"""
Navigation Settings.

Typed access to the named options that steer scrolling, zooming, link
following and search navigation. Values live in a QSettings store so the
host application shares them with the rest of its preferences.
"""

from typing import Any, Dict, Optional, Tuple

from PySide6.QtCore import QSettings

DEFAULTS: Dict[str, Tuple[Any, type]] = {
    "scroll-step": (40.0, float),
    "scroll-hstep": (-1.0, float),
    "scroll-full-overlap": (0.0, float),
    "scroll-page-aware": (False, bool),
    "scroll-wrap": (False, bool),
    "page-padding": (1, int),
    "pages-per-row": (1, int),
    "first-page-column": (1, int),
    "advance-pages-per-row": (False, bool),
    "link-hadjust": (True, bool),
    "search-hadjust": (True, bool),
    "zoom-step": (10, int),
    "zoom-min": (10, int),
    "zoom-max": (1000, int),
    "abort-clear-search": (True, bool),
    "show-scrollbars": (False, bool),
    "jumplist-size": (2000, int),
}


class NavigationSettings:
    """
    Reads and writes navigation options through QSettings.

    Every option has a typed default; reading an option that was never
    stored yields that default.
    """

    def __init__(self, store: Optional[QSettings] = None) -> None:
        """
        Initializes the settings wrapper.

        Args:
            store: The backing QSettings. Defaults to the application-wide
                "Pagewise/Viewer" store.
        """
        self.store: QSettings = store if store is not None else QSettings(
            "Pagewise", "Viewer"
        )

    def get(self, name: str) -> Any:
        """
        Returns the value of a named option.

        Raises:
            KeyError: If the option is unknown.
        """
        default, kind = DEFAULTS[name]
        return self.store.value(name, default, type=kind)

    def set(self, name: str, value: Any) -> None:
        """
        Stores a named option.

        Raises:
            KeyError: If the option is unknown.
        """
        _, kind = DEFAULTS[name]
        self.store.setValue(name, kind(value))

    @property
    def scroll_step(self) -> float:
        return self.get("scroll-step")

    @property
    def scroll_hstep(self) -> float:
        """Horizontal step; negative values fall back to scroll-step."""
        hstep = self.get("scroll-hstep")
        if hstep < 0:
            return self.scroll_step
        return hstep

    @property
    def padding(self) -> int:
        return self.get("page-padding")

    @property
    def pages_per_row(self) -> int:
        return max(1, self.get("pages-per-row"))

    @property
    def first_page_column(self) -> int:
        return max(1, self.get("first-page-column"))
