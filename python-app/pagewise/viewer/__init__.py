"""
Viewer Package Initialization.

This package binds the pure navigation engine to a document session. It
exposes NavigationSession for integration into a windowing layer.
"""

from .session import NavigationSession
from .state import PageViewState

__all__ = ["NavigationSession", "PageViewState"]
