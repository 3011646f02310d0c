"""
External Launcher.

Hands URIs, files and linked documents to the desktop or to a new viewer
process. All calls are fire-and-forget; the return value only says
whether the request could be dispatched.
"""

import logging
import subprocess
import sys
from typing import List, Optional

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices

logger = logging.getLogger(__name__)


class DesktopLauncher:
    """Opens external targets through the desktop services."""

    def __init__(self, viewer_command: Optional[List[str]] = None) -> None:
        """
        Initializes the launcher.

        Args:
            viewer_command: Command that opens a document in a new viewer
                window. Defaults to re-running the current program.
        """
        self.viewer_command: List[str] = viewer_command or [sys.argv[0]]

    def open_uri(self, uri: str) -> bool:
        """Opens a URI with the preferred desktop handler."""
        return QDesktopServices.openUrl(QUrl(uri))

    def open_path(self, path: str) -> bool:
        """Opens a local file with the preferred desktop handler."""
        return QDesktopServices.openUrl(QUrl.fromLocalFile(path))

    def open_document(self, path: str) -> bool:
        """Opens another document in a detached viewer process."""
        try:
            subprocess.Popen(
                self.viewer_command + [path],
                stdin=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            logger.warning("Could not start viewer for %s: %s", path, e)
            return False
        return True
