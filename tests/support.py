"""
Shared helpers for the navigation tests.
"""

import os
import tempfile

from PySide6.QtCore import QCoreApplication, QSettings

from pagewise.core.document import Document
from pagewise.core.settings import NavigationSettings
from pagewise.viewer import NavigationSession


def ensure_app() -> QCoreApplication:
    """Returns the process-wide QCoreApplication, creating it once."""
    return QCoreApplication.instance() or QCoreApplication([])


def temp_settings(**options) -> NavigationSettings:
    """Settings backed by a throwaway INI file."""
    path = os.path.join(tempfile.mkdtemp(prefix="pagewise-"), "navigation.ini")
    settings = NavigationSettings(QSettings(path, QSettings.Format.IniFormat))
    for name, value in options.items():
        settings.set(name.replace("_", "-"), value)
    return settings


class FakeLauncher:
    """Records external opens instead of performing them."""

    def __init__(self, succeed: bool = True) -> None:
        self.succeed = succeed
        self.uris = []
        self.paths = []
        self.documents = []

    def open_uri(self, uri):
        self.uris.append(uri)
        return self.succeed

    def open_path(self, path):
        self.paths.append(path)
        return self.succeed

    def open_document(self, path):
        self.documents.append(path)
        return True


class Recorder:
    """Collects the arguments of every emission of a signal."""

    def __init__(self, signal) -> None:
        self.calls = []
        signal.connect(self.record)

    def record(self, *args):
        self.calls.append(args)

    @property
    def last(self):
        return self.calls[-1] if self.calls else None


def make_session(
    pages=10,
    size=(80, 100),
    viewport=(50, 500),
    path="/docs/book.pdf",
    links=None,
    launcher=None,
    **options,
):
    """
    A session with an open document of identical pages.

    Defaults: ten 80x100 pages, one per row, one pixel padding, scale 1,
    a 50x500 viewport.
    """
    ensure_app()
    session = NavigationSession(temp_settings(**options), launcher or FakeLauncher())
    session.open_document(Document([size] * pages, path=path), links)
    session.set_viewport_size(*viewport)
    return session
