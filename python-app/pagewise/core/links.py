"""
Link Targets.

Links are reported by the document backend as a discriminant plus a flat
target record. `Link.new` validates that record and turns it into one of
the typed target variants below; evaluation lives with the viewer
session, which owns the viewport the link acts on.
"""

import os
from typing import NamedTuple, Optional, Union

from .constants import UNSET_COORDINATE, DestinationType, LinkType
from .geometry import Rectangle


class TargetSpec(NamedTuple):
    """
    Flat target record as reported by document backends.

    Only the fields relevant to the link type are read.
    """

    value: Optional[str] = None
    page_number: int = 0
    destination_type: DestinationType = DestinationType.UNKNOWN
    left: float = UNSET_COORDINATE
    top: float = UNSET_COORDINATE
    scale: float = 0.0


class NoTarget(NamedTuple):
    pass


class GotoDestination(NamedTuple):
    page: int
    destination_type: DestinationType = DestinationType.UNKNOWN
    left: float = UNSET_COORDINATE
    top: float = UNSET_COORDINATE
    scale: float = 0.0


class GotoRemote(NamedTuple):
    path: str


class Uri(NamedTuple):
    uri: str


class Launch(NamedTuple):
    path: str


class Named(NamedTuple):
    name: str


LinkTarget = Union[NoTarget, GotoDestination, GotoRemote, Uri, Launch, Named]

_STRING_TARGETS = {
    LinkType.GOTO_REMOTE: GotoRemote,
    LinkType.URI: Uri,
    LinkType.LAUNCH: Launch,
    LinkType.NAMED: Named,
}

_TYPES = {
    NoTarget: LinkType.NONE,
    GotoDestination: LinkType.GOTO_DEST,
    GotoRemote: LinkType.GOTO_REMOTE,
    Uri: LinkType.URI,
    Launch: LinkType.LAUNCH,
    Named: LinkType.NAMED,
}


class Link:
    """A clickable area on a page and what it points to."""

    def __init__(self, position: Rectangle, target: LinkTarget) -> None:
        self.position: Rectangle = position
        self.target: LinkTarget = target

    def __repr__(self) -> str:
        return f"Link({self.position!r}, {self.target!r})"

    @property
    def type(self) -> LinkType:
        return _TYPES.get(type(self.target), LinkType.INVALID)

    @classmethod
    def new(
        cls,
        link_type: Union[LinkType, int],
        position: Rectangle,
        target: TargetSpec = TargetSpec(),
    ) -> Optional["Link"]:
        """
        Builds a link from a backend's raw description.

        Args:
            link_type: The discriminant, as enum or raw integer.
            position: The link's rectangle on its page.
            target: The flat target record.

        Returns:
            The link, or None for unknown types and for string-valued
            types (remote, URI, launch, named) without a value.
        """
        try:
            link_type = LinkType(link_type)
        except ValueError:
            return None

        if link_type == LinkType.NONE:
            return cls(position, NoTarget())

        if link_type == LinkType.GOTO_DEST:
            return cls(
                position,
                GotoDestination(
                    page=target.page_number,
                    destination_type=target.destination_type,
                    left=target.left,
                    top=target.top,
                    scale=target.scale,
                ),
            )

        variant = _STRING_TARGETS.get(link_type)
        if variant is None or not target.value:
            return None
        return cls(position, variant(target.value))


def describe(link: Optional[Link]) -> str:
    """
    One-line, human-readable description of a link.

    >>> describe(Link.new(LinkType.URI, Rectangle(0, 0, 1, 1), TargetSpec("https://example.org")))
    'Link: https://example.org'
    >>> describe(None)
    'Link: Invalid'
    """
    target = link.target if link is not None else None
    if isinstance(target, GotoDestination):
        return f"Link: page {target.page}"
    if isinstance(target, (GotoRemote, Uri, Launch, Named)):
        return f"Link: {target[0]}"
    return "Link: Invalid"


def resolve_path(document_path: str, path: str) -> str:
    """
    Resolves a link path against the directory of the open document.

    >>> resolve_path("/books/a.pdf", "b.pdf")
    '/books/b.pdf'
    >>> resolve_path("/books/a.pdf", "/tmp/c.pdf")
    '/tmp/c.pdf'
    """
    if os.path.isabs(path):
        return path
    return os.path.join(os.path.dirname(document_path), path)
