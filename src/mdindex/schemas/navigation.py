"""Navigation context passed down while indexing."""

from __future__ import annotations

from dataclasses import dataclass

from mdindex.schemas.documents import FsObject


@dataclass(frozen=True)
class NavContext:
    """Neighbours of an object within its parent directory.

    Attributes:
        prev: Preceding sibling entry, if any.
        next: Following sibling entry, if any.
        up: Root document of the enclosing directory, if any.
    """

    prev: FsObject | None = None
    next: FsObject | None = None
    up: FsObject | None = None

    def is_empty(self) -> bool:
        return self.prev is None and self.next is None and self.up is None
