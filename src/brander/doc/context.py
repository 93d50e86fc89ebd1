"""Document tree nodes"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from brander.core.context import Context
from brander.util.mapping import trim

if TYPE_CHECKING:
    from brander.config import Config
    from brander.core.file import File


class DocumentContext(Context):
    """A node of a document tree, rendered by the provider registered for its type.

    Only the root variant may lack a parent. Any other node built without one is
    detached: it belongs to no tree and is left out of the generated output.
    """

    def __init__(self, type: str, data: dict, parent: Optional[DocumentContext], config: Config):
        super().__init__(type, data, config)
        self._parent = parent
        self._children: list[DocumentContext] = []
        self._title = trim(self.get("title")) or None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type!r}, title={self.title!r}, depth={self.depth})"

    def add_children(self, children: Iterable[DocumentContext]) -> None:
        """Append children in document order; each must already point at this node."""
        for child in children:
            if child.parent is not self:
                raise ValueError(f"{child!r} is not a child of {self!r}")
            self._children.append(child)

    def is_root(self) -> bool:
        return False

    @property
    def children(self) -> tuple[DocumentContext, ...]:
        return tuple(self._children)

    @property
    def parent(self) -> Optional[DocumentContext]:
        return self._parent

    @property
    def depth(self) -> int:
        return self._parent.depth + 1 if self._parent is not None else 0

    @property
    def detached(self) -> bool:
        return self._parent is None and not self.is_root()

    @property
    def root(self) -> Optional[RootDocumentContext]:
        """Nearest root ancestor (self for a root node), None for detached branches."""
        context: Optional[DocumentContext] = self
        while context is not None:
            if context.is_root():
                return context
            context = context.parent
        return None

    @property
    def title(self) -> Optional[str]:
        return self._title


class RootDocumentContext(DocumentContext):
    """Top of a document tree, bound to exactly one output file."""

    def __init__(self, type: str, file: File, data: dict, config: Config):
        super().__init__(type, data, None, config)
        self._file = file

    def is_root(self) -> bool:
        return True

    @property
    def file(self) -> File:
        return self._file

    @property
    def title(self) -> Optional[str]:
        return self._title or self._file.base()
