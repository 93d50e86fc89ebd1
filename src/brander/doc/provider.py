"""Base class for document providers"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from brander.doc.context import DocumentContext

if TYPE_CHECKING:
    from brander.config import Config
    from brander.doc.registry import DocumentRegistry

log = logging.getLogger(__name__)


class DocumentProvider(ABC):
    """Builds and renders the document contexts of one type."""

    @abstractmethod
    def get_type(self) -> str:
        """Type string this provider is registered under."""

    @abstractmethod
    def render(self, context: DocumentContext, registry: Optional[DocumentRegistry] = None) -> Optional[str]:
        """Render the body of context as Markdown (None or '' renders nothing)."""

    def create_context(
        self,
        data: dict,
        parent: Optional[DocumentContext],
        config: Config,
        registry: Optional[DocumentRegistry] = None,
        ) -> DocumentContext:
        log.debug("Creating context for %s document...", self.get_type())
        return DocumentContext(self.get_type(), data, parent, config)

    def render_title(self, context: DocumentContext) -> str:
        """Markdown heading for context, one level deeper than its parent ('' when untitled)."""
        title = context.title
        if not title:
            return ""
        return f"{'#' * (context.depth + 1)} {title}{context.config.line_separator}"

    def __repr__(self) -> str:
        return f"DocumentProvider({self.get_type()})"
