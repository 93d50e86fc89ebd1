"""Container document: groups nested sections under an optional heading"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from brander.doc.context import DocumentContext
from brander.doc.parser import build_children, render_children
from brander.doc.provider import DocumentProvider

if TYPE_CHECKING:
    from brander.config import Config
    from brander.doc.registry import DocumentRegistry

log = logging.getLogger(__name__)


class ContainerDocumentProvider(DocumentProvider):

    def get_type(self) -> str:
        return "container"

    def create_context(
        self,
        data: dict,
        parent: Optional[DocumentContext],
        config: Config,
        registry: Optional[DocumentRegistry] = None,
        ) -> DocumentContext:
        context = DocumentContext(self.get_type(), data, parent, config)
        return build_children(context, list(data.get("sections") or []), registry)

    def render(self, context: DocumentContext, registry: Optional[DocumentRegistry] = None) -> str:
        log.info("Rendering %s document...", self.get_type())
        return context.config.line_separator.join(render_children(context, registry))
