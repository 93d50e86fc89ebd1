"""Horizontal rule document"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from brander.core.markdown import horizontal_rule
from brander.doc.context import DocumentContext
from brander.doc.provider import DocumentProvider

if TYPE_CHECKING:
    from brander.doc.registry import DocumentRegistry


class HRDocumentProvider(DocumentProvider):

    def get_type(self) -> str:
        return "hr"

    def render(self, context: DocumentContext, registry: Optional[DocumentRegistry] = None) -> str:
        return horizontal_rule()
