"""Document provider registry"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Optional

from brander.core.registry import ProviderRegistry, normalize_type
from brander.doc.provider import DocumentProvider


def builtin_providers() -> Iterable[type]:
    from brander.doc.providers.asset_feature import AssetFeatureDocumentProvider
    from brander.doc.providers.container import ContainerDocumentProvider
    from brander.doc.providers.hr import HRDocumentProvider
    from brander.doc.providers.root import RootDocumentProvider
    from brander.doc.providers.table import ColorTableDocumentProvider, TableDocumentProvider
    from brander.doc.providers.template import TemplateDocumentProvider
    from brander.doc.providers.toc import TOCDocumentProvider

    return (
        AssetFeatureDocumentProvider,
        ColorTableDocumentProvider,
        ContainerDocumentProvider,
        HRDocumentProvider,
        RootDocumentProvider,
        TableDocumentProvider,
        TemplateDocumentProvider,
        TOCDocumentProvider,
    )


class DocumentRegistry(ProviderRegistry[DocumentProvider]):
    base_class = DocumentProvider

    def key(self, provider: DocumentProvider) -> str:
        return normalize_type(provider.get_type())

    def default_builtins(self) -> Iterable[type]:
        return builtin_providers()

    def find_by_type(self, type_name: str) -> Optional[DocumentProvider]:
        """Provider for type_name (trimmed, case-insensitive) or None."""
        self._add_builtins()
        return self._providers.get(normalize_type(type_name))

    def remove_by_type(self, type_name: str) -> None:
        self._add_builtins()
        self._providers.pop(normalize_type(type_name), None)


@lru_cache(maxsize=None)
def get_document_registry() -> DocumentRegistry:
    """The process-wide document registry."""
    return DocumentRegistry()
