"""Document context parsing and rendering"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

from brander.core.context import ContextParser, ContextRunner, ParsedEvent
from brander.doc.context import DocumentContext
from brander.doc.registry import DocumentRegistry, get_document_registry
from brander.errors import ConfigError, ProviderNotFoundError
from brander.util.mapping import trim

if TYPE_CHECKING:
    from brander.config import Config

log = logging.getLogger(__name__)


class DocumentContextParser(ContextParser[DocumentContext]):
    """Parses document entries into contexts attached to ``parent``.

    Entries without a ``type`` fall back to ``default_type``. Providers that hold
    ``sections`` build their children with a nested parser of their own.
    """

    def __init__(
        self,
        data_set: Sequence,
        config: Config,
        default_type: Optional[str] = None,
        parent: Optional[DocumentContext] = None,
        registry: Optional[DocumentRegistry] = None,
        on_parsed: Optional[Callable[[ParsedEvent[DocumentContext]], None]] = None,
        on_reset: Optional[Callable[[], None]] = None,
        ):
        super().__init__(data_set, config, on_parsed=on_parsed, on_reset=on_reset)
        self._default_type = default_type
        self._parent = parent
        self._registry = registry or get_document_registry()

    def parse_data(self, data: Any, index: int) -> list[DocumentContext]:
        if not isinstance(data, dict):
            raise ConfigError(f"Document configuration at index {index} must be a mapping: {data!r}")
        type_name = trim(data.get("type")) or self._default_type
        if not type_name:
            raise ConfigError(f'"type" configuration is required (index {index})')
        provider = self._registry.find_by_type(type_name)
        if provider is None:
            raise ProviderNotFoundError(type_name)
        return [provider.create_context(data, self._parent, self.config, self._registry)]


class DocumentContextRunner(ContextRunner[DocumentContext]):
    """Renders each context as its heading followed by its body and a blank line."""

    def __init__(
        self,
        contexts: Sequence[DocumentContext],
        config: Config,
        registry: Optional[DocumentRegistry] = None,
        on_ran: Optional[Callable[[DocumentContext, Any], None]] = None,
        ):
        super().__init__(contexts, config, on_ran=on_ran)
        self._registry = registry or get_document_registry()

    def run_context(self, context: DocumentContext) -> str:
        if context.detached:
            log.debug("Skipping detached %s document", context.type)
            return ""
        provider = self._registry.find_by_type(context.type)
        if provider is None:
            raise ProviderNotFoundError(context.type)

        title = provider.render_title(context)
        output = [title] if title else []
        result = provider.render(context, self._registry)
        if result:
            output.extend([result, ""])
        return context.config.line_separator.join(output)


def render_children(context: DocumentContext, registry: Optional[DocumentRegistry] = None) -> list[str]:
    """Render the children of context in order, dropping empty results."""
    runner = DocumentContextRunner(context.children, context.config, registry)
    return [r for r in runner.run() if r]


def build_children(
    context: DocumentContext,
    sections: Sequence,
    registry: Optional[DocumentRegistry] = None,
    ) -> DocumentContext:
    """Parse sections as the children of context and attach them in order."""
    if sections:
        log.debug("Creating %d child context(s) for %s document", len(sections), context.type)
        parser = DocumentContextParser(sections, context.config, None, context, registry)
        context.add_children(parser.parse_remaining())
    return context
