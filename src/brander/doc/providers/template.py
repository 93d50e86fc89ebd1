"""Template document: inline or file content evaluated with jinja2"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from brander.doc.context import DocumentContext
from brander.doc.provider import DocumentProvider
from brander.errors import ConfigError
from brander.util.fs import read_text
from brander.util.mapping import trim

if TYPE_CHECKING:
    from brander.doc.registry import DocumentRegistry

log = logging.getLogger(__name__)


class TemplateDocumentProvider(DocumentProvider):

    def get_type(self) -> str:
        return "template"

    def render(self, context: DocumentContext, registry: Optional[DocumentRegistry] = None) -> str:
        config = context.config
        log.info("Rendering %s document...", self.get_type())

        content = context.get("content")
        file = trim(context.get("file"))
        if content is None and not file:
            raise ConfigError('"content" or "file" configuration is required')
        if content is not None and file:
            raise ConfigError('"content" or "file" configurations cannot both be specified')

        if file:
            path = config.resolve(file)
            log.info("Reading %s document content from file: %s", self.get_type(), config.relative(path))
            content = read_text(path)
        elif isinstance(content, list):
            content = config.line_separator.join(str(line) for line in content)
        return config.evaluate(content)
