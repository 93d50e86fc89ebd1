"""Table documents: static rows, and colors rendered through per-column templates"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from brander.core.markdown import table
from brander.doc.context import DocumentContext
from brander.doc.provider import DocumentProvider
from brander.errors import ConfigError
from brander.util.color import Color
from brander.util.mapping import trim

if TYPE_CHECKING:
    from brander.doc.registry import DocumentRegistry

log = logging.getLogger(__name__)


def _list_field(context: DocumentContext, name: str, required: bool = False) -> Optional[list]:
    value = context.get(name)
    if not value and required:
        raise ConfigError(f'"{name}" configuration is required')
    if value and not isinstance(value, list):
        raise ConfigError(f'"{name}" configuration must be a list')
    return value


class TableDocumentProvider(DocumentProvider):

    def get_type(self) -> str:
        return "table"

    def render(self, context: DocumentContext, registry: Optional[DocumentRegistry] = None) -> str:
        headers = _list_field(context, "headers") or []
        rows = _list_field(context, "rows", required=True)
        if not all(isinstance(row, list) for row in rows):
            raise ConfigError('"rows" configuration must only contain lists')
        log.debug("Rendering %d header(s) and %d row(s) for %s document", len(headers), len(rows), self.get_type())
        return table(rows, headers, context.config.line_separator)


class ColorTableDocumentProvider(DocumentProvider):
    """One row per entry of ``colors``; each of ``columns`` is a ``header`` and a ``content`` template.

    Column templates see the row's ``color`` (see ``brander.util.color.Color``).
    """

    def get_type(self) -> str:
        return "color-table"

    def render(self, context: DocumentContext, registry: Optional[DocumentRegistry] = None) -> str:
        config = context.config
        colors = [Color.parse(c) for c in _list_field(context, "colors", required=True)]
        columns = _list_field(context, "columns", required=True)
        for index, column in enumerate(columns):
            if not isinstance(column, dict) or not trim(column.get("header")):
                raise ConfigError(f'"columns[{index}]" configuration requires a "header"')

        log.debug("Rendering %d color(s) for %s document", len(colors), self.get_type())
        headers = [trim(column["header"]) for column in columns]
        rows = [[config.evaluate(column.get("content"), color=color) for column in columns] for color in colors]
        return table(rows, headers, config.line_separator)
