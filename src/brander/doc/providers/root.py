"""Root document: one Markdown file per entry of the ``docs`` configuration"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from brander.core.file import File, derive_format
from brander.core.markdown import horizontal_rule, link
from brander.doc.context import DocumentContext, RootDocumentContext
from brander.doc.parser import build_children, render_children
from brander.doc.provider import DocumentProvider
from brander.errors import ConfigError
from brander.util.fs import write_text
from brander.util.mapping import trim

if TYPE_CHECKING:
    from brander.config import Config
    from brander.doc.registry import DocumentRegistry

log = logging.getLogger(__name__)

MARKDOWN_FORMATS = ("md", "markdown")
PROJECT_URL = "https://github.com/neocotic/brander"


def default_footer(config: Config) -> Optional[dict]:
    """Attribution block appended to every root document unless disabled."""
    if config.option("docs.disableDefaultFooter"):
        return None
    return {
        "type": "template",
        "content": f"{horizontal_rule()}{{{{ eol * 2 }}}}Generated by {link('Brander', PROJECT_URL)}",
    }


class RootDocumentProvider(DocumentProvider):

    def get_type(self) -> str:
        return "root"

    def create_context(
        self,
        data: dict,
        parent: Optional[DocumentContext],
        config: Config,
        registry: Optional[DocumentRegistry] = None,
        ) -> RootDocumentContext:
        type_name = self.get_type()
        if parent is not None:
            raise ConfigError(f'"{type_name}" document cannot have parent')

        file_name = trim(data.get("doc"))
        if not file_name:
            raise ConfigError('"doc" configuration is required')
        fmt = derive_format(file_name, data.get("format"))
        if fmt not in MARKDOWN_FORMATS:
            raise ConfigError(f'"format" configuration unsupported: {fmt}')
        dir_path = config.resolve(trim(data.get("dir")) or config.docs_dir)

        log.debug("Applying %r format to %s document: %s", fmt, type_name, file_name)
        file = File(dir_path, file_name, fmt, config).evaluate()
        context = RootDocumentContext(type_name, file, data, config)

        sections = list(data.get("sections") or [])
        header = config.option("docs.header")
        footer = config.option("docs.footer") or default_footer(config)
        if header:
            sections.insert(0, header)
        if footer:
            sections.append(footer)
        return build_children(context, sections, registry)

    def render_title(self, context: DocumentContext) -> str:
        # the heading is part of the file content returned by render()
        return ""

    def _render_heading(self, context: RootDocumentContext) -> str:
        # only an explicitly configured title becomes the file heading
        title = trim(context.get("title"))
        return f"# {title}{context.config.line_separator}" if title else ""

    def render(self, context: RootDocumentContext, registry: Optional[DocumentRegistry] = None) -> str:
        config, file = context.config, context.file
        log.info("Rendering %s document file: %s", self.get_type(), file.relative)

        output = []
        heading = self._render_heading(context)
        if heading:
            output.append(heading)
        output.extend(render_children(context, registry))
        content = config.line_separator.join(output)

        log.info("Writing rendered output to %s document file: %s", self.get_type(), file.relative)
        write_text(file.absolute, content)
        return content
