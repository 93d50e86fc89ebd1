"""Table of contents document.

Rows are numbered Markdown list items, indented four spaces per rendering level,
linking to the generated file of each root document. Nodes shallower than
``minDepth`` are flattened away (their children render at the same level) and
nodes deeper than ``maxDepth`` are pruned with their subtree. Repeated titles
within a single render get ``-2``, ``-3``, ... anchor suffixes.
"""

from __future__ import annotations

import itertools
import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Iterator, Optional, Sequence

from brander.core.markdown import link
from brander.doc.context import DocumentContext, RootDocumentContext
from brander.doc.provider import DocumentProvider
from brander.errors import ConfigError
from brander.util.mapping import trim

if TYPE_CHECKING:
    from brander.doc.registry import DocumentRegistry

log = logging.getLogger(__name__)

UNBOUNDED = -1


def _int_option(context: DocumentContext, name: str, default: int) -> int:
    value = context.get(name, default)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f'"{name}" configuration must be an integer: {value!r}') from e


class TOCDocumentProvider(DocumentProvider):

    def get_type(self) -> str:
        return "toc"

    def render(self, context: DocumentContext, registry: Optional[DocumentRegistry] = None) -> str:
        log.info("Rendering %s document...", self.get_type())
        min_depth = _int_option(context, "minDepth", 1)
        max_depth = _int_option(context, "maxDepth", UNBOUNDED)

        title_map: dict[str, int] = {}
        counter = itertools.count(1)
        output: list[str] = []
        for root in self._find_roots(context):
            log.debug("Diving into %s document: %s", root.type, root.file.name)
            output.extend(self._render_at_depth(root, [root], 0, counter, min_depth, max_depth, title_map))
        return context.config.line_separator.join(output)

    def _find_roots(self, context: DocumentContext) -> list[RootDocumentContext]:
        docs = context.get("docs")
        if not docs:
            root = context.root
            return [root] if root is not None else []
        if isinstance(docs, str):
            docs = [docs]

        roots: dict[str, list[RootDocumentContext]] = defaultdict(list)
        for doc in context.config.scope.docs:
            if doc.is_root():
                roots[doc.file.base()].append(doc)
        log.debug("%d root document name(s) found in scope", len(roots))

        found = []
        for index, name in enumerate(docs):
            name = trim(name)
            matches = roots.get(name)
            if not matches:
                raise ConfigError(f"Unable to find root document[{index}]: {name}")
            if len(matches) > 1:
                paths = ", ".join(sorted(m.file.relative for m in matches))
                raise ConfigError(f"Root document[{index}] is ambiguous: {name} matches {paths}")
            found.append(matches[0])
        return found

    def _render_at_depth(
        self,
        root: RootDocumentContext,
        contexts: Sequence[DocumentContext],
        depth: int,
        counter: Iterator[int],
        min_depth: int,
        max_depth: int,
        title_map: dict[str, int],
        ) -> list[str]:
        output = []
        for context in contexts:
            if context.depth < min_depth:
                output.extend(self._render_at_depth(
                    root, context.children, depth, counter, min_depth, max_depth, title_map))
            elif max_depth == UNBOUNDED or context.depth <= max_depth:
                if context.title:
                    output.append(self._render_row(root, context, depth, next(counter), title_map))
                else:
                    log.debug("%s context has no title so excluding from %s", context.type, self.get_type())
                output.extend(self._render_at_depth(
                    root, context.children, depth + 1, itertools.count(1), min_depth, max_depth, title_map))
            else:
                log.debug("Depth of %s context too high so ignoring: %d", context.type, context.depth)
        return output

    def _render_row(
        self,
        root: RootDocumentContext,
        context: DocumentContext,
        depth: int,
        index: int,
        title_map: dict[str, int],
        ) -> str:
        title = context.title
        fragment = None
        if not context.is_root():
            count = title_map.get(title, 0) + 1
            title_map[title] = count
            fragment = f"{title}-{count}" if count > 1 else title
        url = context.config.doc_url(root.file.relative, fragment)
        return f"{' ' * (depth * 4)}{index}. {link(title, url)}"
