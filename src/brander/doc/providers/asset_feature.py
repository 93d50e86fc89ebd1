"""Asset feature document: previews and download links for the generated assets.

Example entry::

    type: asset-feature
    dir: logo/*
    preview: "*[!n].svg"
    files:
      - "*.png"
      - ["*.svg", "*.min.svg"]
    titles:
      logo-fill.svg: Logo (Inverted)

Every directory matching ``dir`` (relative to the assets directory, default the
assets directory itself) becomes a child section titled after its preview file.
Each item of ``files`` becomes a table row; a ``[main, optimized]`` pair links
the optimized file in its own column and leaves it out of the main matches.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from brander.core.file import File, derive_format
from brander.core.markdown import image, link, table
from brander.doc.context import DocumentContext
from brander.doc.provider import DocumentProvider
from brander.task.size import Size
from brander.util.fs import find_dirs, find_files
from brander.util.image import image_sizes
from brander.util.mapping import trim

if TYPE_CHECKING:
    from brander.config import Config
    from brander.doc.registry import DocumentRegistry

log = logging.getLogger(__name__)

COLUMNS = ("Type", "Sizes", "Optimized")
DEFAULT_SORT_BY = "{{ files[0].file.format }}"


@dataclass
class AssetFile:
    file:  File
    sizes: list[Size] = field(default_factory=list)


@dataclass
class AssetFileGroup:
    files:     list[AssetFile]
    optimized: Optional[File] = None


class AssetFeatureDocumentContext(DocumentContext):
    """One asset directory of an asset-feature document."""

    def __init__(
        self,
        type: str,
        dir: Path,
        file_groups: list[AssetFileGroup],
        preview_file: Optional[File],
        data: dict,
        parent: Optional[DocumentContext],
        config: Config,
        ):
        super().__init__(type, data, parent, config)
        self._dir = dir
        self._file_groups = list(file_groups)
        self._preview_file = preview_file

    @property
    def dir(self) -> Path:
        return self._dir

    @property
    def file_groups(self) -> list[AssetFileGroup]:
        return list(self._file_groups)

    @property
    def preview_file(self) -> Optional[File]:
        return self._preview_file

    @property
    def title(self) -> Optional[str]:
        if self._preview_file is None:
            return super().title
        base = self._preview_file.base()
        titles = self.get("titles") or {}
        return titles.get(base) or base


class AssetFeatureDocumentProvider(DocumentProvider):

    def get_type(self) -> str:
        return "asset-feature"

    def create_context(
        self,
        data: dict,
        parent: Optional[DocumentContext],
        config: Config,
        registry: Optional[DocumentRegistry] = None,
        ) -> DocumentContext:
        type_name = self.get_type()
        context = DocumentContext(type_name, data, parent, config)

        children = []
        for dir_path in self._find_dirs(data, config):
            preview = next(iter(self._find_files(dir_path, data.get("preview"), config)), None)
            groups = self._file_groups(dir_path, data, config)
            log.debug("Creating child context for %s document containing %d file group(s)", type_name, len(groups))
            children.append(AssetFeatureDocumentContext(type_name, dir_path, groups, preview, data, context, config))
        context.add_children(sorted(children, key=lambda c: c.title or ""))
        return context

    def render(self, context: DocumentContext, registry: Optional[DocumentRegistry] = None) -> str:
        log.info("Rendering %s document...", self.get_type())
        output: list[str] = []
        for child in context.children:
            if output:
                output.append("")
            output.extend(self._render_child(child))
        return context.config.line_separator.join(output)

    def _render_child(self, context: AssetFeatureDocumentContext) -> list[str]:
        config = context.config
        title = self.render_title(context)
        output = [title] if title else []

        preview = context.preview_file
        if preview is not None:
            log.debug("Rendering preview file for %s document: %s", self.get_type(), preview.relative)
            picture = image(preview.base(), config.asset_url(preview.relative))
            output.extend([link(picture, config.doc_url(config.relative(context.dir))), ""])

        rows = [self._render_row(group, config) for group in context.file_groups]
        output.append(table(rows, list(COLUMNS), config.line_separator))
        return output

    def _render_row(self, group: AssetFileGroup, config: Config) -> list[str]:
        sizes = " ".join(
            link("+".join(str(s) for s in info.sizes) or info.file.base(), config.asset_url(info.file.relative))
            for info in group.files
        )
        optimized = group.optimized
        optimized_link = link(optimized.base(), config.asset_url(optimized.relative)) if optimized else ""
        return [group.files[0].file.format.upper(), sizes, optimized_link]

    def _find_dirs(self, data: dict, config: Config) -> list[Path]:
        pattern = trim(data.get("dir"))
        if not pattern:
            return [config.asset_path()]
        return find_dirs(config.evaluate(pattern), config.asset_path())

    def _find_files(self, dir_path: Path, pattern: Any, config: Config) -> list[File]:
        pattern = trim(pattern)
        if not pattern:
            return []
        return [
            File(path.parent, path.name, derive_format(path.name), config, evaluated=True)
            for path in find_files(config.evaluate(pattern), dir_path)
        ]

    def _file_groups(self, dir_path: Path, data: dict, config: Config) -> list[AssetFileGroup]:
        descriptors = data.get("files") or []
        if not isinstance(descriptors, list):
            descriptors = [descriptors]

        groups = []
        for descriptor in descriptors:
            main, optimized = (list(descriptor) + [None])[:2] if isinstance(descriptor, list) else (descriptor, None)
            optimized_files = self._find_files(dir_path, optimized, config)
            excluded = {f.absolute for f in optimized_files}
            files = [f for f in self._find_files(dir_path, main, config) if f.absolute not in excluded]
            if not files:
                continue

            infos = [AssetFile(f, [Size(w, h) for w, h in image_sizes(f.absolute)]) for f in files]
            infos.sort(key=lambda info: (info.sizes[0].width, info.sizes[0].height) if info.sizes else (0, 0))
            groups.append(AssetFileGroup(infos, optimized_files[0] if optimized_files else None))

        sort_by, order = data.get("sortBy"), None
        if isinstance(sort_by, list):
            sort_by, order = (sort_by + [None])[:2]
        sort_by = trim(sort_by) or DEFAULT_SORT_BY
        descending = trim(order).lower() == "desc"
        return sorted(
            groups,
            key=lambda g: config.evaluate(sort_by, files=g.files, optimized=g.optimized),
            reverse=descending,
        )
