"""Generation steps: parse-then-run for tasks, then for documents"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from brander.doc.context import DocumentContext
from brander.doc.parser import DocumentContextParser, DocumentContextRunner
from brander.doc.registry import DocumentRegistry, get_document_registry
from brander.task.context import TaskContext
from brander.task.parser import TaskContextParser, TaskContextRunner
from brander.task.registry import TaskRegistry, get_task_registry

if TYPE_CHECKING:
    from brander.config import Config

log = logging.getLogger(__name__)


def run_tasks(config: Config, registry: TaskRegistry) -> list[TaskContext]:
    """Parse every task entry (indexing contexts into the scope), then execute them all."""
    scope = config.scope
    parser = TaskContextParser(config.tasks, config, on_parsed=lambda e: scope.add_all_tasks(e.contexts))
    contexts = parser.parse_remaining()
    TaskContextRunner(contexts, config, registry).run()
    return contexts


def run_docs(config: Config, registry: DocumentRegistry) -> list[DocumentContext]:
    """Parse every root document tree (indexing it into the scope), then render and write them."""
    scope = config.scope
    parser = DocumentContextParser(
        config.docs, config, "root", registry=registry,
        on_parsed=lambda e: scope.add_all_docs(e.contexts),
    )
    contexts = parser.parse_remaining()
    DocumentContextRunner(contexts, config, registry).run()
    return contexts


class Brander:
    """Generates the assets and documentation described by a Config."""

    def __init__(
        self,
        config: Config,
        document_registry: Optional[DocumentRegistry] = None,
        task_registry: Optional[TaskRegistry] = None,
        ):
        self._config = config
        self._document_registry = document_registry or get_document_registry()
        self._task_registry = task_registry or get_task_registry()

    def generate(self, skip_assets: bool = False, skip_docs: bool = False) -> None:
        """Run the task phase, then the document phase, against a freshly cleared scope.

        Every context of a phase is parsed before any of them runs.
        """
        self._config.scope.clear()
        if skip_assets and skip_docs:
            log.warning("Both skip_assets and skip_docs enabled. Nothing to do!")
            return

        if not skip_assets:
            log.info("Generating assets...")
            run_tasks(self._config, self._task_registry)
        if not skip_docs:
            log.info("Generating documentation...")
            run_docs(self._config, self._document_registry)
        log.info("Done!")

    @property
    def config(self) -> Config:
        return self._config
