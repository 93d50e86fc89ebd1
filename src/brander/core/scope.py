"""Per-run index of the document and task contexts touched by a generation"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from brander.doc.context import DocumentContext
    from brander.task.context import TaskContext


class Scope:
    """Mutable state shared across the stages of one ``Brander.generate`` call.

    Scope only indexes contexts; they stay owned by their parser or tree.
    Adding (or removing) a document does the same to its whole subtree.
    """

    def __init__(self):
        self._attributes: dict[Any, Any] = {}
        self._docs: set[DocumentContext] = set()
        self._tasks: set[TaskContext] = set()

    def add_doc(self, doc: DocumentContext | None) -> None:
        if doc is not None:
            self._docs.add(doc)
            self.add_all_docs(doc.children)

    def add_all_docs(self, docs: Iterable[DocumentContext]) -> None:
        for doc in docs:
            self.add_doc(doc)

    def remove_doc(self, doc: DocumentContext | None) -> None:
        if doc is not None:
            self._docs.discard(doc)
            self.remove_all_docs(doc.children)

    def remove_all_docs(self, docs: Iterable[DocumentContext]) -> None:
        for doc in docs:
            self.remove_doc(doc)

    def add_task(self, task: TaskContext | None) -> None:
        if task is not None:
            self._tasks.add(task)

    def add_all_tasks(self, tasks: Iterable[TaskContext]) -> None:
        for task in tasks:
            self.add_task(task)

    def remove_task(self, task: TaskContext | None) -> None:
        if task is not None:
            self._tasks.discard(task)

    def remove_all_tasks(self, tasks: Iterable[TaskContext]) -> None:
        for task in tasks:
            self.remove_task(task)

    def clear(self) -> None:
        self._attributes.clear()
        self._docs.clear()
        self._tasks.clear()

    @property
    def attributes(self) -> dict[Any, Any]:
        return self._attributes

    @property
    def docs(self) -> frozenset[DocumentContext]:
        return frozenset(self._docs)

    @property
    def tasks(self) -> frozenset[TaskContext]:
        return frozenset(self._tasks)
