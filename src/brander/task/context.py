"""Task context: one unit of asset work resolved from a ``tasks`` entry"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from brander.core.context import Context
from brander.util.mapping import get_path

if TYPE_CHECKING:
    from brander.config import Config
    from brander.core.file import File
    from brander.task.task import TaskType


class TaskContext(Context):

    def __init__(
        self,
        type: TaskType,
        input_files: list[File],
        output_file: Optional[File],
        options: dict,
        data: dict,
        config: Config,
        ):
        super().__init__(type, data, config)
        self._input_files = list(input_files)
        self._output_file = output_file
        self._options = options or {}

    def __repr__(self) -> str:
        return f"TaskContext({self.type}, inputs={len(self._input_files)}, output={self._output_file!r})"

    def option(self, name: str, default: Any = None) -> Any:
        return get_path(self._options, name, default)

    @property
    def input_files(self) -> list[File]:
        return list(self._input_files)

    @property
    def output_file(self) -> Optional[File]:
        return self._output_file
