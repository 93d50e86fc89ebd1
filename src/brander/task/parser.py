"""Task context parsing and execution"""

from __future__ import annotations

import copy
import logging
from collections import defaultdict
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

from brander.core.context import ContextParser, ContextRunner
from brander.core.file import File, derive_format
from brander.errors import ConfigError, ProviderNotFoundError
from brander.task.context import TaskContext
from brander.task.registry import TaskRegistry, get_task_registry
from brander.task.size import Size
from brander.task.task import Task, TaskType
from brander.util.fs import find_files
from brander.util.mapping import trim

if TYPE_CHECKING:
    from brander.config import Config

log = logging.getLogger(__name__)


class TaskContextParser(ContextParser[TaskContext]):
    """Resolves each ``tasks`` entry into one context per input group.

    Input globs are expanded at parse time relative to the assets directory. An
    entry whose globs match nothing produces no contexts.
    """

    def parse_data(self, data: Any, index: int) -> list[TaskContext]:
        if not isinstance(data, dict):
            raise ConfigError(f"task[{index}] configuration must be a mapping: {data!r}")
        type_name = trim(data.get("type") or data.get("task"))
        if not type_name:
            raise ConfigError(f'"type" configuration is required for task[{index}]')
        task_type = TaskType.value_of(type_name)

        output_file = self._build_output_file(data)
        if output_file is None and task_type.output_required:
            raise ConfigError(f'"output" configuration is required for "{task_type}" tasks (task[{index}])')

        input_files = self._build_input_files(data)
        if not input_files:
            log.debug("No input files found for task[%d]", index)
            return []

        options = self._parse_options(data)
        contexts = []
        for group, files in self._group(input_files, options.get("groupBy")).items():
            _validate_single_format(group, files)
            contexts.append(TaskContext(task_type, files, output_file, copy.deepcopy(options), data, self.config))
        log.debug("Created %d %r context(s) for task[%d]", len(contexts), str(task_type), index)
        return contexts

    def _build_input_files(self, data: dict) -> list[File]:
        config = self.config
        entry = data.get("input")
        if not entry:
            raise ConfigError('"input" configuration is required')
        if isinstance(entry, dict):
            dir_name, patterns, fmt = entry.get("dir"), entry.get("files"), entry.get("format")
            if not patterns:
                raise ConfigError('"input.files" configuration is required')
        else:
            dir_name, patterns, fmt = None, entry, None
        if isinstance(patterns, str):
            patterns = [patterns]
        if not isinstance(patterns, list):
            raise ConfigError(f'"input" files can only be a string or a list: {patterns!r}')

        base_dir = config.asset_path(config.evaluate(trim(dir_name)))
        files = []
        for pattern in patterns:
            if not isinstance(pattern, str):
                raise ConfigError(f'"input" files can only contain strings: {pattern!r}')
            pattern = trim(pattern)
            if not pattern:
                raise ConfigError('"input" files cannot contain empty patterns')
            for path in find_files(config.evaluate(pattern), base_dir):
                files.append(File(path.parent, path.name, derive_format(path.name, fmt), config, evaluated=True))
        return files

    def _build_output_file(self, data: dict) -> Optional[File]:
        entry = data.get("output")
        if not entry:
            return None
        if isinstance(entry, str):
            path = PurePosixPath(trim(entry))
            dir_name = str(path.parent) if str(path.parent) != "." else None
            name, fmt = path.name, None
        elif isinstance(entry, dict):
            dir_name, name, fmt = trim(entry.get("dir")) or None, entry.get("files"), entry.get("format")
            if name is not None and not isinstance(name, str):
                raise ConfigError(f'"output.files" configuration can only be a string: {name!r}')
        else:
            raise ConfigError(f'"output" configuration can only be a string or a mapping: {entry!r}')

        name = trim(name) or None
        fmt = derive_format(name, fmt)
        if not (dir_name or name or fmt):
            return None
        dir_path = self.config.asset_path(dir_name) if dir_name else None
        return File(dir_path, name, fmt, self.config)

    def _parse_options(self, data: dict) -> dict:
        options = copy.deepcopy(data.get("options") or {})
        if isinstance(options.get("sizes"), list):
            options["sizes"] = [Size.parse(s) for s in options["sizes"]]
        return options

    def _group(self, files: list[File], group_by: Optional[str]) -> dict[Optional[str], list[File]]:
        if not group_by:
            return {None: files}
        groups: dict[Optional[str], list[File]] = defaultdict(list)
        for file in files:
            groups[self.config.evaluate(group_by, file=file)].append(file)
        return dict(groups)


def _validate_single_format(group: Optional[str], files: list[File]) -> None:
    formats = {f.format for f in files}
    if len(formats) != 1:
        message = '"input" files must map to a single format '
        if group is not None:
            message += f'within resolved group: "{group}"'
        else:
            message += '- consider specifying the "options.groupBy" configuration'
        raise ConfigError(message)


class TaskContextRunner(ContextRunner[TaskContext]):
    """Executes task contexts with the first registered task that supports each one."""

    def __init__(
        self,
        contexts: Sequence[TaskContext],
        config: Config,
        registry: Optional[TaskRegistry] = None,
        on_ran: Optional[Callable[[TaskContext, Any], None]] = None,
        ):
        super().__init__(contexts, config, on_ran=on_ran)
        self._registry = registry or get_task_registry()

    def run(self) -> list:
        tasks = self._registry.get_all()
        try:
            for task in tasks:
                task.before_all(self.config)
            results = super().run()
        except Exception:
            self._after_all(tasks, failed=True)
            raise
        self._after_all(tasks, failed=False)
        return results

    def run_context(self, context: TaskContext) -> Any:
        tasks = self._registry.find_by_type(context.type)
        if not tasks:
            raise ProviderNotFoundError(str(context.type), kind="task")
        task = next((t for t in tasks if t.supports(context)), None)
        if task is None:
            log.warning("No %r task supports %r so skipping it", str(context.type), context)
            return None

        log.debug("Executing task: %s", task)
        task.before(context)
        try:
            return task.execute(context)
        finally:
            task.after(context)

    def _after_all(self, tasks: list[Task], failed: bool) -> None:
        """Give every task its after_all hook; report failures without hiding a pending error."""
        first_error: Optional[Exception] = None
        for task in tasks:
            try:
                task.after_all(self.config)
            except Exception as e:
                if failed:
                    log.warning("after_all failed for %s: %s", task, e)
                elif first_error is None:
                    first_error = e
        if first_error is not None:
            raise first_error
