"""TaskValidator -- 任务入库前的字段校验

必填字段（title、subject、due_date）去除首尾空白后不能为空；
due_date 只检查是否存在，不校验格式。校验失败不产生任何副作用。
"""

import threading
import time
from collections.abc import Callable, Mapping
from typing import Any

import structlog

from .exceptions import TaskValidationError
from .models.task import Task, TaskDraft, TaskPatch

log = structlog.get_logger()

REQUIRED_FIELDS: tuple[str, ...] = ("title", "subject", "due_date")


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class MonotonicIdGenerator:
    """毫秒时间戳 id，同一毫秒内多次创建时顺延 +1

    保持与既有数据一致的 id 形态，同时保证同一进程内不重复。
    """

    def __init__(self, clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            self._last = max(self._clock(), self._last + 1)
            return self._last


def _as_draft(fields: TaskDraft | Mapping[str, Any]) -> TaskDraft:
    if isinstance(fields, TaskDraft):
        return fields
    return TaskDraft.model_validate(dict(fields))


def _cleaned(draft: TaskDraft) -> dict[str, str]:
    """trim 所有字符串字段（None 视为空）并按顺序检查必填项"""
    values = {
        "title": (draft.title or "").strip(),
        "subject": (draft.subject or "").strip(),
        "due_date": (draft.due_date or "").strip(),
        "description": (draft.description or "").strip(),
    }
    for name in REQUIRED_FIELDS:
        if not values[name]:
            log.debug("task_validation_failed", field=name)
            raise TaskValidationError(name)
    return values


class TaskValidator:
    """创建/编辑校验"""

    def __init__(self, id_factory: Callable[[], int] | None = None) -> None:
        self._next_id = id_factory or MonotonicIdGenerator()

    def validate_for_create(self, fields: TaskDraft | Mapping[str, Any]) -> Task:
        """校验创建表单并生成完整 Task

        Args:
            fields: TaskDraft 或表单字段映射（title 也可写作 text，dueDate 也可写作 due_date）

        Returns:
            可直接 append 的 Task（新 id，completed=False）

        Raises:
            TaskValidationError: 必填字段为空
        """
        values = _cleaned(_as_draft(fields))
        return Task(id=self._next_id(), completed=False, **values)

    def validate_for_update(self, fields: TaskDraft | Mapping[str, Any]) -> TaskPatch:
        """校验编辑表单，只返回可编辑字段（不含 id / completed）

        Raises:
            TaskValidationError: 必填字段为空，调用方不得继续 update_by_id
        """
        values = _cleaned(_as_draft(fields))
        return TaskPatch(**values)
