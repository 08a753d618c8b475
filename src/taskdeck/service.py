"""TaskService -- 视图层调用的命令函数

流程：视图命令 -> TaskValidator -> TaskStore 变更 -> filter_tasks -> 视图渲染。
核心层不产生任何界面副作用；删除类操作的确认由注入的 Confirmer 决定。
"""

from collections.abc import Callable, Mapping
from typing import Any

import structlog

from .filtering import filter_tasks
from .models import FilterMode, Task, TaskDraft
from .store.protocols import TaskRepository
from .validation import TaskValidator

log = structlog.get_logger()

Confirmer = Callable[[str], bool]

DELETE_PROMPT = "确定要删除这个任务吗？"
CLEAR_ALL_PROMPT = "确定要删除全部任务吗？此操作无法撤销。"

EMPTY_MESSAGES: dict[FilterMode, str] = {
    FilterMode.ALL: "暂无任务",
    FilterMode.PENDING: "暂无待完成任务",
    FilterMode.COMPLETED: "暂无已完成任务",
}


def always_confirm(prompt: str) -> bool:
    """默认确认策略：总是同意"""
    return True


class TaskService:
    """任务业务服务"""

    def __init__(
        self,
        store: TaskRepository,
        validator: TaskValidator | None = None,
        confirm: Confirmer = always_confirm,
    ) -> None:
        self._store = store
        self._validator = validator or TaskValidator()
        self._confirm = confirm

    @property
    def store(self) -> TaskRepository:
        return self._store

    def create_task(self, fields: TaskDraft | Mapping[str, Any]) -> Task:
        """校验并追加新任务

        Raises:
            TaskValidationError: 必填字段为空，存储不变
        """
        task = self._validator.validate_for_create(fields)
        self._store.append(task)
        return task

    def edit_task(self, task_id: int, fields: TaskDraft | Mapping[str, Any]) -> Task | None:
        """校验并更新可编辑字段，保留 id 与 completed

        Returns:
            更新后的任务；任务不存在时返回 None

        Raises:
            TaskValidationError: 必填字段为空，存储不变
        """
        patch = self._validator.validate_for_update(fields)
        if not self._store.update_by_id(task_id, patch):
            return None
        return self._store.get_by_id(task_id)

    def toggle_task(self, task_id: int) -> Task | None:
        """切换完成状态（pending <-> completed）"""
        return self._store.toggle_completed(task_id)

    def delete_task(self, task_id: int) -> bool:
        """删除单个任务（需确认）

        Returns:
            True 如果已删除；用户取消或任务不存在时返回 False
        """
        if not self._confirm(DELETE_PROMPT):
            log.info("task_delete_declined", task_id=task_id)
            return False
        return self._store.delete_by_id(task_id)

    def clear_all(self) -> bool:
        """删除全部任务（需确认）"""
        if not self._confirm(CLEAR_ALL_PROMPT):
            log.info("tasks_clear_declined")
            return False
        self._store.clear_all()
        return True

    def list_tasks(self, mode: FilterMode | str | None = FilterMode.ALL) -> list[Task]:
        """读取全部任务并按模式筛选"""
        return filter_tasks(self._store.load_all(), mode)

    @staticmethod
    def empty_message(mode: FilterMode | str | None = FilterMode.ALL) -> str:
        """筛选结果为空时的提示文案"""
        return EMPTY_MESSAGES[FilterMode.parse(mode)]
