"""TaskStore -- 单槽位任务集合

整个集合以一个 JSON 数组保存在一个槽位里，每次变更都是完整的
读取 -> 修改 -> 整体写回。同一进程内的变更通过 RLock 串行化；
多个进程共享同一槽位时仍可能丢失更新。
"""

import threading
from collections.abc import Mapping
from typing import Any

import structlog

from ..models.task import Task, TaskPatch
from .codec import decode_tasks, encode_tasks
from .protocols import StorageBackend

log = structlog.get_logger()

DEFAULT_STORAGE_KEY = "tasks"


class TaskStore:
    """TaskRepository 的单槽位实现"""

    def __init__(self, backend: StorageBackend, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._backend = backend
        self._key = key
        self._lock = threading.RLock()

    @property
    def key(self) -> str:
        return self._key

    def _read(self) -> list[Task]:
        return decode_tasks(self._backend.get(self._key), key=self._key)

    def _write(self, tasks: list[Task]) -> None:
        self._backend.set(self._key, encode_tasks(tasks))

    def load_all(self) -> list[Task]:
        """按插入顺序返回全部任务；槽位不存在时返回空列表

        Raises:
            StorageCorruptionError: 槽位内容损坏
        """
        with self._lock:
            return self._read()

    def get_by_id(self, task_id: int) -> Task | None:
        """根据 id 查询任务"""
        for task in self.load_all():
            if task.id == task_id:
                return task
        return None

    def append(self, task: Task) -> None:
        """追加任务到末尾（不检查 id 重复）"""
        with self._lock:
            tasks = self._read()
            tasks.append(task)
            self._write(tasks)
        log.info("task_appended", task_id=task.id, total=len(tasks))

    def update_by_id(self, task_id: int, patch: TaskPatch | Mapping[str, Any]) -> bool:
        """合并部分字段到指定任务

        id 以及 patch 中未出现的字段保持不变。

        Args:
            task_id: 目标任务 id
            patch: TaskPatch 或等价的字段映射

        Returns:
            True 如果命中并写回，未命中时返回 False（no-op，不写入）
        """
        if not isinstance(patch, TaskPatch):
            patch = TaskPatch.model_validate(dict(patch))
        changes = patch.changes()

        with self._lock:
            tasks = self._read()
            for index, task in enumerate(tasks):
                if task.id == task_id:
                    tasks[index] = task.model_copy(update=changes)
                    break
            else:
                log.debug("task_update_noop", task_id=task_id)
                return False
            self._write(tasks)

        log.info("task_updated", task_id=task_id, fields=sorted(changes))
        return True

    def toggle_completed(self, task_id: int) -> Task | None:
        """切换完成状态，返回更新后的任务；未命中时返回 None"""
        with self._lock:
            tasks = self._read()
            for index, task in enumerate(tasks):
                if task.id == task_id:
                    updated = task.model_copy(update={"completed": not task.completed})
                    tasks[index] = updated
                    break
            else:
                log.debug("task_update_noop", task_id=task_id)
                return None
            self._write(tasks)

        log.info("task_toggled", task_id=task_id, completed=updated.completed)
        return updated

    def delete_by_id(self, task_id: int) -> bool:
        """删除指定任务，其余任务相对顺序不变

        Returns:
            True 如果删除了记录；未命中时返回 False（no-op，不写入）
        """
        with self._lock:
            tasks = self._read()
            remaining = [task for task in tasks if task.id != task_id]
            if len(remaining) == len(tasks):
                log.debug("task_delete_noop", task_id=task_id)
                return False
            self._write(remaining)

        log.info("task_deleted", task_id=task_id, total=len(remaining))
        return True

    def clear_all(self) -> None:
        """清空槽位（删除键，等价于空集合）"""
        with self._lock:
            self._backend.delete(self._key)
        log.info("tasks_cleared", key=self._key)
