"""Store Protocol 接口定义

使用 Python Protocol 实现结构化子类型（duck typing），
测试中可直接注入内存实现。
"""

from typing import Protocol

from ..models.task import Task, TaskPatch


class StorageBackend(Protocol):
    """键值槽位存储接口"""

    def get(self, key: str) -> str | None:
        """读取槽位内容，槽位不存在时返回 None"""
        ...

    def set(self, key: str, value: str) -> None:
        """整体覆盖写入槽位"""
        ...

    def delete(self, key: str) -> None:
        """删除槽位，槽位不存在时不报错"""
        ...


class TaskRepository(Protocol):
    """Task 存储接口"""

    def load_all(self) -> list[Task]:
        """按插入顺序返回全部任务"""
        ...

    def get_by_id(self, task_id: int) -> Task | None:
        """根据 id 查询任务"""
        ...

    def append(self, task: Task) -> None:
        """追加任务到末尾"""
        ...

    def update_by_id(self, task_id: int, patch: TaskPatch) -> bool:
        """按 id 合并部分字段，未命中时为 no-op"""
        ...

    def toggle_completed(self, task_id: int) -> Task | None:
        """切换完成状态，未命中时返回 None"""
        ...

    def delete_by_id(self, task_id: int) -> bool:
        """按 id 删除，未命中时为 no-op"""
        ...

    def clear_all(self) -> None:
        """清空全部任务"""
        ...
