"""taskdeck Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import FilterMode
from .task import Task, TaskDraft, TaskPatch

__all__ = [
    # 枚举
    "FilterMode",
    # Task
    "Task",
    "TaskDraft",
    "TaskPatch",
]
