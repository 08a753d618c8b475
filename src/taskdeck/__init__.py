"""taskdeck -- 本地单用户任务清单

公共入口：TaskStore（持久化）、filter_tasks（筛选）、TaskValidator（校验）、
TaskService（视图层命令）。
"""

from .exceptions import StorageCorruptionError, TaskDeckError, TaskValidationError
from .filtering import filter_tasks
from .models import FilterMode, Task, TaskDraft, TaskPatch
from .service import TaskService
from .store import MemoryBackend, TaskStore
from .validation import TaskValidator

__all__ = [
    "FilterMode",
    "MemoryBackend",
    "StorageCorruptionError",
    "Task",
    "TaskDeckError",
    "TaskDraft",
    "TaskPatch",
    "TaskService",
    "TaskStore",
    "TaskValidationError",
    "TaskValidator",
    "filter_tasks",
]
