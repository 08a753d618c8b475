"""筛选引擎 -- (全部任务, 筛选模式) -> 待展示的有序子集

纯函数，不读写存储。
"""

from collections.abc import Iterable

from .models.enums import FilterMode
from .models.task import Task


def filter_tasks(tasks: Iterable[Task], mode: FilterMode | str | None = FilterMode.ALL) -> list[Task]:
    """按模式筛选任务，保持原有顺序

    Args:
        tasks: 全部任务（插入顺序）
        mode: all / pending / completed；无法识别的值按 all 处理

    Returns:
        新列表，不修改输入
    """
    mode = mode if isinstance(mode, FilterMode) else FilterMode.parse(mode)
    if mode is FilterMode.PENDING:
        return [task for task in tasks if not task.completed]
    if mode is FilterMode.COMPLETED:
        return [task for task in tasks if task.completed]
    return list(tasks)
