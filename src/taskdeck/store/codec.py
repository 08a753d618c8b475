"""槽位编解码 -- JSON 数组 <-> Task 列表

槽位内容是 Task 记录组成的 JSON 数组；槽位不存在等价于空数组。
任何无法解析的内容都以 StorageCorruptionError 抛出，不做静默丢弃。
"""

import json
from collections.abc import Iterable

from pydantic import ValidationError

from ..exceptions import StorageCorruptionError
from ..models.task import Task


def decode_tasks(raw: str | None, key: str = "tasks") -> list[Task]:
    """解析槽位内容

    Args:
        raw: 槽位原始字符串，None 表示槽位不存在
        key: 槽位名（仅用于错误信息）

    Returns:
        按插入顺序排列的 Task 列表

    Raises:
        StorageCorruptionError: 内容不是合法 JSON、不是数组或含非法记录
    """
    if raw is None:
        return []

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageCorruptionError(key, f"不是合法 JSON: {e.msg}") from e

    if not isinstance(data, list):
        raise StorageCorruptionError(key, f"顶层应为数组，实际为 {type(data).__name__}")

    tasks: list[Task] = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise StorageCorruptionError(key, f"第 {index} 条记录不是对象")
        # 简化格式（text 字段）不再支持，显式拒绝
        if "text" in record and "title" not in record:
            raise StorageCorruptionError(key, f"第 {index} 条记录为不支持的旧格式 (text)")
        try:
            tasks.append(Task.model_validate(record))
        except ValidationError as e:
            raise StorageCorruptionError(
                key, f"第 {index} 条记录不符合 Task 结构: {e.error_count()} 处错误"
            ) from e
    return tasks


def encode_tasks(tasks: Iterable[Task]) -> str:
    """序列化为槽位内容（camelCase 键，保留非 ASCII 字符）"""
    return json.dumps([task.to_record() for task in tasks], ensure_ascii=False)
