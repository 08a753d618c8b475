"""枚举定义 -- 任务列表的筛选模式"""

from enum import StrEnum


class FilterMode(StrEnum):
    """列表筛选模式"""

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> "FilterMode":
        """解析筛选模式，无法识别的值一律回退为 ALL

        Args:
            raw: 原始模式字符串，可为 None

        Returns:
            FilterMode 实例
        """
        if not raw:
            return cls.ALL
        try:
            return cls(raw)
        except ValueError:
            return cls.ALL
