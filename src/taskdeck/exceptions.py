"""taskdeck 异常体系

校验失败可由调用方就地恢复；存储损坏不可恢复，必须向上传播。
"""


class TaskDeckError(Exception):
    """taskdeck 基础异常"""

    def __init__(self, message: str, recoverable: bool = True) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 调用方是否可以就地恢复（例如提示用户重新输入）
        """
        super().__init__(message)
        self.recoverable = recoverable


class TaskValidationError(TaskDeckError):
    """必填字段去除空白后为空

    不清空表单，用户修改后可重试。
    """

    def __init__(self, field: str, message: str | None = None) -> None:
        """
        Args:
            field: 未通过校验的字段名（title / subject / due_date）
            message: 可选的自定义描述
        """
        super().__init__(message or f"字段不能为空: {field}", recoverable=True)
        self.field = field


class StorageCorruptionError(TaskDeckError):
    """持久化槽位内容不是合法的任务数组

    不能当作空集合处理，否则会掩盖数据丢失。
    """

    def __init__(self, key: str, reason: str) -> None:
        """
        Args:
            key: 损坏的槽位名
            reason: 损坏原因
        """
        super().__init__(f"存储槽位已损坏: {key} -- {reason}", recoverable=False)
        self.key = key
        self.reason = reason
