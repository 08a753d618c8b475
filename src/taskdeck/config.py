"""TaskDeckConfig -- 配置加载

从环境变量加载配置，非法值回退默认值并记录警告，不阻塞启动。

环境变量:
    TASKDECK_DATA_DIR: 数据目录（默认 data）
    TASKDECK_BACKEND: 存储后端 json / sqlite / memory（默认 json）
    TASKDECK_STORAGE_KEY: 槽位名（默认 tasks）
    TASKDECK_LOG_FORMAT: 日志格式 dev / json（默认 dev）
    TASKDECK_LOG_LEVEL: 日志级别（默认 INFO）
"""

import os
from pathlib import Path
from typing import Literal, get_args

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

BackendName = Literal["json", "sqlite", "memory"]
LogFormat = Literal["dev", "json"]


class TaskDeckConfig(BaseModel):
    """taskdeck 运行配置"""

    data_dir: Path = Field(default=Path("data"), description="数据目录")
    backend: BackendName = Field(default="json", description="存储后端")
    storage_key: str = Field(default="tasks", min_length=1, description="槽位名")
    log_format: LogFormat = Field(default="dev", description="日志格式")
    log_level: str = Field(default="INFO", description="日志级别")

    @property
    def sqlite_path(self) -> Path:
        """SQLite 后端的数据库文件路径"""
        return self.data_dir / "taskdeck.db"


def load_config() -> TaskDeckConfig:
    """从环境变量加载配置

    Returns:
        TaskDeckConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("TASKDECK_DATA_DIR"):
        kwargs["data_dir"] = Path(val)

    if val := os.environ.get("TASKDECK_BACKEND"):
        if val in get_args(BackendName):
            kwargs["backend"] = val
        else:
            log.warning(
                "invalid_backend_config",
                env_var="TASKDECK_BACKEND",
                value=val,
                fallback="json",
            )

    if val := os.environ.get("TASKDECK_STORAGE_KEY", "").strip():
        kwargs["storage_key"] = val

    if val := os.environ.get("TASKDECK_LOG_FORMAT"):
        if val in get_args(LogFormat):
            kwargs["log_format"] = val
        else:
            log.warning(
                "invalid_log_format_config",
                env_var="TASKDECK_LOG_FORMAT",
                value=val,
                fallback="dev",
            )

    if val := os.environ.get("TASKDECK_LOG_LEVEL"):
        kwargs["log_level"] = val.upper()

    return TaskDeckConfig(**kwargs)
