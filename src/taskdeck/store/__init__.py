"""taskdeck Store -- 槽位持久化实现

提供工厂函数按配置创建存储后端与 TaskStore。
"""

import structlog

from ..config import TaskDeckConfig
from .backends import JsonFileBackend, MemoryBackend, SqliteBackend
from .codec import decode_tasks, encode_tasks
from .protocols import StorageBackend, TaskRepository
from .task_store import DEFAULT_STORAGE_KEY, TaskStore

log = structlog.get_logger()


def create_backend(config: TaskDeckConfig) -> StorageBackend:
    """按配置创建存储后端

    Args:
        config: 运行配置

    Returns:
        StorageBackend 实例
    """
    if config.backend == "memory":
        return MemoryBackend()
    if config.backend == "sqlite":
        return SqliteBackend(config.sqlite_path)
    return JsonFileBackend(config.data_dir)


def create_task_store(config: TaskDeckConfig) -> TaskStore:
    """创建 TaskStore（每个进程构造一次）"""
    backend = create_backend(config)
    log.info("task_store_ready", backend=config.backend, key=config.storage_key)
    return TaskStore(backend, key=config.storage_key)


__all__ = [
    "DEFAULT_STORAGE_KEY",
    "StorageBackend",
    "TaskRepository",
    "TaskStore",
    "MemoryBackend",
    "JsonFileBackend",
    "SqliteBackend",
    "create_backend",
    "create_task_store",
    "decode_tasks",
    "encode_tasks",
]
