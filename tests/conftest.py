"""全局 pytest 配置 -- 内存后端 + 固定时钟的 Store/Validator fixture"""

from collections.abc import Callable
from pathlib import Path

import pytest
from taskdeck.service import TaskService
from taskdeck.store import MemoryBackend, TaskStore
from taskdeck.validation import MonotonicIdGenerator, TaskValidator

FIXED_NOW_MS = 1_700_000_000_000


@pytest.fixture
def backend() -> MemoryBackend:
    """空的内存后端"""
    return MemoryBackend()


@pytest.fixture
def store(backend: MemoryBackend) -> TaskStore:
    """基于内存后端的 TaskStore"""
    return TaskStore(backend)


@pytest.fixture
def fixed_clock() -> Callable[[], int]:
    """固定在同一毫秒的时钟"""
    return lambda: FIXED_NOW_MS


@pytest.fixture
def validator(fixed_clock: Callable[[], int]) -> TaskValidator:
    """使用固定时钟的 TaskValidator"""
    return TaskValidator(id_factory=MonotonicIdGenerator(clock=fixed_clock))


@pytest.fixture
def service(store: TaskStore, validator: TaskValidator) -> TaskService:
    """默认总是确认的 TaskService"""
    return TaskService(store, validator)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """临时数据目录"""
    path = tmp_path / "data"
    path.mkdir(parents=True, exist_ok=True)
    return path
