"""StorageBackend 实现测试

测试内容：
1. 三种后端的 get/set/delete 语义一致
2. JSON 文件后端原子替换、不残留临时文件
3. SQLite 后端 WAL 模式与重新打开后数据完整
"""

from pathlib import Path

import pytest
from taskdeck.config import TaskDeckConfig
from taskdeck.store import (
    JsonFileBackend,
    MemoryBackend,
    SqliteBackend,
    create_backend,
    create_task_store,
)


@pytest.fixture(params=["memory", "json", "sqlite"])
def any_backend(request, data_dir: Path):
    """参数化：每种后端各跑一遍"""
    if request.param == "memory":
        return MemoryBackend()
    if request.param == "json":
        return JsonFileBackend(data_dir)
    return SqliteBackend(data_dir / "slots.db")


class TestBackendContract:
    """后端通用语义"""

    def test_missing_key_is_none(self, any_backend):
        """不存在的槽位返回 None"""
        assert any_backend.get("tasks") is None

    def test_set_then_get(self, any_backend):
        """写入后可读回"""
        any_backend.set("tasks", "[]")
        assert any_backend.get("tasks") == "[]"

    def test_overwrite(self, any_backend):
        """写入整体覆盖旧值"""
        any_backend.set("tasks", "[1]")
        any_backend.set("tasks", "[2]")
        assert any_backend.get("tasks") == "[2]"

    def test_delete(self, any_backend):
        """删除后返回 None"""
        any_backend.set("tasks", "[]")
        any_backend.delete("tasks")
        assert any_backend.get("tasks") is None

    def test_delete_missing_is_noop(self, any_backend):
        """删除不存在的槽位不报错"""
        any_backend.delete("tasks")
        assert any_backend.get("tasks") is None

    def test_keys_are_independent(self, any_backend):
        """不同槽位互不影响"""
        any_backend.set("a", "1")
        any_backend.set("b", "2")
        any_backend.delete("a")
        assert any_backend.get("b") == "2"

    def test_unicode_round_trip(self, any_backend):
        """非 ASCII 内容原样保存"""
        any_backend.set("tasks", '[{"title": "Biología"}]')
        assert any_backend.get("tasks") == '[{"title": "Biología"}]'


class TestJsonFileBackend:
    """JSON 文件后端"""

    def test_file_layout(self, data_dir: Path):
        """每个槽位对应 <key>.json"""
        backend = JsonFileBackend(data_dir)
        backend.set("tasks", "[]")
        assert (data_dir / "tasks.json").read_text(encoding="utf-8") == "[]"

    def test_no_temp_files_left(self, data_dir: Path):
        """写入后不残留临时文件"""
        backend = JsonFileBackend(data_dir)
        backend.set("tasks", "[]")
        backend.set("tasks", "[1]")
        assert sorted(p.name for p in data_dir.iterdir()) == ["tasks.json"]

    def test_creates_directory(self, tmp_path: Path):
        """目录不存在时自动创建"""
        JsonFileBackend(tmp_path / "nested" / "dir").set("tasks", "[]")
        assert (tmp_path / "nested" / "dir" / "tasks.json").exists()


class TestSqliteBackend:
    """SQLite 后端"""

    def test_wal_mode(self, data_dir: Path):
        """启用 WAL 模式"""
        backend = SqliteBackend(data_dir / "slots.db")
        assert backend.journal_mode() == "wal"

    def test_survives_reopen(self, data_dir: Path):
        """重新打开数据库后数据完整"""
        db_path = data_dir / "slots.db"
        SqliteBackend(db_path).set("tasks", "[1]")
        assert SqliteBackend(db_path).get("tasks") == "[1]"


class TestFactory:
    """create_backend / create_task_store"""

    @pytest.mark.parametrize(
        "name,cls",
        [("memory", MemoryBackend), ("json", JsonFileBackend), ("sqlite", SqliteBackend)],
    )
    def test_create_backend(self, data_dir: Path, name: str, cls):
        """按配置选择后端"""
        config = TaskDeckConfig(data_dir=data_dir, backend=name)
        assert isinstance(create_backend(config), cls)

    def test_sqlite_path_under_data_dir(self, data_dir: Path):
        """SQLite 文件位于数据目录下"""
        config = TaskDeckConfig(data_dir=data_dir, backend="sqlite")
        create_backend(config)
        assert (data_dir / "taskdeck.db").exists()

    def test_create_task_store_uses_key(self, data_dir: Path):
        """TaskStore 使用配置的槽位名"""
        config = TaskDeckConfig(data_dir=data_dir, backend="json", storage_key="homework")
        store = create_task_store(config)
        assert store.key == "homework"
        store.clear_all()
        assert store.load_all() == []
