"""StorageBackend 实现 -- 内存 / JSON 文件 / SQLite

每个槽位保存一个完整字符串，写入总是整体覆盖。
"""

import contextlib
import os
import sqlite3
import tempfile
from pathlib import Path

import structlog

log = structlog.get_logger()


class MemoryBackend:
    """进程内字典实现，主要用于测试"""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._slots: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._slots.get(key)

    def set(self, key: str, value: str) -> None:
        self._slots[key] = value

    def delete(self, key: str) -> None:
        self._slots.pop(key, None)


class JsonFileBackend:
    """目录实现：每个槽位对应一个 <key>.json 文件

    写入先落临时文件再 os.replace，读取方不会看到半截内容。
    """

    def __init__(self, directory: str | Path) -> None:
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


_SLOTS_DDL = """
CREATE TABLE IF NOT EXISTS slots (
    key   TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""


class SqliteBackend:
    """SQLite 实现：slots(key, value) 表

    每次调用单独打开连接，不持有长连接。
    """

    def __init__(self, db_path: str | Path) -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.execute("PRAGMA busy_timeout = 5000;")
        return conn

    def _init_db(self) -> None:
        conn = self._connect()
        try:
            conn.execute("PRAGMA journal_mode = WAL;")
            conn.execute(_SLOTS_DDL)
            conn.commit()
        finally:
            conn.close()
        log.debug("sqlite_backend_ready", db_path=str(self._db_path))

    def get(self, key: str) -> str | None:
        conn = self._connect()
        try:
            row = conn.execute("SELECT value FROM slots WHERE key = ?", (key,)).fetchone()
            return None if row is None else row[0]
        finally:
            conn.close()

    def set(self, key: str, value: str) -> None:
        conn = self._connect()
        try:
            conn.execute(
                """
                INSERT INTO slots (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """,
                (key, value),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self, key: str) -> None:
        conn = self._connect()
        try:
            conn.execute("DELETE FROM slots WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def journal_mode(self) -> str:
        """当前 journal 模式（WAL 验证用）"""
        conn = self._connect()
        try:
            row = conn.execute("PRAGMA journal_mode;").fetchone()
            return "" if row is None else str(row[0]).lower()
        finally:
            conn.close()
