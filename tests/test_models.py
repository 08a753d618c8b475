"""Domain Models 单元测试

测试内容：
1. FilterMode 解析与回退
2. Task 持久化键名与严格类型
3. TaskDraft / TaskPatch 别名与字段过滤
"""

import pytest
from pydantic import ValidationError
from taskdeck.models import FilterMode, Task, TaskDraft, TaskPatch


class TestFilterMode:
    """FilterMode 枚举测试"""

    def test_values(self):
        """枚举值正确"""
        assert FilterMode.ALL == "all"
        assert FilterMode.PENDING == "pending"
        assert FilterMode.COMPLETED == "completed"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("all", FilterMode.ALL),
            ("pending", FilterMode.PENDING),
            ("completed", FilterMode.COMPLETED),
            (" Pending ", FilterMode.ALL),
            ("PENDING", FilterMode.ALL),
            ("Completed", FilterMode.ALL),
            ("archived", FilterMode.ALL),
            ("", FilterMode.ALL),
            (None, FilterMode.ALL),
        ],
    )
    def test_parse(self, raw, expected):
        """无法识别的模式回退为 ALL"""
        assert FilterMode.parse(raw) is expected


class TestTaskModel:
    """Task 模型测试"""

    def test_defaults(self):
        """description 默认为空，completed 默认为 False"""
        task = Task(id=1, title="Read Ch.1", subject="Bio", due_date="2024-05-01")
        assert task.description == ""
        assert task.completed is False

    def test_record_uses_camel_case(self):
        """持久化记录使用 dueDate 键"""
        task = Task(id=1, title="Read Ch.1", subject="Bio", due_date="2024-05-01")
        assert task.to_record() == {
            "id": 1,
            "title": "Read Ch.1",
            "subject": "Bio",
            "dueDate": "2024-05-01",
            "description": "",
            "completed": False,
        }

    def test_validate_from_record(self):
        """可以从持久化记录还原"""
        task = Task.model_validate(
            {
                "id": 1700000000000,
                "title": "Essay",
                "subject": "History",
                "dueDate": "2024-06-01",
                "description": "2 pages",
                "completed": True,
            }
        )
        assert task.due_date == "2024-06-01"
        assert task.completed is True

    def test_id_must_be_int(self):
        """id 不接受字符串"""
        with pytest.raises(ValidationError):
            Task.model_validate(
                {"id": "1", "title": "t", "subject": "s", "dueDate": "2024-01-01"}
            )

    def test_completed_must_be_bool(self):
        """completed 不接受字符串"""
        with pytest.raises(ValidationError):
            Task.model_validate(
                {
                    "id": 1,
                    "title": "t",
                    "subject": "s",
                    "dueDate": "2024-01-01",
                    "completed": "yes",
                }
            )

    def test_unknown_fields_rejected(self):
        """未知字段被拒绝"""
        with pytest.raises(ValidationError):
            Task.model_validate(
                {"id": 1, "title": "t", "subject": "s", "dueDate": "2024-01-01", "x": 1}
            )


class TestTaskDraft:
    """TaskDraft 表单输入测试"""

    def test_text_alias(self):
        """title 接受 text 字段名"""
        assert TaskDraft.model_validate({"text": "Buy milk"}).title == "Buy milk"

    def test_due_date_aliases(self):
        """due_date 接受 dueDate 与 due_date"""
        assert TaskDraft.model_validate({"dueDate": "2024-05-01"}).due_date == "2024-05-01"
        assert TaskDraft.model_validate({"due_date": "2024-05-02"}).due_date == "2024-05-02"

    def test_missing_fields_default_empty(self):
        """缺失字段默认为空字符串"""
        draft = TaskDraft.model_validate({})
        assert draft.title == draft.subject == draft.due_date == draft.description == ""

    def test_none_accepted(self):
        """显式 None 不触发 pydantic 校验错误，交由 TaskValidator 判断"""
        draft = TaskDraft.model_validate({"title": None, "dueDate": None})
        assert draft.title is None
        assert draft.due_date is None


class TestTaskPatch:
    """TaskPatch 部分更新测试"""

    def test_only_set_fields(self):
        """只返回显式设置的字段"""
        assert TaskPatch.model_validate({"completed": True}).changes() == {"completed": True}

    def test_id_ignored(self):
        """id 不属于可更新字段"""
        patch = TaskPatch.model_validate({"id": 99, "title": "new"})
        assert patch.changes() == {"title": "new"}

    def test_text_maps_to_title(self):
        """text 映射为 title"""
        assert TaskPatch.model_validate({"text": "new"}).changes() == {"title": "new"}

    def test_none_values_dropped(self):
        """显式 None 不会覆盖原值"""
        assert TaskPatch(title=None, subject="Math").changes() == {"subject": "Math"}
