"""Task Domain Model

持久化格式使用 camelCase 键（dueDate），Python 侧使用 snake_case 属性。
只支持扩展格式：title / subject / dueDate / description / completed。
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Task(BaseModel):
    """Task 数据模型

    id 为创建时的毫秒时间戳，创建后不可变。
    """

    model_config = ConfigDict(populate_by_name=True, strict=True, extra="forbid")

    id: int = Field(description="唯一标识，创建时的毫秒时间戳")
    title: str = Field(description="任务标题")
    subject: str = Field(description="所属科目")
    due_date: str = Field(alias="dueDate", description="截止日期，YYYY-MM-DD")
    description: str = Field(default="", description="补充描述，可为空")
    completed: bool = Field(default=False, description="是否已完成")

    def to_record(self) -> dict[str, Any]:
        """转换为持久化记录（camelCase 键）"""
        return self.model_dump(by_alias=True)


class TaskDraft(BaseModel):
    """创建/编辑表单的原始输入

    所有字段都是未经 trim 的字符串（None 视为空），是否为空由 TaskValidator 判断。
    title 同时接受简化格式中的 text 字段名。
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(
        default="",
        validation_alias=AliasChoices("title", "text"),
        description="任务标题",
    )
    subject: str | None = Field(default="", description="所属科目")
    due_date: str | None = Field(
        default="",
        validation_alias=AliasChoices("due_date", "dueDate"),
        description="截止日期",
    )
    description: str | None = Field(default="", description="补充描述")


class TaskPatch(BaseModel):
    """部分更新

    只有显式设置的字段会合并到原记录；id 不属于可更新字段，传入时被忽略。
    """

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(
        default=None,
        validation_alias=AliasChoices("title", "text"),
    )
    subject: str | None = None
    due_date: str | None = Field(
        default=None,
        validation_alias=AliasChoices("due_date", "dueDate"),
    )
    description: str | None = None
    completed: bool | None = None

    def changes(self) -> dict[str, Any]:
        """返回需要合并的字段（snake_case 属性名）"""
        return self.model_dump(exclude_unset=True, exclude_none=True)
