"""CLI 入口模块 -- python -m taskdeck <command>

支持的命令：
  add       新建任务
  list      列出任务（--filter all/pending/completed）
  edit      编辑任务（未指定的字段保留原值）
  toggle    切换完成状态
  delete    删除任务（需确认，--yes 跳过）
  clear     删除全部任务（需确认，--yes 跳过）
"""

import argparse
import sys

import structlog

from .config import load_config
from .exceptions import StorageCorruptionError, TaskValidationError
from .logging_config import setup_logging
from .models import FilterMode, Task
from .service import TaskService, always_confirm
from .store import create_task_store

log = structlog.get_logger()

FIELD_LABELS = {
    "title": "标题",
    "subject": "科目",
    "due_date": "截止日期",
}


def format_due_date(value: str) -> str:
    """YYYY-MM-DD -> DD/MM/YYYY，空值显示为 N/A"""
    if not value:
        return "N/A"
    parts = value.split("-")
    if len(parts) != 3:
        return value
    year, month, day = parts
    return f"{day}/{month}/{year}"


def render_task(task: Task) -> str:
    """单个任务的文本表示"""
    mark = "[x]" if task.completed else "[ ]"
    line = (
        f"{mark} {task.id}  {task.title}  "
        f"(科目: {task.subject} | 截止: {format_due_date(task.due_date)})"
    )
    if task.description.strip():
        line += f"\n      {task.description}"
    return line


def prompt_confirm(prompt: str) -> bool:
    """交互式确认"""
    answer = input(f"{prompt} [y/N] ").strip().lower()
    return answer in {"y", "yes"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="taskdeck", description="本地任务清单")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="新建任务")
    add.add_argument("title")
    add.add_argument("--subject", default="")
    add.add_argument("--due", dest="due_date", default="", help="截止日期 YYYY-MM-DD")
    add.add_argument("--description", default="")

    lst = sub.add_parser("list", help="列出任务")
    lst.add_argument(
        "--filter",
        dest="mode",
        default=FilterMode.ALL.value,
        help="all / pending / completed",
    )

    edit = sub.add_parser("edit", help="编辑任务")
    edit.add_argument("task_id", type=int)
    edit.add_argument("--title")
    edit.add_argument("--subject")
    edit.add_argument("--due", dest="due_date")
    edit.add_argument("--description")

    toggle = sub.add_parser("toggle", help="切换完成状态")
    toggle.add_argument("task_id", type=int)

    delete = sub.add_parser("delete", help="删除任务")
    delete.add_argument("task_id", type=int)
    delete.add_argument("--yes", action="store_true", help="跳过确认")

    clear = sub.add_parser("clear", help="删除全部任务")
    clear.add_argument("--yes", action="store_true", help="跳过确认")

    return parser


def run(args: argparse.Namespace, service: TaskService) -> int:
    """执行单条命令，返回退出码"""
    if args.command == "add":
        task = service.create_task(
            {
                "title": args.title,
                "subject": args.subject,
                "due_date": args.due_date,
                "description": args.description,
            }
        )
        print(f"已创建任务 {task.id}")
        return 0

    if args.command == "list":
        tasks = service.list_tasks(args.mode)
        if not tasks:
            print(service.empty_message(args.mode))
            return 0
        for task in tasks:
            print(render_task(task))
        return 0

    if args.command == "edit":
        current = service.store.get_by_id(args.task_id)
        if current is None:
            print(f"任务不存在: {args.task_id}")
            return 1
        fields = {
            "title": current.title if args.title is None else args.title,
            "subject": current.subject if args.subject is None else args.subject,
            "due_date": current.due_date if args.due_date is None else args.due_date,
            "description": (
                current.description if args.description is None else args.description
            ),
        }
        if service.edit_task(args.task_id, fields) is None:
            print(f"任务不存在: {args.task_id}")
            return 1
        print(f"已更新任务 {args.task_id}")
        return 0

    if args.command == "toggle":
        task = service.toggle_task(args.task_id)
        if task is None:
            print(f"任务不存在: {args.task_id}")
            return 1
        print(f"任务 {task.id} -> {'已完成' if task.completed else '待完成'}")
        return 0

    if args.command == "delete":
        if service.delete_task(args.task_id):
            print(f"已删除任务 {args.task_id}")
        else:
            print("未删除任何任务")
        return 0

    if args.command == "clear":
        if service.clear_all():
            print("已删除全部任务")
        else:
            print("已取消")
        return 0

    print(f"未知命令: {args.command}")
    return 1


def main(argv: list[str] | None = None) -> int:
    """CLI 主入口"""
    args = build_parser().parse_args(argv)

    config = load_config()
    setup_logging(config)

    confirm = prompt_confirm
    if getattr(args, "yes", False):
        confirm = always_confirm

    service = TaskService(create_task_store(config), confirm=confirm)

    try:
        return run(args, service)
    except TaskValidationError as e:
        label = FIELD_LABELS.get(e.field, e.field)
        print(f"标题、科目和截止日期不能为空（{label}）")
        return 1
    except StorageCorruptionError as e:
        log.error("storage_corrupted", key=e.key, reason=e.reason)
        print(str(e), file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
