"""CLI 日志 -- structlog 事件经标准库 logging 写到 stderr

stdout 只留给命令结果；日志格式由 TaskDeckConfig.log_format 决定（dev / json）。
"""

import logging
import sys

import structlog

from .config import TaskDeckConfig

# structlog 事件与标准库记录共用的前置处理
_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(config: TaskDeckConfig | None = None) -> None:
    """按配置初始化日志，可重复调用（root logger 始终只有一个 handler）"""
    config = config or TaskDeckConfig()

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(config.log_format),
            foreign_pre_chain=_PRE_CHAIN,
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
