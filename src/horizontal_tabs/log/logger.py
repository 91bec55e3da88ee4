"""日志配置模块。

本模块基于 structlog 构建日志体系，支持环境变量配置与文件轮转。
主要功能包括：
- 动态配置日志级别与输出格式
- 开发模式下记录调用位置
- 生产模式下剥离异常详情
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog
from platformdirs import user_cache_dir

from horizontal_tabs.settings import get_settings
from horizontal_tabs.settings.base import VALID_LOG_LEVELS

# 日志级别名称映射
LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_MAX_BYTES = 10 * 1024 * 1024


def _is_dev() -> bool:
    return get_settings().dev


def remove_exception_in_production(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """在生产环境移除异常详情。"""
    if not _is_dev():
        event_dict.pop("exception", None)
        event_dict.pop("exc_info", None)
    return event_dict


def configure(
    *,
    log_level: str | None = None,
    log_file: Path | None = None,
    log_env: str | None = None,
    cache: bool | None = None,
    output_file=None,
) -> None:
    """配置日志系统。

    关键路径（三步）：
    1) 解析环境变量与参数优先级；
    2) 组装 structlog 处理器与输出配置；
    3) 初始化 logger 并挂载文件日志。
    """
    # 注意：若已配置且最小级别一致则直接返回
    cfg = structlog.get_config() if structlog.is_configured() else {}
    wrapper_class = cfg.get("wrapper_class")
    current_min_level = getattr(wrapper_class, "min_level", None)
    env_level = os.getenv("HORIZONTAL_TABS_LOG_LEVEL", "").upper()
    if env_level in VALID_LOG_LEVELS and log_level is None:
        log_level = env_level

    if log_level is None:
        log_level = get_settings().log_level

    requested_min_level = LOG_LEVEL_MAP.get(log_level.upper(), logging.ERROR)
    if current_min_level == requested_min_level and output_file is None:
        return

    if log_file is None:
        env_log_file = os.getenv("HORIZONTAL_TABS_LOG_FILE", "")
        log_file = Path(env_log_file) if env_log_file else None

    if log_env is None:
        log_env = os.getenv("HORIZONTAL_TABS_LOG_ENV", "")

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    # 仅在开发模式记录调用位置
    if _is_dev():
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            )
        )

    processors.append(remove_exception_in_production)

    if log_env.lower() in {"container", "container_json"}:
        processors.append(structlog.processors.JSONRenderer())
    elif log_env.lower() == "container_csv":
        key_order = ["timestamp", "level", "event"]
        if _is_dev():
            key_order += ["filename", "func_name", "lineno"]
        processors.append(structlog.processors.KeyValueRenderer(key_order=key_order, drop_missing=True))
    elif os.getenv("HORIZONTAL_TABS_PRETTY_LOGS", "true").lower() == "true":
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    numeric_level = LOG_LEVEL_MAP.get(log_level.upper(), logging.ERROR)

    # 创建 wrapper_class 并缓存 min_level
    wrapper_class = structlog.make_filtering_bound_logger(numeric_level)
    wrapper_class.min_level = numeric_level

    log_output_file = output_file if output_file is not None else sys.stdout

    structlog.configure(
        processors=processors,
        wrapper_class=wrapper_class,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=log_output_file)
        if not log_file
        else structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=cache if cache is not None else True,
    )

    if log_file:
        if not log_file.parent.exists():
            cache_dir = Path(user_cache_dir("horizontal_tabs"))
            cache_dir.mkdir(parents=True, exist_ok=True)
            log_file = cache_dir / "horizontal_tabs.log"

        # 注意：structlog 无内建轮转，使用 stdlib 处理
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=DEFAULT_MAX_BYTES,
            backupCount=5,
        )
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        logging.root.addHandler(file_handler)
        logging.root.setLevel(numeric_level)

    global logger  # noqa: PLW0603
    logger = structlog.get_logger()

    logger.debug("Logger set up with log level: %s", log_level)


# 初始化 logger（后续会在 configure 中重新配置）
logger: structlog.BoundLogger = structlog.get_logger()
configure(log_level="CRITICAL", cache=False)
