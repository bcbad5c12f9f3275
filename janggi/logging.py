"""
中央日志配置

提供统一的日志目录常量和 logger 配置。
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

# 路径常量
PROJECT_ROOT = Path(__file__).parent.parent
RUNTIME_LOGS_DIR = PROJECT_ROOT / "logs"


def configure_logging(level: str = "INFO", log_file: Path | None = None) -> None:
    """配置 logger 输出

    控制台输出到 stderr；指定 log_file 时额外写入滚动日志文件。
    """
    logger.remove()
    logger.add(sys.stderr, level=level)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            rotation="10 MB",
            retention="7 days",
            level="DEBUG",
        )


__all__ = ["logger", "configure_logging", "RUNTIME_LOGS_DIR"]
