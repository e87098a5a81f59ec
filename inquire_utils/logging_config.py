"""
统一日志配置模块。

==============
职责
==============
1. 为 inquire 的 CLI 与库调用方提供统一的日志格式与级别。
2. 支持可选的文件日志输出（--log-file）。
3. 重复调用 setup_logging() 是幂等的（不会叠加 handler）。

==============
使用方式
==============
在 CLI 入口（inquire/cli/runner.py）的 main() 中调用一次：

    from inquire_utils.logging_config import setup_logging
    setup_logging(logging.INFO)
    setup_logging(log_file="inquire.log")

其他模块只使用标准 logging：

    logger = logging.getLogger(__name__)

==============
设计说明
==============
- 提问文本写 stdout，日志一律写 stderr，两者不会混在同一流里。
- 文件 handler 使用 UTF-8 编码。
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

__all__ = ["setup_logging", "LOG_FORMAT"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

_INITIALIZED = False


def setup_logging(
    level: int | str = logging.WARNING,
    *,
    log_file: str | Path | None = None,
) -> None:
    """初始化全局日志配置（幂等）。

    Parameters
    ----------
    level : int | str
        全局日志级别，接受 ``logging.INFO`` 或 ``"INFO"`` 两种写法。
    log_file : str | Path | None
        可选日志文件路径，传入后额外添加一个文件 handler。
    """
    global _INITIALIZED

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()

    if not _INITIALIZED:
        # ── 首次初始化：设置级别 + stderr handler ────────────────────
        root.setLevel(level)

        console = logging.StreamHandler(sys.stderr)
        console.setLevel(level)
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(console)

        _INITIALIZED = True

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # 避免对同一文件重复添加 handler
        existing = [
            h for h in root.handlers
            if isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path.resolve()
        ]
        if not existing:
            fh = logging.FileHandler(str(log_path), encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(fh)
