"""运行配置 — 环境变量 + .env 自动加载（零业务依赖）。

配置项：
- INQUIRE_ANSWERS_FILE : 答案缓存文件名，默认 ``.erector``（位于当前工作目录）
- INQUIRE_LOG_LEVEL    : CLI 日志级别，默认 WARNING

.env 加载：自实现，支持 ``export KEY=VALUE`` 和引号值；
已存在的环境变量不会被覆盖。
"""

from __future__ import annotations

__all__ = ["InquireSettings", "load_settings", "DEFAULT_ANSWERS_FILE"]

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_ANSWERS_FILE = ".erector"
DEFAULT_LOG_LEVEL = "WARNING"

_DOTENV_LOADED = False


@dataclass(frozen=True)
class InquireSettings:
    answers_file: str = DEFAULT_ANSWERS_FILE
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_dotenv_line(line: str) -> tuple[str, str] | None:
    """解析 .env 单行，支持 `export KEY=VALUE` 与引号值。"""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    if stripped.startswith("export "):
        stripped = stripped[len("export "):].strip()
    if "=" not in stripped:
        return None
    key, raw_value = stripped.split("=", 1)
    key = key.strip()
    if not key:
        return None
    value = raw_value.strip()
    if len(value) >= 2 and ((value[0] == value[-1] == '"') or (value[0] == value[-1] == "'")):
        value = value[1:-1]
    return key, value


def _load_dotenv_file(path: Path, *, override: bool = False) -> None:
    if not path.is_file():
        return
    for line in path.read_text(encoding="utf-8").splitlines():
        parsed = _parse_dotenv_line(line)
        if not parsed:
            continue
        key, value = parsed
        if override or key not in os.environ:
            os.environ[key] = value


def _ensure_dotenv_loaded() -> None:
    """懒加载当前工作目录下的 .env（仅一次）。"""
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _load_dotenv_file(Path.cwd() / ".env", override=False)
    _DOTENV_LOADED = True


def load_settings() -> InquireSettings:
    """读取环境变量（含 .env）构建配置；空字符串视为未设置。"""
    _ensure_dotenv_loaded()
    answers_file = os.environ.get("INQUIRE_ANSWERS_FILE", "").strip() or DEFAULT_ANSWERS_FILE
    log_level = os.environ.get("INQUIRE_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
    return InquireSettings(answers_file=answers_file, log_level=log_level)
