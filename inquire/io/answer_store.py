"""答案缓存文件的本地存储。

- 缓存路径 = base_dir（默认当前工作目录）/ answers_file（默认 .erector，
  可通过 INQUIRE_ANSWERS_FILE 覆盖）。
- 写入是原子的：先写临时文件再 os.replace，中途崩溃不会留下截断的缓存。
"""

from __future__ import annotations

__all__ = ["AnswerStore"]

import logging
import os
import tempfile
from pathlib import Path

from inquire.config import load_settings
from inquire.contracts.interfaces import AnswerStoreBase

logger = logging.getLogger(__name__)


class AnswerStore(AnswerStoreBase):
    """基于本地文件系统的答案缓存存储。"""

    def __init__(
        self,
        answers_file: str | Path | None = None,
        *,
        base_dir: str | Path | None = None,
    ) -> None:
        self.answers_file = Path(answers_file or load_settings().answers_file)
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def resolve_cache_path(self) -> Path:
        """绝对路径原样返回；相对路径基于 base_dir 或调用时的工作目录。"""
        if self.answers_file.is_absolute():
            return self.answers_file
        return (self.base_dir or Path.cwd()) / self.answers_file

    def exists(self, path: str | Path) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str | Path, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: str | Path, text: str, encoding: str = "utf-8") -> None:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(target.parent), suffix=".tmp", prefix=".answers_")
        try:
            with os.fdopen(fd, "w", encoding=encoding) as f:
                f.write(text)
            os.replace(tmp_path, str(target))
        except Exception:
            # 清理残留临时文件
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
        logger.debug("answer cache written (path=%s, bytes=%d)", target, len(text))
