"""提问引擎依赖的三个外部能力接口。

- LineInterface   : 行式交互终端（提问、预填输入缓冲、关闭）
- AnswerStoreBase : 缓存文件所在的文件系统能力
- Codec           : 缓存内容的编解码

PromptResolver 只依赖这些抽象；默认实现位于 inquire/io/ 下，
测试中以 fake 对象替换。
"""

from __future__ import annotations

__all__ = ["LineInterface", "LineInterfaceFactory", "AnswerStoreBase", "Codec"]

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from inquire.contracts.question import Answer, CacheRecord


class LineInterface(ABC):
    """行式交互接口。一次只允许一个未完成的 ask()。"""

    @abstractmethod
    async def ask(self, prompt: str) -> Any:
        """展示 prompt 并等待一行输入；返回原始输入值（可能为 None）。

        实现可以在读取期间阻塞事件循环（ConsoleLineInterface 在交互式终端上即如此），
        因此不要在承担其他并发任务的事件循环里等待 resolve()。
        """

    @abstractmethod
    def write(self, text: str) -> None:
        """向下一次 ask() 的输入缓冲预填文本，用户可直接编辑。"""

    @abstractmethod
    def close(self) -> None:
        """释放终端资源。"""


# (completer, input, output) -> LineInterface
LineInterfaceFactory = Callable[..., LineInterface]


class AnswerStoreBase(ABC):
    """缓存文件存储能力。"""

    @abstractmethod
    def resolve_cache_path(self) -> str | Path:
        """返回缓存文件路径；resolver 将其视为不透明值。"""

    @abstractmethod
    def exists(self, path: str | Path) -> bool: ...

    @abstractmethod
    def read_text(self, path: str | Path, encoding: str = "utf-8") -> str: ...

    @abstractmethod
    def write_text(self, path: str | Path, text: str, encoding: str = "utf-8") -> None: ...


class Codec(ABC):
    """缓存内容编解码。"""

    @abstractmethod
    def decode(self, raw: str) -> list[CacheRecord]: ...

    @abstractmethod
    def encode(self, answers: Sequence[Answer]) -> str: ...
