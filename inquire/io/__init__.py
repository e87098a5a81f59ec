"""
I/O 层：行式交互、答案缓存存储、缓存编解码。

模块概览：
- line_interface.py : ConsoleLineInterface — stdin/stdout（readline）行式交互
- answer_store.py   : AnswerStore — 答案缓存文件路径解析与原子写入
- codec.py          : JsonCodec — {name, answer} 数组的 JSON 编解码
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from inquire_utils.lazy_import import make_lazy_module_getattr

if TYPE_CHECKING:
    from inquire.io.answer_store import AnswerStore
    from inquire.io.codec import JsonCodec
    from inquire.io.line_interface import ConsoleLineInterface

__all__ = ["AnswerStore", "JsonCodec", "ConsoleLineInterface"]

_SYMBOLS: dict[str, tuple[str, str]] = {
    "AnswerStore": ("inquire.io.answer_store", "AnswerStore"),
    "JsonCodec": ("inquire.io.codec", "JsonCodec"),
    "ConsoleLineInterface": ("inquire.io.line_interface", "ConsoleLineInterface"),
}
__getattr__ = make_lazy_module_getattr(_SYMBOLS, __name__)
