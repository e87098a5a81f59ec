"""核心数据契约层 — 问题/答案值对象、协作方接口与异常层级。

本包使用惰性导入(lazy import)，按需加载子模块：
    from inquire.contracts import Question, Answer, InquireError

子模块：
- question.py   : Question / LiteralDefault / DerivedDefault / Answer / CacheRecord
- interfaces.py : LineInterface / AnswerStoreBase / Codec
- exceptions.py : InquireError 异常层级
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from inquire_utils.lazy_import import make_lazy_module_getattr

if TYPE_CHECKING:
    from inquire.contracts.exceptions import InquireError, PromptAbortedError, QuestionSpecError
    from inquire.contracts.interfaces import AnswerStoreBase, Codec, LineInterface
    from inquire.contracts.question import (
        Answer,
        CacheRecord,
        DerivedDefault,
        LiteralDefault,
        Question,
    )

__all__ = [
    "Question",
    "LiteralDefault",
    "DerivedDefault",
    "Answer",
    "CacheRecord",
    "LineInterface",
    "AnswerStoreBase",
    "Codec",
    "InquireError",
    "QuestionSpecError",
    "PromptAbortedError",
]

_SYMBOLS: dict[str, tuple[str, str]] = {
    "Question": ("inquire.contracts.question", "Question"),
    "LiteralDefault": ("inquire.contracts.question", "LiteralDefault"),
    "DerivedDefault": ("inquire.contracts.question", "DerivedDefault"),
    "Answer": ("inquire.contracts.question", "Answer"),
    "CacheRecord": ("inquire.contracts.question", "CacheRecord"),
    "LineInterface": ("inquire.contracts.interfaces", "LineInterface"),
    "AnswerStoreBase": ("inquire.contracts.interfaces", "AnswerStoreBase"),
    "Codec": ("inquire.contracts.interfaces", "Codec"),
    "InquireError": ("inquire.contracts.exceptions", "InquireError"),
    "QuestionSpecError": ("inquire.contracts.exceptions", "QuestionSpecError"),
    "PromptAbortedError": ("inquire.contracts.exceptions", "PromptAbortedError"),
}
__getattr__ = make_lazy_module_getattr(_SYMBOLS, __name__)
