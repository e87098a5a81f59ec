"""inquire — 顺序式交互提问引擎。

包结构概览：
  inquire/
  ├── contracts/    → 问题/答案值对象、协作方接口、异常层级
  ├── io/           → 控制台行式交互、答案缓存存储、JSON 编解码
  ├── resolver.py   → PromptResolver：逐题解析、缓存预填、持久化
  ├── loader.py     → YAML/JSON 问题文件加载与校验
  ├── transforms.py → 问题文件可用的内置答案转换
  ├── config.py     → 环境变量 / .env 配置
  └── cli/runner.py → CLI 执行入口

使用惰性导入（lazy import）避免 import inquire 时拉入全部子模块。
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from inquire_utils.lazy_import import make_lazy_module_getattr

if TYPE_CHECKING:
    from inquire.config import InquireSettings, load_settings
    from inquire.contracts.exceptions import InquireError, PromptAbortedError, QuestionSpecError
    from inquire.contracts.question import Answer, CacheRecord, DerivedDefault, LiteralDefault, Question
    from inquire.io.answer_store import AnswerStore
    from inquire.io.codec import JsonCodec
    from inquire.io.line_interface import ConsoleLineInterface
    from inquire.loader import QuestionSet, load_questions
    from inquire.resolver import PromptResolver, inquire

__all__ = [
    "inquire",
    "PromptResolver",
    "Question",
    "LiteralDefault",
    "DerivedDefault",
    "Answer",
    "CacheRecord",
    "AnswerStore",
    "JsonCodec",
    "ConsoleLineInterface",
    "QuestionSet",
    "load_questions",
    "InquireSettings",
    "load_settings",
    "InquireError",
    "QuestionSpecError",
    "PromptAbortedError",
]

_SYMBOLS: dict[str, tuple[str, str]] = {
    "inquire": ("inquire.resolver", "inquire"),
    "PromptResolver": ("inquire.resolver", "PromptResolver"),
    "Question": ("inquire.contracts.question", "Question"),
    "LiteralDefault": ("inquire.contracts.question", "LiteralDefault"),
    "DerivedDefault": ("inquire.contracts.question", "DerivedDefault"),
    "Answer": ("inquire.contracts.question", "Answer"),
    "CacheRecord": ("inquire.contracts.question", "CacheRecord"),
    "AnswerStore": ("inquire.io.answer_store", "AnswerStore"),
    "JsonCodec": ("inquire.io.codec", "JsonCodec"),
    "ConsoleLineInterface": ("inquire.io.line_interface", "ConsoleLineInterface"),
    "QuestionSet": ("inquire.loader", "QuestionSet"),
    "load_questions": ("inquire.loader", "load_questions"),
    "InquireSettings": ("inquire.config", "InquireSettings"),
    "load_settings": ("inquire.config", "load_settings"),
    "InquireError": ("inquire.contracts.exceptions", "InquireError"),
    "QuestionSpecError": ("inquire.contracts.exceptions", "QuestionSpecError"),
    "PromptAbortedError": ("inquire.contracts.exceptions", "PromptAbortedError"),
}
__getattr__ = make_lazy_module_getattr(_SYMBOLS, __name__)
