"""提问引擎的核心数据契约。

- Question      : 单个问题描述（交互式提问，或通过 use_answer 派生）
- LiteralDefault / DerivedDefault : 默认答案的两种形态（tagged variant）
- Answer        : 解析结果，与输入 Question 一一对应、顺序一致
- CacheRecord   : 上次运行持久化下来的 {name, answer} 记录

值对象均为 frozen dataclass，解析期间不可变。
"""

from __future__ import annotations

__all__ = [
    "Question",
    "LiteralDefault",
    "DerivedDefault",
    "DefaultAnswer",
    "Answer",
    "CacheRecord",
    "coerce_default",
    "answer_text",
]

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union


def answer_text(value: Any) -> str:
    """答案值的文本形式：布尔值按 JSON 写法输出 true/false，None 为空字符串。

    预填文本、默认值渲染、${name} 占位符替换共用这一规则。
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class LiteralDefault:
    """固定文本默认值。"""
    text: str

    def render(self, answers: Sequence[Answer]) -> str:
        return self.text


@dataclass(frozen=True)
class DerivedDefault:
    """由本次运行已解析答案推导出的默认值。

    ``fn`` 收到的是截至当前问题为止已解析的 Answer 列表（按顺序，第一个问题为空列表）。
    """
    fn: Callable[[list[Answer]], Any]

    def render(self, answers: Sequence[Answer]) -> str:
        return answer_text(self.fn(list(answers)))


DefaultAnswer = Union[LiteralDefault, DerivedDefault]


def coerce_default(value: Any) -> DefaultAnswer | None:
    """把调用方给出的 defaultAnswer（字符串 / 函数 / 已包装值）统一为 tagged variant。"""
    if value is None or isinstance(value, (LiteralDefault, DerivedDefault)):
        return value
    if callable(value):
        return DerivedDefault(value)
    return LiteralDefault(answer_text(value))


@dataclass(frozen=True)
class Question:
    """单个问题描述。

    ``use_answer`` 非空时为派生问题：不提问，直接取本次运行中同名答案。
    否则为交互式问题，``question`` 为展示文本。
    """
    name: str | None = None
    question: str = ""
    default_answer: DefaultAnswer | None = None
    allow_blank: bool = False
    use_answer: str | None = None
    transform: Callable[[Any], Any] | None = None

    def __post_init__(self) -> None:
        # 允许直接传入字符串或函数作为 default_answer
        object.__setattr__(self, "default_answer", coerce_default(self.default_answer))

    @property
    def is_derived(self) -> bool:
        return self.use_answer is not None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Question:
        """从字典构建，兼容 camelCase（defaultAnswer / allowBlank / useAnswer）与 snake_case 键。"""
        text = raw.get("question", raw.get("prompt", "")) or ""
        name = raw.get("name")
        use_answer = raw.get("useAnswer", raw.get("use_answer"))
        return cls(
            name=None if name is None else str(name),
            question=str(text),
            default_answer=raw.get("defaultAnswer", raw.get("default_answer")),
            allow_blank=bool(raw.get("allowBlank", raw.get("allow_blank", False))),
            use_answer=None if use_answer is None else str(use_answer),
            transform=raw.get("transform"),
        )


@dataclass(frozen=True)
class Answer:
    """单个问题的最终答案。"""
    name: str | None
    answer: Any

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "answer": self.answer}


@dataclass(frozen=True)
class CacheRecord:
    """缓存文件中的一条历史答案。"""
    name: str
    answer: Any

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> CacheRecord:
        return cls(name=str(raw["name"]), answer=raw.get("answer"))
