"""内置答案转换函数注册表。

问题文件（YAML/JSON）无法直接携带 Python 函数，因此 ``transform`` 字段
写的是这里注册的名字，由 loader 解析为实际函数：

    - name: use_docker
      question: Use docker?
      transform: bool

库调用方仍可直接传入任意 callable。
"""

from __future__ import annotations

__all__ = ["BUILTIN_TRANSFORMS", "get_transform", "to_bool", "to_yes_no"]

from collections.abc import Callable
from typing import Any

_TRUE_WORDS = frozenset({"y", "yes", "true", "1", "on"})
_FALSE_WORDS = frozenset({"n", "no", "false", "0", "off"})


def to_bool(value: Any) -> bool:
    """把 y/yes/true/1/on 与 n/no/false/0/off（大小写不敏感）转成布尔值。"""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"cannot interpret {value!r} as yes/no")


def to_yes_no(value: Any) -> str:
    """布尔值（或可解释为布尔的文本）渲染为 "Y" / "N"，便于预填到输入行。"""
    return "Y" if to_bool(value) else "N"


BUILTIN_TRANSFORMS: dict[str, Callable[[Any], Any]] = {
    "strip": lambda v: str(v).strip(),
    "lower": lambda v: str(v).lower(),
    "upper": lambda v: str(v).upper(),
    "int": lambda v: int(str(v).strip()),
    "float": lambda v: float(str(v).strip()),
    "bool": to_bool,
    "yes_no": to_yes_no,
}


def get_transform(name: str) -> Callable[[Any], Any]:
    """按名字取内置转换；未知名字抛 KeyError 并列出可选项。"""
    try:
        return BUILTIN_TRANSFORMS[name]
    except KeyError:
        available = ", ".join(sorted(BUILTIN_TRANSFORMS))
        raise KeyError(f"unknown transform {name!r} (available: {available})") from None
