"""问题文件加载器（YAML / JSON）。

文件格式（两种根结构均可）：

    name: project_setup
    questions:
      - name: project
        question: Project name?
      - name: package
        question: Package name?
        defaultAnswer: ${project}
        transform: lower
      - name: module
        useAnswer: package

    # 或直接是问题列表
    - name: project
      question: Project name?

加载时执行严格校验，违反时抛 QuestionSpecError：
- 根结构必须是列表或含 questions 列表的对象
- 每个条目必须是对象，且有提问文本或 useAnswer 之一
- name 不可重复
- useAnswer 不得引用排在后面的问题（运行时永远解析不到）
- transform 必须是 inquire.transforms 中注册的名字；它挂在问题本身上，
  作用于最终答案（交互问题无论是否命中缓存都会转换）

defaultAnswer 中的 ``${name}`` 占位符在提问时替换为本次运行已解析的同名答案；
解析不到的占位符保留原样。
"""

from __future__ import annotations

__all__ = ["QuestionSet", "load_questions", "parse_questions"]

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from inquire.contracts.exceptions import QuestionSpecError
from inquire.contracts.question import Answer, DerivedDefault, LiteralDefault, Question, answer_text
from inquire.transforms import get_transform

logger = logging.getLogger(__name__)

_ANSWER_REF_PATTERN = re.compile(r"\$\{([\w.-]+)\}")


@dataclass(frozen=True)
class QuestionSet:
    """加载后的问题集合（不可变值对象）。"""
    name: str
    questions: tuple[Question, ...]


def _template_default(template: str) -> DerivedDefault:
    def _render(answers: list[Answer]) -> str:
        by_name = {a.name: a.answer for a in answers if a.name is not None}

        def _replace(match: re.Match[str]) -> str:
            ref = match.group(1)
            return answer_text(by_name[ref]) if ref in by_name else match.group(0)

        return _ANSWER_REF_PATTERN.sub(_replace, template)

    return DerivedDefault(_render)


def _parse_default(raw: Any) -> LiteralDefault | DerivedDefault | None:
    if raw is None:
        return None
    text = str(raw)
    if _ANSWER_REF_PATTERN.search(text):
        return _template_default(text)
    return LiteralDefault(text)


def parse_questions(raw: Any, *, source: str = "<memory>") -> QuestionSet:
    """把已反序列化的问题描述转换为强类型 QuestionSet。"""
    if isinstance(raw, dict):
        set_name = str(raw.get("name", Path(source).stem))
        entries = raw.get("questions")
    else:
        set_name = Path(source).stem
        entries = raw
    if not isinstance(entries, list):
        raise QuestionSpecError(f"question file root must be a list or contain a 'questions' list: {source}")

    questions: list[Question] = []
    seen: set[str] = set()
    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise QuestionSpecError(f"question #{idx} must be an object, got {type(entry).__name__}")
        name = entry.get("name")
        name = None if name is None else str(name)
        use_answer = entry.get("useAnswer", entry.get("use_answer"))
        text = entry.get("question", entry.get("prompt"))
        if use_answer is None and not str(text or "").strip():
            raise QuestionSpecError(f"question #{idx} ({name or 'unnamed'}) needs question text or useAnswer")
        if use_answer is not None and str(use_answer) not in seen:
            names = [str(e.get("name")) for e in entries[idx + 1:] if isinstance(e, dict)]
            if str(use_answer) in names or str(use_answer) == name:
                raise QuestionSpecError(
                    f"question '{name}' uses answer '{use_answer}' which is not asked before it"
                )
            # 完全未知的名字：运行时按空白答案处理，与库调用行为一致
            logger.warning("question '%s' uses unknown answer '%s'; it will resolve to blank", name, use_answer)

        if name is not None:
            if name in seen:
                raise QuestionSpecError(f"duplicate question name: '{name}'")
            seen.add(name)

        transform = None
        transform_name = entry.get("transform")
        if transform_name is not None:
            try:
                transform = get_transform(str(transform_name))
            except KeyError as exc:
                raise QuestionSpecError(f"question '{name}': {exc.args[0]}") from exc

        question = Question(
            name=name,
            question=str(text or ""),
            default_answer=_parse_default(entry.get("defaultAnswer", entry.get("default_answer"))),
            allow_blank=bool(entry.get("allowBlank", entry.get("allow_blank", False))),
            use_answer=None if use_answer is None else str(use_answer),
            transform=transform,
        )
        questions.append(question)

    return QuestionSet(name=set_name, questions=tuple(questions))


def load_questions(path: str | Path) -> QuestionSet:
    """从 JSON/YAML 文件加载问题集合。"""
    file_path = Path(path)
    raw_text = file_path.read_text(encoding="utf-8")
    if file_path.suffix.lower() == ".json":
        raw = json.loads(raw_text)
    else:
        import yaml

        raw = yaml.safe_load(raw_text)
    return parse_questions(raw, source=str(file_path))
