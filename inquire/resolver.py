"""提问解析器（Prompt Resolver）——按顺序解析一批问题。

==============
执行流程
==============
  1. 通过 line_interface_factory 打开行式交互（completer 为空操作）
  2. 向 AnswerStore 取缓存路径；文件存在则读取并用 Codec 解码为 CacheRecord
  3. 逐个解析问题（严格串行，上一题定稿前不会发出下一题）：
     - 派生问题（use_answer）：取本次运行已解析的同名答案，找不到则为 ""，
       再经问题自身的 transform
     - 交互问题：渲染默认值与提示文本 → 命中缓存时预填 → 提问 →
       无效输入（None，或不允许空白时的 ""）原样重问，不设上限
  4. 关闭交互；persist=True 时编码全部答案写回缓存路径

==============
transform 的两条路径
==============
交互问题的 transforms[name] 只会调用一次：
- 缓存路径：存在同名缓存记录 → transform 作用于缓存中的原始值，
  结果作为预填文本展示；用户确认/编辑后的输入原样保存。
- 新鲜路径：没有缓存记录 → transform 作用于用户刚输入的值，结果即最终答案。

问题自身的 Question.transform（问题文件中声明的 transform 即挂在这里）
不参与上述两条路径：它总是作用于最终答案，因此首次运行与命中缓存的
后续运行得到同样类型的答案。
"""

from __future__ import annotations

__all__ = ["PromptResolver", "inquire", "build_prompt_text", "is_valid_answer"]

import logging
import sys
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import IO, Any

from inquire.contracts.interfaces import AnswerStoreBase, Codec, LineInterface, LineInterfaceFactory
from inquire.contracts.question import Answer, CacheRecord, Question, answer_text
from inquire.io.answer_store import AnswerStore
from inquire.io.codec import JsonCodec
from inquire.io.line_interface import ConsoleLineInterface
from inquire_utils.async_helpers import run_async

logger = logging.getLogger(__name__)

Transform = Callable[[Any], Any]


def _noop_completer(text: str, state: int) -> str | None:
    """不提供补全，仅满足行式交互对 completer 的要求。"""
    return None


def build_prompt_text(question: str, default: Any = None) -> str:
    """``"Do you like food?"`` → ``"Do you like food? "``；
    带默认值时 → ``"Do you like food (Darn tootin!)? "``。"""
    base = question.strip().rstrip("?").rstrip()
    if default is None or default == "":
        return f"{base}? "
    return f"{base} ({default})? "


def is_valid_answer(value: Any, allow_blank: bool) -> bool:
    if value is None:
        return False
    if isinstance(value, str) and value == "" and not allow_blank:
        return False
    return True


def _coerce_questions(questions: Iterable[Question | Mapping[str, Any]]) -> list[Question]:
    return [q if isinstance(q, Question) else Question.from_dict(q) for q in questions]


class PromptResolver:
    """按顺序解析问题列表；协作方均可注入以便测试替换。"""

    def __init__(
        self,
        *,
        line_interface_factory: LineInterfaceFactory = ConsoleLineInterface,
        store: AnswerStoreBase | None = None,
        codec: Codec | None = None,
        input: IO[str] | None = None,
        output: IO[str] | None = None,
    ) -> None:
        self.line_interface_factory = line_interface_factory
        self.store = store if store is not None else AnswerStore()
        self.codec = codec if codec is not None else JsonCodec()
        self.input = input
        self.output = output

    def _open_interface(self) -> LineInterface:
        return self.line_interface_factory(
            completer=_noop_completer,
            input=self.input if self.input is not None else sys.stdin,
            output=self.output if self.output is not None else sys.stdout,
        )

    def _load_cache(self, path: str | Path) -> dict[str, CacheRecord]:
        """读取历史答案；文件不存在视为空缓存，解码错误向上抛出。"""
        if not self.store.exists(path):
            logger.debug("no answer cache at %s", path)
            return {}
        records = self.codec.decode(self.store.read_text(path, "utf-8"))
        cache: dict[str, CacheRecord] = {}
        for record in records:
            # 同名记录以第一条为准
            cache.setdefault(record.name, record)
        logger.info("loaded %d cached answers from %s", len(cache), path)
        return cache

    async def resolve(
        self,
        questions: Iterable[Question | Mapping[str, Any]],
        persist: bool = False,
        transforms: Mapping[str, Transform] | None = None,
    ) -> list[Answer]:
        """解析全部问题，返回与输入同序、等长的 Answer 列表。"""
        items = _coerce_questions(questions)
        transforms = transforms or {}
        ui = self._open_interface()
        try:
            path = self.store.resolve_cache_path()
            cache = self._load_cache(path)
            if not items:
                return []

            answers: list[Answer] = []
            for question in items:
                if question.is_derived:
                    value = self._resolve_derived(question, answers)
                else:
                    value = await self._resolve_interactive(question, answers, ui, cache, transforms)
                answers.append(Answer(name=question.name, answer=value))
        finally:
            ui.close()

        if persist:
            self.store.write_text(path, self.codec.encode(answers), encoding="utf-8")
            logger.info("persisted %d answers to %s", len(answers), path)
        return answers

    @staticmethod
    def _resolve_derived(question: Question, answers: list[Answer]) -> Any:
        """取本次运行中已解析的同名答案（不查缓存），找不到时为空字符串。"""
        value: Any = ""
        for prior in answers:
            if prior.name is not None and prior.name == question.use_answer:
                value = prior.answer
                break
        else:
            logger.debug("use_answer %r not resolved yet, substituting blank", question.use_answer)
        if question.transform is not None:
            return question.transform(value)
        return value

    async def _resolve_interactive(
        self,
        question: Question,
        answers: list[Answer],
        ui: LineInterface,
        cache: Mapping[str, CacheRecord],
        transforms: Mapping[str, Transform],
    ) -> Any:
        default = None
        if question.default_answer is not None:
            default = question.default_answer.render(answers)
        prompt = build_prompt_text(question.question, default)

        transform = transforms.get(question.name) if question.name is not None else None
        cached = cache.get(question.name) if question.name is not None else None
        if cached is not None:
            self._prefill_from_cache(ui, cached, transform)

        raw = await ui.ask(prompt)
        while not is_valid_answer(raw, question.allow_blank):
            logger.debug("invalid answer %r for %r, asking again", raw, question.name)
            raw = await ui.ask(prompt)

        value = raw if cached is not None else self._finalize_fresh_answer(raw, transform)
        if question.transform is not None:
            # 问题自身的 transform 作用于最终答案，与是否命中缓存无关
            value = question.transform(value)
        return value

    @staticmethod
    def _prefill_from_cache(ui: LineInterface, cached: CacheRecord, transform: Transform | None) -> None:
        """缓存路径：transform 作用于缓存原始值，输出作为可编辑的预填文本。"""
        value = transform(cached.answer) if transform is not None else cached.answer
        ui.write(answer_text(value))

    @staticmethod
    def _finalize_fresh_answer(raw: Any, transform: Transform | None) -> Any:
        """新鲜路径：transform 作用于刚输入的值。"""
        if transform is None:
            return raw
        return transform(raw)


def inquire(
    questions: Iterable[Question | Mapping[str, Any]],
    persist: bool = False,
    transforms: Mapping[str, Transform] | None = None,
    **resolver_kwargs: Any,
) -> list[Answer]:
    """同步入口：``answers = inquire([{"name": "fav", "question": "Favorite food?"}])``。"""
    resolver = PromptResolver(**resolver_kwargs)
    return run_async(resolver.resolve(questions, persist=persist, transforms=transforms))
