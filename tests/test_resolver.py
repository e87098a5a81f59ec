import asyncio
import json
import sys

import pytest

from conftest import CACHE_PATH, MemoryStore, ScriptedInterfaceFactory, StubCodec
from inquire.contracts.question import Answer, CacheRecord, Question
from inquire.io.codec import JsonCodec
from inquire.resolver import PromptResolver, build_prompt_text, inquire, is_valid_answer


def _resolve(questions, *, responses=(), records=None, persist=False, transforms=None, store=None, codec=None):
    factory = ScriptedInterfaceFactory(responses)
    if store is None:
        store = MemoryStore({CACHE_PATH: "fafa flo fly"} if records is not None else None)
    if codec is None:
        codec = StubCodec(records or [])
    resolver = PromptResolver(line_interface_factory=factory, store=store, codec=codec)
    answers = asyncio.run(resolver.resolve(questions, persist=persist, transforms=transforms))
    return answers, factory.ui, store, codec


# ── 启动阶段 ──────────────────────────────────────────────────────────


def test_opens_line_interface_on_stdio_with_noop_completer() -> None:
    _, ui, _, _ = _resolve([])

    assert callable(ui.config["completer"])
    assert ui.config["completer"]("any", 0) is None
    assert ui.config["input"] is sys.stdin
    assert ui.config["output"] is sys.stdout


def test_checks_cache_path_existence() -> None:
    _, _, store, _ = _resolve([])

    assert store.resolve_calls == 1
    assert store.exists_calls == [CACHE_PATH]
    assert store.reads == []


def test_reads_and_decodes_cache_file_when_it_exists() -> None:
    _, _, store, codec = _resolve([], records=[])

    assert store.reads == [(CACHE_PATH, "utf-8")]
    assert codec.decoded == ["fafa flo fly"]


def test_empty_questions_close_interface_without_prompting() -> None:
    answers, ui, store, _ = _resolve([], persist=True)

    assert answers == []
    assert ui.closed is True
    assert ui.prompts == []
    assert store.writes == []


# ── 交互问题 ──────────────────────────────────────────────────────────


def test_prompt_text_is_trimmed_with_single_trailing_space() -> None:
    _, ui, _, _ = _resolve([{"question": "  Do you like food?                "}], responses=["test"])

    assert ui.prompts == ["Do you like food? "]


def test_literal_default_is_rendered_in_prompt() -> None:
    questions = [{"defaultAnswer": "Darn tootin!", "question": "Do you like food?", "name": "food"}]
    _, ui, _, _ = _resolve(questions, responses=["Y"])

    assert ui.prompts == ["Do you like food (Darn tootin!)? "]


def test_default_function_receives_previously_resolved_answers() -> None:
    calls: list[list[Answer]] = []

    def _default(answers):
        calls.append(answers)
        return "Functional..."

    questions = [
        Question(name="food", question="Do you like food?", default_answer=_default),
        Question(name="kinds", question="What kind of food?", default_answer=_default),
    ]
    _, ui, _, _ = _resolve(questions, responses=["Y", "pizza"])

    assert calls == [[], [Answer(name="food", answer="Y")]]
    assert ui.prompts == [
        "Do you like food (Functional...)? ",
        "What kind of food (Functional...)? ",
    ]


def test_prepopulates_input_with_cached_answer_before_asking() -> None:
    questions = [{"question": "Do you like food?", "name": "food"}]
    answers, ui, _, _ = _resolve(
        questions, responses=["N"], records=[CacheRecord(name="food", answer="N")],
    )

    assert ui.writes == ["N"]
    assert ui.events[:2] == [("write", "N"), ("ask", "Do you like food? ")]
    assert answers == [Answer(name="food", answer="N")]


def test_cached_value_goes_through_transform_once_for_prefill() -> None:
    """缓存路径：transform 作用于缓存原始值（True），输出用于预填，输入原样保存。"""
    seen: list = []

    def _food(value):
        seen.append(value)
        return "Y"

    answers, ui, _, _ = _resolve(
        [{"question": "Do you like food?", "name": "food"}],
        responses=["Y!"],
        records=[CacheRecord(name="food", answer=True)],
        transforms={"food": _food},
    )

    assert seen == [True]
    assert ui.writes == ["Y"]
    assert answers == [Answer(name="food", answer="Y!")]


def test_transform_applies_to_fresh_answer_without_cache() -> None:
    seen: list = []

    def _food(value):
        seen.append(value)
        return value.upper()

    answers, ui, _, _ = _resolve(
        [{"question": "Do you like food?", "name": "food"}],
        responses=["y"],
        transforms={"food": _food},
    )

    assert seen == ["y"]
    assert ui.writes == []
    assert answers == [Answer(name="food", answer="Y")]


def test_cached_bool_is_prefilled_in_json_spelling() -> None:
    _, ui, _, _ = _resolve(
        [{"question": "Use docker?", "name": "docker"}],
        responses=["true"],
        records=[CacheRecord(name="docker", answer=True)],
    )

    assert ui.writes == ["true"]


def test_asks_multiple_questions_in_order() -> None:
    questions = [
        {"question": "Do you like food?", "name": "food"},
        {"question": "What kind of food?", "name": "kinds"},
    ]
    answers, ui, _, _ = _resolve(questions, responses=["Y", "pizza"])

    assert ui.prompts == ["Do you like food? ", "What kind of food? "]
    assert [a.name for a in answers] == ["food", "kinds"]
    assert ui.events[-1] == ("close",)


@pytest.mark.parametrize("invalid", [None, ""])
def test_invalid_answer_repeats_same_prompt(invalid) -> None:
    answers, ui, _, _ = _resolve(
        [{"question": "Do you like food?", "name": "food"}],
        responses=[invalid, invalid, "Y"],
    )

    assert ui.prompts == ["Do you like food? "] * 3
    assert answers == [Answer(name="food", answer="Y")]


def test_non_string_answer_is_accepted() -> None:
    answers, _, _, _ = _resolve([{"question": "Do you like food?", "name": "food"}], responses=[12])

    assert answers == [Answer(name="food", answer=12)]


def test_blank_answer_is_accepted_when_allowed() -> None:
    answers, ui, _, _ = _resolve(
        [{"allowBlank": True, "question": "Do you like food?", "name": "food"}], responses=[""],
    )

    assert ui.prompts == ["Do you like food? "]
    assert answers == [Answer(name="food", answer="")]


def test_question_transform_applies_to_final_answer_with_and_without_cache() -> None:
    """问题自身的 transform 在缓存路径与新鲜路径上都作用于最终答案。"""
    question = Question(name="port", question="Port?", transform=int)

    fresh, _, _, _ = _resolve([question], responses=["8080"])
    cached, ui, _, _ = _resolve([question], responses=["9090"], records=[CacheRecord(name="port", answer=8080)])

    assert fresh == [Answer(name="port", answer=8080)]
    assert ui.writes == ["8080"]
    assert cached == [Answer(name="port", answer=9090)]


def test_question_transform_runs_after_mapping_transform() -> None:
    question = Question(name="food", question="Food?", transform=lambda v: f"{v}!")
    answers, _, _, _ = _resolve([question], responses=["y"], transforms={"food": str.upper})

    assert answers == [Answer(name="food", answer="Y!")]


def test_derived_default_result_is_rendered_as_text() -> None:
    questions = [
        Question(name="docker", question="Use docker?", default_answer=lambda answers: True),
        Question(name="tag", question="Tag?", default_answer=lambda answers: None),
    ]
    _, ui, _, _ = _resolve(questions, responses=["y", "latest"])

    assert ui.prompts == ["Use docker (true)? ", "Tag? "]


def test_nameless_question_is_asked_but_not_matched_against_cache() -> None:
    answers, ui, _, _ = _resolve(
        [Question(question="Anything else?")],
        responses=["no"],
        records=[CacheRecord(name="None", answer="stale")],
    )

    assert ui.writes == []
    assert answers == [Answer(name=None, answer="no")]


# ── 派生问题 ──────────────────────────────────────────────────────────


def test_use_answer_copies_earlier_answer() -> None:
    questions = [
        {"question": "What is you favorite food?", "name": "fav"},
        {"name": "derived", "useAnswer": "fav"},
    ]
    answers, ui, _, _ = _resolve(questions, responses=["pizza"])

    assert ui.prompts == ["What is you favorite food? "]
    assert answers == [Answer(name="fav", answer="pizza"), Answer(name="derived", answer="pizza")]


def test_use_answer_with_unknown_name_resolves_blank() -> None:
    questions = [
        {"question": "What is you favorite food?", "name": "fav"},
        {"name": "derived", "useAnswer": "favorite"},
    ]
    answers, _, _, _ = _resolve(questions, responses=["pizza"])

    assert answers[1] == Answer(name="derived", answer="")


def test_use_answer_ignores_cache() -> None:
    questions = [{"name": "derived", "useAnswer": "fav"}]
    answers, ui, _, _ = _resolve(questions, records=[CacheRecord(name="fav", answer="sushi")])

    assert answers == [Answer(name="derived", answer="")]
    assert ui.writes == []


def test_use_answer_applies_question_transform() -> None:
    questions = [
        {"question": "What is you favorite food?", "name": "fav"},
        {"name": "derived", "transform": lambda value: f"{value} is the best!", "useAnswer": "fav"},
    ]
    answers, _, _, _ = _resolve(questions, responses=["pizza"])

    assert answers == [
        Answer(name="fav", answer="pizza"),
        Answer(name="derived", answer="pizza is the best!"),
    ]


# ── 持久化 ────────────────────────────────────────────────────────────


def test_persist_writes_encoded_answers_once() -> None:
    answers, ui, store, codec = _resolve(
        [{"question": "What is you favorite food?", "name": "fav"}], responses=["pizza"], persist=True,
    )

    assert store.writes == [(CACHE_PATH, "tata toothy", "utf-8")]
    assert codec.encoded_answers == [answers]
    assert ui.closed is True


def test_answers_are_not_written_without_persist() -> None:
    _, _, store, _ = _resolve([{"question": "What is you favorite food?", "name": "fav"}], responses=["pizza"])

    assert store.writes == []


def test_persisted_answers_prefill_next_run() -> None:
    store = MemoryStore()
    questions = [{"question": "What is you favorite food?", "name": "fav"}]
    _resolve(questions, responses=["pizza"], persist=True, store=store, codec=JsonCodec())
    answers, ui, _, _ = _resolve(questions, responses=["pizza"], store=store, codec=JsonCodec())

    assert json.loads(store.files[CACHE_PATH]) == [{"name": "fav", "answer": "pizza"}]
    assert ui.writes == ["pizza"]
    assert answers == [Answer(name="fav", answer="pizza")]


def test_decode_error_propagates_and_interface_is_closed() -> None:
    factory = ScriptedInterfaceFactory()
    store = MemoryStore({CACHE_PATH: "{not-json"})
    resolver = PromptResolver(line_interface_factory=factory, store=store, codec=JsonCodec())

    with pytest.raises(json.JSONDecodeError):
        asyncio.run(resolver.resolve([{"question": "Food?", "name": "food"}]))
    assert factory.ui.closed is True
    assert factory.ui.prompts == []


# ── 辅助函数与同步入口 ────────────────────────────────────────────────


def test_build_prompt_text() -> None:
    assert build_prompt_text("Name") == "Name? "
    assert build_prompt_text(" Name?? ", "bob") == "Name (bob)? "
    assert build_prompt_text("Name?", "") == "Name? "


def test_is_valid_answer() -> None:
    assert is_valid_answer(None, True) is False
    assert is_valid_answer("", False) is False
    assert is_valid_answer("", True) is True
    assert is_valid_answer(0, False) is True


def test_inquire_sync_entrypoint() -> None:
    factory = ScriptedInterfaceFactory(["pizza"])
    answers = inquire(
        [{"question": "Favorite food?", "name": "fav"}],
        line_interface_factory=factory,
        store=MemoryStore(),
        codec=StubCodec(),
    )

    assert answers == [Answer(name="fav", answer="pizza")]


def test_inquire_sync_entrypoint_inside_running_loop() -> None:
    factory = ScriptedInterfaceFactory(["pizza"])

    async def _call():
        return inquire(
            [{"question": "Favorite food?", "name": "fav"}],
            line_interface_factory=factory,
            store=MemoryStore(),
            codec=StubCodec(),
        )

    assert asyncio.run(_call()) == [Answer(name="fav", answer="pizza")]
