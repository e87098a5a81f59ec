"""提问 CLI 入口——按问题文件逐题提问并输出答案。

使用方式：
  python -m inquire.cli.runner --questions questions.yaml
  python -m inquire.cli.runner --questions questions.yaml --persist --format yaml --out answers.yaml

执行流程：
  1. 参数解析；读取环境配置（INQUIRE_ANSWERS_FILE / INQUIRE_LOG_LEVEL / .env）
  2. 日志初始化（stderr，可选 --log-file）
  3. load_questions() 加载并校验问题文件
  4. PromptResolver.resolve() 逐题提问（--persist 时写回答案缓存）
  5. 以 JSON / YAML 输出答案到 stdout 或 --out

退出码：0 成功；2 问题文件非法；130 输入被中断。
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

from inquire.config import load_settings
from inquire.contracts.exceptions import PromptAbortedError, QuestionSpecError
from inquire.contracts.question import Answer
from inquire.io.answer_store import AnswerStore
from inquire.loader import load_questions
from inquire.resolver import PromptResolver
from inquire_utils.logging_config import setup_logging

__all__ = [
    "run",
    "main",
    "render_answers",
]

EXIT_SPEC_ERROR = 2
EXIT_ABORTED = 130


def render_answers(answers: list[Answer], fmt: str) -> str:
    """把答案渲染为 JSON 或 YAML 文本（保持问题顺序）。"""
    payload = [a.to_dict() for a in answers]
    if fmt == "yaml":
        return yaml.safe_dump(payload, allow_unicode=True, sort_keys=False)
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


async def run(args: argparse.Namespace, *, resolver: PromptResolver | None = None) -> list[Answer]:
    """主执行函数：加载问题、逐题提问、输出答案。"""
    question_set = load_questions(args.questions)
    logger.info("loaded question set %r (%d questions)", question_set.name, len(question_set.questions))

    if resolver is None:
        resolver = PromptResolver(store=AnswerStore(args.answers_file))
    answers = await resolver.resolve(question_set.questions, persist=args.persist)

    text = render_answers(answers, args.format)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        logger.info("answers written to %s", out_path)
    else:
        sys.stdout.write(text)
        sys.stdout.flush()
    return answers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ask the questions in a YAML/JSON file and print the answers")
    parser.add_argument("--questions", required=True, help="Question file path (.yaml / .yml / .json)")
    parser.add_argument("--persist", action="store_true", help="Save answers to the answer cache for the next run")
    parser.add_argument(
        "--answers-file",
        default=None,
        help="Answer cache file; defaults to $INQUIRE_ANSWERS_FILE or .erector in the working directory",
    )
    parser.add_argument("--format", choices=("json", "yaml"), default="json")
    parser.add_argument("--out", default=None, help="Write answers to this file instead of stdout")
    parser.add_argument("--log-level", default=None, help="DEBUG / INFO / WARNING / ERROR")
    parser.add_argument("--log-file", default=None)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI 入口。"""
    args = build_parser().parse_args(argv)
    settings = load_settings()
    setup_logging(args.log_level or settings.log_level, log_file=args.log_file)
    if args.answers_file is None:
        args.answers_file = settings.answers_file

    try:
        asyncio.run(run(args))
    except QuestionSpecError as exc:
        logger.error("%s", exc)
        return EXIT_SPEC_ERROR
    except PromptAbortedError as exc:
        logger.warning("%s", exc)
        return EXIT_ABORTED
    return 0


if __name__ == "__main__":
    sys.exit(main())
