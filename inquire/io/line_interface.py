"""控制台行式交互实现（默认 LineInterface）。

==============
行为
==============
- 交互式终端（input/output 为 tty 且 readline 可用）：
  通过内置 input() 读取，readline 负责行编辑；write() 预填的文本在
  下一次提问时经 pre-input hook 插入编辑缓冲，用户可直接修改。
- 非交互流（管道、文件、测试中的 StringIO）：
  prompt 写入 output，从 input 读取一行；没有可编辑缓冲，预填文本被丢弃。
- 输入流 EOF 或 Ctrl-C 抛出 PromptAbortedError，
  避免上层无效输入重问循环在已关闭的 stdin 上空转。

非交互流的读取经 asyncio.to_thread 在工作线程中进行，不阻塞事件循环。
交互式终端的 input() 仍在调用协程中直接执行：Ctrl-C 只会送达主线程，
放到工作线程里就无法中断；读取期间事件循环被阻塞。
"""

from __future__ import annotations

__all__ = ["ConsoleLineInterface"]

import asyncio
import logging
import sys
from collections.abc import Callable
from typing import IO, Any

from inquire.contracts.exceptions import PromptAbortedError
from inquire.contracts.interfaces import LineInterface

try:
    import readline
except ImportError:  # Windows 默认解释器没有 readline
    readline = None

logger = logging.getLogger(__name__)


class ConsoleLineInterface(LineInterface):
    """基于 stdin/stdout（或任意文本流）的行式交互。"""

    def __init__(
        self,
        *,
        completer: Callable[[str, int], str | None],
        input: IO[str] | None = None,
        output: IO[str] | None = None,
    ) -> None:
        self.completer = completer
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self._pending_prefill: str | None = None
        self._closed = False
        self._previous_completer = None
        self.interactive = self._detect_interactive()
        if self.interactive:
            self._previous_completer = readline.get_completer()
            readline.set_completer(self.completer)

    def _detect_interactive(self) -> bool:
        if readline is None:
            return False
        if self.input is not sys.stdin or self.output is not sys.stdout:
            return False
        try:
            return self.input.isatty() and self.output.isatty()
        except (AttributeError, ValueError):
            return False

    async def ask(self, prompt: str) -> Any:
        if self._closed:
            raise RuntimeError("ask() called on a closed line interface")
        prefill, self._pending_prefill = self._pending_prefill, None
        try:
            if self.interactive:
                return self._read_tty(prompt, prefill)
            return await asyncio.to_thread(self._read_stream, prompt)
        except EOFError as exc:
            raise PromptAbortedError("input stream reached EOF") from exc
        except KeyboardInterrupt as exc:
            raise PromptAbortedError("interrupted by user", interrupted=True) from exc

    def _read_tty(self, prompt: str, prefill: str | None) -> str:
        if prefill:
            def _insert_prefill() -> None:
                readline.insert_text(prefill)
                readline.redisplay()

            readline.set_pre_input_hook(_insert_prefill)
        try:
            return input(prompt)
        finally:
            if prefill:
                readline.set_pre_input_hook(None)

    def _read_stream(self, prompt: str) -> str:
        self.output.write(prompt)
        self.output.flush()
        line = self.input.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        if not self.interactive:
            logger.debug("no editable input buffer, dropping prefill %r", text)
            return
        self._pending_prefill = text

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._pending_prefill = None
        if self.interactive:
            readline.set_completer(self._previous_completer)
