"""inquire 结构化异常层级。

所有 inquire 专用异常继承自 InquireError，并携带
error_stage / error_code 两个元数据字段，CLI 据此决定退出码与日志内容。

异常层级：
  InquireError (base)
  ├── QuestionSpecError   → 问题文件 / 问题描述加载与校验阶段
  └── PromptAbortedError  → 交互输入被中断（EOF / Ctrl-C）

缓存文件的 JSON 解析与序列化错误不在此层级中：它们原样向上抛出。
"""

from __future__ import annotations

__all__ = [
    "InquireError",
    "QuestionSpecError",
    "PromptAbortedError",
]


class InquireError(Exception):
    """inquire 基础异常，携带稳定的错误元数据 (stage/code)。"""

    def __init__(self, message: str, *, error_stage: str, error_code: str) -> None:
        super().__init__(message)
        self.error_stage = error_stage
        self.error_code = error_code


class QuestionSpecError(InquireError):
    """问题描述非法：根结构错误、重名、缺少提问文本、向后引用等。"""

    def __init__(self, message: str) -> None:
        super().__init__(
            f"question_spec_error: {message}",
            error_stage="load",
            error_code="question_spec_error",
        )


class PromptAbortedError(InquireError):
    """交互输入提前结束：输入流 EOF 或用户中断。"""

    def __init__(self, message: str = "input stream closed", *, interrupted: bool = False) -> None:
        code = "prompt_interrupted" if interrupted else "prompt_eof"
        super().__init__(
            f"{code}: {message}",
            error_stage="prompt",
            error_code=code,
        )
        self.interrupted = interrupted
