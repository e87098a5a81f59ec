"""
同步入口调用协程的桥接工具。
"""

from __future__ import annotations

import asyncio
import concurrent.futures
from collections.abc import Coroutine
from typing import Any, TypeVar

__all__ = ["run_async"]

T = TypeVar("T")


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """
    在同步上下文中运行协程并返回结果。

    - 当前线程没有事件循环 → asyncio.run()
    - 已处于事件循环中（如在 async 应用里调用 inquire()）→ 交给独立线程运行，
      避免 "asyncio.run() cannot be called from a running event loop"
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    with concurrent.futures.ThreadPoolExecutor(1) as pool:
        return pool.submit(asyncio.run, coro).result()
