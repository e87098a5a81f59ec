"""答案缓存的 JSON 编解码。

持久化格式为 ``{"name", "answer"}`` 对象组成的 JSON 数组。

解码策略：
- JSON 语法错误不在此处捕获，json.JSONDecodeError 原样抛给调用方。
- 语法合法但结构不符（根不是数组、条目不是对象或缺少 name）时，
  跳过不合格部分并记录 warning，而不是中断整个提问流程。
"""

from __future__ import annotations

__all__ = ["JsonCodec"]

import json
import logging
from collections.abc import Sequence

from inquire.contracts.interfaces import Codec
from inquire.contracts.question import Answer, CacheRecord

logger = logging.getLogger(__name__)


class JsonCodec(Codec):
    """Answer 列表 <-> JSON 文本。"""

    def decode(self, raw: str) -> list[CacheRecord]:
        data = json.loads(raw)
        if not isinstance(data, list):
            logger.warning("answer cache root is %s, expected a list; ignoring it", type(data).__name__)
            return []
        records: list[CacheRecord] = []
        for idx, item in enumerate(data):
            if not isinstance(item, dict) or item.get("name") is None:
                logger.warning("skipping malformed answer cache entry #%d: %r", idx, item)
                continue
            records.append(CacheRecord.from_dict(item))
        return records

    def encode(self, answers: Sequence[Answer]) -> str:
        # 不可序列化的答案（TypeError）直接抛出
        return json.dumps([a.to_dict() for a in answers], ensure_ascii=False, indent=2)
