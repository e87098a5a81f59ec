import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inquire.contracts.interfaces import AnswerStoreBase, Codec, LineInterface  # noqa: E402

# ── 共享 fake 协作方 ──────────────────────────────────────────────────

CACHE_PATH = "baba booey"


class ScriptedLineInterface(LineInterface):
    """按脚本依次返回输入的行式交互；记录 prompt / write / close 事件。"""

    def __init__(self, responses, *, completer=None, input=None, output=None) -> None:
        self.responses = responses
        self.config = {"completer": completer, "input": input, "output": output}
        self.prompts: list[str] = []
        self.writes: list[str] = []
        self.events: list[tuple] = []
        self.closed = False

    async def ask(self, prompt):
        self.prompts.append(prompt)
        self.events.append(("ask", prompt))
        if not self.responses:
            raise AssertionError(f"unexpected prompt {prompt!r}: no scripted responses left")
        return self.responses.pop(0)

    def write(self, text) -> None:
        self.writes.append(text)
        self.events.append(("write", text))

    def close(self) -> None:
        self.closed = True
        self.events.append(("close",))


class ScriptedInterfaceFactory:
    """替代 ConsoleLineInterface 的工厂，保存创建出的实例供断言。"""

    def __init__(self, responses=()) -> None:
        self.responses = list(responses)
        self.instances: list[ScriptedLineInterface] = []

    def __call__(self, **config) -> ScriptedLineInterface:
        ui = ScriptedLineInterface(self.responses, **config)
        self.instances.append(ui)
        return ui

    @property
    def ui(self) -> ScriptedLineInterface:
        return self.instances[-1]


class MemoryStore(AnswerStoreBase):
    """内存中的答案存储，记录所有调用参数。"""

    def __init__(self, files=None, path=CACHE_PATH) -> None:
        self.files = dict(files or {})
        self.path = path
        self.resolve_calls = 0
        self.exists_calls: list = []
        self.reads: list[tuple] = []
        self.writes: list[tuple] = []

    def resolve_cache_path(self):
        self.resolve_calls += 1
        return self.path

    def exists(self, path) -> bool:
        self.exists_calls.append(path)
        return path in self.files

    def read_text(self, path, encoding="utf-8") -> str:
        self.reads.append((path, encoding))
        return self.files[path]

    def write_text(self, path, text, encoding="utf-8") -> None:
        self.writes.append((path, text, encoding))
        self.files[path] = text


class StubCodec(Codec):
    """decode 返回预置记录，encode 返回固定文本。"""

    def __init__(self, records=(), encoded="tata toothy") -> None:
        self.records = list(records)
        self.encoded = encoded
        self.decoded: list[str] = []
        self.encoded_answers: list = []

    def decode(self, raw):
        self.decoded.append(raw)
        return list(self.records)

    def encode(self, answers) -> str:
        self.encoded_answers.append(list(answers))
        return self.encoded


@pytest.fixture
def factory() -> ScriptedInterfaceFactory:
    return ScriptedInterfaceFactory()


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()
