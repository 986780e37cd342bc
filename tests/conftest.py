"""
- Scripted key source: feeds the editor one character at a time, "" when done.
- Screen: collects everything written so tests can assert on the output.
- Keeps MIND_* env vars and any local .env from leaking into tests.
"""
import pytest

import mind.config as config


class Screen:
    def __init__(self):
        self.chunks = []

    def write(self, text: str) -> None:
        self.chunks.append(text)

    @property
    def text(self) -> str:
        return "".join(self.chunks)


def _make_reader(keys: str):
    remaining = list(keys)

    def read_char() -> str:
        if not remaining:
            return ""
        return remaining.pop(0)

    return read_char


@pytest.fixture
def make_reader():
    """Factory: make_reader(keys) gives a read_char() that hands out `keys` one by one, then ""."""
    return _make_reader


@pytest.fixture
def screen() -> Screen:
    return Screen()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("MIND_CHANCES", "MIND_COLOR", "MIND_SEED"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: False)
    yield
