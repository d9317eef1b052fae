import os
from copy import deepcopy

import pytest

from data import AppData
from engine import UpdateEngine
from storage import SnapshotStore

# Widgets are built without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeConfirm:
    """ConfirmGate that answers from a fixed value and records every question."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.asked: list[str] = []

    def confirm(self, message: str) -> bool:
        self.asked.append(message)
        return self.answer


class ScriptedRandom:
    """RandomSource that returns pre-set indices in order, wrapping around."""

    def __init__(self, *indices: int):
        self.indices = list(indices) or [0]
        self.calls = 0

    def choose(self, n: int) -> int:
        index = self.indices[self.calls % len(self.indices)]
        self.calls += 1
        return index % n


class MemoryStore:
    """SnapshotStore kept in memory; saves are counted and copied."""

    def __init__(self, initial: AppData | None = None):
        self.initial = initial
        self.saved: list[AppData] = []

    def load(self) -> AppData | None:
        return self.initial

    def save(self, app: AppData) -> None:
        self.saved.append(deepcopy(app))


@pytest.fixture
def confirm():
    return FakeConfirm()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def engine(store, confirm):
    return UpdateEngine(store, confirm, ScriptedRandom(0))


@pytest.fixture
def file_store(tmp_path):
    return SnapshotStore(tmp_path / "spinlist.toml")
