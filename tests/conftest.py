from pathlib import Path
from typing import List, Sequence

import pytest

from core import TaskRecord
from core.desktop.devtools.application.task_document import TaskDocument


class MemoryStore:
    """TaskStore keeping the saved snapshots in memory."""

    def __init__(self, records=None, fail_on_save: bool = False):
        self.records: List[TaskRecord] = list(records or [])
        self.saves: List[List[TaskRecord]] = []
        self.fail_on_save = fail_on_save

    def load(self, path) -> List[TaskRecord]:
        return [TaskRecord(r.completed, r.summary) for r in self.records]

    def save(self, path, records: Sequence[TaskRecord]) -> None:
        if self.fail_on_save:
            from infrastructure.file_repository import TodoFileError

            raise TodoFileError("write", path, PermissionError(13, "Permission denied"))
        self.saves.append([TaskRecord(r.completed, r.summary) for r in records])


def make_document(*summaries: str, completed=()) -> TaskDocument:
    tasks = [TaskRecord(i in completed, text) for i, text in enumerate(summaries)]
    return TaskDocument(Path("todo.txt"), tasks, store=MemoryStore())


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def todo_file(tmp_path: Path) -> Path:
    path = tmp_path / "todo.txt"
    path.write_text("x buy milk\n  cook dinner\n  call mom\n", encoding="utf-8")
    return path
