"""File-bound, ordered list of tasks."""

from pathlib import Path
from typing import List, Optional, Union

from application.ports import TaskStore
from core.task_record import TaskRecord
from infrastructure.file_repository import FileTodoStore


class TaskDocument:
    """The tasks of one todo file, in display (and on-disk) order.

    Mutation happens directly on ``tasks``; the document only knows how to
    load and save itself.
    """

    def __init__(self, path: Union[str, Path], tasks: Optional[List[TaskRecord]] = None, store: Optional[TaskStore] = None):
        self.path = Path(path)
        self.tasks: List[TaskRecord] = list(tasks) if tasks else []
        self.store: TaskStore = store or FileTodoStore()

    @classmethod
    def load(cls, path: Union[str, Path], store: Optional[TaskStore] = None) -> "TaskDocument":
        store = store or FileTodoStore()
        return cls(path, store.load(path), store=store)

    def save(self) -> None:
        self.store.save(self.path, self.tasks)

    def __len__(self) -> int:
        return len(self.tasks)

    def __getitem__(self, index: int) -> TaskRecord:
        return self.tasks[index]


__all__ = ["TaskDocument"]
