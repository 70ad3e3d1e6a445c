from pathlib import Path
from typing import List, Protocol, Sequence, Union

from core.task_record import TaskRecord


class TaskStore(Protocol):
    def load(self, path: Union[str, Path]) -> List[TaskRecord]:
        ...

    def save(self, path: Union[str, Path], records: Sequence[TaskRecord]) -> None:
        ...
