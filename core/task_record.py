from dataclasses import dataclass


@dataclass
class TaskRecord:
    """One line of the todo file: a completion flag and a single-line summary."""

    completed: bool = False
    summary: str = ""

    def toggle(self) -> None:
        self.completed = not self.completed

    @property
    def is_blank(self) -> bool:
        return not self.summary
