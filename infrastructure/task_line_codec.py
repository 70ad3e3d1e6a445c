"""Line format of the todo file.

    x buy milk        <- completed
      cook dinner     <- pending (two leading spaces)

A line is completed when it starts with a lowercase ``x`` in the first column
followed by whitespace or the end of the line. Pending lines are written
indented, so a summary that itself starts with ``x`` stays pending on reload.
"""

from typing import Iterable, List

from core.task_record import TaskRecord

COMPLETED_MARK = "x"
COMPLETED_PREFIX = "x "
PENDING_PREFIX = "  "


class TaskLineCodec:
    @staticmethod
    def is_completed_line(line: str) -> bool:
        if not line.startswith(COMPLETED_MARK):
            return False
        rest = line[len(COMPLETED_MARK):]
        return not rest or rest[0].isspace()

    @classmethod
    def parse_line(cls, line: str) -> TaskRecord:
        if cls.is_completed_line(line):
            return TaskRecord(completed=True, summary=line[len(COMPLETED_MARK):].strip())
        return TaskRecord(completed=False, summary=line.strip())

    @staticmethod
    def format_line(record: TaskRecord) -> str:
        prefix = COMPLETED_PREFIX if record.completed else PENDING_PREFIX
        summary = record.summary.replace("\r", " ").replace("\n", " ")
        return f"{prefix}{summary}"

    @classmethod
    def parse_text(cls, content: str) -> List[TaskRecord]:
        records: List[TaskRecord] = []
        for raw in content.split("\n"):
            line = raw.rstrip("\r")
            # whitespace-only lines are kept: "  " is a pending task with an empty summary
            if not line:
                continue
            records.append(cls.parse_line(line))
        return records

    @classmethod
    def format_text(cls, records: Iterable[TaskRecord]) -> str:
        return "".join(f"{cls.format_line(record)}\n" for record in records)


parse_line = TaskLineCodec.parse_line
format_line = TaskLineCodec.format_line
parse_text = TaskLineCodec.parse_text
format_text = TaskLineCodec.format_text

__all__ = ["TaskLineCodec", "parse_line", "format_line", "parse_text", "format_text"]
