import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Union

from core.task_record import TaskRecord
from infrastructure.task_line_codec import TaskLineCodec

logger = logging.getLogger("tplan.storage")

PathLike = Union[str, Path]


class TodoFileError(Exception):
    """Reading, creating or writing the todo file failed.

    The originating OSError/UnicodeDecodeError is kept as ``__cause__``.
    """

    def __init__(self, action: str, path: PathLike, reason: BaseException):
        self.action = action
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot {action} {self.path}: {reason}")


def load_document(path: PathLike) -> List[TaskRecord]:
    """Read every task from ``path``.

    A missing file is created empty (parent directories included) and yields
    an empty list.
    """
    target = Path(path)
    if not target.exists():
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("", encoding="utf-8")
        except OSError as exc:
            raise TodoFileError("create", target, exc) from exc
        logger.info("created empty todo file %s", target)
        return []
    try:
        content = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TodoFileError("read", target, exc) from exc
    records = TaskLineCodec.parse_text(content)
    logger.debug("loaded %d tasks from %s", len(records), target)
    return records


def save_document(path: PathLike, records: Sequence[TaskRecord]) -> None:
    """Replace ``path`` with the formatted records.

    The content goes to a temp file next to the target which is then renamed
    over it, so a reader sees either the old or the new file, never a mix.
    """
    target = Path(path)
    data = TaskLineCodec.format_text(records).encode("utf-8")
    tmp_path: Optional[Path] = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="wb",
            delete=False,
            dir=str(target.parent),
            prefix=f".{target.name}.",
            suffix=".tmp",
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(str(tmp_path), str(target))
    except OSError as exc:
        raise TodoFileError("write", target, exc) from exc
    finally:
        if tmp_path and tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                pass
    logger.debug("saved %d tasks to %s", len(records), target)


class FileTodoStore:
    """TaskStore backed by a plain-text file on disk."""

    def load(self, path: PathLike) -> List[TaskRecord]:
        return load_document(path)

    def save(self, path: PathLike, records: Sequence[TaskRecord]) -> None:
        save_document(path, records)


__all__ = ["TodoFileError", "FileTodoStore", "load_document", "save_document"]
