"""One editing session: document + editor + save-on-mutation policy."""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from application.ports import TaskStore
from core.desktop.devtools.application.editor import TaskEditor
from core.desktop.devtools.application.task_document import TaskDocument
from core.editor_mode import mode_name

logger = logging.getLogger("tplan.session")


class Intent(Enum):
    QUIT = "quit"
    SELECT_FIRST = "select_first"
    SELECT_LAST = "select_last"
    SELECT_NEXT = "select_next"
    SELECT_PREV = "select_prev"
    CLEAR_SELECTION = "clear_selection"
    TOGGLE = "toggle_completion"
    DELETE = "delete_selected"
    EDIT = "begin_edit"
    INSERT_BEFORE = "begin_insert_before"
    APPEND_AFTER = "begin_append_after"
    INSERT_CHAR = "insert_char"
    BACKSPACE = "backspace"
    DELETE_FORWARD = "delete_forward"
    CURSOR_LEFT = "cursor_left"
    CURSOR_RIGHT = "cursor_right"
    CURSOR_HOME = "cursor_home"
    CURSOR_END = "cursor_end"
    COMMIT = "commit_edit"
    CANCEL = "cancel_edit"


class TodoSession:
    """Owns the document and the editor for the lifetime of the UI.

    ``dispatch`` runs one intent and, when it left the document dirty, saves
    before returning. Save failures propagate as ``TodoFileError``.
    """

    def __init__(self, document: TaskDocument):
        self.document = document
        self.editor = TaskEditor(document)

    @classmethod
    def open(cls, path: Union[str, Path], store: Optional[TaskStore] = None) -> "TodoSession":
        return cls(TaskDocument.load(path, store=store))

    @property
    def mode(self):
        return self.editor.mode

    @property
    def running(self) -> bool:
        return self.editor.running

    def dispatch(self, intent: Intent, char: Optional[str] = None) -> bool:
        """Apply ``intent``; return True when the screen needs a redraw."""
        handler = getattr(self.editor, intent.value)
        changed = handler(char or "") if intent is Intent.INSERT_CHAR else handler()
        self.flush()
        if changed:
            logger.debug("%s -> %s", intent.name, mode_name(self.mode))
        return bool(changed)

    def flush(self) -> None:
        if not self.editor.dirty:
            return
        self.document.save()
        self.editor.mark_clean()
        logger.debug("saved %s (%d tasks)", self.document.path, len(self.document))


__all__ = ["Intent", "TodoSession"]
