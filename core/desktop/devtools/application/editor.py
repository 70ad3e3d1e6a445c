"""Editor state machine: the three interaction modes and their transitions.

Every operation is total. When its precondition does not hold (wrong mode,
empty document) it does nothing and returns False; otherwise it returns True
to signal an observable change. Operations that change the document set
``dirty``; persisting is left to the caller.
"""

from typing import List

from core.editor_mode import Browsing, Editing, Mode, Selecting
from core.task_record import TaskRecord
from core.desktop.devtools.application.task_document import TaskDocument


class BufferEditingMixin:
    """Cursor and text operations on the live edit buffer."""

    mode: Mode

    def _edit_state(self):
        return self.mode if isinstance(self.mode, Editing) else None

    def insert_char(self, char: str) -> bool:
        state = self._edit_state()
        if state is None or len(char) != 1 or char in "\r\n":
            return False
        buf = state.buffer[: state.cursor] + char + state.buffer[state.cursor:]
        self.mode = state.with_buffer(buf, state.cursor + 1)
        return True

    def backspace(self) -> bool:
        state = self._edit_state()
        if state is None or state.cursor == 0:
            return False
        cursor = state.cursor - 1
        self.mode = state.with_buffer(state.buffer[:cursor] + state.buffer[state.cursor:], cursor)
        return True

    def delete_forward(self) -> bool:
        state = self._edit_state()
        if state is None or state.cursor >= len(state.buffer):
            return False
        buf = state.buffer[: state.cursor] + state.buffer[state.cursor + 1:]
        self.mode = state.with_buffer(buf, state.cursor)
        return True

    def cursor_left(self) -> bool:
        state = self._edit_state()
        if state is None or state.cursor == 0:
            return False
        self.mode = state.with_buffer(state.buffer, state.cursor - 1)
        return True

    def cursor_right(self) -> bool:
        state = self._edit_state()
        if state is None or state.cursor >= len(state.buffer):
            return False
        self.mode = state.with_buffer(state.buffer, state.cursor + 1)
        return True

    def cursor_home(self) -> bool:
        state = self._edit_state()
        if state is None or state.cursor == 0:
            return False
        self.mode = state.with_buffer(state.buffer, 0)
        return True

    def cursor_end(self) -> bool:
        state = self._edit_state()
        if state is None or state.cursor == len(state.buffer):
            return False
        self.mode = state.with_buffer(state.buffer, len(state.buffer))
        return True


class TaskEditor(BufferEditingMixin):
    def __init__(self, document: TaskDocument):
        self.document = document
        self.mode: Mode = Browsing()
        self.dirty = False
        self.running = True

    @property
    def tasks(self) -> List[TaskRecord]:
        return self.document.tasks

    @property
    def selected_index(self):
        return self.mode.index if isinstance(self.mode, Selecting) else None

    def mark_clean(self) -> None:
        self.dirty = False

    def quit(self) -> bool:
        self.running = False
        return True

    # -------------------- selection --------------------
    def _select(self, index: int) -> bool:
        changed = False
        if isinstance(self.mode, Editing):
            self._discard_edit()
            changed = True
        if not self.tasks:
            return changed
        index = max(0, min(index, len(self.tasks) - 1))
        previous = self.mode
        self.mode = Selecting(index)
        return changed or previous != self.mode

    def select_first(self) -> bool:
        return self._select(0)

    def select_last(self) -> bool:
        return self._select(len(self.tasks) - 1)

    def select_next(self) -> bool:
        if isinstance(self.mode, Selecting):
            return self._select(self.mode.index + 1)
        return self._select(0)

    def select_prev(self) -> bool:
        if isinstance(self.mode, Selecting):
            return self._select(self.mode.index - 1)
        return self._select(0)

    def clear_selection(self) -> bool:
        if not isinstance(self.mode, Selecting):
            return False
        self.mode = Browsing()
        return True

    # -------------------- mutations --------------------
    def _selected_in_bounds(self):
        index = self.selected_index
        if index is None or not 0 <= index < len(self.tasks):
            return None
        return index

    def toggle_completion(self) -> bool:
        index = self._selected_in_bounds()
        if index is None:
            return False
        self.tasks[index].toggle()
        self.dirty = True
        return True

    def delete_selected(self) -> bool:
        index = self._selected_in_bounds()
        if index is None:
            return False
        del self.tasks[index]
        self.dirty = True
        # keep the selection on a live row: the next one, or the new last one
        self.mode = Selecting(min(index, len(self.tasks) - 1)) if self.tasks else Browsing()
        return True

    # -------------------- editing --------------------
    def begin_edit(self) -> bool:
        if isinstance(self.mode, Editing) or not self.tasks:
            return False
        index = self._selected_in_bounds()
        if index is None:
            index = 0
        text = self.tasks[index].summary
        self.mode = Editing(item=index, cursor=len(text), buffer=text, origin=index)
        return True

    def _begin_placeholder(self, index: int) -> bool:
        origin = self.selected_index
        self.tasks.insert(index, TaskRecord())
        self.mode = Editing(item=index, cursor=0, buffer="", placeholder=True, origin=origin)
        return True

    def begin_insert_before(self) -> bool:
        if isinstance(self.mode, Editing):
            return False
        index = self._selected_in_bounds()
        return self._begin_placeholder(max(index - 1, 0) if index is not None else 0)

    def begin_append_after(self) -> bool:
        if isinstance(self.mode, Editing):
            return False
        index = self._selected_in_bounds()
        return self._begin_placeholder(index + 1 if index is not None else len(self.tasks))

    def commit_edit(self) -> bool:
        state = self._edit_state()
        if state is None:
            return False
        # the line format cannot carry surrounding whitespace
        self.tasks[state.item].summary = state.buffer.strip()
        self.dirty = True
        self.mode = Selecting(state.item)
        return True

    def cancel_edit(self) -> bool:
        if self._edit_state() is None:
            return False
        self._discard_edit()
        return True

    def _discard_edit(self) -> None:
        state = self._edit_state()
        if state is None:
            return
        record = self.tasks[state.item]
        if not (state.placeholder and record.is_blank):
            self.mode = Selecting(state.item)
            return
        # the placeholder was never committed, so the file does not hold it yet
        del self.tasks[state.item]
        if not self.tasks or state.origin is None:
            self.mode = Browsing()
        else:
            self.mode = Selecting(min(state.origin, len(self.tasks) - 1))


__all__ = ["TaskEditor", "BufferEditingMixin"]
