"""Rendering helpers for TodoTUI to keep the class slim."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core.editor_mode import Editing, Selecting
from core.desktop.devtools.interface.tui_keymap import footer_hints

ROW_INDENT = "  "
TITLE = "TPLAN"

Line = List[Tuple[str, str]]


@dataclass
class TaskListLayout:
    """Every wrapped line of the task list plus where the focus sits."""

    lines: List[Line] = field(default_factory=list)
    focus_start: Optional[int] = None
    focus_end: Optional[int] = None
    cursor: Optional[Tuple[int, int]] = None  # (line, column) of the edit cursor


def _row_style(tui, index: int, record) -> str:
    mode = tui.session.mode
    if isinstance(mode, Editing) and mode.item == index:
        return "class:editing"
    if isinstance(mode, Selecting) and mode.index == index:
        return "class:text.done class:selected" if record.completed else "class:selected"
    if record.completed:
        return "class:text.done"
    return "class:text"


def layout_task_list(tui, width: int) -> TaskListLayout:
    """Wrap each task to ``width`` columns, one block of lines per task."""
    text_width = max(1, width - len(ROW_INDENT))
    mode = tui.session.mode
    layout = TaskListLayout()
    for index, record in enumerate(tui.session.document.tasks):
        editing = isinstance(mode, Editing) and mode.item == index
        text = mode.buffer if editing else record.summary
        style = _row_style(tui, index, record)
        wrapped = tui._wrap_display(text, text_width)
        start = len(layout.lines)
        if editing:
            row, col = tui._wrap_cursor(text, mode.cursor, text_width)
            while row >= len(wrapped):
                wrapped.append(" " * text_width)
            layout.cursor = (start + row, len(ROW_INDENT) + col)
        for chunk in wrapped:
            layout.lines.append([("", ROW_INDENT), (style, chunk)])
        if editing or (isinstance(mode, Selecting) and mode.index == index):
            layout.focus_start = start
            layout.focus_end = len(layout.lines) - 1
    return layout


def scroll_to_focus(offset: int, layout: TaskListLayout, height: int) -> int:
    """Return a view offset that keeps the focused block on screen."""
    total = len(layout.lines)
    height = max(1, height)
    if layout.focus_start is not None:
        focus_end = layout.focus_end if layout.focus_end is not None else layout.focus_start
        if layout.cursor is not None:
            # a long edit row only needs the cursor line visible
            focus_start = focus_end = layout.cursor[0]
        else:
            focus_start = layout.focus_start
        if focus_end >= offset + height:
            offset = focus_end - height + 1
        if focus_start < offset:
            offset = focus_start
    return max(0, min(offset, max(0, total - height)))


def render_task_list_text(tui, width: int, height: int) -> FormattedText:
    layout = layout_task_list(tui, width)
    tui.view_offset = scroll_to_focus(tui.view_offset, layout, height)
    visible = layout.lines[tui.view_offset: tui.view_offset + max(1, height)]
    fragments: List[Tuple[str, str]] = []
    for i, line in enumerate(visible):
        if i:
            fragments.append(("", "\n"))
        fragments.extend(line)
    if layout.cursor is not None:
        row, col = layout.cursor
        tui.cursor_cell = (row - tui.view_offset, col)
    else:
        tui.cursor_cell = None
    return FormattedText(fragments)


def render_header_text(tui) -> FormattedText:
    tasks = tui.session.document.tasks
    done = sum(1 for t in tasks if t.completed)
    return FormattedText([
        ("class:header", TITLE),
        ("class:border", "  "),
        ("class:footer", f"{done}/{len(tasks)}  {tui.session.document.path}"),
    ])


def render_footer_text(tui) -> FormattedText:
    fragments: List[Tuple[str, str]] = []
    for key, label in footer_hints(tui.session.mode):
        if fragments:
            fragments.append(("class:border", " · "))
        fragments.append(("class:footer.key", key))
        fragments.append(("class:footer", f" {label}"))
    return FormattedText(fragments)


__all__ = [
    "TaskListLayout",
    "layout_task_list",
    "scroll_to_focus",
    "render_task_list_text",
    "render_header_text",
    "render_footer_text",
]
