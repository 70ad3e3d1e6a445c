#!/usr/bin/env python3
"""TUI application - TodoTUI class and cmd_tui command."""

import logging
import os
from typing import Optional, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.data_structures import Point
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from config import get_user_theme, get_user_ttimeoutlen
from core.editor_mode import Editing
from core.desktop.devtools.application.session import TodoSession
from core.desktop.devtools.interface.todo_path_resolver import resolve_todo_path
from core.desktop.devtools.interface.tui_keymap import resolve_intent
from core.desktop.devtools.interface.tui_render import (
    render_footer_text,
    render_header_text,
    render_task_list_text,
)
from infrastructure.file_repository import TodoFileError

from .tui_display import DisplayMixin
from .tui_themes import DEFAULT_THEME, build_style

logger = logging.getLogger("tplan.tui")

CHROME_ROWS = 2  # header + footer


class TodoTUI(DisplayMixin):
    @staticmethod
    def get_theme_palette(theme: str):
        from .tui_themes import get_theme_palette as _get_theme_palette
        return _get_theme_palette(theme)

    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(
        self,
        session: TodoSession,
        theme: str = DEFAULT_THEME,
        ttimeoutlen: Optional[float] = None,
        *,
        input=None,
        output=None,
    ):
        self.session = session
        self.view_offset: int = 0
        self.cursor_cell: Optional[Tuple[int, int]] = None
        self.error: Optional[TodoFileError] = None
        self.style = self.build_style(theme)

        kb = KeyBindings()
        kb.timeout = 0

        @kb.add("escape", eager=True)
        def _(event):
            self.handle_key(Keys.Escape)

        @kb.add("c-c")
        def _(event):
            """Ctrl+C - leave without touching the document."""
            self.session.editor.quit()
            self._exit()

        @kb.add(Keys.Any)
        def _(event):
            key = event.key_sequence[0].key if event.key_sequence else None
            self.handle_key(key)

        self.header = Window(content=FormattedTextControl(self.get_header_text), height=1, always_hide_cursor=True)
        self.footer = Window(content=FormattedTextControl(self.get_footer_text), height=1, always_hide_cursor=True)
        self.task_list_control = FormattedTextControl(
            self.get_task_list_text,
            focusable=True,
            show_cursor=True,
            get_cursor_position=self.get_cursor_position,
        )
        self.task_list = Window(
            content=self.task_list_control,
            wrap_lines=False,
            always_hide_cursor=Condition(lambda: not isinstance(self.session.mode, Editing)),
        )

        root = HSplit([self.header, self.task_list, self.footer])

        self.app = Application(
            layout=Layout(root, focused_element=self.task_list),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            input=input,
            output=output,
        )
        # Esc must not wait for the default 0.5s escape-sequence timeout.
        if ttimeoutlen is None:
            ttimeoutlen = get_user_ttimeoutlen()
        self.app.ttimeoutlen = max(0.0, ttimeoutlen)

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    @staticmethod
    def get_terminal_height() -> int:
        try:
            return os.get_terminal_size().lines
        except (AttributeError, ValueError, OSError):
            return 40

    def get_header_text(self) -> FormattedText:
        return render_header_text(self)

    def get_footer_text(self) -> FormattedText:
        return render_footer_text(self)

    def get_task_list_text(self) -> FormattedText:
        height = max(1, self.get_terminal_height() - CHROME_ROWS)
        return render_task_list_text(self, self.get_terminal_width(), height)

    def get_cursor_position(self) -> Optional[Point]:
        if self.cursor_cell is None:
            return None
        row, col = self.cursor_cell
        return Point(x=col, y=row)

    def force_render(self) -> None:
        self.app.invalidate()

    def handle_key(self, key) -> bool:
        """Resolve ``key`` for the current mode and run it; return True if state changed."""
        resolved = resolve_intent(self.session.mode, key)
        if resolved is None:
            return False
        intent, char = resolved
        try:
            changed = self.session.dispatch(intent, char)
        except TodoFileError as exc:
            logger.error("save failed: %s", exc)
            self.error = exc
            self._exit()
            return False
        if not self.session.running:
            self._exit()
        elif changed:
            self.force_render()
        return changed

    def _exit(self) -> None:
        if self.app.is_running:
            self.app.exit()

    def run(self) -> None:
        self.app.run()
        if self.error is not None:
            raise self.error


def cmd_tui(args) -> int:
    path = resolve_todo_path(getattr(args, "file", None))
    session = TodoSession.open(path)
    logger.info("opened %s with %d tasks", path, len(session.document))
    tui = TodoTUI(session, theme=getattr(args, "theme", None) or get_user_theme() or DEFAULT_THEME)
    tui.run()
    return 0
