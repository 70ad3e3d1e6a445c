"""Key -> intent resolution, per editor mode."""

from typing import Dict, Optional, Tuple

from core.editor_mode import Browsing, Editing, Mode, Selecting
from core.desktop.devtools.application.session import Intent

# prompt_toolkit key names -> the symbolic names used in the tables below
KEY_ALIASES: Dict[str, str] = {
    "c-m": "enter",
    "c-j": "enter",
    "enter": "enter",
    "c-h": "backspace",
    "backspace": "backspace",
    "escape": "escape",
    "delete": "delete",
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "home": "home",
    "end": "end",
    "space": " ",
}

NAVIGATION_KEYS: Dict[str, Intent] = {
    "g": Intent.SELECT_FIRST,
    "home": Intent.SELECT_FIRST,
    "G": Intent.SELECT_LAST,
    "end": Intent.SELECT_LAST,
    "j": Intent.SELECT_NEXT,
    "down": Intent.SELECT_NEXT,
    "k": Intent.SELECT_PREV,
    "up": Intent.SELECT_PREV,
}

BROWSING_KEYS: Dict[str, Intent] = {
    **NAVIGATION_KEYS,
    "q": Intent.QUIT,
    "escape": Intent.QUIT,
    "a": Intent.APPEND_AFTER,
}

SELECTING_KEYS: Dict[str, Intent] = {
    **NAVIGATION_KEYS,
    " ": Intent.TOGGLE,
    "enter": Intent.TOGGLE,
    "x": Intent.DELETE,
    "delete": Intent.DELETE,
    "i": Intent.INSERT_BEFORE,
    "a": Intent.APPEND_AFTER,
    "c": Intent.EDIT,
    "e": Intent.EDIT,
    "q": Intent.QUIT,
    "escape": Intent.CLEAR_SELECTION,
}

EDITING_KEYS: Dict[str, Intent] = {
    "escape": Intent.CANCEL,
    "enter": Intent.COMMIT,
    "backspace": Intent.BACKSPACE,
    "delete": Intent.DELETE_FORWARD,
    "left": Intent.CURSOR_LEFT,
    "right": Intent.CURSOR_RIGHT,
    "home": Intent.CURSOR_HOME,
    "end": Intent.CURSOR_END,
}


def normalize_key(key) -> str:
    """Map a prompt_toolkit key (Keys member or typed character) to a symbolic name."""
    name = getattr(key, "value", key)
    if not isinstance(name, str):
        return ""
    return KEY_ALIASES.get(name, name)


def resolve_intent(mode: Mode, key) -> Optional[Tuple[Intent, Optional[str]]]:
    """Return ``(intent, char)`` for ``key`` in ``mode``, or None if the key is unbound.

    ``char`` is only set for Intent.INSERT_CHAR.
    """
    name = normalize_key(key)
    if not name:
        return None
    if isinstance(mode, Editing):
        intent = EDITING_KEYS.get(name)
        if intent is not None:
            return intent, None
        if len(name) == 1 and name.isprintable():
            return Intent.INSERT_CHAR, name
        return None
    table = SELECTING_KEYS if isinstance(mode, Selecting) else BROWSING_KEYS
    intent = table.get(name)
    return (intent, None) if intent is not None else None


def footer_hints(mode: Mode) -> Tuple[Tuple[str, str], ...]:
    if isinstance(mode, Editing):
        return (("Enter", "save"), ("Esc", "cancel"), ("←/→", "move"))
    if isinstance(mode, Selecting):
        return (
            ("j/k", "move"),
            ("Space", "done"),
            ("e", "edit"),
            ("i/a", "insert/append"),
            ("x", "delete"),
            ("q", "quit"),
        )
    if isinstance(mode, Browsing):
        return (("j/k", "select"), ("a", "append"), ("q", "quit"))
    return ()


__all__ = ["resolve_intent", "normalize_key", "footer_hints", "KEY_ALIASES"]
