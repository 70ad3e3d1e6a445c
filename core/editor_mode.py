"""Interaction modes of the editor.

Exactly one mode is active at a time. Each mode is a frozen dataclass carrying
only the data that makes sense for it, so a "selecting with an edit buffer"
state cannot be represented.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Union


@dataclass(frozen=True)
class Browsing:
    """Nothing selected; only append and navigation apply."""


@dataclass(frozen=True)
class Selecting:
    index: int


@dataclass(frozen=True)
class Editing:
    """Inline edit of ``item``.

    ``placeholder`` marks a record created by insert/append for this edit;
    ``origin`` is the selection to return to if that placeholder is dropped
    (None when editing started from Browsing).
    """

    item: int
    cursor: int
    buffer: str
    placeholder: bool = field(default=False, compare=False)
    origin: Optional[int] = field(default=None, compare=False)

    def with_buffer(self, buffer: str, cursor: int) -> "Editing":
        return replace(self, buffer=buffer, cursor=cursor)


Mode = Union[Browsing, Selecting, Editing]


def mode_name(mode: Mode) -> str:
    if isinstance(mode, Editing):
        return "editing"
    if isinstance(mode, Selecting):
        return "selecting"
    return "browsing"


__all__ = ["Browsing", "Selecting", "Editing", "Mode", "mode_name"]
