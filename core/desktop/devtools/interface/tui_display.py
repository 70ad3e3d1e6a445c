"""Display utilities mixin for TUI - text width, trimming, padding, wrapping."""

from typing import List, Tuple

from wcwidth import wcwidth


def _char_width(ch: str) -> int:
    w = wcwidth(ch)
    if w is None or w < 0:
        return 0
    return w


class DisplayMixin:
    """Mixin providing text display utilities with proper Unicode width handling."""

    @staticmethod
    def _display_width(text: str) -> int:
        """Return visual width of text accounting for wide/narrow characters."""
        return sum(_char_width(ch) for ch in text)

    def _trim_display(self, text: str, width: int) -> str:
        """Trim text so visible width doesn't exceed specified width."""
        acc = []
        used = 0
        for ch in text:
            w = _char_width(ch)
            if used + w > width:
                break
            acc.append(ch)
            used += w
        return "".join(acc)

    def _pad_display(self, text: str, width: int) -> str:
        """Trim and pad with spaces to exact visible width."""
        trimmed = self._trim_display(text, width)
        trimmed_width = self._display_width(trimmed)
        if trimmed_width < width:
            trimmed += " " * (width - trimmed_width)
        return trimmed

    def _wrap_display(self, text: str, width: int) -> List[str]:
        """Wrap text into lines of fixed visible width."""
        lines: List[str] = []
        current = ""
        used = 0
        for ch in text:
            w = _char_width(ch)
            if used + w > width and current:
                lines.append(self._pad_display(current, width))
                current = ch
                used = w
            else:
                current += ch
                used += w
        lines.append(self._pad_display(current, width))
        return lines

    def _wrap_cursor(self, text: str, cursor: int, width: int) -> Tuple[int, int]:
        """Return (row, column) of the insertion point ``cursor`` in ``_wrap_display(text, width)``.

        A cursor sitting exactly at the right edge moves to the start of the next row.
        """
        row = 0
        used = 0
        current = False
        for ch in text[:cursor]:
            w = _char_width(ch)
            if used + w > width and current:
                row += 1
                used = w
            else:
                used += w
            current = True
        following = _char_width(text[cursor]) if cursor < len(text) else 1
        if current and used + following > width:
            return row + 1, 0
        return row, used


__all__ = ["DisplayMixin"]
