from __future__ import annotations

import sys
import threading
from typing import List, TextIO

from display import DisplayDriver, DisplayItem

INNER_W = 32

BOLD = "\033[1m"
RESET = "\033[0m"


class ConsoleDisplayDriver(DisplayDriver):
    """Рисует фразу в рамке; выделенная строка — жирным или заглавными."""

    def __init__(self, highlight: str = "bold", stream: TextIO | None = None):
        self._items: List[DisplayItem] = []
        self._lock = threading.Lock()
        self._highlight = highlight
        self._stream = stream or sys.stdout

    def draw(self, item: DisplayItem) -> None:
        with self._lock:
            # заменяем предыдущий такой же kind
            self._items = [i for i in self._items if i.kind != item.kind]
            # payload=None → убрать из кеша, не добавляя нового
            if item.payload is not None:
                self._items.append(item)
            panel = self._render_panel()
        self._stream.write(panel)
        self._stream.flush()

    def forget(self, kind: str) -> None:
        with self._lock:
            self._items = [i for i in self._items if i.kind != kind]

    def process_events(self) -> None:
        pass

    def _emphasize(self, text: str) -> str:
        if self._highlight == "upper":
            return text.upper().center(INNER_W)[:INNER_W]
        # центрируем до вставки escape-последовательностей
        return BOLD + text.center(INNER_W)[:INNER_W] + RESET

    def _render_panel(self) -> str:
        phrase_item = next((i for i in self._items if i.kind == "phrase"), None)
        text_item = next((i for i in self._items if i.kind == "text"), None)

        lines = ["┌" + "─" * INNER_W + "┐"]

        # три строки фразы, пустые тоже, чтобы высота не прыгала
        phrase = phrase_item.payload if phrase_item else None
        for idx in (1, 2, 3):
            text = phrase.lines[idx - 1] if phrase is not None else ""
            if phrase is not None and idx == phrase.highlight_line:
                body = self._emphasize(text)
            else:
                body = text.center(INNER_W)[:INNER_W]
            lines.append("│" + body + "│")

        footer = str(text_item.payload) if text_item else ""
        lines.append("│" + footer.center(INNER_W)[:INNER_W] + "│")
        lines.append("└" + "─" * INNER_W + "┘")
        return "\n".join(lines) + "\n"
