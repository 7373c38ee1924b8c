"""Events a terminal sends to whoever renders it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional


class ClickState(Enum):
    NONE = "none"
    CLICK = "click"
    DOUBLE_CLICK = "double_click"
    TRIPLE_CLICK = "triple_click"


class EventKind(Enum):
    """The kinds of terminal event."""

    PREPARE_RENDER = "PrepareRender"
    RENDER = "Render"
    MOUSE_CURSOR_DIRTY = "MouseCursorDirty"
    TITLE = "Title"
    RESET_TITLE = "ResetTitle"
    CLIPBOARD_STORE = "ClipboardStore"
    CLIPBOARD_LOAD = "ClipboardLoad"
    PTY_WRITE = "PtyWrite"
    TEXT_AREA_SIZE_REQUEST = "TextAreaSizeRequest"
    CURSOR_BLINKING_CHANGE = "CursorBlinkingChange"
    WAKEUP = "Wakeup"
    BELL = "Bell"
    EXIT = "Exit"


_NEEDS_TEXT = {EventKind.TITLE, EventKind.CLIPBOARD_STORE, EventKind.PTY_WRITE}
_NEEDS_CLIPBOARD = {EventKind.CLIPBOARD_STORE, EventKind.CLIPBOARD_LOAD}
_NEEDS_FORMATTER = {EventKind.CLIPBOARD_LOAD, EventKind.TEXT_AREA_SIZE_REQUEST}


def _name(value: Any) -> str:
    return value.name if isinstance(value, Enum) else str(value)


@dataclass(frozen=True)
class RioEvent:
    """A terminal event and the payload its kind carries.

    ``text`` belongs to Title, ClipboardStore and PtyWrite; ``clipboard`` to
    the clipboard events; ``formatter`` to ClipboardLoad and
    TextAreaSizeRequest; ``millis`` to PrepareRender.
    """

    kind: EventKind
    text: Optional[str] = None
    clipboard: Any = None
    formatter: Optional[Callable[[Any], str]] = None
    millis: Optional[int] = None

    def __post_init__(self) -> None:
        kind = self.kind
        if kind in _NEEDS_TEXT and self.text is None:
            raise ValueError(f"{kind.value} needs text")
        if kind in _NEEDS_CLIPBOARD and self.clipboard is None:
            raise ValueError(f"{kind.value} needs a clipboard type")
        if kind in _NEEDS_FORMATTER and self.formatter is None:
            raise ValueError(f"{kind.value} needs a formatter")
        if kind is EventKind.PREPARE_RENDER and self.millis is None:
            raise ValueError("PrepareRender needs millis")

    def __str__(self) -> str:
        kind = self.kind
        if kind is EventKind.CLIPBOARD_STORE:
            return f"{kind.value}({_name(self.clipboard)}, {self.text})"
        if kind is EventKind.CLIPBOARD_LOAD:
            return f"{kind.value}({_name(self.clipboard)})"
        if kind in (EventKind.PTY_WRITE, EventKind.TITLE):
            return f"{kind.value}({self.text})"
        if kind is EventKind.PREPARE_RENDER:
            return f"{kind.value}({self.millis})"
        return kind.value


class EventListener:
    """Receives terminal events; the default ignores them."""

    def send_event(self, event: RioEvent) -> None:
        return None


class VoidListener(EventListener):
    """A listener that drops every event."""