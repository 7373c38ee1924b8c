import pytest

from termgrid.event import ClickState, EventKind, EventListener, RioEvent, VoidListener


@pytest.mark.parametrize(
    "kind",
    [
        EventKind.RENDER,
        EventKind.BELL,
        EventKind.EXIT,
        EventKind.WAKEUP,
        EventKind.RESET_TITLE,
        EventKind.MOUSE_CURSOR_DIRTY,
        EventKind.CURSOR_BLINKING_CHANGE,
    ],
)
def test_plain_events_print_their_name(kind):
    assert str(RioEvent(kind)) == kind.value


def test_named_values_render_as_text():
    assert str(RioEvent(EventKind.RENDER)) == "Render"
    assert str(RioEvent(EventKind.CURSOR_BLINKING_CHANGE)) == "CursorBlinkingChange"


def test_pty_write_str():
    assert str(RioEvent(EventKind.PTY_WRITE, text="ls")) == "PtyWrite(ls)"


def test_title_str():
    assert str(RioEvent(EventKind.TITLE, text="shell")) == "Title(shell)"


def test_prepare_render_str():
    assert str(RioEvent(EventKind.PREPARE_RENDER, millis=16)) == "PrepareRender(16)"


def test_clipboard_store_str_contains_type_and_text():
    event = RioEvent(EventKind.CLIPBOARD_STORE, text="data", clipboard=ClickState.CLICK)
    rendered = str(event)
    assert rendered.startswith("ClipboardStore(CLICK, ")
    assert rendered.endswith("data)")


def test_clipboard_load_hides_formatter():
    event = RioEvent(
        EventKind.CLIPBOARD_LOAD, clipboard="Selection", formatter=lambda t: t.upper()
    )
    assert str(event) == "ClipboardLoad(Selection)"
    assert event.formatter("abc") == "ABC"


def test_text_area_request_str():
    event = RioEvent(EventKind.TEXT_AREA_SIZE_REQUEST, formatter=str)
    assert str(event) == "TextAreaSizeRequest"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"kind": EventKind.PTY_WRITE},
        {"kind": EventKind.TITLE},
        {"kind": EventKind.CLIPBOARD_STORE, "text": "x"},
        {"kind": EventKind.CLIPBOARD_LOAD, "clipboard": "Clipboard"},
        {"kind": EventKind.TEXT_AREA_SIZE_REQUEST},
        {"kind": EventKind.PREPARE_RENDER},
    ],
)
def test_missing_payload_raises(kwargs):
    with pytest.raises(ValueError):
        RioEvent(**kwargs)


def test_events_compare_by_value():
    assert RioEvent(EventKind.PTY_WRITE, text="a") == RioEvent(
        EventKind.PTY_WRITE, text="a"
    )
    assert RioEvent(EventKind.PTY_WRITE, text="a") != RioEvent(
        EventKind.PTY_WRITE, text="b"
    )


def test_listener_subclass_receives_events():
    class Recorder(EventListener):
        def __init__(self):
            self.seen = []

        def send_event(self, event):
            self.seen.append(event)

    recorder = Recorder()
    recorder.send_event(RioEvent(EventKind.BELL))
    assert [e.kind for e in recorder.seen] == [EventKind.BELL]
    assert VoidListener().send_event(RioEvent(EventKind.BELL)) is None
    assert isinstance(VoidListener(), EventListener)