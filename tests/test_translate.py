import pytest

from ponsic.events import (
    Button,
    ButtonStatus,
    CursorAt,
    InputEvent,
    Key,
    KeyEvent,
    KeyStatus,
    MinMaxInfo,
    ModifierKey,
    MouseEvent,
    MouseModifier,
    MoveEvent,
    NoClientCreate,
    NoClientHitTest,
    NoClientLeave,
    NoClientMouse,
    NoClientMove,
    OtherEvent,
    PaintEvent,
    RefRect,
    Return,
    ReturnData,
    SizeChanged,
    SizeChangeType,
    SizeChanging,
    SizeRange,
    SizingSide,
    UnknownKey,
    UnknownSizeChange,
    UnknownSizingSide,
    UserDefined,
    WheelEvent,
    Wheel,
    WindowClose,
    WindowCreate,
    WindowDestroy,
    WindowMove,
)
from ponsic.translate import (
    Events,
    is_high_surrogate,
    is_low_surrogate,
    make_procedure,
    translate,
    utf16_to_utf32,
    vk_to_key,
)

HWND = object()


def pack(x, y):
    return (x & 0xFFFF) | ((y & 0xFFFF) << 16)


@pytest.mark.parametrize(
    "vk, key",
    [
        (0x30, Key.NUM0),
        (0x39, Key.NUM9),
        (0x41, Key.A),
        (0x5A, Key.Z),
        (0x60, Key.NUMPAD0),
        (0x70, Key.F1),
        (0x7B, Key.F12),
        (0x0D, Key.ENTER),
        (0x20, Key.SPACE),
        (0xBA, Key.SEMICOLON),
        (0x25, Key.LEFT),
        (0x01, Key.LEFT_BUTTON),
        (0x12, Key.ALT),
    ],
)
def test_vk_to_key_named(vk, key):
    assert vk_to_key(vk) is key


def test_vk_to_key_unknown_keeps_code():
    assert vk_to_key(0xFF) == UnknownKey(0xFF)


def test_letters_follow_their_codes():
    letters = [vk_to_key(code) for code in range(ord("A"), ord("Z") + 1)]
    assert [key.name for key in letters] == [chr(c) for c in range(ord("A"), ord("Z") + 1)]


@pytest.mark.parametrize(
    "msg, button, status",
    [
        (0x0201, Button.LEFT, ButtonStatus.DOWN),
        (0x0202, Button.LEFT, ButtonStatus.UP),
        (0x0203, Button.LEFT, ButtonStatus.DOUBLE_CLICK),
        (0x0204, Button.RIGHT, ButtonStatus.DOWN),
        (0x0207, Button.MIDDLE, ButtonStatus.DOWN),
        (0x0209, Button.MIDDLE, ButtonStatus.DOUBLE_CLICK),
    ],
)
def test_mouse_buttons(msg, button, status):
    event = translate(HWND, msg, 0, pack(10, 20))
    assert event == MouseEvent(button, (10, 20), status, None)


@pytest.mark.parametrize(
    "wparam, modifier",
    [
        (0x0001, MouseModifier(Button.LEFT)),
        (0x0002, MouseModifier(Button.RIGHT)),
        (0x0004, ModifierKey.SHIFT),
        (0x0008, ModifierKey.CTRL),
        (0x0000, None),
        (0x0009, None),
    ],
)
def test_mouse_move_modifier(wparam, modifier):
    assert translate(HWND, 0x0200, wparam, pack(3, 4)) == MoveEvent((3, 4), modifier)


def test_extra_mouse_buttons():
    assert translate(HWND, 0x020B, 1 << 16, 0).button is Button.X1
    assert translate(HWND, 0x020C, 2 << 16, 0).button is Button.X2
    with pytest.raises(ValueError):
        translate(HWND, 0x020B, 3 << 16, 0)


def test_key_events():
    down = translate(HWND, 0x0100, 0x41, 0x00800000)
    assert down == KeyEvent(Key.A, True, KeyStatus.DOWN)
    up = translate(HWND, 0x0101, 0x41, 0)
    assert up == KeyEvent(Key.A, False, KeyStatus.UP)


def test_wheel_direction():
    up = translate(HWND, 0x020A, 120 << 16, pack(1, 2))
    assert up == WheelEvent((1, 2), Wheel.UP, None)
    down = translate(HWND, 0x020A, ((-120) & 0xFFFF) << 16, pack(1, 2))
    assert down.wheel is Wheel.DOWN


def test_wheel_modifier_uses_low_word():
    event = translate(HWND, 0x020A, (120 << 16) | 0x0008, 0)
    assert event.modifier is ModifierKey.CTRL


def test_char_input():
    assert translate(HWND, 0x0102, ord("x"), 0) == InputEvent(ord("x"))


@pytest.mark.parametrize(
    "msg, event",
    [
        (0x0002, WindowDestroy()),
        (0x0001, WindowCreate()),
        (0x0010, WindowClose()),
        (0x02A2, NoClientLeave()),
        (0x0081, NoClientCreate()),
    ],
)
def test_simple_messages(msg, event):
    assert translate(HWND, msg, 0, 0) == event


def test_paint_carries_window():
    assert translate(HWND, 0x000F, 0, 0) == PaintEvent(HWND)


def test_size_range_edits_in_place():
    info = MinMaxInfo()
    event = translate(HWND, 0x0024, 0, info)
    assert event == SizeRange(info)
    event.info.max_width = 640
    assert info.max_width == 640


def test_size_range_needs_info():
    with pytest.raises(TypeError):
        translate(HWND, 0x0024, 0, 0)


def test_sizing_edits_in_place():
    rect = RefRect(0, 0, 10, 10)
    event = translate(HWND, 0x0214, 8, rect)
    assert event == SizeChanging(rect, SizingSide.BOTTOM_RIGHT)
    event.rect.right = 50
    assert rect.right == 50


def test_sizing_unknown_side():
    event = translate(HWND, 0x0214, 42, RefRect(0, 0, 1, 1))
    assert event.side == UnknownSizingSide(42)
    with pytest.raises(TypeError):
        translate(HWND, 0x0214, 1, 0)


def test_size_changed():
    event = translate(HWND, 0x0005, 2, (300 << 16) | 200)
    assert event == SizeChanged(300, 200, SizeChangeType.MAXIMIZE)
    other = translate(HWND, 0x0005, 7, 0)
    assert other.kind == UnknownSizeChange(7)


def test_window_move():
    assert translate(HWND, 0x0003, 0, pack(15, 25)) == WindowMove((15, 25))


def test_hit_test_signed_y():
    assert translate(HWND, 0x0084, 0, 5 | (-3 << 16)) == NoClientHitTest(5, -3)


def test_nc_move_signed_points():
    event = translate(HWND, 0x00A0, int(CursorAt.CAPTION), pack(-5, 7))
    assert event == NoClientMove((-5, 7), CursorAt.CAPTION)


def test_nc_move_bad_hit_code():
    with pytest.raises(ValueError):
        translate(HWND, 0x00A0, 0xFFFE, 0)


def test_nc_mouse_button():
    event = translate(HWND, 0x00A1, int(CursorAt.CLIENT), pack(4, 6))
    assert event == NoClientMouse(Button.LEFT, (4, 6), ButtonStatus.DOWN, CursorAt.CLIENT)


def test_user_and_other_messages():
    assert translate(HWND, 0x0400, 1, 2) == UserDefined(0x0400, 1, 2)
    assert translate(HWND, 0x0006, 1, 2) == OtherEvent(0x0006, 1, 2)


def test_surrogate_ranges():
    assert is_high_surrogate(0xD800) and is_high_surrogate(0xDBFF)
    assert not is_high_surrogate(0xDC00)
    assert is_low_surrogate(0xDC00) and is_low_surrogate(0xDFFF)
    assert not is_low_surrogate(0xDBFF)


@pytest.mark.parametrize("text", ["\U0001F600", "\U00010000", "\U0010FFFF"])
def test_utf16_pair_round_trip(text):
    raw = text.encode("utf-16-le")
    high = int.from_bytes(raw[0:2], "little")
    low = int.from_bytes(raw[2:4], "little")
    assert utf16_to_utf32(high, low) == ord(text)


def test_utf16_rejects_bad_pair():
    with pytest.raises(ValueError):
        utf16_to_utf32(0x0041, 0xDC00)
    with pytest.raises(ValueError):
        utf16_to_utf32(0xD800, 0x0041)


def test_procedure_return_values():
    seen = []

    def fallback(hwnd, msg, wparam, lparam):
        return msg + 1000

    def handler(events):
        seen.append(events)
        if isinstance(events.event, WindowClose):
            return Return.FINISH
        if isinstance(events.event, WindowDestroy):
            return ReturnData(7)
        return Return.DEFAULT

    proc = make_procedure(handler, fallback)
    assert proc(HWND, 0x0010, 0, 0) == 0
    assert proc(HWND, 0x0002, 0, 0) == 7
    assert proc(HWND, 0x0006, 0, 0) == 0x0006 + 1000
    assert seen[0] == Events(HWND, WindowClose())


def test_procedure_rejects_bad_result():
    proc = make_procedure(lambda events: 5, lambda *args: 0)
    with pytest.raises(TypeError):
        proc(HWND, 0x0010, 0, 0)