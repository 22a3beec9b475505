"""Translation of raw window messages into event objects, and window procedures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .events import (
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
    WindowClose,
    WindowCreate,
    WindowDestroy,
    WindowMove,
    Wheel,
)

__all__ = [
    "Events",
    "vk_to_key",
    "translate",
    "is_high_surrogate",
    "is_low_surrogate",
    "utf16_to_utf32",
    "make_procedure",
]

_WM_CREATE = 0x0001
_WM_DESTROY = 0x0002
_WM_MOVE = 0x0003
_WM_SIZE = 0x0005
_WM_PAINT = 0x000F
_WM_CLOSE = 0x0010
_WM_GETMINMAXINFO = 0x0024
_WM_NCCREATE = 0x0081
_WM_NCHITTEST = 0x0084
_WM_NCMOUSEMOVE = 0x00A0
_WM_KEYDOWN = 0x0100
_WM_KEYUP = 0x0101
_WM_CHAR = 0x0102
_WM_MOUSEMOVE = 0x0200
_WM_MOUSEWHEEL = 0x020A
_WM_SIZING = 0x0214
_WM_NCMOUSELEAVE = 0x02A2
_WM_USER = 0x0400

_XBUTTON1 = 0x0001
_XBUTTON2 = 0x0002

# message -> (button, status); None for the button means "read the X button from wparam"
_MOUSE_BUTTONS: dict[int, tuple[Button | None, ButtonStatus]] = {
    0x0201: (Button.LEFT, ButtonStatus.DOWN),
    0x0202: (Button.LEFT, ButtonStatus.UP),
    0x0203: (Button.LEFT, ButtonStatus.DOUBLE_CLICK),
    0x0204: (Button.RIGHT, ButtonStatus.DOWN),
    0x0205: (Button.RIGHT, ButtonStatus.UP),
    0x0206: (Button.RIGHT, ButtonStatus.DOUBLE_CLICK),
    0x0207: (Button.MIDDLE, ButtonStatus.DOWN),
    0x0208: (Button.MIDDLE, ButtonStatus.UP),
    0x0209: (Button.MIDDLE, ButtonStatus.DOUBLE_CLICK),
    0x020B: (None, ButtonStatus.DOWN),
    0x020C: (None, ButtonStatus.UP),
    0x020D: (None, ButtonStatus.DOUBLE_CLICK),
}

_NC_MOUSE_BUTTONS: dict[int, tuple[Button | None, ButtonStatus]] = {
    0x00A1: (Button.LEFT, ButtonStatus.DOWN),
    0x00A2: (Button.LEFT, ButtonStatus.UP),
    0x00A3: (Button.LEFT, ButtonStatus.DOUBLE_CLICK),
    0x00A4: (Button.RIGHT, ButtonStatus.DOWN),
    0x00A5: (Button.RIGHT, ButtonStatus.UP),
    0x00A6: (Button.RIGHT, ButtonStatus.DOUBLE_CLICK),
    0x00A7: (Button.MIDDLE, ButtonStatus.DOWN),
    0x00A8: (Button.MIDDLE, ButtonStatus.UP),
    0x00A9: (Button.MIDDLE, ButtonStatus.DOUBLE_CLICK),
    0x00AB: (None, ButtonStatus.DOWN),
    0x00AC: (None, ButtonStatus.UP),
    0x00AD: (None, ButtonStatus.DOUBLE_CLICK),
}

_MODIFIERS: dict[int, ModifierKey | MouseModifier] = {
    0x0001: MouseModifier(Button.LEFT),
    0x0002: MouseModifier(Button.RIGHT),
    0x0010: MouseModifier(Button.MIDDLE),
    0x0020: MouseModifier(Button.X1),
    0x0040: MouseModifier(Button.X2),
    0x0008: ModifierKey.CTRL,
    0x0004: ModifierKey.SHIFT,
}

_SIZE_TYPES: dict[int, SizeChangeType] = {
    4: SizeChangeType.MAX_HIDE,
    2: SizeChangeType.MAXIMIZE,
    3: SizeChangeType.MAX_SHOW,
    1: SizeChangeType.MINIMIZE,
    0: SizeChangeType.RESTORE,
}

_SIZING_SIDES: dict[int, SizingSide] = {
    1: SizingSide.LEFT,
    2: SizingSide.RIGHT,
    3: SizingSide.TOP,
    4: SizingSide.TOP_LEFT,
    5: SizingSide.TOP_RIGHT,
    6: SizingSide.BOTTOM,
    7: SizingSide.BOTTOM_LEFT,
    8: SizingSide.BOTTOM_RIGHT,
    9: SizingSide.MOVE_CAUSE_EXIT_MAXIMIZE,
}


def _build_vk_table() -> dict[int, Key]:
    table: dict[int, Key] = {}
    for offset in range(10):
        table[0x30 + offset] = Key[f"NUM{offset}"]
        table[0x60 + offset] = Key[f"NUMPAD{offset}"]
    for offset in range(26):
        table[0x41 + offset] = Key[chr(ord("A") + offset)]
    for offset in range(12):
        table[0x70 + offset] = Key[f"F{offset + 1}"]
    table.update(
        {
            0x10: Key.SHIFT,
            0x11: Key.CTRL,
            0x12: Key.ALT,
            0xBA: Key.SEMICOLON,
            0xBF: Key.SLASH,
            0xC0: Key.BACKTICK,
            0xDB: Key.LEFT_BRACKET,
            0xDC: Key.BACKSLASH,
            0xDD: Key.RIGHT_BRACKET,
            0xDE: Key.APOSTROPHE,
            0xBB: Key.EQUALS,
            0xBC: Key.COMMA,
            0xBD: Key.MINUS,
            0xBE: Key.DOT,
            0x6B: Key.NUM_ADD,
            0x6D: Key.NUM_SUB,
            0x6A: Key.NUM_MUL,
            0x6F: Key.NUM_DIV,
            0x6E: Key.NUM_DOT,
            0x08: Key.BACKSPACE,
            0x09: Key.TAB,
            0x0D: Key.ENTER,
            0x20: Key.SPACE,
            0x1B: Key.ESC,
            0x14: Key.CAPS_LOCK,
            0xA2: Key.LEFT_CTRL,
            0xA0: Key.LEFT_SHIFT,
            0xA4: Key.LEFT_ALT,
            0xA3: Key.RIGHT_CTRL,
            0xA1: Key.RIGHT_SHIFT,
            0xA5: Key.RIGHT_ALT,
            0x91: Key.SCROLL_LOCK,
            0x90: Key.NUM_LOCK,
            0x2E: Key.DELETE,
            0x2D: Key.INSERT,
            0x24: Key.HOME,
            0x23: Key.END,
            0x21: Key.PAGE_UP,
            0x22: Key.PAGE_DOWN,
            0x0C: Key.CLEAR,
            0x01: Key.LEFT_BUTTON,
            0x02: Key.RIGHT_BUTTON,
            0x04: Key.MIDDLE_BUTTON,
            0x05: Key.X1_BUTTON,
            0x06: Key.X2_BUTTON,
            0x25: Key.LEFT,
            0x26: Key.UP,
            0x27: Key.RIGHT,
            0x28: Key.DOWN,
        }
    )
    return table


_VK_KEYS = _build_vk_table()


def _signed(value: int, bits: int) -> int:
    """Reinterpret the low ``bits`` bits of ``value`` as a two's complement number."""
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _unsigned_pos(lparam: int) -> tuple[int, int]:
    return lparam & 0xFFFF, (lparam >> 16) & 0xFFFF


def _signed_pos(lparam: int) -> tuple[int, int]:
    return _signed(lparam, 16), _signed(lparam >> 16, 16)


def _modifier(wparam: int) -> ModifierKey | MouseModifier | None:
    return _MODIFIERS.get(wparam)


def _x_button(wparam: int) -> Button:
    code = (wparam >> 16) & 0xFFFF
    if code == _XBUTTON1:
        return Button.X1
    if code == _XBUTTON2:
        return Button.X2
    raise ValueError(f"unexpected extra mouse button code {code:#x}")


def _cursor_at(wparam: int) -> CursorAt:
    code = wparam & 0xFFFF
    try:
        return CursorAt(code)
    except ValueError:
        raise ValueError(f"unexpected hit-test code {code:#x}") from None


@dataclass(frozen=True)
class Events:
    """What a window procedure's handler receives: the window and its event."""

    window: Any
    event: Any


def vk_to_key(vk: int) -> Key | UnknownKey:
    """Map a virtual-key code to a key, or to ``UnknownKey`` if it has no name."""
    return _VK_KEYS.get(vk, UnknownKey(vk))


def _mouse_button(table: dict, msg: int, wparam: int) -> tuple[Button, ButtonStatus]:
    button, status = table[msg]
    return (button if button is not None else _x_button(wparam)), status


def translate(hwnd: Any, msg: int, wparam: int, lparam: Any) -> Any:
    """Translate one raw window message into an event object.

    For the size-limit message ``lparam`` must be a ``MinMaxInfo`` and for the
    resizing message a ``RefRect``; the handler may edit either in place.
    """
    if msg in _MOUSE_BUTTONS:
        button, status = _mouse_button(_MOUSE_BUTTONS, msg, wparam)
        return MouseEvent(button, _unsigned_pos(lparam), status, _modifier(wparam))
    if msg in _NC_MOUSE_BUTTONS:
        at = _cursor_at(wparam)
        button, status = _mouse_button(_NC_MOUSE_BUTTONS, msg, wparam)
        return NoClientMouse(button, _signed_pos(lparam), status, at)
    if msg in (_WM_KEYDOWN, _WM_KEYUP):
        status = KeyStatus.DOWN if msg == _WM_KEYDOWN else KeyStatus.UP
        key = vk_to_key(_signed(wparam, 32))
        ex_key = lparam & 0x00800000 == 0x00800000
        return KeyEvent(key, ex_key, status)
    if msg == _WM_MOUSEMOVE:
        return MoveEvent(_unsigned_pos(lparam), _modifier(wparam))
    if msg == _WM_MOUSEWHEEL:
        delta = _signed(wparam >> 16, 16)
        wheel = Wheel.UP if delta > 0 else Wheel.DOWN
        return WheelEvent(_unsigned_pos(lparam), wheel, _modifier(wparam & 0xFFFF))
    if msg == _WM_CHAR:
        return InputEvent(wparam & 0xFFFF)
    if msg == _WM_DESTROY:
        return WindowDestroy()
    if msg == _WM_CREATE:
        return WindowCreate()
    if msg == _WM_NCMOUSELEAVE:
        return NoClientLeave()
    if msg == _WM_NCCREATE:
        return NoClientCreate()
    if msg == _WM_CLOSE:
        return WindowClose()
    if msg == _WM_PAINT:
        return PaintEvent(hwnd)
    if msg == _WM_GETMINMAXINFO:
        if not isinstance(lparam, MinMaxInfo):
            raise TypeError("size-limit message needs a MinMaxInfo as lparam")
        return SizeRange(lparam)
    if msg == _WM_SIZE:
        width = (lparam >> 16) & 0xFFFFFFFF
        height = lparam & 0xFFFF
        kind = _SIZE_TYPES.get(wparam, UnknownSizeChange(wparam))
        return SizeChanged(width, height, kind)
    if msg == _WM_SIZING:
        if not isinstance(lparam, RefRect):
            raise TypeError("resizing message needs a RefRect as lparam")
        side = _SIZING_SIDES.get(wparam, UnknownSizingSide(wparam))
        return SizeChanging(lparam, side)
    if msg == _WM_MOVE:
        return WindowMove(_unsigned_pos(lparam))
    if msg == _WM_NCHITTEST:
        return NoClientHitTest(lparam & 0xFFFF, _signed(lparam >> 16, 32))
    if msg == _WM_NCMOUSEMOVE:
        return NoClientMove(_signed_pos(lparam), _cursor_at(wparam))
    if msg >= _WM_USER:
        return UserDefined(msg, wparam, lparam)
    return OtherEvent(msg, wparam, lparam)


def is_high_surrogate(wch: int) -> bool:
    """Whether the UTF-16 code unit is the high half of a surrogate pair."""
    return 0xD800 <= wch <= 0xDBFF


def is_low_surrogate(wch: int) -> bool:
    """Whether the UTF-16 code unit is the low half of a surrogate pair."""
    return 0xDC00 <= wch <= 0xDFFF


def utf16_to_utf32(high: int, low: int) -> int:
    """Combine a UTF-16 surrogate pair into one code point."""
    if not is_high_surrogate(high):
        raise ValueError(f"{high:#x} is not a high surrogate")
    if not is_low_surrogate(low):
        raise ValueError(f"{low:#x} is not a low surrogate")
    return 0x10000 + (high - 0xD800) * 0x400 + (low - 0xDC00)


Procedure = Callable[[Any, int, int, Any], int]


def make_procedure(
    handler: Callable[[Events], Any], fallback: Procedure
) -> Procedure:
    """Wrap an event handler as a raw window procedure.

    The handler gets an ``Events`` value and returns ``Return.FINISH`` (result 0),
    ``Return.DEFAULT`` (defer to ``fallback``) or ``ReturnData`` (its value).
    """

    def procedure(hwnd: Any, msg: int, wparam: int, lparam: Any) -> int:
        result = handler(Events(hwnd, translate(hwnd, msg, wparam, lparam)))
        if result is Return.FINISH:
            return 0
        if result is Return.DEFAULT:
            return fallback(hwnd, msg, wparam, lparam)
        if isinstance(result, ReturnData):
            return result.value
        raise TypeError(f"handler returned {result!r}, not a Return or ReturnData")

    return procedure