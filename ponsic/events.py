"""Keys, buttons and the window events handed to a window procedure."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Any, Union

__all__ = [
    "Key",
    "UnknownKey",
    "Button",
    "Wheel",
    "ModifierKey",
    "MouseModifier",
    "SizeChangeType",
    "UnknownSizeChange",
    "HotKeyFlags",
    "ButtonStatus",
    "KeyStatus",
    "SizingSide",
    "UnknownSizingSide",
    "RefRect",
    "MinMaxInfo",
    "CursorAt",
    "KeyEvent",
    "MouseEvent",
    "MoveEvent",
    "WheelEvent",
    "InputEvent",
    "PaintEvent",
    "OtherEvent",
    "WindowDestroy",
    "WindowCreate",
    "WindowClose",
    "WindowMove",
    "UserDefined",
    "SizeRange",
    "SizeChanged",
    "SizeChanging",
    "NoClientHitTest",
    "NoClientMouse",
    "NoClientMove",
    "NoClientLeave",
    "NoClientCreate",
    "Return",
    "ReturnData",
]


class Key(Enum):
    """Every key of a US keyboard, plus the mouse buttons."""

    A = auto()
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()

    NUM1 = auto()
    NUM2 = auto()
    NUM3 = auto()
    NUM4 = auto()
    NUM5 = auto()
    NUM6 = auto()
    NUM7 = auto()
    NUM8 = auto()
    NUM9 = auto()
    NUM0 = auto()

    NUMPAD1 = auto()
    NUMPAD2 = auto()
    NUMPAD3 = auto()
    NUMPAD4 = auto()
    NUMPAD5 = auto()
    NUMPAD6 = auto()
    NUMPAD7 = auto()
    NUMPAD8 = auto()
    NUMPAD9 = auto()
    NUMPAD0 = auto()

    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()

    SHIFT = auto()
    CTRL = auto()
    ALT = auto()

    BACKTICK = auto()
    COMMA = auto()
    DOT = auto()
    SLASH = auto()
    SEMICOLON = auto()
    APOSTROPHE = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    BACKSLASH = auto()
    MINUS = auto()
    EQUALS = auto()

    NUM_ADD = auto()
    NUM_SUB = auto()
    NUM_MUL = auto()
    NUM_DIV = auto()
    NUM_DOT = auto()

    TAB = auto()
    SPACE = auto()
    ENTER = auto()
    BACKSPACE = auto()

    ESC = auto()
    CAPS_LOCK = auto()
    LEFT_CTRL = auto()
    LEFT_SHIFT = auto()
    LEFT_ALT = auto()
    RIGHT_CTRL = auto()
    RIGHT_SHIFT = auto()
    RIGHT_ALT = auto()
    SCROLL_LOCK = auto()
    NUM_LOCK = auto()
    DELETE = auto()
    INSERT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    CLEAR = auto()

    LEFT_BUTTON = auto()
    RIGHT_BUTTON = auto()
    MIDDLE_BUTTON = auto()
    X1_BUTTON = auto()
    X2_BUTTON = auto()

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()

    def matches(self, ch: str) -> bool:
        """Whether typing this key (with or without Shift) can produce ``ch``."""
        return ch in _KEY_CHARS.get(self, frozenset())


def _build_key_chars() -> dict[Key, frozenset[str]]:
    table: dict[Key, frozenset[str]] = {}
    for letter in string.ascii_uppercase:
        table[Key[letter]] = frozenset({letter, letter.lower()})
    shifted_digits = dict(zip("0123456789", ")!@#$%^&*("))
    for digit, shifted in shifted_digits.items():
        table[Key[f"NUM{digit}"]] = frozenset({digit, shifted})
        table[Key[f"NUMPAD{digit}"]] = frozenset({digit})
    table.update(
        {
            Key.BACKTICK: frozenset("`~"),
            Key.COMMA: frozenset(",<"),
            Key.DOT: frozenset(".>"),
            Key.SLASH: frozenset("/?"),
            Key.SEMICOLON: frozenset(";:"),
            Key.APOSTROPHE: frozenset("'\""),
            Key.LEFT_BRACKET: frozenset("[{"),
            Key.RIGHT_BRACKET: frozenset("]}"),
            Key.BACKSLASH: frozenset("\\|"),
            Key.MINUS: frozenset("-_"),
            Key.EQUALS: frozenset("=+"),
            Key.NUM_ADD: frozenset("+"),
            Key.NUM_SUB: frozenset("-"),
            Key.NUM_MUL: frozenset("*"),
            Key.NUM_DIV: frozenset("/"),
            Key.NUM_DOT: frozenset("."),
            Key.SPACE: frozenset(" "),
            Key.TAB: frozenset("\t"),
            Key.ENTER: frozenset("\n\r"),
            Key.BACKSPACE: frozenset("\x08"),
        }
    )
    return table


_KEY_CHARS = _build_key_chars()


@dataclass(frozen=True)
class UnknownKey:
    """A virtual-key code with no named key."""

    code: int

    def matches(self, ch: str) -> bool:
        """An unknown key never matches a character."""
        return False


class Button(Enum):
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()
    X1 = auto()
    X2 = auto()


class Wheel(Enum):
    UP = auto()
    DOWN = auto()


class ModifierKey(Enum):
    SHIFT = auto()
    CTRL = auto()
    ALT = auto()
    WIN = auto()


@dataclass(frozen=True)
class MouseModifier:
    """A mouse button held down as a modifier."""

    button: Button


class SizeChangeType(Enum):
    RESIZE = auto()
    MINIMIZE = auto()
    MAXIMIZE = auto()
    RESTORE = auto()
    MAX_HIDE = auto()
    MAX_SHOW = auto()


@dataclass(frozen=True)
class UnknownSizeChange:
    """A size-change code with no named meaning."""

    value: int


@dataclass(frozen=True)
class HotKeyFlags:
    alt: bool = False
    ctrl: bool = False
    shift: bool = False
    win: bool = False


class ButtonStatus(Enum):
    DOWN = auto()
    UP = auto()
    DOUBLE_CLICK = auto()


class KeyStatus(Enum):
    DOWN = auto()
    UP = auto()


class SizingSide(Enum):
    LEFT = auto()
    RIGHT = auto()
    TOP = auto()
    BOTTOM = auto()
    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    BOTTOM_LEFT = auto()
    BOTTOM_RIGHT = auto()
    MOVE_CAUSE_EXIT_MAXIMIZE = auto()


@dataclass(frozen=True)
class UnknownSizingSide:
    """A sizing-edge code with no named meaning."""

    value: int


@dataclass
class RefRect:
    """A rectangle a handler may edit in place while the window is resized."""

    left: int
    top: int
    right: int
    bottom: int


@dataclass
class MinMaxInfo:
    """Size limits a handler may edit in place."""

    max_width: int = 0
    max_height: int = 0
    max_left: int = 0
    max_top: int = 0
    min_track_width: int = 0
    min_track_height: int = 0
    max_track_width: int = 0
    max_track_height: int = 0


class CursorAt(IntEnum):
    """Where the cursor lies on a window, as reported by a hit test."""

    BORDER = 18
    BOTTOM = 15
    BOTTOM_LEFT = 16
    BOTTOM_RIGHT = 17
    CAPTION = 2
    CLIENT = 1
    CLOSE = 20
    ERROR = -2
    HELP = 21
    HSCROLL = 6
    LEFT = 10
    MENU = 5
    MAX_BUTTON = 9
    MIN_BUTTON = 8
    NOWHERE = 0
    RIGHT = 11
    SIZE = 4
    SYSMENU = 3
    TOP = 12
    TOP_LEFT = 13
    TOP_RIGHT = 14
    TRANSPARENT = -1
    VSCROLL = 7


Modifier = Union[ModifierKey, MouseModifier, None]


@dataclass(frozen=True)
class KeyEvent:
    key: Key | UnknownKey
    ex_key: bool
    status: KeyStatus


@dataclass(frozen=True)
class MouseEvent:
    button: Button
    pos: tuple[int, int]
    status: ButtonStatus
    modifier: Modifier = None


@dataclass(frozen=True)
class MoveEvent:
    pos: tuple[int, int]
    modifier: Modifier = None


@dataclass(frozen=True)
class WheelEvent:
    pos: tuple[int, int]
    wheel: Wheel
    modifier: Modifier = None


@dataclass(frozen=True)
class InputEvent:
    """A UTF-16 code unit typed into the window."""

    ch: int


@dataclass(frozen=True)
class PaintEvent:
    """The window identified by ``hwnd`` needs repainting."""

    hwnd: Any


@dataclass(frozen=True)
class OtherEvent:
    msg: int
    wparam: int
    lparam: int


@dataclass(frozen=True)
class WindowDestroy:
    pass


@dataclass(frozen=True)
class WindowCreate:
    pass


@dataclass(frozen=True)
class WindowClose:
    pass


@dataclass(frozen=True)
class WindowMove:
    pos: tuple[int, int]


@dataclass(frozen=True)
class UserDefined:
    msg: int
    wparam: int
    lparam: int


@dataclass(frozen=True)
class SizeRange:
    """The window asks for its size limits; edit ``info`` to change them."""

    info: MinMaxInfo = field(default_factory=MinMaxInfo)


@dataclass(frozen=True)
class SizeChanged:
    width: int
    height: int
    kind: SizeChangeType | UnknownSizeChange


@dataclass(frozen=True)
class SizeChanging:
    """The window is being resized; edit ``rect`` to change the outcome."""

    rect: RefRect
    side: SizingSide | UnknownSizingSide


@dataclass(frozen=True)
class NoClientHitTest:
    """A handler should return the default result for this event."""

    x: int
    y: int


@dataclass(frozen=True)
class NoClientMouse:
    button: Button
    pos: tuple[int, int]
    status: ButtonStatus
    at: CursorAt


@dataclass(frozen=True)
class NoClientMove:
    pos: tuple[int, int]
    at: CursorAt


@dataclass(frozen=True)
class NoClientLeave:
    pass


@dataclass(frozen=True)
class NoClientCreate:
    pass


class Return(Enum):
    """What a window procedure hands back."""

    FINISH = auto()
    """Handling is done and the result is 0."""
    DEFAULT = auto()
    """Leave the message to the window's default behaviour."""


@dataclass(frozen=True)
class ReturnData:
    """Handling is done and the result is ``value``."""

    value: int