# ponsic

Small building blocks for a windowing toolkit: RGB colours with HSV and HSL
conversion, point, size and rectangle types, and a translator that turns raw
window messages (a message number with its `wparam` and `lparam`) into typed
event objects.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Colours: `ponsic.color`

`Color(red, green, blue)` is a frozen dataclass with 8-bit channels. A channel
that is not an `int` raises `TypeError`, and one outside 0..255 raises
`ValueError`. Colours order by blue, then green, then red. The standard named
web colours are class attributes: `Color.RED`, `Color.ALICEBLUE`,
`Color.REBECCAPURPLE` and so on.

```python
from ponsic.color import Color, ColorHSV, ColorHSL

Color(255, 0, 0).to_hsv()                      # ColorHSV(hue=0.0, saturation=1.0, value=1.0)
Color(0, 255, 0).to_hsl()                      # ColorHSL(hue=120.0, saturation=1.0, lightness=0.5)
Color.from_hsv(ColorHSV(240.0, 1.0, 1.0))      # Color(red=0, green=0, blue=255)
Color.from_hsl(ColorHSL(60.0, 1.0, 0.5))       # Color(red=255, green=255, blue=0)
```

Hue is in degrees, saturation, value and lightness are between 0 and 1.
`from_hsv` and `from_hsl` truncate each channel and clamp it to 0..255.

`int(color)` packs a colour into a 32-bit word laid out as `0xRRGGBB00`.
`Color.from_int(word)` reads the same layout back but first masks off the top
byte, so the red channel it returns is always 0: the two are not a round trip.

## Geometry: `ponsic.point`, `ponsic.size`, `ponsic.rect`

`Point(x, y)` and `Size(width, height)` are frozen dataclasses that support
`+` and `-` with each other's kind, `*` and `/` by a scalar, unary `-`, and
unpacking. Dividing two integers gives an integer truncated toward zero.
Both build from a pair with `from_tuple`; `Size.convert(kind)` applies `kind`
to both components.

```python
from ponsic.point import Point
from ponsic.size import Size
from ponsic.rect import Rect

Point(1, 2) + Point(3, 4)            # Point(x=4, y=6)
Point(1, 2) / 2                      # Point(x=0, y=1)
Size(10, 20) * 2                     # Size(width=20, height=40)
Size(3, 4).convert(float)            # Size(width=3.0, height=4.0)
```

`Rect(left, top, right, bottom)` keeps itself normalized: the constructor, the
`left`/`top`/`right`/`bottom` property setters, the `set_left_top` family and
`adjust` all swap edges so that `left <= right` and `top <= bottom`.

```python
r = Rect(3, 2, 1, 4)                 # Rect(left=1, top=2, right=3, bottom=4)
r.width(), r.height(), r.size()      # 2, 2, Size(width=2, height=2)
r.contains(Point(2, 3))              # True: strictly inside
r.contains_with_bound(Point(1, 2))   # True: the border counts
r.intersects(Rect(2, 3, 4, 5))       # True
r & Rect(2, 3, 4, 5)                 # Rect(left=2, top=3, right=3, bottom=4); None if disjoint
r | Rect(2, 3, 4, 5)                 # Rect(left=1, top=2, right=4, bottom=5)
r.center()                           # Point(x=2, y=3)
r.adjust(1, 2, 3, 4)                 # now Rect(left=2, top=4, right=6, bottom=8)
Rect.from_point_size(Point(100, 100), Size(800, 600))
```

`Rect.from_point_size` does not normalize. Corners are available as
`left_top()`, `right_top()`, `left_bottom()` and `right_bottom()`.
Rectangles compare by their edges and are not hashable.

## Events: `ponsic.events`

Enums for input: `Key` (every key of a US keyboard plus the mouse buttons),
`Button`, `Wheel`, `ModifierKey`, `ButtonStatus`, `KeyStatus`,
`SizeChangeType`, `SizingSide` and `CursorAt` (hit-test codes). Codes with no
name come out as `UnknownKey`, `UnknownSizeChange` or `UnknownSizingSide`; a
mouse button held as a modifier is a `MouseModifier`.

The event types are frozen dataclasses: `KeyEvent`, `MouseEvent`, `MoveEvent`,
`WheelEvent`, `InputEvent`, `PaintEvent`, `OtherEvent`, `WindowDestroy`,
`WindowCreate`, `WindowClose`, `WindowMove`, `UserDefined`, `SizeRange`,
`SizeChanged`, `SizeChanging`, `NoClientHitTest`, `NoClientMouse`,
`NoClientMove`, `NoClientLeave` and `NoClientCreate`. `SizeRange` carries a
mutable `MinMaxInfo` and `SizeChanging` a mutable `RefRect`, which a handler
may edit in place.

`Key.matches(ch)` tells whether a key, with or without Shift, can produce a
character:

```python
from ponsic.events import Key

Key.A.matches("a")       # True
Key.NUM1.matches("!")    # True
Key.NUMPAD1.matches("!") # False
```

## Translation: `ponsic.translate`

```python
from ponsic.events import Return, ReturnData
from ponsic.translate import translate, make_procedure, vk_to_key

translate(None, 0x0201, 0x0001, (20 << 16) | 10)
# MouseEvent(button=Button.LEFT, pos=(10, 20), status=ButtonStatus.DOWN,
#            modifier=MouseModifier(button=Button.LEFT))

vk_to_key(0x41)          # Key.A
vk_to_key(0xFF)          # UnknownKey(code=255)
```

`translate(hwnd, msg, wparam, lparam)` returns one event object per message.
Messages at or above the user range come out as `UserDefined`; any other
message it does not know comes out as `OtherEvent`. For the size-limit message
`lparam` must be a `MinMaxInfo`, and for the resizing message a `RefRect`;
otherwise `TypeError` is raised. An unexpected hit-test or extra-button code
raises `ValueError`.

`make_procedure(handler, fallback)` returns a function
`procedure(hwnd, msg, wparam, lparam) -> int`. It hands the handler an
`Events(window, event)` value and maps what the handler returns:
`Return.FINISH` gives 0, `Return.DEFAULT` calls `fallback` with the same
arguments, and `ReturnData(value)` gives `value`. Anything else raises
`TypeError`.

`is_high_surrogate`, `is_low_surrogate` and `utf16_to_utf32` help assemble
characters from consecutive `InputEvent` code units; `utf16_to_utf32` raises
`ValueError` if the pair is not a valid surrogate pair.

## What this package does not do

It creates no windows, runs no message loop, shows no dialogs and draws
nothing. `translate` and `make_procedure` work on message numbers and values
you supply; delivering real window messages, and doing something with a
`PaintEvent`, is up to the code that uses the package.