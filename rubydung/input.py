"""Keyboard and mouse state tracking driven by window events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Set

MAX_KEYS = 349
MAX_BUTTONS = 9


class Key(IntEnum):
    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    DIGIT_0 = 48
    DIGIT_1 = 49
    DIGIT_2 = 50
    DIGIT_3 = 51
    DIGIT_4 = 52
    DIGIT_5 = 53
    DIGIT_6 = 54
    DIGIT_7 = 55
    DIGIT_8 = 56
    DIGIT_9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96
    WORLD_1 = 161
    WORLD_2 = 162
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    F13 = 302
    F14 = 303
    F15 = 304
    F16 = 305
    F17 = 306
    F18 = 307
    F19 = 308
    F20 = 309
    F21 = 310
    F22 = 311
    F23 = 312
    F24 = 313
    F25 = 314
    KP_0 = 320
    KP_1 = 321
    KP_2 = 322
    KP_3 = 323
    KP_4 = 324
    KP_5 = 325
    KP_6 = 326
    KP_7 = 327
    KP_8 = 328
    KP_9 = 329
    KP_DECIMAL = 330
    KP_DIVIDE = 331
    KP_MULTIPLY = 332
    KP_SUBTRACT = 333
    KP_ADD = 334
    KP_ENTER = 335
    KP_EQUAL = 336
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347
    MENU = 348
    LAST = 348


class MouseButton(IntEnum):
    BUTTON_1 = 0
    BUTTON_2 = 1
    BUTTON_3 = 2
    BUTTON_4 = 3
    BUTTON_5 = 4
    BUTTON_6 = 5
    BUTTON_7 = 6
    BUTTON_8 = 7
    LAST = 7
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class GamepadButton(IntEnum):
    A = 0
    B = 1
    X = 2
    Y = 3
    LEFT_BUMPER = 4
    RIGHT_BUMPER = 5
    BACK = 6
    START = 7
    GUIDE = 8
    LEFT_THUMB = 9
    RIGHT_THUMB = 10
    DPAD_UP = 11
    DPAD_RIGHT = 12
    DPAD_DOWN = 13
    DPAD_LEFT = 14
    LAST = 14
    CROSS = 0
    CIRCLE = 1
    SQUARE = 2
    TRIANGLE = 3


class GamepadAxis(IntEnum):
    LEFT_X = 0
    LEFT_Y = 1
    RIGHT_X = 2
    RIGHT_Y = 3
    LEFT_TRIGGER = 4
    RIGHT_TRIGGER = 5
    LAST = 5


class EventType(Enum):
    NONE = auto()
    WINDOW_MOVED = auto()
    WINDOW_RESIZED = auto()
    WINDOW_CLOSED = auto()
    WINDOW_REFRESH = auto()
    WINDOW_FOCUSED = auto()
    WINDOW_DEFOCUSED = auto()
    WINDOW_ICONIFIED = auto()
    WINDOW_UNICONIFIED = auto()
    FRAMEBUFFER_RESIZED = auto()
    BUTTON_PRESSED = auto()
    BUTTON_RELEASED = auto()
    CURSOR_MOVED = auto()
    CURSOR_ENTERED = auto()
    CURSOR_LEFT = auto()
    SCROLLED = auto()
    KEY_PRESSED = auto()
    KEY_REPEATED = auto()
    KEY_RELEASED = auto()
    CODEPOINT_INPUT = auto()


@dataclass(frozen=True)
class Event:
    """A single window event; only the fields relevant to its type are meaningful."""

    type: EventType
    key: int = 0
    button: int = 0
    x: float = 0.0
    y: float = 0.0
    width: int = 0
    height: int = 0


class InputState:
    """Which keys and mouse buttons are held, and where the cursor is."""

    def __init__(self) -> None:
        self._keys: Set[int] = set()
        self._buttons: Set[int] = set()
        self.mouse_x = 0.0
        self.mouse_y = 0.0

    def reset(self) -> None:
        """Release every key and button."""
        self._keys.clear()
        self._buttons.clear()

    def process_event(self, event: Event) -> None:
        """Update the state from one window event."""
        if event.type is EventType.KEY_PRESSED:
            if 0 <= event.key < MAX_KEYS:
                self._keys.add(event.key)
        elif event.type is EventType.KEY_RELEASED:
            self._keys.discard(event.key)
        elif event.type is EventType.BUTTON_PRESSED:
            if 0 <= event.button < MAX_BUTTONS:
                self._buttons.add(event.button)
        elif event.type is EventType.BUTTON_RELEASED:
            self._buttons.discard(event.button)
        elif event.type is EventType.CURSOR_MOVED:
            self.mouse_x = float(event.x)
            self.mouse_y = float(event.y)

    def is_key_pressed(self, key: int) -> bool:
        return key in self._keys

    def is_mouse_button_pressed(self, button: int) -> bool:
        return button in self._buttons