"""An OpenGL window that queues its input events."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict, Iterator, Optional

from . import log
from .image import Image
from .input import Event, EventType, Key, MouseButton

CONTEXT_ANY_PROFILE = 0
CONTEXT_CORE_PROFILE = 0x00032001
CONTEXT_COMPAT_PROFILE = 0x00032002

_COLOR_BUFFER_BIT = 0x4000
_DEPTH_BUFFER_BIT = 0x0100
_STENCIL_BUFFER_BIT = 0x0400


@dataclass
class ContextProperties:
    """Requested OpenGL context; zero values leave the choice to the driver."""

    profile: int = CONTEXT_ANY_PROFILE
    ver_major: int = 0
    ver_minor: int = 0
    compat: bool = False


@dataclass
class WindowProperties:
    width: int
    height: int
    cursor_enabled: bool = False
    context: ContextProperties = field(default_factory=ContextProperties)


# Key symbols delivered by the window toolkit (X11 keysyms) for non-ASCII keys.
_SPECIAL_KEYS: Dict[int, Key] = {
    0xFF1B: Key.ESCAPE,
    0xFF0D: Key.ENTER,
    0xFF09: Key.TAB,
    0xFF08: Key.BACKSPACE,
    0xFF63: Key.INSERT,
    0xFFFF: Key.DELETE,
    0xFF53: Key.RIGHT,
    0xFF51: Key.LEFT,
    0xFF54: Key.DOWN,
    0xFF52: Key.UP,
    0xFF55: Key.PAGE_UP,
    0xFF56: Key.PAGE_DOWN,
    0xFF50: Key.HOME,
    0xFF57: Key.END,
    0xFFE5: Key.CAPS_LOCK,
    0xFF14: Key.SCROLL_LOCK,
    0xFF7F: Key.NUM_LOCK,
    0xFF61: Key.PRINT_SCREEN,
    0xFF13: Key.PAUSE,
    0xFFAE: Key.KP_DECIMAL,
    0xFFAF: Key.KP_DIVIDE,
    0xFFAA: Key.KP_MULTIPLY,
    0xFFAD: Key.KP_SUBTRACT,
    0xFFAB: Key.KP_ADD,
    0xFF8D: Key.KP_ENTER,
    0xFFBD: Key.KP_EQUAL,
    0xFFE1: Key.LEFT_SHIFT,
    0xFFE3: Key.LEFT_CONTROL,
    0xFFE9: Key.LEFT_ALT,
    0xFFEB: Key.LEFT_SUPER,
    0xFFE2: Key.RIGHT_SHIFT,
    0xFFE4: Key.RIGHT_CONTROL,
    0xFFEA: Key.RIGHT_ALT,
    0xFFEC: Key.RIGHT_SUPER,
    0xFF67: Key.MENU,
}
_SPECIAL_KEYS.update({0xFFBE + i: Key(Key.F1 + i) for i in range(25)})
_SPECIAL_KEYS.update({0xFFB0 + i: Key(Key.KP_0 + i) for i in range(10)})

_MOUSE_BUTTONS = {
    1: MouseButton.LEFT,
    4: MouseButton.RIGHT,
    2: MouseButton.MIDDLE,
    8: MouseButton.BUTTON_4,
    16: MouseButton.BUTTON_5,
}


def translate_key(symbol: int) -> Optional[Key]:
    """Map a toolkit key symbol to a Key, or None when it has no counterpart."""
    if symbol in _SPECIAL_KEYS:
        return _SPECIAL_KEYS[symbol]
    if ord("a") <= symbol <= ord("z"):
        return Key(symbol - (ord("a") - ord("A")))
    if 0 <= symbol < 128:
        try:
            return Key(symbol)
        except ValueError:
            return None
    return None


def translate_mouse_button(button: int) -> Optional[MouseButton]:
    """Map a toolkit mouse button to a MouseButton, or None."""
    return _MOUSE_BUTTONS.get(button)


class Window:
    """A window with an OpenGL context whose input arrives as queued events."""

    def __init__(self, title: str, properties: WindowProperties) -> None:
        import pyglet

        self.title = title
        self.properties = properties
        self._events: Deque[Event] = deque()
        self._should_close = False
        self._cursor_x = 0.0
        self._cursor_y = 0.0
        self._exclusive = not properties.cursor_enabled

        options: Dict[str, Any] = {"double_buffer": True, "depth_size": 24}
        ctx = properties.context
        if ctx.ver_major:
            options["major_version"] = ctx.ver_major
        if ctx.ver_minor:
            options["minor_version"] = ctx.ver_minor
        if ctx.compat:
            options["forward_compatible"] = True

        try:
            config = pyglet.gl.Config(**options)
            self._window = pyglet.window.Window(
                width=properties.width,
                height=properties.height,
                caption=title,
                config=config,
                resizable=True,
            )
        except (pyglet.window.WindowException, pyglet.gl.ContextException) as exc:
            log.fatal(
                f"error initializing window ({properties.width}x{properties.height} title:{title})"
            )
            raise RuntimeError(f"could not create window: {exc}") from exc

        self._handled = pyglet.event.EVENT_HANDLED
        self._window.push_handlers(
            on_key_press=self._on_key_press,
            on_key_release=self._on_key_release,
            on_mouse_press=self._on_mouse_press,
            on_mouse_release=self._on_mouse_release,
            on_mouse_motion=self._on_mouse_motion,
            on_mouse_drag=self._on_mouse_drag,
            on_resize=self._on_resize,
            on_close=self._on_close,
        )
        if self._exclusive:
            self._window.set_exclusive_mouse(True)

        from pyglet.gl import gl_info

        version = getattr(gl_info, "get_version_string", gl_info.get_version)()
        log.warn(f"GL version: {version}")
        log.warn(f"GPU vendor: {gl_info.get_vendor()}")
        log.warn(f"GPU name: {gl_info.get_renderer()}")

    def _on_key_press(self, symbol: int, modifiers: int) -> Any:
        key = translate_key(symbol)
        if key is not None:
            self._events.append(Event(EventType.KEY_PRESSED, key=int(key)))
        return self._handled

    def _on_key_release(self, symbol: int, modifiers: int) -> Any:
        key = translate_key(symbol)
        if key is not None:
            self._events.append(Event(EventType.KEY_RELEASED, key=int(key)))
        return self._handled

    def _on_mouse_press(self, x: int, y: int, button: int, modifiers: int) -> None:
        mapped = translate_mouse_button(button)
        if mapped is not None:
            self._events.append(Event(EventType.BUTTON_PRESSED, button=int(mapped)))

    def _on_mouse_release(self, x: int, y: int, button: int, modifiers: int) -> None:
        mapped = translate_mouse_button(button)
        if mapped is not None:
            self._events.append(Event(EventType.BUTTON_RELEASED, button=int(mapped)))

    def _move_cursor(self, x: int, y: int, dx: int, dy: int) -> None:
        if self._exclusive:
            # A captured cursor reports relative motion; keep a virtual position.
            self._cursor_x += dx
            self._cursor_y -= dy
        else:
            self._cursor_x = float(x)
            self._cursor_y = float(self._window.height - y)
        self._events.append(Event(EventType.CURSOR_MOVED, x=self._cursor_x, y=self._cursor_y))

    def _on_mouse_motion(self, x: int, y: int, dx: int, dy: int) -> None:
        self._move_cursor(x, y, dx, dy)

    def _on_mouse_drag(self, x: int, y: int, dx: int, dy: int, buttons: int, modifiers: int) -> None:
        self._move_cursor(x, y, dx, dy)

    def _on_resize(self, width: int, height: int) -> None:
        self._events.append(Event(EventType.WINDOW_RESIZED, width=width, height=height))

    def _on_close(self) -> Any:
        self._should_close = True
        self._events.append(Event(EventType.WINDOW_CLOSED))
        return self._handled

    def should_close(self) -> bool:
        return self._should_close

    def clear(self) -> None:
        from pyglet import gl

        gl.glClear(_COLOR_BUFFER_BIT | _DEPTH_BUFFER_BIT | _STENCIL_BUFFER_BIT)

    def update(self) -> None:
        """Poll the system for events, then present the frame."""
        self._window.dispatch_events()
        self._window.flip()

    def events(self) -> Iterator[Event]:
        """Yield and remove the queued events, oldest first."""
        while self._events:
            yield self._events.popleft()

    def set_icon(self, image: Image) -> None:
        import pyglet

        fmt = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}[image.channels]
        # Rows are stored top first, hence the negative pitch.
        data = pyglet.image.ImageData(
            image.width, image.height, fmt, image.pixels, -image.width * image.channels
        )
        self._window.set_icon(data)

    def close(self) -> None:
        self._window.close()