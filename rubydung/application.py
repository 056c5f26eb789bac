"""The application main loop driving a stack of layers."""

from __future__ import annotations

import locale
import time
from typing import Any, Callable, Optional

from . import log
from .input import Event, InputState
from .layers import Layer, LayerStack
from .timing import Timer, Timestep
from .window import Window, WindowProperties

VERSION_MAJOR = 0
VERSION_MINOR = 0
VERSION_PATCH = 1
VERSION_NUMBER = VERSION_MAJOR * 10000 + VERSION_MINOR * 100 + VERSION_PATCH
VERSION_STRING = "pa.0.0.1"

UPDATE_TICK_MS = 1000.0 / 60.0

_instance: Optional["Application"] = None


def _init_host() -> None:
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass


class Application(Layer):
    """Owns the window, the input state and the layers, and runs the loop.

    Updates run at a fixed 60 per second; rendering runs once per frame,
    optionally capped by ``set_fps_goal``. Each window event is fed to the
    input state and then passed to ``on_event`` of every visible layer.
    """

    def __init__(
        self,
        name: str,
        properties: WindowProperties,
        window_factory: Optional[Callable[[str, WindowProperties], Any]] = None,
    ) -> None:
        global _instance
        super().__init__()
        self.name = name
        self.properties = properties
        self.window: Any = None
        self.input = InputState()
        self._window_factory = window_factory or Window
        self._layers = LayerStack()
        self._running = False
        self._suspended = False
        self._fps_goal = 0
        self._delay = 0.0
        self._fps = 0
        self._ups = 0
        self._frame_time = 0.0
        _instance = self

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def ups(self) -> int:
        return self._ups

    @property
    def frame_time(self) -> float:
        return self._frame_time

    @property
    def fps_goal(self) -> int:
        return self._fps_goal

    @property
    def frame_delay(self) -> float:
        return self._delay

    @property
    def running(self) -> bool:
        return self._running

    @property
    def suspended(self) -> bool:
        return self._suspended

    @property
    def layers(self) -> LayerStack:
        return self._layers

    def init(self) -> None:
        """Create the window and clear the input state."""
        log.info(f"MC Engine version: {VERSION_STRING}")
        self.window = self._window_factory(self.name, self.properties)
        self.input.reset()

    def push_layer(self, layer: Layer) -> None:
        self._layers.push_layer(layer)

    def start(self) -> None:
        """Initialise everything and run until stopped or the window closes."""
        self._running = True
        self._suspended = False
        _init_host()
        self.init()
        self._layers.init()
        try:
            self._run()
        finally:
            if self.window is not None:
                self.window.close()

    def suspend(self) -> None:
        self._suspended = True

    def resume(self) -> None:
        self._suspended = False

    def stop(self) -> None:
        self._running = False

    def set_fps_goal(self, fps: int) -> None:
        """Cap the frame rate; zero or less removes the cap."""
        if fps > 0:
            self._fps_goal = fps
            self._delay = 1000.0 / float(fps)
        else:
            self._fps_goal = 0
            self._delay = 0.0

    def _run(self) -> None:
        timer = Timer()
        last_second = 0.0
        update_timer = timer.elapsed_millis()
        step = Timestep(timer.elapsed_millis())
        while self._running:
            frame = Timer()
            self.window.clear()

            now = timer.elapsed_millis()
            while now - update_timer >= UPDATE_TICK_MS:
                step.update(now)
                self.on_update(step)
                self._ups += 1
                update_timer += UPDATE_TICK_MS

            self.on_render()
            self.window.update()
            self._fps += 1
            self._frame_time = frame.elapsed_millis()

            if now - last_second > 1000.0:
                last_second += 1000.0
                self.on_tick()
                self._fps = 0
                self._ups = 0

            while self._suspended:
                self.on_suspended()

            if self.window.should_close():
                self._running = False

            for event in self.window.events():
                self.input.process_event(event)
                self.on_event(event)

            if self._fps_goal > 0:
                remaining = self._delay - self._frame_time
                if remaining > 0.0:
                    time.sleep(remaining / 1000.0)

    def on_update(self, step: Timestep) -> None:
        self._layers.on_update(step)

    def on_event(self, event: Event) -> None:
        self._layers.on_event(event)

    def on_render(self) -> None:
        self._layers.on_render()

    def on_tick(self) -> None:
        self._layers.on_tick()

    def on_suspended(self) -> None:
        self._layers.on_suspended()


def current_application() -> Application:
    """Return the most recently created application."""
    if _instance is None:
        raise RuntimeError("no application has been created")
    return _instance