"""Layers receiving the application's lifecycle callbacks, and a stack of them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, List


class Layer(ABC):
    """A unit of game logic driven by the application loop."""

    def __init__(self) -> None:
        self.visible = True

    @abstractmethod
    def init(self) -> None: ...

    @abstractmethod
    def on_update(self, step: Any) -> None: ...

    @abstractmethod
    def on_event(self, event: Any) -> None: ...

    @abstractmethod
    def on_render(self) -> None: ...

    @abstractmethod
    def on_tick(self) -> None: ...

    @abstractmethod
    def on_suspended(self) -> None: ...


class DefaultLayer(Layer):
    """A visible layer whose callbacks do nothing."""

    def init(self) -> None:
        pass

    def on_update(self, step: Any) -> None:
        pass

    def on_event(self, event: Any) -> None:
        pass

    def on_render(self) -> None:
        pass

    def on_tick(self) -> None:
        pass

    def on_suspended(self) -> None:
        pass


class LayerStack(Layer):
    """Forwards every callback to its visible layers in insertion order."""

    def __init__(self) -> None:
        super().__init__()
        self._layers: List[Layer] = []

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def push_layer(self, layer: Layer) -> None:
        self._layers.append(layer)

    def _visible(self) -> Iterator[Layer]:
        return (layer for layer in self._layers if layer.visible)

    def init(self) -> None:
        for layer in self._visible():
            layer.init()

    def on_update(self, step: Any) -> None:
        for layer in self._visible():
            layer.on_update(step)

    def on_event(self, event: Any) -> None:
        for layer in self._visible():
            layer.on_event(event)

    def on_render(self) -> None:
        for layer in self._visible():
            layer.on_render()

    def on_tick(self) -> None:
        for layer in self._visible():
            layer.on_tick()

    def on_suspended(self) -> None:
        for layer in self._visible():
            layer.on_suspended()