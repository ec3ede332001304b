"""Input events routed from the window shell into the round controller."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class PointerMoved:
    x: float
    y: float


@dataclass(frozen=True)
class PrimaryPressed:
    """Left button: place a black stone or remove one."""


@dataclass(frozen=True)
class SecondaryPressed:
    """Right button: place a white stone or remove one."""


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class KnowIt:
    """Player ends memorizing before the countdown runs out."""


@dataclass(frozen=True)
class Done:
    pass


@dataclass(frozen=True)
class ConfigChanged:
    field: str
    value: int


@dataclass(frozen=True)
class ViewportResized:
    width: float
    height: float


@dataclass(frozen=True)
class Tick:
    """Per-frame update; lets the memorizing countdown expire."""


InputEvent = Union[
    PointerMoved,
    PrimaryPressed,
    SecondaryPressed,
    Start,
    KnowIt,
    Done,
    ConfigChanged,
    ViewportResized,
    Tick,
]


__all__ = [
    "ConfigChanged",
    "Done",
    "InputEvent",
    "KnowIt",
    "PointerMoved",
    "PrimaryPressed",
    "SecondaryPressed",
    "Start",
    "Tick",
    "ViewportResized",
]
