"""Widget base class and helpers shared by the picker widgets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from papirus_switcher.core.color import Color

SWATCH = "██"


@dataclass(frozen=True)
class Rect:
    """Space a widget may draw into, in terminal cells."""
    width: int
    height: int


@runtime_checkable
class Widget(Protocol):
    """Anything that renders itself into lines of ANSI text."""

    def render(self, bounds: Rect) -> list[str]:
        ...


class BaseWidget(ABC):
    """
    Base class for picker widgets.
    
    Widgets hold whatever the renderer last handed them and turn it
    into lines on request. Drawing never changes selection state.
    """

    @abstractmethod
    def render(self, bounds: Rect) -> list[str]:
        """Return the widget's lines; none wider than bounds.width."""


def render_swatch(color: Color, truecolor: bool = True) -> str:
    """Color block for a folder color, downgraded to 16 colors if needed."""
    shown = color.for_terminal(truecolor)
    return f"\x1b[{shown.to_sgr_fg()}m{SWATCH}\x1b[0m"
