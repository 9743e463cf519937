"""Presentation enums, the standard colour palette and style descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from cadcore.color import Color


class PresentationMode(Enum):
    WIREFRAME = auto()
    SOLID = auto()
    SOLID_WITH_BOUNDARY = auto()


class LineStyle(Enum):
    SOLID = auto()
    DASH = auto()
    SHORT_DASH = auto()
    DOT = auto()
    DOT_DASH = auto()


class FillMode(Enum):
    NONE = auto()
    SOLID = auto()


class LineThickness(Enum):
    THIN = auto()
    NORMAL = auto()
    THICK = auto()


class Colors:
    """The colours used throughout the application."""

    DEFAULT = Color.parse("#c0c0c0")
    SELECTION = Color(0.98, 0.922, 0.843)
    HIGHLIGHT = Color(0.933, 0.706, 0.133)
    FILTERED_SUBSHAPES = Color(0.0, 0.698, 0.933)
    FILTERED_SUBSHAPES_HOT = Color(1.0, 0.0, 0.0)
    GHOST = Color(0.827, 0.827, 0.827)
    AUXILLARY = Color(0.251, 0.251, 0.251)
    MARKER = Color(1.0, 1.0, 0.0)
    ATTRIBUTE_MARKER_BACKGROUND = Color(0.2, 0.3, 0.6)
    ATTRIBUTE_MARKER_SELECTION = Color(0.7, 0.3, 0.3)
    SKETCH_EDITOR_SEGMENTS = Color.WHITE
    SKETCH_EDITOR_HIGHLIGHT = Color(0.933, 0.706, 0.133)
    SKETCH_EDITOR_SELECTION = Color(1.0, 0.0, 0.0)
    SKETCH_EDITOR_CREATING = Color(0.933, 0.706, 0.133)
    SKETCH_EDITOR_AUXILLARY = Color(0.0, 0.604, 0.804)
    ACTION_BLUE = Color(0.2, 0.2, 0.8)
    ACTION_RED = Color(0.8, 0.2, 0.2)
    ACTION_GREEN = Color(0.2, 0.8, 0.2)
    ACTION_WHITE = Color(0.8, 0.8, 0.8)


@dataclass
class LineStyleDescription:
    """A line style together with its display name and dash pattern."""

    style: LineStyle
    name: str
    pattern: list[float] = field(default_factory=list)


@dataclass
class LineThicknessDescription:
    """A line thickness together with its display name and width."""

    thickness: LineThickness
    name: str
    width: float