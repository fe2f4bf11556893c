"""Input, stroke and document data structures."""
from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum


class SignpadError(Exception):
    """Base class for signpad errors."""


class LayoutNotReadyError(SignpadError):
    """Raised when input is mapped before the surface has been laid out."""


class EventKind(Enum):
    """Pointer event kinds driving the stroke renderer."""
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    LEAVE = "leave"


class PointerType(Enum):
    """Source device of an input event."""
    MOUSE = "mouse"
    PEN = "pen"
    TOUCH = "touch"


@dataclass
class TouchPoint:
    """A single active contact of a touch event."""
    client_x: float
    client_y: float


@dataclass
class InputEvent:
    """A raw pointer or touch event in viewport pixels."""
    client_x: float
    client_y: float
    kind: EventKind
    pointer_type: PointerType = PointerType.MOUSE
    touches: List[TouchPoint] = field(default_factory=list)
    default_prevented: bool = False

    @property
    def is_touch(self) -> bool:
        return self.pointer_type == PointerType.TOUCH

    def prevent_default(self):
        """Ask the input source not to scroll or navigate for this event."""
        self.default_prevented = True


@dataclass
class MappedPoint:
    """A point in drawing-surface-local CSS pixels."""
    x: float
    y: float


@dataclass
class BoundingBox:
    """On-screen rectangle of a widget in viewport coordinates."""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom


@dataclass
class Segment:
    """A straight line segment drawn on the raster buffer."""
    start: MappedPoint
    end: MappedPoint


@dataclass
class StrokeState:
    """Whether a stroke is currently in progress."""
    is_drawing: bool = False


class DocumentSurface:
    """The fixed-size page container that gets shrunk to fit the viewport."""

    def __init__(self, logical_width: float = 794, logical_height: float = 1123):
        # A4 dimensions at 96 DPI: 794 x 1123 pixels
        self.logical_width = logical_width
        self.logical_height = logical_height
        self.current_scale = 1.0
        # Negative bottom margin applied while shrunk
        self.margin_compensation = 0.0
        # Flow height seen by content following the page
        self.layout_height = logical_height

    @property
    def is_scaled(self) -> bool:
        return self.current_scale != 1.0

    def visual_size(self):
        """Size of the page as it appears on screen."""
        return (self.logical_width * self.current_scale,
                self.logical_height * self.current_scale)

    def __repr__(self):
        return (f"DocumentSurface({self.logical_width}x{self.logical_height}, "
                f"scale={self.current_scale:.4f})")


def first_contact(event: InputEvent) -> Optional[TouchPoint]:
    """Return the first active contact of a touch event, if any."""
    if event.touches:
        return event.touches[0]
    return None
