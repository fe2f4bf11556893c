"""Incremental stroke renderer driven by mapped pointer input."""
import logging
from enum import Enum
from typing import Optional, Tuple

import cairo

from .drawing_surface import DrawingSurface
from .stroke import EventKind, InputEvent, MappedPoint, Segment, StrokeState

logger = logging.getLogger(__name__)


class RendererState(Enum):
    IDLE = "idle"
    DRAWING = "drawing"


class StrokeRenderer:
    """Turns a sequence of mapped points into line segments.

    Each move draws one segment and then starts a fresh sub-path at the
    new point, so the path never grows past a single segment.
    """

    def __init__(self, surface: DrawingSurface, width: float = 2.0,
                 color: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)):
        self.surface = surface
        self.width = width
        self.color = color
        self.stroke_state = StrokeState()
        self.last_point: Optional[MappedPoint] = None
        self.segment_count = 0
        self.last_segment: Optional[Segment] = None

    @property
    def state(self) -> RendererState:
        return RendererState.DRAWING if self.stroke_state.is_drawing else RendererState.IDLE

    def handle(self, event: InputEvent, point: Optional[MappedPoint]):
        """Dispatch an event to the matching transition."""
        if event.kind == EventKind.DOWN:
            if event.is_touch:
                event.prevent_default()  # Stop scrolling
            self.pointer_down(point)
        elif event.kind == EventKind.MOVE:
            if event.is_touch:
                event.prevent_default()  # Stop scrolling
            self.pointer_move(point)
        elif event.kind in (EventKind.UP, EventKind.LEAVE):
            self.pointer_up()

    def pointer_down(self, point: MappedPoint):
        """Idle -> Drawing: begin a new path without drawing anything."""
        self.stroke_state.is_drawing = True
        self.last_point = point

        cr = self.surface.context
        cr.new_path()
        cr.move_to(point.x, point.y)
        logger.debug(f"Stroke begin at ({point.x:.2f}, {point.y:.2f})")

    def pointer_move(self, point: MappedPoint):
        """Drawing -> Drawing: draw a segment to the new point."""
        if not self.stroke_state.is_drawing:
            return

        cr = self.surface.context
        cr.set_line_width(self.width)
        cr.set_line_cap(cairo.LINE_CAP_ROUND)
        cr.set_line_join(cairo.LINE_JOIN_ROUND)
        cr.set_source_rgba(*self.color)

        cr.line_to(point.x, point.y)
        cr.stroke()
        cr.move_to(point.x, point.y)

        self.last_segment = Segment(self.last_point, point)
        self.segment_count += 1
        self.last_point = point

    def pointer_up(self):
        """Drawing -> Idle: close the current path."""
        if self.stroke_state.is_drawing:
            logger.debug(f"Stroke end, {self.segment_count} segments so far")
        self.stroke_state.is_drawing = False
        self.last_point = None
        self.surface.context.new_path()

    def reset(self):
        """Return to Idle and forget drawn segments."""
        self.stroke_state.is_drawing = False
        self.last_point = None
        self.segment_count = 0
        self.last_segment = None

