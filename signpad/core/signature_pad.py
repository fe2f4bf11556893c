"""Signature pad: viewport scaling, surface sizing, mapping and strokes."""
import logging
from typing import Callable, Optional

from .config import SignpadConfig
from .drawing_surface import DrawingSurface
from .mapper import CoordinateMapper
from .renderer import StrokeRenderer
from .stroke import BoundingBox, DocumentSurface, InputEvent, LayoutNotReadyError, MappedPoint
from .viewport import ViewportScaleController

logger = logging.getLogger(__name__)


class SignaturePad:
    """Owns the page scale, the signature buffer and the stroke state.

    The signature box sits at ``box_x, box_y`` in page-logical units and
    is ``box_width x box_height`` before any viewport scaling.
    """

    def __init__(self, config: Optional[SignpadConfig] = None,
                 box_x: float = 0.0, box_y: float = 0.0,
                 box_width: float = 300.0, box_height: float = 120.0):
        self.config = config or SignpadConfig()

        self.document = DocumentSurface(self.config.page_width, self.config.page_height)
        self.viewport = ViewportScaleController(self.document, margin=self.config.viewport_margin)
        self.surface = DrawingSurface()
        self.mapper = CoordinateMapper()
        self.renderer = StrokeRenderer(
            self.surface,
            width=self.config.stroke_width,
            color=self.config.stroke_color
        )

        self.box_x = box_x
        self.box_y = box_y
        self.box_width = box_width
        self.box_height = box_height
        self.device_density = 1.0

        # Called after clear to move focus to the first form field
        self.on_focus_request: Optional[Callable[[], None]] = None

        logger.info("SignaturePad initialized")

    @property
    def scale(self) -> float:
        return self.document.current_scale

    def on_viewport_resize(self, viewport_width: float, device_density: float = None):
        """Recompute the page scale, then resize the buffer.

        The buffer is sized from the unscaled box size, so the scale must be
        settled first. Existing strokes are lost.
        """
        if device_density is not None:
            self.device_density = device_density

        scale = self.viewport.apply_scale(viewport_width)
        # The buffer is reallocated, a stroke in progress can't continue on it
        self.renderer.reset()
        self.surface.resize(self.box_width, self.box_height, self.device_density)
        logger.info(f"Viewport resized to {viewport_width:.0f}px (scale={scale:.4f}, "
                    f"density={self.surface.density_ratio})")
        return scale

    def on_density_change(self, device_density: float):
        """Resize the buffer for a new pixel density; the page scale is unaffected."""
        self.device_density = device_density
        self.renderer.reset()
        self.surface.resize(self.box_width, self.box_height, device_density)

    def bounding_box(self, origin_x: float = 0.0, origin_y: float = 0.0) -> BoundingBox:
        """On-screen rectangle of the signature box.

        Args:
            origin_x: Viewport position of the page's top-left corner.
            origin_y: Viewport position of the page's top-left corner.
        """
        left, top = self.viewport.to_viewport(self.box_x, self.box_y)
        width, height = self.viewport.to_viewport(self.box_width, self.box_height)
        return BoundingBox(origin_x + left, origin_y + top, width, height)

    def handle_event(self, event: InputEvent, bounding_box: BoundingBox = None) -> Optional[MappedPoint]:
        """Map an input event and feed it to the stroke renderer.

        Returns:
            The mapped point, or None if the surface isn't laid out yet.
        """
        if bounding_box is None:
            bounding_box = self.bounding_box()

        try:
            point = self.mapper.map(event, bounding_box, self.surface.css_width, self.surface.css_height)
        except LayoutNotReadyError as e:
            logger.warning(f"Dropping {event.kind.value} event: {e}")
            return None

        self.renderer.handle(event, point)
        return point

    def clear(self):
        """Wipe the signature, return to Idle and focus the first field."""
        self.renderer.reset()
        self.surface.reinitialize()
        logger.info("Signature cleared")

        if self.on_focus_request:
            self.on_focus_request()

    def has_signature(self) -> bool:
        return self.surface.has_ink()
