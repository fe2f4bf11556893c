"""Fit a fixed-width page into a narrower viewport."""
import logging

from .stroke import DocumentSurface

logger = logging.getLogger(__name__)


class ViewportScaleController:
    """Computes the uniform shrink factor for a DocumentSurface."""

    def __init__(self, document: DocumentSurface, margin: float = 20.0):
        self.document = document
        self.margin = margin

    def apply_scale(self, viewport_width: float, natural_width: float = None,
                    natural_height: float = None) -> float:
        """Apply the scale that fits the page into the viewport.

        Always recomputed from the natural size, so repeated calls with the
        same viewport width give the same result.

        Args:
            viewport_width: Width of the visible area.
            natural_width: Unscaled page width (defaults to the document's).
            natural_height: Unscaled page height (defaults to the document's).

        Returns:
            The applied scale factor, 1.0 when the page already fits.
        """
        if natural_width is None:
            natural_width = self.document.logical_width
        if natural_height is None:
            natural_height = self.document.logical_height

        available = viewport_width - self.margin

        if available <= 0:
            # No room at all, a zero or negative scale would make input unmappable
            logger.warning(f"Viewport {viewport_width}px leaves no room, keeping scale "
                           f"{self.document.current_scale:.4f}")
            return self.document.current_scale

        if available < natural_width:
            scale = available / natural_width
            # The transform doesn't change flow height, pull following content up
            compensation = natural_height * (1 - scale)
        else:
            scale = 1.0
            compensation = 0.0

        if scale != self.document.current_scale:
            logger.debug(f"Viewport {viewport_width:.0f}px -> scale {scale:.4f}")

        self.document.current_scale = scale
        self.document.margin_compensation = compensation
        self.document.layout_height = natural_height - compensation
        return scale

    def to_viewport(self, x: float, y: float):
        """Convert a page-logical point to its on-screen position."""
        scale = self.document.current_scale
        return x * scale, y * scale
