"""Density-aware raster buffer backing the signature box."""
import base64
import io
import logging
from typing import Tuple

import cairo

logger = logging.getLogger(__name__)


class DrawingSurface:
    """A cairo raster buffer sized to the display's pixel density.

    Drawing commands are issued in CSS pixels: the context carries a
    scale of ``density_ratio`` so the buffer resolution stays invisible
    to callers.
    """

    def __init__(self, css_width: float = 0, css_height: float = 0):
        self.css_width = css_width
        self.css_height = css_height
        self.density_ratio = 1.0
        self.buffer_width = 0
        self.buffer_height = 0
        self.surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 0, 0)
        self.context = cairo.Context(self.surface)

    @property
    def is_laid_out(self) -> bool:
        return self.css_width > 0 and self.css_height > 0

    def resize(self, on_screen_width: float, on_screen_height: float,
               device_density: float = 1.0) -> Tuple[int, int]:
        """Reallocate the buffer for the given unscaled size and density.

        Any existing raster content is discarded.

        Args:
            on_screen_width: Layout width in CSS pixels, before viewport scaling.
            on_screen_height: Layout height in CSS pixels, before viewport scaling.
            device_density: Physical pixels per CSS pixel reported by the display.

        Returns:
            The new (buffer_width, buffer_height).
        """
        ratio = max(device_density or 1.0, 1.0)

        self.css_width = on_screen_width
        self.css_height = on_screen_height
        self.density_ratio = ratio
        self.buffer_width = int(on_screen_width * ratio)
        self.buffer_height = int(on_screen_height * ratio)

        self.surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, self.buffer_width, self.buffer_height)
        self.context = cairo.Context(self.surface)
        self.context.scale(ratio, ratio)

        logger.debug(f"Surface resized: css={on_screen_width}x{on_screen_height} "
                     f"buffer={self.buffer_width}x{self.buffer_height} ratio={ratio}")
        return self.buffer_width, self.buffer_height

    def reinitialize(self) -> Tuple[int, int]:
        """Wipe the buffer by reallocating it at the current size."""
        return self.resize(self.css_width, self.css_height, self.density_ratio)

    def has_ink(self) -> bool:
        """Check whether anything has been drawn on the buffer."""
        if self.buffer_width == 0 or self.buffer_height == 0:
            return False
        self.surface.flush()
        return bool(self.surface.get_data().tobytes().strip(b"\x00"))

    def paint_onto(self, cr, x: float = 0.0, y: float = 0.0):
        """Composite the buffer onto another context at CSS size."""
        if self.buffer_width == 0 or self.buffer_height == 0:
            return
        cr.save()
        cr.translate(x, y)
        cr.scale(1.0 / self.density_ratio, 1.0 / self.density_ratio)
        cr.set_source_surface(self.surface, 0, 0)
        cr.paint()
        cr.restore()

    def to_png_bytes(self) -> bytes:
        """Encode the buffer as PNG."""
        self.surface.flush()
        buf = io.BytesIO()
        self.surface.write_to_png(buf)
        return buf.getvalue()

    def to_data_url(self) -> str:
        """Encode the buffer as a base64 PNG data URL."""
        encoded = base64.b64encode(self.to_png_bytes()).decode('ascii')
        return f"data:image/png;base64,{encoded}"
