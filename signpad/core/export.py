"""Export the application page as a fixed A4 PDF."""
import logging
import os
import tempfile
from typing import Callable, Optional

import cairo
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from .document import DocumentRenderer

logger = logging.getLogger(__name__)

EXPORT_SUCCESS_MESSAGE = "Saved successfully."
EXPORT_FAILURE_MESSAGE = "An error occurred while generating the PDF."


def export_filename(name: str) -> str:
    """File name for an applicant's exported PDF."""
    return f"{name.strip() or 'unnamed'}_application.pdf"


class DocumentExporter:
    """Rasterizes the page and places it on a full A4 PDF page."""

    def __init__(self, renderer: DocumentRenderer, scale: int = 2):
        self.renderer = renderer
        self.scale = scale
        # One-shot user notification
        self.notify: Optional[Callable[[str], None]] = None

    def rasterize(self) -> cairo.ImageSurface:
        """Render the page into an image at ``scale`` times its logical size."""
        width = int(self.renderer.page_width * self.scale)
        height = int(self.renderer.page_height * self.scale)

        surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, width, height)
        cr = cairo.Context(surface)
        cr.scale(self.scale, self.scale)
        self.renderer.draw(cr)
        surface.flush()

        logger.debug(f"Rasterized page at {width}x{height}")
        return surface

    def render_fixed_page(self, image: cairo.ImageSurface, filepath: str):
        """Stretch the image across one A4 page, independent of its pixel size."""
        with tempfile.NamedTemporaryFile(suffix='.png', delete=False) as tmp:
            tmp_path = tmp.name

        try:
            image.write_to_png(tmp_path)

            page_width, page_height = A4
            pdf = canvas.Canvas(filepath, pagesize=A4)
            pdf.drawImage(tmp_path, 0, 0, width=page_width, height=page_height)
            pdf.save()
        finally:
            os.unlink(tmp_path)

        logger.info(f"Exported to PDF: {filepath}")

    def export(self, filepath: str) -> bool:
        """Export the page, hiding decorations while it is captured.

        Failures are logged and reported through ``notify``; the page's
        shadow and clear control are restored either way.

        Returns:
            True if the PDF was written.
        """
        original_shadow = self.renderer.show_shadow
        original_clear = self.renderer.show_clear_control
        self.renderer.show_shadow = False
        self.renderer.show_clear_control = False

        try:
            image = self.rasterize()
            self.render_fixed_page(image, filepath)
        except Exception as e:
            logger.error(f"PDF Generation Error: {e}")
            self._notify(EXPORT_FAILURE_MESSAGE)
            return False
        finally:
            self.renderer.show_shadow = original_shadow
            self.renderer.show_clear_control = original_clear

        self._notify(EXPORT_SUCCESS_MESSAGE)
        return True

    def _notify(self, message: str):
        if self.notify:
            self.notify(message)
