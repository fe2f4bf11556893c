"""Cairo rendering of the application page."""
import logging
from dataclasses import dataclass

import cairo

from .form import ApplicationForm
from .signature_pad import SignaturePad

logger = logging.getLogger(__name__)


@dataclass
class PageLayout:
    """Positions on the page, in page-logical units."""
    margin: float = 60.0
    title_y: float = 110.0
    first_row_y: float = 200.0
    row_height: float = 56.0
    label_width: float = 140.0
    consent_y: float = 720.0
    date_y: float = 860.0
    signature_x: float = 434.0
    signature_y: float = 900.0
    signature_width: float = 300.0
    signature_height: float = 120.0
    clear_width: float = 56.0
    clear_height: float = 24.0

    def clear_control_rect(self):
        """Rectangle of the clear control, at the signature box's top right."""
        return (self.signature_x + self.signature_width - self.clear_width - 4,
                self.signature_y + 4,
                self.clear_width,
                self.clear_height)


def create_signature_pad(config=None, layout: PageLayout = None) -> SignaturePad:
    """Create a SignaturePad positioned at the layout's signature box."""
    layout = layout or PageLayout()
    return SignaturePad(
        config,
        box_x=layout.signature_x,
        box_y=layout.signature_y,
        box_width=layout.signature_width,
        box_height=layout.signature_height
    )


class DocumentRenderer:
    """Draws the form page, including the live signature buffer."""

    def __init__(self, form: ApplicationForm, pad: SignaturePad, layout: PageLayout = None):
        self.form = form
        self.pad = pad
        self.layout = layout or PageLayout()
        # Decorations hidden while exporting
        self.show_shadow = True
        self.show_clear_control = True

    @property
    def page_width(self) -> float:
        return self.pad.document.logical_width

    @property
    def page_height(self) -> float:
        return self.pad.document.logical_height

    def draw(self, cr):
        """Draw the page in page-logical units onto a cairo context."""
        layout = self.layout
        width = self.page_width
        height = self.page_height

        cr.save()

        if self.show_shadow:
            cr.set_source_rgba(0, 0, 0, 0.1)
            cr.rectangle(4, 4, width, height)
            cr.fill()

        # Page background (white)
        cr.set_source_rgb(1.0, 1.0, 1.0)
        cr.rectangle(0, 0, width, height)
        cr.fill()

        cr.select_font_face("Sans", cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD)
        cr.set_font_size(26)
        cr.set_source_rgb(0.1, 0.1, 0.1)
        title = "Election Committee Member Application"
        extents = cr.text_extents(title)
        cr.move_to((width - extents.width) / 2, layout.title_y)
        cr.show_text(title)

        rows = [
            ("Name", self.form.name),
            ("Affiliation", self.form.affiliation),
        ]
        cr.select_font_face("Sans", cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL)
        cr.set_font_size(16)
        for i, (label, value) in enumerate(rows):
            y = layout.first_row_y + i * layout.row_height
            self._draw_row(cr, label, value, y)

        check = "[x]" if self.form.privacy_agree else "[ ]"
        cr.set_source_rgb(0.1, 0.1, 0.1)
        cr.move_to(layout.margin, layout.consent_y)
        cr.show_text(f"{check} I agree to the collection and use of personal information.")

        date_extents = cr.text_extents(self.form.date)
        cr.move_to((width - date_extents.width) / 2, layout.date_y)
        cr.show_text(self.form.date)

        self._draw_signature_box(cr)

        cr.restore()

    def _draw_row(self, cr, label, value, y):
        layout = self.layout
        cr.set_source_rgb(0.1, 0.1, 0.1)
        cr.move_to(layout.margin, y)
        cr.show_text(label)

        cr.move_to(layout.margin + layout.label_width, y)
        cr.show_text(value)

        cr.set_source_rgba(0.6, 0.6, 0.6, 1.0)
        cr.set_line_width(1)
        cr.move_to(layout.margin + layout.label_width, y + 8)
        cr.line_to(self.page_width - layout.margin, y + 8)
        cr.stroke()

    def _draw_signature_box(self, cr):
        layout = self.layout

        # Signer name line, mirrors the name field
        cr.set_source_rgb(0.1, 0.1, 0.1)
        cr.move_to(layout.signature_x - 250, layout.signature_y + layout.signature_height / 2)
        cr.show_text(f"Applicant: {self.form.signer_name}")

        cr.set_source_rgba(0.8, 0.8, 0.8, 1.0)
        cr.set_line_width(1)
        cr.rectangle(layout.signature_x, layout.signature_y,
                     layout.signature_width, layout.signature_height)
        cr.stroke()

        self.pad.surface.paint_onto(cr, layout.signature_x, layout.signature_y)

        if self.show_clear_control:
            x, y, w, h = layout.clear_control_rect()
            cr.set_source_rgba(0.9, 0.9, 0.9, 1.0)
            cr.rectangle(x, y, w, h)
            cr.fill()
            cr.set_source_rgb(0.3, 0.3, 0.3)
            cr.set_font_size(12)
            cr.move_to(x + 12, y + 16)
            cr.show_text("Clear")

    def hit_clear_control(self, x: float, y: float) -> bool:
        """Check whether a page-logical point falls on the clear control."""
        if not self.show_clear_control:
            return False
        cx, cy, cw, ch = self.layout.clear_control_rect()
        return cx <= x <= cx + cw and cy <= y <= cy + ch
