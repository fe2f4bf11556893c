"""Drawing area showing the application page with a live signature box."""
import gi
gi.require_version('Gtk', '4.0')
from gi.repository import Gtk, Gdk
import logging

from ..core.document import DocumentRenderer
from ..core.signature_pad import SignaturePad
from ..core.stroke import EventKind, InputEvent, PointerType, TouchPoint

logger = logging.getLogger(__name__)


class DocumentView(Gtk.DrawingArea):
    """Shows the page shrunk to the viewport and routes input to the pad."""

    def __init__(self, renderer: DocumentRenderer, pad: SignaturePad):
        super().__init__()

        self.renderer = renderer
        self.pad = pad
        self.last_width = None
        self.pointer_type = PointerType.MOUSE

        self.set_draw_func(self.on_draw)
        self.set_hexpand(True)
        self.set_vexpand(True)
        # Small minimum so the page can be shrunk on narrow windows
        self.set_content_width(200)
        self.set_content_height(int(pad.document.logical_height))

        self.connect('resize', self.on_resize)
        self.connect('notify::scale-factor', self.on_scale_factor_changed)

        self.setup_gestures()
        logger.info("DocumentView initialized")

    def setup_gestures(self):
        """Set up gesture controllers for pointer and touch input."""
        self.gesture_drag = Gtk.GestureDrag.new()
        self.gesture_drag.set_button(1)  # Primary button, includes touch
        self.gesture_drag.connect('drag-begin', self.on_drag_begin)
        self.gesture_drag.connect('drag-update', self.on_drag_update)
        self.gesture_drag.connect('drag-end', self.on_drag_end)
        self.add_controller(self.gesture_drag)

        self.motion_controller = Gtk.EventControllerMotion.new()
        self.motion_controller.connect('leave', self.on_leave)
        self.add_controller(self.motion_controller)

    def page_origin(self):
        """Viewport position of the page's top-left corner."""
        margin = self.pad.viewport.margin / 2
        visual_width, _ = self.pad.document.visual_size()
        return max(margin, (self.get_width() - visual_width) / 2), margin

    def on_draw(self, area, cr, width, height):
        """Draw the page at the current viewport scale."""
        cr.set_source_rgb(0.95, 0.95, 0.95)
        cr.paint()

        origin_x, origin_y = self.page_origin()
        cr.translate(origin_x, origin_y)
        scale = self.pad.scale
        cr.scale(scale, scale)
        self.renderer.draw(cr)

    def on_resize(self, area, width, height):
        """Rescale the page, then resize the signature buffer."""
        # Height changes come from our own content height, only width matters
        if width == self.last_width:
            return
        self.last_width = width

        self.pad.on_viewport_resize(width, self.get_scale_factor())
        document = self.pad.document
        self.set_content_height(int(document.layout_height + self.pad.viewport.margin))
        self.queue_draw()

    def on_scale_factor_changed(self, widget, _param):
        """Density changed (e.g. moved to another monitor): resize the buffer only."""
        self.pad.on_density_change(self.get_scale_factor())
        self.queue_draw()

    def _pointer_type(self, gesture) -> PointerType:
        device = gesture.get_current_event_device()
        if device is None:
            return PointerType.MOUSE
        source = device.get_source()
        if source == Gdk.InputSource.TOUCHSCREEN:
            return PointerType.TOUCH
        if source == Gdk.InputSource.PEN:
            return PointerType.PEN
        return PointerType.MOUSE

    def _event(self, kind: EventKind, x: float, y: float) -> InputEvent:
        touches = [TouchPoint(x, y)] if self.pointer_type == PointerType.TOUCH else []
        return InputEvent(x, y, kind, pointer_type=self.pointer_type, touches=touches)

    def _dispatch(self, gesture, event: InputEvent):
        origin_x, origin_y = self.page_origin()
        self.pad.handle_event(event, self.pad.bounding_box(origin_x, origin_y))
        if event.default_prevented and gesture is not None:
            # Claiming the sequence keeps the scrolled window from scrolling
            gesture.set_state(Gtk.EventSequenceState.CLAIMED)
        self.queue_draw()

    def on_drag_begin(self, gesture, x, y):
        """Handle pointer down."""
        origin_x, origin_y = self.page_origin()
        scale = self.pad.scale
        page_x = (x - origin_x) / scale
        page_y = (y - origin_y) / scale

        if self.renderer.hit_clear_control(page_x, page_y):
            gesture.set_state(Gtk.EventSequenceState.DENIED)
            self.pad.clear()
            self.queue_draw()
            return

        if not self.pad.bounding_box(origin_x, origin_y).contains(x, y):
            # Outside the signature box, leave the event to scrolling
            gesture.set_state(Gtk.EventSequenceState.DENIED)
            return

        self.pointer_type = self._pointer_type(gesture)
        if self.pointer_type != PointerType.TOUCH:
            gesture.set_state(Gtk.EventSequenceState.CLAIMED)

        logger.debug(f"Signature stroke begin at ({x:.2f}, {y:.2f}) from {self.pointer_type.value}")
        self._dispatch(gesture, self._event(EventKind.DOWN, x, y))

    def on_drag_update(self, gesture, offset_x, offset_y):
        """Handle pointer move."""
        if not self.pad.renderer.stroke_state.is_drawing:
            return

        # get_start_point returns (success, x, y) in GTK4
        success, start_x, start_y = gesture.get_start_point()
        if not success:
            return

        x = start_x + offset_x
        y = start_y + offset_y

        origin_x, origin_y = self.page_origin()
        inside = self.pad.bounding_box(origin_x, origin_y).contains(x, y)
        if not inside and self.pointer_type != PointerType.TOUCH:
            # Pointer left the signature box
            self._dispatch(gesture, self._event(EventKind.LEAVE, x, y))
            return

        self._dispatch(gesture, self._event(EventKind.MOVE, x, y))

    def on_drag_end(self, gesture, offset_x, offset_y):
        """Handle pointer up."""
        if not self.pad.renderer.stroke_state.is_drawing:
            return
        success, start_x, start_y = gesture.get_start_point()
        x = start_x + offset_x if success else 0.0
        y = start_y + offset_y if success else 0.0
        self._dispatch(None, self._event(EventKind.UP, x, y))

    def on_leave(self, controller):
        """Handle the pointer leaving the view."""
        if self.pad.renderer.stroke_state.is_drawing:
            self._dispatch(None, self._event(EventKind.LEAVE, 0.0, 0.0))
