"""Map viewport input positions into drawing-surface coordinates."""
import logging
from typing import Tuple

from .stroke import InputEvent, MappedPoint, BoundingBox, LayoutNotReadyError, first_contact

logger = logging.getLogger(__name__)


class CoordinateMapper:
    """Undoes the viewport scale to get surface-local CSS pixels.

    The bounding box is the surface as it appears on screen, already
    shrunk by the viewport scale, while the on-screen width/height are the
    unscaled layout size. Their ratio is the effective local scale; it is
    derived from the rectangle on every call rather than read from the
    viewport controller, so nested transforms are handled too.

    The density ratio is not involved here: the drawing context's own
    transform takes care of it.
    """

    @staticmethod
    def event_position(event: InputEvent) -> Tuple[float, float]:
        """Viewport position of an event; touch events use the first contact."""
        if event.is_touch:
            contact = first_contact(event)
            if contact is not None:
                return contact.client_x, contact.client_y
        return event.client_x, event.client_y

    def map(self, event: InputEvent, bounding_box: BoundingBox,
            on_screen_width: float, on_screen_height: float) -> MappedPoint:
        """Convert an input event into a MappedPoint.

        Raises:
            LayoutNotReadyError: If the surface has no on-screen size yet.
        """
        if not on_screen_width or not on_screen_height:
            raise LayoutNotReadyError(
                f"Surface not laid out ({on_screen_width}x{on_screen_height})")
        if not bounding_box.width or not bounding_box.height:
            raise LayoutNotReadyError(f"Surface has no visible area: {bounding_box}")

        client_x, client_y = self.event_position(event)

        local_scale_x = bounding_box.width / on_screen_width
        local_scale_y = bounding_box.height / on_screen_height

        x = (client_x - bounding_box.left) / local_scale_x
        y = (client_y - bounding_box.top) / local_scale_y
        return MappedPoint(x, y)
