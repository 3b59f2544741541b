import logging
import math
from enum import Enum

from .path import check_finite

logger = logging.getLogger(__name__)


class RotationState(Enum):
    IDLE = "idle"
    ROTATED = "rotated"


class TransformStack:
    """Rotation of the page coordinate system.

    A rotation opens one graphics state save ``q`` that is closed by
    ``Q`` on the next rotate() call or at the end of the page, so at
    most one save is outstanding at any time.
    """
    def __init__(self, surface):
        self.surface = surface
        self.state = RotationState.IDLE
        self._angle = None
        self._anchor = None

    @property
    def angle(self):
        """Active rotation in degrees, 0 when idle"""
        if self.state is RotationState.ROTATED:
            return self._angle
        return 0

    @property
    def anchor(self):
        """Point the active rotation turns around, None when idle"""
        return self._anchor

    def _restore(self):
        self.surface.append_raw("Q")
        self.state = RotationState.IDLE
        self._angle = None
        self._anchor = None

    def rotate(self, angle, x=None, y=None):
        """Rotate everything drawn afterwards by angle degrees
        (counterclockwise) about (x, y).

        Missing coordinates are taken from the current pen position of
        the surface. rotate(0) only ends the active rotation.
        """
        if x is None or y is None:
            pen_x, pen_y = self.surface.position()
            x = pen_x if x is None else x
            y = pen_y if y is None else y
        check_finite("angle", angle)
        check_finite("x", x)
        check_finite("y", y)
        token = None
        if angle != 0:
            radians = angle * math.pi / 180
            c = math.cos(radians)
            s = math.sin(radians)
            cx, cy = self.surface.page_space().device(x, y)
            token = (
                "q {:.5f} {:.5f} {:.5f} {:.5f} {:.2f} {:.2f} cm "
                "1 0 0 1 {:.2f} {:.2f} cm".format(
                    c, s, -s, c, cx, cy, -cx, -cy
                )
            )
        if self.state is RotationState.ROTATED:
            self._restore()
        if token is not None:
            self.surface.append_raw(token)
            self.state = RotationState.ROTATED
            self._angle = angle
            self._anchor = (x, y)
            logger.debug("Rotated by %s degrees about (%s, %s)", angle, x, y)

    def on_page_end(self):
        """Close an outstanding rotation, must run before the page's
        content stream is closed."""
        if self.state is RotationState.ROTATED:
            logger.debug("Closing rotation left open at page end")
            self._restore()

    def rotated_draw(self, x, y, draw, angle):
        """Call draw(x, y) with the drawing rotated by angle degrees about
        (x, y) and return its result."""
        self.rotate(angle, x, y)
        try:
            return draw(x, y)
        finally:
            self.rotate(0)
