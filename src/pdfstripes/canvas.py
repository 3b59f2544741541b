from .path import PathEmitter
from .render import BarcodeRenderer
from .transform import TransformStack


class Canvas:
    """Path emitter, rotation state and barcode renderer of one surface.

    Pages rendered independently need a canvas each, a canvas holds the
    rotation state of the page its surface writes to.
    """
    def __init__(self, surface):
        self.surface = surface
        self.path = PathEmitter(surface)
        self.transform = TransformStack(surface)
        self.barcode = BarcodeRenderer(self.path)

    def rect(self, x, y, w, h, style="D"):
        self.path.rect(x, y, w, h, style)

    def rounded_rect(self, x, y, w, h, r, corners="1234", style="D"):
        self.path.rounded_rect(x, y, w, h, r, corners, style)

    def arc(self, x1, y1, x2, y2, x3, y3):
        self.path.arc(x1, y1, x2, y2, x3, y3)

    def circle(self, x, y, r, style="D"):
        self.path.circle(x, y, r, style)

    def ellipse(self, x, y, rx, ry, style="D"):
        self.path.ellipse(x, y, rx, ry, style)

    def polygon(self, points, style="D"):
        self.path.polygon(points, style)

    def rotate(self, angle, x=None, y=None):
        self.transform.rotate(angle, x, y)

    def rotated_draw(self, x, y, draw, angle):
        return self.transform.rotated_draw(x, y, draw, angle)

    def end_page(self):
        self.transform.on_page_end()

    def code128(self, x, y, value, bar_width=0.5, bar_height=10):
        return self.barcode.render(x, y, value, bar_width, bar_height)
