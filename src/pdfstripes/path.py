import math
from enum import Enum

from .errors import InvalidArgument

# control point offset of a cubic Bezier quarter circle of radius 1
KAPPA = 4 / 3 * (math.sqrt(2) - 1)


class ShapeStyle(Enum):
    STROKE = "D"
    FILL = "F"
    FILL_AND_STROKE = "FD"

    @classmethod
    def parse(cls, style):
        """Style from a ShapeStyle or a style string.

        "F" fills, "FD" or "DF" fills and strokes, anything else strokes.
        """
        if isinstance(style, cls):
            return style
        if not isinstance(style, str):
            return cls.STROKE
        if style == "F":
            return cls.FILL
        if style in ("FD", "DF"):
            return cls.FILL_AND_STROKE
        return cls.STROKE

    @property
    def operator(self):
        """Path painting operator for open paths"""
        return {"D": "S", "F": "f", "FD": "B"}[self.value]

    @property
    def closing_operator(self):
        """Path painting operator that closes the path first"""
        return {"D": "s", "F": "f", "FD": "b"}[self.value]


def check_finite(name, value):
    if not math.isfinite(value):
        raise InvalidArgument(
            "{} must be a finite number, got {!r}".format(name, value)
        )


def check_positive(name, value):
    check_finite(name, value)
    if not value > 0:
        raise InvalidArgument(
            "{} must be positive, got {!r}".format(name, value)
        )


def _corner_set(corners):
    corners = frozenset(str(corner) for corner in corners)
    unknown = corners - {"1", "2", "3", "4"}
    if unknown:
        raise InvalidArgument(
            "Unknown corners {!r}, expected some of 1, 2, 3, 4".format(
                "".join(sorted(unknown))
            )
        )
    return corners


def _coordinates(points):
    coords = []
    for point in points:
        if isinstance(point, (tuple, list)):
            if len(point) != 2:
                raise InvalidArgument(
                    "Expected (x, y) pair, got {!r}".format(point)
                )
            coords.extend(point)
        else:
            coords.append(point)
    if not coords or len(coords) % 2:
        raise InvalidArgument(
            "Polygon needs an even, non-zero count of coordinates, "
            "got {}".format(len(coords))
        )
    return coords


class PathEmitter:
    """Draws shapes given in user space into the content stream of a page.

    Every point goes through the map
    ``(x, y) -> (x * scale, (height_units - y) * scale)`` of the current
    page. Each drawing call builds all of its operators before appending
    any, so a call that fails leaves the content stream untouched.
    """
    def __init__(self, surface):
        self.surface = surface

    def _emit(self, tokens):
        for token in tokens:
            self.surface.append_raw(token)

    @staticmethod
    def _point(space, x, y):
        check_finite("x", x)
        check_finite("y", y)
        return "{:.2f} {:.2f}".format(*space.device(x, y))

    def _move(self, space, x, y):
        return "{} m".format(self._point(space, x, y))

    def _line(self, space, x, y):
        return "{} l".format(self._point(space, x, y))

    def _curve(self, space, x1, y1, x2, y2, x3, y3):
        return "{} {} {} c".format(
            self._point(space, x1, y1),
            self._point(space, x2, y2),
            self._point(space, x3, y3),
        )

    def arc(self, x1, y1, x2, y2, x3, y3):
        """Cubic Bezier curve from the current point through control
        points (x1, y1) and (x2, y2) to (x3, y3)."""
        space = self.surface.page_space()
        self._emit([self._curve(space, x1, y1, x2, y2, x3, y3)])

    def rect(self, x, y, w, h, style="D"):
        """Rectangle with upper-left corner at (x, y)"""
        for name, value in (("x", x), ("y", y), ("w", w), ("h", h)):
            check_finite(name, value)
        space = self.surface.page_space()
        dx, dy = space.device(x, y)
        self._emit([
            "{:.2f} {:.2f} {:.2f} {:.2f} re {}".format(
                dx, dy, w * space.scale, -h * space.scale,
                ShapeStyle.parse(style).operator
            )
        ])

    def rounded_rect(self, x, y, w, h, r, corners="1234", style="D"):
        """Rectangle with some corners rounded by quarter circles.

        :param x, y:        corner the path starts from
        :param w, h:        width and height, positive
        :param r:           corner radius, r <= 0 gives sharp corners
        :param corners:     rounded corners, numbered in path order:
                            1 (x, y), 2 (x + w, y), 3 (x + w, y + h),
                            4 (x, y + h). String "1234" or ints.
        :param style:       ShapeStyle or "D", "F", "FD"
        """
        check_positive("width", w)
        check_positive("height", h)
        check_finite("r", r)
        corners = _corner_set(corners)
        op = ShapeStyle.parse(style).operator
        if r <= 0:
            r = 0
            corners = frozenset()
        arc = KAPPA * r
        space = self.surface.page_space()

        tokens = [self._move(space, x + r, y)]
        xc, yc = x + w - r, y + r
        tokens.append(self._line(space, xc, y))
        if "2" in corners:
            tokens.append(self._curve(
                space, xc + arc, yc - r, xc + r, yc - arc, xc + r, yc
            ))
        else:
            tokens.append(self._line(space, x + w, y))

        xc, yc = x + w - r, y + h - r
        tokens.append(self._line(space, x + w, yc))
        if "3" in corners:
            tokens.append(self._curve(
                space, xc + r, yc + arc, xc + arc, yc + r, xc, yc + r
            ))
        else:
            tokens.append(self._line(space, x + w, y + h))

        xc, yc = x + r, y + h - r
        tokens.append(self._line(space, xc, y + h))
        if "4" in corners:
            tokens.append(self._curve(
                space, xc - arc, yc + r, xc - r, yc + arc, xc - r, yc
            ))
        else:
            tokens.append(self._line(space, x, y + h))

        xc, yc = x + r, y + r
        tokens.append(self._line(space, x, yc))
        if "1" in corners:
            tokens.append(self._curve(
                space, xc - r, yc - arc, xc - arc, yc - r, xc, yc - r
            ))
        else:
            tokens.append(self._line(space, x, y))
            tokens.append(self._line(space, x + r, y))
        tokens.append(op)
        self._emit(tokens)

    def circle(self, x, y, r, style="D"):
        self.ellipse(x, y, r, r, style)

    def ellipse(self, x, y, rx, ry, style="D"):
        """Ellipse centered at (x, y), drawn as four Bezier quadrants
        starting at its rightmost point."""
        check_positive("rx", rx)
        check_positive("ry", ry)
        op = ShapeStyle.parse(style).operator
        lx = KAPPA * rx
        ly = KAPPA * ry
        space = self.surface.page_space()
        self._emit([
            self._move(space, x + rx, y),
            self._curve(
                space, x + rx, y - ly, x + lx, y - ry, x, y - ry
            ),
            self._curve(
                space, x - lx, y - ry, x - rx, y - ly, x - rx, y
            ),
            self._curve(
                space, x - rx, y + ly, x - lx, y + ry, x, y + ry
            ),
            self._curve(
                space, x + lx, y + ry, x + rx, y + ly, x + rx, y
            ),
            op,
        ])

    def polygon(self, points, style="D"):
        """Closed polygon through points.

        :param points:      flat sequence x1, y1, x2, y2, ... or a
                            sequence of (x, y) pairs
        :param style:       ShapeStyle or "D", "F", "FD"
        """
        coords = _coordinates(points)
        op = ShapeStyle.parse(style).closing_operator
        space = self.surface.page_space()
        tokens = [self._move(space, coords[0], coords[1])]
        for i in range(2, len(coords), 2):
            tokens.append(self._line(space, coords[i], coords[i + 1]))
        tokens.append(op)
        self._emit(tokens)
