import logging

from .encoding.code128 import Code128A
from .path import ShapeStyle, check_positive

logger = logging.getLogger(__name__)


class BarcodeRenderer:
    """Draws Code128 symbols as filled rectangles through a PathEmitter"""
    encoding = Code128A

    def __init__(self, emitter):
        self.emitter = emitter

    def bars(self, x, value, bar_width):
        """Rectangles (x, width) of the bars of value, left to right.

        Widths of bars and of the spaces between them add up to
        symbol_width(value) * bar_width.
        """
        offset = 0
        parity = 0
        result = []
        for pattern in self.encoding.symbols(value):
            for width in pattern:
                if parity % 2 == 0:
                    result.append((x + offset * bar_width, width * bar_width))
                offset += width
                parity += 1
        return result

    def render(self, x, y, value, bar_width=0.5, bar_height=10):
        """Draw the barcode of value with its upper-left corner at (x, y).

        :param value:           payload, printable ASCII only
        :param bar_width:       width of one module in user units
        :param bar_height:      height of the bars in user units
        :return:                total width of the symbol in user units
        """
        check_positive("bar_width", bar_width)
        check_positive("bar_height", bar_height)
        bars = self.bars(x, value, bar_width)
        for bar_x, width in bars:
            self.emitter.rect(bar_x, y, width, bar_height, ShapeStyle.FILL)
        total = self.encoding.symbol_width(value) * bar_width
        logger.debug(
            "Rendered code128 %r: %d bars, %s units wide",
            value, len(bars), total
        )
        return total
