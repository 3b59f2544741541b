import logging
import os
from pathlib import Path

from fpdf import FPDF

from .canvas import Canvas
from .page import PageSpace, PageSurface

logger = logging.getLogger(__name__)


class FpdfSurface(PageSurface):
    """Page surface writing into the current page of an fpdf2 document"""
    def __init__(self, pdf):
        self.pdf = pdf

    def append_raw(self, token):
        # raises FPDFException when no page is open
        self.pdf._out(token)

    def page_space(self):
        return PageSpace(self.pdf.h, self.pdf.k)

    def position(self):
        return self.pdf.x, self.pdf.y


class Document(FPDF):
    """fpdf2 document with rounded rectangles, ellipses, polygons,
    rotation and Code128 barcodes available through ``canvas``.

    Subclasses overriding footer() must call ``super().footer()`` last,
    it closes a rotation left open on the page.
    """
    def __init__(self, margin=20, orientation="P", unit="mm", format="A4"):
        self.pages_added = 0
        self.added_fonts = {}
        self._image_path = ""
        super().__init__(orientation=orientation, unit=unit, format=format)
        self.alias_nb_pages("{nb}")
        self.set_margins(margin, margin)
        self.set_auto_page_break(True, margin)
        self.canvas = Canvas(FpdfSurface(self))

    def add_page(self, *args, **kwargs):
        self.pages_added += 1
        logger.debug("Adding page %d", self.pages_added)
        super().add_page(*args, **kwargs)

    def footer(self):
        self.canvas.end_page()

    def total_pages_alias(self):
        """String replaced by the total page count when the document
        is output."""
        return self.str_alias_nb_pages

    def pagination_str(self, delim="/"):
        """Current page number, delimiter and total page count alias"""
        return "{}{}{}".format(self.page_no(), delim, self.total_pages_alias())

    def move_x(self, dx):
        self.set_x(self.get_x() + dx)

    def move_y(self, dy):
        self.set_xy(self.get_x(), self.get_y() + dy)

    def write_xy(self, x, y, h, text, link=""):
        self.set_xy(x, y)
        self.write(h, text, link)

    @property
    def image_path(self):
        """Directory relative image names are looked up in"""
        return self._image_path

    @image_path.setter
    def image_path(self, path):
        self._image_path = os.path.realpath(path)

    def image(self, name, *args, **kwargs):
        if isinstance(name, (str, os.PathLike)) and self._image_path:
            absolute = os.path.join(self._image_path, name)
            if not os.access(name, os.R_OK) and os.access(absolute, os.R_OK):
                name = absolute
        return super().image(name, *args, **kwargs)

    def add_font(self, family=None, style="", fname=None, *args, **kwargs):
        super().add_font(family, style, fname, *args, **kwargs)
        # fpdf2 names a family after the font file when none is given
        family = family or Path(fname).stem
        self.added_fonts.setdefault(family.lower(), []).append(style.upper())

    def resolve_font_style(self, family, style=""):
        """Style to use for family: the requested one if it was added,
        else the plain style, else the first added style. Underline is
        kept in any case."""
        style = (style or "").upper()
        underline = "U" if "U" in style else ""
        style = style.replace("U", "")
        styles = self.added_fonts.get((family or "").lower())
        if styles and style not in styles:
            style = "" if "" in styles else styles[0]
        return style + underline

    def set_font(self, family=None, style="", size=0):
        if isinstance(style, str):
            style = self.resolve_font_style(family, style)
        super().set_font(family, style, size)

    def rounded_rect(self, x, y, w, h, r, corners="1234", style="D"):
        self.canvas.rounded_rect(x, y, w, h, r, corners, style)

    def code128(self, x, y, value, bar_width=0.5, bar_height=10):
        """Code128 barcode of value at (x, y), returns its width"""
        return self.canvas.code128(x, y, value, bar_width, bar_height)

    def rotated_draw(self, x, y, draw, angle):
        """Call draw(x, y) rotated by angle degrees about (x, y) and return
        its result.

        The rotation restores the PDF graphics state behind fpdf2's back,
        so draw runs in a local context: fonts and colours it sets are
        dropped together with the rotation.
        """
        def local_draw(x, y):
            # local_context() skips its "Q" when the body raises
            self._push_local_stack()
            self._start_local_context()
            try:
                return draw(x, y)
            finally:
                self._end_local_context()
                self._pop_local_stack()

        return self.canvas.rotated_draw(x, y, local_draw, angle)

    def rotated_text(self, x, y, text, angle):
        """Text rotated around its origin"""
        self.rotated_draw(x, y, lambda x, y: self.text(x, y, text), angle)

    def draw(self):
        """Hook for subclasses, runs once right before the document is
        output."""

    def output(self, *args, **kwargs):
        if not self.buffer:
            self.draw()
        return super().output(*args, **kwargs)

    def get_pdf(self):
        """Document as bytes"""
        return bytes(self.output())
