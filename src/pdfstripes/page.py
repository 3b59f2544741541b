from abc import ABC, abstractmethod
from collections import namedtuple


class PageSpace(namedtuple("PageSpace", ["height_units", "scale"])):
    """Constants of one page: its height in user units and the factor
    converting user units to device units (points).

    User space has its origin top-left with y growing downwards, device
    space has its origin bottom-left.
    """
    __slots__ = ()

    def device(self, x, y):
        """Map a user space point to device space"""
        return x * self.scale, (self.height_units - y) * self.scale


class ContentSink(ABC):
    """Destination of content stream operators of the current page"""

    @abstractmethod
    def append_raw(self, token):
        """Append one verbatim content stream token, keeping call order"""
        pass


class PageSurface(ContentSink):
    """Content sink that also knows the geometry of the current page
    and the current pen position."""

    @abstractmethod
    def page_space(self):
        """PageSpace of the current page"""
        pass

    @abstractmethod
    def position(self):
        """Current pen position (x, y) in user space"""
        pass


class ContentStream(PageSurface):
    """In-memory page surface collecting tokens into a list.

    Useful on its own to obtain raw content stream operators, e.g. for
    embedding them into a form XObject of another PDF library.
    """
    def __init__(self, height_units, scale=1.0, position=(0, 0)):
        self.space = PageSpace(height_units, scale)
        self.pen = tuple(position)
        self.tokens = []

    def append_raw(self, token):
        self.tokens.append(token)

    def page_space(self):
        return self.space

    def position(self):
        return self.pen

    def move_to(self, x, y):
        self.pen = (x, y)

    def getvalue(self):
        """Content stream as text, one token per line"""
        return "".join("{}\n".format(token) for token in self.tokens)

    def __len__(self):
        return len(self.tokens)
