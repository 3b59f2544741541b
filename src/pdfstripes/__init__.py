from .canvas import Canvas
from .encoding.code128 import Code128A
from .errors import (
    InvalidArgument, InvalidSymbolByte, OutOfRange, StripesError
)
from .page import ContentSink, ContentStream, PageSpace, PageSurface
from .path import PathEmitter, ShapeStyle
from .render import BarcodeRenderer
from .transform import RotationState, TransformStack

__version__ = "0.1.0"

__all__ = [
    "BarcodeRenderer",
    "Canvas",
    "Code128A",
    "ContentSink",
    "ContentStream",
    "InvalidArgument",
    "InvalidSymbolByte",
    "OutOfRange",
    "PageSpace",
    "PageSurface",
    "PathEmitter",
    "RotationState",
    "ShapeStyle",
    "StripesError",
    "TransformStack",
]
