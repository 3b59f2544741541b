from .code128 import Code128A

__all__ = ["Code128A"]
