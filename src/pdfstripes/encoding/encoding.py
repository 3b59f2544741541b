from abc import ABC, abstractmethod


class BarcodeEncoding(ABC):
    """Linear barcode base class"""

    @classmethod
    def modules(cls, widths):
        """Expand module widths into bits, 1 for bar, 0 for space.

    :param widths:      widths alternating bar/space, starting with a bar
    :return:            yields bits (0/1)"""
        bar = 1
        for width in widths:
            for _ in range(width):
                yield bar
            bar ^= 1

    @abstractmethod
    def widths(self, data):
        raise NotImplementedError

    @classmethod
    def bars(cls, data):
        """Encodes data to series of bits, 1 for black bar,
0 for background.

    :param data:        data to encode
    :return:            yields bits of barcode (0/1)"""
        yield from cls.modules(cls.widths(data))
