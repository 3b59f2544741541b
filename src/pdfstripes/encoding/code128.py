from ..errors import InvalidSymbolByte, OutOfRange
from .encoding import BarcodeEncoding


class Code128A(BarcodeEncoding):
    """
    Encoder for Code128 barcode framed with the code set A start symbol.

    Symbols are carried through byte strings: printable bytes 32-126 stand
    for symbols 0-94, reserved bytes 200-211 stand for the control symbols
    95-102 and the start/stop symbols 103-106. There is no switching
    between code sets.
    """
    # module widths, alternating bar and space, starting with a bar
    patterns = (
        (2, 1, 2, 2, 2, 2), (2, 2, 2, 1, 2, 2), (2, 2, 2, 2, 2, 1),  # ' ' ! "
        (1, 2, 1, 2, 2, 3), (1, 2, 1, 3, 2, 2), (1, 3, 1, 2, 2, 2),  # # $ %
        (1, 2, 2, 2, 1, 3), (1, 2, 2, 3, 1, 2), (1, 3, 2, 2, 1, 2),  # & ' (
        (2, 2, 1, 2, 1, 3), (2, 2, 1, 3, 1, 2), (2, 3, 1, 2, 1, 2),  # ) * +
        (1, 1, 2, 2, 3, 2), (1, 2, 2, 1, 3, 2), (1, 2, 2, 2, 3, 1),  # , - .
        (1, 1, 3, 2, 2, 2), (1, 2, 3, 1, 2, 2), (1, 2, 3, 2, 2, 1),  # / 0 1
        (2, 2, 3, 2, 1, 1), (2, 2, 1, 1, 3, 2), (2, 2, 1, 2, 3, 1),  # 2 3 4
        (2, 1, 3, 2, 1, 2), (2, 2, 3, 1, 1, 2), (3, 1, 2, 1, 3, 1),  # 5 6 7
        (3, 1, 1, 2, 2, 2), (3, 2, 1, 1, 2, 2), (3, 2, 1, 2, 2, 1),  # 8 9 :
        (3, 1, 2, 2, 1, 2), (3, 2, 2, 1, 1, 2), (3, 2, 2, 2, 1, 1),  # ; < =
        (2, 1, 2, 1, 2, 3), (2, 1, 2, 3, 2, 1), (2, 3, 2, 1, 2, 1),  # > ? @
        (1, 1, 1, 3, 2, 3), (1, 3, 1, 1, 2, 3), (1, 3, 1, 3, 2, 1),  # A B C
        (1, 1, 2, 3, 1, 3), (1, 3, 2, 1, 1, 3), (1, 3, 2, 3, 1, 1),  # D E F
        (2, 1, 1, 3, 1, 3), (2, 3, 1, 1, 1, 3), (2, 3, 1, 3, 1, 1),  # G H I
        (1, 1, 2, 1, 3, 3), (1, 1, 2, 3, 3, 1), (1, 3, 2, 1, 3, 1),  # J K L
        (1, 1, 3, 1, 2, 3), (1, 1, 3, 3, 2, 1), (1, 3, 3, 1, 2, 1),  # M N O
        (3, 1, 3, 1, 2, 1), (2, 1, 1, 3, 3, 1), (2, 3, 1, 1, 3, 1),  # P Q R
        (2, 1, 3, 1, 1, 3), (2, 1, 3, 3, 1, 1), (2, 1, 3, 1, 3, 1),  # S T U
        (3, 1, 1, 1, 2, 3), (3, 1, 1, 3, 2, 1), (3, 3, 1, 1, 2, 1),  # V W X
        (3, 1, 2, 1, 1, 3), (3, 1, 2, 3, 1, 1), (3, 3, 2, 1, 1, 1),  # Y Z [
        (3, 1, 4, 1, 1, 1), (2, 2, 1, 4, 1, 1), (4, 3, 1, 1, 1, 1),  # \ ] ^
        (1, 1, 1, 2, 2, 4), (1, 1, 1, 4, 2, 2), (1, 2, 1, 1, 2, 4),  # _ ` a
        (1, 2, 1, 4, 2, 1), (1, 4, 1, 1, 2, 2), (1, 4, 1, 2, 2, 1),  # b c d
        (1, 1, 2, 2, 1, 4), (1, 1, 2, 4, 1, 2), (1, 2, 2, 1, 1, 4),  # e f g
        (1, 2, 2, 4, 1, 1), (1, 4, 2, 1, 1, 2), (1, 4, 2, 2, 1, 1),  # h i j
        (2, 4, 1, 2, 1, 1), (2, 2, 1, 1, 1, 4), (4, 1, 3, 1, 1, 1),  # k l m
        (2, 4, 1, 1, 1, 2), (1, 3, 4, 1, 1, 1), (1, 1, 1, 2, 4, 2),  # n o p
        (1, 2, 1, 1, 4, 2), (1, 2, 1, 2, 4, 1), (1, 1, 4, 2, 1, 2),  # q r s
        (1, 2, 4, 1, 1, 2), (1, 2, 4, 2, 1, 1), (4, 1, 1, 2, 1, 2),  # t u v
        (4, 2, 1, 1, 1, 2), (4, 2, 1, 2, 1, 1), (2, 1, 2, 1, 4, 1),  # w x y
        (2, 1, 4, 1, 2, 1), (4, 1, 2, 1, 2, 1), (1, 1, 1, 1, 4, 3),  # z { |
        (1, 1, 1, 3, 4, 1), (1, 3, 1, 1, 4, 1),                      # } ~
        (1, 1, 4, 1, 1, 3),  # DEL
        (1, 1, 4, 3, 1, 1),  # FNC3
        (4, 1, 1, 1, 1, 3),  # FNC2
        (4, 1, 1, 3, 1, 1),  # SHIFT
        (1, 1, 3, 1, 4, 1),  # code C
        (1, 1, 4, 1, 3, 1),  # code B
        (3, 1, 1, 1, 4, 1),  # code A
        (4, 1, 1, 1, 3, 1),  # FNC1
        (2, 1, 1, 4, 1, 2),  # start A
        (2, 1, 1, 2, 1, 4),  # start B
        (2, 1, 1, 2, 3, 2),  # start C
        (2, 3, 3, 1, 1, 1, 2),  # stop, 13 modules
    )

    # symbol indices
    start_A = 103
    start_B = 104
    start_C = 105
    stop = 106

    # reserved bytes for symbols without a printable representation
    start_A_byte = 208
    stop_byte = 211

    printable_first = 32
    printable_last = 126
    reserved_first = 200
    reserved_last = 211

    # modules per ordinary symbol
    code_width = 11

    @classmethod
    def pattern_of(cls, index):
        """Module widths of a symbol

        :param int index:   symbol index 0-106
        :return:            tuple of module widths"""
        if not 0 <= index < len(cls.patterns):
            raise OutOfRange(
                "Symbol index {!r} outside of 0-106".format(index)
            )
        return cls.patterns[index]

    @classmethod
    def byte_to_index(cls, byte):
        """Symbol index for a byte of a symbol string

        :param int byte:    printable byte 32-126 or reserved byte 200-211
        :return:            symbol index 0-106"""
        if cls.printable_first <= byte <= cls.printable_last:
            return byte - 32
        if cls.reserved_first <= byte <= cls.reserved_last:
            return byte - 105
        raise InvalidSymbolByte(
            "{!r} doesn't stand for any code128 symbol".format(byte)
        )

    @classmethod
    def index_to_byte(cls, index):
        """Byte standing for a symbol index, inverse of byte_to_index()"""
        if not 0 <= index < len(cls.patterns):
            raise OutOfRange(
                "Symbol index {!r} outside of 0-106".format(index)
            )
        if index < 95:
            return index + 32
        return index + 105

    @classmethod
    def payload(cls, value):
        """Payload as a list of byte values, checked against the printable
range.

        :param value:       str or bytes
        :return:            list of ints"""
        if isinstance(value, str):
            codes = [ord(char) for char in value]
        else:
            codes = list(value)
        for code in codes:
            if not cls.printable_first <= code <= cls.printable_last:
                raise InvalidSymbolByte(
                    "Byte {!r} can't be encoded in code128A payload".format(
                        code
                    )
                )
        return codes

    @classmethod
    def checksum(cls, value):
        """Mod 103 check symbol, each payload symbol weighted by its
1-based position, seeded with the start A symbol."""
        checksum = cls.start_A
        for i, code in enumerate(cls.payload(value)):
            checksum += (i + 1) * cls.byte_to_index(code)
        return checksum % 103

    @classmethod
    def frame(cls, value):
        """Symbol string: start A, payload, check symbol and stop."""
        codes = cls.payload(value)
        check = cls.index_to_byte(cls.checksum(codes))
        return bytes([cls.start_A_byte] + codes + [check, cls.stop_byte])

    @classmethod
    def symbols(cls, value):
        """Yields patterns of the framed symbols, one per symbol."""
        for byte in cls.frame(value):
            yield cls.pattern_of(cls.byte_to_index(byte))

    @classmethod
    def widths(cls, value):
        for pattern in cls.symbols(value):
            yield from pattern

    @classmethod
    def symbol_width(cls, value):
        """Total count of modules of the framed symbol string"""
        return sum(1 for _ in cls.bars(value))
