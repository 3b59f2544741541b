import pytest

from pdfstripes import (
    BarcodeRenderer, Code128A, ContentStream, InvalidArgument,
    InvalidSymbolByte, OutOfRange, PathEmitter
)


def bits_to_int(bits):
    number = 0
    for bit in bits:
        number = (number << 1) | bit
    return number


def make_renderer(height_units=100, scale=1.0):
    stream = ContentStream(height_units, scale)
    return stream, BarcodeRenderer(PathEmitter(stream))


def test_table_shape():
    assert len(Code128A.patterns) == 107
    for index in range(106):
        pattern = Code128A.pattern_of(index)
        assert len(pattern) == 6
        assert sum(pattern) == Code128A.code_width
    assert Code128A.pattern_of(106) == (2, 3, 3, 1, 1, 1, 2)


def test_patterns_as_bits():
    # well known 11 module bit patterns
    assert bits_to_int(Code128A.modules(Code128A.pattern_of(0))) == 1740
    assert bits_to_int(Code128A.modules(Code128A.pattern_of(103))) == 1668
    assert bits_to_int(Code128A.modules(Code128A.pattern_of(104))) == 1680
    assert bits_to_int(Code128A.modules(Code128A.pattern_of(105))) == 1692
    assert bits_to_int(Code128A.modules(Code128A.pattern_of(106))) == 6379


def test_byte_index_bijection():
    for byte in list(range(32, 127)) + list(range(200, 212)):
        assert Code128A.index_to_byte(Code128A.byte_to_index(byte)) == byte
    for index in range(107):
        assert Code128A.byte_to_index(Code128A.index_to_byte(index)) == index
    assert Code128A.byte_to_index(ord("A")) == 33
    assert Code128A.byte_to_index(Code128A.start_A_byte) == Code128A.start_A
    assert Code128A.byte_to_index(Code128A.stop_byte) == Code128A.stop


def test_invalid_symbols():
    for byte in (0, 31, 127, 199, 212, 255):
        with pytest.raises(InvalidSymbolByte):
            Code128A.byte_to_index(byte)
    for index in (-1, 107):
        with pytest.raises(OutOfRange):
            Code128A.index_to_byte(index)
        with pytest.raises(OutOfRange):
            Code128A.pattern_of(index)
    # library errors are builtin errors too
    with pytest.raises(ValueError):
        Code128A.byte_to_index(127)
    with pytest.raises(IndexError):
        Code128A.pattern_of(107)


def test_checksum():
    # 103 + 1 * 17 + 2 * 16 + 3 * 16 = 200
    assert Code128A.checksum("100") == 97
    assert Code128A.checksum(b"100") == 97
    assert Code128A.checksum("101") == 100
    assert Code128A.checksum("010") == 98
    assert Code128A.checksum("") == 0
    assert Code128A.checksum("100") == Code128A.checksum("100")


def test_checksum_rejects_non_payload():
    with pytest.raises(InvalidSymbolByte):
        Code128A.checksum("caf\xe9")
    with pytest.raises(InvalidSymbolByte):
        Code128A.checksum("line\n")
    with pytest.raises(InvalidSymbolByte):
        Code128A.checksum(bytes([Code128A.start_A_byte]))


def test_frame():
    assert Code128A.frame("100") == bytes([208, 49, 48, 48, 202, 211])
    patterns = list(Code128A.symbols("100"))
    assert len(patterns) == 6
    assert [len(p) for p in patterns] == [6, 6, 6, 6, 6, 7]
    assert Code128A.symbol_width("100") == 5 * 11 + 13


def test_bars():
    bits = list(Code128A.bars("100"))
    assert len(bits) == 68
    # start A
    assert bits_to_int(bits[:11]) == 1668
    # stop
    assert bits_to_int(bits[-13:]) == 6379


def test_render():
    stream, renderer = make_renderer()
    width = renderer.render(0, 0, "100", bar_width=0.5, bar_height=10)
    assert width == 34.0
    # 3 bars in each of 5 symbols, 4 bars in stop
    assert len(stream.tokens) == 19
    assert all(token.endswith(" re f") for token in stream.tokens)
    assert stream.tokens[0] == "0.00 100.00 1.00 -10.00 re f"
    assert stream.tokens[-1] == "33.00 100.00 1.00 -10.00 re f"


def test_bar_widths_add_up():
    _, renderer = make_renderer()
    for value in ("100", "HELLO WORLD", "Code 128!", ""):
        bars = renderer.bars(5, value, 0.25)
        total = Code128A.symbol_width(value) * 0.25
        # symbol starts and ends with a bar
        assert bars[0][0] == 5
        last_x, last_width = bars[-1]
        assert last_x + last_width == pytest.approx(5 + total)
        for (x1, w1), (x2, _) in zip(bars, bars[1:]):
            assert x1 + w1 < x2
        assert sum(w for _, w in bars) < total


def test_render_offsets():
    stream, renderer = make_renderer(height_units=50, scale=2)
    renderer.render(10, 5, "A", bar_width=1, bar_height=4)
    assert stream.tokens[0] == "20.00 90.00 4.00 -8.00 re f"


def test_render_invalid_input_draws_nothing():
    stream, renderer = make_renderer()
    with pytest.raises(InvalidSymbolByte):
        renderer.render(0, 0, "\x00", 0.5, 10)
    with pytest.raises(InvalidArgument):
        renderer.render(0, 0, "100", 0, 10)
    with pytest.raises(InvalidArgument):
        renderer.render(0, 0, "100", 0.5, -1)
    assert stream.tokens == []
