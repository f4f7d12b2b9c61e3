import pytest

from printfmt.render import (
    render,
    render_char,
    render_decimal,
    render_pointer,
    render_string,
    render_unsigned,
)
from printfmt.spec import ConversionSpec, FormatError

DEC = "0123456789"
HEX = "0123456789abcdef"
UHEX = "0123456789ABCDEF"

DECIMAL_SPECS = [
    ({}, "%d"),
    ({"width": 6}, "%6d"),
    ({"flag": "-", "width": 6}, "%-6d"),
    ({"flag": "0", "width": 6}, "%06d"),
    ({"precision": 4}, "%.4d"),
    ({"width": 8, "precision": 5}, "%8.5d"),
    ({"flag": "-", "width": 8, "precision": 5}, "%-8.5d"),
]


@pytest.mark.parametrize("fields,python_format", DECIMAL_SPECS)
@pytest.mark.parametrize("value", [0, 7, 42, -42, 2147483647, -2147483648])
def test_decimal_matches_printf(fields, python_format, value):
    assert render_decimal(value, ConversionSpec("d", **fields)) == python_format % value


def test_decimal_wraps_to_32_bits():
    assert render_decimal(2**31, ConversionSpec("d")) == str(-(2**31))


def test_zero_with_zero_precision_prints_nothing():
    assert render_decimal(0, ConversionSpec("d", precision=0)) == ""


def test_zero_with_zero_precision_keeps_width():
    assert render_decimal(0, ConversionSpec("d", width=4, precision=0)) == " " * 4
    assert render_unsigned(0, ConversionSpec("x", flag="-", width=4, precision=0), HEX) == " " * 4


def test_unsigned_wraps_negative():
    assert render_unsigned(-1, ConversionSpec("u"), DEC) == str(2**32 - 1)


@pytest.mark.parametrize("value", [0, 255, 3054, 2**32 - 1])
def test_hex_digits(value):
    assert render_unsigned(value, ConversionSpec("x"), HEX) == format(value, "x")
    assert render_unsigned(value, ConversionSpec("X"), UHEX) == format(value, "X")


@pytest.mark.parametrize("value", [0, 255, 3054])
def test_hex_zero_fill(value):
    spec = ConversionSpec("x", flag="0", width=8)
    assert render_unsigned(value, spec, HEX) == "%08x" % value


@pytest.mark.parametrize(
    "fields,python_format",
    [
        ({}, "%s"),
        ({"width": 8}, "%8s"),
        ({"flag": "-", "width": 8}, "%-8s"),
        ({"precision": 2}, "%.2s"),
        ({"width": 8, "precision": 2}, "%8.2s"),
        ({"flag": "-", "width": 8, "precision": 9}, "%-8.9s"),
    ],
)
@pytest.mark.parametrize("value", ["hello", "", "a"])
def test_string_matches_printf(fields, python_format, value):
    assert render_string(value, ConversionSpec("s", **fields)) == python_format % value


def test_none_string_is_null_text():
    assert render_string(None, ConversionSpec("s")) == "(null)"
    assert render_string(None, ConversionSpec("s", precision=3)) == "(null)"[:3]


def test_string_zero_flag_fills_with_zeros():
    result = render_string("ab", ConversionSpec("s", flag="0", width=5))
    assert len(result) == 5
    assert result.endswith("ab")
    assert set(result[:-2]) == {"0"}


@pytest.mark.parametrize(
    "fields,python_format",
    [({}, "%c"), ({"width": 4}, "%4c"), ({"flag": "-", "width": 4}, "%-4c")],
)
def test_char_matches_printf(fields, python_format):
    assert render_char(65, ConversionSpec("c", **fields)) == python_format % 65


def test_char_code_is_taken_modulo_256():
    assert render_char(256 + 65, ConversionSpec("c")) == chr(65)


def test_char_accepts_one_character_string():
    assert render_char("z", ConversionSpec("c")) == "z"


def test_char_zero_flag():
    result = render_char("A", ConversionSpec("c", flag="0", width=4))
    assert len(result) == 4
    assert result.endswith("A")
    assert set(result[:-1]) == {"0"}


def test_percent_conversion_is_padded_like_a_char():
    assert render(ConversionSpec("%", width=3), iter(())) == "%3s" % "%"


def test_pointer_is_hex_with_prefix():
    assert render_pointer(255, ConversionSpec("p")) == hex(255)
    assert render_pointer(None, ConversionSpec("p")) == hex(0)


def test_pointer_wraps_to_64_bits():
    assert render_pointer(-1, ConversionSpec("p")) == hex(2**64 - 1)


def test_pointer_width():
    assert render_pointer(255, ConversionSpec("p", width=8)) == hex(255).rjust(8)
    assert render_pointer(255, ConversionSpec("p", flag="-", width=8)) == hex(255).ljust(8)


def test_pointer_zero_flag_puts_zeros_before_prefix():
    result = render_pointer(255, ConversionSpec("p", flag="0", width=8))
    assert len(result) == 8
    assert result.endswith(hex(255))
    assert set(result[: 8 - len(hex(255))]) == {"0"}


@pytest.mark.parametrize(
    "conversion,value,direct",
    [
        ("d", -17, lambda v, s: render_decimal(v, s)),
        ("i", 17, lambda v, s: render_decimal(v, s)),
        ("u", 17, lambda v, s: render_unsigned(v, s, DEC)),
        ("x", 3054, lambda v, s: render_unsigned(v, s, HEX)),
        ("X", 3054, lambda v, s: render_unsigned(v, s, UHEX)),
        ("c", 66, lambda v, s: render_char(v, s)),
        ("s", "abc", lambda v, s: render_string(v, s)),
        ("p", 4096, lambda v, s: render_pointer(v, s)),
    ],
)
def test_render_dispatches_by_conversion(conversion, value, direct):
    spec = ConversionSpec(conversion, width=9)
    assert render(spec, iter([value])) == direct(value, ConversionSpec(conversion, width=9))


def test_render_consumes_one_argument():
    args = iter([1, 2])
    render(ConversionSpec("d"), args)
    assert next(args) == 2


def test_render_missing_argument():
    with pytest.raises(FormatError):
        render(ConversionSpec("d"), iter(()))


def test_render_unknown_conversion():
    with pytest.raises(FormatError):
        render(ConversionSpec("q"), iter([1]))


def test_type_errors():
    with pytest.raises(TypeError):
        render_decimal("5", ConversionSpec("d"))
    with pytest.raises(TypeError):
        render_string(5, ConversionSpec("s"))
    with pytest.raises(TypeError):
        render_char("ab", ConversionSpec("c"))


def test_spec_is_not_mutated():
    spec = ConversionSpec("d", flag="0", width=8, precision=3)
    snapshot = ConversionSpec("d", flag="0", width=8, precision=3)
    render_decimal(-5, spec)
    assert spec == snapshot