import pytest

from consteval import errors
from consteval.types.location import Location


def test_location_renders_caret_line():
    location = Location("(add 1 x)", 7, 1)
    assert str(location) == "  (add 1 x)\n         ^"


def test_location_underlines_whole_span():
    location = Location("(nosuchfn 1)", 1, 8)
    assert str(location) == "  (nosuchfn 1)\n   ^^^^^^^^"


def test_zero_length_location():
    assert str(Location("", 0, 0)) == "  \n  "


@pytest.mark.parametrize(
    "text,start,length",
    [
        ("abc", 2, 2),
        ("abc", -1, 1),
        ("abc", 0, -1),
        ("", 1, 0),
    ]
)
def test_location_must_fit_text(text, start, length):
    with pytest.raises(ValueError):
        Location(text, start, length)


@pytest.mark.parametrize(
    "source,expected",
    [
        (
            "(add 1 x)",
            'Unknown symbol name "x"\n'
            "  (add 1 x)\n"
            "         ^",
        ),
        (
            "(nosuchfn 1)",
            'Unknown function "nosuchfn"\n'
            "  (nosuchfn 1)\n"
            "   ^^^^^^^^",
        ),
        (
            "(add 1 $)",
            "Invalid character '$' for this position\n"
            "  (add 1 $)\n"
            "         ^",
        ),
        (
            "()",
            "Empty expressions are not allowed\n"
            "  ()\n"
            "   ^",
        ),
        (
            "(",
            "Unmatched opening '('\n"
            "  (\n"
            "  ^",
        ),
        (
            ")",
            "Unmatched closing ')'\n"
            "  )\n"
            "  ^",
        ),
        (
            "(1 2)",
            "Only functions can be called\n"
            "  (1 2)\n"
            "   ^",
        ),
        (
            "1 2",
            "Unexpected token\n"
            "  1 2\n"
            "    ^",
        ),
        (
            "(or)",
            "Function argument count incorrect\n"
            "  (or)\n"
            "   ^^",
        ),
        (
            "(fract 10)",
            "Argument invalid: Only floats have fractional parts\n"
            "  (fract 10)\n"
            "         ^^",
        ),
        (
            f"(mul {2 ** 100} 0x100_0000_0000)",
            "Overflow or underflow occurred\n"
            f"  (mul {2 ** 100} 0x100_0000_0000)\n"
            "  " + " " * 37 + "^" * 15,
        ),
    ]
)
def test_error_messages(run, source, expected):
    with pytest.raises(errors.EvalError) as exc:
        run(source)
    assert str(exc.value) == expected


def test_error_is_structured(run):
    with pytest.raises(errors.EvalError) as exc:
        run("(add 1 x)")
    err = exc.value
    assert isinstance(err, errors.UnknownSymbol)
    assert isinstance(err, errors.ConstEvalError)
    assert err.message == 'Unknown symbol name "x"'
    assert (err.location.start, err.location.length) == (7, 1)


def test_at_keeps_first_location():
    first = Location("(not 1)", 5, 1)
    second = Location("(not 1)", 1, 3)
    err = errors.InvalidArgument("Cannot (not 1)").at(first).at(second)
    assert err.location is first
