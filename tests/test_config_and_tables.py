import pytest

from consteval import config, errors
from consteval.evaluation.evaluator import evaluate
from consteval.types.context import Context
from consteval.types.expression import Literal
from consteval.types.function_table import FunctionTable
from consteval.types.primitive import Boolean, Float, Integer

# -----------------------------------------------------
# Configuration
# -----------------------------------------------------


def test_default_integer_bounds(monkeypatch):
    monkeypatch.delenv("CONSTEVAL_INTEGER_BITS", raising=False)
    assert config.integer_bounds() == (-2 ** 127, 2 ** 127 - 1)


def test_wider_integers(monkeypatch, run):
    monkeypatch.setenv("CONSTEVAL_INTEGER_BITS", "256")
    assert config.integer_bounds() == (-2 ** 255, 2 ** 255 - 1)
    assert run(f"(add {2 ** 127 - 1} 1)") == Integer(2 ** 127)
    with pytest.raises(errors.Overflow):
        run(f"(mul {2 ** 128} {2 ** 128})")


@pytest.mark.parametrize("value", ["64", "wide", "12.5"])
def test_invalid_integer_bits(monkeypatch, value):
    monkeypatch.setenv("CONSTEVAL_INTEGER_BITS", value)
    with pytest.raises(ValueError):
        config.get_integer_bits()


def test_blank_setting_uses_default(monkeypatch):
    monkeypatch.setenv("CONSTEVAL_INTEGER_BITS", "  ")
    assert config.get_integer_bits() == 128


def test_default_epsilon(monkeypatch):
    monkeypatch.setenv("CONSTEVAL_EPSILON", "0.5")
    assert config.get_default_epsilon() == 0.5
    assert Float(1.0).approx_eq(Float(1.4))


@pytest.mark.parametrize("value", ["0", "-0.1", "small"])
def test_invalid_epsilon(monkeypatch, value):
    monkeypatch.setenv("CONSTEVAL_EPSILON", value)
    with pytest.raises(ValueError):
        config.get_default_epsilon()


# -----------------------------------------------------
# Context
# -----------------------------------------------------


def test_context_define_and_lookup(context):
    context.define("A", Integer(1))
    assert context.lookup("A") == Integer(1)
    assert context.lookup("B") is None
    assert context["A"] == Integer(1)
    assert "A" in context
    assert len(context) == 1


def test_context_rejects_duplicates(context):
    context.define("A", Integer(1))
    with pytest.raises(errors.DuplicateConstant):
        context.define("A", Integer(2))
    assert context["A"] == Integer(1)


def test_context_rejects_plain_values(context):
    with pytest.raises(TypeError):
        context.define("A", 1)


def test_context_from_values_keeps_order():
    ctx = Context.from_values({"Z": 1, "A": 2.5, "M": False})
    assert list(ctx) == ["Z", "A", "M"]
    assert list(ctx.values()) == [Integer(1), Float(2.5), Boolean(False)]


def test_context_repr():
    ctx = Context.from_values({"A": 1, "B": True})
    assert repr(ctx) == "Context(A=1, B=true)"


# -----------------------------------------------------
# Function table
# -----------------------------------------------------


def test_default_table_contents(functions):
    assert sorted(functions) == ["add", "and", "fract", "mul", "not", "or"]
    assert functions.frozen


def test_default_tables_are_independent():
    assert FunctionTable.default() is not FunctionTable.default()


def test_frozen_table_rejects_registration(functions):
    with pytest.raises(TypeError):
        functions.register("sub", lambda location, args: args[0])
    assert "sub" not in functions


def test_register_requires_callable():
    table = FunctionTable()
    with pytest.raises(TypeError):
        table.register("one", 1)


def test_register_overrides_before_freeze(context):
    table = FunctionTable()
    table.register("pick", lambda location, args: args[0])
    table.register("pick", lambda location, args: args[-1])
    table.freeze()
    assert table.lookup("pick") is table["pick"]
    assert table.lookup("missing") is None
    assert evaluate("(pick 1 2 3)", context, table) == Integer(3)


def test_native_function_receives_call_location(context):
    seen = []

    def probe(location, args):
        seen.append((location.fragment, [arg.value for arg in args]))
        return Literal(location, Boolean(True))

    table = FunctionTable()
    table.register("probe", probe)
    evaluate("(probe 1 (probe 2.5))", context, table)
    assert seen == [("probe", [Float(2.5)]), ("probe", [Integer(1), Boolean(True)])]
