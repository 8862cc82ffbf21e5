import pytest

from crypto_scanner.calculator import (
    Adder,
    MathError,
    OperationArgs,
    Subtract,
    ToolDefinition,
)

PAIRS = [(2, 5), (0, 0), (-7, 3), (100, -250), (2**31 - 1, 0)]


def test_adder_definition():
    definition = Adder().definition("any prompt")
    assert isinstance(definition, ToolDefinition)
    assert definition.name == "add"
    assert definition.description == "Add x and y together"
    props = definition.parameters["properties"]
    assert props["x"]["description"] == "The first number to add"
    assert props["y"]["description"] == "The second number to add"
    assert definition.parameters["type"] == "object"


def test_subtract_definition():
    definition = Subtract().definition("")
    assert definition.name == "subtract"
    assert definition.description == "Subtract y from x (i.e.: x - y)"
    props = definition.parameters["properties"]
    assert props["x"]["description"] == "The number to subtract from"
    assert props["y"]["description"] == "The number to subtract"
    assert {p["type"] for p in props.values()} == {"number"}


def test_definition_ignores_prompt():
    assert Adder().definition("a") == Adder().definition("b")


@pytest.mark.parametrize("x, y", PAIRS)
def test_add_commutes(x, y):
    adder = Adder()
    assert adder.call(OperationArgs(x, y)) == adder.call(OperationArgs(y, x))


@pytest.mark.parametrize("x, y", PAIRS)
def test_subtract_undoes_add(x, y):
    if not -(2**31) <= x - y <= 2**31 - 1:
        pytest.fail("pair chosen out of range")
    difference = Subtract().call(OperationArgs(x, y))
    assert Adder().call(OperationArgs(difference, y)) == x


def test_add_zero_is_identity():
    assert Adder().call(OperationArgs(42, 0)) == 42


def test_subtract_self_is_zero():
    assert Subtract().call(OperationArgs(17, 17)) == 0


def test_calls_print_trace(capsys):
    Adder().call(OperationArgs(2, 5))
    Subtract().call(OperationArgs(2, 5))
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "[tool-call] Adding 2 and 5",
        "[tool-call] Subtracting 5 from 2",
    ]


def test_add_overflow_raises():
    with pytest.raises(MathError, match="Math error"):
        Adder().call(OperationArgs(2**31 - 1, 1))


def test_subtract_overflow_raises():
    with pytest.raises(MathError):
        Subtract().call(OperationArgs(-(2**31), 1))


def test_from_mapping_reads_operands():
    args = OperationArgs.from_mapping({"x": 2, "y": 5, "extra": "ignored"})
    assert args == OperationArgs(2, 5)


@pytest.mark.parametrize(
    "data",
    [
        {"x": 1},
        {"y": 1},
        {"x": 1.5, "y": 2},
        {"x": "1", "y": 2},
        {"x": True, "y": 2},
        {"x": 2**31, "y": 0},
    ],
)
def test_from_mapping_rejects_bad_input(data):
    with pytest.raises(ValueError):
        OperationArgs.from_mapping(data)