"""Test class CalculatorEngine."""
from typing import Optional

import pytest

from useless_calc.common.config import CalculatorSettings
from useless_calc.common.models import NumericResult, ParseResult, Unrecognized
from useless_calc.common.operations import SumOperation
from useless_calc.engine.engine import CalculatorEngine


class FakeParser:
    """Parser stub returning a fixed result and recording calls."""

    def __init__(self, result: ParseResult):
        self.result = result
        self.calls: list[Optional[str]] = []

    def try_parse(self, user_input: Optional[str]) -> ParseResult:
        self.calls.append(user_input)
        return self.result


def test_engine_calls_parser() -> None:
    """The engine asks the parser and evaluates the returned operation."""
    fake = FakeParser(ParseResult(operation=SumOperation(a=1, b=2)))
    engine = CalculatorEngine(parser=fake)
    assert engine.evaluate("1+1") == NumericResult(value=3)
    assert fake.calls == ["1+1"]


def test_engine_returns_marker_when_parser_fails() -> None:
    """When the parser recognizes nothing the engine returns Boh!."""
    engine = CalculatorEngine(parser=FakeParser(ParseResult()))
    result = engine.evaluate("1+1")
    assert result == Unrecognized()
    assert str(result) == "Boh!"


def test_engine_uses_configured_marker() -> None:
    """The fallback marker comes from the settings."""
    engine = CalculatorEngine(settings=CalculatorSettings(unrecognized_marker="??"))
    assert str(engine.evaluate("nope")) == "??"


@pytest.mark.parametrize("user_input,expected", [
    ("8+34", 42),
    ("34-8", 26),
    ("10-34", -24),
    ("0+0", 0),
    ("99999999999999999999+1", 100000000000000000000),
])
def test_engine_evaluates_commands(user_input: str, expected: int) -> None:
    """Recognized commands evaluate to their numeric value."""
    assert CalculatorEngine().evaluate(user_input) == NumericResult(value=expected)


@pytest.mark.parametrize("user_input", [None, "", "a+1", "a-1", "10 34+4", "10+34+4"])
def test_engine_returns_marker_for_unrecognized(user_input: Optional[str]) -> None:
    """Unrecognized input, None included, yields the marker instead of raising."""
    assert CalculatorEngine().evaluate(user_input) == Unrecognized()


@pytest.mark.parametrize("user_input", ["5+6", "5-6", "x"])
def test_engine_is_idempotent(user_input: str) -> None:
    """Evaluating the same input twice gives equal results."""
    engine = CalculatorEngine()
    assert engine.evaluate(user_input) == engine.evaluate(user_input)


@pytest.mark.parametrize("user_input", [
    "1" * 5000 + "+1",
    "9" * 4300 + "+" + "9" * 4300,
    "9" * 4300 + "-1",
])
def test_engine_handles_very_long_operands(user_input: str) -> None:
    """Operands beyond Python's int/str conversion limit yield the marker."""
    assert CalculatorEngine().evaluate(user_input) == Unrecognized()


def test_engine_result_over_4300_digits_is_printable() -> None:
    """A sum longer than 4300 digits can still be rendered."""
    result = CalculatorEngine().evaluate("9" * 4299 + "+" + "9" * 4299)
    assert isinstance(result, NumericResult)
    assert len(str(result)) == 4300
