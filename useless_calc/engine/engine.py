"""Calculator engine: parse a line, evaluate it, or fall back to the marker."""
from typing import Optional, Protocol

from useless_calc.common.config import CalculatorSettings
from useless_calc.common.logger import logger
from useless_calc.common.models import EvalResult, NumericResult, ParseResult, Unrecognized
from useless_calc.common.operations import evaluate_operation
from useless_calc.common.parser import ExpressionParser


class CalculatorParser(Protocol):
    """Anything able to turn raw input into a ParseResult."""

    def try_parse(self, user_input: Optional[str]) -> ParseResult:
        ...


class CalculatorEngine:
    """
    Evaluate single user commands.

    - Asks the parser for an operation
    - Returns its value as a NumericResult
    - Returns the Unrecognized marker when the parser finds nothing

    The engine keeps no state between calls and never raises for
    string or None input.
    """

    def __init__(self, parser: CalculatorParser = None, settings: CalculatorSettings = None):
        self.parser = parser if parser is not None else ExpressionParser()
        self.settings = settings if settings is not None else CalculatorSettings()

    def evaluate(self, user_input: Optional[str]) -> EvalResult:
        """
        Evaluate one line of user input.

        :param Optional[str] user_input: Raw user input, possibly None

        :return: The computed value, or the unrecognized marker
        :rtype: EvalResult
        """
        parsed = self.parser.try_parse(user_input)
        if not parsed.matched:
            logger.info("Unrecognized input: %r", user_input)
            return Unrecognized(marker=self.settings.unrecognized_marker)
        return NumericResult(value=evaluate_operation(parsed.operation))
