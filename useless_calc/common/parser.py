"""Recognize two-operand arithmetic commands in raw user input."""
import re
import sys
from typing import Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from useless_calc.common.logger import logger
from useless_calc.common.models import ParseResult
from useless_calc.common.operations import DiffOperation, Operation, SumOperation


def max_operand_digits() -> int:
    """
    Longest operand accepted, 0 meaning no limit.

    Python refuses to convert between ``int`` and ``str`` beyond
    ``sys.get_int_max_str_digits()`` digits. Operands stay one digit under
    that limit, so the sum or difference of two of them can still be printed.
    """
    limit = sys.get_int_max_str_digits()
    return limit - 1 if limit else 0


class Recognizer(BaseModel):
    """
    Decide whether an input is one specific operation and build it.

    A recognizer owns its own matcher and operand extraction:
        1. The whole input must match ``pattern`` (no partial matches)
        2. The named groups ``a`` and ``b`` of the match are the operands
        3. Both are converted to ``int`` and handed to ``factory``

    Operands longer than ``max_operand_digits()`` are not recognized.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Human readable name, used in logs")
    pattern: re.Pattern = Field(..., description="Pattern the whole input must match, with digit groups a and b")
    factory: Callable[..., Operation] = Field(..., description="Builds the operation from a and b")

    def recognize(self, user_input: str) -> Optional[Operation]:
        """
        Build the operation if the input matches this recognizer.

        :param str user_input: Raw user input

        :return: The operation, or None if the input does not match
        :rtype: Optional[Operation]
        """
        # fullmatch, not match with "$": "$" would accept a trailing newline
        match = self.pattern.fullmatch(user_input)
        if match is None:
            return None

        left, right = match.group("a"), match.group("b")
        limit = max_operand_digits()
        if limit and max(len(left), len(right)) > limit:
            logger.info("Operand of %s longer than %d digits, not recognized", self.name, limit)
            return None
        return self.factory(a=int(left), b=int(right))


# [0-9] rather than \d so that non-ASCII digits are rejected
SUM_RECOGNIZER = Recognizer(
    name="sum",
    pattern=re.compile(r"(?P<a>[0-9]+)\+(?P<b>[0-9]+)"),
    factory=SumOperation,
)
DIFF_RECOGNIZER = Recognizer(
    name="diff",
    pattern=re.compile(r"(?P<a>[0-9]+)-(?P<b>[0-9]+)"),
    factory=DiffOperation,
)
DEFAULT_RECOGNIZERS: Tuple[Recognizer, ...] = (SUM_RECOGNIZER, DIFF_RECOGNIZER)


class ExpressionParser(BaseModel):
    """
    Turn a raw input line into a recognized operation.

    Supported forms are exactly ``<digits>+<digits>`` and ``<digits>-<digits>``,
    with no whitespace and nothing around them. Anything else, ``None``
    included, is reported as "not recognized" rather than raised.

    Recognizers are tried in order and the first match wins. Their operator
    symbols are disjoint, so no input can match two of them.

    Examples:
        - "8+34"    -> SumOperation(a=8, b=34)
        - "10-34"   -> DiffOperation(a=10, b=34)
        - "10+34+4" -> not recognized
        - "a+1"     -> not recognized
    """

    model_config = ConfigDict(frozen=True)

    recognizers: Tuple[Recognizer, ...] = Field(
        default=DEFAULT_RECOGNIZERS,
        description="Recognizers tried in order",
    )

    def try_parse(self, user_input: Optional[str]) -> ParseResult:
        """
        Parse a raw input line.

        :param Optional[str] user_input: Raw user input, possibly None

        :return: Result holding the operation, or an empty result
        :rtype: ParseResult
        """
        if not isinstance(user_input, str):
            return ParseResult()

        for recognizer in self.recognizers:
            operation = recognizer.recognize(user_input)
            if operation is not None:
                logger.debug("Input %r recognized as %s", user_input, recognizer.name)
                return ParseResult(operation=operation)

        logger.debug("Input %r not recognized", user_input)
        return ParseResult()
