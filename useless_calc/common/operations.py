"""Operations recognized by the parser and their evaluation."""
import operator
from typing import Annotated, Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class SumOperation(BaseModel):
    """Addition of two non-negative integers."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sum"] = "sum"
    a: int = Field(..., ge=0, strict=True, description="Left operand")
    b: int = Field(..., ge=0, strict=True, description="Right operand")


class DiffOperation(BaseModel):
    """Subtraction of two non-negative integers, ``a`` being the minuend."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["diff"] = "diff"
    a: int = Field(..., ge=0, strict=True, description="Minuend")
    b: int = Field(..., ge=0, strict=True, description="Subtrahend")


Operation = Annotated[Union[SumOperation, DiffOperation], Field(discriminator="kind")]

# Mapping of operation kinds to the function computing their value
EVALUATORS: dict[str, Callable[[int, int], int]] = {
    "sum": operator.add,
    "diff": operator.sub,
}


def evaluate_operation(operation: Operation) -> int:
    """
    Compute the value of an operation.

    The result is an exact ``int``; differences may be negative.

    :param Operation operation: Parsed operation

    :return: Computed value
    :rtype: int
    :raises TypeError: If the argument is not a known operation
    """
    if not isinstance(operation, (SumOperation, DiffOperation)):
        raise TypeError(f"Not an operation: {operation!r}")
    return EVALUATORS[operation.kind](operation.a, operation.b)
