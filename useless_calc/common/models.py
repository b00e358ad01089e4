"""Pydantic models exchanged between the parser, the engine and their callers."""
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from useless_calc.common.config import UNRECOGNIZED_MARKER
from useless_calc.common.operations import Operation


class OperationRequest(BaseModel):
    """A single command line read in batch mode."""

    expression: str = Field(..., description="Line read from the commands file, passed to the engine untouched")


class ParseResult(BaseModel):
    """Outcome of a parse: the recognized operation, or nothing."""

    model_config = ConfigDict(frozen=True)

    operation: Optional[Operation] = Field(default=None, description="Recognized operation")

    @property
    def matched(self) -> bool:
        return self.operation is not None


class NumericResult(BaseModel):
    """Value of a recognized operation."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: int = Field(..., strict=True, description="Computed value")

    def __str__(self) -> str:
        return str(self.value)


class Unrecognized(BaseModel):
    """Marker returned when no operation matched the input."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unrecognized"] = "unrecognized"
    marker: str = Field(default=UNRECOGNIZED_MARKER, description="Fallback value shown to the user")

    def __str__(self) -> str:
        return self.marker


EvalResult = Annotated[Union[NumericResult, Unrecognized], Field(discriminator="kind")]
