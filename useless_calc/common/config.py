"""Runtime settings of the calculator."""
from pydantic import BaseModel, ConfigDict, Field


APP_VERSION = "1.0.0"
UNRECOGNIZED_MARKER = "Boh!"
EXIT_COMMAND = "exit"


class CalculatorSettings(BaseModel):
    """Settings shared by the engine and the interactive shell."""

    model_config = ConfigDict(frozen=True)

    unrecognized_marker: str = Field(
        default=UNRECOGNIZED_MARKER,
        min_length=1,
        description="Value returned when no operation is recognized",
    )
    exit_command: str = Field(
        default=EXIT_COMMAND,
        min_length=1,
        description="Command that ends the interactive session (case-insensitive)",
    )
    version: str = Field(default=APP_VERSION, description="Version shown in the banner")
