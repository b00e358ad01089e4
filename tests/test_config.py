"""Test CalculatorSettings and the package logger."""
import logging

from pydantic import ValidationError
import pytest

from useless_calc.common.config import CalculatorSettings
from useless_calc.common.logger import logger, set_level


def test_settings_defaults() -> None:
    """Defaults match the historical behaviour."""
    settings = CalculatorSettings()
    assert settings.unrecognized_marker == "Boh!"
    assert settings.exit_command == "exit"


def test_settings_reject_empty_marker() -> None:
    """An empty marker would be indistinguishable from no output."""
    with pytest.raises(ValidationError):
        CalculatorSettings(unrecognized_marker="")


def test_settings_are_frozen() -> None:
    settings = CalculatorSettings()
    with pytest.raises(ValidationError):
        settings.exit_command = "quit"


def test_set_level() -> None:
    """set_level accepts level names in any case."""
    try:
        set_level("info")
        assert logger.level == logging.INFO
    finally:
        logger.setLevel(logging.WARNING)


def test_set_level_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        set_level("chatty")
