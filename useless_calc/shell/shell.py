"""Interactive prompt loop around the calculator engine."""
from typing import Callable, Optional

from useless_calc.common.config import CalculatorSettings
from useless_calc.common.logger import logger
from useless_calc.engine.engine import CalculatorEngine


BANNER_RULE = "======================="
BANNER_SEPARATOR = "-----------------------"
PROMPT = "Cosa posso fare per te?"


class InteractiveShell:
    """
    Read commands from the user until the exit command is entered.

    Each iteration prints the banner, reads one line and, unless it is the
    exit command, prints the engine's response. End of input ends the
    session like the exit command does.
    """

    def __init__(
        self,
        engine: CalculatorEngine = None,
        settings: CalculatorSettings = None,
        input_fn: Callable[[], str] = None,
        output_fn: Callable[[str], None] = None,
    ):
        self.settings = settings if settings is not None else CalculatorSettings()
        self.engine = engine if engine is not None else CalculatorEngine(settings=self.settings)
        self.input_fn = input_fn if input_fn is not None else input
        self.output_fn = output_fn if output_fn is not None else print

    def is_exit(self, user_input: Optional[str]) -> bool:
        """Return True if the input is the exit command, ignoring case."""
        return user_input is not None and user_input.casefold() == self.settings.exit_command.casefold()

    def ask_input(self) -> Optional[str]:
        """
        Print the banner and read one line.

        :return: The line read, or None at end of input
        :rtype: Optional[str]
        """
        self.output_fn(BANNER_RULE)
        self.output_fn(f"USELESS CALC v.{self.settings.version}")
        self.output_fn(BANNER_SEPARATOR)
        self.output_fn(PROMPT)
        try:
            return self.input_fn()
        except EOFError:
            return None

    def display_result(self, result: object) -> None:
        self.output_fn(f"RESPONSE: {result}")

    def run(self) -> int:
        """
        Run the prompt loop.

        :return: Number of commands evaluated
        :rtype: int
        """
        evaluated = 0
        while True:
            user_input = self.ask_input()
            if user_input is None:
                logger.info("End of input, leaving")
                break
            if self.is_exit(user_input):
                break
            self.display_result(self.engine.evaluate(user_input))
            evaluated += 1
        return evaluated
