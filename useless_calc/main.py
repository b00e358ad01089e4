"""
Command line entrypoint.

This script either:
- Runs the interactive calculator prompt (default)
- Evaluates every line of an operations file (``--file``) and writes
  the results next to it
"""

import argparse
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, FilePath, ValidationError

from useless_calc.common.config import APP_VERSION, CalculatorSettings
from useless_calc.common.logger import logger, set_level
from useless_calc.common.models import OperationRequest
from useless_calc.engine.engine import CalculatorEngine
from useless_calc.shell.shell import InteractiveShell


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliArgs(BaseModel):
    """
    Validated command line of useless-calc.

    ``file_path`` selects batch mode and must name an existing file; when it
    is None the interactive prompt runs instead.
    """

    file_path: Optional[FilePath] = None
    log_level: str = "WARNING"


def parse_args(argv: Optional[list[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param Optional[list[str]] argv: Arguments, defaults to sys.argv

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="useless-calc",
        description="Evaluate two-operand additions and subtractions",
    )

    parser.add_argument(
        "--file",
        dest="file_path",
        help="Path to a file containing one command per line",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Log level (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    args = parser.parse_args(argv)

    try:
        return CliArgs(file_path=args.file_path, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Name the batch results file after the commands file, in the same folder.

    The extension is folded into the name so that ``ops.txt`` and ``ops.csv``
    never share a results file: ``ops.txt`` gives ``ops_txt_results.txt``.

    :param Path input_path: Commands file

    :return: Results file path
    :rtype: Path
    """
    suffix_safe = "_".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{input_path.stem}{suffix_safe}_results.txt")


def evaluate_file(input_path: Path, output_path: Path, engine: CalculatorEngine = None) -> int:
    """
    Evaluate each non-empty line of a file and write one result per line.

    Lines are evaluated exactly as written, like interactive input, so
    surrounding whitespace makes a line unrecognized. Unrecognized lines
    produce the unrecognized marker, never an error.

    :param Path input_path: File with one command per line
    :param Path output_path: File where results are written
    :param CalculatorEngine engine: Engine to use, a default one if None

    :return: Number of lines evaluated
    :rtype: int
    """
    engine = engine if engine is not None else CalculatorEngine()
    lines = input_path.read_text(encoding="utf-8").splitlines()
    requests = [OperationRequest(expression=line) for line in lines if line]

    logger.info("Evaluating %d commands from %s", len(requests), input_path)
    with output_path.open("w", encoding="utf-8") as f_out:
        for request in requests:
            result = engine.evaluate(request.expression)
            f_out.write(f"{request.expression} = {result}\n")

    logger.info("Results written to %s", output_path)
    return len(requests)


def main(argv: Optional[list[str]] = None) -> None:
    """
    Main function of the ``useless-calc`` command.
    """
    cli_args = parse_args(argv)
    set_level(cli_args.log_level)

    settings = CalculatorSettings()
    engine = CalculatorEngine(settings=settings)

    if cli_args.file_path is None:
        InteractiveShell(engine=engine, settings=settings).run()
        return

    input_path = Path(cli_args.file_path)
    evaluate_file(input_path, build_output_path(input_path), engine)


if __name__ == "__main__":
    main()
