"""Command-line entry point: digitmul BASE A B

Печатает цифры a * b в основании base, по одной строке на цифру:
    digit <j> of a * b in base <base> is <digit>

Коды завершения:
- 0: успех (для нулевого произведения ничего не печатается)
- 1: ошибка разбора, нарушение предусловия или переполнение бэкенда
- 2: ошибка использования (неверное количество аргументов)
"""

import argparse
import logging
import sys

from src.core.math.numeric_backend import (
    BACKEND_ARBITRARY,
    BACKEND_FIXED,
    DEFAULT_WIDTH_BITS,
)
from src.driver.pipeline import DriverConfig, render_json, render_lines, run_multiplication

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="digitmul",
        description="Multiply two non-negative integers digit by digit in an arbitrary base.",
    )

    parser.add_argument("base", help="Base of the digit representation (decimal, >= 2)")
    parser.add_argument("a", help="First factor (decimal, >= 0)")
    parser.add_argument("b", help="Second factor (decimal, >= 0)")
    parser.add_argument(
        "--backend",
        choices=[BACKEND_ARBITRARY, BACKEND_FIXED],
        default=BACKEND_ARBITRARY,
        help="Numeric backend (default: %(default)s)",
    )
    parser.add_argument(
        "--width-bits",
        type=int,
        default=DEFAULT_WIDTH_BITS,
        help="Word width for the fixed backend (default: %(default)s)",
    )
    parser.add_argument("--json", action="store_true", help="Emit a JSON report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    config = DriverConfig.from_args(args)

    try:
        backend = config.resolve_backend()
        base = backend.parse(args.base)
        a = backend.parse(args.a)
        b = backend.parse(args.b)
        report = run_multiplication(base, a, b, backend)
    except (ValueError, ArithmeticError) as e:
        # ValueError: NumberParseError, PreconditionViolation, неверный width_bits
        # ArithmeticError: NumericOverflowError
        logger.debug("Computation aborted", exc_info=True)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if config.emit_json:
        print(render_json(report))
    else:
        output = render_lines(report)
        if output:
            print("\n".join(output))

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
