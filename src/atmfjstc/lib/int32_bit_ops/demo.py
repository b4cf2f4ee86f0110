"""
Demonstrates the operations in this package on a few small inputs, checking each result against the expected value.

Run with::

    python -m atmfjstc.lib.int32_bit_ops.demo [--log-level LEVEL] [--strict]

Nothing is executed merely by importing this module.
"""

import logging
import sys

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from atmfjstc.lib.int32_bit_ops import (
    get_bit, set_bit, clear_bit, update_bit, is_power_of_2, multiply, multiply_unsigned, count_set_bits, bits_diff,
    bit_length, full_adder,
)


LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class DemoCase:
    expression: str
    "The call being demonstrated, as it would be written in code"

    compute: Callable[[], Any]
    "Performs the call and returns its result"

    expected: Any
    "The result the call should produce"


DEMO_CASES = (
    DemoCase('get_bit(5, 0)', lambda: get_bit(5, 0), 1),
    DemoCase('get_bit(5, 1)', lambda: get_bit(5, 1), 0),
    DemoCase('get_bit(5, 2)', lambda: get_bit(5, 2), 1),
    DemoCase('get_bit(5, 3)', lambda: get_bit(5, 3), 0),
    DemoCase('set_bit(5, 1)', lambda: set_bit(5, 1), 7),
    DemoCase('set_bit(5, 2)', lambda: set_bit(5, 2), 5),
    DemoCase('clear_bit(5, 0)', lambda: clear_bit(5, 0), 4),
    DemoCase('clear_bit(5, 1)', lambda: clear_bit(5, 1), 5),
    DemoCase('clear_bit(5, 2)', lambda: clear_bit(5, 2), 1),
    DemoCase('update_bit(5, 1, 1)', lambda: update_bit(5, 1, 1), 7),
    DemoCase('multiply(2, 3)', lambda: multiply(2, 3), 6),
    DemoCase('multiply(2, -3)', lambda: multiply(2, -3), -6),
    DemoCase('multiply_unsigned(2, 3)', lambda: multiply_unsigned(2, 3), 6),
    DemoCase('count_set_bits(5)', lambda: count_set_bits(5), 2),
    DemoCase('count_set_bits(7)', lambda: count_set_bits(7), 3),
    DemoCase('count_set_bits(8)', lambda: count_set_bits(8), 1),
    DemoCase('bits_diff(5, 4)', lambda: bits_diff(5, 4), 1),
    DemoCase('bits_diff(4, 7)', lambda: bits_diff(4, 7), 2),
    DemoCase('bit_length(5)', lambda: bit_length(5), 3),
    DemoCase('bit_length(3)', lambda: bit_length(3), 2),
    DemoCase('is_power_of_2(5)', lambda: is_power_of_2(5), False),
    DemoCase('is_power_of_2(8)', lambda: is_power_of_2(8), True),
    DemoCase('full_adder(7, 3)', lambda: full_adder(7, 3), 10),
)


def run_demo(cases: Sequence[DemoCase] = DEMO_CASES) -> List[DemoCase]:
    """
    Evaluates the demo cases, logging each result.

    Returns:
        The cases whose result differed from the expected value (an empty list if everything matched).
    """
    mismatches = []

    for case in cases:
        result = case.compute()

        if result == case.expected:
            LOG.info("%s -> %r", case.expression, result)
        else:
            LOG.error("%s -> %r (expected %r)", case.expression, result, case.expected)
            mismatches.append(case)

    return mismatches


def setup_arguments(mut_parser: ArgumentParser):
    mut_parser.add_argument(
        '--log-level', type=str.upper, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], default='INFO',
        help="Logging level (default: %(default)s)",
    )
    mut_parser.add_argument(
        '--strict', action='store_true', help="Exit with a non-zero status if any result is not the expected one",
    )


def setup_logging(raw_args: Namespace):
    logging.basicConfig(level=raw_args.log_level, style='{', format='[{asctime}] {levelname}: {message}')


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = ArgumentParser(description="Demonstrates the 32-bit bit manipulation operations")
    setup_arguments(parser)

    raw_args = parser.parse_args(argv)
    setup_logging(raw_args)

    mismatches = run_demo()

    if len(mismatches) > 0:
        LOG.warning("%d of %d results differ from the expected ones", len(mismatches), len(DEMO_CASES))

    return 1 if (raw_args.strict and len(mismatches) > 0) else 0


if __name__ == '__main__':
    sys.exit(main())
