"""Random-operand benchmark of BigInt against Python's built-in int."""

from __future__ import annotations

import argparse
import operator
import random
import sys
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, TextIO

from limbint.bigint import BigInt


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _truncating_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


class Operation(Enum):
    """Arithmetic operations selectable by their command-line symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "x"
    DIV = "/"
    MOD = "%"

    @property
    def bigint_op(self) -> Callable[[BigInt, BigInt], BigInt]:
        return {
            Operation.ADD: operator.add,
            Operation.SUB: operator.sub,
            Operation.MUL: operator.mul,
            Operation.DIV: operator.floordiv,
            Operation.MOD: operator.mod,
        }[self]

    @property
    def reference_op(self) -> Callable[[int, int], int]:
        return {
            Operation.ADD: operator.add,
            Operation.SUB: operator.sub,
            Operation.MUL: operator.mul,
            Operation.DIV: _truncating_div,
            Operation.MOD: _truncating_mod,
        }[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operation":
        """Select an operation by the first character of ``symbol``."""
        if not symbol:
            raise ValueError("empty operation")
        try:
            return cls(symbol[0])
        except ValueError:
            raise ValueError(f"unsupported operation: {symbol!r}") from None


class MismatchError(AssertionError):
    """BigInt produced a result different from the reference."""

    def __init__(self, expected: BigInt, actual: BigInt) -> None:
        super().__init__(f"expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


@dataclass
class Score:
    """How many races each implementation won."""

    bigint: int = 0
    reference: int = 0


def generate(num_digits: int, rng: Optional[random.Random] = None) -> str:
    """Return a random decimal literal of ``num_digits`` digits, maybe negative.

    The leading digit is never zero.
    """
    if num_digits < 1:
        raise ValueError("num_digits must be at least 1")
    rng = rng or random.Random()
    sign = "-" if rng.randint(0, 9) & 1 else ""
    digits: List[str] = [str(rng.randint(1, 9))]
    digits.extend(str(rng.randint(0, 9)) for _ in range(num_digits - 1))
    return sign + "".join(digits)


def _timed(func: Callable[[], object]) -> "tuple[object, float]":
    start = time.perf_counter()
    result = func()
    return result, time.perf_counter() - start


def _race(
    first_digits: int,
    second_digits: int,
    op: str,
    iterations: int,
    rng: Optional[random.Random],
    *,
    timed: bool,
    verbose: bool,
    stream: TextIO,
) -> Score:
    operation = Operation.from_symbol(op)
    rng = rng or random.Random()
    score = Score()

    for _ in range(iterations):
        text1, text2 = generate(first_digits, rng), generate(second_digits, rng)
        num1, num2 = BigInt(text1), BigInt(text2)
        ref1, ref2 = int(text1), int(text2)

        ours, ours_time = _timed(lambda: operation.bigint_op(num1, num2))
        theirs, theirs_time = _timed(lambda: operation.reference_op(ref1, ref2))

        if timed:
            stream.write(f"BigInt elapsed time: {ours_time} seconds\n")
            stream.write(f"Reference elapsed time: {theirs_time} seconds\n")
        elif ours_time < theirs_time:
            score.bigint += 1
        else:
            score.reference += 1

        expected = BigInt(str(theirs))
        if verbose:
            stream.write(f"{expected}\n{ours}\n\n")
        if ours != expected:
            raise MismatchError(expected, ours)  # type: ignore[arg-type]

    return score


def run(
    first_digits: int,
    second_digits: int,
    op: str,
    iterations: int,
    rng: Optional[random.Random] = None,
) -> Score:
    """Race BigInt against int on random operands and check every result.

    A wrong result raises :class:`MismatchError`.
    """
    return _race(
        first_digits,
        second_digits,
        op,
        iterations,
        rng,
        timed=False,
        verbose=False,
        stream=sys.stdout,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="limbint-bench",
        description="Check and race BigInt arithmetic against built-in int.",
    )
    parser.add_argument("first_digits", type=int, help="digits of the first operand")
    parser.add_argument("second_digits", type=int, help="digits of the second operand")
    parser.add_argument("op", help="one of + - x / %%")
    parser.add_argument("iterations", type=int, help="number of rounds")
    parser.add_argument("--time", action="store_true", help="print each duration")
    parser.add_argument("--print", action="store_true", help="print each result")
    args = parser.parse_args(argv)

    try:
        score = _race(
            args.first_digits,
            args.second_digits,
            args.op,
            args.iterations,
            None,
            timed=args.time,
            verbose=args.print,
            stream=sys.stdout,
        )
    except ValueError as exc:
        if args.op and args.op[0] not in {o.value for o in Operation}:
            for _ in range(args.iterations):
                print("NOT IMPLEMENTED!")
            score = Score()
        else:
            parser.error(str(exc))

    print(f"Final Score\nBigInt: {score.bigint}\nReference: {score.reference}")
    return 0


if __name__ == "__main__":
    sys.exit(main())