# limbint

`limbint` provides `BigInt`, an immutable signed integer of unbounded size.
It stores the magnitude as little-endian limbs in base 10^9. When both
operands are at least 100 limbs long and have the same length,
multiplication uses Karatsuba splitting. Otherwise it uses schoolbook
multiplication. Division is long division, and a binary search finds each
limb of the quotient.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from limbint.bigint import BigInt

a = BigInt("-123456789012345678901234567890")
b = BigInt(987654321)

print(a + b)
print(a - b)
print(a * b)
print(a // b)
print(a % b)

assert a < b
assert int(BigInt("1000000000")) == 10**9
print(BigInt("1000000000").num_digits())   # 2 limbs
```

`BigInt(value)` accepts a Python `int`, a decimal string with an optional
leading `-`, or another `BigInt`. With no argument it is zero. A malformed
string raises `ValueError`, and a value of any other type raises `TypeError`.

`BigInt.from_limbs(limbs, negative=False)` builds a value from a sequence of
base-10^9 limbs, least significant limb first. A limb outside `0 <= limb < 10**9`
raises `ValueError`. `num_digits()` returns the number of limbs in use.

A `BigInt` supports `+`, `-`, `*`, `//` and `%`, and it compares with `==`,
`<`, `<=`, `>` and `>=`. The right-hand operand may be a `BigInt` or an `int`.
A `BigInt` converts with `str()` and `int()`, and it is hashable. Its hash
equals that of the matching `int`. Zero is never negative.

Dividing by zero raises `ZeroDivisionError`. Quotients are truncated toward
zero, and remainders take the sign of the dividend. When the operands have
mixed signs, `//` and `%` can therefore give different results from Python's
built-in `int`.

## Benchmark

`limbint-bench` generates random operands and checks each `BigInt` result
against Python's built-in integers. The built-in division is adjusted to the
truncating rule described above. The command times both implementations and
prints how many rounds each one finished faster:

```
limbint-bench 200 100 x 50
```

The positional arguments are:

- the digit count of the first operand,
- the digit count of the second operand,
- the operation, which is one of `+`, `-`, `x`, `/` and `%`,
- the number of iterations.

The options are:

- `--time` prints the elapsed time of each computation. Rounds are not scored in this mode.
- `--print` prints the expected and the computed result of each round.

Each generated operand has the requested number of digits and a non-zero
leading digit. It is negative about half the time. A wrong result raises
`MismatchError`. If the operation is not one of the five listed above, the
command prints `NOT IMPLEMENTED!` once per iteration and reports a score of
zero.

The same check is available from Python. `limbint.bench.run(first_digits,
second_digits, op, iterations, rng=None)` returns a `Score` with the fields
`bigint` and `reference`. `limbint.bench.generate(num_digits, rng=None)`
returns one random literal.

## Limitations

`BigInt` provides only the operations listed above. It has no unary
negation, no `abs`, no exponentiation and no bitwise operators. It also has
no reflected operators, so `5 + BigInt(1)` fails while `BigInt(1) + 5`
works.