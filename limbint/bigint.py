"""Arbitrary-precision signed integers stored as base 10**9 limbs."""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable, List, Tuple, Union

BASE = 1_000_000_000
LIMB_WIDTH = 9
KARATSUBA_THRESHOLD = 100

_Limbs = List[int]


def _strip(limbs: _Limbs) -> _Limbs:
    """Drop high-order zero limbs, keeping at least one limb."""
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def _compare(a: _Limbs, b: _Limbs) -> int:
    """Three-way comparison of two normalised magnitudes."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return -1 if x < y else 1
    return 0


def _add(a: _Limbs, b: _Limbs, shift: int = 0) -> _Limbs:
    """Return the magnitude a + b * BASE**shift."""
    result = []
    carry = 0
    for x, y in zip_longest(a, [0] * shift + list(b), fillvalue=0):
        carry, limb = divmod(x + y + carry, BASE)
        result.append(limb)
    if carry:
        result.append(carry)
    return _strip(result)


def _sub(a: _Limbs, b: _Limbs) -> _Limbs:
    """Return the magnitude a - b; a must not be smaller than b."""
    result = []
    borrow = 0
    for x, y in zip_longest(a, b, fillvalue=0):
        total = x - y - borrow
        borrow = 1 if total < 0 else 0
        result.append(total + borrow * BASE)
    return _strip(result)


def _mul_small(a: _Limbs, digit: int) -> _Limbs:
    """Multiply a magnitude by a single limb."""
    result = []
    carry = 0
    for x in a:
        carry, limb = divmod(x * digit + carry, BASE)
        result.append(limb)
    if carry:
        result.append(carry)
    return _strip(result)


def _schoolbook(a: _Limbs, b: _Limbs) -> _Limbs:
    result = [0] * (len(a) + len(b) + 1)
    for i, y in enumerate(b):
        if not y:
            continue
        carry = 0
        for j, x in enumerate(a, start=i):
            carry, result[j] = divmod(result[j] + x * y + carry, BASE)
        k = i + len(a)
        while carry:
            carry, result[k] = divmod(result[k] + carry, BASE)
            k += 1
    return _strip(result)


def _mul(a: _Limbs, b: _Limbs) -> _Limbs:
    """Karatsuba for long operands of equal length, schoolbook otherwise."""
    n = len(a)
    if n < KARATSUBA_THRESHOLD or len(b) < KARATSUBA_THRESHOLD or n != len(b):
        return _schoolbook(a, b)
    half = n // 2
    a_lo, a_hi = a[:half], a[half:]
    b_lo, b_hi = b[:half], b[half:]
    low = _mul(a_lo, b_lo)
    high = _mul(a_hi, b_hi)
    middle = _mul(_add(a_lo, a_hi), _add(b_lo, b_hi))
    middle = _sub(_sub(middle, low), high)
    return _add(_add(low, middle, half), high, 2 * half)


def _divmod(a: _Limbs, b: _Limbs) -> Tuple[_Limbs, _Limbs]:
    """Long division of magnitudes, one limb of quotient at a time."""
    if _compare(a, b) < 0:
        return [0], list(a)
    quotient = []
    remainder: _Limbs = [0]
    for limb in reversed(a):
        remainder = _strip([limb] + remainder)
        lo, hi = 0, BASE - 1
        while lo < hi:
            mid = (lo + hi + 1) // 2
            if _compare(_mul_small(b, mid), remainder) <= 0:
                lo = mid
            else:
                hi = mid - 1
        if lo:
            remainder = _sub(remainder, _mul_small(b, lo))
        quotient.append(lo)
    quotient.reverse()
    return _strip(quotient), remainder


def _parse(text: str) -> Tuple[bool, _Limbs]:
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid integer literal: {text!r}")
    limbs = [
        int(digits[max(end - LIMB_WIDTH, 0):end])
        for end in range(len(digits), 0, -LIMB_WIDTH)
    ]
    return negative, limbs


class BigInt:
    """Immutable signed integer of unbounded size.

    Division truncates toward zero and the remainder takes the sign of
    the dividend.
    """

    __slots__ = ("_negative", "_limbs")

    BASE = BASE

    def __init__(self, value: Union[int, str, "BigInt"] = 0) -> None:
        if isinstance(value, BigInt):
            negative, limbs = value._negative, list(value._limbs)
        elif isinstance(value, int):
            negative = value < 0
            magnitude = abs(value)
            limbs = []
            while magnitude:
                magnitude, limb = divmod(magnitude, BASE)
                limbs.append(limb)
        elif isinstance(value, str):
            negative, limbs = _parse(value)
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")
        self._assign(negative, limbs)

    def _assign(self, negative: bool, limbs: _Limbs) -> None:
        limbs = _strip(list(limbs))
        self._limbs: Tuple[int, ...] = tuple(limbs)
        self._negative = bool(negative) and limbs != [0]

    @classmethod
    def _make(cls, negative: bool, limbs: Iterable[int]) -> "BigInt":
        obj = cls.__new__(cls)
        obj._assign(negative, list(limbs))
        return obj

    @classmethod
    def from_limbs(cls, limbs: Iterable[int], negative: bool = False) -> "BigInt":
        """Build from little-endian base 10**9 limbs."""
        limbs = list(limbs)
        for limb in limbs:
            if not 0 <= limb < BASE:
                raise ValueError(f"limb out of range: {limb}")
        return cls._make(negative, limbs)

    def num_digits(self) -> int:
        """Number of base 10**9 limbs used by the magnitude."""
        return len(self._limbs)

    def __str__(self) -> str:
        top, *rest = reversed(self._limbs)
        body = str(top) + "".join(f"{limb:0{LIMB_WIDTH}d}" for limb in rest)
        return "-" + body if self._negative else body

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = value * BASE + limb
        return -value if self._negative else value

    def __hash__(self) -> int:
        return hash(int(self))

    @staticmethod
    def _coerce(other: object) -> "BigInt | None":
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int):
            return BigInt(other)
        return None

    def _order(self, other: "BigInt") -> int:
        if self._negative != other._negative:
            return -1 if self._negative else 1
        c = _compare(list(self._limbs), list(other._limbs))
        return -c if self._negative else c

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._negative == rhs._negative and self._limbs == rhs._limbs

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._order(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._order(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._order(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._order(rhs) >= 0

    def _signed_add(self, other: "BigInt", other_negative: bool) -> "BigInt":
        a, b = list(self._limbs), list(other._limbs)
        if self._negative == other_negative:
            return self._make(self._negative, _add(a, b))
        if _compare(a, b) >= 0:
            return self._make(self._negative, _sub(a, b))
        return self._make(other_negative, _sub(b, a))

    def __add__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._signed_add(rhs, rhs._negative)

    def __sub__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._signed_add(rhs, not rhs._negative)

    def __mul__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        product = _mul(list(self._limbs), list(rhs._limbs))
        return self._make(self._negative != rhs._negative, product)

    def _divide(self, other: "BigInt") -> Tuple[_Limbs, _Limbs]:
        if other._limbs == (0,):
            raise ZeroDivisionError("division by zero")
        return _divmod(list(self._limbs), list(other._limbs))

    def __floordiv__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        quotient, _ = self._divide(rhs)
        return self._make(self._negative != rhs._negative, quotient)

    def __mod__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        _, remainder = self._divide(rhs)
        return self._make(self._negative, remainder)