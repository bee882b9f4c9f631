"""Signed arbitrary-precision integers in base-10^9 limbs, with a benchmark command."""

__version__ = "0.1.0"
__all__ = ["bigint", "bench"]