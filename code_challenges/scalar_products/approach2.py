"""Scalar products challenge solved with powers of the Fibonacci matrix.

With ``F = [[0, 1], [1, 1]]``, ``G = F^2`` and ``v_0 = (0, c)`` the vectors
are ``v_i = G^i v_0``. Since ``G`` is symmetric,
``<v_i, v_j> = <G^(i+j) v_0, v_0>``, and ``i + j`` for ``1 <= i < j <= n``
ranges over ``[3, 2n - 1]``. Powers ``G^k`` are assembled from the
precomputed ``G^(2^l)`` following the binary digits of ``k``.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

__all__ = ["Modulo", "Vector2", "SymmMatrix2x2", "run", "main"]


def _rem(value: int, modulus: int) -> int:
    """Remainder truncated towards zero: it takes the sign of ``value``."""
    remainder = abs(value) % abs(modulus)
    return -remainder if value < 0 else remainder


@dataclass(frozen=True, slots=True)
class Modulo:
    """An integer together with the modulus its arithmetic is reduced by."""

    value: int
    modulus: int

    def __add__(self, other: Modulo) -> Modulo:
        return Modulo(_rem(self.value + other.value, self.modulus), self.modulus)

    def __mul__(self, other: Modulo) -> Modulo:
        return Modulo(_rem(self.value * other.value, self.modulus), self.modulus)

    def __str__(self) -> str:
        return f"{self.value} (mod {self.modulus})"

    def __repr__(self) -> str:
        return str(self)


class Vector2(NamedTuple):
    """A vector with two entries."""

    first: Modulo
    second: Modulo

    @staticmethod
    def inner_product(u: Vector2, v: Vector2) -> Modulo:
        """Standard inner product of two vectors."""
        return u.first * v.first + u.second * v.second


@dataclass(frozen=True, slots=True)
class SymmMatrix2x2:
    """A symmetric 2x2 matrix ``[[a, b], [b, d]]``."""

    a: Modulo
    b: Modulo
    d: Modulo

    def __add__(self, other: SymmMatrix2x2) -> SymmMatrix2x2:
        return SymmMatrix2x2(self.a + other.a, self.b + other.b, self.d + other.d)

    def pow2(self) -> SymmMatrix2x2:
        """The square of the matrix."""
        return SymmMatrix2x2(
            self.a * self.a + self.b * self.b,
            (self.a + self.d) * self.b,
            self.b * self.b + self.d * self.d,
        )

    def mul_vector(self, u: Vector2) -> Vector2:
        """The product of the matrix with a column vector."""
        return Vector2(
            self.a * u.first + self.b * u.second,
            self.b * u.first + self.d * u.second,
        )


def run(c: int, m: int, n: int) -> int:
    """Count the distinct scalar products modulo ``m`` of the first ``n`` vectors."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    zero = Modulo(0, m)
    one = Modulo(1, m)
    matrix_f = SymmMatrix2x2(zero, one, one)

    # Smallest e with 2^e >= 2n; at least one power is always computed.
    exponent = max(1, (2 * n - 1).bit_length())
    matrix_g = matrix_f.pow2()
    powers = [matrix_g]
    for _ in range(1, exponent):
        matrix_g = matrix_g.pow2()
        powers.append(matrix_g)

    v0 = Vector2(zero, Modulo(c, m))
    limit = 2 * n
    # G^k v0 applies the powers for the set bits of k in increasing order, so
    # it equals the highest power applied to the result for k without that bit.
    images = [v0]
    for k in range(1, limit):
        top = k.bit_length() - 1
        images.append(powers[top].mul_vector(images[k - (1 << top)]))

    values = {Vector2.inner_product(image, v0).value for image in images[3:limit]}
    return len(values)


def _parse_line(line: str) -> tuple[int, int, int]:
    tokens = line.split()
    if len(tokens) < 3:
        raise ValueError(f"expected three integers 'c m n', got {line.strip()!r}")
    c, m, n = (int(token) for token in tokens[:3])
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return c, m, n


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``c m n`` (from arguments, else one line of stdin) and print the count."""
    line = " ".join(argv) if argv else sys.stdin.readline()
    c, m, n = _parse_line(line)
    print(run(c, m, n))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())