"""Scalar products challenge solved by walking the generated sequence directly.

The sequence is ``a_0 = 0``, ``a_1 = c`` and ``a_{k+1} = (a_{k-1} + a_k) mod m``.
The vectors are ``v_i = (a_{2i}, a_{2i+1})`` for ``1 <= i <= n``. The answer is
the number of distinct residues ``<v_i, v_j> mod m`` over ``i < j``.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import islice

__all__ = ["SeqPair", "run", "main"]


def _rem_euclid(value: int, modulus: int) -> int:
    """Non-negative remainder of ``value`` by ``modulus`` (any sign of modulus)."""
    return value % abs(modulus)


@dataclass(slots=True)
class SeqPair:
    """Two consecutive terms of a Fibonacci-like sequence modulo ``modulus``."""

    modulus: int
    current: int
    next: int

    def next_entity(self) -> SeqPair:
        """Advance to the following pair of terms in place and return self."""
        self.current, self.next = self.next, _rem_euclid(
            self.current + self.next, self.modulus
        )
        return self

    def __iter__(self) -> Iterator[SeqPair]:
        """Yield snapshots of this pair and all its successors, endlessly.

        The pair itself is left untouched.
        """
        entity = SeqPair(self.modulus, self.current, self.next)
        while True:
            yield SeqPair(entity.modulus, entity.current, entity.next)
            entity.next_entity()

    def __str__(self) -> str:
        return f"({self.current}, {self.next})"


def _vectors(modulus: int, first: int, second: int, count: int) -> Iterator[tuple[int, int]]:
    """Every second pair after the first two, at most ``count`` of them."""
    pairs = islice(SeqPair(modulus, first, second), 2, None, 2)
    return ((pair.current, pair.next) for pair in islice(pairs, count))


def run(c: int, m: int, n: int) -> int:
    """Count the distinct scalar products modulo ``m`` of the first ``n`` vectors."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    values: set[int] = set()
    for k, (u0, u1) in enumerate(_vectors(m, 0, c, n)):
        # Continuing the sequence from u gives exactly the vectors after it.
        for v0, v1 in _vectors(m, u0, u1, n - (k + 1)):
            values.add(_rem_euclid(u0 * v0 + u1 * v1, m))
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