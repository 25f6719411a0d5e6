"""Base-95 digit sequences and the averaging engine.

A :class:`Digits` value denotes the fraction ``0.d0 d1 d2 ...`` in base 95.
The leading ``0.`` is implied and trailing zero digits are never stored, so
the empty sequence is exactly 0.

INVARIANT: canonical sequences (no trailing zero) compare as tuples in the
same order as the fractions they denote.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import zip_longest

BASE = 95
MID = BASE // 2


@dataclass(frozen=True, order=True)
class Digits:
    """Immutable sequence of base-95 digits."""

    values: tuple[int, ...] = ()

    # --- Constants -------------------------------------------------------

    @classmethod
    def zero(cls) -> Digits:
        """The open lower bound."""
        return cls(())

    @classmethod
    def one(cls) -> Digits:
        """The open upper bound, exactly 95/95.

        Only valid as an operand of :meth:`average`. Its single digit is out
        of the encodable range, so it can never leak out as a key.
        """
        return cls((BASE,))

    @classmethod
    def midpoint(cls) -> Digits:
        return cls((MID,))

    # --- Arithmetic ------------------------------------------------------

    @classmethod
    def average(cls, lhs: Digits, rhs: Digits) -> Digits:
        """Return the shortest sequence strictly between *lhs* and *rhs*.

        The exact average is computed first; then its prefixes are tried by
        increasing length and the first one strictly between the operands
        wins. Falls back to the exact average when no prefix qualifies.

        Equal operands are a caller error: their exact average is the operand
        itself, which is returned unchanged.
        """
        exact = cls.naive_add(lhs, rhs).half()

        larger, smaller = (lhs, rhs) if lhs > rhs else (rhs, lhs)
        for i in range(1, len(exact.values)):
            trimmed = cls(exact.values[:i]).normalized()
            if smaller < trimmed < larger:
                return trimmed
        return exact.normalized()

    @classmethod
    def naive_add(cls, lhs: Digits, rhs: Digits) -> Digits:
        """Add digit by digit without carrying.

        The result may hold entries up to ``2 * BASE`` and is only meaningful
        as input to :meth:`half`, which restores digits below ``BASE``.
        """
        return cls(tuple(a + b for a, b in zip_longest(lhs.values, rhs.values, fillvalue=0)))

    def half(self) -> Digits:
        """Halve a naive sum, carrying remainders from left to right.

        Halved entries can still reach ``BASE`` or more, so a second pass
        carries the excess right to left. Half of a sum of two values below 1
        is below 1, so the first digit never overflows.
        """
        result: list[int] = []
        carry = 0
        for digit in self.values:
            carry = carry * BASE + digit
            result.append(carry // 2)
            carry %= 2

        if carry:
            result.append(MID)

        carry = 0
        for i in range(len(result) - 1, -1, -1):
            carry, result[i] = divmod(result[i] + carry, BASE)
        if carry:
            msg = f"Half of {self.values} is not below 1"
            raise ValueError(msg)
        return Digits(tuple(result))

    def normalized(self) -> Digits:
        """Strip trailing zero digits."""
        values = self.values
        end = len(values)
        while end and values[end - 1] == 0:
            end -= 1
        if end == len(values):
            return self
        return Digits(values[:end])

    # --- Introspection ---------------------------------------------------

    @property
    def is_canonical(self) -> bool:
        return not self.values or self.values[-1] != 0

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)
