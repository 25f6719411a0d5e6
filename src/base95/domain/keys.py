"""Printable order keys backed by base-95 digit sequences.

Each digit maps to one printable ASCII character by adding 32, so the
alphabet runs from space (digit 0) to tilde (digit 94). UTF-8 stores these
characters in one byte each, and native string ordering of keys matches the
numeric ordering of the fractions they encode as long as keys carry no
trailing space.

Example::

    >>> n1 = Base95.mid()
    >>> str(n1), n1.raw_digits()
    ('O', [47])
    >>> str(Base95.avg_with_zero(n1)), str(Base95.avg_with_one(n1))
    ('7', 'g')

``avg`` deliberately trades precision for length: the shortest key strictly
between the operands wins, and identical inputs always give identical output.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from base95.domain.digits import BASE, Digits

ASCII_MIN = 32  # space
ASCII_MAX = ASCII_MIN + BASE - 1  # tilde


class ParseError(StrEnum):
    """Reasons caller-supplied text is rejected as a key."""

    EMPTY_NOT_ALLOWED = "EMPTY_NOT_ALLOWED"
    INVALID_CHAR = "INVALID_CHAR"


class KeyParseError(ValueError):
    """Raised by :meth:`Base95.parse` for text that is not a valid key."""

    def __init__(self, reason: ParseError, message: str, *, position: int | None = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.position = position


@dataclass(frozen=True, order=True)
class Base95:
    """A non-empty order key. Compares with plain string ordering."""

    text: str

    # --- Construction ----------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Base95:
        """Validate *text* and wrap it as a key.

        Raises:
            KeyParseError: ``EMPTY_NOT_ALLOWED`` for ``""``; ``INVALID_CHAR``
                for any character outside space..tilde.
        """
        if not text:
            raise KeyParseError(ParseError.EMPTY_NOT_ALLOWED, "Empty key is not allowed")
        for position, char in enumerate(text):
            if not ASCII_MIN <= ord(char) <= ASCII_MAX:
                raise KeyParseError(
                    ParseError.INVALID_CHAR,
                    f"Invalid character {char!r} at position {position}",
                    position=position,
                )
        return cls(text)

    @classmethod
    def mid(cls) -> Base95:
        """The single-character key for 47/95, ``"O"``."""
        return encode(Digits.midpoint())

    # --- Averaging -------------------------------------------------------

    @classmethod
    def avg(cls, lhs: Base95, rhs: Base95) -> Base95:
        """Shortest key strictly between *lhs* and *rhs*.

        Nothing lies between equal keys, so *lhs* comes back unchanged.
        """
        return _average(lhs, _operand(lhs), _operand(rhs))

    @classmethod
    def avg_with_zero(cls, n: Base95) -> Base95:
        """Key between 0 and *n*, i.e. before every existing neighbour."""
        return _average(n, _operand(n), Digits.zero())

    @classmethod
    def avg_with_one(cls, n: Base95) -> Base95:
        """Key between *n* and 1, i.e. after every existing neighbour."""
        return _average(n, _operand(n), Digits.one())

    # --- Accessors -------------------------------------------------------

    def raw_digits(self) -> list[int]:
        return list(decode(self))

    def __str__(self) -> str:
        return self.text


def encode(digits: Digits) -> Base95:
    """Map each digit to its printable character.

    Raises:
        ValueError: if a digit is outside 0..94. The ``one`` sentinel is the
            only such value the engine produces, and it is never a key.
    """
    chars: list[str] = []
    for digit in digits:
        if not 0 <= digit < BASE:
            msg = f"Digit {digit} cannot be encoded as a key character"
            raise ValueError(msg)
        chars.append(chr(digit + ASCII_MIN))
    return Base95("".join(chars))


def decode(key: Base95) -> Digits:
    """Inverse of :func:`encode`; keeps the digits exactly as written."""
    return Digits(tuple(ord(char) - ASCII_MIN for char in key.text))


def _operand(key: Base95) -> Digits:
    return decode(key).normalized()


def _average(original: Base95, a: Digits, b: Digits) -> Base95:
    if a == b:
        return original
    return encode(Digits.average(a, b))


def key_between(left: Base95 | None, right: Base95 | None) -> Base95:
    """Key for inserting between two list neighbours.

    ``None`` stands for the open end of the list on that side.
    """
    if left is None and right is None:
        return Base95.mid()
    if left is None:
        assert right is not None
        return Base95.avg_with_zero(right)
    if right is None:
        return Base95.avg_with_one(left)
    return Base95.avg(left, right)
