"""KeyService — generating and inspecting order keys.

Wraps the domain operations in the ServiceResult contract so the CLI and
other callers get structured errors instead of exceptions.
"""

from __future__ import annotations

import logging
from typing import Any

from base95.domain.keys import Base95, key_between
from base95.services.base import BaseService
from base95.services.result import ServiceResult
from base95.services.telemetry import traced

logger = logging.getLogger(__name__)


def _key_data(key: Base95) -> dict[str, Any]:
    return {"key": str(key), "digits": key.raw_digits()}


class KeyService(BaseService):
    """Mid, average, between, and introspection of keys."""

    @traced
    def mid(self) -> ServiceResult:
        return ServiceResult(ok=True, op="mid", data=_key_data(Base95.mid()))

    @traced
    def avg(self, left: str, right: str) -> ServiceResult:
        """Key strictly between *left* and *right*, in either order."""
        op = "avg"
        lhs = self._parse_key(op, left, field="left")
        if isinstance(lhs, ServiceResult):
            return lhs
        rhs = self._parse_key(op, right, field="right")
        if isinstance(rhs, ServiceResult):
            return rhs

        warnings: list[str] = []
        if lhs.text.rstrip(" ") == rhs.text.rstrip(" "):
            warnings.append("Operands are equal; no key lies between them")

        key = Base95.avg(lhs, rhs)
        logger.debug("avg %r %r -> %r", lhs.text, rhs.text, key.text)
        return ServiceResult(
            ok=True,
            op=op,
            data={"left": lhs.text, "right": rhs.text, **_key_data(key)},
            warnings=warnings,
        )

    @traced
    def avg_with_zero(self, text: str) -> ServiceResult:
        """Key between 0 and *text*."""
        op = "avg_with_zero"
        key = self._parse_key(op, text)
        if isinstance(key, ServiceResult):
            return key
        return ServiceResult(
            ok=True, op=op, data={"from": key.text, **_key_data(Base95.avg_with_zero(key))}
        )

    @traced
    def avg_with_one(self, text: str) -> ServiceResult:
        """Key between *text* and 1."""
        op = "avg_with_one"
        key = self._parse_key(op, text)
        if isinstance(key, ServiceResult):
            return key
        return ServiceResult(
            ok=True, op=op, data={"from": key.text, **_key_data(Base95.avg_with_one(key))}
        )

    @traced
    def between(self, left: str | None = None, right: str | None = None) -> ServiceResult:
        """Key for inserting between two list neighbours.

        Either neighbour may be None for the open end of the list.
        """
        op = "between"
        lhs: Base95 | None = None
        rhs: Base95 | None = None
        if left is not None:
            parsed = self._parse_key(op, left, field="left")
            if isinstance(parsed, ServiceResult):
                return parsed
            lhs = parsed
        if right is not None:
            parsed = self._parse_key(op, right, field="right")
            if isinstance(parsed, ServiceResult):
                return parsed
            rhs = parsed

        if lhs is not None and rhs is not None and lhs.text.rstrip(" ") >= rhs.text.rstrip(" "):
            return ServiceResult.failure(
                op,
                "OUT_OF_ORDER",
                f"Left key {lhs.text!r} must sort before right key {rhs.text!r}",
                detail={"left": lhs.text, "right": rhs.text},
            )

        key = key_between(lhs, rhs)
        return ServiceResult(
            ok=True,
            op=op,
            data={"left": left, "right": right, **_key_data(key)},
        )

    @traced
    def digits(self, text: str) -> ServiceResult:
        """Raw base-95 digits of a key."""
        op = "digits"
        key = self._parse_key(op, text)
        if isinstance(key, ServiceResult):
            return key
        data = _key_data(key)
        data["length"] = len(key.text)
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def parse(self, text: str) -> ServiceResult:
        """Validate caller-supplied text as a key."""
        op = "parse"
        key = self._parse_key(op, text, field="text")
        if isinstance(key, ServiceResult):
            return key
        warnings: list[str] = []
        if key.text.endswith(" "):
            warnings.append(
                "Trailing spaces are zero digits; string order may disagree with numeric order"
            )
        return ServiceResult(
            ok=True,
            op=op,
            data={"key": key.text, "length": len(key.text)},
            warnings=warnings,
        )
