"""SequenceService — key chains, the alphabet table, and insertion runs.

These operations exercise the engine the way an ordered list would:
repeatedly prepending or appending, or inserting at random positions.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Literal

from base95.domain.digits import BASE, Digits
from base95.domain.keys import ASCII_MIN, Base95, encode, key_between
from base95.services.base import BaseService
from base95.services.result import ServiceResult
from base95.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

Toward = Literal["zero", "one"]


class SequenceService(BaseService):
    """Multi-key operations built on top of the averaging engine."""

    @traced
    def chain(self, toward: Toward | None = None, steps: int | None = None) -> ServiceResult:
        """Average the running value with one bound, *steps* times.

        Starts at the midpoint and records each value before averaging it
        with the bound, so every step moves strictly toward that bound.
        """
        op = "chain"
        toward = toward or self._settings.chain.toward
        steps = self._settings.chain.steps if steps is None else steps

        if toward not in ("zero", "one"):
            return ServiceResult.failure(
                op, "INVALID_ARGUMENT", f"toward must be 'zero' or 'one', got {toward!r}"
            )
        if steps < 1:
            return ServiceResult.failure(
                op, "INVALID_ARGUMENT", f"steps must be at least 1, got {steps}"
            )

        bound = Digits.zero() if toward == "zero" else Digits.one()
        working = Digits.midpoint()
        items: list[dict[str, Any]] = []
        with trace_span("average_loop") as span:
            for step in range(1, steps + 1):
                key = encode(working)
                items.append({"step": step, "key": key.text, "digits": list(working)})
                working = Digits.average(working, bound)
            if span:
                span.annotate("steps", steps)

        logger.debug(
            "chain toward %s: %d steps, last length %d", toward, steps, len(items[-1]["key"])
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={"toward": toward, "steps": steps, "items": items},
        )

    @traced
    def alphabet(self) -> ServiceResult:
        """The 95 digit/character pairs, in order."""
        items = [{"digit": d, "char": chr(d + ASCII_MIN)} for d in range(BASE)]
        return ServiceResult(ok=True, op="alphabet", data={"count": len(items), "items": items})

    @traced
    def simulate(self, inserts: int | None = None, seed: int | None = None) -> ServiceResult:
        """Insert keys at random positions of a list seeded with ``mid()``.

        The list is kept in insertion-position order; the result reports
        whether that order agrees with plain string sorting.
        """
        op = "simulate"
        inserts = self._settings.simulate.inserts if inserts is None else inserts
        seed = self._settings.simulate.seed if seed is None else seed
        if inserts < 0:
            return ServiceResult.failure(
                op, "INVALID_ARGUMENT", f"inserts must not be negative, got {inserts}"
            )

        rng = random.Random(seed)
        keys: list[Base95] = [Base95.mid()]
        with trace_span("insert_loop") as span:
            for _ in range(inserts):
                pos = rng.randint(0, len(keys))
                left = keys[pos - 1] if pos > 0 else None
                right = keys[pos] if pos < len(keys) else None
                keys.insert(pos, key_between(left, right))
            if span:
                span.annotate("inserts", inserts)

        texts = [k.text for k in keys]
        in_order = texts == sorted(texts)
        warnings: list[str] = []
        if not in_order:
            first = next(i for i in range(1, len(texts)) if texts[i - 1] >= texts[i])
            warnings.append(f"Keys out of order at position {first}")
        duplicates = len(texts) - len(set(texts))
        if duplicates:
            warnings.append(f"{duplicates} duplicate keys generated")

        lengths = [len(t) for t in texts]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "seed": seed,
                "inserts": inserts,
                "count": len(texts),
                "sorted": in_order,
                "max_length": max(lengths),
                "mean_length": round(sum(lengths) / len(lengths), 3),
                "items": [{"index": i, "key": t} for i, t in enumerate(texts)],
            },
            warnings=warnings,
        )

