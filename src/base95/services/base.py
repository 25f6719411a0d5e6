"""BaseService — shared foundation for base95 services.

Every service receives the resolved :class:`Base95Settings` (or builds the
defaults) so operations can fall back to configured values.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from base95.domain.keys import Base95, KeyParseError
from base95.services.result import ServiceResult

if TYPE_CHECKING:
    from base95.config.settings import Base95Settings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class KeyService(BaseService):
            def digits(self, text: str) -> ServiceResult:
                key = self._parse_key("digits", text)
                if isinstance(key, ServiceResult):
                    return key
                ...
    """

    def __init__(self, settings: Base95Settings | None = None) -> None:
        if settings is None:
            from base95.config.settings import Base95Settings

            settings = Base95Settings()
        self._settings = settings

    @staticmethod
    def _parse_key(op: str, text: str, *, field: str = "key") -> Base95 | ServiceResult:
        """Parse caller text, or return the failed ServiceResult for *op*.

        INVARIANT: parse failures become results, never exceptions.
        """
        try:
            return Base95.parse(text)
        except KeyParseError as exc:
            logger.debug("Rejected %s for %s: %s", field, op, exc.reason)
            detail: dict[str, object] = {"field": field}
            if exc.position is not None:
                detail["position"] = exc.position
                detail["char"] = text[exc.position]
            return ServiceResult.failure(op, str(exc.reason), str(exc), detail=detail)
