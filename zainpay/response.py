"""Decoded API responses."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SUCCESS_CODES = frozenset({"200", "00", "21"})


class Response:
    """An HTTP status together with the JSON envelope the API returned."""

    def __init__(self, status_code: int, body: str | bytes | None = None) -> None:
        self.status_code = status_code
        self.error = status_code >= 400
        self.error_message: str | None = None
        self._decoded = self._decode(body)

    @staticmethod
    def _decode(body: str | bytes | None) -> dict[str, Any] | None:
        if body is None:
            return None
        logger.debug("response body: %r", body)
        try:
            decoded = json.loads(body)
        except (ValueError, UnicodeDecodeError):
            return None
        return decoded if isinstance(decoded, dict) else None

    def _string_field(self, key: str) -> str | None:
        if self._decoded is None:
            return None
        value = self._decoded.get(key)
        return value if isinstance(value, str) else None

    def has_succeeded(self) -> bool:
        """True when the HTTP status is not an error and the API code signals success."""
        return not self.error and self.code in _SUCCESS_CODES

    def has_failed(self) -> bool:
        return self.error or not self.has_succeeded()

    @property
    def status(self) -> str | None:
        return self._string_field("status")

    @property
    def code(self) -> str | None:
        return self._string_field("code")

    @property
    def description(self) -> str | None:
        return self._string_field("description")

    @property
    def raw_data(self) -> Any:
        """The undecoded ``data`` member, or None if absent."""
        if self._decoded is None:
            return None
        return self._decoded.get("data")

    def parse_data(self, factory: Callable[[Any], T]) -> T | None:
        """Convert ``data`` with ``factory``; None if absent or the conversion fails."""
        data = self.raw_data
        if data is None:
            return None
        try:
            return factory(data)
        except (ValueError, TypeError, KeyError):
            return None

    @property
    def full_json(self) -> dict[str, Any] | None:
        return self._decoded

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code}, code={self.code!r}, status={self.status!r})"