"""Data shapes exchanged with the API."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Mapping


def _require(data: Mapping[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise ValueError(f"missing field {key!r}")
    value = data[key]
    if not isinstance(value, kind):
        raise ValueError(f"field {key!r} must be of type {kind.__name__}")
    return value


def _format_float(value: float) -> str:
    """Render a float in plain decimal notation, dropping a zero fraction."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class ZainboxInfo:
    """A zainbox as returned by the list endpoint."""

    name: str
    code_name: str
    callback_url: str
    is_active: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ZainboxInfo":
        """Build from the API's JSON object; raise ValueError if it does not fit."""
        if not isinstance(data, Mapping):
            raise ValueError("zainbox info must be a JSON object")
        return cls(
            name=_require(data, "name", str),
            code_name=_require(data, "codeName", str),
            callback_url=_require(data, "callbackUrl", str),
            is_active=_require(data, "isActive", bool),
        )


@dataclass
class CreateZainboxRequest:
    """Fields of a zainbox creation request."""

    name: str
    email_notification: str
    callback_url: str
    tags: str | None = None
    description: str | None = None
    code_name_prefix: str | None = None
    allow_auto_internal_transfer: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize, leaving out optional fields that are not set."""
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class SettlementAccount:
    """One destination account of a scheduled settlement."""

    account_number: str
    bank_code: str
    percentage: str

    @classmethod
    def create(cls, account_number: str, bank_code: str, percentage: float) -> "SettlementAccount":
        """Build an account entry, storing the percentage as text."""
        return cls(account_number, bank_code, _format_float(percentage))

    def to_dict(self) -> dict[str, str]:
        """Serialize for a request body."""
        return asdict(self)