"""Query-string construction for list and history endpoints."""

from __future__ import annotations

from urllib.parse import urlencode

_FIELDS = (
    "dateFrom",
    "dateTo",
    "email",
    "status",
    "txnRef",
    "txnType",
    "paymentChannel",
    "accountNumber",
)


def construct_filter_params(
    date_from: str | None = None, date_to: str | None = None, email: str | None = None,
    status: str | None = None, txn_ref: str | None = None, txn_type: str | None = None,
    payment_channel: str | None = None, account_number: str | None = None,
) -> str:
    """Build a form-encoded query string from the filters that are set."""
    values = (date_from, date_to, email, status, txn_ref, txn_type, payment_channel, account_number)
    return urlencode([(key, value) for key, value in zip(_FIELDS, values) if value is not None])