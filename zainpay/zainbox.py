"""Zainbox management, profiles, payment summaries and transaction history."""

from __future__ import annotations

from typing import Any, Iterable

from .engine import Engine
from .filters import construct_filter_params
from .response import Response


class ZainboxService:
    """Zainbox endpoints."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    async def create(
        self,
        name: str,
        email_notification: str,
        callback_url: str,
        tags: Iterable[str] | None = None,
        description: str | None = None,
        code_name_prefix: str | None = None,
        allow_auto_internal_transfer: bool | None = None,
    ) -> Response:
        """Create a zainbox; tags are sent comma separated."""
        payload: dict[str, Any] = {
            "name": name,
            "emailNotification": email_notification,
            "callbackUrl": callback_url,
        }
        if tags is not None:
            payload["tags"] = ",".join(tags)
        if code_name_prefix is not None:
            payload["codeNamePrefix"] = code_name_prefix
        if description is not None:
            payload["description"] = description
        if allow_auto_internal_transfer is not None:
            payload["allowAutoInternalTransfer"] = allow_auto_internal_transfer
        return await self.engine.post("zainbox/create/request", payload)

    async def list(self, status: bool | None = None) -> Response:
        """List zainboxes, optionally only active or inactive ones."""
        if status is None:
            return await self.engine.get("zainbox/list")
        return await self.engine.get(f"zainbox/list?status={str(bool(status)).lower()}")

    async def update(
        self,
        name: str,
        zainbox_code: str,
        email_notification: str | None = None,
        tags: Iterable[str] | None = None,
        callback_url: str | None = None,
        description: str | None = None,
        allow_auto_internal_transfer: bool | None = None,
        status: bool | None = None,
    ) -> Response:
        """Update the settings of an existing zainbox."""
        payload: dict[str, Any] = {"codeName": zainbox_code, "name": name}
        if tags is not None:
            payload["tags"] = ",".join(tags)
        if callback_url is not None:
            payload["callbackUrl"] = callback_url
        if email_notification is not None:
            payload["emailNotification"] = email_notification
        if description is not None:
            payload["description"] = description
        if allow_auto_internal_transfer is not None:
            payload["allowAutoInternalTransfer"] = allow_auto_internal_transfer
        if status is not None:
            payload["status"] = status
        return await self.engine.patch("zainbox/update", payload)

    async def get_zainbox_profile(self, zainbox_code: str) -> Response:
        """Fetch the full profile of a zainbox, including its billing plan."""
        return await self.engine.get(f"zainbox/profile/{zainbox_code}")

    async def get_total_payment_collected_by_zainbox(
        self,
        zainbox_code: str,
        date_from: str | None = None,
        date_to: str | None = None,
    ) -> Response:
        """Sum of transfers and deposits collected by one zainbox in a period."""
        filters = construct_filter_params(date_from=date_from, date_to=date_to)
        return await self.engine.get(f"zainbox/transfer/deposit/summary/{zainbox_code}?{filters}")

    async def get_total_payment_collected_for_all_zainboxes(
        self,
        date_from: str | None = None,
        date_to: str | None = None,
    ) -> Response:
        """Sum of transfers and deposits collected by all zainboxes in a period."""
        filters = construct_filter_params(date_from=date_from, date_to=date_to)
        return await self.engine.get(f"zainbox/transactions/summary?{filters}")

    async def get_zainbox_txn_history(
        self,
        zainbox_code: str,
        count: int | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
        txn_type: str | None = None,
        payment_channel: str | None = None,
        account_number: str | None = None,
    ) -> Response:
        """List transactions of one zainbox; ``count`` defaults to 20."""
        filters = construct_filter_params(
            date_from=date_from,
            date_to=date_to,
            txn_type=txn_type,
            payment_channel=payment_channel,
            account_number=account_number,
        )
        limit = 20 if count is None else count
        return await self.engine.get(f"zainbox/transactions/{zainbox_code}/{limit}?{filters}")

    async def get_all_zainboxes_txn_history(
        self,
        count: int | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
        txn_type: str | None = None,
        payment_channel: str | None = None,
        account_number: str | None = None,
    ) -> Response:
        """List transactions across all zainboxes, newest first; ``count`` defaults to 20."""
        filters = construct_filter_params(
            date_from=date_from,
            date_to=date_to,
            txn_type=txn_type,
            payment_channel=payment_channel,
            account_number=account_number,
        )
        limit = 20 if count is None else count
        return await self.engine.get(f"zainbox/transactions?count={limit}&{filters}")