"""Scheduled settlements of zainboxes."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .engine import Engine
from .filters import construct_filter_params
from .models import SettlementAccount
from .response import Response

_SETTLEMENT_HISTORY_COUNT = 20


def _account_dict(account: SettlementAccount | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(account, SettlementAccount):
        return account.to_dict()
    return dict(account)


class SettlementService:
    """Settlement endpoints."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    async def create_or_update_zainbox_settlement(
        self, name: str, zainbox_code: str, schedule_type: str, schedule_period: str,
        settlement_account_list: Iterable[SettlementAccount | Mapping[str, Any]],
        status: bool,
    ) -> Response:
        """Create or replace the scheduled settlement of a zainbox."""
        payload = {
            "name": name,
            "zainboxCode": zainbox_code,
            "scheduleType": schedule_type,
            "schedulePeriod": schedule_period,
            "settlementAccountList": [_account_dict(a) for a in settlement_account_list],
            "status": status,
        }
        return await self.engine.post("zainbox/settlement", payload)

    async def get_settlement_info_for_zainbox(self, zainbox_code: str) -> Response:
        """Fetch the settlements tied to a zainbox."""
        return await self.engine.get(f"zainbox/settlement?zainboxCode={zainbox_code}")

    async def get_settlement_payment_history_for_zainbox(
        self, zainbox_code: str, count: int | None = None,
        date_from: str | None = None, date_to: str | None = None, status: str | None = None,
    ) -> Response:
        """List settlement payments of a zainbox; ``count`` defaults to 20."""
        query = construct_filter_params(date_from=date_from, date_to=date_to, status=status)
        size = _SETTLEMENT_HISTORY_COUNT if count is None else count
        return await self.engine.get(f"zainbox/settlement/history/{zainbox_code}?{size}&{query}")

    @staticmethod
    def settlement_account_payload(
        account_number: str, bank_code: str, percentage: float
    ) -> SettlementAccount:
        """Build one entry of a settlement account list."""
        return SettlementAccount.create(account_number, bank_code, percentage)