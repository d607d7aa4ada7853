"""Virtual accounts mapped to zainboxes: creation, balances, status and history."""

from __future__ import annotations

from .engine import Engine
from .filters import construct_filter_params
from .response import Response

_WALLET = "virtual-account/wallet"
_DEFAULT_HISTORY_COUNT = 20

_CREATE_KEYS = (
    "bankType", "bvn", "firstName", "lastName", "email", "mobile",
    "dob", "gender", "address", "title", "state", "zainboxCode",
)


class VirtualAccountService:
    """Virtual account endpoints."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    async def create(
        self, bank_type: str, bvn: str, first_name: str, last_name: str,
        email: str, mobile: str, dob: str, gender: str,
        address: str, title: str, state: str, zainbox_code: str,
    ) -> Response:
        """Create a virtual account and map it to a zainbox."""
        values = (
            bank_type, bvn, first_name, last_name, email, mobile,
            dob, gender, address, title, state, zainbox_code,
        )
        return await self.engine.post(
            "virtual-account/create/request", dict(zip(_CREATE_KEYS, values))
        )

    async def get_virtual_account_balance(self, account_number: str) -> Response:
        """Fetch the current wallet balance of a virtual account."""
        return await self.engine.get(f"{_WALLET}/balance/{account_number}")

    async def get_all_virtual_accounts_balance_for_zainbox(self, zainbox_code: str) -> Response:
        """Fetch the balances of every virtual account in a zainbox."""
        return await self.engine.get(f"zainbox/accounts/balance/{zainbox_code}")

    async def change_virtual_account_status(
        self, zainbox_code: str, account_number: str, status: bool
    ) -> Response:
        """Activate or deactivate a virtual account."""
        return await self.engine.patch(
            "/virtual-account/change/account/status",
            {"zainboxCode": zainbox_code, "accountNumber": account_number, "status": status},
        )

    async def get_all_virtual_accounts_for_zainbox(self, zainbox_code: str) -> Response:
        """List the virtual accounts of a zainbox."""
        return await self.engine.get(f"zainbox/virtual-accounts/{zainbox_code}")

    async def get_virtual_account_txn_history(
        self, account_number: str, count: int | None = None,
        date_from: str | None = None, date_to: str | None = None,
        txn_type: str | None = None, payment_channel: str | None = None,
    ) -> Response:
        """List transactions of a virtual account; ``count`` defaults to 20."""
        filters = construct_filter_params(
            date_from=date_from, date_to=date_to, txn_type=txn_type, payment_channel=payment_channel
        )
        limit = _DEFAULT_HISTORY_COUNT if count is None else count
        return await self.engine.get(f"{_WALLET}/transactions/{account_number}/{limit}?{filters}")