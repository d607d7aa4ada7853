"""Bank listing, name enquiry, fund transfers and deposit verification."""

from __future__ import annotations

from typing import Any

from .engine import Engine
from .response import Response


class BankService:
    """Bank and transfer endpoints."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    async def get_bank_list(self) -> Response:
        """Fetch the list of supported banks."""
        return await self.engine.get("bank/list")

    async def make_account_name_enquiry(self, bank_code: str, account_number: str) -> Response:
        """Look up the holder name of an account at the bank with ``bank_code``."""
        return await self.engine.get(
            f"bank/name-enquiry?bankCode={bank_code}&accountNumber={account_number}"
        )

    async def make_fund_transfer(
        self,
        destination_account_number: str,
        destination_bank_code: str,
        amount: str,
        source_account_number: str,
        source_bank_code: str,
        zainbox_code: str,
        txn_ref: str,
        narration: str,
        callback_url: str | None = None,
    ) -> Response:
        """Transfer funds from a wallet to another wallet or a bank account.

        ``amount`` is given in kobo, as a string.
        """
        payload: dict[str, Any] = {
            "destinationAccountNumber": destination_account_number,
            "destinationBankCode": destination_bank_code,
            "amount": amount,
            "sourceAccountNumber": source_account_number,
            "sourceBankCode": source_bank_code,
            "zainboxCode": zainbox_code,
            "txnRef": txn_ref,
            "narration": narration,
        }
        if callback_url is not None:
            payload["callbackUrl"] = callback_url
        return await self.engine.post("bank/transfer", payload)

    async def verify_transfer(self, txn_ref: str) -> Response:
        return await self.engine.get(f"virtual-account/wallet/transaction/verify/{txn_ref}")

    async def verify_deposit(self, txn_ref: str) -> Response:
        return await self.engine.get(
            f"virtual-account/wallet/transaction/deposit/verify/{txn_ref}"
        )

    async def verify_deposit_v2(self, txn_ref: str) -> Response:
        return await self.engine.get(
            f"virtual-account/wallet/transaction/deposit/verify/v2/{txn_ref}"
        )

    async def repush_deposit_event(self, txn_ref: str) -> Response:
        """Ask the API to resend the deposit notification for ``txn_ref``."""
        return await self.engine.get(f"zainbox/repush/deposit/{txn_ref}")

    async def reconcile_bank_deposit(
        self,
        verification_type: str,
        bank_type: str,
        account_number: str,
        session_id: str | None = None,
    ) -> Response:
        payload: dict[str, Any] = {
            "verificationType": verification_type,
            "bankType": bank_type,
            "accountNumber": account_number,
        }
        if session_id is not None:
            payload["sessionId"] = session_id
        return await self.engine.patch(
            "virtual-account/wallet/transaction/reconcile/bank-deposit", payload
        )