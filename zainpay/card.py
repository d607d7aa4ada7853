"""Card payment initialisation, verification and history."""

from __future__ import annotations

from .engine import Engine
from .filters import construct_filter_params
from .response import Response

_CARD_HISTORY_COUNT = 10


class CardService:
    """Card payment endpoints."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    async def initialize_new_payment(
        self, amount: str, txn_ref: str, email_address: str,
        mobile_number: str, zainbox_code: str, callback_url: str,
    ) -> Response:
        """Start a card payment; the reply carries the payment page URL."""
        payload = {
            "amount": amount,
            "txnRef": txn_ref,
            "emailAddress": email_address,
            "mobileNumber": mobile_number,
            "zainboxCode": zainbox_code,
            "callbackUrl": callback_url,
        }
        return await self.engine.post("zainbox/card/initialize/payment", payload)

    async def verify_card_payment(self, txn_ref: str) -> Response:
        """Verify a card payment by its reference."""
        return await self.engine.get(f"virtual-account/wallet/deposit/verify/{txn_ref}")

    async def verify_card_payment_v2(self, txn_ref: str) -> Response:
        """Verify a card payment by its reference, second API version."""
        return await self.engine.get(f"virtual-account/wallet/deposit/verify/v2/{txn_ref}")

    async def reconcile_card_payment(self, txn_ref: str) -> Response:
        """Ask for a card payment to be reconciled."""
        return await self.engine.get(
            f"virtual-account/wallet/transaction/reconcile/card-payment?txnRef={txn_ref}"
        )

    async def get_zainbox_card_payment_txn_history(
        self, zainbox_code: str, count: int | None = None,
        date_from: str | None = None, date_to: str | None = None,
        email: str | None = None, status: str | None = None, txn_ref: str | None = None,
    ) -> Response:
        """List card payments of a zainbox; ``count`` defaults to 10."""
        query = construct_filter_params(
            date_from=date_from, date_to=date_to, email=email, status=status, txn_ref=txn_ref
        )
        size = _CARD_HISTORY_COUNT if count is None else count
        return await self.engine.get(f"zainbox/card/transactions/{zainbox_code}?count={size}&{query}")