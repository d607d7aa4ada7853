import json

import httpx
import pytest

from zainpay.engine import Engine
from zainpay.environment import Environment
from zainpay.models import SettlementAccount
from zainpay.settlement import SettlementService


class _Recorder:
    def __init__(self, status=200, body=None):
        self.requests = []
        self.status = status
        self.body = {"code": "00", "status": "200 OK", "data": {}} if body is None else body

    def __call__(self, request):
        self.requests.append(request)
        return httpx.Response(self.status, json=self.body)

    def client(self):
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def test_settlement_account_payload_matches_create():
    account = SettlementService.settlement_account_payload("ACCT", "BANK", 50.0)
    assert account == SettlementAccount.create("ACCT", "BANK", 50.0)
    assert account.account_number == "ACCT"
    assert account.bank_code == "BANK"
    assert account.percentage == "50"


@pytest.mark.asyncio
class TestEndpoints:
    async def test_create_settlement_body(self):
        recorder = _Recorder()
        service = SettlementService(Engine(Environment.SANDBOX, "token", recorder.client()))
        accounts = [
            SettlementService.settlement_account_payload("A1", "B1", 60.0),
            SettlementService.settlement_account_payload("A2", "B2", 40.0),
        ]
        response = await service.create_or_update_zainbox_settlement(
            "weekly", "ZBOX", "Weekly", "Friday", accounts, True
        )
        request = recorder.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://sandbox.zainpay.ng/zainbox/settlement"
        assert json.loads(request.content) == {
            "name": "weekly",
            "zainboxCode": "ZBOX",
            "scheduleType": "Weekly",
            "schedulePeriod": "Friday",
            "settlementAccountList": [a.to_dict() for a in accounts],
            "status": True,
        }
        assert response.has_succeeded()

    async def test_settlement_info_query(self):
        recorder = _Recorder()
        service = SettlementService(Engine(Environment.SANDBOX, "token", recorder.client()))
        response = await service.get_settlement_info_for_zainbox("ZBOX")
        request = recorder.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/zainbox/settlement"
        assert request.url.params["zainboxCode"] == "ZBOX"
        assert response.code() == "00"

    @pytest.mark.parametrize(
        "kwargs, prefix, params",
        [
            ({}, "20&", {}),
            (
                {"count": 5, "date_from": "2024-01-01", "date_to": "2024-03-01", "status": "paid"},
                "5&",
                {"dateFrom": "2024-01-01", "dateTo": "2024-03-01", "status": "paid"},
            ),
        ],
    )
    async def test_history(self, kwargs, prefix, params):
        recorder = _Recorder()
        service = SettlementService(Engine(Environment.SANDBOX, "token", recorder.client()))
        response = await service.get_settlement_payment_history_for_zainbox("ZBOX", **kwargs)
        url = recorder.requests[0].url
        assert url.path == "/zainbox/settlement/history/ZBOX"
        assert url.query.decode().startswith(prefix)
        for key, value in params.items():
            assert url.params[key] == value
        assert response.has_succeeded()

    async def test_error_status_reported(self):
        recorder = _Recorder(status=404, body={"code": "00"})
        service = SettlementService(Engine(Environment.SANDBOX, "token", recorder.client()))
        response = await service.get_settlement_info_for_zainbox("Z")
        assert response.has_failed()
        assert not response.has_succeeded()