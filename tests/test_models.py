import pytest

from zainpay.models import CreateZainboxRequest, SettlementAccount, ZainboxInfo


def test_zainbox_info_from_dict():
    info = ZainboxInfo.from_dict(
        {"name": "Shop", "codeName": "CODE1", "callbackUrl": "https://example.com/cb", "isActive": True}
    )
    assert info == ZainboxInfo("Shop", "CODE1", "https://example.com/cb", True)


def test_zainbox_info_ignores_extra_fields():
    info = ZainboxInfo.from_dict(
        {"name": "n", "codeName": "c", "callbackUrl": "u", "isActive": False, "tags": "x"}
    )
    assert info.is_active is False
    assert info.code_name == "c"


def test_zainbox_info_missing_field():
    with pytest.raises(ValueError):
        ZainboxInfo.from_dict({"name": "n", "codeName": "c", "callbackUrl": "u"})


def test_zainbox_info_wrong_type():
    with pytest.raises(ValueError):
        ZainboxInfo.from_dict({"name": "n", "codeName": "c", "callbackUrl": "u", "isActive": "yes"})


def test_zainbox_info_not_an_object():
    with pytest.raises(ValueError):
        ZainboxInfo.from_dict(["n"])


def test_create_request_omits_unset_fields():
    request = CreateZainboxRequest("Shop", "user@example.com", "https://example.com/cb")
    assert request.to_dict() == {
        "name": "Shop",
        "email_notification": "user@example.com",
        "callback_url": "https://example.com/cb",
    }


def test_create_request_keeps_set_fields():
    request = CreateZainboxRequest(
        "Shop", "user@example.com", "cb", tags="a,b", allow_auto_internal_transfer=False
    )
    data = request.to_dict()
    assert data["tags"] == "a,b"
    assert data["allow_auto_internal_transfer"] is False
    assert "description" not in data


def test_settlement_percentage_whole_number_has_no_fraction():
    account = SettlementAccount.create("ACCT0001", "0001", 50.0)
    assert account.percentage == "50"


def test_settlement_percentage_with_fraction():
    account = SettlementAccount.create("ACCT0001", "0001", 33.5)
    assert account.percentage == "33.5"


@pytest.mark.parametrize("value", [0.1, 12.25, 1e-7, 1e20, 99.999])
def test_settlement_percentage_round_trips_without_exponent(value):
    text = SettlementAccount.create("ACCT0001", "0001", value).percentage
    assert "e" not in text.lower()
    assert float(text) == value


def test_settlement_to_dict():
    account = SettlementAccount.create("ACCT0001", "0001", 25.5)
    assert account.to_dict() == {"account_number": "ACCT0001", "bank_code": "0001", "percentage": "25.5"}