from urllib.parse import parse_qsl

from zainpay.filters import construct_filter_params


def test_no_filters_gives_empty_string():
    assert construct_filter_params() == ""


def test_dates_are_encoded():
    result = construct_filter_params("2024-01-01", "2024-01-31")
    assert dict(parse_qsl(result)) == {"dateFrom": "2024-01-01", "dateTo": "2024-01-31"}


def test_all_filters_round_trip():
    result = construct_filter_params(
        date_from="2024-01-01",
        date_to="2024-02-01",
        email="user@example.com",
        status="success",
        txn_ref="ref-1",
        txn_type="deposit",
        payment_channel="card",
        account_number="ACCT0001",
    )
    assert dict(parse_qsl(result)) == {
        "dateFrom": "2024-01-01",
        "dateTo": "2024-02-01",
        "email": "user@example.com",
        "status": "success",
        "txnRef": "ref-1",
        "txnType": "deposit",
        "paymentChannel": "card",
        "accountNumber": "ACCT0001",
    }


def test_unset_filters_are_omitted():
    result = construct_filter_params(status="failed", account_number="ACCT0002")
    assert set(dict(parse_qsl(result))) == {"status", "accountNumber"}


def test_special_characters_are_escaped():
    value = "a b&c=d"
    result = construct_filter_params(email=value)
    assert " " not in result
    assert result.count("&") == 0
    assert dict(parse_qsl(result)) == {"email": value}