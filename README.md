# zainpay

An asynchronous Python client for the ZainPay payments API, built on
`httpx`. It covers zainboxes, virtual accounts, bank transfers and name
enquiries, card payments and scheduled settlements.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Quick start

Every service is built on an `Engine`, which knows the environment's base
URL and sends your merchant key as a bearer token on each request.

```python
import asyncio

from zainpay.engine import Engine
from zainpay.environment import Environment
from zainpay.models import ZainboxInfo
from zainpay.zainbox import ZainboxService


async def main():
    merchant_key = "placeholder"
    async with Engine(Environment.SANDBOX, merchant_key) as engine:
        response = await ZainboxService(engine).list(False)

        if response.has_succeeded():
            boxes = response.parse_data(
                lambda data: [ZainboxInfo.from_dict(item) for item in data]
            )
            print(boxes if boxes is not None else "could not parse zainbox data")
        else:
            print("request failed:", response.status_code, response.code, response.description)


asyncio.run(main())
```

## Environments and the engine

`zainpay.environment.Environment` has three members: `SANDBOX`
(`https://sandbox.zainpay.ng`), `PRODUCTION` (`https://api.zainpay.ng`)
and `LOCALBOX`. `LOCALBOX` has no known base URL: its `base_url()` raises
`ValueError`, and so does building an `Engine` for it.

`zainpay.engine.Engine(environment, merchant_key, client=None)` sends
`get`, `post` and `patch` requests to `base_url/path` (`url_for(path)`
builds that URL) and wraps each reply in a `Response`. POST and PATCH
bodies are sent as JSON. If no `httpx.AsyncClient` is passed, the engine
creates one and closes it in `aclose()` or when leaving `async with`; a
client you pass in is left open. A request that cannot be sent or whose
reply cannot be received raises `zainpay.engine.EngineError`. HTTP error
statuses do not raise; they show up in the `Response`.

## Services

| Module                    | Class                   | Covers                                                      |
|---------------------------|-------------------------|-------------------------------------------------------------|
| `zainpay.zainbox`         | `ZainboxService`        | create, update and list zainboxes; profiles; payment totals; transaction history |
| `zainpay.virtual_account` | `VirtualAccountService` | create virtual accounts, balances, status changes, history   |
| `zainpay.bank`            | `BankService`           | bank list, name enquiry, fund transfers, transfer and deposit verification, deposit event repush, bank deposit reconciliation |
| `zainpay.card`            | `CardService`           | initialise, verify and reconcile card payments, card payment history |
| `zainpay.settlement`      | `SettlementService`     | create or update scheduled settlements, settlement info and payment history |

Every service takes an `Engine` and each of its methods is a coroutine
returning a `zainpay.response.Response`. Optional arguments left as `None`
are not sent. History methods take an optional `count`, which defaults to
20, except for `CardService.get_zainbox_card_payment_txn_history`, where it
defaults to 10. Zainbox `tags` are given as an iterable of strings and sent
comma separated.

Amounts for transfers and card payments are sent as strings in kobo, as the
API expects; never pass floating-point values.

## Responses

A `Response` holds the HTTP `status_code`, an `error` flag (true for
statuses of 400 and above), an `error_message` attribute (initially `None`)
and the decoded JSON envelope:

- `status`, `code`, `description`: the envelope's string members, or `None`;
- `raw_data`: the `data` member as decoded, or `None`;
- `full_json`: the whole decoded object, or `None` if the body was not a
  JSON object;
- `has_succeeded()`: true when `error` is false and `code` is `"200"`,
  `"00"` or `"21"`; `has_failed()` is true otherwise;
- `parse_data(factory)`: passes `data` to `factory` and returns the result,
  or `None` if `data` is absent or `factory` raises `ValueError`,
  `TypeError` or `KeyError`.

## Models

`zainpay.models` holds:

- `ZainboxInfo` with `name`, `code_name`, `callback_url` and `is_active`;
  `ZainboxInfo.from_dict(data)` reads the API's `name`, `codeName`,
  `callbackUrl` and `isActive` members and raises `ValueError` if one is
  missing or of the wrong type.
- `CreateZainboxRequest`, whose `to_dict()` leaves out optional fields
  that are `None`.
- `SettlementAccount` with `account_number`, `bank_code` and a
  `percentage` stored as text; `SettlementAccount.create(...)` takes the
  percentage as a number and renders it in plain decimal form (`100.0`
  becomes `"100"`, `12.5` stays `"12.5"`).

```python
from zainpay.settlement import SettlementService

account = SettlementService.settlement_account_payload("0000000000", "000", 100.0)
```

`SettlementService.create_or_update_zainbox_settlement` accepts a list of
`SettlementAccount` objects or plain mappings.

## Query filters

`zainpay.filters.construct_filter_params(...)` builds a URL-encoded query
string from whichever of `date_from`, `date_to`, `email`, `status`,
`txn_ref`, `txn_type`, `payment_channel` and `account_number` are given,
under the API's names (`dateFrom`, `dateTo`, `email`, `status`, `txnRef`,
`txnType`, `paymentChannel`, `accountNumber`).

## Command line

The package installs a `zainpay` command that lists the zainboxes of a
merchant and prints the outcome of the request:

```
zainpay --help
zainpay --environment sandbox --merchant-key placeholder --status all
```

Options:

- `--environment {localbox,sandbox,production}`, default `sandbox`;
  `localbox` is reported as an error, since it has no base URL.
- `--merchant-key KEY`, default taken from the `ZAINPAY_MERCHANT_KEY`
  environment variable; one of the two is required.
- `--status {true,false,all}`, default `false`: list active, inactive or
  all zainboxes.

On success it prints the response's status, code, description and data,
then one line per zainbox, and exits with 0. Otherwise it prints the HTTP
status code, status, code and description and exits with 1; it also exits
with 1 if the request cannot be sent. `zainpay.cli.run(engine, status,
out)` does the same work against an engine you supply and returns the exit
code.

## What this package does not do

The command only lists zainboxes; every other endpoint is reached from
Python through the services. There is no synchronous interface, and
nothing here receives or checks the callbacks the API sends to your
`callbackUrl`.