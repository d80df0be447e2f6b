from __future__ import annotations

import logging

import pytest
import requests

from conftest import FakeResponse, StaticClient, make_config, success_payload
from exchange_currency.core.exceptions import FetchError
from exchange_currency.rate_service.api_clients import ExchangeRateApiClient
from exchange_currency.rate_service.loader import RatesLoader


def test_fetch_builds_rate_table(fake_get, config):
    calls = fake_get(FakeResponse(200, success_payload()))

    table = ExchangeRateApiClient(config).fetch_rates()

    assert table["ARS"] == 850.0
    assert table.base_code == "USD"
    assert table.last_update == "Fri, 16 Oct 2026 00:00:01 +0000"
    assert len(calls) == 1
    assert calls[0]["url"] == (
        "https://v6.exchangerate-api.com/v6/test-key/latest/USD"
    )
    assert calls[0]["timeout"] == 5.0


def test_http_401_is_fetch_error(fake_get, config):
    fake_get(FakeResponse(401, {"result": "error", "error-type": "invalid-key"}))

    with pytest.raises(FetchError, match="401"):
        ExchangeRateApiClient(config).fetch_rates()


def test_network_error_is_fetch_error(fake_get, config):
    fake_get(raises=requests.exceptions.ConnectionError("connection refused"))

    with pytest.raises(FetchError, match="connection refused") as info:
        ExchangeRateApiClient(config).fetch_rates()
    assert isinstance(info.value.__cause__, requests.exceptions.ConnectionError)


def test_interrupt_during_request_is_surfaced(fake_get, config):
    fake_get(raises=KeyboardInterrupt())

    with pytest.raises(FetchError, match="interrupted"):
        ExchangeRateApiClient(config).fetch_rates()


def test_invalid_json_is_fetch_error(fake_get, config):
    fake_get(FakeResponse(200, invalid_json=True))

    with pytest.raises(FetchError, match="JSON"):
        ExchangeRateApiClient(config).fetch_rates()


@pytest.mark.parametrize(
    "payload",
    [
        ["USD", 1.0],
        {"result": "success"},
        {"result": "success", "conversion_rates": "USD=1"},
        {"result": "success", "conversion_rates": {}},
        {"result": "success", "rates": {"USD": 1.0}},
        {"result": "success", "conversion_rates": {"USD": {"rate": 1.0}}},
        {"result": "success", "conversion_rates": {"USD": -1.0}},
    ],
)
def test_unexpected_shape_is_fetch_error(fake_get, config, payload):
    fake_get(FakeResponse(200, payload))

    with pytest.raises(FetchError):
        ExchangeRateApiClient(config).fetch_rates()


def test_provider_error_envelope_is_fetch_error(fake_get, config):
    fake_get(FakeResponse(200, {"result": "error", "error-type": "quota-reached"}))

    with pytest.raises(FetchError, match="quota-reached"):
        ExchangeRateApiClient(config).fetch_rates()


def test_missing_api_key_skips_network(fake_get):
    calls = fake_get(FakeResponse(200, success_payload()))

    with pytest.raises(FetchError, match="API key"):
        ExchangeRateApiClient(make_config(api_key="")).fetch_rates()
    assert calls == []


def test_loader_returns_client_table(rate_table):
    client = StaticClient(rate_table)

    assert RatesLoader(client).load() is rate_table
    assert client.calls == 1


def test_loader_logs_fetch_duration(fake_get, config, caplog):
    fake_get(FakeResponse(200, success_payload()))
    client = ExchangeRateApiClient(config)

    with caplog.at_level(logging.INFO, logger="exchange_currency.actions"):
        RatesLoader(client).load()

    assert client.last_elapsed_ms is not None
    ok_lines = [
        r.getMessage() for r in caplog.records if "status=OK" in r.getMessage()
    ]
    assert len(ok_lines) == 1
    assert f"elapsed_ms={client.last_elapsed_ms} " in ok_lines[0]
    assert "codes=7" in ok_lines[0]


def test_loader_propagates_fetch_error(fake_get, config, caplog):
    fake_get(FakeResponse(500, {}))

    with pytest.raises(FetchError):
        RatesLoader(ExchangeRateApiClient(config)).load()
    assert any("status=ERROR" in r.getMessage() for r in caplog.records)
