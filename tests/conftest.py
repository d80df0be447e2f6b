from __future__ import annotations

import io
from typing import Any, Callable, Dict, List, Optional

import pytest
import requests

from exchange_currency.cli.console import Console
from exchange_currency.core.exceptions import FetchError
from exchange_currency.core.models import RateTable
from exchange_currency.rate_service.api_clients import BaseRateClient
from exchange_currency.rate_service.config import RateServiceConfig

SAMPLE_RATES: Dict[str, float] = {
    "USD": 1.0,
    "ARS": 850.0,
    "BOB": 6.91,
    "BRL": 5.0,
    "CLP": 940.5,
    "COP": 3925.0,
    "EUR": 0.92,
}


class FakeResponse:
    """Минимальная замена requests.Response для тестов клиента."""

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        invalid_json: bool = False,
    ) -> None:
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json
        self.text = "" if payload is None else str(payload)

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class StaticClient(BaseRateClient):
    def __init__(self, table: RateTable) -> None:
        super().__init__(config=make_config())
        self.table = table
        self.calls = 0

    def fetch_rates(self) -> RateTable:
        self.calls += 1
        return self.table


class FailingClient(BaseRateClient):
    def __init__(self, message: str = "Status code: 401") -> None:
        super().__init__(config=make_config())
        self.message = message

    def fetch_rates(self) -> RateTable:
        raise FetchError(self.message)


def make_config(api_key: str = "test-key") -> RateServiceConfig:
    return RateServiceConfig(
        api_key=api_key,
        base_url="https://v6.exchangerate-api.com/v6",
        base_currency="USD",
        request_timeout=5.0,
    )


def success_payload(rates: Optional[Dict[str, float]] = None) -> Dict[str, Any]:
    return {
        "result": "success",
        "base_code": "USD",
        "time_last_update_utc": "Fri, 16 Oct 2026 00:00:01 +0000",
        "conversion_rates": dict(rates or SAMPLE_RATES),
    }


@pytest.fixture
def rate_table() -> RateTable:
    return RateTable(SAMPLE_RATES, base_code="USD")


@pytest.fixture
def config() -> RateServiceConfig:
    return make_config()


@pytest.fixture
def fake_get(monkeypatch: pytest.MonkeyPatch) -> Callable[..., List[Dict[str, Any]]]:
    """Подменить requests.get: вернуть ответ или бросить исключение.

    Возвращает список зафиксированных вызовов (url + kwargs).
    """

    def install(
        response: Optional[FakeResponse] = None,
        raises: Optional[BaseException] = None,
    ) -> List[Dict[str, Any]]:
        calls: List[Dict[str, Any]] = []

        def _get(url: str, **kwargs: Any) -> FakeResponse:
            calls.append({"url": url, **kwargs})
            if raises is not None:
                raise raises
            assert response is not None
            return response

        monkeypatch.setattr(requests, "get", _get)
        return calls

    return install


@pytest.fixture
def make_console() -> Callable[[str], Console]:
    def factory(text: str) -> Console:
        return Console(
            stdin=io.StringIO(text),
            stdout=io.StringIO(),
            stderr=io.StringIO(),
        )

    return factory


def output_of(console: Console) -> str:
    return console._out.getvalue()  # type: ignore[attr-defined]


def errors_of(console: Console) -> str:
    return console._err.getvalue()  # type: ignore[attr-defined]
