from __future__ import annotations

from abc import ABC, abstractmethod
from time import monotonic
from typing import Any, Dict

import requests

from ..core.exceptions import FetchError
from ..core.models import RateTable
from .config import RateServiceConfig


class BaseRateClient(ABC):
    """Базовый клиент внешнего API курсов.

    Наследники реализуют fetch_rates(), который делает ровно один
    запрос и возвращает RateTable:
    {
        "USD": 1.0,
        "ARS": 850.0,
        ...
    }
    Любая ошибка получения или разбора оборачивается в FetchError.
    """

    def __init__(self, config: RateServiceConfig | None = None) -> None:
        self.config = config or RateServiceConfig.from_settings()
        self.last_elapsed_ms: int | None = None

    @abstractmethod
    def fetch_rates(self) -> RateTable:
        """Получить таблицу курсов относительно базовой валюты."""


class ExchangeRateApiClient(BaseRateClient):
    """Клиент ExchangeRate-API (v6, эндпоинт /latest/<base>)."""

    RATES_FIELD = "conversion_rates"

    def fetch_rates(self) -> RateTable:
        """Запросить курсы и вернуть их в виде RateTable."""
        cfg = self.config

        if not cfg.api_key:
            raise FetchError(
                "API key for ExchangeRate-API is not set. "
                "Define it in the environment or in the .env file.",
            )

        start = monotonic()
        try:
            response = requests.get(
                cfg.latest_url,
                timeout=cfg.request_timeout,
            )
        except requests.exceptions.RequestException as exc:
            raise FetchError(
                f"Error occurred while fetching exchange rates: {exc}",
            ) from exc
        except KeyboardInterrupt as exc:
            raise FetchError("Fetch operation was interrupted.") from exc
        self.last_elapsed_ms = int((monotonic() - start) * 1000)

        if response.status_code != 200:
            raise FetchError(
                "Failed to fetch exchange rates. "
                f"Status code: {response.status_code}",
            )

        try:
            payload: Dict[str, Any] = response.json()
        except ValueError as exc:
            raise FetchError(
                "Invalid JSON response from ExchangeRate-API.",
            ) from exc

        if not isinstance(payload, dict):
            raise FetchError(
                "Unexpected ExchangeRate-API response: "
                "expected a JSON object.",
            )

        if payload.get("result", "success") != "success":
            error_type = payload.get("error-type", "unknown")
            raise FetchError(
                f"ExchangeRate-API returned an error: {error_type}",
            )

        rates = payload.get(self.RATES_FIELD)
        if not isinstance(rates, dict) or not rates:
            raise FetchError(
                "Unexpected ExchangeRate-API response: "
                f"missing '{self.RATES_FIELD}' section.",
            )

        base_code = str(payload.get("base_code", cfg.base_currency)).upper()
        try:
            return RateTable(
                rates,
                base_code=base_code,
                last_update=payload.get("time_last_update_utc"),
            )
        except (TypeError, ValueError) as exc:
            raise FetchError(
                f"Unexpected ExchangeRate-API response: {exc}",
            ) from exc
