from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from ..infra.settings import SettingsLoader


def read_api_key(
    env_name: str | None = None,
    env_file: Path | None = None,
) -> str:
    """Прочитать API-ключ из окружения, предварительно подгрузив .env.

    Если настроенного .env нет, ищем его от текущего рабочего каталога
    вверх (find_dotenv). Уже заданные переменные окружения имеют
    приоритет над .env. default="" гарантирует, что тип всегда str.
    """
    settings = SettingsLoader()
    env_name = env_name or settings.get("api_key_env")
    env_file = env_file or settings.get("env_file")

    if env_file is None or not Path(env_file).exists():
        env_file = find_dotenv(usecwd=True) or None

    if env_file is not None:
        load_dotenv(env_file, override=False)

    return os.getenv(env_name, "").strip()


@dataclass(frozen=True)
class RateServiceConfig:
    """Конфигурация получения курсов.

    Здесь фиксируем:
    - api_key: ключ для ExchangeRate-API (берём из окружения / .env);
    - base_url: базовый URL ExchangeRate-API;
    - base_currency: валюта, относительно которой запрашиваются курсы (USD);
    - request_timeout: таймаут HTTP-запроса в секундах.
    """

    api_key: str
    base_url: str
    base_currency: str = "USD"
    request_timeout: float = 10.0

    @classmethod
    def from_settings(cls) -> "RateServiceConfig":
        """Собрать конфигурацию из SettingsLoader и окружения."""
        settings = SettingsLoader()
        return cls(
            api_key=read_api_key(),
            base_url=settings.get("api_base_url"),
            base_currency=settings.get("base_currency", "USD"),
            request_timeout=settings.get("request_timeout", 10.0),
        )

    @property
    def latest_url(self) -> str:
        base = self.base_currency.upper()
        return f"{self.base_url}/{self.api_key}/latest/{base}"
