from __future__ import annotations

from typing import Mapping, Optional

from ..decorators import log_action
from .exceptions import InvalidCurrencyError, StateError
from .models import ConversionRequest


def ensure_rates_loaded(table: Optional[Mapping[str, float]]) -> None:
    """Проверить, что курсы уже загружены.

    В обычном сценарии CLI недостижимо: меню запускается только после
    успешной загрузки. Проверка остаётся для других источников курсов.
    """
    if not table:
        raise StateError(
            "Exchange rates have not been fetched. "
            "Please fetch the rates first.",
        )


def ensure_currency_supported(
    code: str,
    table: Mapping[str, float],
) -> None:
    """Проверить, что код валюты есть в таблице курсов."""
    if code not in table:
        raise InvalidCurrencyError(
            f"Invalid currency code provided: {code}",
        )


@log_action("CONVERT", verbose=True)
def convert(
    amount: float,
    from_code: str,
    to_code: str,
    table: Optional[Mapping[str, float]],
) -> float:
    """Пересчитать сумму из from_code в to_code по таблице курсов.

    Сумма сначала приводится к базовой валюте таблицы по курсу from_code,
    затем переводится в to_code. Округление не выполняется: форматирование
    результата остаётся на стороне вызывающего кода.
    """
    ensure_rates_loaded(table)
    ensure_currency_supported(from_code, table)  # type: ignore[arg-type]
    ensure_currency_supported(to_code, table)  # type: ignore[arg-type]

    return (amount / table[from_code]) * table[to_code]  # type: ignore[index]


def convert_request(
    request: ConversionRequest,
    table: Optional[Mapping[str, float]],
) -> float:
    """Выполнить конвертацию для готового ConversionRequest."""
    return convert(
        request.amount,
        request.from_code,
        request.to_code,
        table,
    )
