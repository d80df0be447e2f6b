from __future__ import annotations


class ExchangeCurrencyError(Exception):
    """Базовое исключение конвертера валют."""


class FetchError(ExchangeCurrencyError):
    """Не удалось получить или разобрать курсы из внешнего API."""


class StateError(ExchangeCurrencyError):
    """Конвертация запрошена до успешной загрузки курсов."""


class InvalidCurrencyError(ExchangeCurrencyError):
    """Код валюты отсутствует в таблице курсов."""


class InputError(ExchangeCurrencyError):
    """Некорректный ввод в консоли (исправляется повторным запросом)."""


class InputFormatError(InputError):
    """Токен не разбирается как число нужного типа."""


class InputRangeError(InputError):
    """Число вне допустимого диапазона."""
