from __future__ import annotations

import math


def validate_amount(amount: float) -> float:
    """Проверка суммы: конечное число > 0. Возвращает сумму как float."""
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise TypeError("Amount must be a number.")
    value = float(amount)
    if not math.isfinite(value):
        raise ValueError("Amount must be a finite number.")
    if value <= 0:
        raise ValueError("Amount must be a positive number greater than zero.")
    return value


def validate_currency_code(code: str) -> str:
    """Проверка кода валюты: непустая строка в верхнем регистре."""
    if not isinstance(code, str):
        raise TypeError("Currency code must be a string.")
    normalized = code.strip().upper()
    if not normalized:
        raise ValueError("Currency code cannot be empty.")
    return normalized


def validate_rate(rate: object) -> float:
    """Проверка курса: конечное положительное число."""
    if isinstance(rate, bool) or not isinstance(rate, (int, float)):
        raise TypeError("Rate must be a number.")
    value = float(rate)
    if not math.isfinite(value) or value <= 0:
        raise ValueError("Rate must be a positive finite number.")
    return value
