from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from .utils import validate_amount, validate_currency_code, validate_rate


class RateTable(Mapping[str, float]):
    """Снимок курсов за текущий запуск: код → единиц валюты за 1 base_code.

    Таблица неизменяема после создания. Значения проверяются при
    построении, поэтому конвертер может доверять им без повторных проверок.
    """

    def __init__(
        self,
        rates: Mapping[str, Any],
        base_code: str = "USD",
        last_update: Optional[str] = None,
    ) -> None:
        normalized: dict[str, float] = {}
        for code, rate in rates.items():
            normalized[validate_currency_code(code)] = validate_rate(rate)

        self._rates: Mapping[str, float] = MappingProxyType(normalized)
        self._base_code = validate_currency_code(base_code)
        self._last_update = last_update

    @property
    def base_code(self) -> str:
        return self._base_code

    @property
    def last_update(self) -> Optional[str]:
        """Время обновления курсов по данным провайдера (если известно)."""
        return self._last_update

    def __getitem__(self, code: str) -> float:
        return self._rates[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return (
            f"RateTable(base_code={self._base_code!r}, "
            f"codes={len(self._rates)}, last_update={self._last_update!r})"
        )


@dataclass(frozen=True)
class ConversionRequest:
    """Запрос на конвертацию: сумма и пара валют."""

    amount: float
    from_code: str
    to_code: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", validate_amount(self.amount))
        object.__setattr__(
            self,
            "from_code",
            validate_currency_code(self.from_code),
        )
        object.__setattr__(
            self,
            "to_code",
            validate_currency_code(self.to_code),
        )
