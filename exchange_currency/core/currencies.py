from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CatalogEntry:
    """Валюта из меню: код и отображаемое название."""

    code: str
    name: str

    def __post_init__(self) -> None:
        name = self.name.strip()
        if not name:
            raise ValueError("Currency name cannot be empty.")

        code = self.code.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError("Currency code must be 3 letters long.")

        # нормализуем значения в frozen dataclass
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "code", code)

    def get_display_info(self) -> str:
        return f"{self.code} - {self.name}"


# Фиксированный каталог меню. Порядок определяет номера пунктов (с 1).
CURRENCY_CATALOG: Tuple[CatalogEntry, ...] = (
    CatalogEntry(code="ARS", name="Argentine Peso"),
    CatalogEntry(code="BOB", name="Bolivian Boliviano"),
    CatalogEntry(code="BRL", name="Brazilian Real"),
    CatalogEntry(code="CLP", name="Chilean Peso"),
    CatalogEntry(code="COP", name="Colombian Peso"),
    CatalogEntry(code="USD", name="US Dollar"),
)


def exit_option(catalog: Tuple[CatalogEntry, ...] = CURRENCY_CATALOG) -> int:
    """Номер пункта «Exit»: на единицу больше размера каталога."""
    return len(catalog) + 1


def get_catalog_entry(
    option: int,
    catalog: Tuple[CatalogEntry, ...] = CURRENCY_CATALOG,
) -> CatalogEntry:
    """Вернуть запись каталога по номеру пункта меню (нумерация с 1)."""
    if not isinstance(option, int) or isinstance(option, bool):
        raise TypeError("Menu option must be an integer.")
    if not 1 <= option <= len(catalog):
        raise ValueError(
            f"Menu option must be between 1 and {len(catalog)}.",
        )
    return catalog[option - 1]
