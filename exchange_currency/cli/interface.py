from __future__ import annotations

from enum import Enum, auto
from typing import Optional, Tuple

from ..core.converter import convert_request
from ..core.currencies import (
    CURRENCY_CATALOG,
    CatalogEntry,
    exit_option,
    get_catalog_entry,
)
from ..core.exceptions import FetchError, StateError
from ..core.models import ConversionRequest, RateTable
from ..logging_config import get_actions_logger
from ..rate_service.api_clients import BaseRateClient
from ..rate_service.loader import RatesLoader
from .console import Console
from .prompts import IntegerPrompt, PositiveFloatPrompt, ask

EXIT_OK = 0
EXIT_FETCH_ERROR = 1
EXIT_INTERRUPTED = 130


class LoopState(Enum):
    AWAIT_SOURCE = auto()
    AWAIT_AMOUNT = auto()
    AWAIT_TARGET = auto()
    DISPLAY = auto()
    EXIT = auto()


class ConversionSession:
    """Цикл меню конвертации поверх загруженной таблицы курсов.

    Переходы:
    AWAIT_SOURCE → AWAIT_AMOUNT → AWAIT_TARGET → DISPLAY → AWAIT_SOURCE;
    выбор пункта «Exit» на любом шаге выбора валюты ведёт в EXIT,
    частично собранный запрос при этом отбрасывается.
    """

    def __init__(
        self,
        console: Console,
        table: RateTable,
        catalog: Tuple[CatalogEntry, ...] = CURRENCY_CATALOG,
    ) -> None:
        self.console = console
        self.table = table
        self.catalog = catalog
        self.state = LoopState.AWAIT_SOURCE
        self._exit_option = exit_option(catalog)
        self._source: Optional[CatalogEntry] = None
        self._amount: Optional[float] = None
        self._target: Optional[CatalogEntry] = None
        self._logger = get_actions_logger()

    def _display_currency_options(self) -> None:
        self.console.write(
            "Select a currency to convert (or 'Exit' to end the program):",
        )
        for number, entry in enumerate(self.catalog, start=1):
            self.console.write(f"{number}- {entry.get_display_info()}")

    def _display_menu(self) -> None:
        self.console.write()
        self.console.write("--- Currency Conversion Menu ---")
        self._display_currency_options()
        self.console.write(f"{self._exit_option}- Exit - Terminate program")

    def _select_currency(self) -> Optional[CatalogEntry]:
        """Запросить пункт меню. None означает выбор «Exit»."""
        option = ask(
            IntegerPrompt(
                f"Enter your choice (1-{self._exit_option}): ",
                1,
                self._exit_option,
            ),
            self.console,
        )
        if option == self._exit_option:
            return None
        return get_catalog_entry(option, self.catalog)

    def _await_source(self) -> LoopState:
        self._display_menu()
        self._source = self._select_currency()
        if self._source is None:
            return LoopState.EXIT
        return LoopState.AWAIT_AMOUNT

    def _await_amount(self) -> LoopState:
        if self._source is None:
            raise StateError("Source currency has not been selected.")
        self._amount = ask(
            PositiveFloatPrompt(
                f"Enter the amount in {self._source.code} to convert: ",
            ),
            self.console,
        )
        return LoopState.AWAIT_TARGET

    def _await_target(self) -> LoopState:
        self.console.write("Select the target currency:")
        self._display_currency_options()
        self._target = self._select_currency()
        if self._target is None:
            self._logger.info(
                "SESSION abandoned from='%s' amount=%s",
                self._source.code if self._source else "-",
                self._amount,
            )
            return LoopState.EXIT
        return LoopState.DISPLAY

    def _display(self) -> LoopState:
        if self._source is None or self._amount is None or self._target is None:
            raise StateError("Conversion request is incomplete.")
        request = ConversionRequest(
            amount=self._amount,
            from_code=self._source.code,
            to_code=self._target.code,
        )
        converted = convert_request(request, self.table)
        self.console.write(
            f"{request.amount} {request.from_code} is equivalent to "
            f"{converted} {request.to_code}",
        )
        self._source = self._amount = self._target = None
        return LoopState.AWAIT_SOURCE

    def step(self) -> LoopState:
        """Выполнить один переход автомата и вернуть новое состояние."""
        handlers = {
            LoopState.AWAIT_SOURCE: self._await_source,
            LoopState.AWAIT_AMOUNT: self._await_amount,
            LoopState.AWAIT_TARGET: self._await_target,
            LoopState.DISPLAY: self._display,
        }
        handler = handlers.get(self.state)
        if handler is None:
            return self.state
        self.state = handler()
        return self.state

    def run(self) -> None:
        """Крутить меню до выбора «Exit» или конца ввода."""
        try:
            while self.state is not LoopState.EXIT:
                self.step()
        except EOFError:
            self.console.write()
            self.state = LoopState.EXIT
        self.console.write("Goodbye!")


def run_cli(
    console: Optional[Console] = None,
    client: Optional[BaseRateClient] = None,
) -> int:
    """Основной сценарий CLI. Возвращает код завершения процесса.

    Курсы загружаются один раз до запуска меню; при FetchError меню
    не запускается. Консоль закрывается на любом пути выхода.
    """
    console = console or Console()
    logger = get_actions_logger()

    with console:
        try:
            table = RatesLoader(client).load()
        except FetchError as exc:
            console.error(f"Error fetching exchange rates: {exc}")
            return EXIT_FETCH_ERROR

        ConversionSession(console, table).run()
        logger.info("SESSION finished")
        return EXIT_OK


def main() -> int:
    """Точка входа консольного скрипта exchange-currency."""
    try:
        return run_cli()
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return EXIT_INTERRUPTED
