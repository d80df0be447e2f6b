from __future__ import annotations

from datetime import datetime, timezone

from ..core.exceptions import FetchError
from ..core.models import RateTable
from ..logging_config import get_actions_logger
from .api_clients import BaseRateClient, ExchangeRateApiClient


class RatesLoader:
    """Однократная загрузка курсов при старте программы.

    Задачи:
    - один вызов клиента без повторов;
    - логирование начала, результата и ошибок;
    - проброс FetchError вызывающему коду (ошибка фатальна для CLI).
    """

    def __init__(self, client: BaseRateClient | None = None) -> None:
        self._client = client
        self._logger = get_actions_logger()

    @property
    def client(self) -> BaseRateClient:
        # дефолтный клиент создаём лениво: конфигурация читает окружение
        if self._client is None:
            self._client = ExchangeRateApiClient()
        return self._client

    def load(self) -> RateTable:
        """Загрузить таблицу курсов. При ошибке бросает FetchError."""
        logger = self._logger
        started_str = (
            datetime.now(timezone.utc)
            .replace(microsecond=0)
            .isoformat()
            .replace("+00:00", "Z")
        )

        client = self.client
        client_name = client.__class__.__name__
        logger.info(
            "FETCH start timestamp=%s client=%s",
            started_str,
            client_name,
        )

        try:
            table = client.fetch_rates()
        except FetchError as exc:
            logger.error(
                "FETCH client=%s status=ERROR error=%s",
                client_name,
                exc,
            )
            raise

        logger.info(
            "FETCH client=%s status=OK base=%s codes=%d elapsed_ms=%s "
            "last_update=%s",
            client_name,
            table.base_code,
            len(table),
            "-" if client.last_elapsed_ms is None else client.last_elapsed_ms,
            table.last_update or "-",
        )
        return table
