from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .infra.settings import SettingsLoader

ACTIONS_LOGGER_NAME = "exchange_currency.actions"
ACTIONS_LOG_FILE = "actions.log"

_actions_logger: Optional[logging.Logger] = None


def make_file_handler(
    logs_dir: Path,
    formatter: logging.Formatter,
) -> Optional[RotatingFileHandler]:
    """Создать ротируемый файловый обработчик в logs_dir.

    Если каталог нельзя создать или файл нельзя открыть (например,
    пакет установлен в каталог только для чтения), возвращает None:
    журнал операций необязателен для работы конвертера.
    """
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            logs_dir / ACTIONS_LOG_FILE,
            maxBytes=1_000_000,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError:
        return None
    handler.setFormatter(formatter)
    return handler


def get_actions_logger() -> logging.Logger:
    """Вернуть логгер журнала операций конвертера.

    События, которые в него пишутся:
    - FETCH: начало загрузки курсов, результат (число кодов, base,
      время ответа) или ошибка клиента (RatesLoader);
    - CONVERT: каждая конвертация с результатом или типом ошибки
      (декоратор log_action);
    - SESSION: завершение меню или отказ от начатого запроса.

    Файл <logs_dir>/actions.log получает записи уровня log_level,
    stderr: только console_log_level и выше, чтобы не мешать меню.
    Если файл недоступен, остаётся только stderr и пишется WARNING.
    """
    global _actions_logger

    if _actions_logger is not None:
        return _actions_logger

    settings = SettingsLoader()
    logger = logging.getLogger(ACTIONS_LOGGER_NAME)
    logger.setLevel(settings.get("log_level", "INFO"))

    if not logger.handlers:
        formatter = logging.Formatter(
            fmt=settings.get(
                "log_format",
                "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            ),
            datefmt="%Y-%m-%dT%H:%M:%S",
        )

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(settings.get("console_log_level", "WARNING"))
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        logs_dir = Path(settings.get("logs_dir"))
        file_handler = make_file_handler(logs_dir, formatter)
        if file_handler is not None:
            logger.addHandler(file_handler)
        else:
            logger.warning(
                "LOGGING file_handler=DISABLED logs_dir=%s",
                logs_dir,
            )

    _actions_logger = logger
    return logger
