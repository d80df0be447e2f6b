from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

BASE_DIR = Path(__file__).resolve().parents[2]


def project_root() -> Path:
    """Корень проекта: каталог репозитория или текущий рабочий каталог.

    При запуске из исходников рядом с пакетом лежит pyproject.toml.
    После установки пакета в site-packages его там нет, и конфигурация,
    .env и логи ищутся в текущем рабочем каталоге.
    """
    if (BASE_DIR / "pyproject.toml").exists():
        return BASE_DIR
    return Path.cwd()


@dataclass(frozen=True)
class _Defaults:
    """Значения по умолчанию для конфигурации проекта."""

    logs_dir: Path = Path("logs")
    log_level: str = "INFO"
    console_log_level: str = "WARNING"
    log_format: str = (
        "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
    )
    api_base_url: str = "https://v6.exchangerate-api.com/v6"
    base_currency: str = "USD"
    request_timeout: float = 10.0
    api_key_env: str = "EXCHANGERATE_API_KEY"
    env_file: Path = Path(".env")


class SettingsLoader:
    """Singleton для загрузки и кеширования конфигурации проекта.

    Источник конфигурации:
    - pyproject.toml в корне проекта (см. project_root) →
      секция [tool.exchange_currency]
    - при отсутствии ключа используется значение по умолчанию.

    Доступные ключи:
    - logs_dir: путь к каталогу логов
    - log_level: уровень логирования в файл (DEBUG/INFO/...)
    - console_log_level: уровень логирования в stderr
    - log_format: формат строк логов
    - api_base_url: базовый URL ExchangeRate-API
    - base_currency: валюта, относительно которой запрашиваются курсы
    - request_timeout: таймаут HTTP-запроса в секундах
    - api_key_env: имя переменной окружения с API-ключом
    - env_file: путь к .env-файлу с секретами
    """

    _instance: "SettingsLoader | None" = None
    _initialized: bool = False

    def __new__(cls, *args: Any, **kwargs: Any) -> "SettingsLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if self.__class__._initialized:
            return
        self.__class__._initialized = True

        self._defaults = _Defaults()
        self._root = BASE_DIR
        self._config: Dict[str, Any] = {}
        self.reload()

    def _load_from_pyproject(self) -> Dict[str, Any]:
        """Загрузка конфигурации из pyproject.toml (секция [tool.exchange_currency])."""
        pyproject_path = self._root / "pyproject.toml"
        if not pyproject_path.exists():
            return {}

        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)

        tool_section = data.get("tool", {})
        return tool_section.get("exchange_currency", {}) or {}

    def _resolve_path(self, value: Any) -> Path:
        # относительные пути считаем от корня проекта
        path = Path(value)
        if not path.is_absolute():
            path = self._root / path
        return path

    def reload(self) -> None:
        """Полная перезагрузка конфигурации из pyproject.toml."""
        self._root = project_root()
        raw = self._load_from_pyproject()
        defaults = self._defaults

        cfg: Dict[str, Any] = {"project_root": self._root}

        cfg["logs_dir"] = self._resolve_path(
            raw.get("logs_dir", defaults.logs_dir),
        )
        cfg["log_level"] = str(
            raw.get("log_level", defaults.log_level),
        ).upper()
        cfg["console_log_level"] = str(
            raw.get("console_log_level", defaults.console_log_level),
        ).upper()
        cfg["log_format"] = str(
            raw.get("log_format", defaults.log_format),
        )
        cfg["api_base_url"] = str(
            raw.get("api_base_url", defaults.api_base_url),
        ).rstrip("/")
        cfg["base_currency"] = str(
            raw.get("base_currency", defaults.base_currency),
        ).upper()
        cfg["request_timeout"] = float(
            raw.get("request_timeout", defaults.request_timeout),
        )
        cfg["api_key_env"] = str(
            raw.get("api_key_env", defaults.api_key_env),
        )
        cfg["env_file"] = self._resolve_path(
            raw.get("env_file", defaults.env_file),
        )

        self._config = cfg

    def get(self, key: str, default: Any | None = None) -> Any:
        """Получить значение конфигурации по ключу.

        Если ключ не найден, возвращается default.
        """
        return self._config.get(key, default)
