from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable, Dict, Optional

from .logging_config import get_actions_logger

FuncType = Callable[..., Any]


def _number_repr(value: Any, fmt: str) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "-"
    return format(float(value), fmt)


def log_action(
    action: Optional[str] = None,
    *,
    verbose: bool = False,
) -> Callable[[FuncType], FuncType]:
    """Декоратор для логирования операций конвертера.

    Логируем на уровне INFO структуру:
    - timestamp (через форматтер логгера)
    - action (CONVERT/...)
    - from / to: коды валют
    - amount: исходная сумма
    - converted: результат (если функция вернула число)
    - result (OK/ERROR)
    - error_type и error_message при исключениях

    Аргументы берутся по сигнатуре функции, поэтому позиционный
    и именованный вызов логируются одинаково. При verbose=True
    добавляется базовая валюта таблицы курсов.

    Декоратор не глотает исключения, только фиксирует их в логах.
    """

    def decorator(func: FuncType) -> FuncType:
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = get_actions_logger()
            act = action or func.__name__.upper()

            try:
                bound: Dict[str, Any] = dict(
                    signature.bind_partial(*args, **kwargs).arguments,
                )
            except TypeError:
                bound = dict(kwargs)

            from_code = bound.get("from_code") or "-"
            to_code = bound.get("to_code") or "-"
            amount_repr = _number_repr(bound.get("amount"), ".4f")

            context = ""
            if verbose:
                table = bound.get("table")
                base = getattr(table, "base_code", None)
                context = f" base='{base or '-'}'"

            try:
                result = func(*args, **kwargs)
            except Exception as exc:  # noqa: BLE001
                logger.error(
                    "%s from='%s' to='%s' amount=%s%s result=ERROR "
                    "error_type='%s' error_message='%s'",
                    act,
                    from_code,
                    to_code,
                    amount_repr,
                    context,
                    type(exc).__name__,
                    exc,
                )
                raise

            logger.info(
                "%s from='%s' to='%s' amount=%s%s converted=%s result=OK",
                act,
                from_code,
                to_code,
                amount_repr,
                context,
                _number_repr(result, ",.4f"),
            )
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
