from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from ..core.exceptions import InputError, InputFormatError, InputRangeError
from .console import Console

T = TypeVar("T")

# Только десятичная запись: без "_", "0x", "nan", "inf" и пробелов внутри.
INTEGER_RE = re.compile(r"[+-]?[0-9]+")
DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class PromptState(Enum):
    PENDING = "pending"
    VALID = "valid"
    REJECTED = "rejected"


class Prompt(ABC, Generic[T]):
    """Автомат одного запроса ввода: PENDING → VALID | REJECTED.

    submit() принимает очередной токен и никогда не бросает исключения
    для некорректного ввода: ошибка сохраняется в self.error, а состояние
    становится REJECTED. Из REJECTED можно снова вызвать submit().
    Из VALID автомат больше не выходит.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        self.state = PromptState.PENDING
        self.value: Optional[T] = None
        self.error: Optional[InputError] = None

    @abstractmethod
    def parse(self, token: str) -> T:
        """Разобрать токен. Бросает InputFormatError или InputRangeError."""

    def submit(self, token: str) -> PromptState:
        if self.state is PromptState.VALID:
            raise RuntimeError("Prompt already holds a valid value.")

        try:
            value = self.parse(token)
        except InputError as exc:
            self.state = PromptState.REJECTED
            self.error = exc
            return self.state

        self.state = PromptState.VALID
        self.value = value
        self.error = None
        return self.state


class IntegerPrompt(Prompt[int]):
    """Целое число в диапазоне [minimum, maximum] включительно."""

    def __init__(self, message: str, minimum: int, maximum: int) -> None:
        if minimum > maximum:
            raise ValueError("minimum must not exceed maximum.")
        super().__init__(message)
        self.minimum = minimum
        self.maximum = maximum

    def parse(self, token: str) -> int:
        if not INTEGER_RE.fullmatch(token):
            raise InputFormatError("Please enter a valid integer.")
        value = int(token)

        if value < self.minimum or value > self.maximum:
            raise InputRangeError(
                f"Please enter a number between {self.minimum} "
                f"and {self.maximum}.",
            )
        return value


class PositiveFloatPrompt(Prompt[float]):
    """Конечное число строго больше нуля."""

    def parse(self, token: str) -> float:
        if not DECIMAL_RE.fullmatch(token):
            raise InputFormatError("Please enter a valid number.")
        value = float(token)

        # "1e999" проходит по формату, но даёт inf
        if not math.isfinite(value):
            raise InputFormatError("Please enter a valid number.")
        if value <= 0:
            raise InputRangeError(
                "The amount must be a positive number greater than zero.",
            )
        return value


def ask(prompt: Prompt[Any], console: Console) -> Any:
    """Запрашивать токены, пока prompt не перейдёт в VALID.

    Каждый отклонённый токен сопровождается сообщением об ошибке
    и повтором приглашения. EOFError от консоли пробрасывается.
    """
    while True:
        console.prompt(prompt.message)
        state = prompt.submit(console.read_token())
        if state is PromptState.VALID:
            return prompt.value
        console.write(f"Error: {prompt.error}")
