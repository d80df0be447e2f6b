from __future__ import annotations

import sys
from collections import deque
from typing import Deque, Optional, TextIO


class Console:
    """Консольный ввод/вывод с токенным чтением.

    Строка ввода разбивается на токены по пробельным символам; каждый
    токен обрабатывается отдельно, поэтому один некорректный токен
    отбрасывается, не затрагивая остальные.

    Используется как контекстный менеджер: входной поток освобождается
    ровно один раз при выходе из блока, каким бы путём он ни произошёл.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._err = stderr if stderr is not None else sys.stderr
        self._tokens: Deque[str] = deque()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "Console":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Освободить входной поток (повторный вызов ничего не делает)."""
        if self._closed:
            return
        self._closed = True
        self._tokens.clear()
        self._in.close()

    def write(self, text: str = "") -> None:
        """Напечатать строку с переводом строки."""
        print(text, file=self._out)

    def prompt(self, text: str) -> None:
        """Напечатать приглашение без перевода строки."""
        print(text, end="", file=self._out, flush=True)

    def error(self, text: str) -> None:
        print(text, file=self._err)

    def read_token(self) -> str:
        """Вернуть следующий токен ввода.

        Пустые строки пропускаются. При конце ввода бросает EOFError.
        """
        if self._closed:
            raise ValueError("I/O operation on closed console.")

        while not self._tokens:
            line = self._in.readline()
            if not line:
                raise EOFError("End of console input.")
            self._tokens.extend(line.split())

        return self._tokens.popleft()
