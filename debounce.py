# debounce.py
import time
from typing import Any, Callable, Optional, Tuple


class Debouncer:
    """
    Atrasa a emissão de um valor que muda até ele ficar parado por `delay_ms`.

    Cada `push` com um valor novo reinicia o timer pendente; `poll` só troca a
    saída quando o timer vence sem interrupção. Valores intermediários são
    descartados, só o último valor estável aparece.

    O relógio e o sleep são injetáveis (`clock`, `sleep`) e os métodos aceitam
    `now` explícito, o que deixa o comportamento determinístico nos testes.
    """

    def __init__(self, delay_ms: int = 500, initial: Any = "", clock: Callable[[], float] = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        if delay_ms < 0:
            raise ValueError("delay_ms não pode ser negativo")
        self.delay = delay_ms / 1000.0
        self._clock = clock
        self._sleep = sleep
        self._value = initial
        # (valor, instante da última mudança) ou None
        self._pending: Optional[Tuple[Any, float]] = None

    @property
    def value(self) -> Any:
        return self._value

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def _now(self, now: Optional[float]) -> float:
        return self._clock() if now is None else now

    def push(self, value: Any, now: Optional[float] = None) -> None:
        """Registra uma mudança de entrada. Repetir o mesmo valor não reinicia o timer."""
        if self._pending is not None:
            if value == self._pending[0]:
                return
        elif value == self._value:
            return
        self._pending = (value, self._now(now))

    def poll(self, now: Optional[float] = None) -> Any:
        """Retorna a saída atual, promovendo o valor pendente se o atraso já venceu."""
        if self._pending is not None:
            value, changed_at = self._pending
            if self._now(now) - changed_at >= self.delay:
                self._value = value
                self._pending = None
        return self._value

    def remaining(self, now: Optional[float] = None) -> float:
        """Segundos até o valor pendente assentar (0.0 se não há nada pendente)."""
        if self._pending is None:
            return 0.0
        elapsed = self._now(now) - self._pending[1]
        return max(0.0, self.delay - elapsed)

    def wait(self) -> Any:
        """Dorme o que falta para o valor pendente assentar e devolve a saída."""
        remaining = self.remaining()
        if remaining > 0:
            self._sleep(remaining)
        return self.poll()
