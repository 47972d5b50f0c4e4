from abc import ABC, abstractmethod
from typing import Tuple


def request_timeout(timeout_s: float) -> Tuple[float, float]:
    """Split one call budget into a requests (connect, read) timeout pair summing to timeout_s."""
    connect = min(3.05, timeout_s / 4)
    return connect, timeout_s - connect


class BaseProvider(ABC):
    name: str

    @abstractmethod
    def generate(self, *, model: str, prompt: str, system: str | None,
                 json_mode: bool, max_tokens: int | None,
                 temperature: float | None, timeout_s: float) -> Tuple[str, str]:
        """Return (text, finish_reason). Raises requests exceptions on transport/HTTP errors."""
