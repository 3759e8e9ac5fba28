# mdcompile/utils/ids.py
import itertools
import uuid
from typing import Callable

IdFactory = Callable[[], str]


def random_id() -> str:
    """A 32-character hex token; collisions are not a practical concern."""
    return uuid.uuid4().hex


class CounterIdFactory:
    """Deterministic ids (`prefix1`, `prefix2`, ...), unique per instance."""

    def __init__(self, prefix: str = "id", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
