"""Class-name generation: ``{prefix}-{suffix}``."""

from __future__ import annotations

import itertools
import random
import string
import threading
from enum import Enum

__all__ = [
    "ClassNameStrategy",
    "ClassNameGenerator",
    "DEFAULT_SUFFIX_LENGTH",
    "reset_counter",
]

DEFAULT_SUFFIX_LENGTH = 30

_ALPHABET = string.ascii_letters + string.digits

# Shared by every generator so counter names never repeat within a process.
_counter = itertools.count()
_counter_lock = threading.Lock()


class ClassNameStrategy(str, Enum):
    """How the unique suffix of a class name is produced."""

    RANDOM = "random"
    COUNTER = "counter"


def reset_counter(start: int = 0) -> None:
    """Restart the process-wide counter; only safe when no styles are mounted."""
    global _counter
    with _counter_lock:
        _counter = itertools.count(start)


class ClassNameGenerator:
    """Produces class names that are unique for the life of the process.

    ``RANDOM`` draws a fixed-length alphanumeric suffix; ``COUNTER`` takes the
    next value of a process-wide counter, making names reproducible.
    """

    def __init__(
        self,
        strategy: ClassNameStrategy | str = ClassNameStrategy.RANDOM,
        length: int = DEFAULT_SUFFIX_LENGTH,
    ) -> None:
        if length < 1:
            raise ValueError("Class name suffix length must be at least 1")
        self.strategy = ClassNameStrategy(strategy)
        self.length = length

    def make_class_name(self, prefix: str) -> str:
        if not prefix:
            raise ValueError("Class name prefix must be a non-empty string")
        return f"{prefix}-{self._suffix()}"

    def _suffix(self) -> str:
        if self.strategy is ClassNameStrategy.COUNTER:
            with _counter_lock:
                return str(next(_counter))
        return "".join(random.choices(_ALPHABET, k=self.length))

    def __repr__(self) -> str:
        return f"ClassNameGenerator(strategy={self.strategy.value!r}, length={self.length})"
