from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Resultado de una validación sin excepción.

    Un Outcome presente puede contener None (verdad vacua sobre una
    secuencia de reglas vacía), por eso la presencia es un flag explícito.
    """

    value: T | None = None
    present: bool = False

    @classmethod
    def of(cls, value: T | None) -> Outcome[T]:
        return cls(value=value, present=True)

    @classmethod
    def empty(cls) -> Outcome[T]:
        return cls()

    @property
    def is_present(self) -> bool:
        return self.present

    def get(self) -> T | None:
        if not self.present:
            raise LookupError("No value present")
        return self.value

    def or_else(self, other: T) -> T | None:
        return self.value if self.present else other

    def map(self, fn: Callable[[T | None], U | None]) -> Outcome[U]:
        if not self.present:
            return Outcome.empty()
        mapped = fn(self.value)
        if mapped is None:
            return Outcome.empty()
        return Outcome.of(mapped)

    def if_present(self, fn: Callable[[T | None], object]) -> None:
        if self.present:
            fn(self.value)

