from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

FAIL_REASON = "Validation rule #%d failed."
DEFAULT_REASON = "Validation failed."


class RuleSetupError(ValueError):
    """Argumentos inválidos al armar o evaluar reglas (error del llamador, no del valor)."""


class RuleViolation(RuntimeError):
    """El valor no cumple una regla; el mensaje es el motivo de la primera que falló."""

    def __init__(self, rule: Rule[object]) -> None:
        super().__init__(rule.describe())
        self.rule = rule
        self.reason = rule.describe()


@dataclass(frozen=True)
class Rule(Generic[T]):
    """
    Un predicado de éxito más el motivo a reportar cuando no se cumple.

    `fails` está invertido respecto del predicado: el motor busca la primera
    regla que falla.
    """

    predicate: Callable[[T], bool]
    reason: str | None = None

    def __post_init__(self) -> None:
        if not callable(self.predicate):
            raise RuleSetupError(
                f"Rule predicate must be callable, got {type(self.predicate).__name__}"
            )
        if self.reason is not None and not isinstance(self.reason, str):
            raise RuleSetupError(
                f"Rule reason must be a string or None, got {type(self.reason).__name__}"
            )

    @classmethod
    def of(cls, predicate: Callable[[T], bool], reason: str | int | None) -> Rule[T]:
        # int => índice 1-based para el motivo autogenerado
        if isinstance(reason, int) and not isinstance(reason, bool):
            return cls(predicate, numbered_reason(reason))
        return cls(predicate, reason)

    def fails(self, value: T) -> bool:
        return not self.predicate(value)

    def describe(self) -> str:
        return DEFAULT_REASON if self.reason is None else self.reason

    def __str__(self) -> str:
        return self.describe()


def numbered_reason(index: int) -> str:
    return FAIL_REASON % index


def numbered(predicates: Iterable[Callable[[T], bool] | None]) -> list[Rule[T]]:
    """Reglas con motivo autonumerado; los None conservan su posición pero se omiten."""
    return [Rule.of(p, i) for i, p in enumerate(predicates, start=1) if p is not None]
