from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TypeVar

from rulecheck.models import Outcome
from rulecheck.rules import Rule, RuleSetupError, RuleViolation, numbered

T = TypeVar("T")
C = TypeVar("C")

Predicate = Callable[[T], bool]


# controles ASCII y espacio (<= U+0020); los espacios Unicode no se recortan
TRIM_CHARS = "".join(map(chr, range(33)))


def not_null() -> Predicate[object]:
    return lambda v: v is not None


def _require(arg: object, name: str) -> None:
    if arg is None:
        raise RuleSetupError(f"{name} must not be None")


def conjunction(predicates: Iterable[Predicate[T] | None]) -> Predicate[T]:
    """
    Combina los predicados no nulos con AND en cortocircuito.

    Sin predicados el resultado es verdadero (verdad vacua).
    """
    active = [p for p in predicates if p is not None]
    return lambda v: all(p(v) for p in active)


def check(
    value: T | None,
    *predicates: Predicate[T] | None,
    throw_exception: bool = False,
) -> Outcome[T]:
    """
    Valida `value` contra todos los predicados.

    - throw_exception=False: camino rápido; un valor None siempre queda vacío y
      no se construye ningún motivo.
    - throw_exception=True: reglas autonumeradas ("Validation rule #N failed.")
      y RuleViolation en la primera que falle.
    """
    if throw_exception:
        return check_rules(value, numbered(predicates))
    if value is None:
        return Outcome.empty()
    return Outcome.of(value) if conjunction(predicates)(value) else Outcome.empty()


def check_reasons(
    value: T | None,
    predicates: Sequence[Predicate[T]],
    reasons: Sequence[str],
) -> Outcome[T]:
    _require(predicates, "predicates")
    _require(reasons, "reasons")
    if len(predicates) != len(reasons):
        raise RuleSetupError("Predicate and reason counts do not match.")
    return check_rules(value, [Rule.of(p, r) for p, r in zip(predicates, reasons)])


def check_mapping(value: T | None, rule_map: Mapping[Predicate[T], str]) -> Outcome[T]:
    """
    Valida contra las claves de `rule_map`; el orden de evaluación es el de
    iteración del mapping (dict conserva el orden de inserción).
    """
    _require(rule_map, "rule_map")
    return check_rules(value, [Rule.of(p, r) for p, r in rule_map.items()])


def check_rules(value: T | None, rules: Iterable[Rule[T]]) -> Outcome[T]:
    _require(rules, "rules")
    for rule in rules:
        if rule.fails(value):
            raise RuleViolation(rule)
    return Outcome.of(value)


def filter_values(
    values: Iterable[T],
    factory: Callable[[Iterable[T]], C],
    *predicates: Predicate[T] | None,
) -> C:
    """Subconjunto de `values` que cumple todos los predicados, en el mismo orden."""
    _require(values, "values")
    _require(factory, "factory")
    test = conjunction(predicates)
    return factory(v for v in values if test(v))


def trim_string_or(value: str | None, other: str) -> str:
    """
    `value` recortado si no es None ni queda vacío; si no, `other` sin cambios.

    Solo recorta caracteres <= U+0020; un NBSP (U+00A0) o U+2003 se conserva.
    """
    return (
        check(value, not_null(), lambda s: s.strip(TRIM_CHARS) != "")
        .map(lambda s: s.strip(TRIM_CHARS))
        .or_else(other)
    )
