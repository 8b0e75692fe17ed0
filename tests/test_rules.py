from __future__ import annotations

import pytest

from rulecheck.models import Outcome
from rulecheck.rules import DEFAULT_REASON, Rule, RuleSetupError, numbered


def test_rule_requires_predicate() -> None:
    with pytest.raises(RuleSetupError):
        Rule(None)  # type: ignore[arg-type]
    with pytest.raises(RuleSetupError):
        Rule.of(None, 1)  # type: ignore[arg-type]


def test_rule_rejects_non_callable_predicate() -> None:
    with pytest.raises(RuleSetupError, match="got str"):
        Rule("not a function")  # type: ignore[arg-type]


def test_rule_rejects_non_string_reason() -> None:
    with pytest.raises(RuleSetupError, match="got bool"):
        Rule.of(lambda v: True, True)
    with pytest.raises(RuleSetupError, match="got float"):
        Rule(lambda v: True, 1.5)  # type: ignore[arg-type]


def test_rule_fails_is_negated_predicate() -> None:
    rule = Rule.of(lambda v: v > 0, "must be positive")
    assert rule.fails(-1)
    assert not rule.fails(1)


def test_rule_reason_from_index() -> None:
    assert Rule.of(lambda v: True, 3).describe() == "Validation rule #3 failed."
    assert str(Rule.of(lambda v: True, "custom")) == "custom"


def test_rule_without_reason_describes_default() -> None:
    assert Rule(lambda v: True).describe() == DEFAULT_REASON


def test_numbered_keeps_positions_of_skipped_predicates() -> None:
    rules = numbered([lambda v: True, None, lambda v: False])
    assert [r.describe() for r in rules] == [
        "Validation rule #1 failed.",
        "Validation rule #3 failed.",
    ]


def test_outcome_present_and_empty() -> None:
    present = Outcome.of("x")
    assert present.get() == "x"
    assert present.map(str.upper).get() == "X"

    empty: Outcome[str] = Outcome.empty()
    assert empty.or_else("fallback") == "fallback"
    with pytest.raises(LookupError):
        empty.get()


def test_outcome_map_to_none_is_empty() -> None:
    assert not Outcome.of(1).map(lambda v: None).is_present


def test_outcome_if_present() -> None:
    seen: list[object] = []
    Outcome.of(None).if_present(seen.append)
    Outcome.empty().if_present(seen.append)
    assert seen == [None]
