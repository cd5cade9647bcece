"""Tests for first-match rule lookup."""

from ci_filter.models import StepName
from ci_filter.rules.models import RuleTable
from ci_filter.rules.parser import build_rule


def _table() -> RuleTable:
    return RuleTable(
        rules=(
            build_rule(["src/Accounts/**"], ["build:all", "test:all"]),
            build_rule(["src/**", "tools/**"], ["build:module"]),
            build_rule(["**"], ["help:Docs"]),
        )
    )


def test_first_matching_rule_wins() -> None:
    table = _table()
    index = table.match_index("src/Accounts/Accounts/Profile.cs")

    assert index == 0
    rule = table.rules[index]

    assert [item.step for item in rule.steps] == [StepName.BUILD, StepName.TEST]
    assert rule.steps[0].scope == "all"


def test_any_pattern_of_rule_matches() -> None:
    table = _table()
    assert table.match_index("tools/TestFx/Mock.cs") == 1
    assert table.match_index("src/Storage/Foo.cs") == 1


def test_catch_all_rule_is_last_resort() -> None:
    assert _table().match_index("README.md") == 2


def test_no_match_returns_none() -> None:
    table = RuleTable(rules=(build_rule(["src/**"], ["build:module"]),))
    assert table.match_index("docs/readme.md") is None


def test_empty_table_matches_nothing() -> None:
    table = RuleTable(rules=())
    assert len(table) == 0
    assert table.match_index("src/Storage/Foo.cs") is None
