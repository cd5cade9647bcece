from ci_filter.rules.models import Rule, RuleTable
from ci_filter.rules.parser import load_rule_table, parse_directive, parse_rule_config

__all__ = [
    "Rule",
    "RuleTable",
    "load_rule_table",
    "parse_directive",
    "parse_rule_config",
]
