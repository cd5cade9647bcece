"""Rule data models."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from ci_filter.models import StepDirective


@dataclass(frozen=True)
class Rule:
    patterns: tuple[str, ...]
    steps: tuple[StepDirective, ...]
    matcher: re.Pattern[str]

    def matches(self, path: str) -> bool:
        return self.matcher.search(path) is not None


@dataclass(frozen=True)
class RuleTable:
    """Rules in configured order; the first matching rule wins."""

    rules: tuple[Rule, ...]

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def match_index(self, path: str) -> Optional[int]:
        for index, rule in enumerate(self.rules):
            if rule.matches(path):
                return index
        return None
