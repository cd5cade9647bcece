from typing import Optional

from rich.console import Console

from ci_filter.models import FilterResult
from ci_filter.rules.models import Rule, RuleTable
from ci_filter.tui.enums import UIStyle
from ci_filter.tui.sections import UISection
from ci_filter.tui.tables import ModulesTable, ResultTable, RulesTable


class FilterConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_result(self, result: FilterResult) -> None:
        self.console.print(
            UISection.wrap(
                "ci filter",
                ResultTable.summary_block(result),
                style=UIStyle.BLUE.value,
            )
        )
        if not result.steps:
            self.console.print(
                UISection.empty("steps", "No CI steps required.")
            )
            return
        self.console.print(
            UISection.wrap(
                "steps", ResultTable.steps_table(result), style=UIStyle.CYAN.value
            )
        )

    def render_rules(self, rules: RuleTable, source: str) -> None:
        if not len(rules):
            self.console.print(
                UISection.empty("rules", f"No rules in {source}.")
            )
            return
        self.console.print(
            UISection.wrap(
                "rules",
                RulesTable.rules_table(rules),
                style=UIStyle.BLUE.value,
                subtitle=source,
            )
        )

    def render_matches(
        self, matches: list[tuple[str, Optional[int], Optional[Rule]]]
    ) -> None:
        self.console.print(
            UISection.wrap(
                "rule matches", RulesTable.match_table(matches), style=UIStyle.CYAN.value
            )
        )

    def render_modules(self, module_map: dict[str, list[str]]) -> None:
        if not module_map:
            self.console.print(
                UISection.empty("modules", "No modules.")
            )
            return
        self.console.print(
            UISection.wrap(
                "modules",
                ModulesTable.modules_table(module_map),
                style=UIStyle.MAGENTA.value,
            )
        )
