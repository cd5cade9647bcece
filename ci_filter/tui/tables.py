from typing import Optional

from rich.table import Column, Table

from ci_filter.models import FilterResult, StepName
from ci_filter.rules.models import Rule, RuleTable
from ci_filter.tui.enums import STEP_STYLE, UIStyle

EMPTY_CELL = f"[{UIStyle.DIM.value}]-[/{UIStyle.DIM.value}]"


class ResultTable:
    @staticmethod
    def summary_block(result: FilterResult):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", result.mode.value)
        table.add_row("Steps", str(len(result.steps)))
        table.add_row("Units", str(sum(len(items) for items in result.steps.values())))
        return table

    @staticmethod
    def steps_table(result: FilterResult) -> Table:
        table = Table(
            Column(header="Step", width=16),
            Column(header="Count", width=6, justify="right"),
            Column(header="Units", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for step in StepName:
            if step not in result.steps:
                continue
            units = sorted(result.steps[step])
            style = STEP_STYLE.get(step, UIStyle.WHITE.value)
            table.add_row(
                f"[{style}]{step.value}[/{style}]",
                str(len(units)),
                "\n".join(units) if units else EMPTY_CELL,
            )
        return table


class RulesTable:
    @staticmethod
    def rules_table(rules: RuleTable) -> Table:
        table = Table(
            Column(header="#", width=4, justify="right"),
            Column(header="Patterns", overflow="fold"),
            Column(header="Steps", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for index, rule in enumerate(rules):
            table.add_row(
                str(index),
                "\n".join(rule.patterns),
                "\n".join(str(item) for item in rule.steps) or EMPTY_CELL,
            )
        return table

    @staticmethod
    def match_table(matches: list[tuple[str, Optional[int], Optional[Rule]]]) -> Table:
        table = Table(
            Column(header="File", overflow="fold"),
            Column(header="Rule", width=6, justify="right"),
            Column(header="Steps", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for path, index, rule in matches:
            if rule is None or index is None:
                warn = UIStyle.YELLOW.value
                table.add_row(path, EMPTY_CELL, f"[{warn}]no matching rule[/{warn}]")
                continue
            table.add_row(
                path,
                str(index),
                ", ".join(str(item) for item in rule.steps) or EMPTY_CELL,
            )
        return table


class ModulesTable:
    @staticmethod
    def modules_table(module_map: dict[str, list[str]]) -> Table:
        table = Table(
            Column(header="Module", overflow="fold"),
            Column(header="Entries", overflow="fold"),
            expand=True,
            header_style="bold",
        )
        for name in sorted(module_map):
            table.add_row(name, "\n".join(module_map[name]) or EMPTY_CELL)
        return table
