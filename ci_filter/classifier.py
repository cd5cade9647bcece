"""Classify changed files into per-step module scopes."""

from __future__ import annotations

from functools import reduce
from typing import Iterable, Optional

from ci_filter.constants import ALL_SCOPE, MODULE_SCOPE
from ci_filter.events import IEventSink, NullEventSink
from ci_filter.models import EventKind, ModuleScopeSet, StepDirective, freeze_scopes
from ci_filter.paths import module_from_changed_path
from ci_filter.rules.models import RuleTable

ALL_ONLY: frozenset[str] = frozenset({ALL_SCOPE})


def apply_directive(
    scopes: ModuleScopeSet, directive: StepDirective, file_path: str
) -> ModuleScopeSet:
    # Derived before the absorption check so a bad path fails in any file order.
    module = (
        module_from_changed_path(file_path)
        if directive.scope == MODULE_SCOPE
        else directive.scope
    )
    current = scopes.get(directive.step, frozenset())
    if current == ALL_ONLY:
        return scopes

    if directive.scope == ALL_SCOPE:
        updated = ALL_ONLY
    else:
        updated = current | {module}

    if updated == current and directive.step in scopes:
        return scopes
    return freeze_scopes({**scopes, directive.step: updated})


def classify_file(
    scopes: ModuleScopeSet,
    file_path: str,
    table: RuleTable,
    sink: Optional[IEventSink] = None,
) -> ModuleScopeSet:
    sink = sink or NullEventSink()
    index = table.match_index(file_path)
    if index is None:
        sink.record(EventKind.FILE_UNMATCHED, {"file": file_path})
        return scopes

    rule = table.rules[index]
    sink.record(
        EventKind.FILE_MATCHED,
        {"file": file_path, "rule": index, "steps": [str(item) for item in rule.steps]},
    )
    for directive in rule.steps:
        before = scopes.get(directive.step)
        scopes = apply_directive(scopes, directive, file_path)
        if before != ALL_ONLY and scopes.get(directive.step) == ALL_ONLY:
            sink.record(
                EventKind.SCOPE_ABSORBED,
                {"step": directive.step.value, "file": file_path},
            )
    return scopes


def classify_files(
    files: Iterable[str],
    table: RuleTable,
    sink: Optional[IEventSink] = None,
) -> ModuleScopeSet:
    sink = sink or NullEventSink()
    return reduce(
        lambda scopes, path: classify_file(scopes, path, table, sink),
        files,
        freeze_scopes({}),
    )
