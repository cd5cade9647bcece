"""Entry point tying rule matching and scope expansion together."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence

from ci_filter.classifier import classify_files
from ci_filter.constants import (
    CONFIG_FILENAME,
    CSPROJ_MAP_PARAMETER,
    MODULE_MAP_PARAMETER,
)
from ci_filter.events import IEventSink, NullEventSink
from ci_filter.expander import ScopeExpander
from ci_filter.maps import CsprojMap, read_map_file
from ci_filter.models import EventKind, FilterMode, FilterResult
from ci_filter.rules.models import RuleTable
from ci_filter.rules.parser import load_rule_table
from ci_filter.scanner import ProjectDirectoryScanner


@dataclass(frozen=True)
class FilterSettings:
    repo_root: Path
    csproj_map_path: Optional[Path]
    module_map_path: Optional[Path]
    config_path: Optional[Path] = None

    @property
    def resolved_config_path(self) -> Path:
        if self.config_path is not None:
            return self.config_path
        return self.repo_root / CONFIG_FILENAME


class CIFilterService:
    def __init__(
        self,
        csproj_map: CsprojMap,
        rule_loader: Callable[[], RuleTable],
        scanner: ProjectDirectoryScanner,
        sink: Optional[IEventSink] = None,
        module_map: Optional[dict[str, list[str]]] = None,
    ) -> None:
        self.csproj_map = csproj_map
        self.rule_loader = rule_loader
        self.scanner = scanner
        self.sink = sink or NullEventSink()
        self.module_map = module_map or {}

    @classmethod
    def from_settings(
        cls, settings: FilterSettings, sink: Optional[IEventSink] = None
    ) -> "CIFilterService":
        csproj_map = CsprojMap.load(settings.csproj_map_path, CSPROJ_MAP_PARAMETER)
        module_map = read_map_file(settings.module_map_path, MODULE_MAP_PARAMETER)
        config_path = settings.resolved_config_path
        return cls(
            csproj_map=csproj_map,
            rule_loader=lambda: load_rule_table(config_path),
            scanner=ProjectDirectoryScanner(settings.repo_root),
            sink=sink,
            module_map=module_map,
        )

    def _expander(self, extra_build_projects: Sequence[str]) -> ScopeExpander:
        return ScopeExpander(
            self.csproj_map,
            extra_build_projects=extra_build_projects,
            sink=self.sink,
        )

    def run(
        self,
        files_changed: Optional[Sequence[str]] = None,
        target_module: Optional[str] = None,
    ) -> FilterResult:
        if files_changed:
            return self.process_files_changed(files_changed)
        if target_module is not None and target_module.strip():
            return self.process_target_module(target_module.strip())
        return FilterResult(mode=FilterMode.NONE, steps={})

    def process_files_changed(self, files_changed: Sequence[str]) -> FilterResult:
        table = self.rule_loader()

        started = time.perf_counter()
        scopes = classify_files(files_changed, table, self.sink)
        matched = time.perf_counter()
        steps = self._expander(self.scanner.scan()).expand(scopes)
        finished = time.perf_counter()

        self.sink.record(
            EventKind.TIMING,
            {
                "files": len(files_changed),
                "match_seconds": round(matched - started, 6),
                "expand_seconds": round(finished - matched, 6),
            },
        )
        return FilterResult(mode=FilterMode.FILES, steps=steps)

    def process_target_module(self, module: str) -> FilterResult:
        steps = self._expander(self.scanner.scan()).expand_module(module)
        return FilterResult(mode=FilterMode.TARGET, steps=steps)
