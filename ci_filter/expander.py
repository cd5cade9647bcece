"""Per-step expansion of module scopes into build units."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence

from ci_filter.constants import ALL_SCOPE, TEST_FX_PROJECT, TEST_MARKER
from ci_filter.events import IEventSink, NullEventSink
from ci_filter.maps import CsprojMap
from ci_filter.models import ANALYSIS_STEPS, EventKind, ModuleScopeSet, StepName
from ci_filter.paths import module_from_project_path


class IExpansionStrategy(ABC):
    @abstractmethod
    def expand_module(self, module: str, csproj_map: CsprojMap) -> list[str]:
        """Return the units one module contributes to the step."""

    def fixed_units(self) -> list[str]:
        return []

    def expand(self, scope: Iterable[str], csproj_map: CsprojMap) -> frozenset[str]:
        units: set[str] = set()
        for module in scope:
            units.update(self.expand_module(module, csproj_map))
        units.update(self.fixed_units())
        return frozenset(units)


def related_projects(module: str, csproj_map: CsprojMap) -> list[str]:
    if module == ALL_SCOPE:
        return csproj_map.all_projects()
    return csproj_map.related_projects(module)


class BuildStrategy(IExpansionStrategy):
    """Non-test projects, plus the always-built extra projects."""

    def __init__(self, extra_projects: Sequence[str] = ()) -> None:
        self.extra_projects = list(extra_projects)

    def expand_module(self, module: str, csproj_map: CsprojMap) -> list[str]:
        return [
            item
            for item in related_projects(module, csproj_map)
            if TEST_MARKER not in item
        ]

    def fixed_units(self) -> list[str]:
        return list(self.extra_projects)


class AnalysisStrategy(IExpansionStrategy):
    """Canonical module names owning the related projects."""

    def expand_module(self, module: str, csproj_map: CsprojMap) -> list[str]:
        modules: list[str] = []
        for item in related_projects(module, csproj_map):
            name = module_from_project_path(item)
            if name not in modules:
                modules.append(name)
        return modules


class TestStrategy(IExpansionStrategy):
    """Test projects, plus the shared test framework project."""

    __test__ = False

    def __init__(self, test_framework_project: str = TEST_FX_PROJECT) -> None:
        self.test_framework_project = test_framework_project

    def expand_module(self, module: str, csproj_map: CsprojMap) -> list[str]:
        return [
            item for item in related_projects(module, csproj_map) if TEST_MARKER in item
        ]

    def fixed_units(self) -> list[str]:
        return [self.test_framework_project]


class ScopeExpander:
    def __init__(
        self,
        csproj_map: CsprojMap,
        extra_build_projects: Sequence[str] = (),
        sink: Optional[IEventSink] = None,
    ) -> None:
        self.csproj_map = csproj_map
        self.sink = sink or NullEventSink()
        analysis = AnalysisStrategy()
        self.strategies: dict[StepName, IExpansionStrategy] = {
            StepName.BUILD: BuildStrategy(extra_build_projects),
            StepName.TEST: TestStrategy(),
        }
        for step in ANALYSIS_STEPS:
            self.strategies[step] = analysis

    def expand_step(self, step: StepName, scope: Iterable[str]) -> frozenset[str]:
        scope = list(scope)
        units = self.strategies[step].expand(scope, self.csproj_map)
        self.sink.record(
            EventKind.STEP_EXPANDED,
            {"step": step.value, "scope": scope, "units": units},
        )
        return units

    def expand(self, scopes: ModuleScopeSet) -> dict[StepName, frozenset[str]]:
        return {
            step: self.expand_step(step, scopes[step])
            for step in StepName
            if step in scopes
        }

    def expand_module(self, module: str) -> dict[StepName, frozenset[str]]:
        return {step: self.expand_step(step, [module]) for step in StepName}
