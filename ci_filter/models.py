from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class StepName(str, Enum):
    BUILD = "build"
    BREAKING_CHANGE = "breaking-change"
    DEPENDENCY = "dependency"
    HELP = "help"
    SIGNATURE = "signature"
    TEST = "test"


ANALYSIS_STEPS: tuple[StepName, ...] = (
    StepName.BREAKING_CHANGE,
    StepName.DEPENDENCY,
    StepName.HELP,
    StepName.SIGNATURE,
)

STEP_VALUES: tuple[str, ...] = tuple(step.value for step in StepName)


class FilterMode(str, Enum):
    FILES = "files"
    TARGET = "target"
    NONE = "none"


class EventKind(str, Enum):
    FILE_MATCHED = "file_matched"
    FILE_UNMATCHED = "file_unmatched"
    SCOPE_ABSORBED = "scope_absorbed"
    STEP_EXPANDED = "step_expanded"
    TIMING = "timing"


@dataclass(frozen=True)
class StepDirective:
    step: StepName
    scope: str

    def __str__(self) -> str:
        return f"{self.step.value}:{self.scope}"


ModuleScopeSet = Mapping[StepName, frozenset[str]]


def freeze_scopes(scopes: Mapping[StepName, frozenset[str]]) -> ModuleScopeSet:
    return MappingProxyType(dict(scopes))


@dataclass(frozen=True)
class FilterResult:
    mode: FilterMode
    steps: Mapping[StepName, frozenset[str]] = field(default_factory=dict)

    def get(self, step: StepName) -> frozenset[str]:
        return self.steps.get(step, frozenset())

    def is_empty(self) -> bool:
        return not any(self.steps.values())

    def as_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "steps": {
                step.value: sorted(self.steps[step])
                for step in StepName
                if step in self.steps
            },
        }
