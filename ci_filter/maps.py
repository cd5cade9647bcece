"""Load module and csproj map files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional

from jsonschema import Draft202012Validator

from ci_filter.errors import (
    InvalidJsonFormatError,
    InvalidMapSchemaError,
    MapFileNotFoundError,
    MissingArgumentError,
    UnreadableMapFileError,
)
from ci_filter.rules.parser import format_schema_error
from ci_filter.utils import dedupe, read_json

MAP_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": {"type": "array", "items": {"type": "string"}},
}

_VALIDATOR = Draft202012Validator(MAP_SCHEMA)


def read_map_file(map_file_path: Optional[Path], parameter: str) -> dict[str, list[str]]:
    if map_file_path is None:
        raise MissingArgumentError(parameter)
    if not map_file_path.is_file():
        raise MapFileNotFoundError(parameter, map_file_path)

    try:
        payload = read_json(map_file_path)
    except json.JSONDecodeError as exc:
        raise InvalidJsonFormatError(map_file_path, exc.msg)
    except UnicodeDecodeError as exc:
        raise InvalidJsonFormatError(map_file_path, f"not valid UTF-8: {exc.reason}")
    except OSError as exc:
        raise UnreadableMapFileError(map_file_path, exc.strerror or str(exc))

    errors = sorted(_VALIDATOR.iter_errors(payload), key=lambda item: list(item.path))
    if errors:
        raise InvalidMapSchemaError(map_file_path, format_schema_error(errors[0]))
    return {str(key): [str(item) for item in value] for key, value in payload.items()}


class CsprojMap(Mapping[str, tuple[str, ...]]):
    """Module name (or ``src/<module>/`` key) to project files."""

    def __init__(self, entries: Mapping[str, Any]) -> None:
        self._entries: dict[str, tuple[str, ...]] = {
            key: tuple(value) for key, value in entries.items()
        }

    @classmethod
    def load(cls, path: Optional[Path], parameter: str) -> "CsprojMap":
        return cls(read_map_file(path, parameter))

    def __getitem__(self, key: str) -> tuple[str, ...]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def related_projects(self, module: str) -> list[str]:
        if module in self._entries:
            return list(self._entries[module])

        expected = f"src/{module}/".lower()
        projects: list[str] = []
        for key, value in self._entries.items():
            if key.lower() == expected:
                projects.extend(value)
        return projects

    def all_projects(self) -> list[str]:
        return dedupe([item for value in self._entries.values() for item in value])
