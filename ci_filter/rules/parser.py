"""Parse the YAML step-filter config into a rule table."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Iterable

import yaml
from jsonschema import Draft202012Validator

from ci_filter.constants import DIRECTIVE_SEPARATOR, GLOB_WILDCARD, GLOB_WILDCARD_REGEX
from ci_filter.errors import (
    InvalidConfigSchemaError,
    InvalidStepDirectiveError,
    InvalidYamlFormatError,
    MissingConfigFileError,
    UnreadableConfigFileError,
)
from ci_filter.models import StepDirective, StepName
from ci_filter.rules.models import Rule, RuleTable
from ci_filter.rules.schema import RULE_CONFIG_SCHEMA

_VALIDATOR = Draft202012Validator(RULE_CONFIG_SCHEMA)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def translate_pattern(pattern: str) -> str:
    return pattern.replace(GLOB_WILDCARD, GLOB_WILDCARD_REGEX)


def compile_patterns(patterns: Iterable[str]) -> re.Pattern[str]:
    return re.compile("|".join(translate_pattern(item) for item in patterns))


def parse_directive(text: str) -> StepDirective:
    step, sep, scope = text.partition(DIRECTIVE_SEPARATOR)
    if not sep:
        raise InvalidStepDirectiveError(text, f"missing '{DIRECTIVE_SEPARATOR}'")
    step = step.strip()
    scope = scope.strip()
    if not step or not scope:
        raise InvalidStepDirectiveError(text, "empty step or scope")
    try:
        step_name = StepName(step)
    except ValueError:
        known = ", ".join(item.value for item in StepName)
        raise InvalidStepDirectiveError(text, f"unknown step, expected one of {known}")
    return StepDirective(step=step_name, scope=scope)


def build_rule(patterns: list[str], steps: list[str]) -> Rule:
    return Rule(
        patterns=tuple(patterns),
        steps=tuple(parse_directive(item) for item in steps),
        matcher=compile_patterns(patterns),
    )


def parse_rule_config(payload: Any, source: Path) -> RuleTable:
    errors = sorted(_VALIDATOR.iter_errors(payload), key=lambda item: list(item.path))
    if errors:
        raise InvalidConfigSchemaError(source, format_schema_error(errors[0]))

    rules: list[Rule] = []
    for index, raw in enumerate(payload["rules"]):
        try:
            rules.append(build_rule(raw["patterns"], raw["steps"]))
        except re.error as exc:
            raise InvalidConfigSchemaError(source, f"bad pattern in rules.{index}: {exc}")
    return RuleTable(rules=tuple(rules))


def load_rule_table(path: Path) -> RuleTable:
    if not path.exists() or not path.is_file():
        raise MissingConfigFileError(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidYamlFormatError(path, f"not valid UTF-8: {exc.reason}")
    except OSError as exc:
        raise UnreadableConfigFileError(path, exc.strerror or str(exc))
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InvalidYamlFormatError(path, " ".join(str(exc).split()))
    if payload is None:
        payload = {}
    return parse_rule_config(payload, path)
