import json
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console

from ci_filter.constants import CONFIG_FILENAME, ENV_PREFIX, MODULE_MAP_PARAMETER
from ci_filter.errors import CIFilterError
from ci_filter.events import LoggingEventSink
from ci_filter.maps import read_map_file
from ci_filter.models import FilterResult
from ci_filter.rules.parser import load_rule_table
from ci_filter.service import CIFilterService, FilterSettings
from ci_filter.tui import FilterConsoleUI
from ci_filter.utils import dedupe, read_lines, write_json


FORMAT_VALUES = ["table", "json"]


def _env(name: str) -> str:
    return f"{ENV_PREFIX}_{name}"


def _repo_root_option() -> Callable:
    return click.option(
        "--repo-root",
        type=click.Path(path_type=Path, file_okay=False),
        default=Path("."),
        show_default=True,
        envvar=_env("REPO_ROOT"),
        help="Repository root the changed paths are relative to.",
    )


def _config_option() -> Callable:
    return click.option(
        "--config",
        "config_path",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        envvar=_env("CONFIG"),
        help=f"Step filter rules (default: <repo-root>/{CONFIG_FILENAME}).",
    )


def _module_map_option() -> Callable:
    return click.option(
        "--module-map",
        "module_map_path",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        envvar=_env("MODULE_MAP"),
        help="JSON map of files to modules.",
    )


def _config_path(repo_root: Path, config_path: Optional[Path]) -> Path:
    return config_path if config_path is not None else repo_root / CONFIG_FILENAME


def _collect_files(files_changed: tuple[str, ...], files_from: Optional[str]) -> list[str]:
    files = [item.strip() for item in files_changed if item.strip()]
    if files_from == "-":
        files.extend(line.strip() for line in sys.stdin.read().splitlines() if line.strip())
    elif files_from:
        files.extend(read_lines(Path(files_from)))
    return dedupe(files)


def _log_level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.INFO


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=_log_level(verbose),
        format="[%(levelname).3s] %(message)s",
        stream=sys.stderr,
    )


def _emit_result(result: FilterResult, output_format: str, output: Optional[Path]) -> None:
    if output is not None:
        write_json(output, result.as_dict())
    if output_format == "json":
        click.echo(json.dumps(result.as_dict(), indent=2))
    else:
        FilterConsoleUI(Console()).render_result(result)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Log every matched file and step.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Decide which CI steps and projects a change touches."""
    _configure_logging(verbose)
    ctx.obj = {"verbose": verbose}


@cli.command(help="Classify changed files (or one target module) into CI steps.")
@click.option(
    "-f",
    "--files-changed",
    multiple=True,
    help="Changed file path, relative to the repository root. Repeatable.",
)
@click.option(
    "--files-from",
    type=click.Path(allow_dash=True, dir_okay=False),
    default=None,
    help="Read changed paths from a file, one per line ('-' for stdin).",
)
@click.option("-t", "--target-module", default=None, help="Expand one module for every step.")
@click.option(
    "--csproj-map",
    "csproj_map_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    envvar=_env("CSPROJ_MAP"),
    help="JSON map of modules to project files.",
)
@_module_map_option()
@_config_option()
@_repo_root_option()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMAT_VALUES, case_sensitive=False),
    default="table",
    show_default=True,
)
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Also write the JSON result to this file.",
)
def run(
    files_changed: tuple[str, ...],
    files_from: Optional[str],
    target_module: Optional[str],
    csproj_map_path: Optional[Path],
    module_map_path: Optional[Path],
    config_path: Optional[Path],
    repo_root: Path,
    output_format: str,
    output: Optional[Path],
) -> None:
    settings = FilterSettings(
        repo_root=repo_root,
        csproj_map_path=csproj_map_path,
        module_map_path=module_map_path,
        config_path=config_path,
    )
    try:
        files = _collect_files(files_changed, files_from)
        service = CIFilterService.from_settings(settings, sink=LoggingEventSink())
        result = service.run(files_changed=files, target_module=target_module)
    except (CIFilterError, OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Fatal: {exc}")

    _emit_result(result, output_format.lower(), output)


@cli.command(help="List step filter rules in evaluation order.")
@_config_option()
@_repo_root_option()
def rules(config_path: Optional[Path], repo_root: Path) -> None:
    path = _config_path(repo_root, config_path)
    try:
        table = load_rule_table(path)
    except CIFilterError as exc:
        raise click.ClickException(str(exc))
    FilterConsoleUI(Console()).render_rules(table, str(path))


@cli.command(help="Show which rule each path matches.")
@click.argument("paths", nargs=-1, required=True)
@_config_option()
@_repo_root_option()
def match(paths: tuple[str, ...], config_path: Optional[Path], repo_root: Path) -> None:
    try:
        table = load_rule_table(_config_path(repo_root, config_path))
    except CIFilterError as exc:
        raise click.ClickException(str(exc))

    matches = []
    for path in paths:
        index = table.match_index(path)
        matches.append((path, index, table.rules[index] if index is not None else None))
    FilterConsoleUI(Console()).render_matches(matches)

    if any(index is None for _, index, _ in matches):
        raise click.exceptions.Exit(1)


@cli.command(help="List modules from the module map.")
@_module_map_option()
def modules(module_map_path: Optional[Path]) -> None:
    try:
        module_map = read_map_file(module_map_path, MODULE_MAP_PARAMETER)
    except CIFilterError as exc:
        raise click.ClickException(str(exc))
    FilterConsoleUI(Console()).render_modules(module_map)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
