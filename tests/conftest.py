import sys
import json
from pathlib import Path
from typing import Any, Callable

from click.testing import CliRunner
import pytest
import yaml


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


STORAGE_CSPROJ_MAP: dict[str, list[str]] = {
    "Storage": [
        "src/Storage/Storage.csproj",
        "src/Storage.Test/Storage.Test.csproj",
    ],
    "src/Compute/": [
        "src/Compute/Compute/Compute.csproj",
        "src/Compute/Compute.Test/Compute.Test.csproj",
    ],
    "Network": [
        "src/Network/Network/Network.csproj",
        "src/Network/Network.Test/Network.Test.csproj",
        "src/Compute/Compute/Compute.csproj",
    ],
}


@pytest.fixture
def write_json() -> Callable[[Path, Any], Path]:
    def _write(path: Path, payload: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_rules() -> Callable[[Path, list[dict]], Path]:
    def _write(path: Path, rules: list[dict]) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump({"rules": rules}, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    root = tmp_path / "repo"
    accounts = root / "src" / "Accounts"
    (accounts / "Accounts").mkdir(parents=True)
    (accounts / "Authentication").mkdir(parents=True)
    (accounts / "Accounts" / "Accounts.csproj").write_text("<Project />", encoding="utf-8")
    (accounts / "Authentication" / "Authentication.csproj").write_text(
        "<Project />", encoding="utf-8"
    )
    (accounts / "Accounts" / "README.md").write_text("docs", encoding="utf-8")
    return root


@pytest.fixture
def accounts_projects() -> list[str]:
    return [
        "src/Accounts/Accounts/Accounts.csproj",
        "src/Accounts/Authentication/Authentication.csproj",
    ]


@pytest.fixture
def map_files(repo_root: Path, write_json) -> tuple[Path, Path]:
    csproj_map = write_json(repo_root / "CsprojMappings.json", STORAGE_CSPROJ_MAP)
    module_map = write_json(
        repo_root / "ModuleMappings.json",
        {
            "src/Storage/": ["Storage"],
            "src/Compute/": ["Compute"],
        },
    )
    return csproj_map, module_map


@pytest.fixture
def storage_rules(repo_root: Path, write_rules) -> Path:
    return write_rules(
        repo_root / ".ci-config.yml",
        [
            {"patterns": ["docs/**"], "steps": ["build:all"]},
            {
                "patterns": ["src/Storage/**"],
                "steps": ["build:module", "test:module"],
            },
            {
                "patterns": ["src/**/*.cs", "src/**/*.csproj"],
                "steps": [
                    "build:module",
                    "breaking-change:module",
                    "dependency:module",
                    "help:module",
                    "signature:module",
                    "test:module",
                ],
            },
            {"patterns": ["tools/**"], "steps": ["test:Network"]},
        ],
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
