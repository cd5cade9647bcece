from pathlib import Path

from ci_filter.scanner import ProjectDirectoryScanner


def test_scan_lists_projects_relative_to_root(repo_root: Path, accounts_projects) -> None:
    assert ProjectDirectoryScanner(repo_root).scan() == accounts_projects


def test_scan_missing_directory(tmp_path: Path) -> None:
    assert ProjectDirectoryScanner(tmp_path).scan() == []


def test_scan_custom_directory(tmp_path: Path) -> None:
    nested = tmp_path / "tools" / "Deep" / "Nested"
    nested.mkdir(parents=True)
    (nested / "Tool.csproj").write_text("<Project />", encoding="utf-8")
    (nested / "Tool.cs").write_text("", encoding="utf-8")

    scanner = ProjectDirectoryScanner(tmp_path, directory="tools")

    assert scanner.scan_root == tmp_path / "tools"
    assert scanner.scan() == ["tools/Deep/Nested/Tool.csproj"]
