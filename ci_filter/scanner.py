from pathlib import Path

from ci_filter.constants import ACCOUNTS_DIR, PROJECT_FILE_PATTERN


class ProjectDirectoryScanner:
    """Enumerate project files below a fixed directory of the repository."""

    def __init__(
        self,
        repo_root: Path,
        directory: str = ACCOUNTS_DIR,
        pattern: str = PROJECT_FILE_PATTERN,
    ) -> None:
        self.repo_root = repo_root
        self.directory = directory
        self.pattern = pattern

    @property
    def scan_root(self) -> Path:
        return self.repo_root / self.directory

    def scan(self) -> list[str]:
        root = self.scan_root
        if not root.is_dir():
            return []
        return sorted(
            path.relative_to(self.repo_root).as_posix()
            for path in root.rglob(self.pattern)
            if path.is_file()
        )
