from typing import Final


CONFIG_FILENAME: Final[str] = ".ci-config.yml"
ENV_PREFIX: Final[str] = "CI_FILTER"

ALL_SCOPE: Final[str] = "all"
MODULE_SCOPE: Final[str] = "module"
DIRECTIVE_SEPARATOR: Final[str] = ":"

GLOB_WILDCARD: Final[str] = "**"
GLOB_WILDCARD_REGEX: Final[str] = ".*"

SRC_MARKER: Final[str] = "src/"
TEST_MARKER: Final[str] = "Test"

PROJECT_FILE_PATTERN: Final[str] = "*.csproj"
ACCOUNTS_DIR: Final[str] = "src/Accounts"
TEST_FX_PROJECT: Final[str] = "tools/TestFx/TestFx.csproj"

CSPROJ_MAP_PARAMETER: Final[str] = "CsprojMapFilePath"
MODULE_MAP_PARAMETER: Final[str] = "ModuleMapFilePath"
