from pathlib import Path


class CIFilterError(Exception):
    """Base user-facing application error."""


class CIFilterFileError(CIFilterError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class ConfigurationError(CIFilterError):
    """Rule configuration could not be turned into a rule table."""


class MissingConfigFileError(CIFilterFileError, ConfigurationError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="CI step config is not found")


class UnreadableConfigFileError(CIFilterFileError, ConfigurationError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"CI step config is not readable ({detail})")


class InvalidYamlFormatError(CIFilterFileError, ConfigurationError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid YAML format ({detail})")


class InvalidConfigSchemaError(CIFilterFileError, ConfigurationError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class InvalidStepDirectiveError(ConfigurationError):
    def __init__(self, directive: str, detail: str) -> None:
        self.directive = directive
        self.detail = detail
        super().__init__(f"Invalid step directive {directive!r} ({detail})")


class MapFileError(CIFilterError):
    """A module or csproj map could not be loaded."""


class MissingArgumentError(MapFileError):
    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"The {parameter} cannot be null.")


class MapFileNotFoundError(MapFileError):
    def __init__(self, parameter: str, path: Path) -> None:
        self.parameter = parameter
        self.path = path
        super().__init__(
            f"The {parameter} provided could not be found. "
            f"Please provide a valid map file path: {path}"
        )


class UnreadableMapFileError(CIFilterFileError, MapFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Map file is not readable ({detail})")


class InvalidJsonFormatError(CIFilterFileError, MapFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidMapSchemaError(CIFilterFileError, MapFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid map schema ({detail})")


class ModulePathError(CIFilterError):
    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot derive module name from {path!r} ({reason})")
