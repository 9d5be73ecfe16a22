"""Error taxonomy for the extraction pipeline."""

from __future__ import annotations


class ExtractError(RuntimeError):
    """Base class for failures reported to the caller as a diagnostic."""


class InvalidArgumentError(ExtractError):
    """Raised when the package identifier is missing or empty."""


class NotFoundError(ExtractError):
    """Raised when a package identifier does not resolve to a directory."""


class ConfigError(ExtractError):
    """Raised when the configuration file cannot be parsed."""


class SourceSyntaxError(ExtractError):
    """Raised when a Go source file fails to parse."""

    def __init__(self, filename: str, line: int, column: int, message: str) -> None:
        super().__init__(f"{filename}:{line}:{column}: {message}")
        self.filename = filename
        self.line = line
        self.column = column
        self.message = message


class NoPackageError(ExtractError):
    """Raised when a directory holds no non-test package."""


class AmbiguousPackageError(NoPackageError):
    """Raised in strict mode when a directory holds several non-test packages."""

    def __init__(self, directory: str, names: list[str]) -> None:
        super().__init__(
            f"multiple packages found in {directory}: {', '.join(names)}"
        )
        self.directory = directory
        self.names = names


class RenderError(RuntimeError):
    """Internal invariant violation while rendering a declaration."""


__all__ = [
    "AmbiguousPackageError",
    "ConfigError",
    "ExtractError",
    "InvalidArgumentError",
    "NoPackageError",
    "NotFoundError",
    "RenderError",
    "SourceSyntaxError",
]
