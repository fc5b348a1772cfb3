"""Error taxonomy for catalog loading, rendering and report output."""

from __future__ import annotations

from pathlib import Path


class ProvMatrixError(Exception):
    """Base class for all provmatrix errors."""


class CatalogError(ProvMatrixError):
    """Raised when a provider catalog cannot be loaded or validated."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{self.path}: {message}"
        super().__init__(message)


class DuplicateProviderError(ProvMatrixError, ValueError):
    """Raised when a provider name is registered twice for the same type."""

    def __init__(self, name: str, provider_type: str) -> None:
        self.name = name
        self.provider_type = provider_type
        super().__init__(
            f"Cannot register {provider_type} type '{name}' multiple times"
        )


class ConfigError(ProvMatrixError):
    """Raised when a settings file cannot be read or validated."""

    def __init__(self, message: str, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class RenderError(ProvMatrixError):
    """Raised when the matrix template fails to render."""


class ReportWriteError(ProvMatrixError):
    """Raised when the rendered report cannot be written to disk."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write report to {path}: {reason}")
