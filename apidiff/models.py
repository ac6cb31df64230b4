"""Configuration and report envelope models for the apidiff engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .paths import PathsDiff


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARNING"
    ERROR = "ERROR"


class OutputFormat(Enum):
    JSON = "json"
    YAML = "yaml"


@dataclass
class EngineConfig:
    """Global configuration for the diff engine."""
    max_depth: int = 100
    ignore_paths: list[str] = field(default_factory=list)
    legacy_operation_rollup: bool = False
    include_items: bool = True
    log_level: LogLevel = LogLevel.INFO


@dataclass
class ExecutionInfo:
    """Execution metadata."""
    duration_ms: int
    timestamp: str
    engine_version: str = "1.0.0"

    def to_dict(self) -> dict:
        return {
            "duration_ms": self.duration_ms,
            "timestamp": self.timestamp,
            "engine_version": self.engine_version,
        }


@dataclass
class Summary:
    """Counts over the top-level paths diff."""
    paths_added: int = 0
    paths_removed: int = 0
    paths_changed: int = 0
    operations_changed: int = 0
    regions_ignored: int = 0

    def to_dict(self) -> dict:
        return {
            "paths_added": self.paths_added,
            "paths_removed": self.paths_removed,
            "paths_changed": self.paths_changed,
            "operations_changed": self.operations_changed,
            "regions_ignored": self.regions_ignored,
        }


@dataclass
class DiffReport:
    """Complete comparison report."""
    has_changes: bool
    execution: ExecutionInfo
    summary: Summary
    paths: PathsDiff
    include_items: bool = True

    def to_dict(self) -> dict:
        return {
            "has_changes": self.has_changes,
            "execution": self.execution.to_dict(),
            "summary": self.summary.to_dict(),
            "paths": self.paths.to_dict(include_items=self.include_items),
        }


@dataclass
class ErrorResponse:
    """Error response structure."""
    success: bool = False
    error: Optional[dict] = None

    def to_dict(self) -> dict:
        result = {"success": self.success}
        if self.error:
            result["error"] = self.error
        return result
