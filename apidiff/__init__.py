"""
apidiff - Structural diff engine for OpenAPI-style contracts

Compares a base and a head version of an API document and reports the
paths, operations, parameters and request bodies that were added, removed
or changed.
"""

from .engine import ApiDiffEngine, compare
from .models import (
    EngineConfig,
    DiffReport,
    ErrorResponse,
    LogLevel,
    OutputFormat,
)
from .exceptions import (
    ApiDiffError,
    ValidationError,
    DocumentLoadError,
    DiffError,
    UnresolvedRefError,
    ExternalRefError,
    CircularRefError,
    MaxDepthExceededError,
    MalformedDocumentError,
)
from .common import OptionalStringDiff, ValueDiff, TagsDiff
from .keyed import KeyedDiff, diff_keyed
from .refs import RefResolver, DiffContext
from .parameters import ParameterKey, ParameterDiff, ParametersDiff
from .request_body import MediaTypeDiff, RequestBodyDiff
from .operations import OperationDiff
from .path_items import PathItemDiff, HTTP_METHODS
from .paths import PathsDiff
from .masker import Masker
from .loader import load_document, paths_of

__version__ = "1.0.0"
__all__ = [
    # Engine
    "ApiDiffEngine",
    "EngineConfig",
    "compare",
    # Reports
    "DiffReport",
    "ErrorResponse",
    "LogLevel",
    "OutputFormat",
    # Errors
    "ApiDiffError",
    "ValidationError",
    "DocumentLoadError",
    "DiffError",
    "UnresolvedRefError",
    "ExternalRefError",
    "CircularRefError",
    "MaxDepthExceededError",
    "MalformedDocumentError",
    # Diff model
    "OptionalStringDiff",
    "ValueDiff",
    "TagsDiff",
    "KeyedDiff",
    "diff_keyed",
    "ParameterKey",
    "ParameterDiff",
    "ParametersDiff",
    "MediaTypeDiff",
    "RequestBodyDiff",
    "OperationDiff",
    "PathItemDiff",
    "HTTP_METHODS",
    "PathsDiff",
    # References
    "RefResolver",
    "DiffContext",
    # Collaborators
    "Masker",
    "load_document",
    "paths_of",
]
