"""Custom exceptions for the apidiff engine."""

from __future__ import annotations

from typing import Optional


class ApiDiffError(Exception):
    """Base exception for apidiff errors."""
    pass


class ValidationError(ApiDiffError):
    """Raised when engine input validation fails."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DocumentLoadError(ApiDiffError):
    """Raised when a document cannot be read or parsed."""
    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot load document {path}: {reason}")
        self.path = path
        self.reason = reason


class DiffError(ApiDiffError):
    """
    Raised when a nested structural comparison meets a shape it cannot handle.

    `location` is filled in on the way up with the keys being compared when
    the error occurred, outermost first (e.g. ``/cats > post > limit (query)``).
    """
    def __init__(self, message: str, location: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def locate(self, key: str) -> None:
        """Prepend an enclosing collection key to the error location."""
        if self.location:
            self.location = f"{key} > {self.location}"
        else:
            self.location = key

    def __str__(self) -> str:
        if self.location:
            return f"{self.message} (at {self.location})"
        return self.message


class UnresolvedRefError(DiffError):
    """Raised when a local $ref does not point at anything."""
    def __init__(self, ref: str, reason: str = None):
        message = f"Cannot resolve $ref: {ref}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.ref = ref
        self.reason = reason


class ExternalRefError(DiffError):
    """Raised when an external $ref is encountered."""
    def __init__(self, ref: str):
        super().__init__(f"External $ref not supported: {ref}")
        self.ref = ref


class CircularRefError(DiffError):
    """Raised when a circular reference is detected."""
    def __init__(self, ref: str):
        super().__init__(f"Circular reference detected at: {ref}")
        self.ref = ref


class MaxDepthExceededError(DiffError):
    """Raised when reference inlining goes deeper than allowed."""
    def __init__(self, depth: int, ref: str):
        super().__init__(f"Maximum depth ({depth}) exceeded while resolving: {ref}")
        self.depth = depth
        self.ref = ref


class MalformedDocumentError(DiffError):
    """Raised when a document node has the wrong shape for its position."""
    pass
