"""Main comparison engine for apidiff."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Optional

from .models import (
    EngineConfig,
    DiffReport,
    ExecutionInfo,
    Summary,
    ErrorResponse,
)
from .exceptions import (
    ValidationError,
    DiffError,
    MaxDepthExceededError,
)
from .loader import paths_of
from .masker import Masker
from .paths import PathsDiff
from .refs import DiffContext

logger = logging.getLogger(__name__)


class ApiDiffEngine:
    """
    Comparison engine that orchestrates the pipeline:

    1. Validation: both documents must be mappings
    2. Masking: drop regions matched by the configured ignore paths
    3. Diffing: keyed comparison of the path tables
    4. Reporting: wrap the paths diff with execution info and counts
    """

    VERSION = "1.0.0"

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize the engine.

        Args:
            config: Engine configuration (uses defaults if not provided)
        """
        self.config = config or EngineConfig()

    def compare(self, base_doc: Any, head_doc: Any) -> DiffReport | ErrorResponse:
        """
        Compare two API documents.

        Args:
            base_doc: The parsed base document
            head_doc: The parsed head document

        Returns:
            DiffReport on success, ErrorResponse on validation/diff errors
        """
        start_time = time.time()

        try:
            self._validate_inputs(base_doc, head_doc)

            masker = Masker(self.config.ignore_paths)
            base_masked, head_masked, ignored_count = masker.mask(base_doc, head_doc)

            context = DiffContext.from_documents(base_masked, head_masked, self.config)
            paths = PathsDiff.from_paths(
                paths_of(base_masked), paths_of(head_masked), context
            )

            duration_ms = int((time.time() - start_time) * 1000)
            report = DiffReport(
                has_changes=paths.has_changes(),
                execution=ExecutionInfo(
                    duration_ms=duration_ms,
                    timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
                    engine_version=self.VERSION
                ),
                summary=Summary(
                    paths_added=len(paths.added),
                    paths_removed=len(paths.removed),
                    paths_changed=len(paths.changed),
                    operations_changed=sum(
                        len(item.operations.changed) for item in paths.changed.values()
                    ),
                    regions_ignored=ignored_count
                ),
                paths=paths,
                include_items=self.config.include_items
            )
            logger.info(
                "Compared documents in %dms: %d path(s) added, %d removed, %d changed",
                duration_ms,
                report.summary.paths_added,
                report.summary.paths_removed,
                report.summary.paths_changed,
            )
            return report

        except ValidationError as e:
            return self._create_error_response("VALIDATION_ERROR", e.message, e.details)
        except MaxDepthExceededError as e:
            return self._create_error_response(
                "MAX_DEPTH_ERROR",
                str(e),
                {"depth": e.depth, "ref": e.ref, "location": e.location}
            )
        except DiffError as e:
            return self._create_error_response(
                "DIFF_ERROR",
                str(e),
                {"type": type(e).__name__, "location": e.location}
            )

    def _validate_inputs(self, base_doc: Any, head_doc: Any):
        """Validate input documents."""
        if base_doc is None:
            raise ValidationError("base document is required")
        if head_doc is None:
            raise ValidationError("head document is required")

        for name, doc in (("base", base_doc), ("head", head_doc)):
            if not isinstance(doc, dict):
                raise ValidationError(
                    f"{name} document must be an object",
                    {"type": type(doc).__name__}
                )

    def _create_error_response(
        self,
        code: str,
        message: str,
        details: dict
    ) -> ErrorResponse:
        """Create an error response."""
        logger.error("Diff failed [%s]: %s", code, message)
        return ErrorResponse(
            success=False,
            error={
                "code": code,
                "message": message,
                "details": details
            }
        )


def compare(
    base_doc: Any,
    head_doc: Any,
    config: Optional[EngineConfig] = None
) -> DiffReport | ErrorResponse:
    """
    Convenience function to compare two API documents.

    Args:
        base_doc: The parsed base document
        head_doc: The parsed head document
        config: Optional engine configuration

    Returns:
        DiffReport on success, ErrorResponse on errors
    """
    engine = ApiDiffEngine(config)
    return engine.compare(base_doc, head_doc)
