"""Unified pipeline exception taxonomy.

Every domain exception inherits from ``PipelineError`` and carries
structured context fields (stage, code) so the CLI can report failures
consistently before terminating the run.

Taxonomy categories
-------------------
- ``ValidationError``   — input/configuration violations, never retryable.
- ``PermanentError``    — unrecoverable data defects, not retryable.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base exception for all pipeline-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Pipeline stage where the error occurred
            (e.g. ``"read_dataset"``, ``"repair_encoding"``).
        code: Machine-readable error code (e.g. ``"ENCODING_REPAIR_FAILED"``).
        retryable: Whether the operation could succeed if repeated.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, PermanentError):
            return "permanent"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(PipelineError):
    """Input or configuration validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(PipelineError):
    """Unrecoverable data defect. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Concrete pipeline errors
# ---------------------------------------------------------------------------


class DataAccessError(PermanentError):
    """Raised when the dataset cannot be opened or has no feature layer."""

    default_stage = "read_dataset"
    default_code = "DATASET_UNREADABLE"


class EncodingRepairError(PermanentError):
    """Raised when a raw attribute value cannot be re-decoded.

    All affected records are assumed to share the same mis-encoding, so a
    single failure means the assumption is wrong for the whole dataset.
    """

    default_stage = "repair_encoding"
    default_code = "ENCODING_REPAIR_FAILED"


class GeometryTypeError(PermanentError):
    """Raised when a feature's default geometry is not a single point."""

    default_stage = "format_record"
    default_code = "GEOMETRY_NOT_POINT"


class TransliterationError(ValidationError):
    """Raised when an unknown transliteration variant is requested."""

    default_stage = "transliterate"
    default_code = "TRANSLITERATION_VARIANT_UNKNOWN"
