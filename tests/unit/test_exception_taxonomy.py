"""Tests for the unified exception taxonomy.

Validates:
- PipelineError structured attributes and ``to_error_dict()`` keys
- Category classification (validation, permanent, transient)
- Every pipeline exception is a PipelineError subclass with stage/code
"""

from __future__ import annotations

from typing import ClassVar

from station_extract.core.config import ConfigValidationError
from station_extract.core.exceptions import (
    DataAccessError,
    EncodingRepairError,
    GeometryTypeError,
    PermanentError,
    PipelineError,
    TransliterationError,
    ValidationError,
)


class TestPipelineErrorBase:
    def test_default_attributes(self) -> None:
        err = PipelineError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.retryable is False

    def test_custom_attributes(self) -> None:
        err = PipelineError("fail", stage="read_dataset", code="X", retryable=True)
        assert err.stage == "read_dataset"
        assert err.code == "X"
        assert err.retryable is True

    def test_str_is_message(self) -> None:
        assert str(PipelineError("human-readable error")) == "human-readable error"

    def test_to_error_dict(self) -> None:
        err = PipelineError("x", stage="s", code="C", retryable=True)
        assert err.to_error_dict() == {
            "category": "transient",
            "code": "C",
            "stage": "s",
            "message": "x",
            "retryable": True,
        }

    def test_plain_error_category(self) -> None:
        assert PipelineError("x").category == "permanent"


class TestCategories:
    def test_validation(self) -> None:
        err = ValidationError("bad")
        assert err.category == "validation"
        assert err.retryable is False

    def test_permanent(self) -> None:
        err = PermanentError("dead")
        assert err.category == "permanent"
        assert err.retryable is False


class TestConcreteErrors:
    EXPECTED: ClassVar[list[tuple[type[PipelineError], str, str, str]]] = [
        (DataAccessError, "read_dataset", "DATASET_UNREADABLE", "permanent"),
        (EncodingRepairError, "repair_encoding", "ENCODING_REPAIR_FAILED", "permanent"),
        (GeometryTypeError, "format_record", "GEOMETRY_NOT_POINT", "permanent"),
        (TransliterationError, "transliterate", "TRANSLITERATION_VARIANT_UNKNOWN", "validation"),
    ]

    def test_defaults(self) -> None:
        for cls, stage, code, category in self.EXPECTED:
            err = cls("x")
            assert isinstance(err, PipelineError)
            assert err.stage == stage
            assert err.code == code
            assert err.category == category
            assert err.retryable is False

    def test_stage_override(self) -> None:
        assert DataAccessError("x", stage="custom").stage == "custom"

    def test_config_validation_error(self) -> None:
        err = ConfigValidationError("TABLE", "", "must not be empty")
        assert isinstance(err, ValidationError)
        assert err.message == "Invalid configuration TABLE='': must not be empty"
        assert err.to_error_dict()["stage"] == "config"
