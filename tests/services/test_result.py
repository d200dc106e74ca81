"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from publish_easier.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="publish", data={"version": "1.0.1"})
        assert result.ok is True
        assert result.op == "publish"
        assert result.data == {"version": "1.0.1"}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="BUILD_FAILED", message="exit 2")
        result = ServiceResult(ok=False, op="publish", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "BUILD_FAILED"

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="clean",
            data={"removed": True},
            warnings=["something odd"],
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["removed"] is True
        assert parsed["warnings"] == ["something odd"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(code="COPY_FAILED", message="boom", detail={"source": "docs"})
        assert error.detail["source"] == "docs"

    def test_default_detail(self) -> None:
        assert ServiceError(code="X", message="y").detail == {}
