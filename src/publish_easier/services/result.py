"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: Every service operation returns a ServiceResult. Expected
failures (missing config, failed build, failed copy) are reported through
``ok=False`` rather than raised.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (``"publish"``, ``"clean"``, ``"init_config"``).
        data: Operation-specific payload. Failed runs may still carry the
            progress made before the failure.
        warnings: Non-fatal issues, e.g. copy sources that were skipped.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
