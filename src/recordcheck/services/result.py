"""ServiceResult and ServiceError: the contract between services and the CLI.

INVARIANT: All service-layer methods return ServiceResult. Bad input data
is reported through ``ok=False``; exceptions are reserved for programmer
errors and broken configuration.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable code, human-readable message, structured detail."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for every service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"validate_record"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as a plugin hook that raised.
        error: Set exactly when ``ok`` is False.
        meta: Optional metadata.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        warnings: list[str] | None = None,
    ) -> Self:
        """Build an ``ok=False`` result carrying a :class:`ServiceError`."""
        return cls(
            ok=False,
            op=op,
            warnings=warnings or [],
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )
