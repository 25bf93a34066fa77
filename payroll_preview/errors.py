from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError


class PayrollPreviewError(Exception):
    """Base error carrying a machine readable code."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ValidationError(PayrollPreviewError):
    """Raised when caller input is malformed."""

    code = "VALIDATION_ERROR"

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError, **details: Any) -> "ValidationError":
        errors = [
            {"path": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return cls("Validation failed", {**details, "errors": errors})


class NotFoundError(PayrollPreviewError):
    """Raised when a referenced employee or input file does not exist."""

    code = "NOT_FOUND"
