from __future__ import annotations
import json
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from .errors import NotFoundError, ValidationError
from .schemas import RosterIn


def load_roster(path: Path) -> RosterIn:
    """Read an exported roster document (employees with their sessions and leaves)."""
    if not path.exists():
        raise NotFoundError(f"Input file not found: {path}", {"path": str(path)})
    try:
        content = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValidationError(f"Input file is not valid JSON: {exc.msg}", {"path": str(path), "line": exc.lineno}) from exc
    try:
        return RosterIn.model_validate(content)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc, path=str(path)) from exc
