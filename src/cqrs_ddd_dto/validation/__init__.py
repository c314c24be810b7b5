"""Validation system: ValidationResult, CompositeSchema, PydanticSchema."""

from __future__ import annotations

from .composite import CompositeSchema
from .pydantic import PydanticSchema, issues_from_pydantic
from .result import ValidationResult

__all__ = [
    "CompositeSchema",
    "PydanticSchema",
    "ValidationResult",
    "issues_from_pydantic",
]
