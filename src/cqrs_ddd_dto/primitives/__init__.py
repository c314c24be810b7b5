"""Primitives: exceptions, validation issues, ID generation, clocks."""

from __future__ import annotations

from .clock import IClock, UTCClock
from .exceptions import (
    CanonicalFormError,
    DTODefinitionError,
    DTOError,
    InvalidTokenError,
    InvariantViolationError,
    TransformedValidationError,
    UnsupportedHashAlgorithmError,
    ValidationError,
)
from .id_generator import IIDGenerator, UUID4Generator
from .issues import ValidationIssue

__all__ = [
    "CanonicalFormError",
    "DTODefinitionError",
    "DTOError",
    "IClock",
    "IIDGenerator",
    "InvalidTokenError",
    "InvariantViolationError",
    "TransformedValidationError",
    "UTCClock",
    "UUID4Generator",
    "UnsupportedHashAlgorithmError",
    "ValidationError",
    "ValidationIssue",
]
