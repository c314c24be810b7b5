"""cqrs-ddd-dto — schema-validated, immutable Data Transfer Objects.

Raw input is validated lazily against a pluggable schema (pydantic by
default), cached, and exposed through deterministic canonical JSON,
content hashes, query strings and JWTs.
"""

from __future__ import annotations

# ── Canonical form ──────────────────────────────────────────────
from .canonical import (
    canonical_json,
    canonicalize,
    content_hash,
    deep_equal,
    query_string,
    search_params,
)

# ── DTO ─────────────────────────────────────────────────────────
from .dto import DTO, DTOOptions, ValidationCache, define_dto

# ── Ports ───────────────────────────────────────────────────────
from .ports import ISchema

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    CanonicalFormError,
    DTODefinitionError,
    DTOError,
    IClock,
    IIDGenerator,
    InvalidTokenError,
    InvariantViolationError,
    TransformedValidationError,
    UnsupportedHashAlgorithmError,
    UTCClock,
    UUID4Generator,
    ValidationError,
    ValidationIssue,
)

# ── Validation ──────────────────────────────────────────────────
from .validation import CompositeSchema, PydanticSchema, ValidationResult

__all__: list[str] = [
    # DTO
    "DTO",
    "DTOOptions",
    "ValidationCache",
    "define_dto",
    # Canonical form
    "canonical_json",
    "canonicalize",
    "content_hash",
    "deep_equal",
    "query_string",
    "search_params",
    # Ports
    "ISchema",
    # Validation
    "CompositeSchema",
    "PydanticSchema",
    "ValidationResult",
    # Primitives
    "DTOError",
    "CanonicalFormError",
    "DTODefinitionError",
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
