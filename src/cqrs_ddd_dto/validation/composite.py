"""CompositeSchema — runs several schemas, collects all issues."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..primitives.exceptions import DTODefinitionError, ValidationError
from .result import ValidationResult

if TYPE_CHECKING:
    from ..ports.schema import ISchema


class CompositeSchema:
    """Validates the same raw input against a list of schemas.

    Unlike fail-fast validation, this collects **all** issues across
    all schemas before raising. On success the validated mappings are
    merged left to right.

    Usage::

        schema = CompositeSchema([PydanticSchema(Address), PostcodeRules()])
        data = schema.validate(raw)
    """

    def __init__(self, schemas: list[ISchema[Mapping[str, Any]]] | None = None) -> None:
        self._schemas: list[ISchema[Mapping[str, Any]]] = list(schemas or [])

    def add(self, schema: ISchema[Mapping[str, Any]]) -> None:
        """Append a schema to the chain."""
        self._schemas.append(schema)

    def validate(self, raw: object) -> dict[str, Any]:
        """Run all schemas, merge their output or raise every issue."""
        if not self._schemas:
            raise DTODefinitionError("CompositeSchema has no schemas to run")

        combined = ValidationResult.success()
        merged: dict[str, Any] = {}
        for schema in self._schemas:
            try:
                value = schema.validate(raw)
            except ValidationError as exc:
                combined = combined.merge(ValidationResult.from_error(exc))
                continue
            merged.update(value)

        combined.raise_for_errors()
        return merged
