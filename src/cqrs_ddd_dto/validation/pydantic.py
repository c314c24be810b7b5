"""PydanticSchema — adapts pydantic models and types to ``ISchema``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..primitives.exceptions import DTODefinitionError, ValidationError
from ..primitives.issues import ValidationIssue


def issues_from_pydantic(exc: PydanticValidationError) -> list[ValidationIssue]:
    """Convert pydantic's error list into ``ValidationIssue`` objects."""
    return [
        ValidationIssue(
            path=tuple(error.get("loc", ())),
            message=error.get("msg", "validation error"),
            code=error.get("type", "invalid"),
        )
        for error in exc.errors(include_url=False)
    ]


class PydanticSchema:
    """Validates raw DTO input through a pydantic model or type.

    The validated value is dumped back to a plain ``dict`` so DTOs carry
    data rather than model instances. Field order follows the model
    declaration, not the order of keys in the raw input.

    Usage::

        class CreateUser(BaseModel):
            first: str = Field(min_length=2, max_length=100)
            email: EmailStr

        schema = PydanticSchema(CreateUser)
        schema.validate({"first": "Jo", "email": "jo@example.com"})
    """

    def __init__(
        self,
        schema_type: Any,
        *,
        strict: bool | None = None,
        by_alias: bool = False,
        exclude_unset: bool = False,
        exclude_none: bool = False,
    ) -> None:
        self._schema_type = schema_type
        self._adapter: TypeAdapter[Any] = TypeAdapter(schema_type)
        self._strict = strict
        self._by_alias = by_alias
        self._exclude_unset = exclude_unset
        self._exclude_none = exclude_none

    @property
    def schema_type(self) -> Any:
        return self._schema_type

    def validate(self, raw: object) -> dict[str, Any]:
        try:
            value = self._adapter.validate_python(raw, strict=self._strict)
        except PydanticValidationError as exc:
            raise ValidationError(issues_from_pydantic(exc)) from exc

        dumped = self._adapter.dump_python(
            value,
            mode="python",
            by_alias=self._by_alias,
            exclude_unset=self._exclude_unset,
            exclude_none=self._exclude_none,
        )
        if not isinstance(dumped, Mapping):
            raise DTODefinitionError(
                f"Schema {self._schema_type!r} must produce a mapping, "
                f"got {type(dumped).__name__}"
            )
        return dict(dumped)

    def json_schema(self) -> dict[str, Any]:
        """Return the JSON Schema document describing accepted input."""
        return self._adapter.json_schema()

    def __repr__(self) -> str:
        return f"PydanticSchema({self._schema_type!r})"
