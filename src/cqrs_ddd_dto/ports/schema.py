"""ISchema — the validation contract a DTO kind is bound to."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class ISchema(Protocol[T_co]):
    """Protocol for schema contracts.

    Implementations must be pure with respect to *raw*: they never mutate it
    and, given the same input, always produce the same outcome. Adapters
    live in :mod:`cqrs_ddd_dto.validation`.
    """

    def validate(self, raw: object) -> T_co:
        """Validate *raw* and return the validated mapping.

        Must raise :class:`~cqrs_ddd_dto.primitives.exceptions.ValidationError`
        listing every failing field when *raw* does not conform.
        """
        ...
