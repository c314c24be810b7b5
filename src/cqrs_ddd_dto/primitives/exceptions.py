"""Exceptions for cqrs-ddd-dto."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .issues import ROOT_LOCATION, ValidationIssue

if TYPE_CHECKING:
    from collections.abc import Iterable


class DTOError(Exception):
    """Root exception for the DTO package."""


class InvariantViolationError(DTOError):
    """Raised when internal DTO storage is corrupt.

    Indicates a bug or misuse of low-level construction (for example a
    subclass ``__init__`` that never calls ``super().__init__``).
    """


class DTODefinitionError(DTOError, TypeError):
    """Raised when a DTO kind is declared or used without a valid schema."""


class UnsupportedHashAlgorithmError(DTOError, ValueError):
    """Raised when a digest algorithm is unknown or has no fixed length."""

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(f"Unsupported hash algorithm: {algorithm!r}")


class CanonicalFormError(DTOError, ValueError):
    """Raised when distinct mapping keys render to the same canonical text."""


class InvalidTokenError(DTOError):
    """Raised when a JWT cannot be decoded, verified or its claims are invalid."""


class ValidationError(DTOError):
    """Raised when raw DTO input does not satisfy its schema.

    Carries the ordered issues as :attr:`issues` and the toolkit's structured
    shape ``{field: [messages]}`` as :attr:`errors`.
    """

    def __init__(
        self,
        issues: Iterable[ValidationIssue] | dict[str, list[str]] | str | None = None,
    ) -> None:
        if isinstance(issues, str):
            self.issues: tuple[ValidationIssue, ...] = (
                ValidationIssue(path=(), message=issues),
            )
        elif isinstance(issues, dict):
            self.issues = tuple(
                ValidationIssue(
                    path=() if loc == ROOT_LOCATION else tuple(loc.split(".")),
                    message=message,
                )
                for loc, messages in issues.items()
                for message in messages
            )
        else:
            self.issues = tuple(issues or ())
        super().__init__(str(self.errors))

    @property
    def errors(self) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        for issue in self.issues:
            errors.setdefault(issue.location, []).append(issue.message)
        return errors

    @property
    def fields(self) -> list[str]:
        """Dotted locations of the failing fields, in first-seen order."""
        return list(self.errors)


class TransformedValidationError(DTOError):
    """Raised in place of a :class:`ValidationError` when a DTO's error
    transform returns a value that is not itself an exception.

    The transform's result is available as :attr:`value`.
    """

    def __init__(self, value: object, original: ValidationError) -> None:
        self.value = value
        self.original = original
        super().__init__(repr(value))
