"""ValidationResult — collects field-level validation issues."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..primitives.exceptions import ValidationError
from ..primitives.issues import ValidationIssue


def default_issues_factory() -> list[ValidationIssue]:
    """Factory for the mutable default list in ValidationResult."""
    return []


@dataclass
class ValidationResult:
    """Collects validation issues before they are raised.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure([ValidationIssue(("name",), "is required")])
        result.raise_for_errors()
    """

    issues: list[ValidationIssue] = field(default_factory=default_issues_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.issues) == 0

    @property
    def errors(self) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        for issue in self.issues:
            errors.setdefault(issue.location, []).append(issue.message)
        return errors

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, issues: list[ValidationIssue]) -> ValidationResult:
        return cls(issues=list(issues))

    @classmethod
    def from_error(cls, error: ValidationError) -> ValidationResult:
        return cls(issues=list(error.issues))

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result holding the issues of both, in order."""
        return ValidationResult(issues=[*self.issues, *other.issues])

    def add_error(
        self,
        path: tuple[str | int, ...] | str,
        message: str,
        code: str = "invalid",
    ) -> None:
        """Add a single issue; a string *path* is a single top-level field."""
        if isinstance(path, str):
            path = (path,)
        self.issues.append(ValidationIssue(path=path, message=message, code=code))

    def raise_for_errors(self) -> None:
        """Raise :class:`ValidationError` if any issue was collected."""
        if not self.is_valid:
            raise ValidationError(self.issues)

    def __bool__(self) -> bool:
        return self.is_valid
