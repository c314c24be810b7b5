"""ValidationIssue — one field-level diagnostic produced by a schema."""

from __future__ import annotations

from dataclasses import dataclass

ROOT_LOCATION = "__root__"


@dataclass(frozen=True)
class ValidationIssue:
    """A single reason why raw input failed a schema.

    ``path`` is the sequence of field names / list indices leading to the
    offending value; an empty path refers to the input as a whole.
    """

    path: tuple[str | int, ...]
    message: str
    code: str = "invalid"

    @property
    def location(self) -> str:
        """Dotted form of :attr:`path` (``"address.lines.0"``)."""
        if not self.path:
            return ROOT_LOCATION
        return ".".join(str(p) for p in self.path)

    def __str__(self) -> str:
        return f"{self.location}: {self.message} ({self.code})"
