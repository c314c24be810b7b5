"""DTOOptions — type-level configuration shared by every instance of a DTO kind."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic

from typing_extensions import TypeVar

from ..primitives.clock import IClock, UTCClock
from ..primitives.exceptions import DTODefinitionError
from ..primitives.id_generator import IIDGenerator, UUID4Generator

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.schema import ISchema
    from ..primitives.exceptions import ValidationError

TData = TypeVar("TData", default=dict[str, Any])


def _accepts_raw(transform: Callable[..., object]) -> bool:
    """Whether *transform* takes a second positional argument for raw data."""
    try:
        signature = inspect.signature(transform)
    except (TypeError, ValueError):
        return False

    positional = 0
    for parameter in signature.parameters.values():
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            positional += 1
    return positional >= 2


def _default_id_generator() -> IIDGenerator:
    return UUID4Generator()


def _default_clock() -> IClock:
    return UTCClock()


@dataclass(frozen=True)
class DTOOptions(Generic[TData]):
    """Schema and collaborators bound once to a DTO kind.

    ``transform_error`` receives the :class:`ValidationError` and, if it
    accepts a second positional argument, the raw unsafe input. Its return
    value is raised (by ``get_data``) or returned (by ``get_error``) in place
    of the original error.
    """

    schema: ISchema[TData]
    transform_error: Callable[..., object] | None = None
    id_generator: IIDGenerator = field(default_factory=_default_id_generator)
    clock: IClock = field(default_factory=_default_clock)
    _transform_takes_raw: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not callable(getattr(self.schema, "validate", None)):
            raise DTODefinitionError(
                f"DTO schema must provide validate(raw), got {self.schema!r}"
            )
        if self.transform_error is not None and not callable(self.transform_error):
            raise DTODefinitionError("transform_error must be callable")
        takes_raw = (
            self.transform_error is not None and _accepts_raw(self.transform_error)
        )
        object.__setattr__(self, "_transform_takes_raw", takes_raw)

    def transform(self, error: ValidationError, raw: object) -> object:
        """Apply ``transform_error`` to *error*, or return *error* unchanged."""
        if self.transform_error is None:
            return error
        if self._transform_takes_raw:
            return self.transform_error(error, raw)
        return self.transform_error(error)
