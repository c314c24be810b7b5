"""define_dto — function-style declaration of a DTO kind."""

from __future__ import annotations

import types
from typing import TYPE_CHECKING, Any

from .base import DTO
from .options import DTOOptions

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..ports.schema import ISchema
    from ..primitives.clock import IClock
    from ..primitives.id_generator import IIDGenerator


def define_dto(
    schema: ISchema[Any],
    *,
    transform_error: Callable[..., object] | None = None,
    id_generator: IIDGenerator | None = None,
    clock: IClock | None = None,
    name: str = "BoundDTO",
) -> type[DTO[Any]]:
    """Create a DTO base class bound to *schema* for further extension.

    Usage::

        class CreateUserDTO(define_dto(PydanticSchema(CreateUser))):
            @property
            def full_name(self) -> str:
                return f"{self.get_data_item('first')} {self.get_data_item('last')}"
    """
    overrides: dict[str, Any] = {}
    if id_generator is not None:
        overrides["id_generator"] = id_generator
    if clock is not None:
        overrides["clock"] = clock
    options: DTOOptions[Any] = DTOOptions(
        schema=schema, transform_error=transform_error, **overrides
    )
    return types.new_class(
        name,
        (DTO,),
        {"options": options},
        lambda namespace: namespace.update(__module__=__name__),
    )
