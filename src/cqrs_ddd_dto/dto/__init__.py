"""DTO kinds: base class, options, validation cache, factory."""

from __future__ import annotations

from .base import DTO
from .cache import ValidationCache
from .factory import define_dto
from .options import DTOOptions

__all__ = [
    "DTO",
    "DTOOptions",
    "ValidationCache",
    "define_dto",
]
