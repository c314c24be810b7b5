"""Ports: protocols implemented by schema adapters."""

from __future__ import annotations

from .schema import ISchema

__all__ = ["ISchema"]
