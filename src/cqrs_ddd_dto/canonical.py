"""Canonical JSON, content hashing and query-string rendering.

Canonical form sorts mapping keys at every nesting level so that two
values that are equal by content produce byte-identical text, regardless
of the order keys were inserted in.
"""

from __future__ import annotations

import hashlib
import json
import math
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from pydantic_core import to_jsonable_python

from .primitives.exceptions import (
    CanonicalFormError,
    UnsupportedHashAlgorithmError,
)

DEFAULT_HASH_ALGORITHM = "sha1"
PRETTY_INDENT = 2

_COMPACT_SEPARATORS = (",", ":")
_PRETTY_SEPARATORS = (",", ": ")


def _key_text(key: Any) -> str:
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, float) and key.is_integer():
        return str(int(key))
    return str(key)


def _keyed_items(value: Mapping[Any, Any]) -> dict[str, Any]:
    """Map *value*'s keys to their text form, refusing keys that collide."""
    keyed: dict[str, Any] = {}
    for key, item in value.items():
        text = _key_text(key)
        if text in keyed:
            raise CanonicalFormError(
                f"Keys of different types collide as {text!r} in canonical form"
            )
        keyed[text] = item
    return keyed


def _is_json_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (str, bool, int, float))


def canonicalize(value: Any) -> Any:
    """Return a JSON-compatible copy of *value* with every mapping key sorted.

    Integral floats become ints so that ``1`` and ``1.0`` share one form.
    """
    if isinstance(value, Mapping):
        keyed = _keyed_items(value)
        return {key: canonicalize(keyed[key]) for key in sorted(keyed)}

    if isinstance(value, (list, tuple)):
        return [canonicalize(item) for item in value]

    if isinstance(value, (set, frozenset)):
        members = [canonicalize(item) for item in value]
        members.sort(key=_compact_dumps)
        return members

    if value is None or isinstance(value, (str, bool, int)):
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value) if value.is_integer() else value

    # datetime, UUID, Decimal, Enum, pydantic models, dataclasses ...
    return canonicalize(to_jsonable_python(value))


def deep_equal(left: Any, right: Any) -> bool:
    """Structural equality that never disagrees with :func:`canonicalize`.

    Values that compare equal here always have the same canonical form.
    Mapping keys are matched by their canonical text, lists and tuples are
    interchangeable, booleans never equal numbers, and NaN equals nothing
    but itself. Non-JSON values (datetime, Decimal ...) are compared through
    their canonical form.
    """
    if left is right:
        return True

    if isinstance(left, Mapping) or isinstance(right, Mapping):
        if not (isinstance(left, Mapping) and isinstance(right, Mapping)):
            return False
        left_items = _keyed_items(left)
        right_items = _keyed_items(right)
        if left_items.keys() != right_items.keys():
            return False
        return all(deep_equal(item, right_items[key]) for key, item in left_items.items())

    if isinstance(left, (list, tuple)) or isinstance(right, (list, tuple)):
        if not (isinstance(left, (list, tuple)) and isinstance(right, (list, tuple))):
            return False
        return len(left) == len(right) and all(
            deep_equal(a, b) for a, b in zip(left, right)
        )

    if isinstance(left, (set, frozenset)) or not (
        _is_json_scalar(left) and _is_json_scalar(right)
    ):
        return deep_equal(canonicalize(left), canonicalize(right))

    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right

    if left is None or right is None:
        return False
    return bool(left == right)


def _compact_dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=_COMPACT_SEPARATORS)


def canonical_json(value: Any, *, pretty: bool = False) -> str:
    """Serialize *value* as canonical JSON text.

    *pretty* only changes whitespace (2-space indentation); key order and
    content are identical in both forms.
    """
    canonical = canonicalize(value)
    if pretty:
        return json.dumps(
            canonical,
            ensure_ascii=False,
            indent=PRETTY_INDENT,
            separators=_PRETTY_SEPARATORS,
        )
    return _compact_dumps(canonical)


def content_hash(text: str, algorithm: str = DEFAULT_HASH_ALGORITHM) -> str:
    """Return the lowercase hex digest of *text* encoded as UTF-8."""
    name = algorithm.lower()
    if name.startswith("shake"):
        # variable-length digests need an explicit output size
        raise UnsupportedHashAlgorithmError(algorithm)
    try:
        digest = hashlib.new(name)
    except (TypeError, ValueError) as exc:
        raise UnsupportedHashAlgorithmError(algorithm) from exc
    digest.update(text.encode("utf-8"))
    return digest.hexdigest()


def coerce_param(value: Any) -> str:
    """Render a single field value as query-string text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return canonical_json(value)

    jsonable = to_jsonable_python(value)
    if isinstance(jsonable, (Mapping, list)):
        return canonical_json(jsonable)
    return coerce_param(jsonable)


def search_params(data: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten the top-level fields of *data* into ``(key, text)`` pairs.

    Order follows *data*'s own key order.
    """
    return [(str(key), coerce_param(value)) for key, value in data.items()]


def query_string(data: Mapping[str, Any]) -> str:
    """Percent-encode :func:`search_params` as ``key=value&...``."""
    return urlencode(search_params(data))
