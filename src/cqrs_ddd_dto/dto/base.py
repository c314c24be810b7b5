"""DTO base class — immutable, schema-validated data carrier."""

from __future__ import annotations

import copy
import dataclasses
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Generic

from .. import canonical, tokens
from ..primitives.exceptions import (
    DTODefinitionError,
    InvariantViolationError,
    TransformedValidationError,
    ValidationError,
)
from .cache import ValidationCache
from .options import DTOOptions, TData

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from datetime import datetime

    from typing_extensions import Self

    from ..ports.schema import ISchema

logger = logging.getLogger("cqrs_ddd.dto")

_MISSING: Any = object()


class DTO(Generic[TData]):
    """Base class for Data Transfer Objects.

    A DTO kind binds its schema once, at class definition. Instances store
    the raw input untouched and validate it lazily on first demand; the
    validated data is cached for the lifetime of the instance. All update
    operations return new instances.

    Usage::

        class CreateUserDTO(DTO, schema=PydanticSchema(CreateUser)):
            @property
            def full_name(self) -> str:
                data = self.get_data()
                return f"{data['first']} {data['last']}"

        dto = CreateUserDTO({"first": "John", "last": "Doe", "email": "j@d.io"})
        dto.get_data()
        dto.to_hash()

    Construction never validates. Validation failures surface from
    :meth:`get_data` and every operation built on it.
    """

    _dto_options: ClassVar[DTOOptions[Any] | None] = None

    def __init_subclass__(
        cls,
        *,
        schema: ISchema[Any] | None = None,
        transform_error: Callable[..., object] | None = None,
        options: DTOOptions[Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)

        if options is not None:
            if schema is not None or transform_error is not None:
                raise DTODefinitionError(
                    f"{cls.__name__}: pass either options= or schema=/transform_error=,"
                    " not both"
                )
            cls._dto_options = options
            return

        if schema is not None:
            cls._dto_options = DTOOptions(
                schema=schema, transform_error=transform_error
            )
            return

        if transform_error is not None:
            inherited = cls._dto_options
            if inherited is None:
                raise DTODefinitionError(
                    f"{cls.__name__}: transform_error= requires a schema"
                )
            cls._dto_options = dataclasses.replace(
                inherited, transform_error=transform_error
            )

    def __init__(self, data: Any) -> None:
        options = type(self).get_options()
        self._cache: ValidationCache[Mapping[str, Any]] = ValidationCache(data)
        self._id = options.id_generator.next_id()
        self._created_at = options.clock.now()

    # ── Type-level configuration ─────────────────────────────────

    @classmethod
    def get_options(cls) -> DTOOptions[TData]:
        options = cls._dto_options
        if options is None:
            raise DTODefinitionError(
                f"{cls.__name__} has no schema; declare it with "
                f"class {cls.__name__}(DTO, schema=...)"
            )
        return options

    @classmethod
    def get_schema(cls) -> ISchema[TData]:
        """Return the schema contract shared by every instance of this kind."""
        return cls.get_options().schema

    # ── Identity ─────────────────────────────────────────────────

    @property
    def id(self) -> str:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    # ── Validation cache ─────────────────────────────────────────

    def _get_cache(self) -> ValidationCache[Mapping[str, Any]]:
        cache = self.__dict__.get("_cache", _MISSING)
        if cache is _MISSING:
            raise InvariantViolationError(
                f"{type(self).__name__} instance has no raw data; "
                "was DTO.__init__ called?"
            )
        return cache

    def get_unsafe_data(self) -> Any:
        """Return the raw input exactly as given, without validating it."""
        return self._get_cache().raw

    def _validate(self, raw: object) -> Mapping[str, Any]:
        name = type(self).__name__
        logger.debug("Validating %s (id=%s)", name, self._id)
        validated = self.get_schema().validate(raw)
        if not isinstance(validated, Mapping):
            raise DTODefinitionError(
                f"Schema of {name} must return a mapping, "
                f"got {type(validated).__name__}"
            )
        return MappingProxyType(dict(validated))

    def _transform(self, error: ValidationError) -> object:
        options = type(self).get_options()
        if options.transform_error is None:
            return error
        logger.debug(
            "Transforming validation error of %s (id=%s)",
            type(self).__name__,
            self._id,
        )
        return options.transform(error, self.get_unsafe_data())

    def get_data(self) -> Mapping[str, Any]:
        """Return the validated data, validating and caching on first call.

        Returns a read-only mapping; repeated calls return the same object.

        Raises:
            ValidationError: The raw input does not satisfy the schema and no
                ``transform_error`` is configured.
            Exception: Whatever ``transform_error`` returned, when it is an
                exception; otherwise :class:`TransformedValidationError`.
        """
        cache = self._get_cache()
        try:
            return cache.get_or_validate(self._validate)
        except ValidationError as exc:
            logger.debug(
                "%s (id=%s) failed validation: %s",
                type(self).__name__,
                self._id,
                exc.fields,
            )
            transformed = self._transform(exc)
            if transformed is exc:
                raise
            if isinstance(transformed, BaseException):
                raise transformed from exc
            raise TransformedValidationError(transformed, exc) from exc

    def get_data_item(self, field: str, default: Any = _MISSING) -> Any:
        """Return one field of the validated data.

        Raises ``KeyError`` for an absent field unless *default* is given.
        """
        data = self.get_data()
        if default is _MISSING:
            return data[field]
        return data.get(field, default)

    def get_error(self) -> object | None:
        """Validate without raising and return the (transformed) error, or None.

        Runs the schema afresh; the validated-data cache is neither read nor
        populated.
        """
        error = self._check()
        return None if error is None else self._transform(error)

    def is_valid(self) -> bool:
        """True when the raw input satisfies the schema, whatever the transform."""
        return self._check() is None

    def _check(self) -> ValidationError | None:
        try:
            self._validate(self.get_unsafe_data())
        except ValidationError as exc:
            return exc
        return None

    # ── Canonical representations ────────────────────────────────

    def to_json_string(self, pretty: bool = False) -> str:
        """Serialize the validated data with keys sorted at every level."""
        return canonical.canonical_json(self.get_data(), pretty=pretty)

    def to_hash(self, algorithm: str = canonical.DEFAULT_HASH_ALGORITHM) -> str:
        """Hex digest of the compact canonical JSON (``sha1`` by default)."""
        return canonical.content_hash(self.to_json_string(), algorithm)

    def to_search_params(self) -> list[tuple[str, str]]:
        """Top-level fields as ``(key, text)`` pairs in schema field order."""
        return canonical.search_params(self.get_data())

    def to_query_string(self) -> str:
        return canonical.query_string(self.get_data())

    def to_jwt(
        self,
        secret: str | bytes,
        expires_in: int | None = None,
        *,
        algorithm: str = tokens.DEFAULT_ALGORITHM,
    ) -> str:
        """Sign the validated data as JWT claims.

        ``iat`` comes from the kind's clock; ``exp`` is set to
        ``iat + expires_in`` when *expires_in* (seconds) is given.
        """
        return tokens.encode_claims(
            canonical.canonicalize(self.get_data()),
            secret,
            issued_at=type(self).get_options().clock.now(),
            expires_in=expires_in,
            algorithm=algorithm,
        )

    @classmethod
    def from_jwt(
        cls,
        token: str,
        secret: str | bytes,
        *,
        algorithms: Sequence[str] = (tokens.DEFAULT_ALGORITHM,),
    ) -> Self:
        """Verify *token* and build a DTO from its non-registered claims."""
        claims = tokens.decode_claims(
            token,
            secret,
            algorithms=algorithms,
            now=cls.get_options().clock.now(),
        )
        return cls(claims)

    # ── Value operations ─────────────────────────────────────────

    def equals(self, other: object) -> bool:
        """Structural comparison of validated data, ignoring key order.

        Both sides are validated; failures propagate. Non-DTO values are
        never equal.
        """
        if not isinstance(other, DTO):
            return False
        return canonical.deep_equal(self.get_data(), other.get_data())

    def clone(self) -> Self:
        """New instance of the same kind over a deep copy of the raw input."""
        return type(self)(copy.deepcopy(self.get_unsafe_data()))

    def with_(
        self, partial: Mapping[str, Any] | None = None, /, **changes: Any
    ) -> Self:
        """New instance whose raw input is this one's overlaid with *partial*.

        The merge is shallow: top-level keys in *partial* (and *changes*)
        replace those of the raw input, nested values are not merged.
        """
        raw = self.get_unsafe_data()
        if not isinstance(raw, Mapping):
            raise TypeError(
                f"{type(self).__name__}.with_() needs mapping raw data, "
                f"got {type(raw).__name__}"
            )
        return type(self)({**raw, **(partial or {}), **changes})

    def to_string(self) -> str:
        return f"{type(self).__name__}({self._id}) {self.to_json_string()}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        created_at = getattr(self, "_created_at", None)
        return (
            f"<{type(self).__name__} id={getattr(self, '_id', None)!r} "
            f"created_at={created_at.isoformat() if created_at else None}>"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        # copy, deepcopy and pickle rebuild from raw input with a new identity
        return (type(self), (self.get_unsafe_data(),))
