"""JWT encoding of DTO data, using joserfc."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from joserfc import jwt
from joserfc.errors import JoseError
from joserfc.jwk import OctKey

from .primitives.exceptions import InvalidTokenError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from datetime import datetime

DEFAULT_ALGORITHM = "HS256"
REGISTERED_TIME_CLAIMS = ("iat", "exp")


def encode_claims(
    data: Mapping[str, Any],
    secret: str | bytes,
    *,
    issued_at: datetime,
    expires_in: int | None = None,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Sign *data* as JWT claims with ``iat`` and optional ``exp``."""
    clashing = [name for name in REGISTERED_TIME_CLAIMS if name in data]
    if clashing:
        raise ValueError(f"DTO data already defines registered claims {clashing}")

    claims: dict[str, Any] = dict(data)
    claims["iat"] = int(issued_at.timestamp())
    if expires_in is not None:
        claims["exp"] = claims["iat"] + int(expires_in)

    key = OctKey.import_key(secret)
    return jwt.encode({"alg": algorithm}, claims, key, algorithms=[algorithm])


def decode_claims(
    token: str,
    secret: str | bytes,
    *,
    algorithms: Sequence[str] = (DEFAULT_ALGORITHM,),
    now: datetime,
) -> dict[str, Any]:
    """Verify *token* and return its claims without ``iat``/``exp``.

    Raises:
        InvalidTokenError: Bad signature, malformed token or expired ``exp``.
    """
    key = OctKey.import_key(secret)
    try:
        decoded = jwt.decode(token, key, algorithms=list(algorithms))
    except (JoseError, ValueError) as exc:
        raise InvalidTokenError(str(exc)) from exc

    claims = dict(decoded.claims)
    expires_at = claims.get("exp")
    if expires_at is not None:
        if not isinstance(expires_at, int) or isinstance(expires_at, bool):
            raise InvalidTokenError("exp claim must be an integer timestamp")
        if expires_at <= int(now.timestamp()):
            raise InvalidTokenError("token has expired")

    for name in REGISTERED_TIME_CLAIMS:
        claims.pop(name, None)
    return claims
