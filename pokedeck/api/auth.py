"""
Authorization gate for mutating routes.

Create, update and delete require an ``Authorization: Bearer <token>``
header. Tokens are compact HS256 JWTs signed with ``settings.auth_secret``;
the verifier is a dependency so deployments and tests can swap it.
"""

import base64
import hmac
import json
import logging
import time
from dataclasses import dataclass, field
from hashlib import sha256
from typing import Annotated, Any, Protocol

from fastapi import Depends, Header

from pokedeck.config import settings
from pokedeck.models.errors import AuthorizationError

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = "Missing bearer token"
INVALID_TOKEN_MESSAGE = "Invalid bearer token"


class InvalidTokenError(Exception):
    """Token could not be verified."""


@dataclass
class Principal:
    """The authenticated caller of a mutating request."""

    subject: str
    claims: dict[str, Any] = field(default_factory=dict)


class TokenVerifier(Protocol):
    def verify(self, token: str) -> Principal: ...


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _encode_segment(payload: dict[str, Any]) -> str:
    return _b64url(json.dumps(payload, separators=(",", ":"), sort_keys=True).encode())


class HS256TokenVerifier:
    """Issue and verify HMAC-SHA256 signed compact JWTs."""

    def __init__(self, secret: str) -> None:
        self._secret = secret.encode("utf-8")

    def issue_token(self, claims: dict[str, Any]) -> str:
        header = {"alg": "HS256", "typ": "JWT"}
        signing_input = _encode_segment(header) + "." + _encode_segment(claims)
        return signing_input + "." + _b64url(self._sign(signing_input))

    def verify(self, token: str) -> Principal:
        if not self._secret:
            raise InvalidTokenError("no signing secret configured")
        try:
            header_b64, payload_b64, sig_b64 = token.split(".")
        except ValueError as exc:
            raise InvalidTokenError("malformed token") from exc

        try:
            header = json.loads(_b64url_decode(header_b64))
            signature = _b64url_decode(sig_b64)
        except ValueError as exc:
            raise InvalidTokenError("undecodable token") from exc
        if not isinstance(header, dict) or header.get("alg") != "HS256":
            raise InvalidTokenError("unsupported algorithm")
        if not hmac.compare_digest(self._sign(header_b64 + "." + payload_b64), signature):
            raise InvalidTokenError("invalid signature")

        try:
            claims = json.loads(_b64url_decode(payload_b64))
        except ValueError as exc:
            raise InvalidTokenError("undecodable claims") from exc
        if not isinstance(claims, dict):
            raise InvalidTokenError("claims must be an object")
        expires_at = claims.get("exp")
        if expires_at is not None and (
            not isinstance(expires_at, int | float) or expires_at < time.time()
        ):
            raise InvalidTokenError("token expired")
        return Principal(subject=str(claims.get("sub", "")), claims=claims)

    def _sign(self, signing_input: str) -> bytes:
        return hmac.new(self._secret, signing_input.encode("utf-8"), sha256).digest()


def get_token_verifier() -> TokenVerifier:
    """Dependency providing the configured token verifier."""
    return HS256TokenVerifier(settings.auth_secret)


def require_principal(
    verifier: Annotated[TokenVerifier, Depends(get_token_verifier)],
    authorization: Annotated[str | None, Header()] = None,
) -> Principal:
    """
    Reject the request unless it carries a valid bearer token.

    Runs before the route reads its body, so an authorization failure takes
    precedence over validation and storage failures.
    """
    if not authorization or not authorization.lower().startswith("bearer "):
        logger.warning("Rejected request without bearer token")
        raise AuthorizationError(MISSING_TOKEN_MESSAGE)

    token = authorization.split(" ", 1)[1].strip()
    try:
        return verifier.verify(token)
    except InvalidTokenError as exc:
        logger.warning("Rejected bearer token: %s", exc)
        raise AuthorizationError(INVALID_TOKEN_MESSAGE) from exc
