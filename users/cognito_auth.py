"""
DRF authentication for Cognito-issued JWTs.

Accepts ``Authorization: Bearer <token>`` with either an id token or an
access token from the configured user pool.  Tokens from other issuers are
ignored (``None``) so session authentication can still apply.  A local
Django user mirrors the Cognito identity and is created on first use.
"""
import json
import logging
import time
from urllib.request import urlopen

import jwt
from django.conf import settings
from django.contrib.auth import get_user_model
from jwt.algorithms import RSAAlgorithm
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed

logger = logging.getLogger(__name__)

_JWKS_CACHE = {"keys": None, "fetched_at": 0}
_JWKS_TTL = 60 * 60  # 1 hour


def issuer() -> str:
    region = getattr(settings, "COGNITO_REGION", "") or ""
    pool_id = getattr(settings, "COGNITO_USER_POOL_ID", "") or ""
    if not region or not pool_id:
        return ""
    return f"https://cognito-idp.{region}.amazonaws.com/{pool_id}"


def _get_jwks() -> list:
    now = int(time.time())
    if _JWKS_CACHE["keys"] and now - _JWKS_CACHE["fetched_at"] < _JWKS_TTL:
        return _JWKS_CACHE["keys"]

    with urlopen(f"{issuer()}/.well-known/jwks.json") as resp:
        keys = json.loads(resp.read().decode("utf-8"))["keys"]

    _JWKS_CACHE["keys"] = keys
    _JWKS_CACHE["fetched_at"] = now
    return keys


def _public_key(kid: str):
    jwk = next((k for k in _get_jwks() if k.get("kid") == kid), None)
    if not jwk:
        raise AuthenticationFailed("Invalid token (kid not found)")
    return RSAAlgorithm.from_jwk(json.dumps(jwk))


class CognitoJWTAuthentication(BaseAuthentication):
    def authenticate(self, request):
        header = get_authorization_header(request).decode("utf-8")
        if not header.lower().startswith("bearer "):
            return None
        token = header.split(" ", 1)[1].strip()

        expected_issuer = issuer()
        if not token or not expected_issuer:
            return None
        try:
            unverified = jwt.decode(token, options={"verify_signature": False})
        except jwt.InvalidTokenError:
            return None
        if unverified.get("iss") != expected_issuer:
            return None

        try:
            kid = jwt.get_unverified_header(token).get("kid")
            claims = jwt.decode(
                token,
                _public_key(kid),
                algorithms=["RS256"],
                options={"verify_aud": False},
                issuer=expected_issuer,
            )
        except (jwt.InvalidTokenError, OSError, KeyError, ValueError) as exc:
            raise AuthenticationFailed(f"Cognito auth failed: {exc}") from exc

        self._check_client(claims)

        # access tokens carry "username", id tokens "cognito:username"
        username = claims.get("cognito:username") or claims.get("username") or ""
        email = (claims.get("email") or "").lower().strip()
        if not username:
            raise AuthenticationFailed("Token missing username")

        user, created = get_user_model().objects.get_or_create(username=username, defaults={"email": email})
        if created:
            logger.info("Local user mirrored from Cognito: %s", username)
        elif email and user.email != email:
            user.email = email
            user.save(update_fields=["email"])
        return (user, token)

    def authenticate_header(self, request):
        return "Bearer"

    @staticmethod
    def _check_client(claims: dict) -> None:
        client_id = getattr(settings, "COGNITO_APP_CLIENT_ID", "") or ""
        token_use = claims.get("token_use")
        if token_use == "id":
            if client_id and claims.get("aud") != client_id:
                raise AuthenticationFailed("Invalid token audience")
        elif token_use == "access":
            if client_id and claims.get("client_id") != client_id:
                raise AuthenticationFailed("Invalid token client_id")
        else:
            raise AuthenticationFailed("Invalid token_use")
