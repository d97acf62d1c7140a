"""Verification tokens proving a Cloud Tasks callback was issued by us.

Tokens are HS256 JWTs signed with the shared ``CLOUDJOBS_SECRET``. They carry
no job-specific claims: any valid token authenticates any payload.
"""
import logging
import time
from typing import Optional

import jwt

from .config import Config, get_config
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Algorithm used to sign the verification token
JWT_ALG = "HS256"


class Authenticator:
    def __init__(self, secret: str, ttl: Optional[int] = None):
        if not secret:
            raise ConfigurationError("CLOUDJOBS_SECRET is not configured.")
        self.secret = secret
        self.ttl = ttl

    def issue(self, not_before: Optional[float] = None) -> str:
        """Return a fresh signed token.

        ``not_before`` is the epoch time the token is first expected to be
        presented (a task's schedule time); the validity window starts there
        rather than at issue time.
        """
        now = int(time.time())
        claims = {"iat": now}
        if self.ttl is not None:
            claims["exp"] = max(now, int(not_before or 0)) + self.ttl
        return jwt.encode(claims, self.secret, algorithm=JWT_ALG)

    @property
    def required_claims(self):
        # with a ttl configured, tokens minted without expiry are refused
        return ["iat"] if self.ttl is None else ["iat", "exp"]

    def verify(self, token: Optional[str]) -> bool:
        if not token:
            return False
        try:
            jwt.decode(token, self.secret, algorithms=[JWT_ALG], options={"require": self.required_claims})
        except jwt.InvalidTokenError as exc:
            logger.warning("verification token rejected", extra={"event": "token.rejected", "error_type": type(exc).__name__})
            return False
        return True

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "Authenticator":
        config = config or get_config()
        return cls(config.secret, ttl=config.token_ttl)


def verification_token(not_before: Optional[float] = None) -> str:
    return Authenticator.from_config().issue(not_before=not_before)


def verify_token(token: Optional[str]) -> bool:
    return Authenticator.from_config().verify(token)
