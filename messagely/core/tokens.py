"""
Signed identity tokens.

Tokens are HS256 JWTs whose ``sub`` claim is the username. No expiry is
added unless ``expire_minutes`` is configured, in which case an ``exp``
claim is included and enforced on verification.
"""
from datetime import datetime, timedelta, timezone

from jose import jwt, JWTError

from messagely.core.errors import InvalidTokenError


class TokenIssuer:
    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: int | None = None,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, username: str) -> str:
        """Create a signed token for ``username``."""
        claims = {"sub": username}
        if self.expire_minutes is not None:
            claims["exp"] = datetime.now(timezone.utc) + timedelta(
                minutes=self.expire_minutes
            )
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """
        Verify a token and return the username it was issued for.

        Raises InvalidTokenError on bad signature, malformed input,
        expiry or a missing subject.
        """
        if not token:
            raise InvalidTokenError()
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError:
            raise InvalidTokenError()

        username = payload.get("sub")
        if not isinstance(username, str) or not username:
            raise InvalidTokenError()
        return username
