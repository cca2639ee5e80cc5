"""
Token Service
=============

Issues and verifies signed JWT bearer credentials with python-jose.
Verification is stateless: signature and expiry only, no session store.
"""
from datetime import timedelta
from typing import Any, Dict

from jose import JWTError, jwt

from myflix.domain.exceptions import AuthenticationError
from myflix.domain.models.user import User
from myflix.utils.datetime_utils import now


class TokenService:
    """
    Creates access tokens for authenticated users and decodes presented ones.

    Claims:
        sub: user id
        username: username at issue time
        iat / exp: issue and expiry timestamps
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 10080):
        self._secret = secret
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def create_access_token(self, user: User) -> str:
        issued_at = now()
        payload = {
            "sub": user.id,
            "username": user.username,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + timedelta(minutes=self._expire_minutes)).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Verify a token and return its claims.

        Raises:
            AuthenticationError: If the signature is bad, the token expired, or `sub` is missing
        """
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError:
            raise AuthenticationError("Invalid or expired token")
        if not claims.get("sub"):
            raise AuthenticationError("Invalid token")
        return claims
