"""Access token service.

Issues and verifies signed (HS256) JWT access tokens that carry the
user id and an expiry. Tokens are stateless and cannot be revoked.
"""

from datetime import datetime, timedelta, timezone

import jwt

from portal_link_auth.exceptions import InvalidTokenError
from portal_link_auth.schemas import TokenPayload


class AccessTokenService:
    """Service for access token creation and verification.

    Examples
    --------
    >>> service = AccessTokenService(secret_key="your-secret-key")
    >>> token = service.create_access_token(42)
    >>> service.verify_token(token).user_id
    42
    """

    DEFAULT_EXPIRE_HOURS = 24
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_EXPIRE_HOURS,
    ):
        """Initialize the token service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        access_token_expire_hours
            Hours until an access token expires (default 24)
        """
        if not secret_key:
            msg = "Token secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(hours=access_token_expire_hours)

    def create_access_token(
        self,
        user_id: int,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token for a user.

        Parameters
        ----------
        user_id
            The user's identifier
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + (expires_delta if expires_delta is not None else self._expire),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode an access token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["sub", "iat", "exp"]},
            )

            user_id = int(payload["sub"])
            if user_id <= 0:
                msg = f"invalid subject {user_id}"
                raise ValueError(msg)

            return TokenPayload(
                user_id=user_id,
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
