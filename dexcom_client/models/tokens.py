"""Models for OAuth2 user tokens."""

from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Subtracted from expires_in so callers refresh before the server rejects the token.
EXPIRY_BUFFER = timedelta(seconds=5)


class UserToken(BaseModel):
    """Authorization info needed to access a user's data."""

    model_config = ConfigDict(hide_input_in_errors=True)

    access_token: str = Field(..., description="Bearer token for data calls")
    refresh_token: str = Field(..., description="Token used to obtain a new access token")
    expires_in: int = Field(..., description="Lifetime of the access token in seconds")
    token_type: str = Field(..., description="Token type, normally Bearer")
    expire_time: Optional[datetime] = Field(
        None,
        exclude=True,
        description="Absolute expiry, set by the client when the token is received",
    )

    def stamp_expiry(self, now: datetime) -> None:
        """Set ``expire_time`` relative to the moment the token was received."""
        self.expire_time = now + timedelta(seconds=self.expires_in) - EXPIRY_BUFFER

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check if the token has expired. Tokens that were never stamped count as expired."""
        if self.expire_time is None:
            return True
        now = now or datetime.now(timezone.utc)
        return now >= self.expire_time
