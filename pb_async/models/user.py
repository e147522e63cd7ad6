"""
User model

Information about the user the access token belongs to.
"""
from typing import Optional
from pydantic import Field

from pb_async.models.base import PushbulletObject


class User(PushbulletObject):
    """The logged in PushBullet user."""

    email: str = Field(..., description="Account email, usable as a push target")
    email_normalized: str = Field(..., description="Normalized account email")
    name: str = Field(..., description="User real name")
    image_url: Optional[str] = Field(None, description="URL of profile image")
    max_upload_size: Optional[float] = Field(None, description="Maximum upload size allowed in bytes")

    def can_upload(self, size: int) -> bool:
        """Check whether a file of the given size fits the account's upload limit."""
        if self.max_upload_size is None:
            return True
        return size <= self.max_upload_size
