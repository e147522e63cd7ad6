"""
Device model

Represents a device registered to the user's account.
"""
from typing import Optional
from pydantic import Field

from pb_async.models.base import PushbulletObject


class Device(PushbulletObject):
    """PushBullet device."""

    # Deleted devices are still listed, flagged as inactive
    active: bool = Field(..., description="Whether or not this device is active")
    nickname: Optional[str] = Field(None, description="Nickname of device")

    # Descriptive metadata
    manufacturer: Optional[str] = Field(None, description="Device manufacturer")
    model: Optional[str] = Field(None, description="Device model")
    icon: Optional[str] = Field(None, description="Icon shown for the device")
    type: Optional[str] = Field(None, description="Device type (android, chrome, ...)")
    app_version: Optional[int] = Field(None, description="PushBullet app version")
    pushable: Optional[bool] = Field(None, description="Whether pushes can be sent to this device")
    push_token: Optional[str] = Field(None, description="Platform push token")
    fingerprint: Optional[str] = Field(None, description="Device fingerprint")
    has_sms: Optional[bool] = Field(None, description="Whether the device can send SMS")

    @property
    def display_name(self) -> str:
        """Human readable name, falling back to manufacturer/model or iden."""
        if self.nickname:
            return self.nickname
        parts = [part for part in (self.manufacturer, self.model) if part]
        if parts:
            return ' '.join(parts)
        return self.iden
