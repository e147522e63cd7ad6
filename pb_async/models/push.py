"""
Push models

Request-side variants for who receives a push (PushTarget) and what it
carries (PushData), plus the Push object the API echoes back on creation.
The body posted to the pushes endpoint is the flat merge of one target's
payload and one data payload.
"""
from typing import Any, Dict, Literal, Optional
from pydantic import Field

from pb_async.models.base import PushbulletBaseModel, PushbulletObject


class PushTarget(PushbulletBaseModel):
    """Recipient selector for a push."""

    def to_payload(self) -> Dict[str, Any]:
        """Wire fields contributed by this target."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SelfUser(PushTarget):
    """Push to the user's own stream (all of their devices)."""
    pass


class DeviceTarget(PushTarget):
    """Send to a specific device."""

    iden: str = Field(..., serialization_alias="device_iden",
                      description="Device identifier, see Device.iden")


class UserTarget(PushTarget):
    """Send to a user by email, or by plain email if they are not a PushBullet user."""

    email: str = Field(..., description="User email, see User.email")


class ChannelTarget(PushTarget):
    """Send to all subscribers of a channel."""

    tag: str = Field(..., serialization_alias="channel_tag", description="Channel tag")


class ClientTarget(PushTarget):
    """Send to all users who have granted access to an OAuth client."""

    iden: str = Field(..., serialization_alias="client_iden", description="OAuth client iden")


class PushData(PushbulletBaseModel):
    """Content of a push, tagged by its ``type`` field."""

    type: Literal["note", "link", "file"]

    def to_payload(self) -> Dict[str, Any]:
        """Wire fields contributed by this content, including ``type``."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Note(PushData):
    """Note push."""

    type: Literal["note"] = "note"
    title: str = Field("", description="The note's title")
    body: str = Field("", description="The note's message")


class Link(PushData):
    """Link push."""

    type: Literal["link"] = "link"
    title: str = Field("", description="The link's title")
    body: str = Field("", description="A message associated with the link")
    url: str = Field(..., description="The url to open")


class File(PushData):
    """File push. The file must be uploaded first, see Client.upload_request."""

    type: Literal["file"] = "file"
    body: str = Field("", description="A message to go with the file")
    file_name: str = Field(..., description="The name of the file")
    file_type: str = Field(..., description="The MIME type of the file")
    file_url: str = Field(..., description="Where the uploaded file is served from")


TARGET_TYPES = (SelfUser, DeviceTarget, UserTarget, ChannelTarget, ClientTarget)
DATA_TYPES = (Note, Link, File)


def check_push_target(target: Any) -> None:
    """Raise TypeError unless target is one of the concrete PushTarget variants."""
    if not isinstance(target, TARGET_TYPES):
        raise TypeError(f"target must be a PushTarget variant, got {type(target).__name__}")


def check_push_data(data: Any) -> None:
    """Raise TypeError unless data is a Note, Link or File."""
    if not isinstance(data, DATA_TYPES):
        raise TypeError(f"data must be a PushData variant (Note, Link, File), got {type(data).__name__}")


def build_push_payload(target: PushTarget, data: PushData) -> Dict[str, Any]:
    """Merge a target and a content payload into the pushes request body."""
    payload = data.to_payload()
    payload.update(target.to_payload())
    return payload


class Push(PushbulletObject):
    """A push as returned by the API."""

    active: bool = Field(True, description="False once the push has been deleted")
    type: Optional[str] = Field(None, description="note, link or file")
    dismissed: bool = Field(False, description="Whether the push has been dismissed")
    direction: Optional[str] = Field(None, description="self, outgoing or incoming")

    # Addressing
    sender_iden: Optional[str] = None
    sender_email: Optional[str] = None
    sender_name: Optional[str] = None
    receiver_iden: Optional[str] = None
    receiver_email: Optional[str] = None
    target_device_iden: Optional[str] = None
    source_device_iden: Optional[str] = None
    channel_iden: Optional[str] = None
    client_iden: Optional[str] = None

    # Content
    title: Optional[str] = None
    body: Optional[str] = None
    url: Optional[str] = None
    file_name: Optional[str] = None
    file_type: Optional[str] = None
    file_url: Optional[str] = None
    image_url: Optional[str] = None
