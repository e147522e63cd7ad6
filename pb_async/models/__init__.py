"""
Data models for pb-async

Pydantic models for PushBullet requests and responses.
"""

from pb_async.models.base import PushbulletBaseModel, PushbulletObject
from pb_async.models.user import User
from pb_async.models.device import Device
from pb_async.models.push import (
    Push,
    PushTarget,
    SelfUser,
    DeviceTarget,
    UserTarget,
    ChannelTarget,
    ClientTarget,
    PushData,
    Note,
    Link,
    File,
    build_push_payload,
    check_push_data,
    check_push_target,
)
from pb_async.models.upload import UploadRequestResponse, RawUploadRequestResponse

__all__ = [
    'PushbulletBaseModel',
    'PushbulletObject',
    'User',
    'Device',
    'Push',
    'PushTarget',
    'SelfUser',
    'DeviceTarget',
    'UserTarget',
    'ChannelTarget',
    'ClientTarget',
    'PushData',
    'Note',
    'Link',
    'File',
    'build_push_payload',
    'check_push_data',
    'check_push_target',
    'UploadRequestResponse',
    'RawUploadRequestResponse',
]
