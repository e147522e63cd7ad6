"""
Tests for pb-async data models

Validates model creation, validation, and wire payloads.
"""
import pytest
from pydantic import ValidationError

from pb_async.models import (
    ChannelTarget,
    ClientTarget,
    Device,
    DeviceTarget,
    File,
    Link,
    Note,
    Push,
    PushData,
    RawUploadRequestResponse,
    SelfUser,
    UploadRequestResponse,
    User,
    UserTarget,
    build_push_payload,
)
from tests.factories import DeviceFactory, PushFactory, UploadSlotFactory, UserFactory


class TestBaseModel:
    """Test base model functionality."""

    def test_from_api_data(self):
        """Test creating models from API data."""
        user = User.from_api_data(UserFactory.payload())
        assert user.iden == "ujpah72o0"
        assert user.name == "Elon Musk"

    def test_from_api_data_empty(self):
        """Test that empty data is rejected."""
        with pytest.raises(ValueError, match="Cannot create User from empty data"):
            User.from_api_data({})

    def test_unknown_fields_ignored(self):
        """Test that fields the models do not know about are dropped."""
        device = Device.from_api_data(DeviceFactory.payload(kind="android", brand_new_field=1))
        assert not hasattr(device, 'brand_new_field')

    def test_to_dict_excludes_none(self):
        """Test model to dictionary conversion."""
        device = Device.from_api_data(DeviceFactory.deleted())
        device_dict = device.to_dict()
        assert 'nickname' not in device_dict
        assert device_dict['active'] is False

    def test_model_repr(self):
        """Test model string representation."""
        device = Device.from_api_data(DeviceFactory.payload())
        repr_str = repr(device)
        assert repr_str.startswith('Device(')
        assert 'iden=ujpah72o0sjAoRtnM0jc' in repr_str


class TestUserModel:
    """Test User model functionality."""

    def test_optional_image(self):
        """Test that image_url may be absent."""
        payload = UserFactory.payload()
        del payload['image_url']
        user = User.from_api_data(payload)
        assert user.image_url is None

    def test_missing_email_invalid(self):
        """Test that required fields are enforced."""
        payload = UserFactory.payload()
        del payload['email']
        with pytest.raises(ValidationError):
            User.from_api_data(payload)

    def test_can_upload(self):
        """Test upload size check against the account limit."""
        user = User.from_api_data(UserFactory.payload(max_upload_size=100))
        assert user.can_upload(100)
        assert not user.can_upload(101)

        unlimited = User.from_api_data(UserFactory.payload(max_upload_size=None))
        assert unlimited.can_upload(10 ** 12)


class TestDeviceModel:
    """Test Device model functionality."""

    def test_display_name_prefers_nickname(self):
        device = Device.from_api_data(DeviceFactory.payload())
        assert device.display_name == "Elon Musk's iPhone"

    def test_display_name_falls_back(self):
        """Test display name without nickname."""
        device = Device.from_api_data(DeviceFactory.payload(nickname=None))
        assert device.display_name == "Apple iPhone 5s (GSM)"

        deleted = Device.from_api_data(DeviceFactory.deleted())
        assert deleted.display_name == deleted.iden


class TestPushTargets:
    """Test PushTarget wire payloads."""

    def test_self_user_is_empty(self):
        assert SelfUser().to_payload() == {}

    def test_renamed_fields(self):
        """Test that targets serialize under their API field names."""
        assert DeviceTarget(iden="d").to_payload() == {"device_iden": "d"}
        assert UserTarget(email="e@x.com").to_payload() == {"email": "e@x.com"}
        assert ChannelTarget(tag="t").to_payload() == {"channel_tag": "t"}
        assert ClientTarget(iden="c").to_payload() == {"client_iden": "c"}

    def test_fields_keep_python_names(self):
        """Test that attribute access uses the Python field names."""
        assert DeviceTarget(iden="d").iden == "d"
        assert ChannelTarget(tag="t").tag == "t"


class TestPushData:
    """Test PushData variants."""

    def test_note_defaults(self):
        """Test that title and body default to empty strings."""
        assert Note().to_payload() == {"type": "note", "title": "", "body": ""}

    def test_link_requires_url(self):
        with pytest.raises(ValidationError):
            Link(title="no url")

    def test_unknown_type_rejected(self):
        """Test that content types outside note, link and file are refused."""
        with pytest.raises(ValidationError):
            PushData(type="bogus")

    def test_type_is_fixed(self):
        """Test that the type tag cannot be changed."""
        with pytest.raises(ValidationError):
            Note(type="link", body="x")

    def test_file_payload(self):
        data = File(file_name="a.png", file_type="image/png", file_url="https://x/a.png")
        assert data.to_payload() == {
            "type": "file",
            "body": "",
            "file_name": "a.png",
            "file_type": "image/png",
            "file_url": "https://x/a.png",
        }

    def test_build_push_payload_merges(self):
        """Test that target and data merge into one flat body."""
        payload = build_push_payload(DeviceTarget(iden="d"), Note(title="t", body="b"))
        assert payload == {"type": "note", "title": "t", "body": "b", "device_iden": "d"}


class TestPushModel:
    """Test the Push response model."""

    def test_note_push(self):
        push = Push.from_api_data(PushFactory.payload(title="Hi", body="There"))
        assert push.type == "note"
        assert push.title == "Hi"
        assert push.dismissed is False
        assert push.file_url is None

    def test_defaults_for_sparse_payload(self):
        """Test that only identity and timestamps are required."""
        push = Push.from_api_data({"iden": "p", "created": 1.0, "modified": 2.0})
        assert push.active is True
        assert push.type is None


class TestUploadModels:
    """Test upload slot models."""

    def test_raw_slot_strips_upload_url(self):
        raw = RawUploadRequestResponse.from_api_data(UploadSlotFactory.payload())
        assert raw.upload_url == UploadSlotFactory.UPLOAD_URL

        response = raw.to_response()
        assert type(response) is UploadRequestResponse
        assert 'upload_url' not in response.to_dict()
        assert response.file_name == "hello.txt"

    def test_raw_slot_requires_upload_url(self):
        payload = UploadSlotFactory.payload()
        del payload['upload_url']
        with pytest.raises(ValidationError):
            RawUploadRequestResponse.from_api_data(payload)
