"""
Upload models

The upload-request endpoint hands out an upload slot. The raw response keeps
the upload_url the client consumes; callers only ever see where the file will
be served from.
"""
from pydantic import Field

from pb_async.models.base import PushbulletBaseModel
from pb_async.models.push import File


class UploadRequestResponse(PushbulletBaseModel):
    """Result of a completed upload."""

    # The server may truncate the name or change the type it was given
    file_name: str = Field(..., description="The file name that will be used for the file")
    file_type: str = Field(..., description="The file type that will be used for the file")
    file_url: str = Field(..., description="Where the file is available after upload")

    def to_push_data(self, body: str = "") -> File:
        """Build the File push content referencing this upload."""
        return File(body=body, file_name=self.file_name, file_type=self.file_type,
                    file_url=self.file_url)


class RawUploadRequestResponse(UploadRequestResponse):
    """Upload slot as returned by the API, including the upload destination."""

    upload_url: str = Field(..., description="Where to POST the file contents")

    def to_response(self) -> UploadRequestResponse:
        return UploadRequestResponse(file_name=self.file_name, file_type=self.file_type,
                                     file_url=self.file_url)
