"""Input stream upload operations."""

from __future__ import annotations

from typing import Any

from ..constants import OPERATION_UPLOAD_INPUT_STREAM
from ..models import ObjectMetadata, UploadInputStreamResult
from ..utils.errors import StorageException
from .base import BaseUploadOperation, KeyUploadMixin, PathUploadMixin
from .metadata import build_object_metadata


class _InputStreamUploadOperation(BaseUploadOperation[Any, UploadInputStreamResult]):
    operation_name = OPERATION_UPLOAD_INPUT_STREAM
    result_type = UploadInputStreamResult

    def _build_metadata(self) -> ObjectMetadata:
        if not hasattr(self.request.local, "read"):
            raise StorageException(
                "Unable to upload, the local data is not a readable stream.",
                "Pass a binary stream opened for reading.",
            )
        return build_object_metadata(
            self.request.content_type,
            self.request.server_side_encryption,
            self.request.metadata,
            self.request.storage_class,
        )

    def _forward(self, service_key: str, metadata: ObjectMetadata) -> None:
        self.storage_service.upload_input_stream(
            self.transfer_id,
            service_key,
            self.request.local,
            metadata,
            self.request.use_accelerate_endpoint,
            on_progress=self.on_progress,
        )


class UploadInputStreamOperation(KeyUploadMixin, _InputStreamUploadOperation):
    """Uploads a stream for an ``UploadRequest`` (access level prefixed key)."""


class PathUploadInputStreamOperation(PathUploadMixin, _InputStreamUploadOperation):
    """Uploads a stream for a ``PathUploadRequest``."""
