"""File upload operations."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..constants import OPERATION_UPLOAD_FILE
from ..models import ObjectMetadata, UploadFileResult
from ..utils.errors import StorageException
from .base import BaseUploadOperation, KeyUploadMixin, PathUploadMixin
from .metadata import build_object_metadata, guess_content_type


class _FileUploadOperation(BaseUploadOperation[Any, UploadFileResult]):
    operation_name = OPERATION_UPLOAD_FILE
    result_type = UploadFileResult

    @property
    def local_file(self) -> Path:
        return Path(self.request.local)

    def _build_metadata(self) -> ObjectMetadata:
        if not self.local_file.is_file():
            raise StorageException(
                f"Unable to upload {self.local_file}, the file does not exist.",
                "Verify that the file exists and is readable before uploading it.",
            )
        return build_object_metadata(
            self.request.content_type or guess_content_type(self.local_file),
            self.request.server_side_encryption,
            self.request.metadata,
            self.request.storage_class,
        )

    def _forward(self, service_key: str, metadata: ObjectMetadata) -> None:
        self.storage_service.upload_file(
            self.transfer_id,
            service_key,
            self.local_file,
            metadata,
            self.request.use_accelerate_endpoint,
            on_progress=self.on_progress,
        )


class UploadFileOperation(KeyUploadMixin, _FileUploadOperation):
    """Uploads a file for an ``UploadRequest`` (access level prefixed key)."""


class PathUploadFileOperation(PathUploadMixin, _FileUploadOperation):
    """Uploads a file for a ``PathUploadRequest``."""
