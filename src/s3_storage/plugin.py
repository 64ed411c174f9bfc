"""Entry point wiring upload options into requests and operations."""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from pathlib import Path
from typing import BinaryIO, Optional

from .models import StorageAccessLevel, StoragePath, UploadFileResult, UploadInputStreamResult
from .operations.base import ErrorCallback, ProgressListener, ResultCallback
from .operations.upload_file import PathUploadFileOperation, UploadFileOperation
from .operations.upload_input_stream import PathUploadInputStreamOperation, UploadInputStreamOperation
from .options import UploadFileOptions, UploadInputStreamOptions, UploadOptions
from .request import PathUploadRequest, UploadRequest
from .services.s3.base import IdentityIdProvider, StorageService

logger = logging.getLogger(__name__)


class S3StoragePlugin:
    """Starts upload operations against a storage service."""

    def __init__(
        self,
        storage_service: StorageService,
        identity_id_provider: IdentityIdProvider | None = None,
        executor: Executor | None = None,
        default_access_level: StorageAccessLevel = StorageAccessLevel.PUBLIC,
    ) -> None:
        self.storage_service = storage_service
        self.identity_id_provider = identity_id_provider
        self.executor = executor
        self.default_access_level = default_access_level

    def _with_default_access_level(self, options: UploadOptions) -> UploadOptions:
        if options.access_level is not None:
            return options
        return type(options).from_options(options).access_level(self.default_access_level).build()

    def upload_file(
        self,
        key: str,
        local: Path | str,
        options: Optional[UploadOptions] = None,
        on_progress: Optional[ProgressListener] = None,
        on_success: Optional[ResultCallback[UploadFileResult]] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> UploadFileOperation:
        """Upload a local file to ``key`` under the options' access level."""
        options = self._with_default_access_level(options or UploadFileOptions.default_instance())
        request = UploadRequest.from_options(key, Path(local), options)
        operation = UploadFileOperation(
            request,
            self.storage_service,
            executor=self.executor,
            identity_id_provider=self.identity_id_provider,
            on_progress=on_progress,
            on_success=on_success,
            on_error=on_error,
        )
        logger.debug(f"Starting file upload {operation.transfer_id} for key {key}")
        operation.start()
        return operation

    def upload_input_stream(
        self,
        key: str,
        local: BinaryIO,
        options: Optional[UploadOptions] = None,
        on_progress: Optional[ProgressListener] = None,
        on_success: Optional[ResultCallback[UploadInputStreamResult]] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> UploadInputStreamOperation:
        """Upload a binary stream to ``key`` under the options' access level."""
        options = self._with_default_access_level(options or UploadInputStreamOptions.default_instance())
        request = UploadRequest.from_options(key, local, options)
        operation = UploadInputStreamOperation(
            request,
            self.storage_service,
            executor=self.executor,
            identity_id_provider=self.identity_id_provider,
            on_progress=on_progress,
            on_success=on_success,
            on_error=on_error,
        )
        logger.debug(f"Starting stream upload {operation.transfer_id} for key {key}")
        operation.start()
        return operation

    def upload_file_to_path(
        self,
        path: StoragePath,
        local: Path | str,
        options: Optional[UploadOptions] = None,
        on_progress: Optional[ProgressListener] = None,
        on_success: Optional[ResultCallback[UploadFileResult]] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> PathUploadFileOperation:
        """Upload a local file to a storage path."""
        request = PathUploadRequest.from_options(
            path, Path(local), options or UploadFileOptions.default_instance()
        )
        operation = PathUploadFileOperation(
            request,
            self.storage_service,
            executor=self.executor,
            identity_id_provider=self.identity_id_provider,
            on_progress=on_progress,
            on_success=on_success,
            on_error=on_error,
        )
        operation.start()
        return operation

    def upload_input_stream_to_path(
        self,
        path: StoragePath,
        local: BinaryIO,
        options: Optional[UploadOptions] = None,
        on_progress: Optional[ProgressListener] = None,
        on_success: Optional[ResultCallback[UploadInputStreamResult]] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> PathUploadInputStreamOperation:
        """Upload a binary stream to a storage path."""
        request = PathUploadRequest.from_options(
            path, local, options or UploadInputStreamOptions.default_instance()
        )
        operation = PathUploadInputStreamOperation(
            request,
            self.storage_service,
            executor=self.executor,
            identity_id_provider=self.identity_id_provider,
            on_progress=on_progress,
            on_success=on_success,
            on_error=on_error,
        )
        operation.start()
        return operation
