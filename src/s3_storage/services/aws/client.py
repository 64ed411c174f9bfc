"""AWS S3 storage service implementation."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, BinaryIO, Callable, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ... import metrics
from ...constants import OPERATION_UPLOAD_FILE, OPERATION_UPLOAD_INPUT_STREAM
from ...models import ObjectMetadata, TransferProgress
from ..s3.base import ProgressCallback

logger = logging.getLogger(__name__)


class AWSS3StorageService:
    """Storage service uploading to a single S3 bucket through boto3."""

    def __init__(
        self,
        bucket: str,
        region: str,
        access_key: str | None = None,
        secret_key: str | None = None,
        session_token: str | None = None,
        endpoint: str | None = None,
        path_style: bool = False,
    ) -> None:
        """Initialize the S3 storage service.

        Args:
            bucket: Bucket receiving uploads
            region: AWS region
            access_key: Optional access key ID (default credential chain otherwise)
            secret_key: Optional secret access key
            session_token: Optional session token for temporary credentials
            endpoint: Optional S3 endpoint URL
            path_style: Use path-style addressing
        """
        self.bucket = bucket
        self.region = region
        self.endpoint = endpoint
        self.path_style = path_style
        self._client_kwargs: dict[str, Any] = {
            "endpoint_url": endpoint,
            "region_name": region,
            "aws_access_key_id": access_key,
            "aws_secret_access_key": secret_key,
            "aws_session_token": session_token,
        }

        self.client = boto3.client("s3", config=self._build_config(accelerate=False), **self._client_kwargs)

        # Built on first accelerated upload
        self._accelerate_client: Any = None
        self._lock = threading.Lock()

    def _build_config(self, accelerate: bool) -> Config:
        s3_config: dict[str, Any] = {"addressing_style": "path" if self.path_style else "auto"}
        if accelerate:
            s3_config = {"use_accelerate_endpoint": True}
        return Config(signature_version="s3v4", s3=s3_config)

    def _get_client(self, use_accelerate_endpoint: bool) -> Any:
        if not use_accelerate_endpoint:
            return self.client
        with self._lock:
            if self._accelerate_client is None:
                self._accelerate_client = boto3.client(
                    "s3", config=self._build_config(accelerate=True), **self._client_kwargs
                )
            return self._accelerate_client

    @staticmethod
    def build_extra_args(metadata: ObjectMetadata) -> dict[str, Any]:
        """Translate object metadata into boto3 ``ExtraArgs``."""
        extra_args: dict[str, Any] = {}
        if metadata.content_type:
            extra_args["ContentType"] = metadata.content_type
        if metadata.storage_class:
            extra_args["StorageClass"] = metadata.storage_class
        if metadata.server_side_encryption:
            extra_args["ServerSideEncryption"] = metadata.server_side_encryption
        if metadata.user_metadata:
            extra_args["Metadata"] = dict(metadata.user_metadata)
        return extra_args

    @staticmethod
    def _progress_callback(
        operation: str,
        total_bytes: int | None,
        on_progress: Optional[ProgressCallback],
    ) -> Callable[[int], None]:
        transferred = 0
        lock = threading.Lock()

        def _callback(bytes_amount: int) -> None:
            nonlocal transferred
            with lock:
                transferred += bytes_amount
                current = transferred
            metrics.upload_bytes_total.labels(operation=operation).inc(bytes_amount)
            if on_progress is not None:
                on_progress(TransferProgress(current_bytes=current, total_bytes=total_bytes))

        return _callback

    def upload_file(
        self,
        transfer_id: str,
        service_key: str,
        local_file: Path,
        metadata: ObjectMetadata,
        use_accelerate_endpoint: bool,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        """Upload a local file."""
        local_file = Path(local_file)
        try:
            logger.debug(f"Uploading {local_file} to s3://{self.bucket}/{service_key} (transfer {transfer_id})")
            self._get_client(use_accelerate_endpoint).upload_file(
                str(local_file),
                self.bucket,
                service_key,
                ExtraArgs=self.build_extra_args(metadata),
                Callback=self._progress_callback(OPERATION_UPLOAD_FILE, local_file.stat().st_size, on_progress),
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to upload file to {service_key}: {e}")
            raise

    def upload_input_stream(
        self,
        transfer_id: str,
        service_key: str,
        input_stream: BinaryIO,
        metadata: ObjectMetadata,
        use_accelerate_endpoint: bool,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        """Upload the contents of a binary stream."""
        try:
            logger.debug(f"Uploading stream to s3://{self.bucket}/{service_key} (transfer {transfer_id})")
            self._get_client(use_accelerate_endpoint).upload_fileobj(
                input_stream,
                self.bucket,
                service_key,
                ExtraArgs=self.build_extra_args(metadata),
                Callback=self._progress_callback(OPERATION_UPLOAD_INPUT_STREAM, None, on_progress),
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Failed to upload stream to {service_key}: {e}")
            raise
