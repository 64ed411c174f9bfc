"""Shared fixtures for unit tests."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import pytest

from s3_storage.models import ObjectMetadata, TransferProgress
from s3_storage.services.s3.base import ProgressCallback


@dataclass
class UploadCall:
    """Arguments of one storage service call."""

    method: str
    transfer_id: str
    service_key: str
    local: Any
    metadata: ObjectMetadata
    use_accelerate_endpoint: bool


class RecordingStorageService:
    """Storage service test double recording every upload it receives."""

    def __init__(
        self,
        error: Exception | None = None,
        progress: tuple[TransferProgress, ...] = (),
    ) -> None:
        self.calls: list[UploadCall] = []
        self.error = error
        self.progress = progress

    @property
    def last_call(self) -> UploadCall:
        assert self.calls, "storage service was not called"
        return self.calls[-1]

    def _record(
        self,
        method: str,
        transfer_id: str,
        service_key: str,
        local: Any,
        metadata: ObjectMetadata,
        use_accelerate_endpoint: bool,
        on_progress: Optional[ProgressCallback],
    ) -> None:
        self.calls.append(
            UploadCall(method, transfer_id, service_key, local, metadata, use_accelerate_endpoint)
        )
        if on_progress is not None:
            for progress in self.progress:
                on_progress(progress)
        if self.error is not None:
            raise self.error

    def upload_file(
        self,
        transfer_id: str,
        service_key: str,
        local_file: Path,
        metadata: ObjectMetadata,
        use_accelerate_endpoint: bool,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        self._record(
            "upload_file", transfer_id, service_key, local_file, metadata,
            use_accelerate_endpoint, on_progress,
        )

    def upload_input_stream(
        self,
        transfer_id: str,
        service_key: str,
        input_stream: Any,
        metadata: ObjectMetadata,
        use_accelerate_endpoint: bool,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        self._record(
            "upload_input_stream", transfer_id, service_key, input_stream, metadata,
            use_accelerate_endpoint, on_progress,
        )


class StaticIdentityIdProvider:
    """Identity id provider returning a fixed identity."""

    def __init__(self, identity_id: str = "us-east-1:identity-123") -> None:
        self.identity_id = identity_id
        self.calls = 0

    def get_identity_id(self) -> str:
        self.calls += 1
        return self.identity_id


@pytest.fixture
def storage_service() -> RecordingStorageService:
    """Create a recording storage service."""
    return RecordingStorageService()


@pytest.fixture
def identity_id_provider() -> StaticIdentityIdProvider:
    """Create an identity id provider."""
    return StaticIdentityIdProvider()


@pytest.fixture
def temp_file(tmp_path: Path) -> Path:
    """Create a small local file to upload."""
    path = tmp_path / "test.txt"
    path.write_text("hello storage")
    return path
