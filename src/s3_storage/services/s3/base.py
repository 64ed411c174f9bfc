"""Base storage service interface."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Callable, Optional, Protocol

from ...models import ObjectMetadata, TransferProgress

ProgressCallback = Callable[[TransferProgress], None]


class StorageService(Protocol):
    """Protocol defining the uploads an operation forwards to."""

    def upload_file(
        self,
        transfer_id: str,
        service_key: str,
        local_file: Path,
        metadata: ObjectMetadata,
        use_accelerate_endpoint: bool,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        """Upload a local file to ``service_key``.

        Raises on failure; returning normally means the upload completed.
        """
        ...

    def upload_input_stream(
        self,
        transfer_id: str,
        service_key: str,
        input_stream: BinaryIO,
        metadata: ObjectMetadata,
        use_accelerate_endpoint: bool,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        """Upload the contents of a binary stream to ``service_key``."""
        ...


class IdentityIdProvider(Protocol):
    """Source of the signed-in identity id used for protected and private keys."""

    def get_identity_id(self) -> str:
        """Return the current identity id.

        Raises:
            StorageException: If no identity is available
        """
        ...
