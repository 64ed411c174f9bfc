"""Translation of upload requests into object metadata."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Mapping

from ..config import get_default_content_type
from ..models import ObjectMetadata, ServerSideEncryption, StorageClass, copy_metadata


def resolve_storage_class(storage_class: StorageClass | None) -> StorageClass:
    """Return the storage class actually sent, applying the service default."""
    return storage_class or StorageClass.STANDARD


def guess_content_type(local_file: Path) -> str | None:
    """Guess a content type from a file name."""
    content_type, _ = mimetypes.guess_type(local_file.name)
    return content_type


def build_object_metadata(
    content_type: str | None,
    server_side_encryption: ServerSideEncryption,
    metadata: Mapping[str, str],
    storage_class: StorageClass | None,
) -> ObjectMetadata:
    """Build the metadata transmitted with an upload.

    Args:
        content_type: Content type, or None for the configured default
        server_side_encryption: Encryption; omitted from the metadata when NONE
        metadata: Custom user metadata, copied verbatim
        storage_class: Storage class, or None for STANDARD

    Returns:
        Object metadata for the storage service
    """
    object_metadata = ObjectMetadata(user_metadata=copy_metadata(metadata))
    object_metadata.metadata[ObjectMetadata.CONTENT_TYPE] = content_type or get_default_content_type()
    if server_side_encryption is not ServerSideEncryption.NONE:
        object_metadata.metadata[ObjectMetadata.SERVER_SIDE_ENCRYPTION] = server_side_encryption.value
    object_metadata.metadata[ObjectMetadata.STORAGE_CLASS] = resolve_storage_class(storage_class).value
    return object_metadata
