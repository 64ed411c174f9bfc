"""Builder for upload options."""

from __future__ import annotations

from typing import Any, TypeVar

from ..models import ServerSideEncryption, StorageAccessLevel, StorageClass
from ..options import UploadFileOptions, UploadOptions

_O = TypeVar("_O", bound=UploadOptions)


def create_upload_options_from_spec(
    spec: dict[str, Any],
    options_cls: type[_O] = UploadFileOptions,  # type: ignore[assignment]
) -> _O:
    """Create upload options from a configuration spec.

    Args:
        spec: Options spec using camelCase keys (``contentType``,
            ``storageClass``, ``serverSideEncryption``, ``metadata``,
            ``useAccelerateEndpoint``, ``accessLevel``, ``targetIdentityId``)
        options_cls: Options type to build

    Returns:
        Built upload options

    Raises:
        ValueError: If a storage class, encryption or access level is unknown,
            or a metadata value is not a string
    """
    builder = options_cls.builder()

    # Storage class stays unset unless configured
    storage_class = spec.get("storageClass")
    if storage_class:
        builder.storage_class(StorageClass.from_value(storage_class))

    encryption = spec.get("serverSideEncryption")
    if encryption:
        builder.server_side_encryption(ServerSideEncryption.from_value(encryption))

    access_level = spec.get("accessLevel")
    if access_level:
        try:
            builder.access_level(StorageAccessLevel(access_level.lower()))
        except ValueError:
            raise ValueError(f"Unsupported access level: {access_level}") from None

    return (
        builder.content_type(spec.get("contentType"))
        .target_identity_id(spec.get("targetIdentityId"))
        .metadata(spec.get("metadata", {}))
        .use_accelerate_endpoint(spec.get("useAccelerateEndpoint", False))
        .build()
    )
