"""Upload options and their builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Mapping, TypeVar

from .models import (
    ServerSideEncryption,
    StorageAccessLevel,
    StorageClass,
    copy_metadata,
    freeze_metadata,
    readonly_metadata,
)

_O = TypeVar("_O", bound="UploadOptions")


@dataclass(frozen=True)
class UploadOptions:
    """Immutable configuration attached to an upload.

    Instances are created through ``builder()`` or ``from_options()``. Two
    options with equal field values are equal and hash alike; the order of
    ``metadata`` entries does not matter.

    ``storage_class`` stays ``None`` until a caller picks one. The service
    default is applied when the upload metadata is built, never here.
    """

    access_level: StorageAccessLevel | None = None
    target_identity_id: str | None = None
    content_type: str | None = None
    server_side_encryption: ServerSideEncryption = ServerSideEncryption.NONE
    metadata: Mapping[str, str] = field(default_factory=dict)
    use_accelerate_endpoint: bool = False
    storage_class: StorageClass | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", readonly_metadata(self.metadata))

    def __hash__(self) -> int:
        return hash(
            (
                type(self),
                self.access_level,
                self.target_identity_id,
                self.content_type,
                self.server_side_encryption,
                freeze_metadata(self.metadata),
                self.use_accelerate_endpoint,
                self.storage_class,
            )
        )

    @classmethod
    def builder(cls: type[_O]) -> UploadOptions.Builder[_O]:
        """Return a builder with every field at its default."""
        return UploadOptions.Builder(cls)

    @classmethod
    def from_options(cls: type[_O], options: UploadOptions) -> UploadOptions.Builder[_O]:
        """Return a builder seeded with every field of ``options``.

        Calling ``build()`` without further changes gives a value equal to
        ``options`` (when ``options`` is of the same type).
        """
        return (
            cls.builder()
            .access_level(options.access_level)
            .target_identity_id(options.target_identity_id)
            .content_type(options.content_type)
            .server_side_encryption(options.server_side_encryption)
            .metadata(options.metadata)
            .use_accelerate_endpoint(options.use_accelerate_endpoint)
            .storage_class(options.storage_class)
        )

    @classmethod
    def default_instance(cls: type[_O]) -> _O:
        """Return options with every field at its default."""
        return cls.builder().build()

    class Builder(Generic[_O]):
        """Mutable accumulator producing immutable upload options."""

        def __init__(self, options_cls: type[_O]) -> None:
            self._options_cls = options_cls
            self._access_level: StorageAccessLevel | None = None
            self._target_identity_id: str | None = None
            self._content_type: str | None = None
            self._server_side_encryption = ServerSideEncryption.NONE
            self._metadata: dict[str, str] = {}
            self._use_accelerate_endpoint = False
            self._storage_class: StorageClass | None = None

        def access_level(self, access_level: StorageAccessLevel | None) -> UploadOptions.Builder[_O]:
            self._access_level = access_level
            return self

        def target_identity_id(self, target_identity_id: str | None) -> UploadOptions.Builder[_O]:
            self._target_identity_id = target_identity_id
            return self

        def content_type(self, content_type: str | None) -> UploadOptions.Builder[_O]:
            self._content_type = content_type
            return self

        def server_side_encryption(
            self, server_side_encryption: ServerSideEncryption
        ) -> UploadOptions.Builder[_O]:
            self._server_side_encryption = server_side_encryption
            return self

        def metadata(self, metadata: Mapping[str, str]) -> UploadOptions.Builder[_O]:
            self._metadata = copy_metadata(metadata)
            return self

        def use_accelerate_endpoint(self, use_accelerate_endpoint: bool) -> UploadOptions.Builder[_O]:
            self._use_accelerate_endpoint = use_accelerate_endpoint
            return self

        def storage_class(self, storage_class: StorageClass | None) -> UploadOptions.Builder[_O]:
            self._storage_class = storage_class
            return self

        def build(self) -> _O:
            """Snapshot the current field values."""
            return self._options_cls(
                access_level=self._access_level,
                target_identity_id=self._target_identity_id,
                content_type=self._content_type,
                server_side_encryption=self._server_side_encryption,
                metadata=self._metadata,
                use_accelerate_endpoint=self._use_accelerate_endpoint,
                storage_class=self._storage_class,
            )


class UploadFileOptions(UploadOptions):
    """Options for uploading a local file."""


class UploadInputStreamOptions(UploadOptions):
    """Options for uploading from a binary stream."""
