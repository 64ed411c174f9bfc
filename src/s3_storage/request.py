"""Upload requests handed to upload operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

from .models import (
    ServerSideEncryption,
    StorageAccessLevel,
    StorageClass,
    StoragePath,
    copy_metadata,
    freeze_metadata,
    readonly_metadata,
)
from .options import UploadOptions

_L = TypeVar("_L")


@dataclass(frozen=True)
class UploadRequest(Generic[_L]):
    """Key-based upload of ``local`` to ``key`` under an access level prefix.

    The first eight positional arguments are the long-standing constructor
    shape. ``storage_class`` was added last and defaults to ``None``: a
    request built without it is identical to one built with
    ``storage_class=None``, and the service default is only applied when the
    operation builds the upload metadata.
    """

    key: str
    local: _L
    access_level: StorageAccessLevel | None
    target_identity_id: str | None
    content_type: str | None
    server_side_encryption: ServerSideEncryption
    metadata: Mapping[str, str]
    use_accelerate_endpoint: bool
    storage_class: StorageClass | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", readonly_metadata(self.metadata))

    def __hash__(self) -> int:
        # local is left out: byte arrays and some streams are unhashable
        return hash(
            (
                self.key,
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
    def from_options(cls, key: str, local: _L, options: UploadOptions) -> UploadRequest[_L]:
        """Build a request carrying every field of ``options``."""
        return cls(
            key,
            local,
            options.access_level,
            options.target_identity_id,
            options.content_type,
            options.server_side_encryption,
            options.metadata,
            options.use_accelerate_endpoint,
            options.storage_class,
        )

    @classmethod
    def builder(cls) -> UploadRequestBuilder:
        return UploadRequestBuilder()


@dataclass(frozen=True)
class PathUploadRequest(Generic[_L]):
    """Upload of ``local`` to a ``StoragePath``.

    Like ``UploadRequest``, the trailing ``storage_class`` may be omitted and
    then reads as ``None``.
    """

    path: StoragePath
    local: _L
    content_type: str | None
    server_side_encryption: ServerSideEncryption
    metadata: Mapping[str, str]
    use_accelerate_endpoint: bool
    storage_class: StorageClass | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", readonly_metadata(self.metadata))

    def __hash__(self) -> int:
        return hash(
            (
                self.path,
                self.content_type,
                self.server_side_encryption,
                freeze_metadata(self.metadata),
                self.use_accelerate_endpoint,
                self.storage_class,
            )
        )

    @classmethod
    def from_options(cls, path: StoragePath, local: _L, options: UploadOptions) -> PathUploadRequest[_L]:
        """Build a path request from ``options``; the legacy access fields are ignored."""
        return cls(
            path,
            local,
            options.content_type,
            options.server_side_encryption,
            options.metadata,
            options.use_accelerate_endpoint,
            options.storage_class,
        )

    @classmethod
    def builder(cls) -> PathUploadRequestBuilder:
        return PathUploadRequestBuilder()


class _RequestBuilder:
    """Fields shared by both request builders."""

    def __init__(self) -> None:
        self._local: Any = None
        self._content_type: str | None = None
        self._server_side_encryption = ServerSideEncryption.NONE
        self._metadata: dict[str, str] = {}
        self._use_accelerate_endpoint = False
        self._storage_class: StorageClass | None = None

    def local(self, local: Any) -> Any:
        self._local = local
        return self

    def content_type(self, content_type: str | None) -> Any:
        self._content_type = content_type
        return self

    def server_side_encryption(self, server_side_encryption: ServerSideEncryption) -> Any:
        self._server_side_encryption = server_side_encryption
        return self

    def metadata(self, metadata: Mapping[str, str]) -> Any:
        self._metadata = copy_metadata(metadata)
        return self

    def use_accelerate_endpoint(self, use_accelerate_endpoint: bool) -> Any:
        self._use_accelerate_endpoint = use_accelerate_endpoint
        return self

    def storage_class(self, storage_class: StorageClass | None) -> Any:
        self._storage_class = storage_class
        return self

    def _require_local(self) -> None:
        if self._local is None:
            raise ValueError("local is required")


class UploadRequestBuilder(_RequestBuilder):
    """Builder for ``UploadRequest``."""

    def __init__(self) -> None:
        super().__init__()
        self._key: str | None = None
        self._access_level: StorageAccessLevel | None = None
        self._target_identity_id: str | None = None

    def key(self, key: str) -> UploadRequestBuilder:
        self._key = key
        return self

    def access_level(self, access_level: StorageAccessLevel | None) -> UploadRequestBuilder:
        self._access_level = access_level
        return self

    def target_identity_id(self, target_identity_id: str | None) -> UploadRequestBuilder:
        self._target_identity_id = target_identity_id
        return self

    def build(self) -> UploadRequest[Any]:
        """Build the request.

        Raises:
            ValueError: If key or local is missing
        """
        if not self._key:
            raise ValueError("key is required")
        self._require_local()
        return UploadRequest(
            self._key,
            self._local,
            self._access_level,
            self._target_identity_id,
            self._content_type,
            self._server_side_encryption,
            self._metadata,
            self._use_accelerate_endpoint,
            self._storage_class,
        )


class PathUploadRequestBuilder(_RequestBuilder):
    """Builder for ``PathUploadRequest``."""

    def __init__(self) -> None:
        super().__init__()
        self._path: StoragePath | None = None

    def path(self, path: StoragePath) -> PathUploadRequestBuilder:
        self._path = path
        return self

    def build(self) -> PathUploadRequest[Any]:
        """Build the request.

        Raises:
            ValueError: If path or local is missing
        """
        if self._path is None:
            raise ValueError("path is required")
        self._require_local()
        return PathUploadRequest(
            self._path,
            self._local,
            self._content_type,
            self._server_side_encryption,
            self._metadata,
            self._use_accelerate_endpoint,
            self._storage_class,
        )
