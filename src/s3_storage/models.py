"""Models for S3 storage uploads."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .constants import (
    METADATA_CONTENT_TYPE,
    METADATA_SERVER_SIDE_ENCRYPTION,
    METADATA_STORAGE_CLASS,
)
from .utils.errors import StorageException


class StorageClass(Enum):
    """S3 storage tier of an uploaded object.

    The value of each member is the label sent to the service. A storage
    class that has not been chosen is represented by ``None``, in which case
    the service default (``STANDARD``) applies.
    """

    STANDARD = "STANDARD"
    REDUCED_REDUNDANCY = "REDUCED_REDUNDANCY"
    STANDARD_IA = "STANDARD_IA"
    ONEZONE_IA = "ONEZONE_IA"
    INTELLIGENT_TIERING = "INTELLIGENT_TIERING"
    GLACIER = "GLACIER"
    GLACIER_IR = "GLACIER_IR"
    DEEP_ARCHIVE = "DEEP_ARCHIVE"
    OUTPOSTS = "OUTPOSTS"
    SNOW = "SNOW"
    EXPRESS_ONEZONE = "EXPRESS_ONEZONE"

    @classmethod
    def from_value(cls, value: str) -> StorageClass:
        """Parse a storage class label such as ``"GLACIER_IR"``.

        Args:
            value: Storage class label (case-insensitive)

        Returns:
            Matching storage class

        Raises:
            ValueError: If the label is not a known storage class
        """
        normalized = value.strip().upper()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported storage class: {value}")


class ServerSideEncryption(Enum):
    """Server-side encryption applied to an uploaded object."""

    NONE = "NONE"
    AES256 = "AES256"
    KMS = "aws:kms"

    @classmethod
    def from_value(cls, value: str) -> ServerSideEncryption:
        """Parse an encryption label such as ``"AES256"`` or ``"aws:kms"`` (case-insensitive)."""
        normalized = value.strip().lower()
        for member in cls:
            if normalized in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unsupported server side encryption: {value}")


class StorageAccessLevel(Enum):
    """Access level controlling the key prefix of key-based uploads."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"

    def prefix(self, identity_id: str | None) -> str:
        """Return the service key prefix for this access level.

        Args:
            identity_id: Identity owning protected and private objects

        Raises:
            StorageException: If a protected or private prefix has no identity
        """
        if self is StorageAccessLevel.PUBLIC:
            return "public/"
        if not identity_id:
            raise StorageException(
                f"An identity id is required for {self.value} access level.",
                "Sign in or pass a target identity id with the upload options.",
            )
        return f"{self.value}/{identity_id}/"


class StoragePath:
    """Location of an object, either a fixed string or derived from an identity id."""

    def __init__(self, resolver: Callable[[str | None], str]) -> None:
        self._resolver = resolver

    @classmethod
    def from_string(cls, path: str) -> StoragePath:
        """Create a path that resolves to ``path`` as-is."""
        return _StringStoragePath(path)

    @classmethod
    def from_identity_id(cls, resolver: Callable[[str], str]) -> StoragePath:
        """Create a path computed from the current identity id."""

        def _resolve(identity_id: str | None) -> str:
            if not identity_id:
                raise StorageException(
                    "Unable to resolve the storage path without an identity id.",
                    "Sign in before uploading to an identity id based path.",
                )
            return resolver(identity_id)

        return cls(_resolve)

    @property
    def requires_identity_id(self) -> bool:
        """Whether resolving this path needs the current identity id."""
        return True

    def resolve(self, identity_id: str | None = None) -> str:
        """Resolve the path to a service key.

        Raises:
            StorageException: If the resolved path is empty or starts with "/"
        """
        path = self._resolver(identity_id)
        if not path:
            raise StorageException(
                "Invalid StoragePath provided.",
                "The storage path must not be empty.",
            )
        if path.startswith("/"):
            raise StorageException(
                "Invalid StoragePath provided.",
                "The storage path must not start with a leading '/'.",
            )
        return path

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<resolver>)"


class _StringStoragePath(StoragePath):
    def __init__(self, path: str) -> None:
        super().__init__(lambda _identity_id: path)
        self.path = path

    @property
    def requires_identity_id(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _StringStoragePath):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"StoragePath({self.path!r})"


@dataclass
class ObjectMetadata:
    """Metadata sent with an uploaded object.

    ``metadata`` holds system keys (content type, storage class, encryption),
    ``user_metadata`` holds custom ``x-amz-meta-*`` values.
    """

    CONTENT_TYPE = METADATA_CONTENT_TYPE
    STORAGE_CLASS = METADATA_STORAGE_CLASS
    SERVER_SIDE_ENCRYPTION = METADATA_SERVER_SIDE_ENCRYPTION

    metadata: dict[str, str] = field(default_factory=dict)
    user_metadata: dict[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> str | None:
        return self.metadata.get(self.CONTENT_TYPE)

    @property
    def storage_class(self) -> str | None:
        return self.metadata.get(self.STORAGE_CLASS)

    @property
    def server_side_encryption(self) -> str | None:
        return self.metadata.get(self.SERVER_SIDE_ENCRYPTION)


@dataclass(frozen=True)
class TransferProgress:
    """Bytes transferred so far for a single upload."""

    current_bytes: int
    total_bytes: int | None = None

    @property
    def fraction(self) -> float | None:
        if not self.total_bytes:
            return None
        return self.current_bytes / self.total_bytes


@dataclass(frozen=True)
class UploadFileResult:
    """Result of a completed file upload."""

    key: str


@dataclass(frozen=True)
class UploadInputStreamResult:
    """Result of a completed input stream upload."""

    key: str


def freeze_metadata(metadata: Mapping[str, str]) -> frozenset[tuple[str, str]]:
    """Order-independent, hashable view of a metadata mapping."""
    return frozenset(metadata.items())


def copy_metadata(metadata: Mapping[str, Any] | None) -> dict[str, str]:
    """Copy a metadata mapping so later changes to the source are not seen.

    Raises:
        ValueError: If a key or value is not a string
    """
    copied: dict[str, str] = {}
    for key, value in (metadata or {}).items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError(f"Metadata keys and values must be strings: {key!r}={value!r}")
        copied[key] = value
    return copied


def readonly_metadata(metadata: Mapping[str, Any] | None) -> Mapping[str, str]:
    """Copy a metadata mapping into a read-only view."""
    return MappingProxyType(copy_metadata(metadata))
