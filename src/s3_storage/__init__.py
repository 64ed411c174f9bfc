"""S3 storage uploads with configurable storage class."""

from .models import (
    ObjectMetadata,
    ServerSideEncryption,
    StorageAccessLevel,
    StorageClass,
    StoragePath,
    TransferProgress,
    UploadFileResult,
    UploadInputStreamResult,
)
from .operations import (
    PathUploadFileOperation,
    PathUploadInputStreamOperation,
    UploadFileOperation,
    UploadInputStreamOperation,
)
from .options import UploadFileOptions, UploadInputStreamOptions, UploadOptions
from .plugin import S3StoragePlugin
from .request import PathUploadRequest, UploadRequest
from .services import AWSS3StorageService, StorageService
from .utils.errors import StorageException

__version__ = "0.1.0"

__all__ = [
    "AWSS3StorageService",
    "ObjectMetadata",
    "PathUploadFileOperation",
    "PathUploadInputStreamOperation",
    "PathUploadRequest",
    "S3StoragePlugin",
    "ServerSideEncryption",
    "StorageAccessLevel",
    "StorageClass",
    "StorageException",
    "StoragePath",
    "StorageService",
    "TransferProgress",
    "UploadFileOperation",
    "UploadFileOptions",
    "UploadFileResult",
    "UploadInputStreamOperation",
    "UploadInputStreamOptions",
    "UploadInputStreamResult",
    "UploadOptions",
    "UploadRequest",
]
