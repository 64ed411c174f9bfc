"""Upload operations forwarding requests to a storage service."""

from .base import BaseUploadOperation
from .metadata import build_object_metadata, resolve_storage_class
from .upload_file import PathUploadFileOperation, UploadFileOperation
from .upload_input_stream import PathUploadInputStreamOperation, UploadInputStreamOperation

__all__ = [
    "BaseUploadOperation",
    "PathUploadFileOperation",
    "PathUploadInputStreamOperation",
    "UploadFileOperation",
    "UploadInputStreamOperation",
    "build_object_metadata",
    "resolve_storage_class",
]
