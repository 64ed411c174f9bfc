"""Storage services used by upload operations."""

from .aws.client import AWSS3StorageService
from .s3.base import IdentityIdProvider, ProgressCallback, StorageService

__all__ = ["AWSS3StorageService", "IdentityIdProvider", "ProgressCallback", "StorageService"]
