"""Environment configuration for the S3 storage library."""

from __future__ import annotations

import os

from .constants import DEFAULT_CONTENT_TYPE


def get_default_bucket() -> str | None:
    """Bucket used when a service spec does not name one."""
    return os.getenv("S3_STORAGE_BUCKET")


def get_default_region() -> str | None:
    """Region used when a service spec does not name one."""
    return os.getenv("S3_STORAGE_REGION", os.getenv("AWS_REGION"))


def get_default_endpoint() -> str | None:
    """Custom endpoint URL (e.g. for S3 compatible providers)."""
    return os.getenv("S3_STORAGE_ENDPOINT")


def get_path_style() -> bool:
    """Whether path-style addressing is used by default."""
    return os.getenv("S3_STORAGE_PATH_STYLE", "false").lower() == "true"


def get_default_content_type() -> str:
    """Content type sent when none is set and none can be guessed."""
    return os.getenv("S3_STORAGE_DEFAULT_CONTENT_TYPE", DEFAULT_CONTENT_TYPE)
