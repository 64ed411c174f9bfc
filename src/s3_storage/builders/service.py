"""Builder for storage service instances."""

from __future__ import annotations

from typing import Any

from .. import config
from ..services.aws.client import AWSS3StorageService


def create_storage_service_from_spec(spec: dict[str, Any]) -> AWSS3StorageService:
    """Create a storage service from a configuration spec.

    Args:
        spec: Service spec with ``bucket``, ``region`` and optional
            ``endpoint``, ``pathStyle`` and ``auth`` keys. Missing values fall
            back to the environment.

    Returns:
        Configured storage service

    Raises:
        ValueError: If configuration is invalid
    """
    bucket = spec.get("bucket") or config.get_default_bucket()
    region = spec.get("region") or config.get_default_region()

    if not bucket or not region:
        raise ValueError("bucket and region are required")

    # Credentials are optional, boto3 falls back to its default chain
    auth = spec.get("auth", {})
    access_key = auth.get("accessKeyId")
    secret_key = auth.get("secretAccessKey")
    session_token = auth.get("sessionToken")

    if bool(access_key) != bool(secret_key):
        raise ValueError("accessKeyId and secretAccessKey must be set together")

    return AWSS3StorageService(
        bucket=bucket,
        region=region,
        access_key=access_key,
        secret_key=secret_key,
        session_token=session_token,
        endpoint=spec.get("endpoint") or config.get_default_endpoint(),
        path_style=spec.get("pathStyle", config.get_path_style()),
    )
