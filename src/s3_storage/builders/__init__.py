"""Builders for storage services and upload options."""

from .options import create_upload_options_from_spec
from .service import create_storage_service_from_spec

__all__ = ["create_storage_service_from_spec", "create_upload_options_from_spec"]
