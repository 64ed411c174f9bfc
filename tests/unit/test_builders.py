"""Unit tests for service and options builders."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from s3_storage.builders import create_storage_service_from_spec, create_upload_options_from_spec
from s3_storage.models import ServerSideEncryption, StorageAccessLevel, StorageClass
from s3_storage.options import UploadFileOptions, UploadInputStreamOptions


class TestStorageServiceBuilder:
    """Test storage service builder."""

    def test_basic_service(self) -> None:
        """Test creating a service from a spec."""
        service = create_storage_service_from_spec({
            "bucket": "test-bucket",
            "region": "us-west-2",
            "endpoint": "https://s3.wasabisys.com",
            "pathStyle": True,
            "auth": {"accessKeyId": "AKIAEXAMPLE", "secretAccessKey": "secret"},
        })

        assert service.bucket == "test-bucket"
        assert service.region == "us-west-2"
        assert service.endpoint == "https://s3.wasabisys.com"
        assert service.path_style is True

    def test_missing_bucket(self) -> None:
        """Test bucket is required."""
        with patch.dict("os.environ", {}, clear=True):
            with pytest.raises(ValueError, match="bucket and region are required"):
                create_storage_service_from_spec({"region": "us-east-1"})

    def test_environment_fallback(self) -> None:
        """Test bucket and region come from the environment."""
        env = {"S3_STORAGE_BUCKET": "env-bucket", "AWS_REGION": "eu-central-1"}
        with patch.dict("os.environ", env, clear=True):
            service = create_storage_service_from_spec({})

        assert service.bucket == "env-bucket"
        assert service.region == "eu-central-1"
        assert service.path_style is False

    def test_partial_credentials(self) -> None:
        """Test access key without secret key is rejected."""
        with pytest.raises(ValueError, match="must be set together"):
            create_storage_service_from_spec({
                "bucket": "b",
                "region": "us-east-1",
                "auth": {"accessKeyId": "AKIAEXAMPLE"},
            })


class TestUploadOptionsBuilder:
    """Test upload options builder."""

    def test_empty_spec(self) -> None:
        """Test an empty spec gives default options."""
        assert create_upload_options_from_spec({}) == UploadFileOptions.default_instance()

    def test_full_spec(self) -> None:
        """Test every supported key."""
        options = create_upload_options_from_spec({
            "contentType": "image/png",
            "storageClass": "GLACIER_IR",
            "serverSideEncryption": "AES256",
            "metadata": {"owner": "platform-team"},
            "useAccelerateEndpoint": True,
            "accessLevel": "protected",
            "targetIdentityId": "user-1",
        })

        assert options.content_type == "image/png"
        assert options.storage_class is StorageClass.GLACIER_IR
        assert options.server_side_encryption is ServerSideEncryption.AES256
        assert options.metadata == {"owner": "platform-team"}
        assert options.use_accelerate_endpoint is True
        assert options.access_level is StorageAccessLevel.PROTECTED
        assert options.target_identity_id == "user-1"

    def test_stream_options(self) -> None:
        """Test building input stream options."""
        options = create_upload_options_from_spec(
            {"storageClass": "onezone_ia"}, UploadInputStreamOptions
        )

        assert isinstance(options, UploadInputStreamOptions)
        assert options.storage_class is StorageClass.ONEZONE_IA

    def test_unknown_storage_class(self) -> None:
        """Test unknown storage classes are rejected."""
        with pytest.raises(ValueError, match="Unsupported storage class"):
            create_upload_options_from_spec({"storageClass": "FROZEN"})

    def test_lowercase_encryption(self) -> None:
        """Test encryption labels are accepted in any case."""
        options = create_upload_options_from_spec({"serverSideEncryption": "aes256"})

        assert options.server_side_encryption is ServerSideEncryption.AES256

    def test_non_string_metadata(self) -> None:
        """Test metadata values must be strings."""
        with pytest.raises(ValueError, match="must be strings"):
            create_upload_options_from_spec({"metadata": {"retention": 30}})

    def test_unknown_access_level(self) -> None:
        """Test unknown access levels are rejected."""
        with pytest.raises(ValueError, match="Unsupported access level"):
            create_upload_options_from_spec({"accessLevel": "secret"})
