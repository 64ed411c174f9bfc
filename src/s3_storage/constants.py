"""Constants for the S3 storage library."""

# Object metadata keys
METADATA_CONTENT_TYPE = "Content-Type"
METADATA_STORAGE_CLASS = "x-amz-storage-class"
METADATA_SERVER_SIDE_ENCRYPTION = "x-amz-server-side-encryption"

# Content types
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Operation names (used for logging and metrics labels)
OPERATION_UPLOAD_FILE = "upload_file"
OPERATION_UPLOAD_INPUT_STREAM = "upload_input_stream"

# Transfer events
EVENT_TRANSFER_STARTED = "TransferStarted"
EVENT_TRANSFER_COMPLETED = "TransferCompleted"
EVENT_TRANSFER_FAILED = "TransferFailed"
EVENT_CALLBACK_FAILED = "CallbackFailed"

# Logger name used in structured events
COMPONENT = "s3-storage"
