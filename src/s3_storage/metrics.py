"""Prometheus metrics for the S3 storage library."""

from prometheus_client import Counter, Histogram

# Upload metrics
upload_total = Counter(
    "s3_storage_upload_total",
    "Total number of uploads",
    ["operation", "result"],
)

upload_duration_seconds = Histogram(
    "s3_storage_upload_duration_seconds",
    "Duration of uploads in seconds",
    ["operation"],
    buckets=[0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0],
)

upload_bytes_total = Counter(
    "s3_storage_upload_bytes_total",
    "Total number of bytes reported as transferred",
    ["operation"],
)

# Storage class usage
upload_storage_class_total = Counter(
    "s3_storage_upload_storage_class_total",
    "Uploads per resolved storage class",
    ["storage_class"],
)
