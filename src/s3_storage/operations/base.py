"""Base upload operation with common functionality for all upload variants."""

from __future__ import annotations

import logging
import threading
import time
import uuid
from concurrent.futures import Executor, Future
from typing import Any, Callable, Generic, Optional, TypeVar

from .. import metrics
from ..constants import (
    EVENT_CALLBACK_FAILED,
    EVENT_TRANSFER_COMPLETED,
    EVENT_TRANSFER_FAILED,
    EVENT_TRANSFER_STARTED,
)
from ..executors import DirectExecutor
from ..logging import log_transfer_event
from ..models import ObjectMetadata, StorageAccessLevel, StoragePath, TransferProgress
from ..services.s3.base import IdentityIdProvider, StorageService
from ..tracing import set_span_status, trace_span
from ..utils.context import with_correlation_id
from ..utils.errors import StorageException, sanitize_exception

_R = TypeVar("_R")
_T = TypeVar("_T")

ResultCallback = Callable[[_T], None]
ErrorCallback = Callable[[StorageException], None]
ProgressListener = Callable[[TransferProgress], None]


def _noop(_value: Any) -> None:
    return None


class BaseUploadOperation(Generic[_R, _T]):
    """Base class for upload operations.

    An operation turns its request into object metadata and forwards a single
    upload to the storage service. ``start()`` runs that work on the
    executor; afterwards exactly one of ``on_success`` or ``on_error`` is
    called.

    Subclasses set ``operation_name`` and implement ``_resolve_service_key``,
    ``_build_metadata``, ``_forward`` and ``_result``.
    """

    operation_name = "upload"

    def __init__(
        self,
        request: _R,
        storage_service: StorageService,
        executor: Executor | None = None,
        identity_id_provider: IdentityIdProvider | None = None,
        on_progress: Optional[ProgressListener] = None,
        on_success: Optional[ResultCallback[_T]] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        self.request = request
        self.storage_service = storage_service
        self.executor = executor or DirectExecutor()
        self.identity_id_provider = identity_id_provider
        self.on_progress = on_progress
        self.on_success = on_success or _noop
        self.on_error = on_error or _noop
        self.transfer_id = str(uuid.uuid4())
        self.logger = logging.getLogger(__name__)
        self._future: Future | None = None
        self._lock = threading.Lock()

    @property
    def future(self) -> Future | None:
        """Future of the submitted work, None until started."""
        return self._future

    def start(self) -> None:
        """Submit the upload to the executor. Calling it again has no effect."""
        with self._lock:
            if self._future is not None:
                return
            self._future = self.executor.submit(self._run)

    def _identity_id(self) -> str | None:
        if self.identity_id_provider is None:
            return None
        return self.identity_id_provider.get_identity_id()

    def _resolve_service_key(self) -> str:
        raise NotImplementedError

    def _build_metadata(self) -> ObjectMetadata:
        raise NotImplementedError

    def _forward(self, service_key: str, metadata: ObjectMetadata) -> None:
        raise NotImplementedError

    def _result(self, service_key: str) -> _T:
        raise NotImplementedError

    def _to_storage_exception(self, error: Exception) -> StorageException:
        if isinstance(error, StorageException):
            return error
        return StorageException(
            f"Something went wrong with your S3 storage {self.operation_name} operation",
            "See attached exception for more information and suggestions",
            cause=error,
        )

    def _run(self) -> None:
        with with_correlation_id(self.transfer_id), trace_span(
            f"s3_storage.{self.operation_name}",
            attributes={"transfer.id": self.transfer_id},
        ):
            start_time = time.time()
            service_key: str | None = None
            try:
                service_key = self._resolve_service_key()
                metadata = self._build_metadata()
                self.log_info(
                    service_key,
                    "Upload started",
                    event=EVENT_TRANSFER_STARTED,
                    storage_class=metadata.storage_class,
                )
                self._forward(service_key, metadata)
            except Exception as e:
                error = self._to_storage_exception(e)
                metrics.upload_total.labels(operation=self.operation_name, result="failed").inc()
                self.log_error(service_key, "Upload failed", error=error.cause or error)
                set_span_status(False, error.message)
                self._notify(self.on_error, error, service_key, "error")
                return
            finally:
                metrics.upload_duration_seconds.labels(operation=self.operation_name).observe(
                    time.time() - start_time
                )

            metrics.upload_total.labels(operation=self.operation_name, result="success").inc()
            metrics.upload_storage_class_total.labels(storage_class=metadata.storage_class).inc()
            self.log_info(service_key, "Upload completed", event=EVENT_TRANSFER_COMPLETED)
            set_span_status(True)
            self._notify(self.on_success, self._result(service_key), service_key, "success")

    def _notify(self, callback: Callable[[Any], None], value: Any, key: str | None, kind: str) -> None:
        try:
            callback(value)
        except Exception as e:
            self.log_error(key, f"Upload {kind} callback failed", error=e, event=EVENT_CALLBACK_FAILED)
            raise

    def log_info(self, key: str | None, message: str, event: str = "info", **kwargs: Any) -> None:
        """Log an info-level transfer event."""
        log_transfer_event(
            self.logger,
            operation=self.operation_name,
            transfer_id=self.transfer_id,
            key=key,
            event=event,
            message=message,
            **kwargs,
        )

    def log_error(
        self,
        key: str | None,
        message: str,
        error: BaseException | None = None,
        event: str = EVENT_TRANSFER_FAILED,
        **kwargs: Any,
    ) -> None:
        """Log an error-level transfer event with sanitized error details."""
        log_data = kwargs.copy()
        if error is not None:
            log_data["error"] = sanitize_exception(error)
            log_data["error_type"] = type(error).__name__
        log_transfer_event(
            self.logger,
            operation=self.operation_name,
            transfer_id=self.transfer_id,
            key=key,
            event=event,
            message=message,
            level=logging.ERROR,
            **log_data,
        )


class KeyUploadMixin:
    """Service key resolution for key-based requests (access level prefix + key)."""

    request: Any

    def _resolve_service_key(self) -> str:
        access_level = self.request.access_level or StorageAccessLevel.PUBLIC
        identity_id = None
        if access_level is not StorageAccessLevel.PUBLIC:
            identity_id = self.request.target_identity_id or self._identity_id()
        return access_level.prefix(identity_id) + self.request.key

    def _result(self, service_key: str) -> Any:
        return self.result_type(self.request.key)  # type: ignore[attr-defined]


class PathUploadMixin:
    """Service key resolution for ``StoragePath`` requests."""

    request: Any

    def _resolve_service_key(self) -> str:
        path: StoragePath = self.request.path
        identity_id = self._identity_id() if path.requires_identity_id else None
        return path.resolve(identity_id)

    def _result(self, service_key: str) -> Any:
        return self.result_type(service_key)  # type: ignore[attr-defined]
