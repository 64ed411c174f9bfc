"""Correlation ID propagation for transfers."""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Any, Iterator

# Transfer id of the upload running in the current context
correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "correlation_id", default=None
)


def get_correlation_id() -> str | None:
    """Return the transfer id bound to the current context, if any."""
    return correlation_id.get()


@contextmanager
def with_correlation_id(transfer_id: str) -> Iterator[str]:
    """Bind ``transfer_id`` as the correlation id for the duration of a block."""
    token = correlation_id.set(transfer_id)
    try:
        yield transfer_id
    finally:
        correlation_id.reset(token)


def get_context_dict(additional: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return log fields for the current transfer merged with ``additional``."""
    ctx: dict[str, Any] = {}

    corr_id = get_correlation_id()
    if corr_id:
        ctx["correlation_id"] = corr_id

    if additional:
        ctx.update(additional)

    return ctx
