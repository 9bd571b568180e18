"""Application-layer errors — misuse of the harness API or its configuration."""

from __future__ import annotations

from latency_harness.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
