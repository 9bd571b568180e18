"""Harness errors — raised by install / restore, never by a wrapped handler."""

from __future__ import annotations

from typing import Any

from latency_harness.kernel.errors.base import BaseError


class HarnessError(BaseError):
    """A latency wrap could not be installed or restored."""

    default_code = "harness_error"

    def __init__(
        self,
        message: str,
        *,
        target: Any = None,
        handler_name: str | None = None,
        **kwargs: Any,
    ) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if target is not None:
            detail.setdefault("target", repr(target))
        if handler_name is not None:
            detail.setdefault("handler_name", handler_name)
        super().__init__(message, detail=detail, **kwargs)
        self.target = target
        self.handler_name = handler_name


class MissingHandlerError(HarnessError):
    """The target has no invocable member under the requested name."""

    default_code = "missing_handler"

    def __init__(self, target: Any, handler_name: str, reason: str = "does not exist", **kwargs: Any) -> None:
        super().__init__(
            f"Handler '{handler_name}' on {target!r} {reason}",
            target=target,
            handler_name=handler_name,
            **kwargs,
        )


class DoubleInstallError(HarnessError):
    """The backup slot for a handler is already occupied.

    Either the handler is still wrapped from an earlier install, or an
    unrelated member already lives under the backup name.
    """

    default_code = "double_install"

    def __init__(self, target: Any, handler_name: str, backup_name: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot wrap '{handler_name}' on {target!r}: {reason}",
            target=target,
            handler_name=handler_name,
            detail={"backup_name": backup_name},
            **kwargs,
        )
        self.backup_name = backup_name


class RestoreWithoutInstallError(HarnessError):
    """Restore was requested for a handler that is not currently wrapped."""

    default_code = "restore_without_install"

    def __init__(self, target: Any, handler_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Handler '{handler_name}' on {target!r} has no latency wrap to restore",
            target=target,
            handler_name=handler_name,
            **kwargs,
        )


class InvalidDelayError(HarnessError, ValueError):
    """The delay is not a finite, non-negative number of seconds."""

    default_code = "invalid_delay"

    def __init__(self, delay: object, **kwargs: Any) -> None:
        super().__init__(
            f"Delay must be a finite, non-negative number of seconds, got {delay!r}",
            detail={"delay": repr(delay)},
            **kwargs,
        )
        self.delay = delay


__all__ = [
    "DoubleInstallError",
    "HarnessError",
    "InvalidDelayError",
    "MissingHandlerError",
    "RestoreWithoutInstallError",
]
