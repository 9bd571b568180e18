"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError           (application.py)
    │   └── ConfigError            (latency_harness.config.errors)
    └── HarnessError               (harness.py)
        ├── MissingHandlerError
        ├── DoubleInstallError
        ├── RestoreWithoutInstallError
        └── InvalidDelayError
"""

from latency_harness.kernel.errors.application import ApplicationError
from latency_harness.kernel.errors.base import BaseError
from latency_harness.kernel.errors.harness import (
    DoubleInstallError,
    HarnessError,
    InvalidDelayError,
    MissingHandlerError,
    RestoreWithoutInstallError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DoubleInstallError",
    "HarnessError",
    "InvalidDelayError",
    "MissingHandlerError",
    "RestoreWithoutInstallError",
]
