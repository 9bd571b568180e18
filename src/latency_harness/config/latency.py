"""Config – LatencySettings."""
from __future__ import annotations

import dataclasses
import math

from latency_harness.config.errors import InvalidSettingValueError
from latency_harness.config.loader import Settings


@dataclasses.dataclass
class LatencySettings(Settings):
    """Tunables for latency injection.

    Read from ``LATENCY_HARNESS_DEFAULT_DELAY``, ``LATENCY_HARNESS_BACKUP_PREFIX``
    ``LATENCY_HARNESS_RESTORE_LEAKED`` and ``LATENCY_HARNESS_JSON_LOGS`` by :class:`EnvSettingsLoader`.

    Attributes:
        default_delay: Seconds to suspend when ``install`` gets no explicit delay.
        backup_prefix: Prefix of the attribute holding the original handler.
        restore_leaked: Whether the pytest fixtures restore bindings a test
            forgot to restore.
        json_logs: Whether the pytest plugin switches structlog to JSON output.
    """

    _prefix: dataclasses.ClassVar[str] = "LATENCY_HARNESS"

    default_delay: float = 1.0
    backup_prefix: str = "old_"
    restore_leaked: bool = True
    json_logs: bool = False

    def _validate(self) -> None:
        if isinstance(self.default_delay, bool) or not isinstance(self.default_delay, (int, float)):
            raise InvalidSettingValueError("default_delay", self.default_delay, "must be a number")
        if not math.isfinite(self.default_delay) or self.default_delay < 0:
            raise InvalidSettingValueError(
                "default_delay", self.default_delay, "must be finite and non-negative"
            )
        if not self.backup_prefix or not self.backup_prefix.isidentifier():
            raise InvalidSettingValueError(
                "backup_prefix", self.backup_prefix, "must be a non-empty identifier"
            )


__all__ = ["LatencySettings"]
