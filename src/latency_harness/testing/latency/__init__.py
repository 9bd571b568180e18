"""Testing latency – wrap named handlers with an artificial delay and restore them."""
from latency_harness.testing.latency.api import (
    default_registry,
    restore_latency_for,
    simulate_latency_for,
    simulated_latency,
)
from latency_harness.testing.latency.binding import OriginalBinding
from latency_harness.testing.latency.registry import LatencyRegistry
from latency_harness.testing.latency.wrapper import delayed, validate_delay

__all__ = [
    "LatencyRegistry",
    "OriginalBinding",
    "default_registry",
    "delayed",
    "restore_latency_for",
    "simulate_latency_for",
    "simulated_latency",
    "validate_delay",
]
