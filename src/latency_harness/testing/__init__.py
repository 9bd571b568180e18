"""Testing support – latency injection and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["latency_harness.testing.fixtures"]
"""

from latency_harness.testing.latency import (
    LatencyRegistry,
    OriginalBinding,
    restore_latency_for,
    simulate_latency_for,
    simulated_latency,
)

__all__ = [
    "LatencyRegistry",
    "OriginalBinding",
    "restore_latency_for",
    "simulate_latency_for",
    "simulated_latency",
]
