"""Testing fixtures – pytest plugin for latency injection.

Enable in your ``conftest.py``::

    pytest_plugins = ["latency_harness.testing.fixtures"]

Every test then gets ``release_default_registry`` automatically, so wraps
installed with ``simulate_latency_for`` never outlive the test.
"""
from latency_harness.testing.fixtures.latency import (
    latency_registry,
    pytest_configure,
    release_default_registry,
    release_leaked,
    simulate_latency,
)

__all__ = [
    "latency_registry",
    "pytest_configure",
    "release_default_registry",
    "release_leaked",
    "simulate_latency",
]
