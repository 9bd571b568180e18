"""
latency_harness – deterministic latency injection for integration tests.

Import path convention::

    from latency_harness.testing.latency import simulate_latency_for, restore_latency_for
    from latency_harness.testing.latency import LatencyRegistry, simulated_latency
    from latency_harness.kernel.errors import DoubleInstallError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
