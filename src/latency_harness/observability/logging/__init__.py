"""Observability – structured logging helpers."""
from latency_harness.observability.logging.factory import JsonLoggerFactory
from latency_harness.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
