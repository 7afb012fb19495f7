"""Metrics plumbing shared by parsers and renderers.

mdtree only emits measurements through a ``MetricsHook``; by default they go
to ``NoOpMetricsHook``. ``InMemoryMetricsHook`` records them for inspection.
"""

from . import names
from .base import (
    InMemoryMetricsHook,
    Labels,
    Measurement,
    MeasurementKind,
    MetricsHook,
    NoOpMetricsHook,
)

__all__ = [
    "InMemoryMetricsHook",
    "Labels",
    "Measurement",
    "MeasurementKind",
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
