# src/mdtree/observability/base.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

Labels = dict[str, str]


class MetricsHook(Protocol):
    """Sink for the measurements taken around each parse and render call.

    Names come from ``mdtree.observability.names``. mdtree ships no backend;
    adapt Prometheus, StatsD or a test recorder by implementing these calls.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: Labels | None = None,
    ) -> None:
        """Wall time of one ``parse`` or ``render`` call, in milliseconds."""
        ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: Labels | None = None,
    ) -> None:
        """Documents parsed or rendered, or source lines consumed."""
        ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: Labels | None = None,
    ) -> None:
        """Top-level block count of the most recent parse."""
        ...


class NoOpMetricsHook:
    """Hook used when a parser or renderer is built without one."""

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: Labels | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        pass


class MeasurementKind(str, Enum):
    LATENCY = "latency"
    COUNTER = "counter"
    GAUGE = "gauge"


@dataclass(frozen=True)
class Measurement:
    kind: MeasurementKind
    name: str
    value: float
    labels: Labels | None = None


@dataclass
class InMemoryMetricsHook:
    """Keeps every measurement in call order.

    Useful in tests and for one-off inspection of a parse/render pipeline.
    """

    measurements: list[Measurement] = field(default_factory=list)

    def record_latency(
        self, name: str, value_ms: float, labels: Labels | None = None
    ) -> None:
        self.measurements.append(
            Measurement(MeasurementKind.LATENCY, name, value_ms, labels)
        )

    def increment(
        self, name: str, value: int = 1, labels: Labels | None = None
    ) -> None:
        self.measurements.append(Measurement(MeasurementKind.COUNTER, name, value, labels))

    def record_gauge(
        self, name: str, value: float, labels: Labels | None = None
    ) -> None:
        self.measurements.append(Measurement(MeasurementKind.GAUGE, name, value, labels))

    def names(self) -> list[str]:
        return [m.name for m in self.measurements]

    def values(self, name: str) -> list[float]:
        return [m.value for m in self.measurements if m.name == name]
