"""Prometheus instrumentation for the person registry."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Gauge


class MonitoringService:
    def __init__(self, collector_registry: CollectorRegistry | None = None) -> None:
        self.collector_registry = collector_registry or CollectorRegistry()
        self.people_added = Counter(
            "people_added_total",
            "People added to the registry",
            ["kind"],
            registry=self.collector_registry,
        )
        self.registry_clears = Counter(
            "registry_clears_total",
            "Times the registry was cleared",
            registry=self.collector_registry,
        )
        self.registry_size = Gauge(
            "registry_size",
            "People currently held by the registry",
            registry=self.collector_registry,
        )

    def record_added(self, kind: str, size: int) -> None:
        self.people_added.labels(kind=kind).inc()
        self.registry_size.set(size)

    def record_cleared(self) -> None:
        self.registry_clears.inc()
        self.registry_size.set(0)


monitoring = MonitoringService()
