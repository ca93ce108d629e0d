from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter

from brazilian_documents.application.ports.metrics_port import MetricsPort
from brazilian_documents.domain.value_objects.document_type import DocumentType


class PrometheusMetricsAdapter(MetricsPort):
    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry()
        self._validations = Counter(
            "brdocs_validations",
            "Documents resolved, by detected type and outcome.",
            labelnames=("document_type", "outcome"),
            registry=self.registry,
        )

    def record_validation(self, document_type: DocumentType, valid: bool) -> None:
        outcome = "valid" if valid else "invalid"
        self._validations.labels(document_type=document_type.name.lower(), outcome=outcome).inc()

    def count(self, document_type: DocumentType, valid: bool) -> float:
        value = self.registry.get_sample_value(
            "brdocs_validations_total",
            {"document_type": document_type.name.lower(), "outcome": "valid" if valid else "invalid"},
        )
        return value or 0.0
