from typing import Protocol

from brazilian_documents.domain.value_objects.document_type import DocumentType


class MetricsPort(Protocol):
    def record_validation(self, document_type: DocumentType, valid: bool) -> None: ...
