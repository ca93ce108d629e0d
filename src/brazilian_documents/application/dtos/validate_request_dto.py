from dataclasses import dataclass

from brazilian_documents.domain.value_objects.document_type import DocumentType


@dataclass(frozen=True)
class ValidateRequestDTO:
    values: tuple[str, ...]
    hint: DocumentType = DocumentType.UNKNOWN
