from __future__ import annotations

from dataclasses import dataclass

from brazilian_documents.domain.services.brazilian_document import ParsedDocument
from brazilian_documents.domain.value_objects.cnpj import cnpj_diagnose
from brazilian_documents.domain.value_objects.cpf import cpf_diagnose


@dataclass(frozen=True)
class DocumentReportDTO:
    input: str
    valid: bool
    document_type: str  # "cpf" | "cnpj" | "unknown"
    formatted: str | None = None
    bare: str | None = None
    ambiguous: bool = False
    cpf_error: str | None = None
    cnpj_error: str | None = None

    @classmethod
    def from_parsed(cls, text: str, parsed: ParsedDocument) -> "DocumentReportDTO":
        if parsed.ok:
            return cls(
                input=text,
                valid=True,
                document_type=parsed.type.name.lower(),
                formatted=parsed.format("G"),
                bare=parsed.format("B"),
            )
        cpf_error = cpf_diagnose(text)
        cnpj_error = cnpj_diagnose(text)
        return cls(
            input=text,
            valid=False,
            document_type=parsed.type.name.lower(),
            ambiguous=parsed.ambiguous,
            cpf_error=cpf_error.value if cpf_error else None,
            cnpj_error=cnpj_error.value if cnpj_error else None,
        )
