from __future__ import annotations

import logging

from brazilian_documents.application.dtos.document_report_dto import DocumentReportDTO
from brazilian_documents.application.dtos.validate_request_dto import ValidateRequestDTO
from brazilian_documents.application.ports.metrics_port import MetricsPort
from brazilian_documents.domain.sanitizer import sanitize_for_message
from brazilian_documents.domain.services import brazilian_document

logger = logging.getLogger(__name__)


class ValidateDocumentsUseCase:
    """Resolves a batch of raw CPF/CNPJ strings into reports."""

    def __init__(self, metrics: MetricsPort | None = None) -> None:
        self.metrics = metrics

    def execute(self, req: ValidateRequestDTO) -> list[DocumentReportDTO]:
        reports: list[DocumentReportDTO] = []
        for text in req.values:
            parsed = brazilian_document.try_parse(text, req.hint)
            if not parsed.ok:
                logger.debug(
                    "Rejected '%s' (hint=%s, ambiguous=%s)",
                    sanitize_for_message(text),
                    req.hint.name,
                    parsed.ambiguous,
                )
            if self.metrics:
                self.metrics.record_validation(parsed.type, parsed.ok)
            reports.append(DocumentReportDTO.from_parsed(text, parsed))

        valid = sum(1 for r in reports if r.valid)
        logger.info("Validated %d documents: %d valid, %d invalid", len(reports), valid, len(reports) - valid)
        return reports
