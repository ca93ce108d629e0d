from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, HTTPException
from prometheus_client import CollectorRegistry

from brazilian_documents.application.dtos.validate_request_dto import ValidateRequestDTO
from brazilian_documents.application.use_cases.validate_documents import ValidateDocumentsUseCase
from brazilian_documents.config import settings
from brazilian_documents.domain.value_objects.cnpj import Cnpj
from brazilian_documents.domain.value_objects.cpf import Cpf
from brazilian_documents.domain.value_objects.document_type import DocumentType
from brazilian_documents.infrastructure.adapters.prometheus_metrics import PrometheusMetricsAdapter
from brazilian_documents.presentation.api.schemas import (
    CreateCnpjRequest,
    CreateCnpjResponse,
    CreateCpfRequest,
    CreateCpfResponse,
    DocumentReport,
    ValidateBatchRequest,
    ValidateBatchResponse,
)

router = APIRouter(prefix="/v1", tags=["documents"])

registry = CollectorRegistry()
_metrics = PrometheusMetricsAdapter(registry)


def _hint(value: str | None) -> DocumentType:
    try:
        return DocumentType.from_name(value or settings.default_hint)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


def _validate(values: list[str], hint: str | None) -> ValidateBatchResponse:
    if len(values) > settings.batch_limit:
        raise HTTPException(status_code=413, detail=f"At most {settings.batch_limit} values per request")
    uc = ValidateDocumentsUseCase(metrics=_metrics)
    reports = uc.execute(ValidateRequestDTO(values=tuple(values), hint=_hint(hint)))
    items = [DocumentReport(**asdict(r)) for r in reports]
    return ValidateBatchResponse(items=items, count=len(items), valid=sum(1 for r in items if r.valid))


@router.get("/documents/validate", response_model=DocumentReport)
def validate_one(value: str, hint: str | None = None) -> DocumentReport:  # type: ignore[misc]
    return _validate([value], hint).items[0]


@router.post("/documents/validate", response_model=ValidateBatchResponse)
def validate_batch(body: ValidateBatchRequest) -> ValidateBatchResponse:  # type: ignore[misc]
    return _validate(body.values, body.hint)


@router.post("/cpf", response_model=CreateCpfResponse)
def create_cpf(body: CreateCpfRequest) -> CreateCpfResponse:  # type: ignore[misc]
    cpf = Cpf.create(body.base)
    return CreateCpfResponse(cpf=cpf, check_digits=cpf.check_digits)


@router.post("/cnpj", response_model=CreateCnpjResponse)
def create_cnpj(body: CreateCnpjRequest) -> CreateCnpjResponse:  # type: ignore[misc]
    cnpj = Cnpj.create(body.root, body.branch)
    return CreateCnpjResponse(cnpj=cnpj, root=cnpj.root, branch=cnpj.branch, check_digits=cnpj.check_digits)
