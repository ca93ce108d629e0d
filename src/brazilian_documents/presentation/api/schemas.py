from __future__ import annotations

from pydantic import BaseModel, Field

from brazilian_documents.infrastructure.serialization.pydantic_types import CnpjField, CpfField


class ValidateBatchRequest(BaseModel):
    values: list[str] = Field(default_factory=list)
    hint: str | None = None


class DocumentReport(BaseModel):
    input: str
    valid: bool
    document_type: str
    formatted: str | None = None
    bare: str | None = None
    ambiguous: bool = False
    cpf_error: str | None = None
    cnpj_error: str | None = None


class ValidateBatchResponse(BaseModel):
    items: list[DocumentReport]
    count: int
    valid: int


class CreateCpfRequest(BaseModel):
    base: int | str


class CreateCpfResponse(BaseModel):
    cpf: CpfField
    check_digits: int


class CreateCnpjRequest(BaseModel):
    root: str
    branch: str | None = None


class CreateCnpjResponse(BaseModel):
    cnpj: CnpjField
    root: str
    branch: str
    check_digits: str
