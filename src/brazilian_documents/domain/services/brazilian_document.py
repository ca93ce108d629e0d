"""Resolves fields that accept either a CPF or a CNPJ.

The hint says which type is attempted first, not which one is enforced:

- ``DocumentType.CPF``: CPF first, then CNPJ.
- ``DocumentType.CNPJ``: CNPJ first, then CPF.
- ``DocumentType.UNKNOWN`` (default): both, succeeding only when exactly
  one matches. An 11-digit string can be a CPF and also a CNPJ with three
  omitted leading zeros (e.g. "00970938900"); such input is ambiguous and
  needs a hint.
"""
from __future__ import annotations

from dataclasses import dataclass

from brazilian_documents.domain.errors import AmbiguousDocumentError, BadDocumentError
from brazilian_documents.domain.value_objects.cnpj import Cnpj, cnpj_diagnose
from brazilian_documents.domain.value_objects.cpf import Cpf, cpf_diagnose
from brazilian_documents.domain.value_objects.document_type import DocumentType

_PREFERENCE: dict[DocumentType, tuple[DocumentType, DocumentType]] = {
    DocumentType.CPF: (DocumentType.CPF, DocumentType.CNPJ),
    DocumentType.CNPJ: (DocumentType.CNPJ, DocumentType.CPF),
}


@dataclass(frozen=True)
class ParsedDocument:
    type: DocumentType
    cpf: Cpf | None = None
    cnpj: Cnpj | None = None
    ambiguous: bool = False

    @property
    def ok(self) -> bool:
        return self.type is not DocumentType.UNKNOWN

    @property
    def value(self) -> Cpf | Cnpj | None:
        return self.cpf if self.type is DocumentType.CPF else self.cnpj

    def format(self, style: str = "G") -> str | None:
        value = self.value
        return None if value is None else value.format(style)


_UNRESOLVED = ParsedDocument(DocumentType.UNKNOWN)


def _try(doc_type: DocumentType, text: str | int | None) -> ParsedDocument | None:
    if doc_type is DocumentType.CPF:
        cpf = Cpf.try_parse(text)
        return None if cpf is None else ParsedDocument(DocumentType.CPF, cpf=cpf)
    cnpj = Cnpj.try_parse(text)
    return None if cnpj is None else ParsedDocument(DocumentType.CNPJ, cnpj=cnpj)


def _resolve(text: str | int | None, hint: DocumentType) -> ParsedDocument:
    order = _PREFERENCE.get(hint)
    if order is not None:
        for doc_type in order:
            found = _try(doc_type, text)
            if found is not None:
                return found
        return _UNRESOLVED

    as_cpf = _try(DocumentType.CPF, text)
    as_cnpj = _try(DocumentType.CNPJ, text)
    if as_cpf is not None and as_cnpj is None:
        return as_cpf
    if as_cnpj is not None and as_cpf is None:
        return as_cnpj
    if as_cpf is not None:
        return ParsedDocument(DocumentType.UNKNOWN, ambiguous=True)
    return _UNRESOLVED


def is_valid(text: str | int | None, hint: DocumentType = DocumentType.UNKNOWN) -> tuple[bool, DocumentType]:
    """(True, CPF|CNPJ) on success, (False, UNKNOWN) when invalid or ambiguous."""
    order = _PREFERENCE.get(hint)
    if order is not None:
        for doc_type in order:
            if _is_valid_as(doc_type, text):
                return True, doc_type
        return False, DocumentType.UNKNOWN

    as_cpf = Cpf.is_valid(text)
    as_cnpj = Cnpj.is_valid(text)
    if as_cpf != as_cnpj:
        return True, DocumentType.CPF if as_cpf else DocumentType.CNPJ
    return False, DocumentType.UNKNOWN


def _is_valid_as(doc_type: DocumentType, text: str | int | None) -> bool:
    if doc_type is DocumentType.CPF:
        return Cpf.is_valid(text)
    return Cnpj.is_valid(text)


def try_parse(text: str | int | None, hint: DocumentType = DocumentType.UNKNOWN) -> ParsedDocument:
    """Parses `text` as a CPF or CNPJ; `.type` is UNKNOWN when invalid or ambiguous."""
    return _resolve(text, hint)


def parse(text: str | int, hint: DocumentType = DocumentType.UNKNOWN) -> ParsedDocument:
    """Parses `text` as a CPF or CNPJ.

    Raises:
        AmbiguousDocumentError: valid as both types and no hint was given.
        BadDocumentError: valid as neither type; `kind` is the diagnosis of
            the preferred type (CPF unless the hint is CNPJ).
    """
    resolved = _resolve(text, hint)
    shown = None if text is None else str(text)
    if resolved.ambiguous:
        raise AmbiguousDocumentError(shown)
    if not resolved.ok:
        kind = cnpj_diagnose(text) if hint is DocumentType.CNPJ else cpf_diagnose(text)
        raise BadDocumentError(shown, DocumentType.UNKNOWN, kind=kind)
    return resolved
