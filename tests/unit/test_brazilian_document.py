import pytest

from brazilian_documents.domain.errors import AmbiguousDocumentError, BadDocumentError, ErrorKind
from brazilian_documents.domain.services import brazilian_document
from brazilian_documents.domain.value_objects.cnpj import Cnpj
from brazilian_documents.domain.value_objects.cpf import Cpf
from brazilian_documents.domain.value_objects.document_type import DocumentType

AMBIGUOUS = ["00970938900", "00305265318"]


def test_cpf_without_hint():
    ok, doc_type = brazilian_document.is_valid("123.456.789-09")
    assert ok and doc_type is DocumentType.CPF
    parsed = brazilian_document.parse("123.456.789-09")
    assert parsed.type is DocumentType.CPF
    assert parsed.cpf == Cpf(12345678909)
    assert parsed.cnpj is None
    assert parsed.format("G") == "123.456.789-09"


def test_cnpj_without_hint():
    ok, doc_type = brazilian_document.is_valid("09.358.105/0001-91")
    assert ok and doc_type is DocumentType.CNPJ
    parsed = brazilian_document.parse("09.358.105/0001-91")
    assert parsed.cnpj == Cnpj("09358105000191")
    assert parsed.value is parsed.cnpj


@pytest.mark.parametrize("value", AMBIGUOUS)
def test_ambiguous_without_hint(value):
    assert Cpf.is_valid(value) and Cnpj.is_valid(value)
    assert brazilian_document.is_valid(value) == (False, DocumentType.UNKNOWN)
    parsed = brazilian_document.try_parse(value)
    assert not parsed.ok
    assert parsed.ambiguous
    with pytest.raises(AmbiguousDocumentError) as exc:
        brazilian_document.parse(value)
    assert exc.value.kind is ErrorKind.AMBIGUOUS


@pytest.mark.parametrize("value", AMBIGUOUS)
def test_hint_resolves_ambiguity(value):
    assert brazilian_document.is_valid(value, DocumentType.CPF) == (True, DocumentType.CPF)
    assert brazilian_document.is_valid(value, DocumentType.CNPJ) == (True, DocumentType.CNPJ)
    assert brazilian_document.parse(value, DocumentType.CPF).cpf == Cpf(value)
    assert brazilian_document.parse(value, DocumentType.CNPJ).cnpj == Cnpj(value)


def test_hint_is_preference_not_constraint():
    parsed = brazilian_document.parse("09.358.105/0001-91", DocumentType.CPF)
    assert parsed.type is DocumentType.CNPJ
    parsed = brazilian_document.parse("123.456.789-09", DocumentType.CNPJ)
    assert parsed.type is DocumentType.CPF


def test_neither_type():
    assert brazilian_document.is_valid("00000000001") == (False, DocumentType.UNKNOWN)
    parsed = brazilian_document.try_parse("00000000001")
    assert not parsed.ok and not parsed.ambiguous
    assert parsed.format() is None
    with pytest.raises(BadDocumentError) as exc:
        brazilian_document.parse("00000000001")
    assert not isinstance(exc.value, AmbiguousDocumentError)
    assert str(exc.value) == "Invalid document: '00000000001'."


def test_none_is_invalid():
    assert brazilian_document.is_valid(None, DocumentType.CPF) == (False, DocumentType.UNKNOWN)
    assert not brazilian_document.try_parse(None).ok


def test_int_cpf_without_hint():
    assert brazilian_document.is_valid(12345678909) == (True, DocumentType.CPF)
    assert brazilian_document.try_parse(12345678909).cpf == Cpf(12345678909)
    assert brazilian_document.parse(12345678909).type is DocumentType.CPF


def test_invalid_int_raises_bad_document():
    with pytest.raises(BadDocumentError) as exc:
        brazilian_document.parse(12345678908)
    assert exc.value.kind is ErrorKind.CHECKSUM_MISMATCH
    assert exc.value.invalid_document == "12345678908"


def test_neither_type_reports_preferred_diagnosis():
    with pytest.raises(BadDocumentError) as exc:
        brazilian_document.parse("21.552.200/0001-28")
    assert exc.value.kind is ErrorKind.INVALID_CHARACTER
    with pytest.raises(BadDocumentError) as exc:
        brazilian_document.parse("21.552.200/0001-28", DocumentType.CNPJ)
    assert exc.value.kind is ErrorKind.CHECKSUM_MISMATCH
