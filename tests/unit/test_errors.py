import pytest

from brazilian_documents.domain.errors import (
    AmbiguousDocumentError,
    BadCnpjError,
    BadCpfError,
    BadDocumentError,
    DocumentError,
    ErrorKind,
    OutOfRangeError,
)
from brazilian_documents.domain.sanitizer import sanitize_for_message
from brazilian_documents.domain.value_objects.cpf import Cpf
from brazilian_documents.domain.value_objects.document_type import DocumentType


def test_sanitize_drops_control_characters():
    assert sanitize_for_message("123\n456") == "123456"


def test_sanitize_truncates():
    assert sanitize_for_message("x" * 25) == "x" * 20 + "..."
    assert sanitize_for_message("x" * 20) == "x" * 20


def test_sanitize_blank():
    assert sanitize_for_message(None) == ""
    assert sanitize_for_message("  \t ") == ""


def test_bad_cpf_message_is_sanitized():
    with pytest.raises(BadCpfError) as exc:
        Cpf("123\n456")
    assert "Invalid CPF:" in str(exc.value)
    assert "123456" in str(exc.value)
    assert exc.value.invalid_document == "123\n456"


def test_bad_cpf_message_for_blank_input():
    with pytest.raises(BadCpfError) as exc:
        Cpf("")
    assert str(exc.value) == "Invalid CPF: ''."


def test_bad_cpf_message_for_long_input():
    with pytest.raises(BadCpfError) as exc:
        Cpf("1" * 40)
    assert str(exc.value).endswith("...'.")
    assert exc.value.kind is ErrorKind.INPUT_TOO_LONG


def test_default_messages():
    assert str(BadDocumentError()) == "Invalid document."
    assert str(BadCpfError()) == "Invalid CPF."
    assert str(BadCnpjError()) == "Invalid CNPJ."
    assert BadCnpjError().source_type is DocumentType.CNPJ


def test_hierarchy():
    assert issubclass(BadCpfError, BadDocumentError)
    assert issubclass(AmbiguousDocumentError, BadDocumentError)
    assert issubclass(OutOfRangeError, DocumentError)
    assert issubclass(DocumentError, ValueError)


def test_ambiguous_message():
    exc = AmbiguousDocumentError("00970938900")
    assert exc.message == "Ambiguous document: '00970938900' is both a valid CPF and a valid CNPJ."
    assert exc.source_type is DocumentType.UNKNOWN


def test_document_type_from_name():
    assert DocumentType.from_name("cpf") is DocumentType.CPF
    assert DocumentType.from_name(" CNPJ ") is DocumentType.CNPJ
    assert DocumentType.from_name(None) is DocumentType.UNKNOWN
    with pytest.raises(ValueError):
        DocumentType.from_name("rg")
