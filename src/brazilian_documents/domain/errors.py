from __future__ import annotations

from enum import Enum
from typing import Any

from brazilian_documents.domain.sanitizer import sanitize_for_message
from brazilian_documents.domain.value_objects.document_type import DocumentType


class ErrorKind(str, Enum):
    NULL_OR_EMPTY_INPUT = "null_or_empty_input"
    INPUT_TOO_LONG = "input_too_long"
    INVALID_CHARACTER = "invalid_character"
    WRONG_VALID_CHARACTER_COUNT = "wrong_valid_character_count"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    OUT_OF_RANGE = "out_of_range"
    AMBIGUOUS = "ambiguous"
    UNKNOWN_FORMAT_STYLE = "unknown_format_style"


class DocumentError(ValueError):
    """Base class for every failure raised by this package."""

    kind: ErrorKind | None = None

    def __init__(self, message: str, *, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind

    @property
    def message(self) -> str:
        return str(self)


class BadDocumentError(DocumentError):
    """A value that is not a well-formed CPF/CNPJ.

    `invalid_document` keeps the offending input verbatim; the message only
    carries its sanitized form.
    """

    default_source = DocumentType.UNKNOWN

    def __init__(
        self,
        invalid_document: str | None = None,
        source_type: DocumentType | None = None,
        *,
        kind: ErrorKind | None = None,
        message: str | None = None,
    ) -> None:
        self.invalid_document = invalid_document
        bare = invalid_document is None and source_type is None and kind is None
        self.source_type = self.default_source if source_type is None else source_type
        if message is None:
            if bare:
                message = f"Invalid {self.source_type.label}."
            else:
                message = f"Invalid {self.source_type.label}: '{sanitize_for_message(invalid_document)}'."
        super().__init__(message, kind=kind)


class BadCpfError(BadDocumentError):
    default_source = DocumentType.CPF


class BadCnpjError(BadDocumentError):
    default_source = DocumentType.CNPJ


class AmbiguousDocumentError(BadDocumentError):
    """Input is a valid CPF and a valid CNPJ at the same time; a hint is required."""

    kind = ErrorKind.AMBIGUOUS

    def __init__(self, invalid_document: str | None) -> None:
        super().__init__(
            invalid_document,
            DocumentType.UNKNOWN,
            message=(
                f"Ambiguous document: '{sanitize_for_message(invalid_document)}' "
                "is both a valid CPF and a valid CNPJ."
            ),
        )


class OutOfRangeError(DocumentError):
    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, argument: str, value: Any, detail: str) -> None:
        self.argument = argument
        self.value = value
        super().__init__(f"{argument} {detail} (got {sanitize_for_message(str(value))!r}).")


class UnknownFormatStyleError(DocumentError):
    kind = ErrorKind.UNKNOWN_FORMAT_STYLE

    def __init__(self, style: str, allowed: tuple[str, ...]) -> None:
        self.style = style
        self.allowed = allowed
        super().__init__(f"Format must be {', '.join(allowed[:-1])} or {allowed[-1]}, not {style!r}.")
