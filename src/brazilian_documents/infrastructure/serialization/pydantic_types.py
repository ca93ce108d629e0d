"""pydantic field types that read and write documents as JSON strings.

Only JSON strings are accepted (numbers and other types are rejected);
values are always written in the general format, e.g. "123.456.789-09"
and "09.358.105/0001-91".
"""
from __future__ import annotations

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from brazilian_documents.domain.value_objects.cnpj import Cnpj
from brazilian_documents.domain.value_objects.cpf import Cpf


def _read_cpf(value: Any) -> Cpf:
    if isinstance(value, Cpf):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected string value for Cpf, but found {type(value).__name__}")
    return Cpf.parse(value)


def _read_cnpj(value: Any) -> Cnpj:
    if isinstance(value, Cnpj):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected string value for Cnpj, but found {type(value).__name__}")
    return Cnpj.parse(value)


def _write(value: Cpf | Cnpj) -> str:
    return value.format("G")


CpfField = Annotated[
    Cpf,
    PlainValidator(_read_cpf),
    PlainSerializer(_write, return_type=str),
    WithJsonSchema({"type": "string", "examples": ["123.456.789-09"]}),
]

CnpjField = Annotated[
    Cnpj,
    PlainValidator(_read_cnpj),
    PlainSerializer(_write, return_type=str),
    WithJsonSchema({"type": "string", "examples": ["09.358.105/0001-91"]}),
]
