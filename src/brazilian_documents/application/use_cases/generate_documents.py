from __future__ import annotations

import random
import string

from brazilian_documents.domain.value_objects.cnpj import Cnpj
from brazilian_documents.domain.value_objects.cpf import MAX_BASE, Cpf
from brazilian_documents.domain.value_objects.document_type import DocumentType

_ALPHANUMERIC = string.digits + string.ascii_uppercase


class GenerateDocumentsUseCase:
    """Random, well-formed documents for fixtures and demos."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def execute(
        self,
        doc_type: DocumentType,
        count: int,
        *,
        alphanumeric: bool = False,
        headquarters: bool = True,
    ) -> list[Cpf | Cnpj]:
        if doc_type is DocumentType.CPF:
            return [self.new_cpf() for _ in range(count)]
        if doc_type is DocumentType.CNPJ:
            return [self.new_cnpj(alphanumeric=alphanumeric, headquarters=headquarters) for _ in range(count)]
        raise ValueError("doc_type must be CPF or CNPJ")

    def new_cpf(self) -> Cpf:
        return Cpf.create(self.rng.randint(0, MAX_BASE))

    def new_cnpj(self, *, alphanumeric: bool = False, headquarters: bool = True) -> Cnpj:
        alphabet = _ALPHANUMERIC if alphanumeric else string.digits
        root = "".join(self.rng.choice(alphabet) for _ in range(8))
        branch = "0001" if headquarters else "".join(self.rng.choice(alphabet) for _ in range(4))
        return Cnpj.create(root, branch)
