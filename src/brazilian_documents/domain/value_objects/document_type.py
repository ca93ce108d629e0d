from enum import IntEnum


class DocumentType(IntEnum):
    """Which Brazilian document a value is (or was attempted as)."""

    UNKNOWN = 0
    CPF = 1
    CNPJ = 2

    @property
    def label(self) -> str:
        return {DocumentType.CPF: "CPF", DocumentType.CNPJ: "CNPJ"}.get(self, "document")

    @classmethod
    def from_name(cls, name: str | None) -> "DocumentType":
        if not name:
            return cls.UNKNOWN
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown document type: {name!r}") from None
