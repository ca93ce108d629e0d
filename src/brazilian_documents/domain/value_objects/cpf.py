from __future__ import annotations

from typing import ClassVar

from brazilian_documents.domain.errors import (
    BadCpfError,
    ErrorKind,
    OutOfRangeError,
    UnknownFormatStyleError,
)

MAX_VALUE = 99_999_999_999
MAX_BASE = 999_999_999
MAX_INPUT_LENGTH = 20
FORMAT_STYLES = ("S", "B", "G")

CpfInput = str | int


def compute_check_digits(base: int) -> int:
    """Packed check digits (dv1 * 10 + dv2) for the 9 base digits of a CPF."""
    sum1 = 0
    sum2 = 0
    rest = base
    # least-significant digit first: weights 2..10 and 3..11
    for position in range(9):
        rest, digit = divmod(rest, 10)
        sum1 += digit * (position + 2)
        sum2 += digit * (position + 3)

    dv1 = sum1 % 11
    dv1 = 0 if dv1 < 2 else 11 - dv1
    sum2 += dv1 * 2
    dv2 = sum2 % 11
    dv2 = 0 if dv2 < 2 else 11 - dv2
    return dv1 * 10 + dv2


def _to_number(value: CpfInput | None) -> tuple[int, ErrorKind | None]:
    if isinstance(value, bool):
        return 0, ErrorKind.INVALID_CHARACTER
    if isinstance(value, int):
        if value < 0 or value > MAX_VALUE:
            return 0, ErrorKind.OUT_OF_RANGE
        return value, None
    if value is None or value == "":
        return 0, ErrorKind.NULL_OR_EMPTY_INPUT
    if not isinstance(value, str):
        return 0, ErrorKind.INVALID_CHARACTER
    if len(value) > MAX_INPUT_LENGTH:
        return 0, ErrorKind.INPUT_TOO_LONG

    number = 0
    digits = 0
    for c in value:
        if "0" <= c <= "9":
            number = number * 10 + (ord(c) - 48)
            digits += 1
        elif c != "." and c != "-":
            return 0, ErrorKind.INVALID_CHARACTER
    if digits < 1 or digits > 11:
        return 0, ErrorKind.WRONG_VALID_CHARACTER_COUNT
    return number, None


def cpf_diagnose(value: CpfInput | None) -> ErrorKind | None:
    """Why `value` is not a CPF, or None when it is one."""
    number, error = _to_number(value)
    if error is not None:
        return error
    if number % 100 != compute_check_digits(number // 100):
        return ErrorKind.CHECKSUM_MISMATCH
    return None


class Cpf(int):
    """Value Object for an always-valid CPF (11 digits, 2 of them check digits).

    Accepts an int or a string such as "123.456.789-09" or "12345678909";
    only "." and "-" are tolerated as punctuation and leading zeros may be
    omitted. `str()` gives the general format.
    """

    __slots__ = ()

    EMPTY: ClassVar["Cpf"]

    def __new__(cls, value: CpfInput) -> "Cpf":
        error = cpf_diagnose(value)
        if error is not None:
            raise BadCpfError(None if value is None else str(value), kind=error)
        number, _ = _to_number(value)
        return int.__new__(cls, number)

    @classmethod
    def _trusted(cls, number: int) -> "Cpf":
        return int.__new__(cls, number)

    # ---- validation / parsing ----

    @staticmethod
    def is_valid(value: CpfInput | None) -> bool:
        return cpf_diagnose(value) is None

    @classmethod
    def parse(cls, value: CpfInput) -> "Cpf":
        return cls(value)

    @classmethod
    def try_parse(cls, value: CpfInput | None) -> "Cpf | None":
        number, error = _to_number(value)
        if error is not None or number % 100 != compute_check_digits(number // 100):
            return None
        return cls._trusted(number)

    # ---- creation ----

    @staticmethod
    def compute_digits(base: int) -> int:
        return compute_check_digits(base)

    @classmethod
    def create(cls, base: CpfInput) -> "Cpf":
        """Appends the check digits to the 9 base digits.

        Raises:
            BadCpfError: `base` is a malformed string.
            OutOfRangeError: `base` is outside [0, 999999999].
        """
        if isinstance(base, str):
            number, error = _to_number(base)
            if error is not None:
                raise BadCpfError(base, kind=error)
            base = number
        elif isinstance(base, bool) or not isinstance(base, int):
            raise BadCpfError(str(base), kind=ErrorKind.INVALID_CHARACTER)
        if base < 0:
            raise OutOfRangeError("base", base, "must be greater than or equal to zero")
        if base > MAX_BASE:
            raise OutOfRangeError("base", base, f"must be less than or equal to {MAX_BASE}")
        return cls._trusted(base * 100 + compute_check_digits(base))

    # ---- accessors / formatting ----

    @property
    def base(self) -> int:
        return int(self) // 100

    @property
    def check_digits(self) -> int:
        return int(self) % 100

    def format(self, style: str = "G") -> str:
        style = style.upper()
        if style == "S":
            return str(int(self))
        if style == "B":
            return f"{int(self):011d}"
        if style == "G":
            s = f"{int(self):011d}"
            return f"{s[:3]}.{s[3:6]}.{s[6:9]}-{s[9:]}"
        raise UnknownFormatStyleError(style, FORMAT_STYLES)

    def __format__(self, spec: str) -> str:
        # document styles win over the int presentation types of the same letter
        if not spec or spec.upper() in FORMAT_STYLES:
            return self.format(spec or "G")
        return int.__format__(self, spec)

    def __str__(self) -> str:
        return self.format("G")

    def __repr__(self) -> str:
        return f"Cpf({self.format('G')!r})"


Cpf.EMPTY = Cpf._trusted(0)
