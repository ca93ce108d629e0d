from __future__ import annotations

from typing import ClassVar

from brazilian_documents.domain.errors import (
    BadCnpjError,
    ErrorKind,
    OutOfRangeError,
    UnknownFormatStyleError,
)

MIN_INPUT_LENGTH = 7
MAX_INPUT_LENGTH = 18
LENGTH = 14
ROOT_LENGTH = 8
BRANCH_LENGTH = 4
FORMAT_STYLES = ("S", "B", "BS", "G")

WEIGHTS_DV1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
WEIGHTS_DV2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def is_valid_input(c: str) -> bool:
    """ASCII digit or letter; anything else is punctuation."""
    return "0" <= c <= "9" or "A" <= c <= "Z" or "a" <= c <= "z"


def char_value(c: str) -> int:
    # ASCII offset from '0', so 'A' is 17 rather than 10. Check digits of
    # alphanumeric CNPJs are defined over these values.
    value = ord(c) - 48
    if value > 42:
        value -= 32
    return value


def _check_digit(total: int) -> int:
    rest = total % 11
    return 0 if rest < 2 else 11 - rest


def cnpj_diagnose(value: str | None) -> ErrorKind | None:
    """Why `value` is not a CNPJ, or None when it is one.

    Leading zeros of the root may be omitted: with k < 14 valid characters
    the first one is read at position 14 - k.
    """
    if value is None:
        return ErrorKind.NULL_OR_EMPTY_INPUT
    if not isinstance(value, str):
        return ErrorKind.INVALID_CHARACTER
    if not value.strip():
        return ErrorKind.NULL_OR_EMPTY_INPUT
    if len(value) > MAX_INPUT_LENGTH:
        return ErrorKind.INPUT_TOO_LONG
    if len(value) < MIN_INPUT_LENGTH:
        return ErrorKind.WRONG_VALID_CHARACTER_COUNT

    valid_chars = sum(1 for c in value if is_valid_input(c))
    if valid_chars < MIN_INPUT_LENGTH or valid_chars > LENGTH:
        return ErrorKind.WRONG_VALID_CHARACTER_COUNT

    position = LENGTH - valid_chars
    total1 = 0
    total2 = 0
    for c in value:
        if not is_valid_input(c):
            continue
        digit = char_value(c)
        if position < 12:
            total1 += digit * WEIGHTS_DV1[position]
            total2 += digit * WEIGHTS_DV2[position]
        elif position == 12:
            dv1 = _check_digit(total1)
            if digit != dv1:
                return ErrorKind.CHECKSUM_MISMATCH
            total2 += dv1 * WEIGHTS_DV2[12]
        elif digit != _check_digit(total2):
            return ErrorKind.CHECKSUM_MISMATCH

        position += 1
        if position == LENGTH:
            break

    return None if position == LENGTH else ErrorKind.WRONG_VALID_CHARACTER_COUNT


def _normalize(value: str, length: int) -> str:
    return value.upper().rjust(length, "0")


def _check_part(name: str, value: str | None, max_length: int) -> str:
    if value is None or not value.strip():
        raise BadCnpjError(value, kind=ErrorKind.NULL_OR_EMPTY_INPUT)
    if len(value) > max_length:
        raise OutOfRangeError(name, value, f"must have at most {max_length} characters")
    if not all(is_valid_input(c) for c in value):
        raise BadCnpjError(value, kind=ErrorKind.INVALID_CHARACTER)
    return _normalize(value, max_length)


def build_cnpj(root: str, branch: str) -> tuple[str, int]:
    """Builds the 14-character CNPJ for `root` and `branch`.

    Both parts accept only [0-9A-Za-z] and are left-padded with zeros to 8
    and 4 characters. Returns the CNPJ without punctuation and the check
    digits packed as dv1 * 10 + dv2.

    Raises:
        BadCnpjError: a part is empty or has an invalid character.
        OutOfRangeError: a part is longer than its fixed width.
    """
    base = _check_part("root", root, ROOT_LENGTH) + _check_part("branch", branch, BRANCH_LENGTH)

    total1 = 0
    total2 = 0
    for position, c in enumerate(base):
        digit = char_value(c)
        total1 += digit * WEIGHTS_DV1[position]
        total2 += digit * WEIGHTS_DV2[position]
    dv1 = _check_digit(total1)
    dv2 = _check_digit(total2 + dv1 * WEIGHTS_DV2[12])
    return f"{base}{dv1}{dv2}", dv1 * 10 + dv2


def split_root_and_branch(root_and_branch: str | None) -> tuple[str, str]:
    """Splits the first 12 valid characters of a single string into root and branch."""
    if root_and_branch is None or not root_and_branch.strip():
        raise BadCnpjError(root_and_branch, kind=ErrorKind.NULL_OR_EMPTY_INPUT)
    kept = "".join(c for c in root_and_branch.upper() if is_valid_input(c))[:12]
    kept = kept.rjust(12, "0")
    return kept[:ROOT_LENGTH], kept[ROOT_LENGTH:]


class Cnpj(str):
    """Value Object for an always-valid alphanumeric CNPJ.

    Stored as 14 uppercase characters without punctuation (8 root, 4
    branch, 2 check digits). Input may use any punctuation, lowercase
    letters and may omit the leading zeros of the root, so "1/0001-36" and
    "00.000.001/0001-36" are the same CNPJ. `str()` gives the general
    format.
    """

    __slots__ = ()

    EMPTY: ClassVar["Cnpj"]

    def __new__(cls, value: str) -> "Cnpj":
        error = cnpj_diagnose(value)
        if error is not None:
            raise BadCnpjError(None if value is None else str(value), kind=error)
        canonical = "".join(c for c in value if is_valid_input(c))
        return str.__new__(cls, _normalize(canonical, LENGTH))

    @classmethod
    def _trusted(cls, canonical: str) -> "Cnpj":
        return str.__new__(cls, canonical)

    # ---- validation / parsing ----

    @staticmethod
    def is_valid(value: str | None) -> bool:
        return cnpj_diagnose(value) is None

    @classmethod
    def parse(cls, value: str) -> "Cnpj":
        return cls(value)

    @classmethod
    def try_parse(cls, value: str | None) -> "Cnpj | None":
        if cnpj_diagnose(value) is not None:
            return None
        return cls(value)  # type: ignore[arg-type]

    # ---- creation ----

    @classmethod
    def create(cls, root: str, branch: str | None = None) -> "Cnpj":
        """Creates a CNPJ, computing its check digits.

        With a single argument, it is read as root and branch together:
        the first 12 letters/digits, left-padded with zeros.
        """
        if branch is None:
            root, branch = split_root_and_branch(root)
        cnpj, _ = build_cnpj(root, branch)
        return cls._trusted(cnpj)

    @staticmethod
    def compute_digits(root_and_branch: str) -> int:
        _, digits = build_cnpj(*split_root_and_branch(root_and_branch))
        return digits

    # ---- accessors / formatting ----

    @property
    def value(self) -> str:
        return str.__str__(self)

    @property
    def root(self) -> str:
        return self.value[:ROOT_LENGTH]

    @property
    def branch(self) -> str:
        return self.value[ROOT_LENGTH:12]

    @property
    def check_digits(self) -> str:
        return self.value[12:]

    @property
    def is_headquarters(self) -> bool:
        return self.branch == "0001"

    def format(self, style: str = "G") -> str:
        v = self.value
        style = style.upper()
        if style == "S":
            return v.lstrip("0")
        if style == "B":
            return v
        if style == "BS":
            return v[:ROOT_LENGTH]
        if style == "G":
            return f"{v[:2]}.{v[2:5]}.{v[5:8]}/{v[8:12]}-{v[12:]}"
        raise UnknownFormatStyleError(style, FORMAT_STYLES)

    def __format__(self, spec: str) -> str:
        if not spec or spec.upper() in FORMAT_STYLES:
            return self.format(spec or "G")
        return format(self.format("G"), spec)

    def __str__(self) -> str:
        return self.format("G")

    def __repr__(self) -> str:
        return f"Cnpj({self.format('G')!r})"


Cnpj.EMPTY = Cnpj._trusted("0" * LENGTH)
