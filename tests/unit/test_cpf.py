import pytest

from brazilian_documents.domain.errors import BadCpfError, ErrorKind, OutOfRangeError, UnknownFormatStyleError
from brazilian_documents.domain.value_objects.cpf import Cpf, cpf_diagnose


def test_parse_formatted_cpf():
    cpf = Cpf.parse("123.456.789-09")
    assert cpf == 12345678909
    assert cpf.base == 123456789
    assert cpf.check_digits == 9
    assert str(cpf) == "123.456.789-09"


def test_leading_zeros_may_be_omitted():
    cpf = Cpf("12345.67890")
    assert cpf == Cpf(1234567890)
    assert cpf.format("G") == "012.345.678-90"
    assert cpf.format("B") == "01234567890"
    assert cpf.format("S") == "1234567890"


def test_format_style_is_case_insensitive_and_defaults_to_general():
    cpf = Cpf(1234567890)
    assert cpf.format("b") == "01234567890"
    assert f"{cpf}" == "012.345.678-90"
    assert f"{cpf:S}" == "1234567890"
    assert repr(cpf) == "Cpf('012.345.678-90')"


def test_unknown_format_style():
    with pytest.raises(UnknownFormatStyleError) as exc:
        Cpf(1234567890).format("BS")
    assert exc.value.kind is ErrorKind.UNKNOWN_FORMAT_STYLE
    assert str(exc.value) == "Format must be S, B or G, not 'BS'."


@pytest.mark.parametrize(
    "base,expected",
    [(987654321, "987.654.321-00"), (111222333, "111.222.333-96"), (999888777, "999.888.777-14")],
)
def test_create_appends_check_digits(base, expected):
    assert Cpf.create(base).format("G") == expected


def test_create_from_string():
    assert Cpf.create("111.222.333") == 11122233396


def test_compute_digits():
    assert Cpf.compute_digits(123456789) == 9
    assert Cpf.compute_digits(987654321) == 0
    assert Cpf.compute_digits(111222333) == 96


def test_create_out_of_range():
    with pytest.raises(OutOfRangeError):
        Cpf.create(-1)
    with pytest.raises(OutOfRangeError):
        Cpf.create(1_000_000_000)


def test_create_rejects_malformed_string():
    with pytest.raises(BadCpfError) as exc:
        Cpf.create("12a")
    assert exc.value.kind is ErrorKind.INVALID_CHARACTER


@pytest.mark.parametrize(
    "value,kind",
    [
        (None, ErrorKind.NULL_OR_EMPTY_INPUT),
        ("", ErrorKind.NULL_OR_EMPTY_INPUT),
        ("1" * 21, ErrorKind.INPUT_TOO_LONG),
        ("123 456 789 09", ErrorKind.INVALID_CHARACTER),
        ("123/456", ErrorKind.INVALID_CHARACTER),
        ("...", ErrorKind.WRONG_VALID_CHARACTER_COUNT),
        ("123456789012", ErrorKind.WRONG_VALID_CHARACTER_COUNT),
        ("123.456.789-08", ErrorKind.CHECKSUM_MISMATCH),
        (-5, ErrorKind.OUT_OF_RANGE),
        (True, ErrorKind.INVALID_CHARACTER),
    ],
)
def test_diagnose(value, kind):
    assert cpf_diagnose(value) is kind
    assert not Cpf.is_valid(value)
    assert Cpf.try_parse(value) is None


def test_constructor_raises_with_kind():
    with pytest.raises(BadCpfError) as exc:
        Cpf("123.456.789-08")
    assert exc.value.kind is ErrorKind.CHECKSUM_MISMATCH
    assert exc.value.invalid_document == "123.456.789-08"


def test_empty_sentinel():
    assert Cpf.EMPTY == 0
    assert Cpf.EMPTY.format("G") == "000.000.000-00"


def test_is_valid_accepts_int():
    assert Cpf.is_valid(12345678909)
    assert Cpf.try_parse(12345678909) == Cpf("123.456.789-09")


def test_upper_bound_is_out_of_range():
    assert not Cpf.is_valid(100_000_000_000)
    assert cpf_diagnose(100_000_000_000) is ErrorKind.OUT_OF_RANGE


def test_create_then_format():
    assert Cpf.create(123456789).format("G") == "123.456.789-09"


@pytest.mark.parametrize("value", [1.5, b"12345678909", ["123"], object()])
def test_non_text_input_is_invalid_not_an_error(value):
    assert cpf_diagnose(value) is ErrorKind.INVALID_CHARACTER
    assert not Cpf.is_valid(value)
    assert Cpf.try_parse(value) is None
    with pytest.raises(BadCpfError):
        Cpf(value)


def test_int_format_specs_still_work():
    cpf = Cpf(12345678909)
    assert f"{cpf:d}" == "12345678909"
    assert f"{cpf:,}" == "12,345,678,909"
    assert f"{cpf:015d}" == "000012345678909"
    assert f"{cpf:G}" == "123.456.789-09"
