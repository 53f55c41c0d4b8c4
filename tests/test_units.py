import pytest

from lumaprism.units import human_bytes, parse_size_to_bytes


def test_human_bytes_zero():
    assert human_bytes(0) == "0 B"


def test_human_bytes_below_kibi():
    assert human_bytes(1023) == "1023 B"


def test_human_bytes_one_kibi():
    assert human_bytes(1024) == "1.00 KiB"


@pytest.mark.parametrize(
    "power,unit", [(1, "KiB"), (2, "MiB"), (3, "GiB"), (4, "TiB")]
)
def test_human_bytes_units(power, unit):
    formatted = human_bytes(1024**power)
    assert formatted.endswith(unit)
    assert formatted == human_bytes(1024) .replace("KiB", unit)


def test_parse_plain_number():
    assert parse_size_to_bytes("1024") == 1024


def test_parse_kilo():
    assert parse_size_to_bytes("1k") == 1024


@pytest.mark.parametrize(
    "left,right",
    [
        ("2GB", "2048mb"),
        ("2gb", "2GiB"),
        ("  2 GB ", "2g"),
        ("1.5k", "1536"),
        ("1t", "1024g"),
        ("3b", "3"),
    ],
)
def test_parse_equivalent_spellings(left, right):
    assert parse_size_to_bytes(left) == parse_size_to_bytes(right)


def test_parse_fraction_truncates():
    assert parse_size_to_bytes("1.9") == 1


@pytest.mark.parametrize("raw", ["", "   ", "mb", "abc"])
def test_parse_missing_number(raw):
    with pytest.raises(ValueError, match="invalid size"):
        parse_size_to_bytes(raw)


def test_parse_bad_number():
    with pytest.raises(ValueError, match="invalid size number"):
        parse_size_to_bytes("1.2.3k")


@pytest.mark.parametrize("raw", ["5xb", "10 pb", "3 kilobytes"])
def test_parse_unsupported_suffix(raw):
    with pytest.raises(ValueError, match="unsupported size suffix"):
        parse_size_to_bytes(raw)


def test_parse_saturates():
    huge = parse_size_to_bytes("9" * 40 + "t")
    assert huge == parse_size_to_bytes("9" * 50 + "t")
    assert huge.bit_length() == 64