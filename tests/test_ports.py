import pytest

from core.errors import PortSpecError
from core.ports import expand


def test_single_ports():
    assert expand("22,80,443") == [22, 80, 443]


def test_overlapping_ranges_collapse():
    assert expand("1-3,2-4") == [1, 2, 3, 4]


def test_reversed_range_is_normalized():
    ports = expand("443-80")
    assert ports[0] == 80
    assert ports[-1] == 443
    assert len(ports) == 443 - 80 + 1


def test_mixed_tokens_with_whitespace():
    assert expand(" 8080 , 20 - 22, 21 ,80") == [20, 21, 22, 80, 8080]


def test_output_strictly_ascending():
    ports = expand("100-90,95,1,65535,3-1")
    assert all(a < b for a, b in zip(ports, ports[1:]))


def test_boundaries():
    assert expand("1,65535") == [1, 65535]


@pytest.mark.parametrize("spec", ["abc", "22,abc", "0", "65536", "1-70000", "+80", "8o"])
def test_invalid_tokens(spec):
    with pytest.raises(PortSpecError):
        expand(spec)


@pytest.mark.parametrize("spec", ["-5", "5-", "1-2-3", " - "])
def test_malformed_ranges(spec):
    with pytest.raises(PortSpecError):
        expand(spec)


def test_error_names_offending_token():
    with pytest.raises(PortSpecError) as exc_info:
        expand("22,http,80")
    assert exc_info.value.token == "http"
    assert "http" in str(exc_info.value)


@pytest.mark.parametrize("spec", ["", "   "])
def test_empty_spec_is_an_error(spec):
    with pytest.raises(PortSpecError):
        expand(spec)


def test_empty_token_is_an_error():
    with pytest.raises(PortSpecError):
        expand("22,,80")


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        expand("nope")


@pytest.mark.parametrize("spec", ["0" * 5000, "9" * 5000, "1-" + "9" * 5000])
def test_huge_numbers_are_out_of_range(spec):
    with pytest.raises(PortSpecError) as exc_info:
        expand(spec)
    assert "out of range" in str(exc_info.value)


def test_leading_zeros_allowed():
    assert expand("00080,0000443") == [80, 443]
