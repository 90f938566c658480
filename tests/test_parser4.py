import ipaddress

import pytest

from subnetkit.parser4 import parse4

EXPECTED_HEX = {
    "1.1.1.1": "01010101",
    "2.22.99.130": "02166382",
    "255.255.255.255": "ffffffff",
    "127.0.0.1": "7f000001",
    "10.10.10.10": "0a0a0a0a",
    "192.168.1.133": "c0a80185",
    "200.1.1.1": "c8010101",
    "224.0.0.1": "e0000001",
    "0.0.0.0": "00000000",
}

REJECTED = [
    pytest.param("a.b.c.d", id="letters"),
    pytest.param("Not even close", id="prose"),
    pytest.param("999.255.255.255", id="octet-overflow"),
    pytest.param("127..0.0.1", id="empty-octet"),
    pytest.param("192.168.1.\x00133", id="embedded-nul"),
    pytest.param("192.168.1.", id="trailing-dot"),
    pytest.param("10.10.10", id="three-octets"),
    pytest.param("22.22", id="two-octets"),
    pytest.param("1.1.1.1.1", id="five-octets"),
    pytest.param("255255255255", id="no-dots"),
    pytest.param("2001:db8:3333:4444:5555:6666:7777:8888", id="ipv6-text"),
    pytest.param("192.168.127.1111", id="four-digit-octet"),
    pytest.param("", id="empty"),
]


@pytest.mark.parametrize(("text", "expected"), sorted(EXPECTED_HEX.items()))
def test_valid(text, expected):
    packed = parse4(text).addr4()
    assert packed.hex() == expected
    assert packed == ipaddress.IPv4Address(text).packed


@pytest.mark.parametrize("text", REJECTED)
def test_malformed(text):
    with pytest.raises(ValueError):
        parse4(text)


def test_substring():
    sentence = "address 2134.55.22.61 seen in a log line"
    start = sentence.index("134")
    window = sentence[start:start + 11]
    assert parse4(window).addr4().hex() == "86371606"


def test_result_is_mapped():
    assert parse4("192.168.1.1").dump() == "00000000000000000000FFFFC0A80101"


@pytest.mark.parametrize("text", ["01.1.1.1", "1.1.1.00", "256.0.0.0", " 1.1.1.1"])
def test_rejects_leading_zeros_overflow_and_spaces(text):
    with pytest.raises(ValueError):
        parse4(text)