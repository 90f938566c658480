import ipaddress

import pytest

from subnetkit.parser6 import parse6

ACCEPTED = [
    pytest.param("2001:db8:3333:4444:5555:6666:7777:8888", id="full-lower"),
    pytest.param("2001:db8:3333:4444:CCCC:DDDD:EEEE:FFFF", id="full-upper"),
    pytest.param("::1234:5678", id="leading-compression"),
    pytest.param("2001:db8::", id="trailing-compression"),
    pytest.param("2001:db8::1234:5678", id="middle-compression"),
    pytest.param("2001:0db8:0001:0000:0000:0ab9:C0A8:0102", id="zero-padded"),
    pytest.param("::", id="unspecified"),
    pytest.param("::1", id="loopback"),
    pytest.param("64:ff9b::", id="nat64"),
    pytest.param("2002::", id="6to4"),
    pytest.param("fe80::2bc6:6b94:64e6:fb7d", id="link-local"),
    pytest.param("fec0::0000:0000:aabb:dd", id="site-local"),
    pytest.param("fc00::a1:2d", id="unique-local"),
    pytest.param("ff00::22", id="multicast"),
]

REJECTED = [
    pytest.param("2001:db8:3333:44444:5555:6666:7777:8888", id="five-digit-group"),
    pytest.param("2001:db8:3333:4444:5555:6666:7777:8888:9999", id="nine-groups"),
    pytest.param("Not even close", id="prose"),
    pytest.param("10.10.10.10", id="ipv4-text"),
    pytest.param("::123:\x004:5678", id="embedded-nul"),
    pytest.param("::123:", id="trailing-colon"),
    pytest.param("2001:db8:3333:4444:5555:6666:7777:xxx", id="bad-hex"),
    pytest.param("22:::1", id="triple-colon"),
    pytest.param("2001:db8:", id="dangling-colon"),
    pytest.param("2001:db8", id="two-groups"),
    pytest.param("2001db8", id="no-colons"),
    pytest.param("2001::db8::1", id="double-compression"),
    pytest.param("::ffff:192.168.1.1", id="dotted-tail"),
    pytest.param("", id="empty"),
]


@pytest.mark.parametrize("text", ACCEPTED)
def test_valid(text):
    assert parse6(text).addr6() == ipaddress.IPv6Address(text).packed


@pytest.mark.parametrize("text", REJECTED)
def test_malformed(text):
    with pytest.raises(ValueError):
        parse6(text)


def test_substring():
    sentence = "address 32001:db8:3333:4444:5555::223 seen in a log line"
    start = sentence.index("2001")
    window = sentence[start:start + 27]
    assert parse6(window).addr6() == ipaddress.IPv6Address("2001:db8:3333:4444:5555::22").packed


def test_mapped_form_matches_ipv4_mapping():
    assert parse6("::ffff:0101:0101").dump() == "00000000000000000000FFFF01010101"


@pytest.mark.parametrize("text", [":", ":1::2", "1:2:3:4:5:6:7:8::"])
def test_bad_colons(text):
    with pytest.raises(ValueError):
        parse6(text)


def test_trailing_compression_after_seven_groups():
    text = "1:2:3:4:5:6:7::"
    assert parse6(text).addr6() == ipaddress.IPv6Address(text).packed