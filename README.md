# subnetkit

Small, strict parsers for IPv4 and IPv6 addresses and subnets. The package
also has containment checks that treat IPv4-mapped IPv6 addresses (RFC 4038)
as the matching IPv4 hosts.

## Installation

```
pip install subnetkit
```

## Parsing addresses

`subnetkit.parser4.parse4` accepts only dotted-quad IPv4 text. The text must
have exactly four decimal parts, with no leading zeros, each part at most 255,
and at most 15 characters in all.

`subnetkit.parser6.parse6` accepts colon-separated IPv6 text. Each group holds
up to four hex digits, and `::` may appear at most once. The embedded
dotted-quad form, such as `::ffff:1.2.3.4`, is not accepted.

Both functions return a `subnetkit.raw.Raw`. A `Raw` is a frozen 16-byte
address in network byte order. An IPv4 address is stored in its mapped form
`::ffff:a.b.c.d`. Malformed input raises `ValueError`.

```python
from subnetkit.parser4 import parse4
from subnetkit.parser6 import parse6

raw = parse4("192.168.1.1")
raw.dump()        # '00000000000000000000FFFFC0A80101'
raw.addr4()       # the last four bytes: b'\xc0\xa8\x01\x01'
bytes(raw)        # all 16 bytes, same as raw.addr6()

parse6("2001:db8::1").addr6()
```

You can also build a `Raw` directly:

- `Raw.from_ipv4(value)` takes a 32-bit integer or four packed bytes.
- `Raw.from_ipv6(data)` takes sixteen packed bytes.
- `Raw(packed)` takes sixteen packed bytes.

A value of the wrong size raises `ValueError`. `int(raw)` gives the address as
a big-endian integer. `Raw` values can be compared with `==` and `<` and can be
hashed.

## Subnets

```python
from subnetkit.subnet import Subnet, Address

net = Subnet("192.168.0.1/24")
net.v4()          # True
net.cidr()        # 24
net.mask4()       # b'\xff\xff\xff\x00'
net.addr4()       # network address, b'\xc0\xa8\x00\x00'

host = Subnet("192.168.0.255")
net.contains(host)    # True
host.belongs(net)     # True

# A mapped IPv6 host belongs to the matching IPv4 network
Subnet("127.0.0.0/8").contains(Subnet("::ffff:7f00:1"))   # True

Subnet("192.168.1.1").dump()
# '00000000000000000000FFFFC0A80101{FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF}'
```

How the family is chosen: the text is read as IPv4 when it is at least seven
characters long and has a dot in its first four characters. Otherwise it is
read as IPv6.

With no `/prefix`, the subnet is a single host: `/32` for IPv4 and `/128` for
IPv6.

The host bits of the address are cleared, so `addr4()` and `addr6()` return
the network address. `mask4()` and `mask6()` return the netmask as packed
bytes.

The following raise `ValueError`:

- a prefix that is not a number
- a prefix that is out of range for its family, including negative values
- an address that does not parse

`Subnet()` with no argument is empty, and `empty()` returns `True` for it.

An IPv6 subnet whose prefix is at least 96 and whose address has the
`::ffff:0:0/96` form is treated as a mapped IPv4 host. It then matches IPv4
subnets in `contains` and `belongs`. A plain IPv6 network never contains IPv4
hosts, and an IPv4 network never contains non-mapped IPv6 addresses.

`Address` is a `Subnet` that takes no prefix. It always holds a single host,
and input that contains `/` is rejected:

```python
Address("10.10.10.10")
Address("10.0.0.0/8")   # ValueError
```

Comparing subnets:

- `==` matches when both the network address and the prefix are equal.
- `<` is true when either the address or the prefix is smaller. It is not a
  total order, so do not rely on it for sorting.
- Subnets can be hashed.

## What it does not do

There is no command-line tool. Addresses are never formatted back into
dotted or colon text; the only text output is the hexadecimal `dump()`.

## Running the tests

```
pip install -e .[test]
pytest
```