# netmaskinfo

A small command-line tool. You give it an IPv4 address with a prefix length,
such as `192.168.1.10/24`, and it prints a short description:

- the address class (A to E) and whether the address is private or public
- the address in dotted form and in binary, octet by octet
- the prefix length, a dotted-decimal mask line and the mask in binary
- the number of usable hosts, `2 ** (32 - prefix) - 2`, followed by `(+2)`

## Installation

```
pip install .
```

## Usage

```
netmaskinfo 192.168.1.10/24
```

With no argument the tool prints `Nothing to be done!`. An argument must be
four dot-separated octets from 0 to 255, with the last one followed by `/`
and a prefix length from 1 to 32. Anything else makes the tool print a
message saying that the input is invalid. The exit status is always 0.

Private ranges are recognised by their first octets: `10`, `172` with a
second octet from 16 to 31, and `192.168`. Addresses in class D and E are
always reported as public.

## Library use

The report can be built as a string without printing it:

```python
from netmaskinfo.report import build_report, is_ip_and_submask

if is_ip_and_submask("10.0.0.1/8"):
    print(build_report("10.0.0.1/8"))
```

`build_report` raises `ValueError` when its argument is not a valid address
with a prefix. The parts of the report are available on their own from
`netmaskinfo.report`:

- `class_privacy(ip)`: the privacy and class lines
- `ip_section(ip)`: the address line and its binary form
- `netmask_section(subnet)`: the prefix, the dotted mask line and the binary mask
- `host_section(subnet)`: the host count line
- `octet_bits(value)`: eight binary digits for one octet
- `netmask_bits(prefix)`: the 32-bit mask in binary, grouped into dotted octets
- `netmask_dotted(prefix)`: the dotted mask line

Note that `netmask_dotted` halves its weight on every step without resetting
it per octet, so only the first octet of that line ever carries a value; the
binary mask from `netmask_bits` is the full mask.

Small helper modules come with the package:

- `netmaskinfo.convert`: `parse_int` (leading-integer parsing with 32-bit
  wrap-around), `format_int`, `split_fields` (splitting that drops empty
  fields) and character searches (`index_of`, `after_char`, `find_char`,
  `rfind_char`)
- `netmaskinfo.textutil`: bounded search and comparison, trimming,
  substrings, `bounded_copy` and `bounded_concat`
- `netmaskinfo.bytesutil`: filling, copying, moving, searching and comparing
  byte buffers
- `netmaskinfo.charclass`: ASCII classification and case conversion
- `netmaskinfo.output`: writing characters, strings and numbers to a stream
- `netmaskinfo.linkedlist`: `LinkedList`, an ordered sequence with append,
  prepend, clearing, mapping and line-by-line writing

## What it does not do

The tool does not compute the network address, the broadcast address or the
first and last host addresses, and it does not handle IPv6. The address and
prefix are checked only as described above; the report is text on standard
output with no other output formats.

## Running the tests

```
pip install .[test]
pytest
```