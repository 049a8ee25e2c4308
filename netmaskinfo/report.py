"""Describe an IPv4 address with a prefix length: class, privacy, bits and hosts."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from netmaskinfo.convert import after_char, format_int, index_of, parse_int, split_fields

INVALID_MESSAGE = (
    "You are supposed to give an ip address!\nWhat you provided is invalid!\n"
)
NOTHING_MESSAGE = "Nothing to be done!\n"

_CLASS_A_PRIVATE = "Privacy:\t\t\tPrivate\nClass:\t\t\t\tClass A\n\n"
_CLASS_A_PUBLIC = "Privacy:\t\t\tPublic\nClass:\t\t\t\tClass A\n\n"
_CLASS_B_PRIVATE = "Privacy:\t\t\tprivate\nClass:\t\t\t\tClass B\n\n"
_CLASS_B_PUBLIC = "Privacy:\t\t\tPublic\nClass:\t\t\t\tClass B\\nn"
_CLASS_C_PRIVATE = "Privacy:\t\t\tprivate\nClass:\t\t\t\tClass C\n\n"
_CLASS_C_PUBLIC = "Privacy:\t\t\tPublic\nClass:\t\t\t\tClass C\n\n"
_CLASS_D = "Privacy:\t\t\tPublic\nClass:\t\t\t\tClass D\n\n"
_CLASS_E = "Privacy:\t\t\tPublic\nClass:\t\t\t\tClass E\n\n"


def _tails(ip: str, count: int) -> List[str]:
    """``ip`` followed by the text after each of its first ``count`` dots."""
    tails = [ip]
    rest = ip
    for _ in range(count):
        found = after_char(rest, ".")
        if found is None:
            raise ValueError(f"address {ip!r} has too few dot-separated parts")
        tails.append(found)
        rest = found
    return tails


def is_ip_and_submask(text: Optional[str]) -> bool:
    """True when ``text`` reads as four octets 0-255 followed by ``/`` and a prefix 1-32."""
    if not text:
        return False
    fields = split_fields(text, ".")
    if len(fields) != 4:
        return False
    if not all(0 <= parse_int(field) <= 255 for field in fields):
        return False
    if index_of(fields[3], "/") == -1:
        return False
    parts = split_fields(fields[3], "/")
    if len(parts) < 2:
        return False
    return 0 < parse_int(parts[1]) <= 32


def octet_bits(value: int) -> str:
    """Eight binary digits for ``value``, most significant first.

    Values above 255 saturate to all ones; negative values give all zeros.
    """
    digits = []
    for weight in (128, 64, 32, 16, 8, 4, 2, 1):
        if value - weight >= 0:
            value -= weight
            digits.append("1")
        else:
            digits.append("0")
    return "".join(digits)


def netmask_bits(prefix: int) -> str:
    """The 32-bit mask for ``prefix`` in binary, grouped into dotted octets.

    A prefix outside 0-32 gives a mask of all ones.
    """
    ones = prefix if 0 <= prefix <= 32 else 32
    bits = "1" * ones + "0" * (32 - ones)
    return ".".join(bits[start : start + 8] for start in range(0, 32, 8))


def netmask_dotted(prefix: int) -> str:
    """The dotted-decimal mask line shown for ``prefix``.

    The weight halves before each step and keeps halving across octets, so
    only the first octet ever carries a value.
    """
    remaining = prefix
    weight = 128
    octets = []
    for _ in range(4):
        value = 0
        for _ in range(8):
            if remaining >= 0:
                weight //= 2
                value += weight
                remaining -= 1
        octets.append(format_int(value))
    return ".".join(octets)


def class_privacy(ip: str) -> str:
    """The privacy and class lines for the dotted address ``ip``.

    Returns an empty string when the first octet is outside 0-255.
    """
    head, second_tail = _tails(ip, 1)
    first = parse_int(head)
    second = parse_int(second_tail)
    if 0 <= first <= 127:
        return _CLASS_A_PRIVATE if first == 10 else _CLASS_A_PUBLIC
    if 128 <= first <= 191:
        if first == 172 and 16 <= second <= 31:
            return _CLASS_B_PRIVATE
        return _CLASS_B_PUBLIC
    if 192 <= first <= 223:
        if first == 192 and second == 168:
            return _CLASS_C_PRIVATE
        return _CLASS_C_PUBLIC
    if 224 <= first <= 239:
        return _CLASS_D
    if 240 <= first <= 255:
        return _CLASS_E
    return ""


def ip_section(ip: str) -> str:
    """The address line and its binary form."""
    bits = ".".join(octet_bits(parse_int(tail)) for tail in _tails(ip, 3))
    return f"IP:\t\t\t\t{ip}\n:\t\t\t\t{bits}\n\n"


def netmask_section(subnet: str) -> str:
    """The prefix, its dotted mask line and the mask in binary."""
    prefix = parse_int(subnet)
    return (
        f"Netmask:\t\t\t{subnet}"
        f"\nSub Nemtask:\t\t\t{netmask_dotted(prefix)}"
        f"\n:\t\t\t\t{netmask_bits(prefix)}\n\n"
    )


def host_section(subnet: str) -> str:
    """The number of usable hosts for the prefix in ``subnet``."""
    prefix = parse_int(subnet)
    hosts = 2 ** (32 - prefix) - 2 if prefix <= 32 else -2
    return f"Hosts:\t\t\t\t{format_int(int(hosts))}(+2)\n\n"


def build_report(text: str) -> str:
    """The full report for an ``address/prefix`` argument.

    Raises ValueError when the argument is not a valid address with prefix.
    """
    if not is_ip_and_submask(text):
        raise ValueError(f"not an address with prefix: {text!r}")
    parts = split_fields(text, "/")
    ip, subnet = parts[0], parts[1]
    return (
        class_privacy(ip)
        + ip_section(ip)
        + netmask_section(subnet)
        + host_section(subnet)
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the report for the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stdout.write(NOTHING_MESSAGE)
        return 0
    try:
        report = build_report(args[0])
    except ValueError:
        sys.stdout.write(INVALID_MESSAGE)
        return 0
    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())