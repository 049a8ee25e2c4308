import pytest

from netmaskinfo.report import (
    build_report,
    class_privacy,
    host_section,
    ip_section,
    is_ip_and_submask,
    main,
    netmask_bits,
    netmask_dotted,
    netmask_section,
    octet_bits,
)


@pytest.mark.parametrize(
    "text", ["192.168.1.1/24", "10.0.0.1/8", "0.0.0.0/32", "255.255.255.255/1"]
)
def test_valid_addresses_accepted(text):
    assert is_ip_and_submask(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "",
        None,
        "192.168.1.1",
        "256.1.1.1/24",
        "1.1.1.1/0",
        "1.1.1.1/33",
        "1.1.1/24",
        "1.1.1.1.1/24",
        "1.1.1.1/",
        "-1.1.1.1/24",
    ],
)
def test_invalid_addresses_rejected(text):
    assert is_ip_and_submask(text) is False


@pytest.mark.parametrize("value", range(256))
def test_octet_bits_round_trip(value):
    bits = octet_bits(value)
    assert len(bits) == 8
    assert int(bits, 2) == value


def test_octet_bits_saturates_and_floors():
    assert int(octet_bits(300), 2) == 255
    assert int(octet_bits(-5), 2) == 0


@pytest.mark.parametrize("prefix", range(33))
def test_netmask_bits_shape(prefix):
    bits = netmask_bits(prefix)
    groups = bits.split(".")
    assert [len(g) for g in groups] == [8, 8, 8, 8]
    flat = "".join(groups)
    assert flat.count("1") == prefix
    assert flat.startswith("1" * prefix)


@pytest.mark.parametrize("prefix", [-3, 40])
def test_netmask_bits_out_of_range_is_all_ones(prefix):
    assert netmask_bits(prefix).replace(".", "") == "1" * 32


def test_netmask_dotted_only_first_octet_set():
    firsts = []
    for prefix in range(1, 33):
        octets = netmask_dotted(prefix).split(".")
        assert len(octets) == 4
        assert octets[1:] == ["0", "0", "0"]
        firsts.append(int(octets[0]))
    assert firsts == sorted(firsts)
    assert max(firsts) <= 127


def test_netmask_dotted_pinned():
    assert netmask_dotted(24) == "127.0.0.0"


@pytest.mark.parametrize(
    "ip, expected",
    [
        ("10.0.0.1", "Privacy:\t\t\tPrivate\nClass:\t\t\t\tClass A\n\n"),
        ("8.8.8.8", "Privacy:\t\t\tPublic\nClass:\t\t\t\tClass A\n\n"),
        ("172.16.0.1", "Privacy:\t\t\tprivate\nClass:\t\t\t\tClass B\n\n"),
        ("172.31.0.1", "Privacy:\t\t\tprivate\nClass:\t\t\t\tClass B\n\n"),
        ("172.32.0.1", "Privacy:\t\t\tPublic\nClass:\t\t\t\tClass B\\nn"),
        ("192.168.1.1", "Privacy:\t\t\tprivate\nClass:\t\t\t\tClass C\n\n"),
        ("193.168.1.1", "Privacy:\t\t\tPublic\nClass:\t\t\t\tClass C\n\n"),
        ("224.0.0.1", "Privacy:\t\t\tPublic\nClass:\t\t\t\tClass D\n\n"),
        ("240.0.0.1", "Privacy:\t\t\tPublic\nClass:\t\t\t\tClass E\n\n"),
        ("256.0.0.1", ""),
    ],
)
def test_class_privacy(ip, expected):
    assert class_privacy(ip) == expected


def test_class_privacy_needs_a_dot():
    with pytest.raises(ValueError):
        class_privacy("10")


def test_ip_section_layout():
    ip = "192.168.1.7"
    section = ip_section(ip)
    assert section.startswith("IP:\t\t\t\t" + ip + "\n:\t\t\t\t")
    assert section.endswith("\n\n")
    bits = section.split(":\t\t\t\t")[-1].strip()
    assert [int(group, 2) for group in bits.split(".")] == [192, 168, 1, 7]


def test_ip_section_needs_four_parts():
    with pytest.raises(ValueError):
        ip_section("1.2.3")


def test_netmask_section_layout():
    section = netmask_section("24")
    assert section.startswith("Netmask:\t\t\t24\nSub Nemtask:\t\t\t")
    assert netmask_dotted(24) in section
    assert section.endswith(netmask_bits(24) + "\n\n")


def test_host_section_pinned():
    assert host_section("24") == "Hosts:\t\t\t\t254(+2)\n\n"


@pytest.mark.parametrize("prefix", range(1, 33))
def test_host_section_counts(prefix):
    section = host_section(str(prefix))
    assert section.startswith("Hosts:\t\t\t\t")
    assert section.endswith("(+2)\n\n")
    number = section.removeprefix("Hosts:\t\t\t\t").removesuffix("(+2)\n\n")
    assert int(number) + 2 == 1 << (32 - prefix)


def test_build_report_is_sections_in_order():
    report = build_report("172.16.5.4/20")
    assert report == (
        class_privacy("172.16.5.4")
        + ip_section("172.16.5.4")
        + netmask_section("20")
        + host_section("20")
    )


@pytest.mark.parametrize("text", ["nonsense", "1.2.3.4/40", "1/2.2.3.4/24"])
def test_build_report_rejects_invalid(text):
    with pytest.raises(ValueError):
        build_report(text)


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Nothing to be done!\n"


def test_main_with_invalid_argument(capsys):
    assert main(["hello"]) == 0
    assert capsys.readouterr().out == (
        "You are supposed to give an ip address!\nWhat you provided is invalid!\n"
    )


def test_main_with_valid_argument(capsys):
    assert main(["10.1.2.3/8"]) == 0
    out = capsys.readouterr().out
    assert out == build_report("10.1.2.3/8")
    assert out.startswith("Privacy:\t\t\tPrivate\nClass:\t\t\t\tClass A\n\n")