import re
import unittest

from unittest import mock

from mojo.wakeonlan.constants import MAGIC_PACKET_SIZE
from mojo.wakeonlan.exceptions import (
    InvalidBufferLengthError,
    InvalidMacAddressError,
    InvalidPacketSizeError,
    MacConversionError,
    MagicPacketBuildError,
    MalformedMagicPacketError
)
from mojo.wakeonlan.macaddress import MacAddress
from mojo.wakeonlan.magicpacket import MagicPacket, build_magic_packet, check_magic_packet_payload

class TestBuildMagicPacket(unittest.TestCase):

    def test_build_all_ff(self):
        packet = build_magic_packet("ff:ff:ff:ff:ff:ff")
        assert len(packet) == 102
        assert packet == b"\xff" * 102
        assert bytes(packet) == bytes([255] * 102)
        return

    def test_build_is_deterministic(self):
        first = build_magic_packet("ff:ff:ff:ff:ff:ff")
        second = build_magic_packet("ff:ff:ff:ff:ff:ff")
        assert first == second
        assert first.payload == second.payload
        return

    def test_build_known_mac(self):
        packet = build_magic_packet("aa:bb:cc:dd:ee:ff")
        expected = bytes.fromhex("ffffffffffff") + bytes.fromhex("aabbccddeeff") * 16
        assert packet.payload == expected, f"Unexpected payload={packet.payload.hex()}"
        return

    def test_build_structure(self):
        mac = "01:23:45:67:89:AB"
        packet = build_magic_packet(mac).payload

        assert packet[:6] == b"\xff" * 6
        mac_bytes = packet[6:12]
        assert mac_bytes == bytes([0x01, 0x23, 0x45, 0x67, 0x89, 0xab])
        for offset in range(6, MAGIC_PACKET_SIZE, 6):
            assert packet[offset:offset + 6] == mac_bytes, f"Block at offset={offset} does not repeat the mac."
        return

    def test_build_case_insensitive(self):
        lower = build_magic_packet("aa:bb:cc:dd:ee:ff")
        upper = build_magic_packet("AA:BB:CC:DD:EE:FF")
        assert lower == upper
        return

    def test_build_from_mac_address(self):
        mac = MacAddress("aa:bb:cc:dd:ee:ff")
        packet = build_magic_packet(mac)
        assert packet.mac_address is mac
        assert len(packet) == 102
        return

    def test_packet_is_immutable(self):
        packet = build_magic_packet("aa:bb:cc:dd:ee:ff")
        with self.assertRaises(AttributeError):
            packet._payload = b""
        assert isinstance(packet.payload, bytes)
        return


class TestBuildMagicPacketErrors(unittest.TestCase):

    def test_build_invalid_mac(self):
        for candidate in ["", ":::::", "ff:ff:ff:ff:ff", "zz:zz:zz:zz:zz:zz", "not-a-mac"]:
            with self.subTest(candidate=candidate):
                with self.assertRaises(InvalidMacAddressError) as ctx:
                    build_magic_packet(candidate)
                assert ctx.exception.mac_text == candidate
        return

    def test_invalid_mac_is_a_build_error(self):
        with self.assertRaises(MagicPacketBuildError):
            build_magic_packet("aa-bb-cc-dd-ee-ff")
        return

    def test_build_conversion_failure(self):
        loose_regex = re.compile("(..):(..):(..):(..):(..):(..)")
        with mock.patch("mojo.wakeonlan.macaddress.REGEX_MAC_ADDRESS", loose_regex):
            with self.assertRaises(MacConversionError):
                build_magic_packet("zz:zz:zz:zz:zz:zz")
        return

    def test_build_buffer_length_failure(self):
        with mock.patch.object(MacAddress, "as_bytes", return_value=b"\xaa" * 5):
            with self.assertRaises(InvalidBufferLengthError):
                build_magic_packet("aa:aa:aa:aa:aa:aa")
        return

    def test_packet_size_failure(self):
        with self.assertRaises(InvalidPacketSizeError) as ctx:
            MagicPacket(MacAddress("aa:bb:cc:dd:ee:ff"), b"\xff" * 108)
        assert ctx.exception.size == 108
        return

    def test_packet_zero_filled_payload(self):
        with self.assertRaises(MalformedMagicPacketError):
            MagicPacket(MacAddress("aa:bb:cc:dd:ee:ff"), b"\x00" * 102)
        return

    def test_packet_payload_for_other_mac(self):
        other_payload = bytes(build_magic_packet("01:02:03:04:05:06"))
        with self.assertRaises(MalformedMagicPacketError):
            MagicPacket(MacAddress("aa:bb:cc:dd:ee:ff"), other_payload)
        return

    def test_packet_payload_must_be_bytes(self):
        with self.assertRaises(TypeError):
            MagicPacket(MacAddress("aa:bb:cc:dd:ee:ff"), 102)
        return

    def test_check_payload_returns_mac(self):
        payload = b"\xff" * 6 + bytes.fromhex("aabbccddeeff") * 16
        mac_bytes = check_magic_packet_payload(payload)
        assert mac_bytes == bytes.fromhex("aabbccddeeff"), f"Unexpected mac={mac_bytes.hex()}"
        return

    def test_check_payload_bad_header(self):
        payload = b"\xfe" + b"\xff" * 5 + bytes.fromhex("aabbccddeeff") * 16
        with self.assertRaises(MalformedMagicPacketError):
            check_magic_packet_payload(payload)
        return


if __name__ == '__main__':
    unittest.main()
