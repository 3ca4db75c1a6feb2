"""
.. module:: magicpacket
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that contains the :class:`MagicPacket` type and the function used to
               build a Wake-on-LAN magic packet from a MAC address.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"

from typing import Union

import logging

from mojo.wakeonlan.constants import (
    MAC_ADDRESS_OCTET_COUNT,
    MAGIC_PACKET_MAC_REPETITIONS,
    MAGIC_PACKET_SIZE,
    MAGIC_PACKET_SYNC_HEADER
)
from mojo.wakeonlan.exceptions import (
    InvalidBufferLengthError,
    InvalidPacketSizeError,
    MalformedMagicPacketError
)
from mojo.wakeonlan.macaddress import MacAddress

logger = logging.getLogger()


def check_magic_packet_payload(payload: bytes) -> bytes:
    """
        Checks that 'payload' is a sync header followed by sixteen copies of one MAC address.

        :param payload: The bytes to check.

        :returns: The MAC address octets repeated in the payload.

        :raises InvalidPacketSizeError: If the payload is not 102 bytes long.
        :raises MalformedMagicPacketError: If the payload is not laid out as a magic packet.
    """
    if len(payload) != MAGIC_PACKET_SIZE:
        errmsg = "Magic packets must be {} bytes long. size={}".format(MAGIC_PACKET_SIZE, len(payload))
        raise InvalidPacketSizeError(errmsg, len(payload))

    header_len = len(MAGIC_PACKET_SYNC_HEADER)
    mac_bytes = payload[header_len:header_len + MAC_ADDRESS_OCTET_COUNT]

    if payload[:header_len] != MAGIC_PACKET_SYNC_HEADER:
        errmsg = "Magic packets must start with the sync header. header={}".format(payload[:header_len].hex())
        raise MalformedMagicPacketError(errmsg)

    if payload[header_len:] != mac_bytes * MAGIC_PACKET_MAC_REPETITIONS:
        errmsg = "Magic packets must repeat one MAC address {} times.".format(MAGIC_PACKET_MAC_REPETITIONS)
        raise MalformedMagicPacketError(errmsg)

    return mac_bytes


class MagicPacket:
    """
        The 102 byte payload of a Wake-on-LAN datagram.

        [FF FF FF FF FF FF] + [mac] * 16
    """

    __slots__ = ("_mac_address", "_payload")

    def __init__(self, mac_address: MacAddress, payload: bytes):
        if not isinstance(payload, (bytes, bytearray)):
            raise TypeError("The magic packet payload must be bytes. type={}".format(type(payload).__name__))
        payload = bytes(payload)

        mac_bytes = check_magic_packet_payload(payload)
        if mac_bytes != mac_address.as_bytes():
            errmsg = "The magic packet payload does not carry mac={}.".format(mac_address)
            raise MalformedMagicPacketError(errmsg)

        object.__setattr__(self, "_mac_address", mac_address)
        object.__setattr__(self, "_payload", payload)
        return

    def __setattr__(self, name, value):
        raise AttributeError("MagicPacket objects are immutable.")

    def __bytes__(self) -> bytes:
        return self._payload

    def __len__(self) -> int:
        return len(self._payload)

    def __eq__(self, other) -> bool:
        if isinstance(other, MagicPacket):
            return self._payload == other._payload
        if isinstance(other, (bytes, bytearray)):
            return self._payload == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._payload)

    def __repr__(self) -> str:
        return "MagicPacket(mac_address={!r})".format(str(self._mac_address))

    @property
    def mac_address(self) -> MacAddress:
        return self._mac_address

    @property
    def payload(self) -> bytes:
        return self._payload


def build_magic_packet(mac_text: Union[str, MacAddress]) -> MagicPacket:
    """
        Builds the Wake-on-LAN magic packet for the specified MAC address.

        :param mac_text: The MAC address of the device to wake in the form 'ff:ff:ff:ff:ff:ff'.

        :returns: The magic packet that will wake the device.

        :raises InvalidMacAddressError: If 'mac_text' is not a valid MAC address.
    """
    mac_address = mac_text
    if not isinstance(mac_address, MacAddress):
        mac_address = MacAddress(mac_text)

    mac_bytes = mac_address.as_bytes()
    if len(mac_bytes) != MAC_ADDRESS_OCTET_COUNT:
        errmsg = "The MAC address did not convert to {} octets. found={}".format(
            MAC_ADDRESS_OCTET_COUNT, len(mac_bytes))
        raise InvalidBufferLengthError(errmsg)

    payload = bytearray(MAGIC_PACKET_SYNC_HEADER)
    for _ in range(MAGIC_PACKET_MAC_REPETITIONS):
        payload.extend(mac_bytes)

    if len(payload) != MAGIC_PACKET_SIZE:
        errmsg = "Built a magic packet of the wrong size. expected={} found={}".format(
            MAGIC_PACKET_SIZE, len(payload))
        raise InvalidPacketSizeError(errmsg, len(payload))

    packet = MagicPacket(mac_address, bytes(payload))

    logger.debug("Built magic packet for mac=%s", mac_address)

    return packet
