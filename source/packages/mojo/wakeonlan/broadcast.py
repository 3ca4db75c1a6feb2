"""
.. module:: broadcast
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that contains broadcast helper functions for sending Wake-on-LAN magic packets.

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

from typing import Tuple, Union

from enum import Enum

import logging
import socket

from mojo.wakeonlan.constants import (
    WOL_BIND_ADDR_ANY,
    WOL_DEFAULT_PORT
)
from mojo.wakeonlan.exceptions import MagicPacketSendError
from mojo.wakeonlan.magicpacket import MagicPacket, build_magic_packet, check_magic_packet_payload
from mojo.wakeonlan.resolution import is_ipv4_address

logger = logging.getLogger()


class SendStage(Enum):
    """
        The step of a send that failed.
    """
    CREATE = "create"
    BROADCAST = "broadcast"
    BIND = "bind"
    TRANSMIT = "transmit"


class BroadcastTarget:
    """
        The IPv4 address and UDP port a magic packet is sent to.
    """

    __slots__ = ("_address", "_port")

    def __init__(self, address: str, port: int = WOL_DEFAULT_PORT):
        if not isinstance(address, str) or not is_ipv4_address(address):
            raise ValueError("The broadcast target must be an IPv4 address. address={!r}".format(address))

        if isinstance(port, bool) or not isinstance(port, int) or port < 1 or port > 65535:
            raise ValueError("The broadcast target port must be between 1 and 65535. port={!r}".format(port))

        object.__setattr__(self, "_address", address)
        object.__setattr__(self, "_port", port)
        return

    def __setattr__(self, name, value):
        raise AttributeError("BroadcastTarget objects are immutable.")

    def __eq__(self, other) -> bool:
        if not isinstance(other, BroadcastTarget):
            return NotImplemented
        return self.sockaddr == other.sockaddr

    def __hash__(self) -> int:
        return hash(self.sockaddr)

    def __repr__(self) -> str:
        return "BroadcastTarget({!r}, {!r})".format(self._address, self._port)

    def __str__(self) -> str:
        return "{}:{}".format(self._address, self._port)

    @property
    def address(self) -> str:
        return self._address

    @property
    def port(self) -> int:
        return self._port

    @property
    def sockaddr(self) -> Tuple[str, int]:
        return (self._address, self._port)


def send_magic_packet(packet: Union[MagicPacket, bytes], target: BroadcastTarget, bind_address: str = WOL_BIND_ADDR_ANY):
    """
        Sends a magic packet as a single UDP datagram to the specified target.  The send is
        fire-and-forget, a normal return only means the local network stack accepted the
        datagram.

        :param packet: The magic packet to send, raw bytes must be laid out as a magic packet.
        :param target: The broadcast address and port to send the packet to.
        :param bind_address: The local address to bind the sending socket to, the port is
                             always picked by the operating system.

        :raises TypeError: If the packet is not a :class:`MagicPacket`, bytes or bytearray.
        :raises InvalidPacketSizeError: If the packet is not 102 bytes long.
        :raises MalformedMagicPacketError: If raw bytes are not laid out as a magic packet.
        :raises MagicPacketSendError: If the socket could not be created, configured, bound or
                                      if the datagram could not be sent.
    """
    if isinstance(packet, MagicPacket):
        payload = packet.payload
    elif isinstance(packet, (bytes, bytearray)):
        payload = bytes(packet)
        check_magic_packet_payload(payload)
    else:
        raise TypeError("Only magic packets can be sent. type={}".format(type(packet).__name__))

    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as os_err:
        errmsg = "Unable to create a UDP socket to send to target={}.".format(target)
        raise MagicPacketSendError(errmsg, target, SendStage.CREATE) from os_err

    with sock:
        # Sending to a broadcast address is refused by most platforms unless the
        # socket has opted in with SO_BROADCAST.
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        except OSError as os_err:
            errmsg = "Unable to enable broadcast on the socket for target={}.".format(target)
            raise MagicPacketSendError(errmsg, target, SendStage.BROADCAST) from os_err

        try:
            sock.bind((bind_address, 0))
        except OSError as os_err:
            errmsg = "Unable to bind an ephemeral port on address={!r}.".format(bind_address)
            raise MagicPacketSendError(errmsg, target, SendStage.BIND) from os_err

        try:
            sent = sock.sendto(payload, target.sockaddr)
        except OSError as os_err:
            errmsg = "Unable to send the magic packet to target={}.".format(target)
            raise MagicPacketSendError(errmsg, target, SendStage.TRANSMIT) from os_err

        if sent != len(payload):
            errmsg = "Short send of magic packet to target={}. sent={} expected={}".format(
                target, sent, len(payload))
            raise MagicPacketSendError(errmsg, target, SendStage.TRANSMIT)

    logger.debug("Sent magic packet of %d bytes to target=%s", len(payload), target)

    return


def broadcast_wake_on_lan_magic_message(broadcast_addr: str, mac_addr: str, port: int = WOL_DEFAULT_PORT) -> MagicPacket:
    """
        Builds a magic packet for 'mac_addr' and sends it once to 'broadcast_addr'.

        [FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )

        :returns: The magic packet that was sent.
    """
    packet = build_magic_packet(mac_addr)

    target = BroadcastTarget(broadcast_addr, port)
    send_magic_packet(packet, target)

    return packet
