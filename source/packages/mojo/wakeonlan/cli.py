"""
.. module:: cli
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: The command line front end for sending Wake-on-LAN magic packets.

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

from typing import List, Optional

import argparse
import logging
import sys

from mojo.errors.exceptions import SemanticError

from mojo.wakeonlan.broadcast import BroadcastTarget, send_magic_packet
from mojo.wakeonlan.constants import WOL_ALTERNATE_PORT, WOL_DEFAULT_BROADCAST_ADDR, WOL_DEFAULT_PORT
from mojo.wakeonlan.exceptions import MagicPacketBuildError, MagicPacketSendError
from mojo.wakeonlan.interfaces import get_ipv4_broadcast_address, get_ipv4_broadcast_table
from mojo.wakeonlan.magicpacket import build_magic_packet
from mojo.wakeonlan.resolution import is_ipv4_broadcast_address

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

logger = logging.getLogger()


def port_number(text: str) -> int:
    try:
        port = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid port: {!r}".format(text)) from None

    if port < 1 or port > 65535:
        raise argparse.ArgumentTypeError("port must be between 1 and 65535: {}".format(port))

    return port


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mojo-wol",
        description="Wake a device by sending a Wake-on-LAN magic packet to a broadcast address.")

    parser.add_argument("-m", "--mac", required=True,
        help="MAC address in the form FF:FF:FF:FF:FF:FF")

    dest_group = parser.add_mutually_exclusive_group()
    dest_group.add_argument("-b", "--bcast", metavar="ADDRESS", default=WOL_DEFAULT_BROADCAST_ADDR,
        help="broadcast address (default: %(default)s)")
    dest_group.add_argument("-i", "--interface", metavar="IFNAME",
        help="send to the IPv4 broadcast address of this interface")

    parser.add_argument("-p", "--port", type=port_number, default=WOL_DEFAULT_PORT,
        help="UDP port (default: %(default)s, {} is also common)".format(WOL_ALTERNATE_PORT))
    parser.add_argument("-n", "--count", type=int, default=1,
        help="number of times to send the packet (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
        help="enable debug logging")

    return parser


def resolve_broadcast_address(args: argparse.Namespace) -> str:
    bcast_addr = args.bcast

    if args.interface is not None:
        try:
            bcast_addr = get_ipv4_broadcast_address(args.interface)
        except (ValueError, SemanticError):
            available = ", ".join(
                "{}={}".format(ifname, addr) for ifname, addr in get_ipv4_broadcast_table().items())
            logger.info("Interfaces with IPv4 broadcast addresses: %s", available or "none")
            raise

        logger.debug("Using broadcast address=%s of interface=%s", bcast_addr, args.interface)

    return bcast_addr


def main(argv: Optional[List[str]] = None) -> int:
    """
        Runs the command line.

        :param argv: The arguments to parse, defaults to the process arguments.

        :returns: The process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.count < 1:
        parser.error("argument -n/--count: must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s")

    try:
        packet = build_magic_packet(args.mac)
    except MagicPacketBuildError as build_err:
        print("could not build packet: {}".format(build_err), file=sys.stderr)
        return EXIT_FAILURE

    try:
        bcast_addr = resolve_broadcast_address(args)
        target = BroadcastTarget(bcast_addr, args.port)
    except (ValueError, SemanticError) as addr_err:
        print("could not parse broadcast address: {}".format(addr_err), file=sys.stderr)
        return EXIT_FAILURE

    if not is_ipv4_broadcast_address(target.address):
        logger.warning("The address=%s does not look like a broadcast address.", target.address)

    for _ in range(args.count):
        try:
            send_magic_packet(packet, target)
        except MagicPacketSendError as send_err:
            errmsg = str(send_err)
            if send_err.__cause__ is not None:
                errmsg = "{} ({})".format(errmsg, send_err.__cause__)
            print("could not send request: {}".format(errmsg), file=sys.stderr)
            return EXIT_FAILURE

    print("packet sent Ok")

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
