"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the constants that are used in association with Wake-on-LAN.

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

import re

WOL_DEFAULT_PORT = 9
WOL_ALTERNATE_PORT = 7

WOL_DEFAULT_BROADCAST_ADDR = "255.255.255.255"
WOL_BIND_ADDR_ANY = "0.0.0.0"

MAC_ADDRESS_OCTET_COUNT = 6

MAGIC_PACKET_SYNC_BYTE = 0xFF
MAGIC_PACKET_SYNC_HEADER = bytes([MAGIC_PACKET_SYNC_BYTE] * MAC_ADDRESS_OCTET_COUNT)
MAGIC_PACKET_MAC_REPETITIONS = 16

# 6 + (16 * 6) = 102
MAGIC_PACKET_SIZE = len(MAGIC_PACKET_SYNC_HEADER) + (MAGIC_PACKET_MAC_REPETITIONS * MAC_ADDRESS_OCTET_COUNT)

# Six colon separated octets of exactly two hex digits, each octet is captured so the
# same match is used for both validation and conversion.
REGEX_MAC_ADDRESS = re.compile(
    "([0-9A-Fa-f]{2}):([0-9A-Fa-f]{2}):([0-9A-Fa-f]{2}):([0-9A-Fa-f]{2}):([0-9A-Fa-f]{2}):([0-9A-Fa-f]{2})"
)

REGEX_IPV4_COMPONENTS = re.compile("([0-9]{1,3})[.]([0-9]{1,3})[.]([0-9]{1,3})[.]([0-9]{1,3})")

IPV4_BROADCAST_OCTET = "255"
