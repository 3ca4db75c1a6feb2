"""
.. module:: macaddress
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the :class:`MacAddress` value object.

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

from typing import Optional

from mojo.wakeonlan.constants import REGEX_MAC_ADDRESS
from mojo.wakeonlan.exceptions import InvalidMacAddressError, MacConversionError


def parse_mac_address(mac_text: str) -> Optional[bytes]:
    """
        Validates and converts a MAC address string in a single pass.

        :param mac_text: A MAC address in the form 'aa:bb:cc:dd:ee:ff'.

        :returns: The six octets of the address or None if 'mac_text' is not a valid MAC address.

        :raises MacConversionError: If a validated octet could not be converted.
    """
    octets = None

    if isinstance(mac_text, str):
        mobj = REGEX_MAC_ADDRESS.fullmatch(mac_text)
        if mobj is not None:
            try:
                octets = bytes([ int(grp, 16) for grp in mobj.groups() ])
            except ValueError as verr:
                errmsg = "Unable to convert validated MAC address to bytes. mac={!r}".format(mac_text)
                raise MacConversionError(errmsg) from verr

    return octets


class MacAddress:
    """
        An immutable value object that wraps the string form of a MAC address.
    """

    __slots__ = ("_address",)

    def __init__(self, address: str):
        object.__setattr__(self, "_address", address)
        return

    def __setattr__(self, name, value):
        raise AttributeError("MacAddress objects are immutable.")

    def __eq__(self, other) -> bool:
        if not isinstance(other, MacAddress):
            return NotImplemented

        lhs = parse_mac_address(self._address)
        rhs = parse_mac_address(other._address)
        if lhs is None or rhs is None:
            return self._address == other._address

        return lhs == rhs

    def __hash__(self) -> int:
        octets = parse_mac_address(self._address)
        if octets is None:
            return hash(self._address)
        return hash(octets)

    def __repr__(self) -> str:
        return "MacAddress({!r})".format(self._address)

    def __str__(self) -> str:
        return self._address

    @property
    def address(self) -> str:
        return self._address

    def is_valid(self) -> bool:
        """
            Checks to see if the address is six colon separated octets of two hex digits.
        """
        return parse_mac_address(self._address) is not None

    def as_bytes(self) -> bytes:
        """
            Returns the six octets of the MAC address.

            :raises InvalidMacAddressError: If the address is not a valid MAC address.
        """
        octets = parse_mac_address(self._address)
        if octets is None:
            errmsg = "Invalid MAC address, expected the form 'ff:ff:ff:ff:ff:ff'. mac={!r}".format(self._address)
            raise InvalidMacAddressError(errmsg, self._address)

        return octets

    def normalized(self) -> str:
        """
            Returns the address formatted as lower case octets.
        """
        return ":".join([ "{:02x}".format(b) for b in self.as_bytes() ])
