"""
.. module:: resolution
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for checking the ip addresses magic packets are sent to.

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

from mojo.wakeonlan.constants import IPV4_BROADCAST_OCTET, REGEX_IPV4_COMPONENTS


def is_ipv4_address(candidate: str) -> bool:
    """
        Checks to see if 'candidate' is an ipv4 address.

        :param candidate: A string that is to be checked to see if it is a valid IPv4 address.

        :returns: A boolean indicating if an IP address is an IPv4 address
    """
    is_ipv4 = False

    # The regex will ensure that all the component characters are integer characters
    # and that we have the correct number of components.
    mobj = REGEX_IPV4_COMPONENTS.fullmatch(candidate)
    if mobj is not None:
        addr_components = [ v for v in mobj.groups() ]
        if len(addr_components) == 4:
            is_ipv4 = True
            for nc in addr_components:
                cval = int(nc)
                if cval < 0 or cval > 255:
                    is_ipv4 = False
                    break

    return is_ipv4


def is_ipv4_broadcast_address(candidate: str) -> bool:
    """
        Checks to see if 'candidate' looks like an ipv4 broadcast address, either the limited
        broadcast address '255.255.255.255' or a subnet address with a last octet of '255'.

        :param candidate: A string that is to be checked.

        :returns: A boolean indicating if the address looks like a broadcast address.
    """
    is_bcast = False

    if is_ipv4_address(candidate):
        last_octet = candidate.split(".")[-1]
        if int(last_octet) == int(IPV4_BROADCAST_OCTET):
            is_bcast = True

    return is_bcast
