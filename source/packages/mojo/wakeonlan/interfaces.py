"""
.. module:: interfaces
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for finding the broadcast addresses of internet interfaces

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

from typing import Dict

import netifaces

from mojo.errors.exceptions import SemanticError


def get_ipv4_broadcast_address(ifname: str) -> str:
    """
        Get the IPv4 broadcast address of the first IPv4 address associated with the specified
        interface name.

        :param ifname: The interface name to lookup the broadcast address for.

        :returns: The IPv4 broadcast address of the interface.

        :raises ValueError: If there is no interface with the specified name.
        :raises SemanticError: If the interface has no IPv4 broadcast address.
    """
    bcast_addr = None

    address_info = netifaces.ifaddresses(ifname)
    if address_info is not None and netifaces.AF_INET in address_info:
        for addr_info in address_info[netifaces.AF_INET]:
            if "broadcast" in addr_info:
                bcast_addr = addr_info["broadcast"]
                break

    if bcast_addr is None:
        errmsg = "The interface does not have an IPv4 broadcast address. ifname={}".format(ifname)
        raise SemanticError(errmsg)

    return bcast_addr

def get_ipv4_broadcast_table() -> Dict[str, str]:
    """
        Creates a dictionary lookup table of interface names to IPv4 broadcast addresses for
        the interfaces that have one.

        :returns: The table of interface names to broadcast addresses.
    """

    results = {}

    iface_name_list = [ iface for iface in netifaces.interfaces() ]
    for ifname in iface_name_list:
        address_info = netifaces.ifaddresses(ifname)
        if address_info is not None and netifaces.AF_INET in address_info:
            for addr_info in address_info[netifaces.AF_INET]:
                if "broadcast" in addr_info:
                    results[ifname] = addr_info["broadcast"]
                    break

    return results
