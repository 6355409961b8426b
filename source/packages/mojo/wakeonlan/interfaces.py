"""
.. module:: interfaces
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for finding the broadcast addresses of the network
               interfaces magic packets can be sent from.

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

import netifaces

from mojo.wakeonlan.constants import LIMITED_BROADCAST_ADDRESS


def get_interface_broadcast_addresses(ifname: str) -> List[str]:
    """
        Get the IPv4 broadcast addresses associated with the specified interface name.

        :param ifname: The interface name to lookup the broadcast addresses for.

        :returns: The list of broadcast addresses, an interface can have more than one address
                  in the same family or none at all.
    """
    bcast_list = []

    address_info = netifaces.ifaddresses(ifname)
    if address_info is not None and netifaces.AF_INET in address_info:
        for addr_info in address_info[netifaces.AF_INET]:
            if "broadcast" in addr_info:
                bcast_list.append(addr_info["broadcast"])

    return bcast_list


def get_broadcast_addresses(exclude_interfaces: List[str]=["lo"], include_interfaces: Optional[List[str]]=None) -> List[str]:
    """
        Gets the limited broadcast address followed by the directed broadcast address of each
        interface, magic packets need to go out of every NIC to reach every subnet.

        :param exclude_interfaces: The interface names to skip.
        :param include_interfaces: When specified, only these interface names are inspected.

        :returns: The de-duplicated list of broadcast addresses in interface order.
    """

    interface_list = None
    if include_interfaces is not None:
        interface_list = include_interfaces
    else:
        interface_list = netifaces.interfaces()

    bcast_list = [LIMITED_BROADCAST_ADDRESS]

    for ifname in interface_list:
        if ifname not in exclude_interfaces:
            for bcast in get_interface_broadcast_addresses(ifname):
                if bcast not in bcast_list:
                    bcast_list.append(bcast)

    return bcast_list
