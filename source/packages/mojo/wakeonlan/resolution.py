"""
.. module:: resolution
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for validating destination ip addresses and
               selecting the address family to send with.

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

import socket

from mojo.wakeonlan.constants import REGEX_IPV4_COMPONENTS, REGEX_IPV6_COMPONENTS
from mojo.wakeonlan.exceptions import InvalidDestinationAddressError


def expand_ipv6_addr(addr: str) -> str:
    """
        Expand the wildcard '::' in an IPv6 address.
    """
    expanded = addr

    # If we see '::' expand it, there should be only one
    double_colon_count = addr.count("::")
    if double_colon_count > 1:
        errmsg = f"Invalid IPv6 address which contains more than one wildcard '::'.  addr={addr}"
        raise ValueError(errmsg)
    elif double_colon_count == 1:
        before_colons, after_colons = addr.split("::")

        before_parts = before_colons.split(":") if before_colons != "" else []
        after_parts = after_colons.split(":") if after_colons != "" else []

        fill_part_count = 8 - (len(before_parts) + len(after_parts))
        if fill_part_count < 1:
            errmsg = f"Invalid IPv6 address, the wildcard '::' does not replace any components.  addr={addr}"
            raise ValueError(errmsg)

        fill_comp = [ nc for nc in '0' * fill_part_count ]
        expanded = ":".join(before_parts + fill_comp + after_parts)

    return expanded


def is_ipv4_address(candidate: str) -> bool:
    """
        Checks to see if 'candidate' is an ipv4 address.

        :param candidate: A string that is to be checked to see if it is a valid IPv4 address.

        :returns: A boolean indicating if an IP address is an IPv4 address
    """
    is_ipv4 = False

    if not isinstance(candidate, str):
        return is_ipv4

    # The regex will ensure that all the component characters are integer characters
    # and that we have the correct number of components.
    mobj = REGEX_IPV4_COMPONENTS.match(candidate)
    if mobj is not None:
        addr_components = [ v for v in mobj.groups() ]
        if len(addr_components) == 4:
            is_ipv4 = True
            for nc in addr_components:
                # A leading zero is read as octal by inet_aton, which would send to a different host
                if len(nc) > 1 and nc.startswith("0"):
                    is_ipv4 = False
                    break
                cval = int(nc)
                if cval < 0 or cval > 255:
                    is_ipv4 = False
                    break

    return is_ipv4


def is_ipv6_address(candidate: str) -> bool:
    """
        Checks to see if 'candidate' is an ipv6 address.

        :param candidate: A string that is to be checked to see if it is a valid IPv6 address.

        :returns: A boolean indicating if an IP address is an IPv6 address
    """
    is_ipv6 = False

    if not isinstance(candidate, str):
        return is_ipv6

    # An IPv4-mapped or IPv4-compatible address carries a dotted quad as its last 32 bits
    head, _, tail = candidate.rpartition(":")
    if "." in tail:
        if head == "" or not is_ipv4_address(tail):
            return is_ipv6
        octets = [ int(nc) for nc in tail.split(".") ]
        candidate = "{}:{:x}:{:x}".format(head, (octets[0] << 8) | octets[1], (octets[2] << 8) | octets[3])

    try:
        candidate = expand_ipv6_addr(candidate)
    except ValueError:
        return is_ipv6

    # The regex will ensure that all the component characters are hex characters
    # and that we have the correct number of components.
    mobj = REGEX_IPV6_COMPONENTS.match(candidate)
    if mobj is not None:
        addr_components = [ v for v in mobj.groups() ]
        if len(addr_components) == 8:
            is_ipv6 = True
            for nc in addr_components:
                cval = int(nc, base=16)
                if cval < 0 or cval > 65535:
                    is_ipv6 = False
                    break

    return is_ipv6


def is_ip_address(candidate: str) -> bool:
    """
        Checks to see if 'candidate' is either an ipv4 or an ipv6 address.
    """
    return is_ipv4_address(candidate) or is_ipv6_address(candidate)


def get_address_family(destination: str) -> socket.AddressFamily:
    """
        Gets the socket address family that must be used to send to the specified destination.

        :param destination: An IPv4 or IPv6 address literal.

        :returns: socket.AF_INET for IPv4 destinations or socket.AF_INET6 for IPv6 destinations.

        :raises InvalidDestinationAddressError: If the destination is not an IP address literal.
    """
    family = None

    if is_ipv4_address(destination):
        family = socket.AF_INET
    elif is_ipv6_address(destination):
        family = socket.AF_INET6
    else:
        errmsg = "Invalid destination address, expected an IPv4 or IPv6 address. destination={!r}".format(destination)
        raise InvalidDestinationAddressError(errmsg, destination)

    return family
