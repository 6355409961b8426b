"""
.. module:: broadcast
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that contains broadcast helper functions.

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

import logging
import socket

from mojo.wakeonlan.constants import WOL_PORT
from mojo.wakeonlan.exceptions import InvalidDestinationAddressError, create_socket_error
from mojo.wakeonlan.magicpacket import get_magic_packet
from mojo.wakeonlan.resolution import get_address_family


logger = logging.getLogger()


def create_broadcast_socket(family: socket.AddressFamily = socket.AF_INET) -> socket.socket:
    """
        Create a UDP socket that is allowed to send datagrams to broadcast addresses.

        :param family: The internet address family for the socket, either (socket.AF_INET or socket.AF_INET6)

        :returns: The datagram socket with the SO_BROADCAST option set.

        :raises SocketError: If the socket could not be created or configured.
    """

    if family not in (socket.AF_INET, socket.AF_INET6):
        errmsg = "Socket family not supported. family=%r" % family
        raise InvalidDestinationAddressError(errmsg, None)

    sock = None

    try:
        sock = socket.socket(family, socket.SOCK_DGRAM)

        # The broadcast option must be set before the first send to a broadcast address,
        # it is harmless for unicast destinations.
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
    except OSError as os_err:
        if sock is not None:
            sock.close()
        raise create_socket_error("Error attempting to create a broadcast socket.", os_err) from os_err

    return sock


def broadcast_wake_on_lan_magic_message(broadcast_addr: str, mac_addr: str, port: int = WOL_PORT):
    """
        Sends a single magic packet and blocks until the datagram has been handed to the
        network stack.

        '[FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )'

        :param broadcast_addr: The IPv4 or IPv6 address to send the magic packet to.
        :param mac_addr: The hardware address of the device to wake.
        :param port: The UDP port to send the magic packet to.
    """
    packet = get_magic_packet(mac_addr)
    family = get_address_family(broadcast_addr)

    sock = create_broadcast_socket(family)
    try:
        sock.sendto(packet, (broadcast_addr, port))
    except OSError as os_err:
        raise create_socket_error("Error sending magic packet.", os_err, destination=broadcast_addr) from os_err
    finally:
        sock.close()

    logger.debug("Sent magic packet. mac=%s destination=%s port=%d", mac_addr, broadcast_addr, port)

    return
