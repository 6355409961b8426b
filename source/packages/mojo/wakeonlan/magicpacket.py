"""
.. module:: magicpacket
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the functions that build and recognize Wake-on-LAN magic packets.

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

from mojo.wakeonlan.constants import (
    MAC_ADDRESS_SIZE,
    MAGIC_PACKET_MAC_REPEAT,
    MAGIC_PACKET_SIZE,
    MAGIC_PACKET_SYNC_STREAM
)
from mojo.wakeonlan.hwaddress import mac_address_to_bytes, normalize_mac_address


def get_magic_packet(mac_address: str) -> bytes:
    """
        Creates a magic packet for the specified hardware address.  The packet layout is:

            [FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )

        :param mac_address: The hardware address of the device to wake, colon, dash, dot or
                            no separator notation.

        :returns: The 102 byte magic packet.

        :raises InvalidMacAddressError: If the MAC address is not valid.
    """
    mac_bytes = mac_address_to_bytes(mac_address)

    packet = MAGIC_PACKET_SYNC_STREAM + (mac_bytes * MAGIC_PACKET_MAC_REPEAT)

    return packet


def get_magic_packet_mac(payload: bytes) -> Optional[str]:
    """
        Extracts the hardware address from a magic packet.

        :param payload: The datagram payload to inspect.

        :returns: The normalized MAC address the packet is meant to wake or None if the payload
                  is not a well formed magic packet.
    """
    mac_address = None

    if len(payload) == MAGIC_PACKET_SIZE and payload[:MAC_ADDRESS_SIZE] == MAGIC_PACKET_SYNC_STREAM:
        mac_bytes = bytes(payload[MAC_ADDRESS_SIZE:MAC_ADDRESS_SIZE * 2])
        if bytes(payload[MAC_ADDRESS_SIZE:]) == mac_bytes * MAGIC_PACKET_MAC_REPEAT:
            mac_address = mac_bytes.hex().upper()

    return mac_address


def is_magic_packet(payload: bytes, mac_address: Optional[str]=None) -> bool:
    """
        Checks to see if 'payload' is a well formed magic packet, optionally for a specific
        hardware address.
    """
    found_mac = get_magic_packet_mac(payload)

    if found_mac is None:
        return False

    if mac_address is not None:
        return found_mac == normalize_mac_address(mac_address)

    return True
