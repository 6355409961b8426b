"""
.. module:: hwaddress
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for validating and normalizing hardware (MAC) addresses.

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

from mojo.wakeonlan.constants import (
    MAC_ADDRESS_HEX_LENGTH,
    REGEX_MAC_ADDRESS_BARE,
    REGEX_MAC_ADDRESS_PAIRS,
    REGEX_MAC_ADDRESS_QUADS,
    REGEX_NON_HEX_CHARACTERS
)
from mojo.wakeonlan.exceptions import InvalidMacAddressError


def is_mac_address(candidate: str) -> bool:
    """
        Checks to see if 'candidate' is a hardware address in one of the common notations.

        :param candidate: A string that is to be checked to see if it is a valid MAC address.

        :returns: A boolean indicating if the candidate is a MAC address.
    """
    is_mac = False

    if isinstance(candidate, str):
        candidate = candidate.strip()
        if REGEX_MAC_ADDRESS_PAIRS.match(candidate) is not None:
            is_mac = True
        elif REGEX_MAC_ADDRESS_QUADS.match(candidate) is not None:
            is_mac = True
        elif REGEX_MAC_ADDRESS_BARE.match(candidate) is not None:
            is_mac = True

    return is_mac


def normalize_mac_address(mac: str) -> str:
    """
        Normalizes a hardware address to 12 upper case hex digits with no separators.

        :param mac: The MAC address to normalize.

        :returns: The normalized MAC address.

        :raises InvalidMacAddressError: If the MAC address is not valid.
    """
    if not is_mac_address(mac):
        errmsg = "Invalid MAC address. mac={!r}".format(mac)
        raise InvalidMacAddressError(errmsg, mac)

    normalized = REGEX_NON_HEX_CHARACTERS.sub("", mac).upper()

    # The notation check should guarantee this, a short or long address must never
    # be padded or truncated.
    if len(normalized) != MAC_ADDRESS_HEX_LENGTH:
        errmsg = "Invalid MAC address length. mac={!r} digits={}".format(mac, len(normalized))
        raise InvalidMacAddressError(errmsg, mac)

    return normalized


def mac_address_to_bytes(mac: str) -> bytes:
    """
        Converts a hardware address to its 6 raw octets.
    """
    normalized = normalize_mac_address(mac)
    return bytes.fromhex(normalized)


def format_mac_address(mac: str, separator: str=":", lower: bool=False) -> str:
    """
        Formats a hardware address as 6 groups of 2 hex digits.

        :param mac: The MAC address to format, in any accepted notation.
        :param separator: The separator to place between the octets.
        :param lower: Use lower case hex digits when True.

        :returns: The formatted MAC address.
    """
    normalized = normalize_mac_address(mac)
    if lower:
        normalized = normalized.lower()

    octets = [ normalized[idx:idx + 2] for idx in range(0, MAC_ADDRESS_HEX_LENGTH, 2) ]

    return separator.join(octets)
