"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the constants used for building and sending Wake-on-LAN magic packets.

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

# The well-known 'discard' port that Wake-on-LAN magic packets are sent to
WOL_PORT = 9

LIMITED_BROADCAST_ADDRESS = "255.255.255.255"

DEFAULT_DESTINATION = LIMITED_BROADCAST_ADDRESS
DEFAULT_REPETITION = 5
DEFAULT_WAIT_MS = 100

# Magic packet layout:  [FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )
MAC_ADDRESS_SIZE = 6
MAC_ADDRESS_HEX_LENGTH = MAC_ADDRESS_SIZE * 2
MAGIC_PACKET_SYNC_STREAM = b"\xff" * MAC_ADDRESS_SIZE
MAGIC_PACKET_MAC_REPEAT = 16
MAGIC_PACKET_SIZE = MAC_ADDRESS_SIZE + (MAC_ADDRESS_SIZE * MAGIC_PACKET_MAC_REPEAT)

REGEX_NON_HEX_CHARACTERS = re.compile(r"[^0-9a-fA-F]")

# 01:23:45:67:89:ab, 01-23-45-67-89-ab, 0123.4567.89ab or 0123456789ab, the
# separator must be the same throughout the address
REGEX_MAC_ADDRESS_PAIRS = re.compile(r"^[0-9a-fA-F]{2}([:-])(?:[0-9a-fA-F]{2}\1){4}[0-9a-fA-F]{2}\Z")
REGEX_MAC_ADDRESS_QUADS = re.compile(r"^[0-9a-fA-F]{4}\.[0-9a-fA-F]{4}\.[0-9a-fA-F]{4}\Z")
REGEX_MAC_ADDRESS_BARE = re.compile(r"^[0-9a-fA-F]{12}\Z")

REGEX_IPV4_COMPONENTS = re.compile(r"^([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\Z")
REGEX_IPV6_COMPONENTS = re.compile(
    r"^([0-9a-fA-F]{1,4}):([0-9a-fA-F]{1,4}):([0-9a-fA-F]{1,4}):([0-9a-fA-F]{1,4}):"
    r"([0-9a-fA-F]{1,4}):([0-9a-fA-F]{1,4}):([0-9a-fA-F]{1,4}):([0-9a-fA-F]{1,4})\Z"
)
