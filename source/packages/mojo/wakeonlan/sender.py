"""
.. module:: sender
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the functions that send sequences of Wake-on-LAN magic packets.

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

from typing import Any, Callable, Dict, Iterable, List, Optional, Union

import logging

from mojo.wakeonlan.exceptions import WakeOnLanError
from mojo.wakeonlan.magicpacket import get_magic_packet
from mojo.wakeonlan.resolution import get_address_family
from mojo.wakeonlan.sendconfig import SendConfig
from mojo.wakeonlan.sendsession import CompletionCallback, MagicPacketSendSession


logger = logging.getLogger()

SendOptions = Optional[Union[SendConfig, Dict[str, Any]]]


def send(mac_address: str, options: SendOptions=None, on_done: Optional[CompletionCallback]=None) -> Optional[MagicPacketSendSession]:
    """
        Sends a sequence of magic packets to wake the device with the specified hardware address.
        The function returns as soon as the sequence is started, the packets are sent from a
        worker thread.

        :param mac_address: The hardware address of the device to wake.
        :param options: A :class:`SendConfig` or a dictionary with any of the 'destination',
                        'repetition', 'wait' or 'port' options.
        :param on_done: Called exactly once with None when all the packets were sent or with the
                        error that ended the sequence.

        :returns: The running :class:`MagicPacketSendSession` or None if the sequence could not
                  be started and the error was reported to 'on_done'.

        :raises InvalidMacAddressError: If the MAC address is invalid and no 'on_done' was given.
        :raises InvalidDestinationAddressError: If the destination is invalid and no 'on_done'
                                                was given.
        :raises InvalidSendOptionError: If an option is unknown or unusable and no 'on_done' was
                                        given.
    """
    try:
        config = SendConfig.from_options(options)
        packet = get_magic_packet(mac_address)
        family = get_address_family(config.destination)
    except WakeOnLanError as err:
        logger.error("Unable to start sending magic packets. mac=%r options=%r error=%s",
                     mac_address, options, err)
        if on_done is None:
            raise
        on_done(err)
        return None

    session = MagicPacketSendSession(packet, config.destination, family, config,
                                     on_done=on_done, mac_address=mac_address)
    session.start()

    return session


def send_and_wait(mac_address: str, options: SendOptions=None, timeout: Optional[float]=None) -> MagicPacketSendSession:
    """
        Sends a sequence of magic packets and blocks until the sequence has completed.

        :raises TimeoutError: If the sequence did not complete within 'timeout' seconds.
        :raises WakeOnLanError: The error that ended the sequence.
    """
    session = send(mac_address, options)

    if not session.wait(timeout):
        errmsg = "Timeout waiting for magic packets to be sent. mac={} timeout={}".format(mac_address, timeout)
        raise TimeoutError(errmsg)

    if session.error is not None:
        raise session.error

    return session


def wake_devices(mac_addresses: Iterable[str], options: SendOptions=None,
                 on_done: Optional[Callable[[str, Optional[Exception]], None]]=None) -> List[Optional[MagicPacketSendSession]]:
    """
        Starts an independent send sequence for each of the hardware addresses specified.  Each
        sequence owns its own socket and timing.

        :param mac_addresses: The hardware addresses of the devices to wake.
        :param options: The send options shared by every sequence.
        :param on_done: Called exactly once per hardware address with the address and the error
                        that ended its sequence or None.

        :returns: The list of sessions in the order of the hardware addresses.
    """

    def bind_completion(mac_address: str) -> Optional[CompletionCallback]:
        if on_done is None:
            return None

        def completion(error: Optional[Exception]):
            on_done(mac_address, error)
            return

        return completion

    session_list = []

    for mac_address in mac_addresses:
        session = send(mac_address, options, on_done=bind_completion(mac_address))
        session_list.append(session)

    return session_list
