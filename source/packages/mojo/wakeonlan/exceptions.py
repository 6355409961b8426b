"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised when building or sending Wake-on-LAN
               magic packets.

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


class WakeOnLanError(RuntimeError):
    """
        This error is the base error for all Wake-on-LAN errors.
    """

class InvalidMacAddressError(WakeOnLanError, ValueError):
    """
        This error is raised when a hardware address does not parse as 6 octets of hex.
    """
    def __init__(self, message, mac, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.mac = mac
        return

class InvalidDestinationAddressError(WakeOnLanError, ValueError):
    """
        This error is raised when a destination is not a valid IPv4 or IPv6 address literal.
    """
    def __init__(self, message, destination, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.destination = destination
        return

class InvalidSendOptionError(WakeOnLanError, ValueError):
    """
        This error is raised when a send option has an unknown name or a value that cannot be used.
    """
    def __init__(self, message, option, value=None, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.option = option
        self.value = value
        return

class SocketError(WakeOnLanError):
    """
        This error is raised when the network stack reports an error while setting up the
        sending socket or while sending a magic packet.  The originating :class:`OSError`
        is chained as the cause.
    """
    def __init__(self, message, destination: Optional[str]=None, errno: Optional[int]=None, sent_count: int=0, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.destination = destination
        self.errno = errno
        self.sent_count = sent_count
        return


def create_socket_error(context: str, os_err: OSError, destination: Optional[str]=None, sent_count: int=0) -> SocketError:
    """
        Creates a :class:`SocketError` that describes the :class:`OSError` that occured.

        :param context: A description of the operation that failed.
        :param os_err: The error raised by the socket layer.
        :param destination: The destination the socket was sending to.
        :param sent_count: The number of packets that were sent before the error.

        :returns: A :class:`SocketError` with its cause set to the original error.
    """
    errmsg = "{} destination={} errno={} error={}".format(context, destination, os_err.errno, os_err)

    err = SocketError(errmsg, destination=destination, errno=os_err.errno, sent_count=sent_count)
    err.__cause__ = os_err

    return err
