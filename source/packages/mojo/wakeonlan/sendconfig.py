"""
.. module:: sendconfig
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the :class:`SendConfig` class which holds the options for a magic packet
               send sequence.

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

from typing import Any, Dict, Optional, Union

from mojo.wakeonlan.constants import (
    DEFAULT_DESTINATION,
    DEFAULT_REPETITION,
    DEFAULT_WAIT_MS,
    WOL_PORT
)
from mojo.wakeonlan.exceptions import InvalidSendOptionError


def _option_to_int(name: str, value: Any) -> int:
    try:
        rtnval = int(value)
    except (TypeError, ValueError) as conv_err:
        errmsg = "Send option must be an integer. name={!r} value={!r}".format(name, value)
        raise InvalidSendOptionError(errmsg, name, value) from conv_err
    return rtnval


class SendConfig:
    """
        Immutable set of options for sending a sequence of magic packets.  Any option that is not
        specified takes its default from :mod:`mojo.wakeonlan.constants`.
    """

    OPTION_NAMES = ("destination", "repetition", "wait", "port")

    def __init__(self, *, destination: str=DEFAULT_DESTINATION, repetition: int=DEFAULT_REPETITION,
                 wait: int=DEFAULT_WAIT_MS, port: int=WOL_PORT):
        """
            :param destination: The IPv4 or IPv6 address literal each magic packet is sent to.
            :param repetition: The total number of magic packets to send, values less than one
                               still send a single packet.
            :param wait: The delay in milliseconds between two packets, negative values are
                         treated as zero.
            :param port: The UDP port each magic packet is sent to.
        """
        self._destination = destination
        self._repetition = _option_to_int("repetition", repetition)
        self._wait = max(_option_to_int("wait", wait), 0)
        self._port = _option_to_int("port", port)
        return

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SendConfig):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self) -> int:
        return hash((self._destination, self._repetition, self._wait, self._port))

    def __repr__(self) -> str:
        return "SendConfig(destination={!r}, repetition={}, wait={}, port={})".format(
            self._destination, self._repetition, self._wait, self._port)

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def repetition(self) -> int:
        return self._repetition

    @property
    def send_count(self) -> int:
        """
            The number of packets that will actually be sent, at least one.
        """
        return max(self._repetition, 1)

    @property
    def wait(self) -> int:
        return self._wait

    @property
    def wait_seconds(self) -> float:
        return self._wait / 1000.0

    @property
    def port(self) -> int:
        return self._port

    def as_dict(self) -> Dict[str, Any]:
        rtnval = {
            "destination": self._destination,
            "repetition": self._repetition,
            "wait": self._wait,
            "port": self._port
        }
        return rtnval

    def merge(self, **overrides) -> "SendConfig":
        """
            Creates a new :class:`SendConfig` from this one with the specified options replaced.
            Options that are passed as None keep their current value.

            :raises InvalidSendOptionError: If an option name is not recognized or a value is not usable.
        """
        options = self.as_dict()

        for oname, oval in overrides.items():
            if oname not in self.OPTION_NAMES:
                errmsg = "Unknown send option. name={!r} known={}".format(oname, ", ".join(self.OPTION_NAMES))
                raise InvalidSendOptionError(errmsg, oname, oval)
            if oval is not None:
                options[oname] = oval

        return SendConfig(**options)

    @classmethod
    def from_options(cls, options: Optional[Union["SendConfig", Dict[str, Any]]]=None) -> "SendConfig":
        """
            Creates a :class:`SendConfig` from the default options merged with the options
            specified by a caller.

            :param options: None, a :class:`SendConfig` or a dictionary of option overrides.

            :raises InvalidSendOptionError: If the options are not usable.
        """
        config = None

        if options is None:
            config = cls()
        elif isinstance(options, SendConfig):
            config = options
        elif isinstance(options, dict):
            config = cls().merge(**options)
        else:
            errmsg = "Send options must be a SendConfig or a dict. found={}".format(type(options).__name__)
            raise InvalidSendOptionError(errmsg, None, options)

        return config
