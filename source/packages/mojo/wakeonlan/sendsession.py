"""
.. module:: sendsession
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the :class:`MagicPacketSendSession` class which owns the socket, the
               repetition countdown and the timing of one magic packet send sequence.

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

from typing import Callable, Optional

from enum import IntEnum

import logging
import socket
import threading
import time

from mojo.errors.exceptions import SemanticError

from mojo.wakeonlan.broadcast import create_broadcast_socket
from mojo.wakeonlan.exceptions import SocketError, WakeOnLanError, create_socket_error
from mojo.wakeonlan.sendconfig import SendConfig


logger = logging.getLogger()

CompletionCallback = Callable[[Optional[Exception]], None]


class SendState(IntEnum):
    PENDING = 0
    SENDING = 1
    COMPLETED = 2
    FAILED = 3


class MagicPacketSendSession:
    """
        A single send sequence.  The session sends the magic packet on a worker thread, one
        datagram at a time spaced by the configured wait, and reports completion exactly once.

            PENDING -> SENDING -> COMPLETED
                               -> FAILED

        The socket is created when the worker starts and is closed on every exit path.
    """

    def __init__(self, packet: bytes, destination: str, family: socket.AddressFamily, config: SendConfig,
                 on_done: Optional[CompletionCallback]=None, mac_address: Optional[str]=None):
        self._packet = packet
        self._destination = destination
        self._family = family
        self._config = config
        self._on_done = on_done
        self._mac_address = mac_address

        self._lock = threading.Lock()
        self._done_gate = threading.Event()

        self._state = SendState.PENDING
        self._remaining = config.repetition
        self._sent_count = 0
        self._error = None

        self._sock = None
        self._thread = None
        return

    @property
    def config(self) -> SendConfig:
        return self._config

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def error(self) -> Optional[Exception]:
        """
            The error that ended the send sequence or None.
        """
        return self._error

    @property
    def is_done(self) -> bool:
        return self._done_gate.is_set()

    @property
    def mac_address(self) -> Optional[str]:
        return self._mac_address

    @property
    def remaining(self) -> int:
        rtnval = None

        self._lock.acquire()
        try:
            rtnval = self._remaining
        finally:
            self._lock.release()

        return rtnval

    @property
    def sent_count(self) -> int:
        rtnval = None

        self._lock.acquire()
        try:
            rtnval = self._sent_count
        finally:
            self._lock.release()

        return rtnval

    @property
    def state(self) -> SendState:
        return self._state

    def start(self):
        """
            Starts the worker thread that sends the magic packets and returns immediately.
        """

        self._lock.acquire()
        try:
            if self._state != SendState.PENDING:
                errmsg = "A magic packet send session can only be started once. state={}".format(self._state.name)
                raise SemanticError(errmsg)
            self._state = SendState.SENDING
        finally:
            self._lock.release()

        self._thread = threading.Thread(target=self._send_thread_entry, name="mojo-wol-sender", daemon=True)
        self._thread.start()

        return

    def wait(self, timeout: Optional[float]=None) -> bool:
        """
            Waits for the send sequence to complete.

            :param timeout: The maximum number of seconds to wait, None waits forever.

            :returns: True if the send sequence has completed.
        """
        return self._done_gate.wait(timeout)

    def _close_socket(self):
        if self._sock is not None:
            try:
                self._sock.close()
            except OSError as os_err:
                logger.warning("Error closing magic packet socket. destination=%s error=%s", self._destination, os_err)
            self._sock = None
        return

    def _finish(self, error: Optional[Exception]):

        self._lock.acquire()
        try:
            self._error = error
            self._state = SendState.FAILED if error is not None else SendState.COMPLETED
            sent_count = self._sent_count
        finally:
            self._lock.release()

        if error is None:
            logger.info("Magic packets sent. mac=%s destination=%s:%d count=%d",
                        self._mac_address, self._destination, self._config.port, sent_count)
        else:
            logger.error("Magic packet send failed. mac=%s destination=%s:%d sent=%d error=%s",
                         self._mac_address, self._destination, self._config.port, sent_count, error)

        try:
            if self._on_done is not None:
                self._on_done(error)
        except Exception: # pylint: disable=broad-except
            logger.exception("Magic packet completion callback raised an error. mac=%s", self._mac_address)
        finally:
            self._done_gate.set()

        return

    def _send_loop(self) -> Optional[Exception]:

        next_send = time.monotonic()

        while True:
            # Never send before the deadline, a sleep can come back early on some platforms
            now = time.monotonic()
            while now < next_send:
                time.sleep(next_send - now)
                now = time.monotonic()

            error = self._send_packet()

            if error is not None or self.remaining <= 0:
                break

            next_send = now + self._config.wait_seconds

        return error

    def _send_packet(self) -> Optional[Exception]:
        error = None

        self._lock.acquire()
        try:
            self._remaining -= 1
        finally:
            self._lock.release()

        try:
            self._sock.sendto(self._packet, (self._destination, self._config.port))

            self._lock.acquire()
            try:
                self._sent_count += 1
                sent_count = self._sent_count
            finally:
                self._lock.release()

            logger.debug("Sent magic packet. mac=%s destination=%s:%d count=%d",
                         self._mac_address, self._destination, self._config.port, sent_count)
        except OSError as os_err:
            error = create_socket_error("Error sending magic packet.", os_err,
                                        destination=self._destination, sent_count=self.sent_count)

        return error

    def _send_thread_entry(self):

        error = None

        try:
            self._sock = create_broadcast_socket(self._family)
            error = self._send_loop()
        except SocketError as sock_err:
            sock_err.destination = self._destination
            error = sock_err
        except Exception as xcpt: # pylint: disable=broad-except
            logger.exception("Unexpected error in magic packet send thread. mac=%s", self._mac_address)
            error = WakeOnLanError("Unexpected error sending magic packets. error={}".format(xcpt))
            error.__cause__ = xcpt
        finally:
            self._close_socket()

        self._finish(error)

        return
