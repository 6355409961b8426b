import socket
import unittest

from unittest.mock import MagicMock, patch

from mojo.wakeonlan.broadcast import broadcast_wake_on_lan_magic_message, create_broadcast_socket
from mojo.wakeonlan.exceptions import InvalidDestinationAddressError, InvalidMacAddressError, SocketError
from mojo.wakeonlan.magicpacket import get_magic_packet

class TestCreateBroadcastSocket(unittest.TestCase):

    @patch("mojo.wakeonlan.broadcast.socket.socket")
    def test_broadcast_option_set(self, mock_socket_cls):
        sock = create_broadcast_socket(socket.AF_INET)

        mock_socket_cls.assert_called_once_with(socket.AF_INET, socket.SOCK_DGRAM)
        sock.setsockopt.assert_called_once_with(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        return

    @patch("mojo.wakeonlan.broadcast.socket.socket")
    def test_setsockopt_error_closes_socket(self, mock_socket_cls):
        mock_sock = MagicMock()
        mock_sock.setsockopt.side_effect = PermissionError(13, "Permission denied")
        mock_socket_cls.return_value = mock_sock

        with self.assertRaises(SocketError) as xctx:
            create_broadcast_socket(socket.AF_INET6)

        assert xctx.exception.errno == 13
        assert isinstance(xctx.exception.__cause__, PermissionError)
        mock_sock.close.assert_called_once()
        return

    def test_unsupported_family(self):
        with self.assertRaises(InvalidDestinationAddressError):
            create_broadcast_socket(socket.AF_UNIX)
        return


class TestBroadcastWakeOnLan(unittest.TestCase):

    @patch("mojo.wakeonlan.broadcast.create_broadcast_socket")
    def test_single_send(self, mock_create):
        mock_sock = MagicMock()
        mock_create.return_value = mock_sock

        broadcast_wake_on_lan_magic_message("192.168.1.255", "00:11:22:33:44:55")

        mock_create.assert_called_once_with(socket.AF_INET)
        mock_sock.sendto.assert_called_once_with(get_magic_packet("001122334455"), ("192.168.1.255", 9))
        mock_sock.close.assert_called_once()
        return

    @patch("mojo.wakeonlan.broadcast.create_broadcast_socket")
    def test_send_error_closes_socket(self, mock_create):
        mock_sock = MagicMock()
        mock_sock.sendto.side_effect = OSError(101, "Network is unreachable")
        mock_create.return_value = mock_sock

        with self.assertRaises(SocketError) as xctx:
            broadcast_wake_on_lan_magic_message("ff02::1", "00:11:22:33:44:55", port=7)

        assert xctx.exception.destination == "ff02::1"
        mock_create.assert_called_once_with(socket.AF_INET6)
        mock_sock.close.assert_called_once()
        return

    @patch("mojo.wakeonlan.broadcast.create_broadcast_socket")
    def test_invalid_mac_opens_no_socket(self, mock_create):
        with self.assertRaises(InvalidMacAddressError):
            broadcast_wake_on_lan_magic_message("255.255.255.255", "not-a-mac")
        mock_create.assert_not_called()
        return


if __name__ == '__main__':
    unittest.main()
