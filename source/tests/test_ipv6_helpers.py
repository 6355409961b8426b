import socket
import unittest

from mojo.wakeonlan.resolution import expand_ipv6_addr, get_address_family, is_ipv6_address

class TestIpv6HelpersPositive(unittest.TestCase):

    def test_is_ipv6_check_address_min(self):
        candidate = "0:0:0:0:0:0:0:0"
        result = is_ipv6_address(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_address_max(self):
        candidate = "FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:FFFF"
        result = is_ipv6_address(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_address_all_nodes(self):
        candidate = "ff02::1"
        result = is_ipv6_address(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_check_address_unspecified(self):
        candidate = "::"
        result = is_ipv6_address(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv6_expand_address_pre(self):
        candidate = "::FFFF:FFFF:FFFF:FFFF"
        expected = "0:0:0:0:FFFF:FFFF:FFFF:FFFF"
        result = expand_ipv6_addr(candidate)
        assert result == expected, f"The address={candidate} should have expanded to expected={expected} found={result}."
        return

    def test_is_ipv6_expand_address_post(self):
        candidate = "FFFF:FFFF:FFFF:FFFF:FFFF::"
        expected = "FFFF:FFFF:FFFF:FFFF:FFFF:0:0:0"
        result = expand_ipv6_addr(candidate)
        assert result == expected, f"The address={candidate} should have expanded to expected={expected} found={result}."
        return

    def test_is_ipv6_expand_address_middle(self):
        candidate = "FFFF:FFFF::FFFF:FFFF"
        expected = "FFFF:FFFF:0:0:0:0:FFFF:FFFF"
        result = expand_ipv6_addr(candidate)
        assert result == expected, f"The address={candidate} should have expanded to expected={expected} found={result}."
        return

    def test_is_ipv6_check_ipv4_mapped(self):
        for candidate in ["::ffff:192.168.1.1", "::FFFF:10.0.0.255", "64:ff9b::192.0.2.33", "0:0:0:0:0:ffff:1.2.3.4"]:
            result = is_ipv6_address(candidate)
            assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_get_address_family_ipv4_mapped(self):
        candidate = "::ffff:192.168.1.255"
        family = get_address_family(candidate)
        assert family == socket.AF_INET6, f"The address={candidate} should have mapped to AF_INET6. found={family}"
        return

    def test_get_address_family_ipv6(self):
        candidate = "ff02::1"
        family = get_address_family(candidate)
        assert family == socket.AF_INET6, f"The address={candidate} should have mapped to AF_INET6. found={family}"
        return


class TestIpv6HelpersNegative(unittest.TestCase):

    def test_is_ipv6_check_two_wildcards(self):
        candidate = "FFFF::FFFF::FFFF"
        result = is_ipv6_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_too_many_groups(self):
        candidate = "1:2:3:4:5:6:7:8:9"
        result = is_ipv6_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_bad_digits(self):
        candidate = "GGGG::1"
        result = is_ipv6_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_ipv4(self):
        candidate = "192.168.1.1"
        result = is_ipv6_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_trailing_newline(self):
        for candidate in ["ff02::1\n", "FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:FFFF:FFFF\n", "::ffff:1.2.3.4\n"]:
            result = is_ipv6_address(candidate)
            assert not result, f"The address={candidate!r} should NOT have validated as a valid address."
        return

    def test_is_ipv6_check_bad_ipv4_mapped(self):
        for candidate in ["::ffff:256.1.1.1", "::ffff:010.0.0.1", "1:2:3:4:5:6:7:1.2.3.4"]:
            result = is_ipv6_address(candidate)
            assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_expand_two_wildcards_raises(self):
        with self.assertRaises(ValueError):
            expand_ipv6_addr("1::2::3")
        return


if __name__ == '__main__':
    unittest.main()
