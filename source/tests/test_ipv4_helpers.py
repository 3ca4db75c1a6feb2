import unittest

from mojo.wakeonlan.resolution import is_ipv4_address, is_ipv4_broadcast_address

class TestIpv4HelpersPositive(unittest.TestCase):

    def test_is_ipv4_address_min(self):
        candidate = "0.0.0.0"
        result = is_ipv4_address(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv4_address_max(self):
        candidate = "255.255.255.255"
        result = is_ipv4_address(candidate)
        assert result, f"The address={candidate} should have validated as a valid address."
        return

    def test_is_ipv4_broadcast_address_limited(self):
        candidate = "255.255.255.255"
        result = is_ipv4_broadcast_address(candidate)
        assert result, f"The address={candidate} should have been seen as a broadcast address."
        return

    def test_is_ipv4_broadcast_address_subnet(self):
        candidate = "192.168.1.255"
        result = is_ipv4_broadcast_address(candidate)
        assert result, f"The address={candidate} should have been seen as a broadcast address."
        return


class TestIpv4HelpersNegative(unittest.TestCase):

    def test_is_ipv4_address_minus_one(self):
        candidate = "-1.-1.-1.-1"
        result = is_ipv4_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv4_address_plus_one(self):
        candidate = "256.256.256.256"
        result = is_ipv4_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv4_address_too_few_groups(self):
        candidate = "100.100.100"
        result = is_ipv4_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv4_address_too_many_groups(self):
        candidate = "1.1.1.1.1"
        result = is_ipv4_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv4_address_hostname(self):
        candidate = "localhost"
        result = is_ipv4_address(candidate)
        assert not result, f"The address={candidate} should NOT have validated as a valid address."
        return

    def test_is_ipv4_broadcast_address_unicast(self):
        candidate = "192.168.1.20"
        result = is_ipv4_broadcast_address(candidate)
        assert not result, f"The address={candidate} should NOT have been seen as a broadcast address."
        return

    def test_is_ipv4_broadcast_address_not_an_address(self):
        candidate = "300.1.1.255"
        result = is_ipv4_broadcast_address(candidate)
        assert not result, f"The address={candidate} should NOT have been seen as a broadcast address."
        return


if __name__ == '__main__':
    unittest.main()
