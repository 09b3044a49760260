"""
Tests for no_proxy parsing and matching.
"""
import pytest
from proxy_config import is_match_in_bypass_list, parse_bypass_list

class TestParseBypassList:
    def test_trims_and_drops_empty_entries(self):
        assert parse_bypass_list(" a.com, ,.b.com ,,") == ("a.com", ".b.com")

    def test_order_preserved(self):
        assert parse_bypass_list("z.com,a.com") == ("z.com", "a.com")

    @pytest.mark.parametrize("value", [None, "", "  ", " , ,"])
    def test_nothing_left(self, value):
        assert parse_bypass_list(value) == ()

class TestIsMatchInBypassList:
    @pytest.mark.parametrize("host,expected", [
        ("example.com", True),
        ("api.example.com", True),
        ("a.b.example.com", True),
        ("API.Example.COM", True),
        ("notexample.com", False),
        ("example.org", False),
    ])
    def test_leading_dot_pattern(self, host, expected):
        assert is_match_in_bypass_list(host, [".example.com"]) is expected

    @pytest.mark.parametrize("host,expected", [
        ("example.com", True),
        ("EXAMPLE.com", True),
        ("api.example.com", False),
    ])
    def test_exact_pattern(self, host, expected):
        """Patterns without a leading dot never match subdomains."""
        assert is_match_in_bypass_list(host, ["example.com"]) is expected

    def test_any_pattern_matches(self):
        patterns = ["localhost", ".internal", "10.0.0.1"]
        assert is_match_in_bypass_list("svc.internal", patterns)
        assert is_match_in_bypass_list("10.0.0.1", patterns)
        assert not is_match_in_bypass_list("example.com", patterns)

    def test_empty_list(self):
        assert not is_match_in_bypass_list("example.com", [])
