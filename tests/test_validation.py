"""Tests for input validation helpers."""

import pytest

from conlog.utils.validation import (
    has_invalid_filename_chars,
    has_invalid_path_chars,
    is_valid_ipv4,
    is_valid_port,
)


class TestIsValidIpv4:
    """is_valid_ipv4 accepts dotted quads only."""

    @pytest.mark.parametrize(
        "address",
        ["127.0.0.1", "0.0.0.0", "255.255.255.255", "192.168.1.10", "10.0.0.05"],
    )
    def test_accepts_dotted_quad(self, address: str) -> None:
        assert is_valid_ipv4(address) is True

    @pytest.mark.parametrize(
        "address",
        ["999.1.1.1", "256.0.0.1", "abc", "", "1.2.3", "1.2.3.4.5", "1.2.3.4 ", "1.2.3.4\n", "\n1.2.3.4", "::1", "localhost"],
    )
    def test_rejects_malformed(self, address: str) -> None:
        assert is_valid_ipv4(address) is False


class TestIsValidPort:
    @pytest.mark.parametrize("port", [1, 514, 65535])
    def test_accepts_range(self, port: int) -> None:
        assert is_valid_port(port) is True

    @pytest.mark.parametrize("port", [0, -1, 65536])
    def test_rejects_out_of_range(self, port: int) -> None:
        assert is_valid_port(port) is False


class TestFilenameChars:
    """Reserved characters in single file names and in paths."""

    @pytest.mark.parametrize("name", ["my/app", "a\\b", "c:d", "what?", "star*", "pipe|", "<x>", 'q"', "tab\there"])
    def test_filename_rejects_reserved(self, name: str) -> None:
        assert has_invalid_filename_chars(name) is True

    @pytest.mark.parametrize("name", ["backup", "my-app_2", "app.exe", "with space"])
    def test_filename_accepts_plain(self, name: str) -> None:
        assert has_invalid_filename_chars(name) is False

    def test_path_allows_separators(self) -> None:
        assert has_invalid_path_chars("logs/sub/app.log") is False

    @pytest.mark.parametrize("path", ["logs/a|b", "logs/<x>", "nul\x00byte", "what?.log"])
    def test_path_rejects_reserved(self, path: str) -> None:
        assert has_invalid_path_chars(path) is True
