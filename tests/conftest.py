"""Shared fixtures: a local UDP socket standing in for a syslog collector."""

from __future__ import annotations

import socket
from typing import Generator

import pytest


class UdpCollector:
    """Receives syslog datagrams on 127.0.0.1."""

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock

    @property
    def port(self) -> int:
        return self.sock.getsockname()[1]

    def receive(self) -> str:
        """Return the next datagram decoded as UTF-8 (blocks up to the socket timeout)."""
        data, _ = self.sock.recvfrom(65535)
        return data.decode("utf-8")


@pytest.fixture
def collector() -> Generator[UdpCollector, None, None]:
    """Bind a UDP socket on an ephemeral port for the duration of a test."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    yield UdpCollector(sock)
    sock.close()
