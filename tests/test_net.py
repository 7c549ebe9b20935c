import socket

import pytest

from threadlab.net import DnsError, open_clientfd, open_listenfd
from threadlab.rio import RioBuffer, rio_writen


@pytest.fixture
def listener():
    sock = open_listenfd(0)
    yield sock
    sock.close()


def test_listen_socket_properties(listener):
    assert listener.family == socket.AF_INET
    assert listener.type == socket.SOCK_STREAM
    assert listener.getsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR) != 0
    host, port = listener.getsockname()
    assert host == "0.0.0.0"
    assert port > 0


def test_client_connects_and_exchanges_lines(listener):
    port = listener.getsockname()[1]
    client = open_clientfd("127.0.0.1", port)
    try:
        conn, _ = listener.accept()
        with conn:
            assert rio_writen(client, b"ping\n") == 5
            assert RioBuffer(conn).readlineb() == b"ping\n"
            rio_writen(conn, b"pong\n")
            assert RioBuffer(client).readlineb() == b"pong\n"
        assert client.getpeername() == ("127.0.0.1", port)
    finally:
        client.close()


def test_client_resolves_localhost(listener):
    port = listener.getsockname()[1]
    client = open_clientfd("localhost", port)
    try:
        conn, addr = listener.accept()
        conn.close()
        assert client.getpeername()[1] == port
    finally:
        client.close()


def test_connection_refused_raises_oserror():
    sock = open_listenfd(0)
    port = sock.getsockname()[1]
    sock.close()
    with pytest.raises(OSError):
        open_clientfd("127.0.0.1", port)


def test_unresolvable_host_raises_dns_error():
    with pytest.raises(DnsError) as info:
        open_clientfd("no-such-host.invalid", 80)
    assert info.value.hostname == "no-such-host.invalid"
    assert isinstance(info.value, OSError)


def test_listen_port_out_of_range():
    with pytest.raises((OverflowError, OSError)):
        open_listenfd(70000)