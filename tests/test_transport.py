import socket

import pytest
import requests

from readiness import ConfigurationError, ProbeFailure, HttpTransport, TcpTransport, get_transport


class FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code
        self.closed = False

    def close(self):
        self.closed = True


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []
        self.headers = {}
        self.closed = False

    def get(self, url, **kwargs):
        self.requests.append((url, kwargs))
        if self.error:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


@pytest.mark.parametrize("status", [200, 204, 301, 302, 399])
def test_http_success_below_400(status):
    session = FakeSession(FakeResponse(status))
    transport = HttpTransport(session=session, timeout=3)

    assert transport.probe("http://localhost:3000") == status

    url, kwargs = session.requests[0]
    assert url == "http://localhost:3000"
    assert kwargs['timeout'] == 3
    assert kwargs['allow_redirects'] is True
    assert session.response.closed


@pytest.mark.parametrize("status", [400, 404, 500, 502, 503])
def test_http_error_status_is_probe_failure(status):
    transport = HttpTransport(session=FakeSession(FakeResponse(status)))

    with pytest.raises(ProbeFailure) as exc:
        transport.probe("http://localhost:9090")

    assert exc.value.reason == f"HTTP {status}"
    assert exc.value.endpoint == "http://localhost:9090"


@pytest.mark.parametrize("error, reason", [
    (requests.exceptions.ConnectTimeout("slow"), "timed out"),
    (requests.exceptions.ReadTimeout("slow"), "timed out"),
    (requests.exceptions.ConnectionError("refused at 0xdeadbeef"), "connection failed"),
    (requests.exceptions.TooManyRedirects("loop"), "request error"),
    (ValueError("label empty or too long"), "invalid address"),
])
def test_http_network_errors_are_probe_failures(error, reason):
    transport = HttpTransport(session=FakeSession(error=error))

    with pytest.raises(ProbeFailure) as exc:
        transport.probe("http://localhost:8080")

    assert exc.value.reason.startswith(reason)
    assert "0xdeadbeef" not in exc.value.reason


def test_custom_success_predicate():
    transport = HttpTransport(session=FakeSession(FakeResponse(302)), success=lambda r: r.status_code == 200)
    with pytest.raises(ProbeFailure):
        transport.probe("http://localhost:3000")


def test_borrowed_session_is_not_closed():
    session = FakeSession(FakeResponse(200))
    HttpTransport(session=session).close()
    assert session.closed is False


def test_owned_session_sets_user_agent_and_closes():
    transport = HttpTransport()
    assert transport.session.headers['User-Agent'].startswith("stackup-readiness/")
    transport.close()


def test_http_validate():
    transport = HttpTransport(session=FakeSession())
    assert transport.validate(" http://localhost:3000/api/health ") == "http://localhost:3000/api/health"
    with pytest.raises(ConfigurationError):
        transport.validate("http://localhost:99999")


class FakeConnection:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


def test_tcp_probe_connects_and_closes():
    conn = FakeConnection()
    seen = []

    def connect(address, timeout):
        seen.append((address, timeout))
        return conn

    transport = TcpTransport(timeout=2, connect=connect)

    assert transport.probe("tcp://localhost:3306") is True
    assert seen == [(('localhost', 3306), 2)]
    assert conn.closed


@pytest.mark.parametrize("error, reason", [
    (socket.timeout("timed out"), "timed out"),
    (ConnectionRefusedError(111, "Connection refused"), "connection failed"),
    (UnicodeError("label empty or too long"), "invalid address"),
])
def test_tcp_failures(error, reason):
    def connect(address, timeout):
        raise error

    with pytest.raises(ProbeFailure) as exc:
        TcpTransport(connect=connect).probe("localhost:5432")

    assert exc.value.reason.startswith(reason)


@pytest.mark.parametrize("endpoint", [
    "localhost", "localhost:0", "localhost:http", ":80", "a..b:80", "tcp://" + "a" * 64 + ".com:80",
])
def test_tcp_validate_rejects(endpoint):
    with pytest.raises(ConfigurationError):
        TcpTransport().validate(endpoint)


def test_get_transport_by_scheme():
    assert isinstance(get_transport("http://localhost:8080"), HttpTransport)
    assert isinstance(get_transport("HTTPS://example.com"), HttpTransport)
    assert isinstance(get_transport("tcp://localhost:6379"), TcpTransport)
    assert isinstance(get_transport("localhost:6379"), TcpTransport)


@pytest.mark.parametrize("endpoint", ["", "ftp://localhost:21", "redis://localhost:6379"])
def test_get_transport_rejects(endpoint):
    with pytest.raises(ConfigurationError):
        get_transport(endpoint)
