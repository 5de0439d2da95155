import pytest

from utils.validation import validate_port, validate_host, validate_http_url, parse_host_port


@pytest.mark.parametrize("port, expected", [(1, 1), ("8080", 8080), (65535, 65535)])
def test_validate_port(port, expected):
    assert validate_port(port) == expected


@pytest.mark.parametrize("port", [0, 65536, "abc", None, -1])
def test_validate_port_rejects(port):
    with pytest.raises(ValueError):
        validate_port(port)


@pytest.mark.parametrize("host", ["localhost", "127.0.0.1", "grafana.local", "::1", "my-host_1"])
def test_validate_host(host):
    assert validate_host(host) == host


@pytest.mark.parametrize("host", ["", "-bad", "bad host", "a" * 254, "ho$t", "a..b", "a" * 64 + ".com"])
def test_validate_host_rejects(host):
    with pytest.raises(ValueError):
        validate_host(host)


@pytest.mark.parametrize("url", [
    "http://localhost:8080",
    "https://example.com/health",
    "http://127.0.0.1:9090/-/ready",
    "http://[::1]:3000",
])
def test_validate_http_url(url):
    assert validate_http_url(url) == url


@pytest.mark.parametrize("url", [
    "", None, "localhost:8080", "ftp://localhost", "http://", "http://local host",
    "http://localhost:abc", "http://localhost:0",
])
def test_validate_http_url_rejects(url):
    with pytest.raises(ValueError):
        validate_http_url(url)


@pytest.mark.parametrize("address, expected", [
    ("localhost:3306", ("localhost", 3306)),
    ("tcp://db:5432", ("db", 5432)),
    ("tcp://db:5432/", ("db", 5432)),
    ("[::1]:6379", ("::1", 6379)),
])
def test_parse_host_port(address, expected):
    assert parse_host_port(address) == expected


@pytest.mark.parametrize("address", ["", "localhost", "[::1]", "[::1]6379", "host:", ":80"])
def test_parse_host_port_rejects(address):
    with pytest.raises(ValueError):
        parse_host_port(address)
